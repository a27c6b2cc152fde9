# Plain value objects for the provider directory. Nothing here touches I/O.
from .provider import Provider
from .plan import Plan
from .provider_index import ProviderIndexItem
from .filter_state import (FilterState, LogoFilterEnum, SslFilterEnum, IntegrationModeEnum,
                           SortKeyEnum, CurrencyEnum, enum_choices)
from .page import Page
