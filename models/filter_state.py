import enum
from dataclasses import dataclass


class LogoFilterEnum(enum.Enum):
    """Logo tri-state selectable in the directory filters."""
    ANY = 'any'          # No constraint.
    WITH = 'with'        # Only providers with a logo.
    WITHOUT = 'without'  # Only providers without a logo.


class SslFilterEnum(enum.Enum):
    ANY = 'any'
    YES = 'yes' # At least one plan must offer SSL.


class IntegrationModeEnum(enum.Enum):
    """How several selected integration tags are combined."""
    ANY = 'any' # Provider offers at least one of the tags.
    ALL = 'all' # Provider offers every selected tag.


class SortKeyEnum(enum.Enum):
    PRICE = 'price' # Cheapest first; providers without prices last.
    NAME = 'name'
    PLANS = 'plans' # Most plans first.


class CurrencyEnum(enum.Enum):
    EUR = 'eur'
    USD = 'usd'

    @staticmethod
    def from_string(value, default=None):
        """
        Maps a currency code (any case) to a CurrencyEnum member.

        Args:
            value (str or None): e.g. 'EUR', 'usd'.
            default (CurrencyEnum, optional): Returned when `value` is unknown.
        Returns:
            CurrencyEnum or None: The matching member, or `default`.
        """
        if isinstance(value, str):
            for member in CurrencyEnum:
                if member.value == value.strip().lower():
                    return member
        return default


def enum_choices(enum_cls):
    """(value, value) pairs for a WTForms SelectField."""
    return [(member.value, member.value) for member in enum_cls]


@dataclass(frozen=True)
class FilterState:
    """
    Current filter selections of the provider directory.

    Built from URL query parameters for every page view and treated as a
    read-only input by the filter functions.

    `integration` is the single tag understood by `filter_providers` ('all'
    means no constraint). `integrations` and `integration_mode` carry the full
    multi-tag selection; when exactly one tag is selected `integration` holds it.
    `price_min`/`price_max` are accepted but not applied by `filter_providers`.
    """
    q: str = ''
    region: str = 'all'
    logo: str = LogoFilterEnum.ANY.value
    integration: str = 'all'
    ssl: str = SslFilterEnum.ANY.value
    price_min: object = None
    price_max: object = None
    integrations: tuple = ()
    integration_mode: str = IntegrationModeEnum.ANY.value

    @property
    def is_default(self):
        """True when no constraint is selected."""
        return self == FilterState()

    def to_dict(self):
        return {
            'q': self.q,
            'region': self.region,
            'logo': self.logo,
            'integration': self.integration,
            'integrations': list(self.integrations),
            'integrationMode': self.integration_mode,
            'ssl': self.ssl,
            'priceMin': self.price_min,
            'priceMax': self.price_max,
        }
