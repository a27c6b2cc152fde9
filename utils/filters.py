from models.filter_state import LogoFilterEnum, SslFilterEnum, IntegrationModeEnum
from utils.provider_index import normalize_region


def filter_providers(index, state):
    """
    Reduces the provider index to the items matching every active filter.

    Predicates (all must pass):
      - q: case-insensitive substring of "name short_desc slug".
      - region: 'all' or equal to the item's normalized region.
      - logo: 'with' / 'without' / 'any'.
      - integration: 'all' or contained in the item's tags.
      - ssl: 'yes' requires has_ssl.
    Price bounds are part of FilterState but are not applied here.

    Args:
        index (list[ProviderIndexItem]): Items to filter. Not modified.
        state (models.FilterState): Current selections. Not modified.

    Returns:
        list[ProviderIndexItem]: Matching items in their original order.
    """
    search = state.q.strip().lower()
    explicit_price = state.price_min is not None or state.price_max is not None

    def matches(item):
        if search:
            haystack = ' '.join([item.name, item.short_desc, item.slug]).lower()
            if search not in haystack:
                return False

        if state.region != 'all' and normalize_region(item.region) != state.region:
            return False

        if state.logo == LogoFilterEnum.WITH.value and not item.has_logo:
            return False

        if state.logo == LogoFilterEnum.WITHOUT.value and item.has_logo:
            return False

        if state.integration != 'all' and state.integration not in item.integration_tags:
            return False

        if state.ssl == SslFilterEnum.YES.value and not item.has_ssl:
            return False

        if explicit_price:
            # TODO: compare price_min/price_max against the active currency's minimum once the currency is passed in.
            return True

        return True

    return [item for item in index if matches(item)]


def filter_by_integrations(items, tags, mode=IntegrationModeEnum.ANY.value):
    """
    Applies a multi-tag integration selection.

    Args:
        items (list[ProviderIndexItem]): Items to filter, usually the output of filter_providers.
        tags (Iterable[str]): Selected integration tags. Empty means no constraint.
        mode (str): 'any' keeps items offering at least one tag, 'all' keeps items offering every tag.

    Returns:
        list[ProviderIndexItem]: Matching items in their original order.
    """
    wanted = set(tags)
    if not wanted:
        return list(items)
    if mode == IntegrationModeEnum.ALL.value:
        return [item for item in items if wanted.issubset(item.integration_tags)]
    return [item for item in items if wanted.intersection(item.integration_tags)]
