from dataclasses import replace # For deriving a FilterState with one constraint removed.
from urllib.parse import urlencode # Deterministic query-string encoding.

from models.filter_state import FilterState, IntegrationModeEnum, SortKeyEnum

_DEFAULT_STATE = FilterState()
_DEFAULT_SORT = SortKeyEnum.PRICE.value


def _format_price(value):
    """Renders a price bound without a trailing '.0' for whole numbers (14.0 -> '14')."""
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def serialize_query(state, sort_key=_DEFAULT_SORT, page=1):
    """
    Converts the directory state into ordered query parameters.

    Parameters equal to their default are omitted, so the unfiltered first page
    serializes to nothing. Integration tags are sorted before joining, which
    keeps URLs stable no matter in which order the tags were selected.

    Args:
        state (models.FilterState): Current filter selections.
        sort_key (str, optional): Active sort key. Defaults to 'price'.
        page (int, optional): Current page. Only emitted when greater than 1.

    Returns:
        list[tuple[str, str]]: (name, value) pairs in a fixed parameter order.
    """
    params = []
    if state.q:
        params.append(('q', state.q))
    if state.region != _DEFAULT_STATE.region:
        params.append(('region', state.region))
    if state.logo != _DEFAULT_STATE.logo:
        params.append(('logo', state.logo))

    tags = sorted(set(state.integrations))
    if not tags and state.integration != 'all': # State built without the multi-tag fields.
        tags = [state.integration]
    if tags:
        params.append(('integration', ','.join(tags)))
        if state.integration_mode != _DEFAULT_STATE.integration_mode:
            params.append(('integrationMode', state.integration_mode))

    if state.ssl != _DEFAULT_STATE.ssl:
        params.append(('ssl', state.ssl))
    if state.price_min is not None:
        params.append(('priceMin', _format_price(state.price_min)))
    if state.price_max is not None:
        params.append(('priceMax', _format_price(state.price_max)))
    if sort_key != _DEFAULT_SORT:
        params.append(('sort', sort_key))
    if page and page > 1:
        params.append(('page', str(page)))
    return params


def build_query_string(state, sort_key=_DEFAULT_SORT, page=1):
    """URL-encoded form of serialize_query (e.g. 'integration=ci%2Fcd%2Cedge&sort=name')."""
    return urlencode(serialize_query(state, sort_key, page))


def build_providers_url(base_path, state, sort_key=_DEFAULT_SORT, page=1):
    """
    Args:
        base_path (str): Listing path, e.g. '/de/providers'.
    Returns:
        str: The canonical URL for the given state; the bare path when nothing is selected.
    """
    query = build_query_string(state, sort_key, page)
    return f"{base_path}?{query}" if query else base_path


def _without_integration(state, tag):
    remaining = tuple(t for t in state.integrations if t != tag)
    return replace(
        state,
        integrations=remaining,
        integration=remaining[0] if len(remaining) == 1 else 'all',
        # The mode means nothing without tags; drop it with the last one.
        integration_mode=state.integration_mode if remaining else IntegrationModeEnum.ANY.value,
    )


def active_chips(state, sort_key=_DEFAULT_SORT, base_path='/providers'):
    """
    Lists the active constraints as removable chips.

    Every integration tag gets its own chip. A chip's `remove_url` is the
    listing URL with only that constraint removed, starting again at page 1.
    The sort order is not a filter and has no chip.

    Args:
        state (models.FilterState): Current filter selections.
        sort_key (str, optional): Preserved in every removal URL.
        base_path (str, optional): Listing path used to build the URLs.

    Returns:
        list[dict]: [{'chip': <query parameter>, 'value': <str>, 'remove_url': <str>}, ...]
    """
    chips = []

    def add(chip, value, reduced_state):
        chips.append({
            'chip': chip,
            'value': value,
            'remove_url': build_providers_url(base_path, reduced_state, sort_key),
        })

    if state.q:
        add('q', state.q, replace(state, q=''))
    if state.region != _DEFAULT_STATE.region:
        add('region', state.region, replace(state, region=_DEFAULT_STATE.region))
    if state.logo != _DEFAULT_STATE.logo:
        add('logo', state.logo, replace(state, logo=_DEFAULT_STATE.logo))

    if state.integrations:
        for tag in sorted(state.integrations):
            add('integration', tag, _without_integration(state, tag))
    elif state.integration != 'all':
        add('integration', state.integration, replace(state, integration='all'))

    if state.ssl != _DEFAULT_STATE.ssl:
        add('ssl', state.ssl, replace(state, ssl=_DEFAULT_STATE.ssl))
    if state.price_min is not None:
        add('priceMin', _format_price(state.price_min), replace(state, price_min=None))
    if state.price_max is not None:
        add('priceMax', _format_price(state.price_max), replace(state, price_max=None))
    return chips
