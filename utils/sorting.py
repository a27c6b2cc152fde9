from models.filter_state import SortKeyEnum
from utils.provider_index import locale_sort_key


def sort_providers(items, sort_key, currency):
    """
    Orders index items for display. Returns a new list; `items` is left untouched.

    Sort keys:
      - 'name':  ascending by name.
      - 'plans': descending by plan_count, ties by name.
      - 'price' (also the fallback for unknown keys): ascending by the minimum
        price in `currency`; items without a price come last, and ties
        (including two missing prices) are ordered by name.

    Args:
        items (list[ProviderIndexItem]): Items to sort.
        sort_key (str): 'price', 'name' or 'plans'.
        currency (str): 'eur' selects min_price_eur, anything else min_price_usd.

    Returns:
        list[ProviderIndexItem]: The sorted items. Python's sort is stable, so
        fully equal keys keep their input order.
    """
    if sort_key == SortKeyEnum.NAME.value:
        return sorted(items, key=lambda item: locale_sort_key(item.name))

    if sort_key == SortKeyEnum.PLANS.value:
        return sorted(items, key=lambda item: (-item.plan_count, locale_sort_key(item.name)))

    def price_key(item):
        price = item.min_price(currency)
        # (True, 0, ...) sorts after every (False, price, ...).
        return (price is None, price if price is not None else 0, locale_sort_key(item.name))

    return sorted(items, key=price_key)
