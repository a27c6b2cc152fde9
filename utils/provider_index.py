import math # For rejecting NaN/infinite prices.
import unicodedata # For accent folding in the locale-like sort key.

from models.provider_index import ProviderIndexItem


def normalize_region(region):
    """
    Normalizes a provider region for display and comparison.

    Args:
        region (str or None): The raw region value from providers.json.

    Returns:
        str: The trimmed, lowercased region, or 'global' when it is missing or blank.
    """
    if not isinstance(region, str):
        return 'global'
    normalized = region.strip().lower()
    return normalized or 'global'


def locale_sort_key(text):
    """
    Sort key approximating a locale-aware comparison without depending on the process locale.

    Accents and case are ignored first ('Äpfel' sorts next to 'apfel'); the raw
    string breaks the remaining ties so the order stays total.
    """
    decomposed = unicodedata.normalize('NFKD', text)
    folded = ''.join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    return (folded, text)


def is_finite_number(value):
    # bool is an int subclass but never a price.
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _min_price(plans, attribute):
    prices = [getattr(plan, attribute) for plan in plans if is_finite_number(getattr(plan, attribute))]
    return min(prices) if prices else None


def _integration_tags(plans):
    tags = set()
    for plan in plans:
        if isinstance(plan.integration_tags, list): # Anything else is ignored here and reported by the validator.
            tags.update(tag for tag in plan.integration_tags if isinstance(tag, str))
    return tuple(sorted(tags, key=locale_sort_key))


def build_provider_index(providers, plans):
    """
    Joins plans to their providers and computes the per-provider aggregates.

    Plans whose provider_id matches no provider are silently dropped; the
    plan validator is responsible for reporting them. Malformed prices are
    excluded from the minimums rather than reported.

    Args:
        providers (list[models.Provider]): Providers, in display order.
        plans (list[models.Plan]): All plans.

    Returns:
        list[ProviderIndexItem]: One item per provider, in provider input order.
    """
    plans_by_provider = {}
    for plan in plans:
        plans_by_provider.setdefault(plan.provider_id, []).append(plan)

    index = []
    for provider in providers:
        provider_plans = plans_by_provider.get(provider.id, [])
        index.append(ProviderIndexItem(
            id=provider.id,
            name=provider.name or '',
            slug=provider.slug or '',
            logo=provider.logo or '',
            region=normalize_region(provider.region),
            short_desc=provider.short_desc or '',
            logo_note_de=provider.logo_note_de or '',
            logo_note_en=provider.logo_note_en or '',
            plan_count=len(provider_plans),
            min_price_eur=_min_price(provider_plans, 'price_eur'),
            min_price_usd=_min_price(provider_plans, 'price_usd'),
            has_ssl=any(plan.ssl is True for plan in provider_plans),
            integration_tags=_integration_tags(provider_plans),
            has_logo=bool(provider.logo and provider.logo.strip()),
        ))
    return index


def collect_regions(index):
    """Distinct normalized regions present in the index, sorted, for the region control."""
    return sorted({normalize_region(item.region) for item in index}, key=locale_sort_key)
