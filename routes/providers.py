from flask import Blueprint, jsonify, request, current_app, abort

from extensions import catalog
from forms import ProviderFilterForm
from models import CurrencyEnum
from utils.filters import filter_providers, filter_by_integrations
from utils.helpers import active_chips, build_query_string, build_providers_url
from utils.pagination import paginate
from utils.plan_validation import ALLOWED_INTEGRATION_TAGS
from utils.provider_index import build_provider_index, collect_regions
from utils.sorting import sort_providers

# Blueprint for the provider directory listing.
providers_bp = Blueprint('providers', __name__)


def _resolve_currency(lang):
    """Currency for price sorting: the locale's currency, else DEFAULT_CURRENCY, else EUR."""
    if lang is not None:
        currency = current_app.config['LOCALE_CURRENCIES'].get(lang)
    else:
        currency = current_app.config.get('DEFAULT_CURRENCY')
    return CurrencyEnum.from_string(currency, default=CurrencyEnum.EUR).value


@providers_bp.route('/providers')
@providers_bp.route('/<lang>/providers')
def list_providers(lang=None):
    """
    Returns one page of the filtered and sorted provider directory.

    Query Parameters:
        q, region, logo, integration, integrationMode, ssl, priceMin, priceMax, sort, page
        (see forms.ProviderFilterForm). Invalid values fall back to their defaults.

    Returns:
        JSON: the page (items, page, pageCount, total), counts {total, filtered},
              the effective state, the canonical query/URL, active chips and facet options.
    """
    if lang is not None and lang not in current_app.config['LOCALE_CURRENCIES']:
        abort(404)

    form = ProviderFilterForm(formdata=request.args)
    state, sort_key, page = form.to_query_state()
    currency = _resolve_currency(lang)

    # --- Pipeline: index -> filter -> (multi-tag) -> sort -> paginate ---
    providers, plans = catalog.load()
    index = build_provider_index(providers, plans)
    filtered = filter_providers(index, state)
    if len(state.integrations) > 1: # A single tag is already handled by filter_providers.
        filtered = filter_by_integrations(filtered, state.integrations, state.integration_mode)
    ordered = sort_providers(filtered, sort_key, currency)
    result = paginate(ordered, page, current_app.config['PROVIDERS_PAGE_SIZE'])

    base_path = request.path
    payload = result.to_dict(serialize_item=lambda item: item.to_dict())
    payload.update({
        'counts': {
            'total': len(index),
            'filtered': len(filtered),
        },
        'state': state.to_dict(),
        'sort': sort_key,
        'currency': currency,
        'query': build_query_string(state, sort_key, result.page),
        'url': build_providers_url(base_path, state, sort_key, result.page),
        'clear_url': base_path,
        'chips': active_chips(state, sort_key, base_path),
        'facets': {
            'regions': collect_regions(index),
            'integration_tags': sorted(ALLOWED_INTEGRATION_TAGS),
        },
        'empty': not filtered,
    })
    return jsonify(payload)
