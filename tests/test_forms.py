import pytest
from werkzeug.datastructures import MultiDict
from forms import ProviderFilterForm, parse_integration_tags
from models import FilterState

# Flask-WTF forms need an application context (config, logger), hence the app_context fixture.


def _parse(**params):
    form = ProviderFilterForm(formdata=MultiDict(params))
    return form.to_query_state()


def test_no_parameters_gives_defaults(app_context):
    state, sort_key, page = _parse()
    assert state == FilterState()
    assert state.is_default
    assert sort_key == 'price'
    assert page == 1


def test_all_parameters(app_context):
    state, sort_key, page = _parse(
        q='  aws ', region='EU', logo='with', integration='edge,ci/cd', integrationMode='all',
        ssl='yes', priceMin='14', priceMax='24.5', sort='name', page='3',
    )
    assert state.q == 'aws'
    assert state.region == 'eu'
    assert state.logo == 'with'
    assert state.integrations == ('ci/cd', 'edge') # Sorted.
    assert state.integration == 'all'              # More than one tag selected.
    assert state.integration_mode == 'all'
    assert state.ssl == 'yes'
    assert state.price_min == 14.0
    assert state.price_max == 24.5
    assert sort_key == 'name'
    assert page == 3


def test_single_integration_tag_fills_integration(app_context):
    state, _, _ = _parse(integration='ssl')
    assert state.integration == 'ssl'
    assert state.integrations == ('ssl',)


@pytest.mark.parametrize("param, value, attribute, default", [
    ('logo', 'sometimes', 'logo', 'any'),
    ('ssl', 'no', 'ssl', 'any'),
    ('integrationMode', 'most', 'integration_mode', 'any'),
    ('priceMin', 'cheap', 'price_min', None),
    ('priceMax', '-5', 'price_max', None),
    ('priceMax', 'nan', 'price_max', None),
])
def test_invalid_values_fall_back_to_defaults(app_context, param, value, attribute, default):
    state, _, _ = _parse(**{param: value})
    assert getattr(state, attribute) == default


def test_invalid_sort_and_page_fall_back(app_context):
    _, sort_key, page = _parse(sort='random', page='two')
    assert sort_key == 'price'
    assert page == 1


def test_out_of_range_page_is_passed_through_for_clamping(app_context):
    assert _parse(page='999')[2] == 999


def test_empty_values_mean_default(app_context):
    state, sort_key, page = _parse(q='', logo='', region='', sort='', page='')
    assert state == FilterState()
    assert sort_key == 'price'
    assert page == 1


def test_region_all_is_kept(app_context):
    assert _parse(region='ALL')[0].region == 'all'


def test_invalid_value_is_logged(app_context, caplog):
    _parse(logo='sometimes')
    assert "ignoring invalid logo" in caplog.text


def test_parse_integration_tags_drops_unknown_and_duplicates():
    tags, dropped = parse_integration_tags(' Edge ,quantum,edge,,all,ci/cd')
    assert tags == ('ci/cd', 'edge')
    assert dropped == ['quantum']


def test_parse_integration_tags_empty():
    assert parse_integration_tags(None) == ((), [])
    assert parse_integration_tags('') == ((), [])
