import pytest
from models import FilterState
from utils.filters import filter_providers, filter_by_integrations


def _ids(items):
    return [item.id for item in items]


def test_default_state_returns_full_index_in_order(index):
    result = filter_providers(index, FilterState())
    assert result == index
    assert result is not index # A new list, never the input.


@pytest.mark.parametrize("query, expected", [
    ("cloud", ["aws", "vercel"]),          # short_desc matches
    ("  HETZ  ", ["hetzner"]),             # trimmed, case-insensitive name match
    ("ionos", ["ionos"]),                  # slug match
    ("nothing-matches-this", []),
])
def test_text_search(index, query, expected):
    assert _ids(filter_providers(index, FilterState(q=query))) == expected


def test_region_filter(index):
    assert _ids(filter_providers(index, FilterState(region='eu'))) == ["vercel", "hetzner", "ionos"]
    assert _ids(filter_providers(index, FilterState(region='global'))) == ["aws", "netlify"]


@pytest.mark.parametrize("logo, expected", [
    ("with", ["aws", "hetzner"]),
    ("without", ["vercel", "netlify", "ionos"]),
    ("any", ["aws", "vercel", "hetzner", "netlify", "ionos"]),
])
def test_logo_filter(index, logo, expected):
    assert _ids(filter_providers(index, FilterState(logo=logo))) == expected


def test_single_integration_filter(index):
    assert _ids(filter_providers(index, FilterState(integration='edge'))) == ["aws", "vercel"]
    assert _ids(filter_providers(index, FilterState(integration='kv'))) == [] # Only on the orphan plan.


def test_ssl_filter(index):
    assert _ids(filter_providers(index, FilterState(ssl='yes'))) == ["aws", "vercel", "netlify"]


def test_price_bounds_are_not_applied(index):
    state = FilterState(price_min=100.0, price_max=200.0)
    assert filter_providers(index, state) == index


def test_predicates_are_combined(index):
    state = FilterState(region='eu', ssl='yes', integration='git')
    assert _ids(filter_providers(index, state)) == ["vercel"]


def test_state_is_not_mutated(index):
    state = FilterState(q='cloud', integrations=('edge',), integration='edge')
    before = state.to_dict()
    filter_providers(index, state)
    assert state.to_dict() == before


def test_multi_integration_any_mode(index):
    result = filter_by_integrations(index, ["edge", "docker"], "any")
    assert _ids(result) == ["aws", "vercel", "hetzner"]


def test_multi_integration_all_mode(index):
    assert _ids(filter_by_integrations(index, ["edge", "git"], "all")) == ["vercel"]
    assert _ids(filter_by_integrations(index, ["edge", "docker"], "all")) == []


def test_any_mode_is_never_narrower_than_all_mode(index):
    tags = ["edge", "ci/cd"]
    assert len(filter_by_integrations(index, tags, "any")) >= len(filter_by_integrations(index, tags, "all"))


def test_no_tags_means_no_constraint(index):
    assert filter_by_integrations(index, [], "all") == index
