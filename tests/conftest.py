import copy
import json

import pytest
from app import create_app
from config import Config
from models import Provider, Plan
from utils.provider_index import build_provider_index

# A small catalog covering the interesting cases:
# - aws: two plans, logo, blank-ish region casing
# - vercel: no logo, padded region, several tags
# - hetzner: single plan with a fractional price
# - netlify: no logo/region keys at all, plan without prices
# - ionos: whitespace-only logo and no plans
SAMPLE_PROVIDERS = [
    {"id": "aws", "name": "Amazon Web Services", "slug": "aws", "logo": "/logos/aws.svg",
     "region": "Global", "short_desc": "Cloud computing platform"},
    {"id": "vercel", "name": "Vercel", "slug": "vercel", "logo": "", "region": " EU ",
     "short_desc": "Frontend cloud for web apps"},
    {"id": "hetzner", "name": "Hetzner", "slug": "hetzner", "logo": "/logos/hetzner.svg",
     "region": "eu", "short_desc": "German hosting"},
    {"id": "netlify", "name": "Netlify", "slug": "netlify", "short_desc": "Web platform"},
    {"id": "ionos", "name": "IONOS", "slug": "ionos", "logo": "   ", "region": "EU",
     "short_desc": "Hosting and domains"},
]

SAMPLE_PLANS = [
    {"id": "aws-free", "provider_id": "aws", "price_eur": 0, "price_usd": 0, "ssl": True,
     "integration_tags": ["database", "api"]},
    {"id": "aws-pro", "provider_id": "aws", "price_eur": 20, "price_usd": 22, "ssl": False,
     "integration_tags": ["edge", "cdn"]},
    {"id": "vercel-hobby", "provider_id": "vercel", "price_eur": 5, "price_usd": 6, "ssl": True,
     "integration_tags": ["git", "edge", "ci/cd"]},
    {"id": "vercel-pro", "provider_id": "vercel", "price_eur": 20, "price_usd": 20, "ssl": True,
     "integration_tags": ["edge", "serverless"]},
    {"id": "hetzner-cx", "provider_id": "hetzner", "price_eur": 4.5, "price_usd": 5, "ssl": False,
     "integration_tags": ["docker", "backup"]},
    {"id": "netlify-starter", "provider_id": "netlify", "price_eur": None, "price_usd": None, "ssl": True,
     "integration_tags": ["git", "cdn"]},
    {"id": "ghost-plan", "provider_id": "ghost", "price_eur": 1, "price_usd": 1, "ssl": True,
     "integration_tags": ["kv"]},
]


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    PROVIDERS_PAGE_SIZE = 2 # Small pages so pagination is visible with the sample catalog.
    DEFAULT_CURRENCY = 'eur'
    LOG_LEVEL = 'DEBUG'


def write_catalog(directory, providers, plans):
    """Writes providers.json and plans.json into `directory` and returns their paths."""
    providers_path = directory / 'providers.json'
    plans_path = directory / 'plans.json'
    providers_path.write_text(json.dumps(providers), encoding='utf-8')
    plans_path.write_text(json.dumps(plans), encoding='utf-8')
    return providers_path, plans_path


@pytest.fixture(scope='session')
def catalog_paths(tmp_path_factory):
    """Session-wide copy of the sample catalog on disk."""
    return write_catalog(tmp_path_factory.mktemp('catalog'), SAMPLE_PROVIDERS, SAMPLE_PLANS)


def make_app(providers_path, plans_path, **overrides):
    """Builds an app bound to the given data files; keyword overrides become config attributes."""
    attributes = dict(PROVIDERS_JSON_PATH=str(providers_path), PLANS_JSON_PATH=str(plans_path), **overrides)
    config_class = type("BoundTestConfig", (TestConfig,), attributes)
    return create_app(config_class=config_class)


@pytest.fixture
def app_factory(tmp_path):
    """Builds an app over the given provider/plan documents, written to a per-test directory."""
    def factory(providers, plans, **overrides):
        return make_app(*write_catalog(tmp_path, providers, plans), **overrides)
    return factory


@pytest.fixture(scope='session')
def app(catalog_paths):
    """
    Session-wide test Flask application.
    Ensures the app is created once per test session with TestConfig and the sample catalog.
    """
    return make_app(*catalog_paths)


@pytest.fixture(scope='function')
def app_context(app):
    """
    Function-scoped application context.
    Needed by anything touching `current_app` (forms, the catalog extension).
    """
    with app.app_context():
        yield


@pytest.fixture(scope='session')
def client(app):
    """Test client fixture for making requests to the application."""
    return app.test_client()


@pytest.fixture
def raw_providers():
    return copy.deepcopy(SAMPLE_PROVIDERS)


@pytest.fixture
def raw_plans():
    return copy.deepcopy(SAMPLE_PLANS)


@pytest.fixture
def providers(raw_providers):
    return [Provider.from_dict(p) for p in raw_providers]


@pytest.fixture
def plans(raw_plans):
    return [Plan.from_dict(p) for p in raw_plans]


@pytest.fixture
def index(providers, plans):
    return build_provider_index(providers, plans)
