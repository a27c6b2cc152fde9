from flask import current_app # Per-app config, logger and extension registry.

from models import Provider, Plan
from utils.plan_validation import load_json_array


class CatalogLoadError(RuntimeError):
    """Raised when providers.json or plans.json cannot be turned into catalog records."""


class ProviderCatalog:
    """
    Flask extension serving the static provider and plan records.

    Both documents are read once per application, on first use, from the
    paths in PROVIDERS_JSON_PATH and PLANS_JSON_PATH. The loaded records are
    kept in `app.extensions['provider_catalog']`, so every app instance
    (e.g. one per test) has its own data. The records are immutable; the
    provider index is rebuilt from them for every request.
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        app.config.setdefault('PROVIDERS_JSON_PATH', 'src/data/providers.json')
        app.config.setdefault('PLANS_JSON_PATH', 'src/data/plans.json')
        app.extensions['provider_catalog'] = {'providers': None, 'plans': None}

    def _state(self):
        return current_app.extensions['provider_catalog']

    def _read(self, config_key, label):
        path = current_app.config[config_key]
        records, error = load_json_array(path, label)
        if error:
            current_app.logger.critical(f"Catalog: {error}")
            raise CatalogLoadError(error)
        return records

    def load(self):
        """
        Returns the catalog records, reading the JSON documents if this app has not loaded them yet.

        Returns:
            tuple: (list[Provider], list[Plan]).

        Raises:
            CatalogLoadError: If a document is missing, is not valid JSON, or its root is not an array.
        """
        state = self._state()
        if state['providers'] is None or state['plans'] is None:
            raw_providers = self._read('PROVIDERS_JSON_PATH', 'providers.json')
            raw_plans = self._read('PLANS_JSON_PATH', 'plans.json')
            # Entries that are not objects cannot be displayed; the validator reports them.
            state['providers'] = tuple(Provider.from_dict(p) for p in raw_providers if isinstance(p, dict))
            state['plans'] = tuple(Plan.from_dict(p) for p in raw_plans if isinstance(p, dict))
            current_app.logger.info(f"Catalog: loaded {len(state['providers'])} providers and {len(state['plans'])} plans.")
        return list(state['providers']), list(state['plans'])

    def reload(self):
        """Discards the loaded records so the next `load()` re-reads the JSON documents."""
        state = self._state()
        state['providers'] = None
        state['plans'] = None


# Initialize the catalog extension.
# Bound to the app in the application factory (create_app in app.py) via catalog.init_app(app).
catalog = ProviderCatalog()
