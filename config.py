import os # For accessing environment variables.

# Repository root; the static catalog lives under src/data relative to it.
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))


class Config:
    """
    Configuration class for the Flask application.

    Loads settings from environment variables, with sensible defaults for development where applicable.
    Environment variables are the preferred way to set configuration, especially in production environments.
    """

    # --- General Flask Configuration ---
    # Secret key for session handling. Only the fallback differs between environments.
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'provider-directory-dev-secret-key'

    # The filter form is bound to GET query parameters, so there is no CSRF token to check.
    WTF_CSRF_ENABLED = False

    # --- Catalog Data ---
    # The two static JSON documents the directory is built from.
    # Defaults match the paths the validation script reads (src/data/*.json).
    PROVIDERS_JSON_PATH = os.environ.get('PROVIDERS_JSON_PATH') or os.path.join(PROJECT_ROOT, 'src', 'data', 'providers.json')
    PLANS_JSON_PATH = os.environ.get('PLANS_JSON_PATH') or os.path.join(PROJECT_ROOT, 'src', 'data', 'plans.json')

    # --- Directory Listing ---
    # Number of providers shown per page.
    PROVIDERS_PAGE_SIZE = int(os.environ.get('PROVIDERS_PAGE_SIZE', '12'))
    # Currency used for price sorting when the URL carries no locale prefix ('eur' or 'usd').
    DEFAULT_CURRENCY = os.environ.get('DEFAULT_CURRENCY', 'eur').lower()
    # Locale prefixes served under /<lang>/providers and the currency each one sorts by.
    LOCALE_CURRENCIES = {
        'de': 'eur',
        'en': 'usd',
    }

    # --- Logging Configuration ---
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
