import json # For decoding the catalog documents.

from utils.provider_index import is_finite_number

# Closed vocabulary of integration tags a plan may carry.
ALLOWED_INTEGRATION_TAGS = frozenset([
    'git',
    'ci/cd',
    'edge',
    'cdn',
    'serverless',
    'api',
    'database',
    'backup',
    'docker',
    'kv',
    'ssl',
])

# Providers held to stricter completeness rules. Order is the reporting order of "no plans" errors.
TOP10_PROVIDER_IDS = (
    'aws',
    'microsoft-azure',
    'google-cloud',
    'cloudflare',
    'vercel',
    'netlify',
    'render',
    'railway',
    'heroku',
    'fly-io',
)

# Marker left in notes by the prototype data set.
PLACEHOLDER_NOTES_MARKER = 'Placeholder data for prototype'

# Plan fields that may be null but must otherwise be finite numbers.
NULLABLE_NUMERIC_FIELDS = ('storage_gb', 'traffic_gb', 'domains')

_MISSING = object()


def _lookup_key(value):
    """Returns `value` for set lookups, or a fresh sentinel for unhashable JSON values (lists, objects)."""
    try:
        hash(value)
    except TypeError:
        return object() # Never equal to anything, like object identity in a JS Set.
    return value


def _format_value(value):
    """Renders a raw JSON value for an error message ('undefined' when the key is absent)."""
    if value is _MISSING:
        return 'undefined'
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def validate_plans(providers, plans, allowed_tags=ALLOWED_INTEGRATION_TAGS, top_provider_ids=TOP10_PROVIDER_IDS):
    """
    Checks the raw provider and plan documents for referential and shape integrity.

    Every violation is collected; the check never stops early and never raises.

    Args:
        providers (list[dict]): Decoded providers.json.
        plans (list[dict]): Decoded plans.json.
        allowed_tags (Collection[str], optional): Integration tag vocabulary.
        top_provider_ids (Iterable[str], optional): Providers that must have verified, non-placeholder plans.

    Returns:
        list[str]: Human-readable violations, in discovery order. Empty when the data is valid.
    """
    provider_ids = {_lookup_key(provider.get('id')) for provider in providers if isinstance(provider, dict)}
    top_provider_ids = tuple(top_provider_ids)
    top_provider_set = set(top_provider_ids)
    seen_plan_ids = set()
    errors = []

    for position, plan in enumerate(plans):
        if not isinstance(plan, dict):
            errors.append(f'Plan entry at index {position} must be an object')
            continue

        plan_id = _lookup_key(plan.get('id', _MISSING))
        plan_label = _format_value(plan.get('id', _MISSING))

        # --- Identity and references ---
        if plan_id in seen_plan_ids:
            errors.append(f'Duplicate plan id: {plan_label}')
        seen_plan_ids.add(plan_id)

        provider_id = _lookup_key(plan.get('provider_id', _MISSING))
        if provider_id not in provider_ids:
            errors.append(f"Unknown provider_id on {plan_label}: {_format_value(plan.get('provider_id', _MISSING))}")

        # --- Prices (required) and capacity fields (nullable) ---
        for field in ('price_eur', 'price_usd'):
            value = plan.get(field, _MISSING)
            if not is_finite_number(value):
                errors.append(f'Invalid {field} on {plan_label}: {_format_value(value)}')

        for field in NULLABLE_NUMERIC_FIELDS:
            value = plan.get(field, _MISSING)
            if value is not None and not is_finite_number(value):
                errors.append(f'Invalid {field} on {plan_label}: {_format_value(value)}')

        # --- Integration tags ---
        tags = plan.get('integration_tags', _MISSING)
        if not isinstance(tags, list):
            errors.append(f'integration_tags must be an array on {plan_label}')
        else:
            for tag in tags:
                if not isinstance(tag, str) or tag not in allowed_tags:
                    errors.append(f'Invalid integration tag on {plan_label}: {_format_value(tag)}')

        # --- Stricter rules for top-10 providers ---
        if provider_id in top_provider_set:
            notes = plan.get('notes')
            if isinstance(notes, str) and PLACEHOLDER_NOTES_MARKER in notes:
                errors.append(f'Top-10 plan still has placeholder notes: {plan_label}')
            if not plan.get('last_verified_at'):
                errors.append(f'Missing last_verified_at for top-10 plan: {plan_label}')

    planned_providers = {_lookup_key(plan.get('provider_id')) for plan in plans if isinstance(plan, dict)}
    for provider_id in top_provider_ids:
        if provider_id not in planned_providers:
            errors.append(f'Top-10 provider has no plans: {provider_id}')

    return errors


def load_json_array(path, label):
    """
    Reads a JSON document whose root must be an array.

    Args:
        path (str or os.PathLike): File to read.
        label (str): Name used in the error message (e.g. 'providers.json').

    Returns:
        tuple: (records, error). `records` is the decoded list (or None) and
               `error` is a message string (or None when the file is usable).
    """
    try:
        with open(path, encoding='utf-8') as handle:
            data = json.load(handle)
    except OSError as e:
        return None, f'Cannot read {label} at {path}: {e}'
    except ValueError as e: # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        return None, f'Invalid JSON in {label}: {e}'

    if not isinstance(data, list):
        return None, f'{label} must contain a JSON array'
    return data, None
