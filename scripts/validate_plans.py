"""
Pre-publish check for the static catalog data.

Reads src/data/providers.json and src/data/plans.json (relative to the current
working directory), runs every plan rule and reports all violations at once.

Usage:
    python -m scripts.validate_plans      (or the installed `validate-plans` command)

Exit status is 1 when any violation is found, 0 otherwise.
"""
import os
import sys

from utils.plan_validation import (ALLOWED_INTEGRATION_TAGS, TOP10_PROVIDER_IDS,
                                   load_json_array, validate_plans)

PROVIDERS_PATH = os.path.join('src', 'data', 'providers.json')
PLANS_PATH = os.path.join('src', 'data', 'plans.json')


def run_validation(providers_path=PROVIDERS_PATH, plans_path=PLANS_PATH, stdout=None, stderr=None,
                   allowed_tags=ALLOWED_INTEGRATION_TAGS, top_provider_ids=TOP10_PROVIDER_IDS):
    """
    Loads both documents, validates them and prints the report.

    Args:
        providers_path (str): Path of providers.json.
        plans_path (str): Path of plans.json.
        stdout, stderr (file-like, optional): Report streams; default to sys.stdout/sys.stderr.
        allowed_tags, top_provider_ids (optional): Vocabularies passed to validate_plans.

    Returns:
        int: Process exit status (0 when valid, 1 otherwise).
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    providers, providers_error = load_json_array(providers_path, 'providers.json')
    plans, plans_error = load_json_array(plans_path, 'plans.json')

    errors = [error for error in (providers_error, plans_error) if error]
    if not errors: # Rule checks need both documents.
        errors = validate_plans(providers, plans, allowed_tags=allowed_tags, top_provider_ids=top_provider_ids)

    if errors:
        print('Plan validation failed:\n', file=stderr)
        for error in errors:
            print(f'- {error}', file=stderr)
        return 1

    print(f'Plan validation passed ({len(plans)} plans checked).', file=stdout)
    return 0


def main():
    # No flags: the data locations are fixed.
    return run_validation()


if __name__ == '__main__':
    sys.exit(main())
