from dataclasses import dataclass


@dataclass(frozen=True)
class Plan:
    """
    Represents one priced offering belonging to a Provider.

    Values are kept exactly as they appear in plans.json. Shape checks are the
    job of the plan validator, and the provider index skips anything it cannot
    aggregate (non-numeric prices, non-list tags) instead of failing.
    """
    provider_id: str
    id: object = None
    name: object = None
    price_eur: object = None # Expected: finite number. Nullable in practice.
    price_usd: object = None
    ssl: object = None # Only `True` counts as SSL support.
    integration_tags: object = None # Expected: list of tags from the fixed vocabulary.
    storage_gb: object = None
    traffic_gb: object = None
    domains: object = None
    notes: object = None
    last_verified_at: object = None

    @staticmethod
    def from_dict(data):
        """
        Builds a Plan from one JSON object of plans.json without coercing any value.

        Args:
            data (dict): The decoded JSON object.

        Returns:
            Plan: The plan record.
        """
        return Plan(
            provider_id=data.get('provider_id'),
            id=data.get('id'),
            name=data.get('name'),
            price_eur=data.get('price_eur'),
            price_usd=data.get('price_usd'),
            ssl=data.get('ssl'),
            integration_tags=data.get('integration_tags'),
            storage_gb=data.get('storage_gb'),
            traffic_gb=data.get('traffic_gb'),
            domains=data.get('domains'),
            notes=data.get('notes'),
            last_verified_at=data.get('last_verified_at'),
        )

    def __repr__(self):
        return f'<Plan {self.id} ({self.provider_id})>'
