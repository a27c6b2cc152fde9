from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProviderIndexItem:
    """
    Read-only, per-provider aggregate used for listing, filtering and sorting.

    One item exists for every provider, including providers without plans
    (plan_count == 0, no minimum prices, no tags).
    """
    id: str
    name: str
    slug: str
    logo: str
    region: str # Normalized region; 'global' when the provider has none.
    short_desc: str
    logo_note_de: str
    logo_note_en: str
    plan_count: int = 0
    min_price_eur: object = None # float/int, or None when no plan has a numeric EUR price.
    min_price_usd: object = None
    has_ssl: bool = False
    integration_tags: tuple = field(default_factory=tuple) # Sorted, de-duplicated.
    has_logo: bool = False

    def min_price(self, currency):
        """Returns the minimum price for 'eur', or the USD minimum for any other currency."""
        return self.min_price_eur if currency == 'eur' else self.min_price_usd

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'logo': self.logo,
            'region': self.region,
            'short_desc': self.short_desc,
            'logo_note_de': self.logo_note_de,
            'logo_note_en': self.logo_note_en,
            'plan_count': self.plan_count,
            'min_price_eur': self.min_price_eur,
            'min_price_usd': self.min_price_usd,
            'has_ssl': self.has_ssl,
            'integration_tags': list(self.integration_tags),
            'has_logo': self.has_logo,
        }

    def __repr__(self):
        return f'<ProviderIndexItem {self.id} - {self.plan_count} plans>'
