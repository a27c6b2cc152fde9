from dataclasses import dataclass


@dataclass(frozen=True)
class Provider:
    """
    Represents a hosting/infrastructure provider listed in the directory.

    Providers are immutable reference data read from providers.json. Every
    display field is optional in the source document; missing values are
    stored as empty strings so downstream code never has to check for None.
    The only exception is `region`, which keeps its raw value and is
    normalized when the provider index is built.
    """
    id: str
    name: str = ''
    slug: str = ''
    logo: str = ''
    region: object = None # Raw region value; see utils.provider_index.normalize_region.
    short_desc: str = ''
    logo_note_de: str = ''
    logo_note_en: str = ''

    @staticmethod
    def from_dict(data):
        """
        Builds a Provider from one JSON object of providers.json.

        Args:
            data (dict): The decoded JSON object.

        Returns:
            Provider: The provider, with missing text fields defaulted to ''.
        """
        def text(key):
            value = data.get(key)
            return value if isinstance(value, str) else ''

        return Provider(
            id=data.get('id') if data.get('id') is not None else '',
            name=text('name'),
            slug=text('slug'),
            logo=text('logo'),
            region=data.get('region'),
            short_desc=text('short_desc'),
            logo_note_de=text('logo_note_de'),
            logo_note_en=text('logo_note_en'),
        )

    def __repr__(self):
        return f'<Provider {self.id}>'
