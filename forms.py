import math

from flask import current_app
from flask_wtf import FlaskForm
from wtforms import StringField, SelectField, FloatField, IntegerField
from wtforms.validators import Optional, NumberRange, Length # Import standard validators.

from models import (FilterState, LogoFilterEnum, SslFilterEnum, IntegrationModeEnum, SortKeyEnum,
                    enum_choices)
from utils.plan_validation import ALLOWED_INTEGRATION_TAGS
from utils.provider_index import normalize_region

# Defaults used whenever a query parameter is absent, empty or invalid.
DEFAULT_FILTER_STATE = FilterState()
DEFAULT_SORT_KEY = SortKeyEnum.PRICE.value
DEFAULT_PAGE = 1


def parse_integration_tags(raw, allowed_tags=ALLOWED_INTEGRATION_TAGS):
    """
    Parses the comma-separated `integration` query parameter.

    Args:
        raw (str or None): e.g. 'edge,ci/cd'. The legacy value 'all' means no selection.
        allowed_tags (Collection[str], optional): Known tags; others are dropped.

    Returns:
        tuple: (tags, dropped). `tags` is a sorted tuple of unique known tags,
               `dropped` lists the unknown values that were ignored.
    """
    if not raw:
        return (), []
    tags, dropped = set(), []
    for part in raw.split(','):
        tag = part.strip().lower()
        if not tag or tag == 'all':
            continue
        if tag in allowed_tags:
            tags.add(tag)
        else:
            dropped.append(tag)
    return tuple(sorted(tags)), dropped


class ProviderFilterForm(FlaskForm):
    """
    Binds the provider directory's URL query parameters.

    Field names are the query parameter names. The form is meant to be built
    from `request.args`; nothing is ever rejected: every field that fails
    validation falls back to its default in `to_query_state()`.
    """
    class Meta:
        csrf = False # GET form; state lives in the URL.

    # Free-text search over name, short description and slug.
    q = StringField('Search', default='', validators=[Optional(), Length(max=200, message="Search text is too long.")])
    # 'all' or a region name; normalized like provider regions.
    region = StringField('Region', default='all', validators=[Optional(), Length(max=100)])
    logo = SelectField('Logo', choices=enum_choices(LogoFilterEnum), default=LogoFilterEnum.ANY.value, validators=[Optional()])
    # Comma-separated integration tags, e.g. 'ci/cd,edge'.
    integration = StringField('Integrations', default='', validators=[Optional()])
    integrationMode = SelectField('Integration mode', choices=enum_choices(IntegrationModeEnum),
                                  default=IntegrationModeEnum.ANY.value, validators=[Optional()])
    ssl = SelectField('SSL', choices=enum_choices(SslFilterEnum), default=SslFilterEnum.ANY.value, validators=[Optional()])
    priceMin = FloatField('Minimum price', validators=[Optional(), NumberRange(min=0, message="Price must not be negative.")])
    priceMax = FloatField('Maximum price', validators=[Optional(), NumberRange(min=0, message="Price must not be negative.")])
    sort = SelectField('Sort', choices=enum_choices(SortKeyEnum), default=DEFAULT_SORT_KEY, validators=[Optional()])
    # Out-of-range pages are clamped by the paginator, so only the type is checked here.
    page = IntegerField('Page', default=DEFAULT_PAGE, validators=[Optional()])

    def _clean(self, name, default):
        """Returns the field's data, or `default` when it is empty or failed validation."""
        field = self[name]
        if name in self.errors:
            current_app.logger.warning(f"Provider filters: ignoring invalid {name}={field.raw_data!r} ({'; '.join(self.errors[name])})")
            return default
        if field.data is None or field.data == '':
            return default
        return field.data

    def _price_bound(self, name):
        value = self._clean(name, None)
        if value is not None and not math.isfinite(value): # NumberRange lets NaN through.
            current_app.logger.warning(f"Provider filters: ignoring non-finite {name}={value!r}")
            return None
        return value

    def to_query_state(self):
        """
        Validates the bound query parameters and converts them to pipeline inputs.

        Returns:
            tuple: (FilterState, sort_key, page), with every invalid or missing
                   value replaced by its default.
        """
        self.validate()

        q = self._clean('q', DEFAULT_FILTER_STATE.q).strip()

        region = self._clean('region', DEFAULT_FILTER_STATE.region)
        region = 'all' if region.strip().lower() == 'all' else normalize_region(region)

        tags, dropped = parse_integration_tags(self._clean('integration', ''))
        if dropped:
            current_app.logger.warning(f"Provider filters: ignoring unknown integration tags {dropped}")

        state = FilterState(
            q=q,
            region=region,
            logo=self._clean('logo', DEFAULT_FILTER_STATE.logo),
            integration=tags[0] if len(tags) == 1 else 'all',
            ssl=self._clean('ssl', DEFAULT_FILTER_STATE.ssl),
            price_min=self._price_bound('priceMin'),
            price_max=self._price_bound('priceMax'),
            integrations=tags,
            integration_mode=self._clean('integrationMode', DEFAULT_FILTER_STATE.integration_mode),
        )
        return state, self._clean('sort', DEFAULT_SORT_KEY), self._clean('page', DEFAULT_PAGE)
