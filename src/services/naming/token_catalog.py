"""
Token catalog module.

Lists the available naming tokens for documentation and template editors.
Built from the resolver's token table.
"""

from src.services.naming.token_resolver import TOKEN_DEFINITIONS

CATEGORY_ORDER = (
    'series',
    'episode',
    'air_date',
    'quality',
    'media_info',
    'release',
    'movie',
    'ids',
)


def get_available_tokens() -> dict[str, list[dict[str, str]]]:
    """
    Get the available tokens grouped by category.

    Returns:
        Mapping of category to token entries, each with 'token' (as written
        in a template) and 'description'.

    Example:
        >>> get_available_tokens()['series'][0]
        {'token': '{Series Title}', 'description': 'The title of the series'}
    """
    catalog: dict[str, list[dict[str, str]]] = {category: [] for category in CATEGORY_ORDER}
    for definition in TOKEN_DEFINITIONS:
        catalog.setdefault(definition.category, []).append({
            'token': f'{{{definition.name}}}',
            'description': definition.description,
        })
    return catalog


def get_token_names() -> list[str]:
    """Return every token name in table order."""
    return [definition.name for definition in TOKEN_DEFINITIONS]
