"""
Domain layer module.

Contains value objects and entities that represent the naming concepts.
"""

from src.core.domain.entities import (
    Episode,
    Movie,
    NamingContext,
    Series,
)
from src.core.domain.value_objects import (
    ColonReplacementFormat,
    MediaInfo,
    ModifierKind,
    MultiEpisodeInfo,
    MultiEpisodeStyle,
    Quality,
    ReleaseInfo,
    SeriesType,
    Token,
    TokenModifier,
)

__all__ = [
    # Value Objects - Enums
    'SeriesType',
    'MultiEpisodeStyle',
    'ColonReplacementFormat',
    'ModifierKind',
    # Value Objects - Data Classes
    'Quality',
    'MediaInfo',
    'ReleaseInfo',
    'Token',
    'TokenModifier',
    'MultiEpisodeInfo',
    # Entities
    'Series',
    'Episode',
    'Movie',
    'NamingContext',
]
