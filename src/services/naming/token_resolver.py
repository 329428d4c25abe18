"""
Token resolver module.

Maps a base token name and a naming context to a string value through a
fixed table of accessors. The table is built once at import time and is the
only place tokens are defined; the token catalog reads the same table.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Optional

from src.core.domain.entities import NamingContext
from src.core.utils.title_utils import (
    clean_title,
    first_character,
    format_air_date,
    title_the,
    title_with_year,
)

logger = logging.getLogger(__name__)

Accessor = Callable[[NamingContext], Optional[str]]


@dataclass(frozen=True)
class TokenDefinition:
    """
    Token definition.

    Attributes:
        name: Token name as written in templates.
        category: Catalog group ('series', 'episode', 'quality', ...).
        description: Human-readable description.
        accessor: Function reading the value from a naming context.
        toggle: NamingConfig flag that must be on for the token to resolve.
    """
    name: str
    category: str
    description: str
    accessor: Accessor
    toggle: Optional[str] = None


def normalize_token_name(name: str) -> str:
    """Normalize a token name for case-insensitive lookup."""
    return ' '.join(name.split()).lower()


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text else None


def _padded(value: Optional[int], width: int) -> Optional[str]:
    if value is None:
        return None
    return str(value).zfill(width)


# Series

def _series_title(ctx: NamingContext) -> Optional[str]:
    return ctx.series.title if ctx.series else None


def _series_year(ctx: NamingContext) -> Optional[int]:
    return ctx.series.year if ctx.series else None


def _series_title_year(ctx: NamingContext) -> Optional[str]:
    return _text(title_with_year(_series_title(ctx), _series_year(ctx)))


def _series_title_the_year(ctx: NamingContext) -> Optional[str]:
    return _text(title_with_year(title_the(_series_title(ctx)), _series_year(ctx)))


# Movie

def _movie_title(ctx: NamingContext) -> Optional[str]:
    return ctx.movie.title if ctx.movie else None


def _movie_year(ctx: NamingContext) -> Optional[int]:
    return ctx.movie.year if ctx.movie else None


def _year(ctx: NamingContext) -> Optional[str]:
    return _text(_series_year(ctx) or _movie_year(ctx))


# Season / episode

def _season(ctx: NamingContext) -> Optional[int]:
    return ctx.season_number


def _episode(ctx: NamingContext) -> Optional[int]:
    return ctx.episode.episode_number if ctx.episode else None


def _absolute(ctx: NamingContext) -> Optional[int]:
    return ctx.episode.absolute_episode_number if ctx.episode else None


def _episode_title(ctx: NamingContext) -> Optional[str]:
    titles: list[str] = []
    for episode in ctx.episodes:
        if episode.title and episode.title not in titles:
            titles.append(episode.title)
    return _text(' + '.join(titles))


def _air_date(separator: str) -> Accessor:
    def accessor(ctx: NamingContext) -> Optional[str]:
        if not ctx.episode:
            return None
        return _text(format_air_date(ctx.episode.air_date, separator))
    return accessor


# Quality

def _quality_full(ctx: NamingContext) -> Optional[str]:
    quality = ctx.quality
    if not quality or not quality.name:
        return None
    parts = [quality.name]
    if quality.is_proper:
        parts.append('Proper')
    if quality.is_real:
        parts.append('REAL')
    return ' '.join(parts)


def _quality_title(ctx: NamingContext) -> Optional[str]:
    return _text(ctx.quality.name) if ctx.quality else None


def _quality_proper(ctx: NamingContext) -> Optional[str]:
    if ctx.quality and ctx.quality.is_proper:
        return 'Proper'
    return None


def _quality_real(ctx: NamingContext) -> Optional[str]:
    if ctx.quality and ctx.quality.is_real:
        return 'REAL'
    return None


# Media info

def _media_attr(attribute: str) -> Accessor:
    def accessor(ctx: NamingContext) -> Optional[str]:
        if not ctx.media_info:
            return None
        return _text(getattr(ctx.media_info, attribute))
    return accessor


def _languages(attribute: str) -> Accessor:
    def accessor(ctx: NamingContext) -> Optional[str]:
        if not ctx.media_info:
            return None
        languages = getattr(ctx.media_info, attribute)
        return _text('+'.join(language.upper() for language in languages))
    return accessor


def _media_info_simple(ctx: NamingContext) -> Optional[str]:
    info = ctx.media_info
    if not info:
        return None
    return _text(' '.join(filter(None, [info.video_codec, info.audio_codec])))


def _media_info_full(ctx: NamingContext) -> Optional[str]:
    info = ctx.media_info
    if not info:
        return None
    audio_languages = _languages('audio_languages')(ctx)
    subtitle_languages = _languages('subtitle_languages')(ctx)
    parts = [
        info.video_codec,
        info.audio_codec,
        f'[{audio_languages}]' if audio_languages else None,
        f'[{subtitle_languages}]' if subtitle_languages else None,
    ]
    return _text(' '.join(filter(None, parts)))


# Release

def _release_attr(attribute: str) -> Accessor:
    def accessor(ctx: NamingContext) -> Optional[str]:
        if not ctx.release_info:
            return None
        return _text(getattr(ctx.release_info, attribute))
    return accessor


def _original_title(ctx: NamingContext) -> Optional[str]:
    release_title = _release_attr('release_title')(ctx)
    if release_title:
        return release_title
    return _text(ctx.movie.original_title) if ctx.movie else None


def _original_filename(ctx: NamingContext) -> Optional[str]:
    if not ctx.original_file_name:
        return None
    leaf = os.path.basename(ctx.original_file_name.replace('\\', '/'))
    return _text(os.path.splitext(leaf)[0])


# External ids

def _imdb_id(ctx: NamingContext) -> Optional[str]:
    if ctx.imdb_id:
        return ctx.imdb_id
    if ctx.series and ctx.series.imdb_id:
        return ctx.series.imdb_id
    return ctx.movie.imdb_id if ctx.movie else None


def _tmdb_id(ctx: NamingContext) -> Optional[str]:
    if ctx.tmdb_id:
        return str(ctx.tmdb_id)
    if ctx.series and ctx.series.tmdb_id:
        return str(ctx.series.tmdb_id)
    if ctx.movie and ctx.movie.tmdb_id:
        return str(ctx.movie.tmdb_id)
    return None


def _tvdb_id(ctx: NamingContext) -> Optional[str]:
    if ctx.tvdb_id:
        return str(ctx.tvdb_id)
    if ctx.series and ctx.series.tvdb_id:
        return str(ctx.series.tvdb_id)
    return None


def _prefixed(prefix: str, accessor: Accessor) -> Accessor:
    def prefixed(ctx: NamingContext) -> Optional[str]:
        value = accessor(ctx)
        return f'{prefix}-{value}' if value else None
    return prefixed


def _numeric_tokens(
    name: str,
    category: str,
    description: str,
    getter: Callable[[NamingContext], Optional[int]],
    widths: tuple[int, ...]
) -> list[TokenDefinition]:
    definitions = [
        TokenDefinition(name, category, description, lambda ctx: _text(getter(ctx)))
    ]
    for width in widths:
        definitions.append(TokenDefinition(
            f'{name}:{"0" * width}',
            category,
            f'{description}, zero padded to {width} digits',
            lambda ctx, width=width: _padded(getter(ctx), width)
        ))
    return definitions


TOKEN_DEFINITIONS: tuple[TokenDefinition, ...] = (
    # Series
    TokenDefinition('Series Title', 'series', 'The title of the series', _series_title),
    TokenDefinition(
        'Series CleanTitle', 'series', 'Series title without punctuation',
        lambda ctx: _text(clean_title(_series_title(ctx)))
    ),
    TokenDefinition('Series TitleYear', 'series', 'Series title with year', _series_title_year),
    TokenDefinition(
        'Series CleanTitleYear', 'series', 'Clean series title with year',
        lambda ctx: _text(title_with_year(clean_title(_series_title(ctx)), _series_year(ctx)))
    ),
    TokenDefinition(
        'Series TitleThe', 'series', "Series title with a leading 'The' moved to the end",
        lambda ctx: _text(title_the(_series_title(ctx)))
    ),
    TokenDefinition(
        'Series CleanTitleThe', 'series', "Clean series title with 'The' moved to the end",
        lambda ctx: _text(title_the(clean_title(_series_title(ctx))))
    ),
    TokenDefinition(
        'Series TitleTheYear', 'series', "Series title with 'The' moved to the end and year",
        _series_title_the_year
    ),
    TokenDefinition(
        'Series TitleFirstCharacter', 'series', 'First character of the series title',
        lambda ctx: _text(first_character(_series_title(ctx)))
    ),
    TokenDefinition(
        'Series Year', 'series', 'The year the series started',
        lambda ctx: _text(_series_year(ctx))
    ),
    TokenDefinition('Year', 'series', 'Series or movie year', _year),

    # Season / episode
    *_numeric_tokens('Season', 'episode', 'Season number', _season, (1, 2, 3, 4)),
    *_numeric_tokens('Episode', 'episode', 'Episode number', _episode, (1, 2, 3, 4)),
    *_numeric_tokens(
        'Absolute Episode', 'episode', 'Absolute episode number (anime)', _absolute, (2, 3, 4)
    ),
    TokenDefinition('Episode Title', 'episode', 'The title of the episode', _episode_title),
    TokenDefinition(
        'Episode CleanTitle', 'episode', 'Episode title without punctuation',
        lambda ctx: _text(clean_title(_episode_title(ctx)))
    ),

    # Air date
    TokenDefinition('Air Date', 'air_date', 'Air date in ISO form (2008-01-20)', _air_date('-')),
    TokenDefinition('Air-Date', 'air_date', 'Air date separated by hyphens', _air_date('-')),
    TokenDefinition('Air.Date', 'air_date', 'Air date separated by dots', _air_date('.')),
    TokenDefinition('Air_Date', 'air_date', 'Air date separated by underscores', _air_date('_')),

    # Quality
    TokenDefinition(
        'Quality Full', 'quality', 'Quality with proper/real flags (HDTV-720p Proper)',
        _quality_full, toggle='include_quality'
    ),
    TokenDefinition(
        'Quality Title', 'quality', 'Quality name only (HDTV-720p)',
        _quality_title, toggle='include_quality'
    ),
    TokenDefinition(
        'Quality', 'quality', 'Quality of the release',
        _quality_full, toggle='include_quality'
    ),
    TokenDefinition(
        'Quality Proper', 'quality', "'Proper' when the quality revision is above 1",
        _quality_proper, toggle='include_quality'
    ),
    TokenDefinition(
        'Quality Real', 'quality', "'REAL' when the release is flagged real",
        _quality_real, toggle='include_quality'
    ),

    # Media info
    TokenDefinition('MediaInfo Simple', 'media_info', 'Video and audio codec', _media_info_simple),
    TokenDefinition(
        'MediaInfo Full', 'media_info', 'Codecs with audio and subtitle languages',
        _media_info_full
    ),
    TokenDefinition(
        'MediaInfo VideoCodec', 'media_info', 'Video codec', _media_attr('video_codec')
    ),
    TokenDefinition(
        'MediaInfo VideoBitDepth', 'media_info', 'Video bit depth',
        _media_attr('video_bit_depth')
    ),
    TokenDefinition(
        'MediaInfo VideoDynamicRange', 'media_info', 'Video dynamic range (HDR)',
        _media_attr('video_dynamic_range')
    ),
    TokenDefinition(
        'MediaInfo AudioCodec', 'media_info', 'Audio codec', _media_attr('audio_codec')
    ),
    TokenDefinition(
        'MediaInfo AudioChannels', 'media_info', 'Audio channel layout',
        _media_attr('audio_channels')
    ),
    TokenDefinition(
        'MediaInfo AudioLanguages', 'media_info', 'Audio languages (EN+DE)',
        _languages('audio_languages')
    ),
    TokenDefinition(
        'MediaInfo SubtitleLanguages', 'media_info', 'Subtitle languages',
        _languages('subtitle_languages')
    ),

    # Release
    TokenDefinition(
        'Release Group', 'release', 'The release group name', _release_attr('release_group')
    ),
    TokenDefinition(
        'Release Hash', 'release', 'Release hash (anime CRC)', _release_attr('release_hash')
    ),
    TokenDefinition('Original Title', 'release', 'Original release title', _original_title),
    TokenDefinition(
        'Original Filename', 'release', 'File name before renaming, without extension',
        _original_filename
    ),
    TokenDefinition(
        'Edition Tags', 'release', "Special edition (Director's Cut)",
        _release_attr('edition'), toggle='include_edition'
    ),
    TokenDefinition(
        'Edition', 'release', 'Special edition',
        _release_attr('edition'), toggle='include_edition'
    ),

    # Movie
    TokenDefinition('Movie Title', 'movie', 'The title of the movie', _movie_title),
    TokenDefinition(
        'Movie CleanTitle', 'movie', 'Movie title without punctuation',
        lambda ctx: _text(clean_title(_movie_title(ctx)))
    ),
    TokenDefinition(
        'Movie TitleYear', 'movie', 'Movie title with year',
        lambda ctx: _text(title_with_year(_movie_title(ctx), _movie_year(ctx)))
    ),
    TokenDefinition(
        'Movie CleanTitleYear', 'movie', 'Clean movie title with year',
        lambda ctx: _text(title_with_year(clean_title(_movie_title(ctx)), _movie_year(ctx)))
    ),
    TokenDefinition(
        'Movie TitleThe', 'movie', "Movie title with a leading 'The' moved to the end",
        lambda ctx: _text(title_the(_movie_title(ctx)))
    ),
    TokenDefinition(
        'Movie TitleFirstCharacter', 'movie', 'First character of the movie title',
        lambda ctx: _text(first_character(_movie_title(ctx)))
    ),
    TokenDefinition(
        'Movie Year', 'movie', 'The year of release', lambda ctx: _text(_movie_year(ctx))
    ),
    TokenDefinition(
        'Release Year', 'movie', 'The year of release', lambda ctx: _text(_movie_year(ctx))
    ),

    # External ids
    TokenDefinition('ImdbId', 'ids', 'IMDb id (tt0903747)', _imdb_id),
    TokenDefinition('TmdbId', 'ids', 'TMDB id', _tmdb_id),
    TokenDefinition('TvdbId', 'ids', 'TVDB id', _tvdb_id),
    TokenDefinition('imdb-Id', 'ids', 'Prefixed IMDb id (imdb-tt0903747)', _prefixed('imdb', _imdb_id)),
    TokenDefinition('tmdb-Id', 'ids', 'Prefixed TMDB id (tmdb-1396)', _prefixed('tmdb', _tmdb_id)),
    TokenDefinition('tvdb-Id', 'ids', 'Prefixed TVDB id (tvdb-81189)', _prefixed('tvdb', _tvdb_id)),
)

TOKEN_TABLE: dict[str, TokenDefinition] = {
    normalize_token_name(definition.name): definition
    for definition in TOKEN_DEFINITIONS
}


class TokenResolver:
    """
    Token resolver service.

    Resolves token names against a naming context. Unknown tokens and empty
    values resolve to None.
    """

    def __init__(self, naming_config=None):
        """
        Initialize the token resolver.

        Args:
            naming_config: NamingConfig providing the include_quality and
                include_edition switches. All tokens resolve when omitted.
        """
        self._config = naming_config

    def resolve(self, name: str, context: NamingContext) -> Optional[str]:
        """
        Resolve a token to its value.

        Args:
            name: Base token name, including any ':00' pad suffix.
            context: Naming context to read from.

        Returns:
            The resolved string, or None when the token is unknown, switched
            off or has no value in this context.

        Example:
            >>> resolver.resolve('Season:00', context)
            '01'
        """
        definition = TOKEN_TABLE.get(normalize_token_name(name))
        if definition is None:
            logger.debug(f'Unknown token: {{{name}}}')
            return None

        if definition.toggle and not self._is_enabled(definition.toggle):
            return None

        return _text(definition.accessor(context))

    def is_known(self, name: str) -> bool:
        """Check whether a token name exists in the token table."""
        return normalize_token_name(name) in TOKEN_TABLE

    def _is_enabled(self, toggle: str) -> bool:
        if self._config is None:
            return True
        return bool(getattr(self._config, toggle, True))
