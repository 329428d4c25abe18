"""
Namer facades module.

One facade per naming target: episode file, series folder, season folder,
movie file and movie folder. Each selects its template from NamingConfig,
renders it, applies multi-episode encoding where relevant, sanitizes the
result and, for files, appends the extension.
"""

import logging
import os
from dataclasses import replace
from typing import Optional

from src.core.domain.entities import NamingContext
from src.core.domain.value_objects import SeriesType
from src.core.exceptions import NamingError
from src.core.interfaces.naming import IFileNamer, IFolderNamer
from src.services.naming.multi_episode_encoder import MultiEpisodeEncoder
from src.services.naming.sanitizer import FilenameSanitizer
from src.services.naming.template_renderer import TemplateRenderer

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = 'mkv'

# Container and subtitle extensions kept from the original file name
MEDIA_EXTENSIONS = frozenset({
    'mkv', 'mp4', 'avi', 'mov', 'wmv', 'flv', 'webm', 'm4v', 'mpg', 'mpeg',
    'ts', 'm2ts', 'mts', 'vob', 'ogm', 'ogv', 'rmvb', 'divx', '3gp', 'iso',
    'srt', 'ass', 'ssa', 'sub', 'idx', 'vtt',
})


def extract_extension(file_name: Optional[str], default: str = DEFAULT_EXTENSION) -> str:
    """
    Get the trailing extension of a file name, without the dot.

    Args:
        file_name: File name or path.
        default: Extension used when none is available.

    Returns:
        The extension (e.g., 'mkv'). Suffixes that are not media
        extensions, such as the release group in 'Show.S01E01.x264-CTU',
        give the default.

    Example:
        >>> extract_extension('Breaking.Bad.S01E01.720p.HDTV.x264.mp4')
        'mp4'
    """
    if not file_name:
        return default
    leaf = os.path.basename(file_name.replace('\\', '/'))
    extension = os.path.splitext(leaf)[1].lstrip('.')
    if extension.lower() not in MEDIA_EXTENSIONS:
        return default
    return extension


class BaseNamer:
    """Shared render-and-sanitize pipeline for the namer facades."""

    def __init__(
        self,
        naming_config,
        renderer: TemplateRenderer,
        sanitizer: FilenameSanitizer
    ):
        """
        Initialize the namer.

        Args:
            naming_config: NamingConfig holding the templates.
            renderer: Template renderer.
            sanitizer: Filename sanitizer.
        """
        self._config = naming_config
        self._renderer = renderer
        self._sanitizer = sanitizer

    def _render_folder(self, template: str, context: NamingContext) -> str:
        return self._sanitizer.sanitize(self._renderer.render_text(template, context))

    def _with_extension(self, name: str, context: NamingContext) -> str:
        return f'{name}.{extract_extension(context.original_file_name)}'

    def _original_leaf(self, context: NamingContext) -> Optional[str]:
        if not context.original_file_name:
            return None
        return os.path.basename(context.original_file_name.replace('\\', '/')) or None

    def _finish_filename(self, name: str, context: NamingContext) -> str:
        """
        Append the extension, falling back when the template rendered empty.

        An empty name keeps the original leaf when there is one, otherwise
        uses the sanitized movie or series title.

        Raises:
            NamingError: If no usable name is available.
        """
        if name:
            return self._with_extension(name, context)

        original_leaf = self._original_leaf(context)
        if original_leaf:
            logger.warning(f'⚠️ Template rendered empty, keeping {original_leaf!r}')
            return original_leaf

        title = None
        if context.movie:
            title = context.movie.title
        elif context.series:
            title = context.series.title
        fallback = self._sanitizer.sanitize(title) if title else ''
        if not fallback:
            raise NamingError(
                'Template rendered an empty file name',
                code='EMPTY_FILE_NAME'
            )

        logger.warning(f'⚠️ Template rendered empty, using title {fallback!r}')
        return self._with_extension(fallback, context)


class EpisodeFileNamer(BaseNamer, IFileNamer):
    """
    Episode file namer.

    Picks the standard, daily or anime episode template by series type and
    encodes multi-episode files with the configured style.
    """

    def __init__(
        self,
        naming_config,
        renderer: TemplateRenderer,
        sanitizer: FilenameSanitizer,
        encoder: MultiEpisodeEncoder
    ):
        super().__init__(naming_config, renderer, sanitizer)
        self._encoder = encoder

    def get_template(self, context: NamingContext) -> str:
        """
        Select the episode template for the context's series type.

        Args:
            context: Naming context.

        Returns:
            Episode template.
        """
        series_type = SeriesType.STANDARD
        if context.series:
            series_type = SeriesType(context.series.series_type)

        if series_type is SeriesType.DAILY:
            return self._config.daily_episode_format
        if series_type is SeriesType.ANIME:
            return self._config.anime_episode_format
        return self._config.standard_episode_format

    def build_filename(self, context: NamingContext) -> str:
        """
        Build the episode file name.

        Args:
            context: Naming context with series and episodes.

        Returns:
            Sanitized file name with extension.

        Example:
            >>> namer.build_filename(ctx)
            'Breaking Bad - S01E01 - Pilot [HDTV-720p].mkv'
        """
        original_leaf = self._original_leaf(context)
        if not self._config.rename_episodes and original_leaf:
            logger.debug(f'Episode renaming disabled, keeping {original_leaf!r}')
            return original_leaf

        rendered = self._renderer.render(self.get_template(context), context)
        if context.is_multi_episode:
            rendered = self._encoder.apply(
                rendered, context.episodes, self._config.multi_episode_style
            )

        return self._finish_filename(self._sanitizer.sanitize(rendered.text), context)


class SeriesFolderNamer(BaseNamer, IFolderNamer):
    """Series folder namer."""

    def build_folder_name(self, context: NamingContext) -> str:
        """Build the series folder name."""
        return self._render_folder(self._config.series_folder_format, context)


class SeasonFolderNamer(BaseNamer, IFolderNamer):
    """
    Season folder namer.

    Season 0 always uses the specials folder template.
    """

    SPECIALS_SEASON = 0

    def get_template(self, season_number: Optional[int]) -> str:
        """Select the season folder template for a season number."""
        if season_number == self.SPECIALS_SEASON:
            return self._config.specials_folder_format
        return self._config.season_folder_format

    def build_folder_name(
        self,
        context: NamingContext,
        season_number: Optional[int] = None
    ) -> str:
        """
        Build the season folder name.

        Args:
            context: Naming context.
            season_number: Season to name; defaults to the season of the
                context's first episode.

        Returns:
            Sanitized folder name.
        """
        if season_number is None:
            season_number = context.season_number
        elif season_number != context.season_number:
            context = replace(context, season=season_number)
        return self._render_folder(self.get_template(season_number), context)


class MovieFileNamer(BaseNamer, IFileNamer):
    """Movie file namer."""

    def build_filename(self, context: NamingContext) -> str:
        """
        Build the movie file name.

        Example:
            >>> namer.build_filename(ctx)
            'The Matrix (1999) [Bluray-1080p].mkv'
        """
        name = self._render_folder(self._config.movie_format, context)
        return self._finish_filename(name, context)


class MovieFolderNamer(BaseNamer, IFolderNamer):
    """Movie folder namer."""

    def build_folder_name(self, context: NamingContext) -> str:
        """Build the movie folder name."""
        return self._render_folder(self._config.movie_folder_format, context)
