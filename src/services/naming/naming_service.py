"""
Naming service module.

Provides the aggregate naming operations used by the rename executor:
all names for an episode or movie at once, and rename previews.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from src.core.domain.entities import NamingContext
from src.core.domain.value_objects import MultiEpisodeInfo
from src.services.naming.multi_episode_detector import MultiEpisodeDetector
from src.services.naming.namers import (
    EpisodeFileNamer,
    MovieFileNamer,
    MovieFolderNamer,
    SeasonFolderNamer,
    SeriesFolderNamer,
)
from src.services.naming.token_catalog import get_available_tokens

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EpisodeNames:
    """
    Names computed for an episode file.

    Attributes:
        series_folder: Series folder name.
        season_folder: Season (or specials) folder name.
        file_name: Episode file name with extension.
    """
    series_folder: str
    season_folder: str
    file_name: str

    @property
    def relative_path(self) -> str:
        """Return 'series/season/file' joined with forward slashes."""
        return '/'.join(p for p in (self.series_folder, self.season_folder, self.file_name) if p)


@dataclass(frozen=True)
class MovieNames:
    """
    Names computed for a movie file.

    Attributes:
        folder: Movie folder name.
        file_name: Movie file name with extension.
    """
    folder: str
    file_name: str

    @property
    def relative_path(self) -> str:
        """Return 'folder/file' joined with forward slashes."""
        return '/'.join(p for p in (self.folder, self.file_name) if p)


@dataclass(frozen=True)
class RenamePreview:
    """
    Before/after view of a rename.

    Attributes:
        current_file_name: File name before renaming.
        new_paths: Computed names keyed by 'series_folder', 'season_folder',
            'folder' and 'file_name' as applicable.
        media_kind: 'episode' or 'movie'.
    """
    current_file_name: Optional[str]
    new_paths: Dict[str, str] = field(default_factory=dict)
    media_kind: str = 'episode'

    @property
    def is_changed(self) -> bool:
        """Check whether the file name changes."""
        new_name = self.new_paths.get('file_name')
        if not self.current_file_name or not new_name:
            return bool(new_name)
        return os.path.basename(self.current_file_name.replace('\\', '/')) != new_name


class NamingService:
    """
    Naming service.

    Coordinates the namer facades and the multi-episode detector.
    """

    def __init__(
        self,
        episode_namer: EpisodeFileNamer,
        series_folder_namer: SeriesFolderNamer,
        season_folder_namer: SeasonFolderNamer,
        movie_namer: MovieFileNamer,
        movie_folder_namer: MovieFolderNamer,
        detector: Optional[MultiEpisodeDetector] = None
    ):
        """
        Initialize the naming service.

        Args:
            episode_namer: Episode file namer.
            series_folder_namer: Series folder namer.
            season_folder_namer: Season folder namer.
            movie_namer: Movie file namer.
            movie_folder_namer: Movie folder namer.
            detector: Multi-episode detector.
        """
        self._episode_namer = episode_namer
        self._series_folder_namer = series_folder_namer
        self._season_folder_namer = season_folder_namer
        self._movie_namer = movie_namer
        self._movie_folder_namer = movie_folder_namer
        self._detector = detector or MultiEpisodeDetector()

    def build_episode_names(self, context: NamingContext) -> EpisodeNames:
        """
        Build the series folder, season folder and file name for an episode.

        Args:
            context: Naming context with series and episodes.

        Returns:
            EpisodeNames.
        """
        names = EpisodeNames(
            series_folder=self._series_folder_namer.build_folder_name(context),
            season_folder=self._season_folder_namer.build_folder_name(context),
            file_name=self._episode_namer.build_filename(context)
        )
        logger.debug(f'Episode names: {names.relative_path}')
        return names

    def build_movie_names(self, context: NamingContext) -> MovieNames:
        """
        Build the folder and file name for a movie.

        Args:
            context: Naming context with a movie.

        Returns:
            MovieNames.
        """
        names = MovieNames(
            folder=self._movie_folder_namer.build_folder_name(context),
            file_name=self._movie_namer.build_filename(context)
        )
        logger.debug(f'Movie names: {names.relative_path}')
        return names

    def preview_rename(
        self,
        context: NamingContext,
        current_file_name: Optional[str] = None
    ) -> RenamePreview:
        """
        Preview a rename without touching the filesystem.

        Series contexts without episodes only get folder names; the season
        folder appears when a season is known.

        Args:
            context: Naming context.
            current_file_name: File name shown as the 'before' side; defaults
                to the context's original file name.

        Returns:
            RenamePreview.
        """
        current = current_file_name or context.original_file_name

        if context.movie and not context.series:
            names = self.build_movie_names(context)
            return RenamePreview(
                current_file_name=current,
                new_paths={'folder': names.folder, 'file_name': names.file_name},
                media_kind='movie'
            )

        new_paths = {'series_folder': self._series_folder_namer.build_folder_name(context)}
        if context.season_number is not None:
            new_paths['season_folder'] = self._season_folder_namer.build_folder_name(context)
        if context.episodes:
            new_paths['file_name'] = self._episode_namer.build_filename(context)

        return RenamePreview(current_file_name=current, new_paths=new_paths)

    def detect_multi_episode(self, release_title: str) -> Optional[MultiEpisodeInfo]:
        """Detect whether a release title spans more than one episode."""
        return self._detector.detect(release_title)

    def get_available_tokens(self) -> dict[str, list[dict[str, str]]]:
        """Return the token catalog grouped by category."""
        return get_available_tokens()
