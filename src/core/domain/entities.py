"""
Entities module.

Contains the media records supplied by the media database and the naming
context assembled from them for a single render.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Tuple

from src.core.domain.value_objects import (
    MediaInfo,
    Quality,
    ReleaseInfo,
    SeriesType,
)


@dataclass
class Series:
    """
    Series entity.

    Attributes:
        id: Unique identifier in the media database.
        title: Series title.
        year: Year the series started.
        series_type: Standard, daily or anime; selects the episode template.
        imdb_id: IMDb identifier (e.g., 'tt0903747').
        tmdb_id: TMDB identifier.
        tvdb_id: TVDB identifier.
    """
    title: str
    year: Optional[int] = None
    series_type: SeriesType = SeriesType.STANDARD
    id: Optional[int] = None
    imdb_id: Optional[str] = None
    tmdb_id: Optional[int] = None
    tvdb_id: Optional[int] = None


@dataclass
class Episode:
    """
    Episode entity.

    Attributes:
        season_number: Season number (0 for specials).
        episode_number: Episode number within the season.
        title: Episode title.
        air_date: Original air date.
        absolute_episode_number: Absolute episode number (anime).
    """
    season_number: int
    episode_number: int
    title: Optional[str] = None
    air_date: Optional[date] = None
    absolute_episode_number: Optional[int] = None
    id: Optional[int] = None

    @property
    def sort_key(self) -> Tuple[int, int]:
        """Return the (season, episode) ordering key."""
        return (self.season_number, self.episode_number)


@dataclass
class Movie:
    """
    Movie entity.

    Attributes:
        title: Movie title.
        year: Release year.
        original_title: Title in the original language.
    """
    title: str
    year: Optional[int] = None
    original_title: Optional[str] = None
    id: Optional[int] = None
    imdb_id: Optional[str] = None
    tmdb_id: Optional[int] = None


@dataclass(frozen=True)
class NamingContext:
    """
    Naming context.

    Everything a single render can resolve into a name. Built fresh by the
    caller for each render call; the engine never mutates it.

    Attributes:
        series: Series being named.
        episodes: Episodes contained in the file, ordered by season then
            episode number. A single-episode file carries one element.
        season: Season being named when no episode is at hand (season
            folders); defaults to the season of the first episode.
        movie: Movie being named.
        quality: Quality of the file.
        media_info: Probed stream details.
        release_info: Release group and related data.
        original_file_name: File name before renaming.
        imdb_id: Raw IMDb id; overrides the id on the series/movie record.
        tmdb_id: Raw TMDB id; overrides the id on the series/movie record.
        tvdb_id: Raw TVDB id; overrides the id on the series record.
    """
    series: Optional[Series] = None
    episodes: Tuple[Episode, ...] = field(default_factory=tuple)
    season: Optional[int] = None
    movie: Optional[Movie] = None
    quality: Optional[Quality] = None
    media_info: Optional[MediaInfo] = None
    release_info: Optional[ReleaseInfo] = None
    original_file_name: Optional[str] = None
    imdb_id: Optional[str] = None
    tmdb_id: Optional[int] = None
    tvdb_id: Optional[int] = None

    def __post_init__(self) -> None:
        """Normalize the episode collection to a tuple."""
        if not isinstance(self.episodes, tuple):
            object.__setattr__(self, 'episodes', tuple(self.episodes))

    @property
    def episode(self) -> Optional[Episode]:
        """Return the first episode, if any."""
        return self.episodes[0] if self.episodes else None

    @property
    def is_multi_episode(self) -> bool:
        """Check if the context spans more than one episode."""
        return len(self.episodes) > 1

    @property
    def season_number(self) -> Optional[int]:
        """Return the explicit season, or the season of the first episode."""
        if self.season is not None:
            return self.season
        episode = self.episode
        return episode.season_number if episode else None
