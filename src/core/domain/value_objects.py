"""
Value objects module.

Contains immutable value objects representing naming concepts without identity.
Value objects are compared by their attributes, not by identity.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class SeriesType(Enum):
    """Series type enumeration, selects the episode template."""
    STANDARD = 'standard'
    DAILY = 'daily'
    ANIME = 'anime'


class MultiEpisodeStyle(Enum):
    """Multi-episode encoding style enumeration."""
    EXTEND = 'extend'
    DUPLICATE = 'duplicate'
    REPEAT = 'repeat'
    SCENE = 'scene'
    RANGE = 'range'
    PREFIXED_RANGE = 'prefixed_range'


class ColonReplacementFormat(Enum):
    """Colon replacement policy enumeration."""
    DELETE = 'delete'
    DASH = 'dash'
    SPACE_DASH = 'space_dash'
    SPACE_DASH_SPACE = 'space_dash_space'
    SMART = 'smart'


class ModifierKind(Enum):
    """Token modifier kind enumeration."""
    CASE = 'case'
    PAD = 'pad'
    SEPARATOR = 'separator'
    CONDITIONAL = 'conditional'


@dataclass(frozen=True)
class Quality:
    """
    Quality value object.

    Attributes:
        name: Quality name as shown to users (e.g., 'HDTV-720p').
        revision: Revision number; anything above 1 is a proper/repack.
        is_real: Whether the release is flagged REAL.
        resolution: Optional resolution label (e.g., '1080p').
        source: Optional source label (e.g., 'Bluray').
    """
    name: str
    revision: int = 1
    is_real: bool = False
    resolution: Optional[str] = None
    source: Optional[str] = None

    @property
    def is_proper(self) -> bool:
        """Check if this quality carries a proper/repack revision."""
        return self.revision > 1


@dataclass(frozen=True)
class MediaInfo:
    """
    Media info value object.

    Technical stream details probed from the media file.
    """
    video_codec: Optional[str] = None
    video_bit_depth: Optional[int] = None
    video_dynamic_range: Optional[str] = None
    audio_codec: Optional[str] = None
    audio_channels: Optional[str] = None
    audio_languages: Tuple[str, ...] = ()
    subtitle_languages: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ReleaseInfo:
    """
    Release information value object.

    Attributes:
        release_group: Name of the release group.
        release_hash: Release hash (anime releases carry a CRC).
        release_title: Original scene release title.
        edition: Edition tag (e.g., "Director's Cut").
    """
    release_group: Optional[str] = None
    release_hash: Optional[str] = None
    release_title: Optional[str] = None
    edition: Optional[str] = None


@dataclass(frozen=True)
class TokenModifier:
    """
    Token modifier value object.

    Attributes:
        kind: Modifier kind.
        value: Modifier argument (case name, pad width, separator or the
            literal segment for conditional modifiers).
    """
    kind: ModifierKind
    value: str


@dataclass(frozen=True)
class Token:
    """
    Parsed token value object.

    Attributes:
        name: Base token name, including a zero pad suffix such as ':00'.
        modifiers: Modifiers in application order.
    """
    name: str
    modifiers: Tuple[TokenModifier, ...] = ()


@dataclass(frozen=True)
class MultiEpisodeInfo:
    """
    Multi-episode information value object.

    Derived from a release title by the multi-episode detector.

    Attributes:
        first_episode: Lowest episode number in the release.
        last_episode: Highest episode number in the release.
        episode_count: Number of episodes the release spans.
        episodes: Episode numbers in title order.
        is_contiguous: Whether the episodes form a consecutive ascending run.
        season: Season number when the title carries one.
    """
    first_episode: int
    last_episode: int
    episode_count: int
    episodes: Tuple[int, ...] = field(default_factory=tuple)
    is_contiguous: bool = True
    season: Optional[int] = None
