"""
Multi-episode detector module.

Recognizes release titles that contain more than one episode.
"""

import logging
import re
from typing import Optional

from src.core.domain.value_objects import MultiEpisodeInfo

logger = logging.getLogger(__name__)

_NUMBER = re.compile(r'\d+')


class MultiEpisodeDetector:
    """
    Multi-episode detector service.

    Patterns are tried in a fixed order and the first one that matches wins.
    A dash between exactly two episode numbers, and the 'Episodes N-M'
    phrase, denote an inclusive range; three or more numbers are an explicit
    episode list.
    """

    # (pattern, name), ordered by priority
    MULTI_EPISODE_PATTERNS: list[tuple[str, str]] = [
        # S01E01E02E03
        (r'S(?P<season>\d{1,4})(?P<episodes>E\d{1,4}(?:E\d{1,4})+)(?!\d)', 'repeat'),
        # S01E01-E03 or S01E01-E02-E03
        (r'S(?P<season>\d{1,4})(?P<episodes>E\d{1,4}(?:-E\d{1,4})+)(?!\d)', 'prefixed'),
        # S01E01-03 or S01E01-02-03
        (r'S(?P<season>\d{1,4})(?P<episodes>E\d{1,4}(?:-\d{1,3}(?![\dPI]))+)', 'suffixed'),
        # Episodes 1-3, Episode 1 to 3
        (r'\bEpisodes?\s*(?P<first>\d{1,4})\s*(?:-|~|to)\s*(?P<last>\d{1,4})(?!\d)', 'phrase'),
    ]

    def __init__(self):
        """Initialize the detector."""
        # Pre-compile patterns; compiled patterns keep no state between calls
        self._patterns = [
            (re.compile(pattern, re.IGNORECASE), name)
            for pattern, name in self.MULTI_EPISODE_PATTERNS
        ]

    def detect(self, title: str) -> Optional[MultiEpisodeInfo]:
        """
        Detect a multi-episode release.

        Args:
            title: Raw release title.

        Returns:
            MultiEpisodeInfo for multi-episode releases, None for single
            episodes or unrecognized titles.

        Example:
            >>> detector.detect('Show.S01E01-E03.720p').episode_count
            3
        """
        if not title:
            return None

        for pattern, name in self._patterns:
            match = pattern.search(title)
            if match:
                info = self._parse_match(match, name)
                logger.debug(f'Multi-episode pattern {name!r} matched {match.group(0)!r}: {info}')
                return info

        return None

    def _parse_match(self, match: re.Match, pattern_name: str) -> Optional[MultiEpisodeInfo]:
        """
        Build MultiEpisodeInfo from a pattern match.

        Args:
            match: Regex match object.
            pattern_name: Name of the pattern that matched.

        Returns:
            MultiEpisodeInfo, or None for a reversed range or a single episode.
        """
        if pattern_name == 'phrase':
            numbers = [int(match.group('first')), int(match.group('last'))]
            season = None
        else:
            numbers = [int(n) for n in _NUMBER.findall(match.group('episodes'))]
            season = int(match.group('season'))

        if pattern_name != 'repeat' and len(numbers) == 2:
            first, last = numbers
            if last < first:
                logger.debug(f'Ignoring reversed episode range: {match.group(0)!r}')
                return None
            numbers = list(range(first, last + 1))

        if len(set(numbers)) < 2:
            logger.debug(f'Ignoring single-episode match: {match.group(0)!r}')
            return None
        return self._build_info(numbers, season)

    def _build_info(self, episodes: list[int], season: Optional[int]) -> MultiEpisodeInfo:
        contiguous = all(b == a + 1 for a, b in zip(episodes, episodes[1:]))
        return MultiEpisodeInfo(
            first_episode=min(episodes),
            last_episode=max(episodes),
            episode_count=len(episodes),
            episodes=tuple(episodes),
            is_contiguous=contiguous,
            season=season
        )
