"""
Multi-episode encoder module.

Rewrites the season/episode anchor of a rendered name into one of the
multi-episode styles.
"""

import logging
from typing import Sequence

from src.core.domain.entities import Episode
from src.core.domain.value_objects import MultiEpisodeStyle
from src.core.exceptions import ConfigurationError
from src.services.naming.template_renderer import RenderedName

logger = logging.getLogger(__name__)


def _ss(number: int) -> str:
    return f'{number:02d}'


class MultiEpisodeEncoder:
    """
    Multi-episode encoder service.

    Output for episodes 1, 2 and 3 of season 1:

        extend          S01E01-02-03
        duplicate       S01E01.S01E02.S01E03
        repeat          S01E01E02E03
        scene           S01E01-E02-E03
        range           S01E01-03
        prefixed_range  S01E01-E03

    Every style uses the season of the first episode.
    """

    def encode(self, episodes: Sequence[Episode], style: MultiEpisodeStyle) -> str:
        """
        Encode an episode list as a season/episode segment.

        Args:
            episodes: Episodes of one file; ordered by season then episode.
            style: Multi-episode style.

        Returns:
            Encoded segment (e.g., 'S01E01-03').

        Raises:
            ValueError: If episodes is empty.
            ConfigurationError: If style is not a supported style.
        """
        if not episodes:
            raise ValueError('Cannot encode an empty episode list')

        try:
            style = MultiEpisodeStyle(style)
        except ValueError:
            raise ConfigurationError(
                'Unsupported multi-episode style',
                field_name='multi_episode_style',
                field_value=style
            ) from None

        ordered = sorted(episodes, key=lambda episode: episode.sort_key)
        season = _ss(ordered[0].season_number)
        numbers = [_ss(episode.episode_number) for episode in ordered]
        first = f'S{season}E{numbers[0]}'

        if len(numbers) == 1:
            return first

        if style is MultiEpisodeStyle.EXTEND:
            return first + ''.join(f'-{number}' for number in numbers[1:])
        if style is MultiEpisodeStyle.DUPLICATE:
            return '.'.join(f'S{season}E{number}' for number in numbers)
        if style is MultiEpisodeStyle.REPEAT:
            return first + ''.join(f'E{number}' for number in numbers[1:])
        if style is MultiEpisodeStyle.SCENE:
            return first + ''.join(f'-E{number}' for number in numbers[1:])
        if style is MultiEpisodeStyle.RANGE:
            return f'{first}-{numbers[-1]}'
        return f'{first}-E{numbers[-1]}'

    def apply(
        self,
        rendered: RenderedName,
        episodes: Sequence[Episode],
        style: MultiEpisodeStyle
    ) -> RenderedName:
        """
        Replace the rendered season/episode anchor with the encoded segment.

        Args:
            rendered: Renderer output.
            episodes: Episodes of the file.
            style: Multi-episode style.

        Returns:
            RenderedName with its anchor rewritten; unchanged when the template
            had no season/episode anchor.
        """
        if not rendered.has_anchor:
            logger.warning('⚠️ Template has no S{Season}E{Episode} anchor, multi-episode naming skipped')
            return rendered
        return rendered.with_anchor(self.encode(episodes, style))
