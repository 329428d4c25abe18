"""
Naming presets module.

Contains the built-in naming presets for the common media servers.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from src.core.exceptions import PresetNotFoundError


class NamingPreset(BaseModel):
    """A named bundle of naming templates and space options."""

    model_config = ConfigDict(frozen=True)

    name: str
    built_in: bool = True
    series_folder_format: str
    season_folder_format: str
    episode_format: str
    movie_folder_format: str
    movie_format: str
    replace_spaces: bool = False
    spaces_replacement: Optional[str] = None

    def to_naming_fields(self) -> Dict[str, Any]:
        """
        Map the preset onto NamingConfig field names.

        The episode template covers standard and anime series; daily series
        keep their air-date template.
        """
        fields: Dict[str, Any] = {
            'series_folder_format': self.series_folder_format,
            'season_folder_format': self.season_folder_format,
            'standard_episode_format': self.episode_format,
            'anime_episode_format': self.episode_format,
            'movie_folder_format': self.movie_folder_format,
            'movie_format': self.movie_format,
            'replace_spaces': self.replace_spaces,
        }
        if self.spaces_replacement is not None:
            fields['spaces_replacement'] = self.spaces_replacement
        return fields


BUILTIN_PRESETS: tuple[NamingPreset, ...] = (
    NamingPreset(
        name='Plex',
        series_folder_format='{Series Title} ({Year})',
        season_folder_format='Season {Season:00}',
        episode_format='{Series Title} - S{Season:00}E{Episode:00} - {Episode Title}',
        movie_folder_format='{Movie Title} ({Year})',
        movie_format='{Movie Title} ({Year})',
    ),
    NamingPreset(
        name='Kodi',
        series_folder_format='{Series Title} ({Year})',
        season_folder_format='Season {Season}',
        episode_format='S{Season:00}E{Episode:00} - {Episode Title}',
        movie_folder_format='{Movie Title} ({Year})',
        movie_format='{Movie Title} ({Year})',
    ),
    NamingPreset(
        name='Minimal',
        series_folder_format='{Series Title}',
        season_folder_format='S{Season:00}',
        episode_format='S{Season:00}E{Episode:00}',
        movie_folder_format='{Movie Title}',
        movie_format='{Movie Title}',
    ),
    NamingPreset(
        name='Scene',
        series_folder_format='{Series Title}',
        season_folder_format='Season.{Season:00}',
        episode_format='{Series Title}.S{Season:00}E{Episode:00}.{Episode Title}.{Quality}',
        movie_folder_format='{Movie Title}.{Year}',
        movie_format='{Movie Title}.{Year}.{Quality}',
        replace_spaces=True,
        spaces_replacement='.',
    ),
)


def get_preset(name: str) -> NamingPreset:
    """
    Look up a built-in preset by name (case-insensitive).

    Raises:
        PresetNotFoundError: If no preset has that name.
    """
    for preset in BUILTIN_PRESETS:
        if preset.name.lower() == name.strip().lower():
            return preset
    raise PresetNotFoundError(f'Naming preset "{name}" not found', preset_name=name)


def list_presets() -> list[NamingPreset]:
    """Return the built-in presets."""
    return list(BUILTIN_PRESETS)
