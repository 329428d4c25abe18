"""
Filename sanitizer module.

Makes rendered names safe for the target filesystems: applies the colon
policy, replaces illegal characters and optionally replaces spaces.
"""

import logging
import re

from src.core.domain.value_objects import ColonReplacementFormat
from src.core.exceptions import ConfigurationError
from src.services.naming.template_renderer import clean_rendered_name

logger = logging.getLogger(__name__)

# Colon is handled by the colon policy, not by this table
ILLEGAL_CHARACTER_REPLACEMENTS = {
    '\\': '-',
    '/': '-',
    '|': '-',
    '*': '',
    '?': '',
    '<': '',
    '>': '',
    '"': "'",
}

_ILLEGAL_CHARACTER_PATTERN = re.compile(r'[\\/|*?<>"]')
_SMART_COLON_PATTERN = re.compile(r'\s*:\s*')
_WHITESPACE_PATTERN = re.compile(r'\s+')

COLON_REPLACEMENTS = {
    ColonReplacementFormat.DELETE: lambda name: name.replace(':', ''),
    ColonReplacementFormat.DASH: lambda name: name.replace(':', '-'),
    ColonReplacementFormat.SPACE_DASH: lambda name: name.replace(':', ' -'),
    ColonReplacementFormat.SPACE_DASH_SPACE: lambda name: name.replace(':', ' - '),
    ColonReplacementFormat.SMART: lambda name: _SMART_COLON_PATTERN.sub(' - ', name),
}


def replace_colons(name: str, colon_format: ColonReplacementFormat) -> str:
    """
    Apply a colon replacement policy.

    Args:
        name: Name to process.
        colon_format: Colon replacement policy.

    Returns:
        Name without colons.

    Raises:
        ConfigurationError: If colon_format is not a supported policy.

    Example:
        >>> replace_colons('Show: Subtitle', ColonReplacementFormat.SMART)
        'Show - Subtitle'
    """
    try:
        colon_format = ColonReplacementFormat(colon_format)
    except ValueError:
        raise ConfigurationError(
            'Unsupported colon replacement format',
            field_name='colon_replacement_format',
            field_value=colon_format
        ) from None
    return COLON_REPLACEMENTS[colon_format](name)


def replace_illegal_characters(name: str) -> str:
    """Replace characters that are illegal on Windows, macOS or Linux."""
    return _ILLEGAL_CHARACTER_PATTERN.sub(
        lambda m: ILLEGAL_CHARACTER_REPLACEMENTS[m.group(0)], name
    )


def replace_spaces(name: str, replacement: str) -> str:
    """Replace every whitespace run with the replacement literal."""
    return _WHITESPACE_PATTERN.sub(lambda m: replacement, name)


class FilenameSanitizer:
    """
    Filename sanitizer service.

    Colon handling always runs; illegal character and space replacement
    follow the NamingConfig switches.
    """

    def __init__(self, naming_config):
        """
        Initialize the sanitizer.

        Args:
            naming_config: NamingConfig with the sanitization options.
        """
        self._config = naming_config

    def sanitize(self, name: str) -> str:
        """
        Sanitize a rendered name.

        Args:
            name: Rendered (already cleaned) name.

        Returns:
            Filesystem-safe name.

        Raises:
            ConfigurationError: If the colon replacement format is unsupported.
        """
        if not name:
            return ''

        sanitized = replace_colons(name, self._config.colon_replacement_format)

        if self._config.replace_illegal_characters:
            sanitized = replace_illegal_characters(sanitized)

        sanitized = clean_rendered_name(sanitized)

        if self._config.replace_spaces:
            sanitized = replace_spaces(sanitized, self._config.spaces_replacement)

        if sanitized != name:
            logger.debug(f'Sanitized name: {name!r} -> {sanitized!r}')

        return sanitized
