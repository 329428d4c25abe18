"""Unit tests for FilenameSanitizer."""

import pytest

from src.core.config import NamingConfig
from src.core.domain.value_objects import ColonReplacementFormat
from src.core.exceptions import ConfigurationError
from src.services.naming.sanitizer import (
    FilenameSanitizer,
    replace_colons,
    replace_illegal_characters,
    replace_spaces,
)
from tests.fixtures.test_data import COLON_CASES, COLON_TITLES


class TestColonReplacement:
    """Tests for replace_colons()."""

    @pytest.mark.parametrize('colon_format,name,expected', COLON_CASES)
    def test_colon_policies(self, colon_format, name, expected):
        """Should apply each colon policy."""
        assert replace_colons(name, colon_format) == expected

    @pytest.mark.parametrize('colon_format', list(ColonReplacementFormat))
    @pytest.mark.parametrize('name', COLON_TITLES)
    def test_no_colon_survives(self, colon_format, name):
        """Should remove every colon under every policy."""
        assert ':' not in replace_colons(name, colon_format)

    def test_accepts_policy_value(self):
        """Should accept the policy's string value."""
        assert replace_colons('a:b', 'delete') == 'ab'

    def test_unsupported_policy(self):
        """Should raise ConfigurationError for unknown policies."""
        with pytest.raises(ConfigurationError) as exc_info:
            replace_colons('a:b', 'underscore')

        assert exc_info.value.field_name == 'colon_replacement_format'


class TestCharacterReplacement:
    """Tests for illegal character and space replacement."""

    @pytest.mark.parametrize('name,expected', [
        ('AC/DC', 'AC-DC'),
        ('Back\\Slash', 'Back-Slash'),
        ('Pipe|Dream', 'Pipe-Dream'),
        ('What If?', 'What If'),
        ('Star*Trek', 'StarTrek'),
        ('<Tag>', 'Tag'),
        ('Say "Hi"', "Say 'Hi'"),
    ])
    def test_illegal_characters(self, name, expected):
        """Should replace or drop characters illegal on common filesystems."""
        assert replace_illegal_characters(name) == expected

    def test_replace_spaces(self):
        """Should replace each whitespace run with the replacement."""
        assert replace_spaces('Breaking  Bad\tS01', '.') == 'Breaking.Bad.S01'


class TestFilenameSanitizer:
    """Tests for FilenameSanitizer.sanitize()."""

    def test_smart_colon(self):
        """Should turn 'Show: Subtitle' into 'Show - Subtitle'."""
        sanitizer = FilenameSanitizer(NamingConfig())

        assert sanitizer.sanitize('Show: Subtitle') == 'Show - Subtitle'

    def test_space_dash_space_is_cleaned_up(self):
        """Should collapse the doubled spaces around the dash."""
        config = NamingConfig(colon_replacement_format=ColonReplacementFormat.SPACE_DASH_SPACE)

        assert FilenameSanitizer(config).sanitize('Show: Subtitle') == 'Show - Subtitle'

    def test_illegal_characters_switch(self):
        """Should keep illegal characters when replacement is disabled."""
        config = NamingConfig(replace_illegal_characters=False)

        assert FilenameSanitizer(config).sanitize('What If?') == 'What If?'

    def test_colons_replaced_even_when_illegal_switch_off(self):
        """Should always apply the colon policy."""
        config = NamingConfig(replace_illegal_characters=False)

        assert ':' not in FilenameSanitizer(config).sanitize('Show: Subtitle')

    def test_cleanup_after_replacement(self):
        """Should clean up groups emptied by dropped characters."""
        sanitizer = FilenameSanitizer(NamingConfig())

        assert sanitizer.sanitize('Show [??] - Pilot') == 'Show - Pilot'

    def test_space_replacement(self):
        """Should replace spaces when enabled."""
        config = NamingConfig(replace_spaces=True, spaces_replacement='.')

        assert FilenameSanitizer(config).sanitize('Breaking Bad S01E01') == 'Breaking.Bad.S01E01'

    def test_empty_name(self):
        """Should return an empty string for empty input."""
        assert FilenameSanitizer(NamingConfig()).sanitize('') == ''
