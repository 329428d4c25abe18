"""
Token modifier parser module.

Splits token content such as 'Series Title:upper:pad3' into a base token
name and an ordered list of modifiers.
"""

import logging
import re

from src.core.domain.value_objects import ModifierKind, Token, TokenModifier
from src.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ModifierParser:
    """
    Token modifier parser service.

    A segment of zeros directly after the name ('Season:00') belongs to the
    name. Every following segment is a modifier, applied left to right.
    """

    CASE_KEYWORDS = frozenset({'upper', 'lower', 'title', 'sentence'})
    SEPARATOR_KEYWORD = 'separator'
    SEPARATOR_VALUE = ' '
    PAD_PREFIX = 'pad'

    # Zero pad suffixes that form part of the token name
    NAME_PAD_PATTERN = re.compile(r'^0+$')

    def parse(self, content: str) -> Token:
        """
        Parse token content into a Token.

        Args:
            content: Text between the braces of a token.

        Returns:
            Token with base name and modifiers in declared order.

        Example:
            >>> parser.parse('Season:00:pad3').name
            'Season:00'
        """
        segments = content.split(':')
        name = segments[0].strip()
        rest = segments[1:]

        if rest and self.NAME_PAD_PATTERN.match(rest[0].strip()):
            name = f'{name}:{rest[0].strip()}'
            rest = rest[1:]

        modifiers = tuple(self.parse_modifier(segment) for segment in rest)
        return Token(name=name, modifiers=modifiers)

    def parse_modifier(self, segment: str) -> TokenModifier:
        """
        Parse a single modifier segment.

        Args:
            segment: Modifier text without the leading ':'.

        Returns:
            TokenModifier; unknown keywords become inert conditional modifiers.
        """
        keyword = segment.strip()
        lowered = keyword.lower()

        if lowered in self.CASE_KEYWORDS:
            return TokenModifier(ModifierKind.CASE, lowered)
        if lowered.startswith(self.PAD_PREFIX):
            return TokenModifier(ModifierKind.PAD, keyword[len(self.PAD_PREFIX):].strip())
        if lowered == self.SEPARATOR_KEYWORD:
            return TokenModifier(ModifierKind.SEPARATOR, self.SEPARATOR_VALUE)

        return TokenModifier(ModifierKind.CONDITIONAL, keyword)

    def validate(self, content: str) -> Token:
        """
        Parse token content and reject malformed modifiers.

        Args:
            content: Text between the braces of a token.

        Returns:
            The parsed Token.

        Raises:
            ConfigurationError: If a pad modifier has a non-numeric width.
        """
        token = self.parse(content)
        for modifier in token.modifiers:
            if modifier.kind is ModifierKind.PAD and not modifier.value.isdigit():
                raise ConfigurationError(
                    f'Pad modifier needs a numeric width in token {{{content}}}',
                    field_value=modifier.value
                )
        return token
