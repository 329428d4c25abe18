"""
Template tokenizer module.

Extracts `{...}` token expressions from user-authored naming templates.
"""

import logging
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenOccurrence:
    """
    A single token occurrence inside a template.

    Attributes:
        raw: Bracketed text as written in the template (e.g., '{Season:00}').
        content: Text between the braces (e.g., 'Season:00').
        start: Offset of the opening brace.
        end: Offset just past the closing brace.
    """
    raw: str
    content: str
    start: int
    end: int


class TemplateTokenizer:
    """
    Template tokenizer service.

    Finds non-nested `{...}` groups and reports them with their positions, so
    two tokens with identical content are substituted independently.
    """

    # A brace group with no braces inside it
    TOKEN_PATTERN = re.compile(r'\{([^{}]*)\}')

    def tokenize(self, template: str) -> list[TokenOccurrence]:
        """
        Extract the ordered token occurrences from a template.

        Unterminated or stray braces produce no token; the text around them
        passes through unchanged.

        Args:
            template: Naming template.

        Returns:
            Token occurrences in template order.

        Example:
            >>> tokenizer.tokenize('S{Season:00}E{Episode:00}')[0].content
            'Season:00'
        """
        if not template:
            return []

        occurrences = self._find_occurrences(template)

        if self.has_unbalanced_braces(template, occurrences):
            logger.warning(
                f'⚠️ Unbalanced braces in naming template, kept as literal text: {template!r}'
            )

        return occurrences

    def has_unbalanced_braces(
        self,
        template: str,
        occurrences: list[TokenOccurrence] | None = None
    ) -> bool:
        """
        Check whether braces remain outside the matched tokens.

        Args:
            template: Naming template.
            occurrences: Previously extracted occurrences, if available.

        Returns:
            True if a stray '{' or '}' is left over.
        """
        if not template:
            return False
        if occurrences is None:
            occurrences = self._find_occurrences(template)

        cursor = 0
        for occurrence in occurrences:
            literal = template[cursor:occurrence.start]
            if '{' in literal or '}' in literal:
                return True
            cursor = occurrence.end

        tail = template[cursor:]
        return '{' in tail or '}' in tail

    def _find_occurrences(self, template: str) -> list[TokenOccurrence]:
        # finditer hands out a fresh iterator per call, nothing is shared
        return [
            TokenOccurrence(
                raw=match.group(0),
                content=match.group(1),
                start=match.start(),
                end=match.end()
            )
            for match in self.TOKEN_PATTERN.finditer(template)
        ]
