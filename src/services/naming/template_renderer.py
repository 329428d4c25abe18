"""
Template renderer module.

Renders naming templates: tokenizes, resolves each token, applies its
modifiers, substitutes the values and cleans up the result.
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import Optional

from src.core.domain.entities import NamingContext
from src.services.naming.modifier_applier import apply_modifiers
from src.services.naming.modifier_parser import ModifierParser
from src.services.naming.template_tokenizer import TemplateTokenizer, TokenOccurrence
from src.services.naming.token_resolver import TokenResolver

logger = logging.getLogger(__name__)

EMPTY_GROUP_PATTERN = re.compile(r'\(\s*\)|\[\s*\]|\{\s*\}')
WHITESPACE_RUN_PATTERN = re.compile(r'\s{2,}')
EDGE_SEPARATOR_PATTERN = re.compile(r'^[\s\-_.]+|[\s\-_.]+$')
SEPARATOR_RUN_PATTERN = re.compile(r'[\-_.]{2,}')


def clean_rendered_name(name: str) -> str:
    """
    Clean up a rendered name after token substitution.

    Steps, in order:
    1. Remove (), [] and {} groups that hold only whitespace.
    2. Collapse whitespace runs to a single space.
    3. Strip leading and trailing spaces, hyphens, underscores and dots.
    4. Collapse runs of hyphens, underscores and dots to a single hyphen.

    Running the cleanup on its own output returns it unchanged.

    Args:
        name: Rendered name.

    Returns:
        Cleaned name.

    Example:
        >>> clean_rendered_name('Pilot [] - ')
        'Pilot'
    """
    if not name:
        return ''

    # Removing an inner group can empty its parent: '([ ])'
    previous = None
    while previous != name:
        previous = name
        name = EMPTY_GROUP_PATTERN.sub('', name)

    name = WHITESPACE_RUN_PATTERN.sub(' ', name)
    name = EDGE_SEPARATOR_PATTERN.sub('', name)
    name = SEPARATOR_RUN_PATTERN.sub('-', name)
    return name


@dataclass(frozen=True)
class RenderedName:
    """
    Rendered template, before cleanup.

    The season/episode anchor is kept apart from the text around it so the
    multi-episode encoder can rewrite exactly that span.

    Attributes:
        head: Rendered text before the anchor (the whole text if no anchor).
        anchor: Rendered 'S{Season}E{Episode}' span.
        tail: Rendered text after the anchor.
        has_anchor: Whether the template contained a season/episode anchor.
    """
    head: str
    anchor: str = ''
    tail: str = ''
    has_anchor: bool = False

    @property
    def raw(self) -> str:
        """Return the substituted text without cleanup."""
        return f'{self.head}{self.anchor}{self.tail}'

    @property
    def text(self) -> str:
        """Return the cleaned-up text."""
        return clean_rendered_name(self.raw)

    def with_anchor(self, segment: str) -> 'RenderedName':
        """Return a copy with the anchor span replaced by segment."""
        return replace(self, anchor=segment)


class TemplateRenderer:
    """
    Template renderer service.

    Orchestrates tokenizer, modifier parser, token resolver and modifier
    applier over a template.
    """

    SEASON_TOKEN = 'season'
    EPISODE_TOKEN = 'episode'

    def __init__(
        self,
        tokenizer: TemplateTokenizer,
        modifier_parser: ModifierParser,
        token_resolver: TokenResolver
    ):
        """
        Initialize the template renderer.

        Args:
            tokenizer: Template tokenizer.
            modifier_parser: Token modifier parser.
            token_resolver: Token value resolver.
        """
        self._tokenizer = tokenizer
        self._modifier_parser = modifier_parser
        self._token_resolver = token_resolver

    def render(self, template: str, context: NamingContext) -> RenderedName:
        """
        Render a template against a naming context.

        Args:
            template: Naming template.
            context: Naming context.

        Returns:
            RenderedName; use `.text` for the cleaned result.

        Example:
            >>> renderer.render('{Series Title} - S{Season:00}E{Episode:00}', ctx).text
            'Breaking Bad - S01E01'
        """
        if not template:
            return RenderedName(head='')

        occurrences = self._tokenizer.tokenize(template)
        values = [self.render_token(occurrence.content, context) for occurrence in occurrences]

        anchor = self.find_anchor(template, occurrences)
        if anchor is None:
            return RenderedName(
                head=self._substitute(template, occurrences, values, 0, len(template))
            )

        start, end = anchor
        return RenderedName(
            head=self._substitute(template, occurrences, values, 0, start),
            anchor=self._substitute(template, occurrences, values, start, end),
            tail=self._substitute(template, occurrences, values, end, len(template)),
            has_anchor=True
        )

    def render_text(self, template: str, context: NamingContext) -> str:
        """Render a template and return the cleaned text."""
        return self.render(template, context).text

    def render_token(self, content: str, context: NamingContext) -> str:
        """
        Resolve a single token and apply its modifiers.

        Args:
            content: Text between the braces.
            context: Naming context.

        Returns:
            The value, or '' when the token is absent.
        """
        token = self._modifier_parser.parse(content)
        value = self._token_resolver.resolve(token.name, context)
        value = apply_modifiers(value, token.modifiers)
        return value if value is not None else ''

    def find_anchor(
        self,
        template: str,
        occurrences: list[TokenOccurrence]
    ) -> Optional[tuple[int, int]]:
        """
        Locate the first 'S{Season..}E{Episode..}' span in a template.

        Args:
            template: Naming template.
            occurrences: Token occurrences of the template.

        Returns:
            (start, end) offsets in the template, or None.
        """
        for current, following in zip(occurrences, occurrences[1:]):
            if self._base_name(current) != self.SEASON_TOKEN:
                continue
            if self._base_name(following) != self.EPISODE_TOKEN:
                continue
            if template[current.end:following.start] not in ('E', 'e'):
                continue
            if current.start == 0 or template[current.start - 1] not in ('S', 's'):
                continue
            return current.start - 1, following.end
        return None

    def validate(self, template: str) -> None:
        """
        Validate every token of a template.

        Raises:
            ConfigurationError: If a token carries a malformed modifier.
        """
        for occurrence in self._tokenizer.tokenize(template):
            self._modifier_parser.validate(occurrence.content)

    def _base_name(self, occurrence: TokenOccurrence) -> str:
        name = self._modifier_parser.parse(occurrence.content).name
        return name.split(':', 1)[0].strip().lower()

    def _substitute(
        self,
        template: str,
        occurrences: list[TokenOccurrence],
        values: list[str],
        start: int,
        end: int
    ) -> str:
        pieces = []
        cursor = start
        for occurrence, value in zip(occurrences, values):
            if occurrence.start < start or occurrence.end > end:
                continue
            pieces.append(template[cursor:occurrence.start])
            pieces.append(value)
            cursor = occurrence.end
        pieces.append(template[cursor:end])
        return ''.join(pieces)
