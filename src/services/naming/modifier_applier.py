"""
Modifier applier module.

Applies parsed token modifiers, in declared order, to a resolved value.
"""

import logging
import re
from typing import Iterable, Optional

from src.core.domain.value_objects import ModifierKind, TokenModifier

logger = logging.getLogger(__name__)

_WORD_START = re.compile(r'(^|\s)(\S)')


def to_title_case(value: str) -> str:
    """Capitalize the first letter of each whitespace-delimited word."""
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), value)


def to_sentence_case(value: str) -> str:
    """Capitalize the first character and lower-case the rest."""
    return value[:1].upper() + value[1:].lower()


CASE_TRANSFORMS = {
    'upper': str.upper,
    'lower': str.lower,
    'title': to_title_case,
    'sentence': to_sentence_case,
}


def apply_modifiers(
    value: Optional[str],
    modifiers: Iterable[TokenModifier]
) -> Optional[str]:
    """
    Apply modifiers to a resolved token value.

    Args:
        value: Resolved value; None short-circuits and is returned as is.
        modifiers: Modifiers in application order.

    Returns:
        The modified value, or None if the value was absent.

    Example:
        >>> apply_modifiers('7', [TokenModifier(ModifierKind.PAD, '3')])
        '007'
    """
    if value is None:
        return None

    for modifier in modifiers:
        if modifier.kind is ModifierKind.CASE:
            transform = CASE_TRANSFORMS.get(modifier.value.lower())
            if transform:
                value = transform(value)
        elif modifier.kind is ModifierKind.PAD:
            if not modifier.value.isdigit():
                # Only reachable for templates that bypassed load-time validation
                logger.warning(f'⚠️ Skipping pad modifier with non-numeric width: {modifier.value!r}')
                continue
            value = value.rjust(int(modifier.value), '0')
        # Separator and conditional modifiers are reserved and leave the value as is

    return value
