"""
Title utilities module.

Provides the title transforms shared by series and movie tokens.

Features:
1. Clean titles stripped of diacritics and punctuation for matching
2. Leading article moved to the end ('The Matrix' -> 'Matrix, The')
3. First-character extraction for letter-bucketed folder layouts
"""

import re
import unicodedata
from datetime import date, datetime
from typing import Optional, Union

_LEADING_ARTICLE = re.compile(r'^the\s+(?P<rest>\S.*)$', re.IGNORECASE | re.DOTALL)
_TRAILING_ARTICLE = re.compile(r',\s*the$', re.IGNORECASE)
_NON_WORD = re.compile(r'[^\w\s-]')
_WHITESPACE = re.compile(r'\s+')


def clean_title(title: Optional[str]) -> str:
    """
    Strip a title down to letters, digits, spaces and hyphens.

    Args:
        title: The title to clean.

    Returns:
        str: Cleaned title, or '' if input is empty.
    """
    if not title:
        return ''

    decomposed = unicodedata.normalize('NFKD', title)
    ascii_only = ''.join(c for c in decomposed if not unicodedata.combining(c))
    ascii_only = ascii_only.replace("'", '').replace('&', 'and')
    ascii_only = _NON_WORD.sub('', ascii_only)
    return _WHITESPACE.sub(' ', ascii_only).strip()


def title_the(title: Optional[str]) -> str:
    """
    Move a single leading 'The ' article to a trailing ', The'.

    A title already ending in ', The' is returned unchanged, so applying the
    transform twice gives the same result as applying it once.

    Args:
        title: The title to transform.

    Returns:
        str: Transformed title, or '' if input is empty.
    """
    if not title:
        return ''
    if _TRAILING_ARTICLE.search(title):
        return title

    match = _LEADING_ARTICLE.match(title)
    if not match:
        return title
    return f'{match.group("rest")}, The'


def first_character(title: Optional[str]) -> str:
    """
    Get the upper-cased first grapheme of a title.

    Combining marks that follow the first character are kept with it.

    Args:
        title: The title to inspect.

    Returns:
        str: First grapheme in upper case, or '' if input is empty.
    """
    if not title:
        return ''
    stripped = title.strip()
    if not stripped:
        return ''

    end = 1
    while end < len(stripped) and unicodedata.combining(stripped[end]):
        end += 1
    return stripped[:end].upper()


def title_with_year(title: Optional[str], year: Optional[int]) -> str:
    """Append '(year)' to a title when the year is known."""
    if not title:
        return ''
    if year:
        return f'{title} ({year})'
    return title


def format_air_date(air_date: Union[date, str, None], separator: str = '-') -> str:
    """
    Format an air date as ISO 'YYYY-MM-DD' with a custom separator.

    The separator is substituted into the ISO string, not formatted anew.

    Args:
        air_date: Air date as a date or an ISO string.
        separator: Separator placed between year, month and day.

    Returns:
        str: Formatted date, or '' if input is None.
    """
    if air_date is None:
        return ''
    if isinstance(air_date, datetime):
        air_date = air_date.date()
    iso = air_date.isoformat() if isinstance(air_date, date) else str(air_date)
    return iso.replace('-', separator)
