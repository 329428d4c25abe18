"""
Core utilities module.

Contains common utility functions used across the application.
"""

from src.core.utils.title_utils import (
    clean_title,
    first_character,
    format_air_date,
    title_the,
    title_with_year,
)

__all__ = [
    'clean_title',
    'title_the',
    'first_character',
    'title_with_year',
    'format_air_date',
]
