"""
Core layer module.

Contains domain models, configuration and exception definitions.
"""

from src.core.exceptions import (
    ConfigError,
    ConfigurationError,
    NamingError,
    PresetNotFoundError,
)

__all__ = [
    # Exceptions
    'NamingError',
    'ConfigError',
    'ConfigurationError',
    'PresetNotFoundError',
]
