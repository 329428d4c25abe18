"""
Exceptions module.

Contains the exception hierarchy for the naming engine.
All custom exceptions inherit from NamingError for consistent handling.
"""

from typing import Any, Dict, Optional


class NamingError(Exception):
    """
    Base exception for all naming engine errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code.
        context: Additional context information for debugging.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or 'UNKNOWN_ERROR'
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.context:
            return f'[{self.code}] {self.message} - Context: {self.context}'
        return f'[{self.code}] {self.message}'


# Configuration exceptions

class ConfigError(NamingError):
    """Base exception for configuration errors."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code or 'CONFIG_ERROR', context)


class ConfigurationError(ConfigError):
    """
    Exception raised when naming configuration is invalid.

    Raised for malformed token modifiers found while validating templates,
    and for enum values outside their closed set at render time.

    Attributes:
        field_name: Name of the offending configuration field.
        field_value: The invalid value.
    """

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        field_value: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if field_name:
            ctx['field_name'] = field_name
        if field_value is not None:
            ctx['field_value'] = str(field_value)
        super().__init__(message, 'CONFIGURATION_ERROR', ctx)
        self.field_name = field_name
        self.field_value = field_value


# Preset exceptions

class PresetNotFoundError(ConfigError):
    """
    Exception raised when a naming preset cannot be found.

    Attributes:
        preset_name: The name that was looked up.
    """

    def __init__(
        self,
        message: str,
        preset_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if preset_name:
            ctx['preset_name'] = preset_name
        super().__init__(message, 'PRESET_NOT_FOUND', ctx)
        self.preset_name = preset_name
