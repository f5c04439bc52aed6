"""
Custom exceptions for the tool APIs.
"""

class ToolError(Exception):
    """Base exception for all tool-related errors."""
    pass

class ValidationError(ToolError):
    """Raised when tool input is not valid for the requested operation."""
    pass

class TranslationError(ToolError):
    """Raised when a locale catalogue cannot be found or parsed."""
    pass
