"""
Tool APIs for Helpful Tools.
Pure functions behind the web endpoints: integer base conversion and password strength analysis.
"""

from .exceptions import ToolError, ValidationError, TranslationError
from .base_converter import (
    ConversionRequest,
    convert_base,
    convert_request,
    convert_to_common_bases,
    get_digit_alphabet,
)
from .password_strength import (
    PasswordCrackTimeEstimation,
    estimate_password_strength,
    get_charset_length,
    get_human_friendly_duration,
    get_password_crack_time_estimation,
)
from .translations import TranslationCatalog, get_available_locales, load_locale

__all__ = [
    'ToolError',
    'ValidationError',
    'TranslationError',
    'ConversionRequest',
    'convert_base',
    'convert_request',
    'convert_to_common_bases',
    'get_digit_alphabet',
    'PasswordCrackTimeEstimation',
    'estimate_password_strength',
    'get_charset_length',
    'get_human_friendly_duration',
    'get_password_crack_time_estimation',
    'TranslationCatalog',
    'get_available_locales',
    'load_locale',
]
