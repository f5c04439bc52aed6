"""
Integer base converter API.
Converts digit strings between any two radices from 2 to 64 using exact integer arithmetic.
"""

from dataclasses import dataclass
from typing import Dict, Any

from .exceptions import ValidationError


# Digit value is the symbol's position. Lowercase letters come before uppercase ones.
DIGIT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ+/"

MIN_BASE = 2
MAX_BASE = len(DIGIT_ALPHABET)

# Largest base where letter case carries no meaning
CASE_INSENSITIVE_MAX_BASE = 36

COMMON_BASES = {
    'binary': 2,
    'octal': 8,
    'decimal': 10,
    'hexadecimal': 16,
    'base64': 64,
}


@dataclass
class ConversionRequest:
    """A single conversion of `value` from `from_base` to `to_base`."""

    value: str
    from_base: int
    to_base: int

    def validate(self) -> None:
        """Check radix bounds and value presence before any digit is read."""
        validate_base(self.from_base)
        validate_base(self.to_base)
        if not isinstance(self.value, str) or self.value == '':
            raise ValidationError("Value must be a non-empty string.")


def validate_base(base: int) -> None:
    """Raise ValidationError unless base is an integer between MIN_BASE and MAX_BASE."""
    if isinstance(base, bool) or not isinstance(base, int):
        raise ValidationError(f"Base must be an integer, got {base!r}.")
    if base < MIN_BASE or base > MAX_BASE:
        raise ValidationError(f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}.")


def get_digit_alphabet(base: int) -> str:
    """Return the symbols that are valid digits for the given base."""
    validate_base(base)
    return DIGIT_ALPHABET[:base]


def digit_value(char: str, base: int) -> int:
    """Return the numeric value of a single digit character in the given base."""
    if base <= CASE_INSENSITIVE_MAX_BASE:
        position = DIGIT_ALPHABET.find(char.lower())
    else:
        position = DIGIT_ALPHABET.find(char)

    if len(char) != 1 or position < 0 or position >= base:
        raise ValidationError(f'Invalid digit "{char}" for base {base}.')
    return position


def parse_integer(value: str, base: int) -> int:
    """Parse a digit string, most significant digit first, into an int."""
    number = 0
    for char in value:
        number = number * base + digit_value(char, base)
    return number


def format_integer(number: int, base: int) -> str:
    """Render a non-negative int as a digit string in the given base."""
    if number == 0:
        return DIGIT_ALPHABET[0]

    digits = []
    while number > 0:
        number, remainder = divmod(number, base)
        digits.append(DIGIT_ALPHABET[remainder])
    return ''.join(reversed(digits))


def convert_request(request: ConversionRequest) -> str:
    """Run a validated conversion request."""
    request.validate()
    number = parse_integer(request.value, request.from_base)
    return format_integer(number, request.to_base)


def convert_base(value: str, from_base: int, to_base: int) -> str:
    """
    Convert a digit string from one base to another.

    Args:
        value: Digits of the number in from_base
        from_base: Radix of value (2-64)
        to_base: Radix of the result (2-64)

    Returns:
        The number written in to_base

    Raises:
        ValidationError: If a base is out of range or value holds an invalid digit
    """
    return convert_request(ConversionRequest(value=value, from_base=from_base, to_base=to_base))


def convert_to_common_bases(value: str, from_base: int) -> Dict[str, Any]:
    """Render one input number in every common base at once."""
    validate_base(from_base)
    if not isinstance(value, str) or value == '':
        raise ValidationError("Value must be a non-empty string.")

    number = parse_integer(value, from_base)
    return {name: format_integer(number, base) for name, base in COMMON_BASES.items()}
