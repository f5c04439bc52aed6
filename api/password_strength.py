"""
Password strength analyser API.
Estimates brute-force crack time from a password's character classes and length,
and renders durations as human-friendly text such as "3 years, 2 months".
"""

import math
import re
from dataclasses import dataclass
from typing import Callable, Dict, Any, List, NamedTuple, Optional


# (key, default) -> localized text
Translator = Callable[[str, Optional[str]], str]

DEFAULT_GUESSES_PER_SECOND = 1e9

# Entropy at which the score saturates
MAX_SCORE_ENTROPY = 128

TRANSLATION_PREFIX = 'tools.password-strength-analyser.timeUnits'

# ASCII semantics: anything outside [A-Za-z0-9] counts as special
LOWERCASE_RE = re.compile(r'[a-z]')
UPPERCASE_RE = re.compile(r'[A-Z]')
DIGITS_RE = re.compile(r'\d', re.ASCII)
SPECIAL_CHARS_RE = re.compile(r'\W|_', re.ASCII)

CHARSET_CLASSES = [
    (LOWERCASE_RE, 26),
    (UPPERCASE_RE, 26),
    (DIGITS_RE, 10),
    (SPECIAL_CHARS_RE, 32),
]


def default_translator(key: str, default: Optional[str] = None) -> str:
    """Return the English default, or the key itself when there is none."""
    return default or key


def prettify_exponential_notation(value) -> str:
    """
    Format a (possibly huge) quantity for display.

    Numbers from 1e21 up are written in exponent notation. The mantissa is
    grouped ("1,234") when whole, otherwise fixed to two decimals, and the
    exponent suffix is reattached.
    """
    if isinstance(value, float) and math.isinf(value):
        return 'Infinity'

    if abs(value) >= 1e21:
        notation = repr(float(value))
    else:
        notation = str(value)

    base, _, exponent = notation.partition('e')
    base_as_number = float(base)
    if base_as_number % 1 == 0:
        pretty_base = f"{int(base_as_number):,}"
    else:
        pretty_base = f"{base_as_number:.2f}"

    return f"{pretty_base}e{exponent}" if exponent else pretty_base


class TimeUnit(NamedTuple):
    unit: str
    seconds_in_unit: int
    plural: str
    translation_key: str
    translation_key_plural: str
    format: Callable[[Any], str] = str


def _time_unit(unit: str, seconds_in_unit: int, plural: str, key: str, key_plural: str,
               format: Callable[[Any], str] = str) -> TimeUnit:
    return TimeUnit(
        unit=unit,
        seconds_in_unit=seconds_in_unit,
        plural=plural,
        translation_key=f"{TRANSLATION_PREFIX}.{key}",
        translation_key_plural=f"{TRANSLATION_PREFIX}.{key_plural}",
        format=format,
    )


# Largest unit first. Keys keep the catalogue spelling "millenium".
TIME_UNITS: List[TimeUnit] = [
    _time_unit('millennium', 31536000000, 'millennia', 'millenium', 'millennia',
               format=prettify_exponential_notation),
    _time_unit('century', 3153600000, 'centuries', 'century', 'centuries'),
    _time_unit('decade', 315360000, 'decades', 'decade', 'decades'),
    _time_unit('year', 31536000, 'years', 'year', 'years'),
    _time_unit('month', 2592000, 'months', 'month', 'months'),
    _time_unit('week', 604800, 'weeks', 'week', 'weeks'),
    _time_unit('day', 86400, 'days', 'day', 'days'),
    _time_unit('hour', 3600, 'hours', 'hour', 'hours'),
    _time_unit('minute', 60, 'minutes', 'minute', 'minutes'),
    _time_unit('second', 1, 'seconds', 'second', 'seconds'),
]

MAX_DURATION_TERMS = 2


def get_human_friendly_duration(seconds: float, translate: Optional[Translator] = None) -> str:
    """
    Describe a duration using its two largest non-zero time units.

    Args:
        seconds: Duration in seconds
        translate: Optional translator called as translate(key, default)

    Returns:
        Text such as "Instantly", "Less than a second" or "3 years, 2 months"
    """
    translate = translate or default_translator

    if seconds <= 0.001:
        return translate(f"{TRANSLATION_PREFIX}.instantly", 'Instantly')

    if seconds <= 1:
        return translate(f"{TRANSLATION_PREFIX}.lessThanASecond", 'Less than a second')

    terms = []
    remaining_seconds = seconds
    for time_unit in TIME_UNITS:
        if math.isinf(remaining_seconds):
            # Nothing finite is left to carry into the smaller units
            terms.append(_format_term(math.inf, time_unit, translate))
            break

        quantity = math.floor(remaining_seconds / time_unit.seconds_in_unit)
        remaining_seconds %= time_unit.seconds_in_unit

        if quantity <= 0:
            continue
        terms.append(_format_term(quantity, time_unit, translate))

    return ', '.join(terms[:MAX_DURATION_TERMS])


def _format_term(quantity, time_unit: TimeUnit, translate: Translator) -> str:
    if quantity > 1:
        unit_text = translate(time_unit.translation_key_plural, time_unit.plural)
    else:
        unit_text = translate(time_unit.translation_key, time_unit.unit)
    return f"{time_unit.format(quantity)} {unit_text}"


def get_charset_length(password: str) -> int:
    """Size of the character set implied by the classes present in the password."""
    return sum(size for pattern, size in CHARSET_CLASSES if pattern.search(password))


@dataclass(frozen=True)
class PasswordCrackTimeEstimation:
    """Entropy and brute-force crack time estimated for one password."""

    entropy: float
    charset_length: int
    password_length: int
    seconds_to_crack: float
    score: float

    def format_duration(self, translate: Optional[Translator] = None) -> str:
        """Human-friendly crack time, optionally localized through translate."""
        return get_human_friendly_duration(self.seconds_to_crack, translate)

    def to_dict(self, translate: Optional[Translator] = None) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        seconds_to_crack = self.seconds_to_crack
        if math.isinf(seconds_to_crack):
            seconds_to_crack = None

        return {
            'entropy': self.entropy,
            'charset_length': self.charset_length,
            'password_length': self.password_length,
            'seconds_to_crack': seconds_to_crack,
            'score': self.score,
            'crack_duration': self.format_duration(translate),
        }


def get_password_crack_time_estimation(password: str,
                                       guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND
                                       ) -> PasswordCrackTimeEstimation:
    """
    Estimate how long a brute-force attack on the password would take.

    Never raises: an empty password yields zero entropy and an instant crack time.
    """
    charset_length = get_charset_length(password)
    password_length = len(password)

    if password == '' or charset_length == 0:
        entropy = 0.0
    else:
        entropy = math.log2(charset_length) * password_length

    try:
        seconds_to_crack = 2 ** entropy / guesses_per_second
    except (OverflowError, ZeroDivisionError):
        seconds_to_crack = math.inf

    score = min(entropy / MAX_SCORE_ENTROPY, 1)

    return PasswordCrackTimeEstimation(
        entropy=entropy,
        charset_length=charset_length,
        password_length=password_length,
        seconds_to_crack=seconds_to_crack,
        score=score,
    )


def estimate_password_strength(password: str,
                               guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND
                               ) -> PasswordCrackTimeEstimation:
    """Shorthand used by the web API."""
    return get_password_crack_time_estimation(password, guesses_per_second=guesses_per_second)
