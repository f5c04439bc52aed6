"""
Translation catalogues for tool labels.
Loads nested YAML locale files and resolves dotted keys with an English fallback.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional

from .exceptions import TranslationError


LOCALES_DIR = Path(__file__).parent / "locales"
DEFAULT_LOCALE = 'en'


def _flatten(data: Dict[str, Any], prefix: str = '') -> Dict[str, str]:
    """Flatten nested mappings into dotted keys."""
    flat = {}
    for key, value in data.items():
        dotted_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(_flatten(value, dotted_key))
        elif value is not None:
            flat[dotted_key] = str(value)
    return flat


def get_available_locales(locales_dir: Path = LOCALES_DIR) -> List[str]:
    """List locale codes that have a catalogue file."""
    return sorted(path.stem for path in Path(locales_dir).glob('*.yml'))


def load_locale(lang: str, locales_dir: Path = LOCALES_DIR) -> Dict[str, str]:
    """
    Load one locale catalogue.

    Args:
        lang: Locale code, e.g. 'en' or 'fr'
        locales_dir: Directory holding <lang>.yml files

    Returns:
        Mapping of dotted keys to translated text

    Raises:
        TranslationError: If the locale does not exist or is not valid YAML
    """
    if not lang or not lang.replace('-', '').replace('_', '').isalnum():
        raise TranslationError(f"Invalid locale code: {lang!r}")

    locale_file = Path(locales_dir) / f"{lang}.yml"
    if not locale_file.exists():
        raise TranslationError(f"Unknown locale: {lang}")

    try:
        with open(locale_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise TranslationError(f"Locale {lang} could not be parsed: {str(e)}")

    if not isinstance(data, dict):
        raise TranslationError(f"Locale {lang} must contain a mapping")

    return _flatten(data)


class TranslationCatalog:
    """Resolves dotted keys for one locale, falling back to another locale."""

    def __init__(self, lang: str = DEFAULT_LOCALE, fallback_lang: Optional[str] = DEFAULT_LOCALE,
                 locales_dir: Path = LOCALES_DIR):
        self.lang = lang
        self.fallback_lang = fallback_lang
        self.messages = load_locale(lang, locales_dir)
        if fallback_lang and fallback_lang != lang:
            self.fallback_messages = load_locale(fallback_lang, locales_dir)
        else:
            self.fallback_messages = {}

    def translate(self, key: str, default: Optional[str] = None) -> str:
        """Look up key in the locale, then the fallback locale, then return default or the key."""
        if key in self.messages:
            return self.messages[key]
        if key in self.fallback_messages:
            return self.fallback_messages[key]
        return default if default is not None else key

    def __call__(self, key: str, default: Optional[str] = None) -> str:
        return self.translate(key, default)

    def __contains__(self, key: str) -> bool:
        return key in self.messages or key in self.fallback_messages
