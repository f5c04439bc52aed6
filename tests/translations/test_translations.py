"""
Test cases for locale catalogues and their use as duration translators.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

from api.translations import TranslationCatalog, get_available_locales, load_locale
from api.password_strength import get_human_friendly_duration, get_password_crack_time_estimation
from api.exceptions import TranslationError

YEAR = 31536000
MONTH = 2592000


class TestLoadLocale:
    """Reading catalogue files."""

    def test_available_locales(self):
        locales = get_available_locales()
        assert 'en' in locales
        assert 'fr' in locales
        assert locales == sorted(locales)

    def test_keys_are_flattened(self):
        messages = load_locale('en')
        assert messages['tools.password-strength-analyser.timeUnits.instantly'] == 'Instantly'
        assert messages['tools.base-converter.title'] == 'Integer base converter'

    def test_unknown_locale(self):
        with pytest.raises(TranslationError, match='Unknown locale: xx'):
            load_locale('xx')

    def test_rejects_path_like_codes(self):
        with pytest.raises(TranslationError):
            load_locale('../en')

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / 'broken.yml').write_text('tools: [unclosed', encoding='utf-8')
        with pytest.raises(TranslationError, match='could not be parsed'):
            load_locale('broken', locales_dir=tmp_path)

    def test_non_mapping(self, tmp_path):
        (tmp_path / 'list.yml').write_text('- a\n- b\n', encoding='utf-8')
        with pytest.raises(TranslationError, match='must contain a mapping'):
            load_locale('list', locales_dir=tmp_path)

    def test_custom_directory(self, tmp_path):
        (tmp_path / 'eo.yml').write_text('a:\n  b: c\n', encoding='utf-8')
        assert load_locale('eo', locales_dir=tmp_path) == {'a.b': 'c'}
        assert get_available_locales(tmp_path) == ['eo']


class TestTranslationCatalog:
    """Key resolution and fallback."""

    def test_translate_known_key(self):
        catalog = TranslationCatalog('fr')
        assert catalog.translate('tools.password-strength-analyser.timeUnits.instantly') == 'Instantanément'

    def test_falls_back_to_english(self):
        catalog = TranslationCatalog('de')
        assert catalog.translate('tools.password-strength-analyser.timeUnits.week') == 'week'

    def test_falls_back_to_default_then_key(self):
        catalog = TranslationCatalog('en')
        assert catalog.translate('missing.key', 'Default') == 'Default'
        assert catalog.translate('missing.key') == 'missing.key'

    def test_contains(self):
        catalog = TranslationCatalog('de')
        assert 'tools.password-strength-analyser.timeUnits.year' in catalog
        assert 'tools.password-strength-analyser.timeUnits.week' in catalog
        assert 'missing.key' not in catalog

    def test_catalog_is_a_translator(self):
        catalog = TranslationCatalog('fr')
        assert get_human_friendly_duration(YEAR + 2 * MONTH, catalog) == '1 an, 2 mois'
        assert get_human_friendly_duration(0.5, catalog) == "Moins d'une seconde"

    def test_german_mixes_with_fallback(self):
        catalog = TranslationCatalog('de')
        assert get_human_friendly_duration(2 * YEAR, catalog) == '2 Jahre'
        assert get_human_friendly_duration(2 * 604800, catalog) == '2 weeks'

    def test_estimation_with_catalog(self):
        estimation = get_password_crack_time_estimation('')
        assert estimation.format_duration(TranslationCatalog('fr')) == 'Instantanément'

    def test_unknown_language(self):
        with pytest.raises(TranslationError):
            TranslationCatalog('xx')
