"""
Tests for tool configuration loading and the launcher helpers.
"""

import json
import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../src')))

from config.tools import TOOLS, load_app_config, is_tool_enabled, get_enabled_tools
import app as launcher


def english(key, default=None):
    return default if default is not None else key


class TestLoadAppConfig:
    """config/config.json handling."""

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_app_config(tmp_path / 'config.json')
        assert config['tools'] == {}
        assert config['password_strength']['guesses_per_second'] == 1e9
        assert config['i18n']['default_locale'] == 'en'

    def test_file_overrides_defaults(self, tmp_path):
        config_file = tmp_path / 'config.json'
        config_file.write_text(json.dumps({
            'tools': {'base-converter': {'enabled': False}},
            'i18n': {'default_locale': 'fr'}
        }))
        config = load_app_config(config_file)
        assert config['tools']['base-converter']['enabled'] is False
        assert config['i18n']['default_locale'] == 'fr'
        assert config['password_strength']['guesses_per_second'] == 1e9

    def test_invalid_json_gives_defaults(self, tmp_path, capsys):
        config_file = tmp_path / 'config.json'
        config_file.write_text('{not json')
        config = load_app_config(config_file)
        assert config['tools'] == {}
        assert 'Warning: Failed to read' in capsys.readouterr().out

    def test_defaults_are_not_shared(self, tmp_path):
        first = load_app_config(tmp_path / 'config.json')
        first['i18n']['default_locale'] = 'de'
        second = load_app_config(tmp_path / 'config.json')
        assert second['i18n']['default_locale'] == 'en'


class TestToolRegistry:
    """Enable flags and label resolution."""

    def test_enabled_by_default(self):
        assert is_tool_enabled('base-converter', {'tools': {}})

    def test_disabled(self):
        config = {'tools': {'base-converter': {'enabled': False}}}
        assert not is_tool_enabled('base-converter', config)
        ids = [tool['id'] for tool in get_enabled_tools(config, english)]
        assert ids == ['password-strength-analyser']

    def test_labels_use_translator(self):
        tools = get_enabled_tools({'tools': {}}, lambda key, default=None: key.upper())
        assert tools[0]['name'] == 'TOOLS.BASE-CONVERTER.TITLE'

    def test_labels_fall_back_to_id(self):
        tools = get_enabled_tools({'tools': {}}, english)
        assert [tool['name'] for tool in tools] == [tool['id'] for tool in TOOLS]
        assert tools[0]['tags'] == []


class TestLauncher:
    """Port file and argument handling in app.py."""

    def test_config_directory_from_env(self, config_dir):
        assert launcher.get_config_directory() == config_dir

    def test_port_file_round_trip(self, config_dir):
        launcher.write_port_file(8123)
        assert (config_dir / '.port').read_text() == '8123'
        launcher.cleanup_port_file()
        assert not (config_dir / '.port').exists()

    def test_default_port_from_env(self, monkeypatch):
        monkeypatch.setenv('HELPFUL_TOOLS_PORT', '9001')
        assert launcher.parse_args([]).port == 9001

    def test_bad_port_env_falls_back(self, monkeypatch):
        monkeypatch.setenv('HELPFUL_TOOLS_PORT', 'abc')
        assert launcher.get_default_port() == 8000

    def test_cli_arguments(self):
        args = launcher.parse_args(['--port', '5050', '--host', '0.0.0.0', '--debug'])
        assert args.port == 5050
        assert args.host == '0.0.0.0'
        assert args.debug is True
