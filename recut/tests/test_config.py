#!/usr/bin/env python3
"""
Tests for configuration loading and validation
"""
import json

import pytest

from recut.config import ConfigManager, ConfigSchema, DEFAULT_CONFIG
from recut.exceptions import ConfigurationError


class TestConfigManager:
    """Layered configuration loading"""

    def test_defaults(self, clean_env):
        config = ConfigManager()
        assert config.config == DEFAULT_CONFIG
        assert config.get_display_symbols() == ('|', '-')
        assert config.is_enabled('cuts.validate_horizontal')
        assert not config.is_enabled('sequence.circular')

    def test_defaults_not_shared(self, clean_env):
        config = ConfigManager()
        config.config['display']['vertical_cut_symbol'] = '#'
        assert DEFAULT_CONFIG['display']['vertical_cut_symbol'] == '|'

    def test_yaml_file(self, clean_env, tmp_path):
        path = tmp_path / "recut.yml"
        path.write_text("display:\n  vertical_cut_symbol: '/'\nsequence:\n  circular: true\n")

        config = ConfigManager(str(path))
        assert config.get_display_symbols() == ('/', '-')
        assert config.is_enabled('sequence.circular')
        assert config.get('output.format') == 'text'

    def test_json_file(self, clean_env, tmp_path):
        path = tmp_path / "recut.json"
        path.write_text(json.dumps({'output': {'format': 'tsv'}}))

        config = ConfigManager(str(path))
        assert config.get('output.format') == 'tsv'

    def test_local_overlay(self, clean_env, tmp_path):
        (tmp_path / "recut.yml").write_text("output:\n  format: json\n")
        (tmp_path / "recut.local.yml").write_text("output:\n  format: tsv\n")

        config = ConfigManager(str(tmp_path / "recut.yml"))
        assert config.get('output.format') == 'tsv'

    def test_environment_overrides(self, clean_env, tmp_path):
        path = tmp_path / "recut.yml"
        path.write_text("display:\n  vertical_cut_symbol: '/'\n")
        clean_env.setenv("RECUT_DISPLAY__VERTICAL_CUT_SYMBOL", "!")
        clean_env.setenv("RECUT_CUTS__VALIDATE_HORIZONTAL", "false")

        config = ConfigManager(str(path))
        assert config.get('display.vertical_cut_symbol') == '!'
        assert config.get('cuts.validate_horizontal') is False

    def test_environment_keeps_string_settings(self, clean_env):
        clean_env.setenv("RECUT_DISPLAY__VERTICAL_CUT_SYMBOL", "1")
        clean_env.setenv("RECUT_DISPLAY__HORIZONTAL_CUT_SYMBOL", "0")

        config = ConfigManager()
        assert config.get_display_symbols() == ('1', '0')

    def test_missing_file(self, clean_env, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(str(tmp_path / "missing.yml"))
        assert 'config_path' in exc_info.value.details

    def test_unparseable_file(self, clean_env, tmp_path):
        path = tmp_path / "recut.yml"
        path.write_text("display: [unclosed\n")
        with pytest.raises(ConfigurationError):
            ConfigManager(str(path))

    def test_invalid_values(self, clean_env, tmp_path):
        path = tmp_path / "recut.yml"
        path.write_text("display:\n  vertical_cut_symbol: '||'\noutput:\n  format: xml\n")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigManager(str(path))
        errors = exc_info.value.details['errors']
        assert len(errors) == 2

    def test_get_missing_key(self, clean_env):
        config = ConfigManager()
        assert config.get('display.missing', 'x') == 'x'
        assert config.get('nothing') is None
        assert config.get('logging.level.deeper', 5) == 5


class TestConfigSchema:

    def test_defaults_valid(self):
        assert ConfigSchema.validate(DEFAULT_CONFIG) == []

    def test_display_section_required(self):
        errors = ConfigSchema.validate({'logging': {'level': 'INFO'}})
        assert errors == ["Missing required configuration section: display"]

    def test_wrong_type(self):
        config = {'display': {'vertical_cut_symbol': '|', 'horizontal_cut_symbol': '-'},
                  'sequence': {'circular': 'sometimes'}}
        errors = ConfigSchema.validate(config)
        assert errors == ["Invalid type for sequence.circular: expected bool, got str"]
