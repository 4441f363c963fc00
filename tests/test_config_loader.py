# Path: tests/test_config_loader.py
"""Tests for environment-driven configuration."""

from pathlib import Path

import pytest

from resource_lister.core.config_loader import ConfigLoader
from resource_lister.engine.result import InclusionPolicy


def test_defaults(config, output_dir):
    assert config.get('release_channel') == 'default'
    assert config.get('cdn_index') == 1
    assert config.get('include_all_files') is True
    assert config.get('big_paks_only') is False
    assert config.get('big_paks_min_size') == 100_000_000
    assert config.get('min_file_size') == 1024
    assert config.get('checksum_mode') == 'filename'
    assert config.get('name_prefix') == 'wuwa'
    assert config.get('interactive') is False
    assert config.get('log_dir') is None
    assert config['output_dir'] == Path(str(output_dir))


def test_singleton(config):
    assert ConfigLoader() is config


def test_environment_overrides(monkeypatch, config):
    monkeypatch.setenv('LISTER_CDN_INDEX', '3')
    monkeypatch.setenv('LISTER_INCLUDE_ALL_FILES', 'no')
    monkeypatch.setenv('LISTER_BIGPAKS_ONLY', 'yes')
    monkeypatch.setenv('LISTER_INCLUDE_EXTENSIONS', ' .PAK, .png ,,')
    monkeypatch.setenv('LISTER_CHECKSUM_MODE', 'FULL_PATH')
    ConfigLoader.reset()

    loaded = ConfigLoader()

    assert loaded.get('cdn_index') == 3
    assert loaded.get('include_all_files') is False
    assert loaded.get('big_paks_only') is True
    assert loaded.get('include_extensions') == ['.pak', '.png']
    assert loaded.get('checksum_mode') == 'full_path'


def test_invalid_integer_keeps_default(monkeypatch, config):
    monkeypatch.setenv('LISTER_MIN_FILE_SIZE', 'lots')
    ConfigLoader.reset()

    assert ConfigLoader().get('min_file_size') == 1024


def test_invalid_checksum_mode(monkeypatch, config):
    monkeypatch.setenv('LISTER_CHECKSUM_MODE', 'sha1')
    ConfigLoader.reset()

    with pytest.raises(ValueError):
        ConfigLoader()


def test_policy_from_config(config):
    config.set('include_all_files', False)
    config.set('include_extensions', ['.PAK'])

    policy = InclusionPolicy.from_config(config)

    assert policy.include_all_files is False
    assert policy.include_extensions == frozenset({'.pak'})
    assert policy.min_file_size == 1024
