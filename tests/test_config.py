"""
Tests for Configuration
=======================
Tests for the YAML settings loader and ChainConfig defaults.
"""

import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wordchain import settings
from wordchain.config import ChainConfig


@pytest.fixture
def fresh_settings():
    settings.load_app_config.cache_clear()
    yield
    settings.load_app_config.cache_clear()


@pytest.fixture
def custom_config(tmp_path, monkeypatch, fresh_settings):
    """Point WORDCHAIN_CONFIG at a temporary app.yaml."""
    def write(text: str) -> Path:
        path = tmp_path / "app.yaml"
        path.write_text(text)
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(path))
        return path
    return write


class TestSettings:
    """Tests for wordchain.settings."""

    def test_bundled_config_loads(self, fresh_settings, monkeypatch):
        monkeypatch.delenv(settings.CONFIG_ENV_VAR, raising=False)
        data = settings.load_app_config()
        assert data["chain"]["max_order"] == 2
        assert settings.config_path() == settings.APP_CONFIG_PATH

    def test_get_setting_dotted_path(self, fresh_settings, monkeypatch):
        monkeypatch.delenv(settings.CONFIG_ENV_VAR, raising=False)
        assert settings.get_setting("generate.max_words") == 50
        assert settings.get_setting("generate.missing", "fallback") == "fallback"
        assert settings.get_setting("chain.max_order.deeper") is None

    def test_env_override(self, custom_config):
        path = custom_config("chain:\n  max_order: 4\n")
        assert settings.config_path() == path.resolve()
        assert settings.get_setting("chain.max_order") == 4

    def test_empty_file_is_empty_config(self, custom_config):
        custom_config("")
        assert settings.load_app_config() == {}

    def test_missing_config_raises(self, tmp_path, monkeypatch, fresh_settings):
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(tmp_path / "nope.yaml"))
        with pytest.raises(FileNotFoundError):
            settings.load_app_config()

    def test_relative_override_resolves_against_cwd(self, tmp_path, monkeypatch, fresh_settings):
        (tmp_path / "local.yaml").write_text("generate:\n  count: 3\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, "local.yaml")
        assert settings.config_path() == (tmp_path / "local.yaml").resolve()
        assert settings.get_setting("generate.count") == 3


class TestChainConfig:
    """Tests for ChainConfig."""

    def test_defaults_from_app_config(self, fresh_settings, monkeypatch):
        monkeypatch.delenv(settings.CONFIG_ENV_VAR, raising=False)
        config = ChainConfig()
        assert config.max_order == 2
        assert config.max_words == 50
        assert config.count == 1
        assert config.encoding == "utf-8"
        assert config.top_prefixes == 10

    def test_explicit_values_win(self):
        config = ChainConfig(max_order=5, max_words=7, count=3)
        assert (config.max_order, config.max_words, config.count) == (5, 7, 3)

    def test_values_from_custom_config(self, custom_config):
        custom_config("chain:\n  max_order: 3\ngenerate:\n  max_words: 12\n")
        config = ChainConfig()
        assert config.max_order == 3
        assert config.max_words == 12
        # keys missing from the file fall back to built-in defaults
        assert config.count == 1

    def test_invalid_order(self):
        with pytest.raises(ValueError):
            ChainConfig(max_order=0)

    def test_invalid_config_value(self, custom_config):
        custom_config("generate:\n  max_words: lots\n")
        with pytest.raises(ValueError):
            ChainConfig()

    def test_zero_words_allowed(self):
        assert ChainConfig(max_words=0).max_words == 0
