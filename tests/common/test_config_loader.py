"""Tests for the layered configuration loader."""

from pathlib import Path

import pytest
from sfvtool.common.config import ConfigLoader
from sfvtool.common.errors import ConfigurationError
from sfvtool.config import SfvToolConfig


@pytest.fixture
def loader(tmp_path, monkeypatch):
    """Loader isolated from system and user config files."""
    monkeypatch.chdir(tmp_path)
    loader = ConfigLoader(app_name="sfvtool", config_class=SfvToolConfig, environ={})
    monkeypatch.setattr(loader, "_system_config_path", lambda: tmp_path / "system.toml")
    monkeypatch.setattr(loader, "_user_config_path", lambda: tmp_path / "user.toml")
    return loader


class TestConfigLoader:
    """Tests for ConfigLoader source priority."""

    def test_defaults_without_files(self, loader):
        config = loader.load()

        assert config == SfvToolConfig()

    def test_explicit_defaults_file(self, loader, tmp_path):
        defaults = tmp_path / "defaults.toml"
        defaults.write_text("[check]\nwarn = true\n\n[checksum]\nchunk_size = 512\n")

        config = loader.load(defaults_path=defaults)

        assert config.check.warn is True
        assert config.checksum.chunk_size == 512

    def test_cwd_defaults_file(self, loader, tmp_path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "defaults.toml").write_text("[check]\nquiet = true\n")

        assert loader.load().check.quiet is True

    def test_user_config_overrides_system_config(self, loader, tmp_path):
        (tmp_path / "system.toml").write_text("[logging]\nlevel = \"INFO\"\nformat = \"json\"\n")
        (tmp_path / "user.toml").write_text("[logging]\nlevel = \"DEBUG\"\n")

        config = loader.load()

        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"

    def test_environment_overrides_files(self, loader, tmp_path):
        (tmp_path / "user.toml").write_text("[check]\nignore_missing = false\n")
        loader.environ = {
            "SFVTOOL_CHECK_IGNORE_MISSING": "true",
            "SFVTOOL_CHECKSUM_CHUNK_SIZE": "8192",
            "OTHER_VARIABLE": "ignored",
        }

        config = loader.load()

        assert config.check.ignore_missing is True
        assert config.checksum.chunk_size == 8192

    def test_missing_explicit_file(self, loader, tmp_path):
        with pytest.raises(ConfigurationError, match="config file not found"):
            loader.load(defaults_path=tmp_path / "nope.toml")

    def test_malformed_toml(self, loader, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[check\nwarn = ")

        with pytest.raises(ConfigurationError, match="cannot load config file"):
            loader.load(defaults_path=bad)

    def test_validation_failure(self, loader, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[checksum]\nchunk_size = 0\n")

        with pytest.raises(ConfigurationError, match="invalid configuration"):
            loader.load(defaults_path=bad)

    def test_unknown_section_rejected(self, loader, tmp_path):
        bad = tmp_path / "bad.toml"
        bad.write_text("[database]\nhost = \"localhost\"\n")

        with pytest.raises(ConfigurationError):
            loader.load(defaults_path=bad)


class TestEnvValueConversion:
    """Tests for environment value conversion."""

    @pytest.mark.parametrize("value,expected", [
        ("true", True),
        ("No", False),
        ("42", 42),
        ("1.5", 1.5),
        ("a, b", ["a", "b"]),
        ("text", "text"),
    ])
    def test_convert(self, value, expected):
        loader = ConfigLoader(app_name="sfvtool", config_class=SfvToolConfig, environ={})
        assert loader._convert_env_value(value) == expected
