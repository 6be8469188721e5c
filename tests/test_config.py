"""
Tests for YAML configuration loading with environment overrides.
"""

import pytest

from skyculture.config import DATA_DIR, load_config
from skyculture.errors import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ["SKYCULTURE_NAME", "SKYCULTURE_ASSET_ROOT", "IDENTIFIERS_FILE", "LOG_LEVEL", "LOG_JSON"]:
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:

    def test_missing_file_uses_defaults(self):
        config = load_config("/nonexistent/config.yaml")

        assert config.skyculture.name == "western"
        assert config.skyculture.asset_root == DATA_DIR
        assert config.skyculture.max_lines == 64
        assert config.skyculture.max_edges == 64
        assert config.logging.level == "INFO"

    def test_values_from_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "skyculture:\n  name: chinese\n  max_lines: 10\nlogging:\n  level: debug\n"
        )

        config = load_config(str(config_file))

        assert config.skyculture.name == "chinese"
        assert config.skyculture.max_lines == 10
        assert config.skyculture.max_edges == 64
        assert config.logging.level == "DEBUG"

    def test_environment_overrides(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("skyculture:\n  name: chinese\n")
        monkeypatch.setenv("SKYCULTURE_NAME", "western")
        monkeypatch.setenv("SKYCULTURE_ASSET_ROOT", str(tmp_path))
        monkeypatch.setenv("LOG_JSON", "false")

        config = load_config(str(config_file))

        assert config.skyculture.name == "western"
        assert config.skyculture.asset_root == str(tmp_path)
        assert config.logging.json_format is False

    @pytest.mark.parametrize("body", [
        "skyculture:\n  max_lines: 0\n",
        "skyculture:\n  max_edges: 100000\n",
        "skyculture:\n  name: ../etc\n",
        "logging:\n  level: LOUD\n",
        "unknown_section: {}\n",
    ])
    def test_invalid_config(self, tmp_path, body):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(body)

        with pytest.raises(ConfigError):
            load_config(str(config_file))

    def test_invalid_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("skyculture: [unclosed\n")

        with pytest.raises(ConfigError):
            load_config(str(config_file))
