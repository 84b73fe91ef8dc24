"""Tests for YAML configuration loading."""

from pathlib import Path

import pytest

from gcpsamples.config_loader import DEFAULT_CONFIG, ConfigLoader
from gcpsamples.exceptions import ConfigurationError


@pytest.fixture
def loader():
    return ConfigLoader()


def write(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return str(path)


class TestLoadConfig:
    def test_loads_mapping(self, loader, tmp_path):
        path = write(tmp_path, "project: my-project\nlog_dir: logs\n")
        assert loader.load_config(path) == {"project": "my-project", "log_dir": "logs"}

    def test_missing_file(self, loader, tmp_path):
        with pytest.raises(FileNotFoundError):
            loader.load_config(str(tmp_path / "missing.yaml"))

    def test_directory_is_rejected(self, loader, tmp_path):
        with pytest.raises(ConfigurationError, match="not a file"):
            loader.load_config(str(tmp_path))

    def test_invalid_yaml(self, loader, tmp_path):
        path = write(tmp_path, "project: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML format"):
            loader.load_config(path)

    def test_root_must_be_mapping(self, loader, tmp_path):
        path = write(tmp_path, "- just\n- a list\n")
        with pytest.raises(ConfigurationError, match="Root must be a mapping"):
            loader.load_config(path)

    def test_empty_file_is_rejected(self, loader, tmp_path):
        path = write(tmp_path, "")
        with pytest.raises(ConfigurationError):
            loader.load_config(path)

    def test_speech_section_must_be_mapping(self, loader, tmp_path):
        path = write(tmp_path, "speech: LINEAR16\n")
        with pytest.raises(ConfigurationError, match="'speech'"):
            loader.load_config(path)


class TestLoadWithDefaults:
    def test_no_path_returns_defaults(self, loader):
        assert loader.load_with_defaults() == DEFAULT_CONFIG

    def test_defaults_are_not_shared(self, loader):
        config = loader.load_with_defaults()
        config["speech"]["language_code"] = "fr-FR"
        assert DEFAULT_CONFIG["speech"]["language_code"] == "en-US"

    def test_speech_section_is_merged(self, loader, tmp_path):
        path = write(tmp_path, "project: p\nspeech:\n  language_code: ja-JP\n")

        config = loader.load_with_defaults(path)

        assert config["project"] == "p"
        assert config["speech"]["language_code"] == "ja-JP"
        assert config["speech"]["sample_rate_hertz"] == 32000
        assert config["log_file"] == "gcpsamples.log"

    def test_sample_config_file_loads(self, loader):
        sample = Path(__file__).resolve().parent.parent / "config.yaml"
        config = loader.load_with_defaults(str(sample))

        assert config["project"] is None
        assert config["speech"] == DEFAULT_CONFIG["speech"]
