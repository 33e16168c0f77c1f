"""
Tests for the settings singleton.
"""

import json

import pytest
from core.config import PathConfig, VERSION
from core.utilities.config_manager import ConfigManager


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point the config path at a temporary file."""
    path = tmp_path / "vector_config.json"
    monkeypatch.setattr(PathConfig, "get_config_path", classmethod(lambda cls: path))
    return path


class TestConfigManager:

    def test_singleton(self):
        assert ConfigManager() is ConfigManager()

    def test_defaults(self, default_settings):
        assert default_settings.get_similarity_formula() == "cosine"
        assert default_settings.get_reject_non_finite() is True
        assert default_settings.get_similarity_formula_name().startswith("Cosine")

    def test_set_invalid_formula(self, default_settings):
        with pytest.raises(ValueError):
            default_settings.set_similarity_formula("manhattan")
        assert default_settings.get_similarity_formula() == "cosine"

    def test_reset(self, default_settings):
        default_settings.set_similarity_formula("reference")
        default_settings.reset()
        assert default_settings.get_similarity_formula() == "cosine"

    def test_load_fills_missing_keys(self, default_settings, config_file):
        config_file.write_text(json.dumps({"similarity_formula": "reference"}))
        default_settings.load()
        assert default_settings.get_similarity_formula() == "reference"
        assert default_settings.get_reject_non_finite() is True

    def test_load_unknown_formula_falls_back(self, default_settings, config_file):
        config_file.write_text(json.dumps({"similarity_formula": "bogus"}))
        default_settings.load()
        assert default_settings.get_similarity_formula() == "cosine"

    def test_load_corrupt_file(self, default_settings, config_file):
        config_file.write_text("{not json")
        default_settings.load()
        assert default_settings.settings == ConfigManager.DEFAULT_SETTINGS

    def test_save_round_trip(self, default_settings, config_file):
        default_settings.load()
        default_settings.set_reject_non_finite(False)
        default_settings.save()
        assert json.loads(config_file.read_text())["reject_non_finite"] is False

    def test_version_from_pyproject(self):
        """Constants live under core/, the version is read from the project root."""
        assert VERSION == "0.1.0"
        assert (PathConfig.BASE_DIR / "pyproject.toml").exists()
