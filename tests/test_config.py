"""Tests for config loading."""

import pytest

from placement_prep.config import AppConfig, StoreConfig, load_config


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.store.history_key == "placement_readiness_history"
        assert config.analysis.short_jd_threshold == 200
        assert config.report.top_weak_skills == 3
        assert config.logging.level == "WARNING"

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.store.db_path == "~/.placement-prep/history.db"

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(
            "store:\n  history_key: test_key\nanalysis:\n  short_jd_threshold: 50\n"
        )
        config = load_config(yaml_path)
        assert config.store.history_key == "test_key"
        assert config.analysis.short_jd_threshold == 50
        # Defaults for unspecified
        assert config.report.top_weak_skills == 3

    def test_env_var_points_at_config(self, tmp_path, monkeypatch):
        yaml_path = tmp_path / "custom.yaml"
        yaml_path.write_text("logging:\n  level: DEBUG\n")
        monkeypatch.setenv("PLACEMENT_PREP_CONFIG", str(yaml_path))
        assert load_config().logging.level == "DEBUG"

    def test_store_resolved_path(self):
        store = StoreConfig(db_path="~/test.db")
        resolved = store.resolved_db_path
        assert "~" not in str(resolved)

    def test_numeric_level(self):
        config = load_config(None)
        assert config.logging.numeric_level == 30

    def test_frozen_config(self):
        config = StoreConfig()
        with pytest.raises(AttributeError):
            config.history_key = "changed"


class TestConfigValidation:
    def test_invalid_threshold(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("analysis:\n  short_jd_threshold: -1\n")
        with pytest.raises(ValueError, match="short_jd_threshold"):
            load_config(yaml)

    def test_invalid_top_weak_skills(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("report:\n  top_weak_skills: 0\n")
        with pytest.raises(ValueError, match="top_weak_skills"):
            load_config(yaml)

    def test_invalid_log_level(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("logging:\n  level: LOUD\n")
        with pytest.raises(ValueError, match="level"):
            load_config(yaml)

    def test_empty_history_key(self, tmp_path):
        yaml = tmp_path / "bad.yaml"
        yaml.write_text("store:\n  history_key: '  '\n")
        with pytest.raises(ValueError, match="history_key"):
            load_config(yaml)
