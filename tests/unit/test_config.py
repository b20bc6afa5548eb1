"""Unit tests for configuration loading."""

import pytest
from prdlint.core.config import (
    AppConfig,
    OutputFormat,
    RulesConfig,
    ScoringConfig,
    load_config,
)
from prdlint.rules import RuleConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv("PRDLINT_MIN_SCORE", raising=False)
    monkeypatch.delenv("PRDLINT_LOG_LEVEL", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        config = AppConfig()

        assert config.scoring.error == 15
        assert config.scoring.min_score == 0
        assert config.rules.categories == []
        assert config.rules.escalation_threshold == 5
        assert config.output.format is OutputFormat.TEXT
        assert config.logging.level == "WARNING"

    def test_from_dict(self):
        config = AppConfig.from_dict({
            "scoring": {"error": 20, "min_score": 60},
            "rules": {"exclude_categories": ["ux"], "max_workers": 4},
            "output": {"format": "json"},
        })

        assert config.scoring.error == 20
        assert config.scoring.min_score == 60
        assert config.rules.exclude_categories == ["ux"]
        assert config.rules.max_workers == 4
        assert config.output.format is OutputFormat.JSON

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Invalid configuration"):
            AppConfig.from_dict({"scoring": {"fatal": 50}})

    def test_unknown_category(self):
        with pytest.raises(RuleConfigurationError):
            AppConfig.from_dict({"rules": {"categories": ["performance"]}})

    def test_negative_weight(self):
        with pytest.raises(RuleConfigurationError):
            AppConfig.from_dict({"scoring": {"info": -1}})

    def test_invalid_threshold(self):
        with pytest.raises(RuleConfigurationError):
            RulesConfig(escalation_threshold=0)

    def test_yaml_round_trip(self, tmp_path):
        config = AppConfig.from_dict({"rules": {"disabled_rules": ["has-accessibility"]}})
        path = tmp_path / "out" / "prdlint.yaml"
        config.save_yaml(path)

        loaded = AppConfig.from_yaml(path)
        assert loaded.to_dict() == config.to_dict()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            AppConfig.from_yaml(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("scoring: [unclosed\n")
        with pytest.raises(ValueError):
            AppConfig.from_yaml(path)

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ValueError, match="mapping"):
            AppConfig.from_yaml(path)

    def test_empty_yaml_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert AppConfig.from_yaml(path).to_dict() == AppConfig().to_dict()

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PRDLINT_MIN_SCORE", "75")
        monkeypatch.setenv("PRDLINT_LOG_LEVEL", "DEBUG")

        config = AppConfig()
        assert config.scoring.min_score == 75
        assert config.logging.level == "DEBUG"

    def test_weights(self):
        weights = ScoringConfig(warning=10).to_weights()
        assert weights.warning == 10


class TestLoadConfig:
    """Tests for load_config search order."""

    def test_defaults_when_nothing_found(self):
        assert load_config().to_dict() == AppConfig().to_dict()

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("scoring:\n  error: 30\n")
        assert load_config(path).scoring.error == 30

    def test_finds_file_in_working_directory(self, tmp_path):
        (tmp_path / "prdlint.yaml").write_text("rules:\n  escalation_threshold: 3\n")
        assert load_config().rules.escalation_threshold == 3

    def test_finds_file_in_config_directory(self, tmp_path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "prdlint.yaml").write_text("output:\n  indent: 4\n")
        assert load_config().output.indent == 4

    def test_finds_file_in_home(self, tmp_path):
        home = tmp_path / "home" / ".prdlint"
        home.mkdir(parents=True)
        (home / "config.yaml").write_text("logging:\n  level: ERROR\n")
        assert load_config().logging.level == "ERROR"
