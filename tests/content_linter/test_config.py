"""Tests for lint configuration."""

import json

import pytest

from content_linter.config import LintConfig
from content_linter.errors import ConfigError
from content_linter.models import IssueSeverity
from content_linter.rules import ImageFileKebabRule

RULE = ImageFileKebabRule()


class TestLintConfig:
    """Tests for rule enablement and severity."""

    def test_all_rules_enabled_by_default(self):
        """Test that an empty config runs every rule at error severity."""
        config = LintConfig()

        assert config.is_enabled(RULE)
        assert config.severity_for(RULE) == IssueSeverity.ERROR

    def test_rule_id_and_alias_are_case_insensitive(self):
        """Test that a rule can be addressed by id or alias in any case."""
        assert not LintConfig(rules={"md115": False}).is_enabled(RULE)
        assert not LintConfig(rules={"Image-File-Kebab": False}).is_enabled(RULE)

    def test_tag_enables_rule(self):
        """Test that a tag switches on every rule carrying it."""
        config = LintConfig(rules={"images": True}, default=False)

        assert config.is_enabled(RULE)

    def test_rule_name_wins_over_tag(self):
        """Test that a setting for the rule itself beats its tag."""
        config = LintConfig(rules={"images": True, "MD115": False})

        assert not config.is_enabled(RULE)

    def test_object_setting_enables_with_severity(self):
        """Test that an object value enables the rule and sets severity."""
        config = LintConfig(rules={"MD115": {"severity": "info"}}, default=False)

        assert config.is_enabled(RULE)
        assert config.severity_for(RULE) == IssueSeverity.INFO

    def test_only(self):
        """Test the single-rule config."""
        config = LintConfig.only("MD115")

        assert config.is_enabled(RULE)
        assert config.default is False

    @pytest.mark.parametrize("value", ["yes", 1, None, ["MD115"]])
    def test_invalid_setting_rejected(self, value):
        """Test that settings other than bool or object are rejected."""
        with pytest.raises(ConfigError):
            LintConfig(rules={"MD115": value})

    def test_invalid_severity_rejected(self):
        """Test that unknown severities are rejected."""
        with pytest.raises(ConfigError, match="severity"):
            LintConfig(rules={"MD115": {"severity": "fatal"}})

    @pytest.mark.parametrize("severity", [["warning"], {"level": "info"}, 2])
    def test_non_string_severity_rejected(self, severity):
        """Test that severities of the wrong type are a ConfigError."""
        with pytest.raises(ConfigError, match="severity"):
            LintConfig(rules={"MD115": {"severity": severity}})

    def test_load_rejects_list_severity(self, tmp_path):
        """Test a config file with a list severity fails cleanly."""
        path = tmp_path / "lint.json"
        path.write_text('{"MD115": {"severity": ["warning"]}}', encoding="utf-8")

        with pytest.raises(ConfigError):
            LintConfig.load(path)


class TestLoad:
    """Tests for reading config files."""

    def test_load_valid_file(self, tmp_path):
        """Test loading a markdownlint-style JSON config."""
        path = tmp_path / "lint.json"
        path.write_text(
            json.dumps(
                {
                    "$schema": "https://example.com/schema.json",
                    "default": False,
                    "image-file-kebab": {"severity": "warning"},
                }
            ),
            encoding="utf-8",
        )

        config = LintConfig.load(path)

        assert config.default is False
        assert config.is_enabled(RULE)
        assert config.severity_for(RULE) == IssueSeverity.WARNING

    def test_missing_file(self, tmp_path):
        """Test that a missing file is a ConfigError."""
        with pytest.raises(ConfigError, match="Cannot read config"):
            LintConfig.load(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        """Test that malformed JSON is a ConfigError."""
        path = tmp_path / "lint.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError, match="not valid JSON"):
            LintConfig.load(path)

    def test_non_object(self, tmp_path):
        """Test that the top level must be an object."""
        path = tmp_path / "lint.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(ConfigError, match="JSON object"):
            LintConfig.load(path)

    def test_non_bool_default(self, tmp_path):
        """Test that 'default' must be a boolean."""
        path = tmp_path / "lint.json"
        path.write_text('{"default": "off"}', encoding="utf-8")

        with pytest.raises(ConfigError, match="default"):
            LintConfig.load(path)


class TestFromEnv:
    """Tests for config discovery through the environment."""

    def test_defaults_without_env(self, monkeypatch):
        """Test that no CONTENT_LINTER_CONFIG means the default config."""
        monkeypatch.delenv("CONTENT_LINTER_CONFIG", raising=False)

        config = LintConfig.from_env()

        assert config.rules == {}
        assert config.default is True

    def test_loads_file_from_env(self, tmp_path, monkeypatch):
        """Test that CONTENT_LINTER_CONFIG points at the config file."""
        path = tmp_path / "lint.json"
        path.write_text('{"MD115": false}', encoding="utf-8")
        monkeypatch.setenv("CONTENT_LINTER_CONFIG", str(path))

        config = LintConfig.from_env()

        assert not config.is_enabled(RULE)
