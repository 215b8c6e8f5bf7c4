"""Lint configuration: which rules run and at what severity.

The file format follows markdownlint's: a JSON object keyed by rule name,
alias or tag, with ``true``/``false`` or an object of rule settings, plus an
optional ``"default"`` for everything not mentioned::

    {"default": false, "image-file-kebab": {"severity": "warning"}}
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from common.env import env
from common.logger import get_logger

from .errors import ConfigError
from .models import IssueSeverity

logger = get_logger(__name__)

_SEVERITIES = {s.value for s in IssueSeverity}


def _parse_setting(key: str, value: Any) -> bool | dict:
    if isinstance(value, bool):
        return value
    if not isinstance(value, dict):
        raise ConfigError(f"Setting for '{key}' must be true, false or an object")
    severity = value.get("severity", IssueSeverity.ERROR.value)
    if not isinstance(severity, str) or severity not in _SEVERITIES:
        raise ConfigError(f"'{key}.severity' must be one of error|warning|info")
    return value


@dataclass
class LintConfig:
    """Rule enablement keyed by rule name, alias or tag."""

    rules: dict[str, bool | dict] = field(default_factory=dict)
    default: bool = True

    def __post_init__(self):
        self.rules = {
            key.upper(): _parse_setting(key, value) for key, value in self.rules.items()
        }

    def _setting(self, rule) -> bool | dict | None:
        for name in rule.names:
            if name.upper() in self.rules:
                return self.rules[name.upper()]
        for tag in getattr(rule, "tags", ()):
            if tag.upper() in self.rules:
                return self.rules[tag.upper()]
        return None

    def is_enabled(self, rule) -> bool:
        """Check whether rule should run."""
        setting = self._setting(rule)
        if setting is None:
            return self.default
        return setting if isinstance(setting, bool) else True

    def severity_for(self, rule) -> IssueSeverity:
        """Severity to report the rule's violations at."""
        setting = self._setting(rule)
        if isinstance(setting, dict):
            return IssueSeverity(setting.get("severity", IssueSeverity.ERROR.value))
        return IssueSeverity.ERROR

    @classmethod
    def only(cls, name: str) -> "LintConfig":
        """Config that enables a single rule and nothing else."""
        return cls(rules={name: True}, default=False)

    @classmethod
    def load(cls, file_path: Path) -> "LintConfig":
        """Load config from a JSON file.

        Args:
            file_path: Path to the config file

        Returns:
            LintConfig read from the file

        Raises:
            ConfigError: the file cannot be read or is not a valid config
        """
        try:
            raw = json.loads(file_path.read_text(encoding="utf-8"))
        except OSError as e:
            raise ConfigError(f"Cannot read config {file_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Config {file_path} is not valid JSON: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config {file_path} must be a JSON object")

        raw.pop("$schema", None)
        default = raw.pop("default", True)
        if not isinstance(default, bool):
            raise ConfigError("'default' must be true or false")

        logger.debug(f"Loaded lint config from {file_path}")
        return cls(rules=raw, default=default)

    @classmethod
    def from_env(cls) -> "LintConfig":
        """Load the file named by CONTENT_LINTER_CONFIG, or use defaults."""
        path = env.config_path()
        if path is None:
            return cls()
        return cls.load(path)
