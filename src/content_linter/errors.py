"""Exceptions raised by content-linter."""


class ContentLinterError(Exception):
    """Base exception for content-linter."""

    pass


class PreconditionViolation(ContentLinterError, ValueError):
    """A checker was called with arguments outside its contract."""

    pass


class ConfigError(ContentLinterError):
    """Lint configuration could not be read or is malformed."""

    pass


class UnknownRuleError(ConfigError, KeyError):
    """A rule name or alias does not match any known rule."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""
