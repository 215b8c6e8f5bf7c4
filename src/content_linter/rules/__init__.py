"""Built-in lint rules and lookup by name or alias."""

from collections.abc import Iterable

from ..errors import UnknownRuleError
from .image_file_kebab import ImageFileKebabRule

RULES = (ImageFileKebabRule(),)


def rule_table(rules: Iterable = RULES) -> dict:
    """Map every rule name and alias (upper-cased) to its rule.

    Raises:
        ValueError: two rules share a name
    """
    table = {}
    for rule in rules:
        for name in rule.names:
            key = name.upper()
            if key in table and table[key] is not rule:
                raise ValueError(f"Duplicate rule name '{name}'")
            table[key] = rule
    return table


def get_rule(name: str, rules: Iterable = RULES):
    """Look up a rule by any of its names, case-insensitively.

    Raises:
        UnknownRuleError: no rule has that name
    """
    try:
        return rule_table(rules)[name.upper()]
    except KeyError:
        raise UnknownRuleError(f"Unknown rule '{name}'") from None


__all__ = ["RULES", "ImageFileKebabRule", "get_rule", "rule_table"]
