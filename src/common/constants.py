"""Shared constants for content-linter.

For environment-based configuration (log level, config file), use the env module:
    from common.env import env
    config_path = env.config_path()
"""

# Rule identifier reported for image file names; consumers of lint output match on it
IMAGE_FILE_KEBAB_RULE_ID = "MD115"
IMAGE_FILE_KEBAB_ALIAS = "image-file-kebab"

# Directories never descended into when linting a tree
EXCLUDED_DIRS: set[str] = {
    ".git",
    ".hg",
    ".svn",
    ".mypy_cache",
    ".pytest_cache",
    ".ruff_cache",
    ".tox",
    ".venv",
    "venv",
    "__pycache__",
    "node_modules",
    "dist",
    "build",
}
