"""Environment configuration interface for content-linter.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def log_level(default: str = "INFO") -> str:
        """Get the logging level.

        Returns:
            Level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", default)

    @staticmethod
    def config_path() -> Path | None:
        """Get the path of the lint configuration file.

        Returns:
            Path to a JSON config file, or None when CONTENT_LINTER_CONFIG is unset
        """
        value = os.getenv("CONTENT_LINTER_CONFIG", "").strip()
        return Path(value) if value else None

    @staticmethod
    def markdown_extensions() -> tuple[str, ...]:
        """Get the file extensions scanned when linting directories.

        Returns:
            Tuple of dotted extensions, defaults to ('.md',)
        """
        raw = os.getenv("CONTENT_LINTER_EXTENSIONS", ".md")
        return tuple(
            e.strip() if e.strip().startswith(".") else f".{e.strip()}"
            for e in raw.split(",")
            if e.strip()
        )


# Singleton instance for convenient access
env = Environment()
