"""Environment variable loading from .env files with precedence support."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "preload-hints.toml"

# Recognized variables (all optional; TOML values and defaults apply when unset)
ENVIRONMENT_VARIABLES = {
    "PRELOAD_HINTS_CONFIG": "Custom configuration file path (defaults to preload-hints.toml)",
    "PRELOAD_HINTS_PUBLIC_PATH": "Public path prefix, overrides [output] public_path",
    "PRELOAD_HINTS_BUILD_VERSION": "Association variant (v3 or v4), overrides [output] build_version",
}


def load_environment_variables(dotenv_path: Path | str | None = None) -> None:
    """
    Load environment variables from .env file with automatic detection.

    Environment variables from system environment take precedence over .env file values.
    This function uses python-dotenv's load_dotenv() which respects existing environment
    variables by default (override=False).

    Args:
        dotenv_path: Optional path to .env file. If None, searches for .env file in:
                     - Current working directory
                     - Parent directories (up to 3 levels)
    """
    if dotenv_path is None:
        current = Path.cwd()
        search_paths = [
            current / ".env",
            current.parent / ".env",
            current.parent.parent / ".env",
            current.parent.parent.parent / ".env",
        ]

        for path in search_paths:
            if path.exists():
                dotenv_path = path
                logger.debug(f"Loading .env file from: {path}")
                break

        if dotenv_path is None:
            load_dotenv(override=False)
            return

    dotenv_path = Path(dotenv_path)
    if dotenv_path.exists():
        load_dotenv(dotenv_path, override=False)
        logger.debug(f"Loaded .env file from: {dotenv_path}")
    else:
        logger.debug(f".env file not found at: {dotenv_path}")


def get_env(key: str, default: str | None = None) -> str | None:
    """
    Get environment variable value.

    Checks system environment variables (which take precedence over .env file).

    Args:
        key: Environment variable name
        default: Default value if not found

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def resolve_config_path(config_path: Path | str | None = None) -> Path:
    """
    Pick the configuration file: explicit argument, then PRELOAD_HINTS_CONFIG, then the default.
    """
    if config_path is not None:
        return Path(config_path)
    return Path(get_env("PRELOAD_HINTS_CONFIG") or DEFAULT_CONFIG_PATH)
