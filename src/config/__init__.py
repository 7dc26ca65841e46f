"""
Configuration Module.

Configuration is loaded from config.yml and supports Docker secrets for the
Notion integration token.

Usage:
    >>> from config import load_config
    >>> config = load_config()
    >>> database_id = config.get("notion", {}).get("database_id")
"""
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional


logger = logging.getLogger(__name__)
CONFIG_FILENAME = "config.yml"


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from config.yml file.

    Args:
        config_path: Path to config.yml file. If None, looks in current directory
                    and parent directories, then in the project root.

    Returns:
        Dictionary containing configuration settings. Defaults are returned
        when the file is missing, unparsable, or not a mapping.

    Example:
        >>> config = load_config()
        >>> token_file = config.get("notion", {}).get("token_file")
    """
    if config_path is None:
        current = Path.cwd()
        for parent in [current] + list(current.parents):
            candidate = parent / CONFIG_FILENAME
            if candidate.exists():
                config_path = str(candidate)
                break

        if config_path is None:
            project_root = Path(__file__).parent.parent.parent
            candidate = project_root / CONFIG_FILENAME
            if candidate.exists():
                config_path = str(candidate)

    if config_path is None:
        logger.warning(f"{CONFIG_FILENAME} not found, using default configuration")
        return get_default_config()

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f)
            if not isinstance(config, dict):
                logger.warning("Configuration root must be a mapping, using default configuration")
                return get_default_config()
            logger.info(f"Loaded configuration from {config_path}")
            return config
    except FileNotFoundError:
        logger.warning(f"Configuration file not found: {config_path}")
        return get_default_config()
    except yaml.YAMLError as e:
        logger.error(f"Error parsing configuration file: {e}")
        return get_default_config()


def get_default_config() -> Dict[str, Any]:
    """Return default configuration when config.yml is not available.

    Returns:
        Dictionary with default configuration values
    """
    return {
        "notion": {
            "token_file": "/run/secrets/notion_token",
            "database_id": None,
            "timeout_ms": 60000,
        },
        "blog": {
            "posts_path": "./data/posts",
        },
    }


def read_secret_file(filepath: str) -> Optional[str]:
    """Read a Docker secret from a file.

    Docker secrets are mounted as files in /run/secrets/ directory.

    Args:
        filepath: Path to the secret file

    Returns:
        Content of the secret file (stripped of whitespace), or None if the
        file doesn't exist or can't be read

    Example:
        >>> token = read_secret_file("/run/secrets/notion_token")
    """
    try:
        with open(filepath, "r") as f:
            return f.read().strip()
    except FileNotFoundError:
        logger.debug(f"Secret file not found: {filepath}")
        return None
    except OSError as e:
        logger.error(f"Error reading secret file {filepath}: {e}")
        return None
