"""Configuration management for rbxstats"""

import os
import json
import logging
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv

from ..client import RbxStatsClient, RbxStatsError, DEFAULT_BASE_URL

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "api_key": None,
    "base_url": DEFAULT_BASE_URL,
    "timeout": None,  # seconds, None blocks indefinitely
    "strict": False,
}


class ConfigError(RbxStatsError):
    """Configuration is missing or unusable"""


def get_config_path() -> Path:
    """Get the configuration file path"""
    # Check for local config first
    local_config = Path(".rbxstatsrc")
    if local_config.exists():
        return local_config

    # Then check home directory
    home_config = Path.home() / ".rbxstatsrc"
    return home_config


def _as_timeout(value: Any, source: str) -> Optional[float]:
    """Coerce a timeout setting to seconds, ignoring unusable values"""
    if value is None:
        return None
    if isinstance(value, bool):
        logger.warning("Ignoring non-numeric timeout from %s", source)
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring non-numeric timeout from %s", source)
        return None
    if timeout <= 0:
        logger.warning("Ignoring non-positive timeout from %s", source)
        return None
    return timeout


def _as_bool(value: Any, source: str) -> bool:
    """Accept real booleans and the strings "true"/"false" """
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    if value is not None:
        logger.warning("Ignoring non-boolean strict setting from %s", source)
    return False


def load_config() -> Dict[str, Any]:
    """Load configuration from file and environment"""
    config = DEFAULT_CONFIG.copy()

    # Load from config file if it exists
    config_path = get_config_path()
    if config_path.exists():
        try:
            with open(config_path, "r") as f:
                file_config = json.load(f)
            if not isinstance(file_config, dict):
                raise ValueError("expected a JSON object")
            config.update(file_config)
        except (ValueError, OSError) as e:
            logger.warning("Ignoring invalid config file %s: %s", config_path, e)

    config["timeout"] = _as_timeout(config.get("timeout"), str(config_path))
    config["strict"] = _as_bool(config.get("strict"), str(config_path))

    # Override with environment variables
    if os.getenv("RBXSTATS_API_KEY"):
        config["api_key"] = os.getenv("RBXSTATS_API_KEY")
    if os.getenv("RBXSTATS_BASE_URL"):
        config["base_url"] = os.getenv("RBXSTATS_BASE_URL")
    if os.getenv("RBXSTATS_TIMEOUT"):
        timeout = _as_timeout(os.getenv("RBXSTATS_TIMEOUT"), "RBXSTATS_TIMEOUT")
        if timeout is not None:
            config["timeout"] = timeout

    return config


def save_config(config: Dict[str, Any], path: Optional[Path] = None):
    """Save configuration to file"""
    config_path = path or get_config_path()
    with open(config_path, "w") as f:
        json.dump(config, f, indent=2)


def get_client(api_key: Optional[str] = None) -> RbxStatsClient:
    """Get a configured RbxStats client"""
    config = load_config()

    api_key = api_key or config.get("api_key")
    if not api_key:
        raise ConfigError(
            "No API key set. Use --api-key, RBXSTATS_API_KEY or ~/.rbxstatsrc"
        )

    return RbxStatsClient(
        api_key,
        base_url=config.get("base_url") or DEFAULT_BASE_URL,
        timeout=config["timeout"],
        strict=config["strict"],
    )
