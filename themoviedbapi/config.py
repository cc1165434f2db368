"""
Client configuration and logging setup.

Settings are resolved in this order (later wins):
- defaults
- optional YAML file (``tmdb:`` and ``logging:`` sections)
- environment variables, including a ``.env`` file if present
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .api_url import TMDB_API_BASE
from .exceptions import ConfigurationError
from .http_client import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ENV_API_KEY = "TMDB_API_KEY"
ENV_BASE_URL = "TMDB_BASE_URL"
ENV_TIMEOUT = "TMDB_TIMEOUT"


class ClientConfig(BaseModel):
    """Settings for TheMovieDbApi."""

    api_key: Optional[str] = Field(None, description="TMDb API v3 key")
    base_url: str = Field(TMDB_API_BASE, description="Root of the TMDb API")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")
    log_level: str = Field("INFO", description="Logging level name")
    log_format: str = Field(DEFAULT_LOG_FORMAT, description="Logging format string")
    log_file: Optional[str] = Field(None, description="Optional log file path")


def load_config(config_path: Optional[Union[str, Path]] = None) -> ClientConfig:
    """
    Load client configuration.

    Args:
        config_path: Optional path to a YAML configuration file

    Returns:
        Resolved ClientConfig

    Raises:
        ConfigurationError: If the YAML file cannot be parsed or holds invalid values
    """
    load_dotenv()

    values: Dict[str, Any] = {}
    raw = _load_yaml(config_path) if config_path else {}

    tmdb_section = _section(raw, "tmdb")
    for key in ("api_key", "base_url", "timeout"):
        if tmdb_section.get(key) is not None:
            values[key] = tmdb_section[key]

    logging_section = _section(raw, "logging")
    for key, target in (("level", "log_level"), ("format", "log_format"), ("file", "log_file")):
        if logging_section.get(key) is not None:
            values[target] = logging_section[key]

    if os.getenv(ENV_API_KEY):
        values["api_key"] = os.getenv(ENV_API_KEY)
    if os.getenv(ENV_BASE_URL):
        values["base_url"] = os.getenv(ENV_BASE_URL)
    if os.getenv(ENV_TIMEOUT):
        values["timeout"] = os.getenv(ENV_TIMEOUT)

    try:
        return ClientConfig(**values)
    except ValueError as e:
        raise ConfigurationError(f"Invalid client configuration: {e}")


def _load_yaml(config_path: Union[str, Path]) -> Dict[str, Any]:
    try:
        with open(config_path, "r") as f:
            loaded = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Configuration file not found: {config_path}, using defaults")
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing configuration: {e}")

    if not isinstance(loaded, dict):
        raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")
    return loaded


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Configuration section '{name}' must be a mapping")
    return section


def setup_logging(config: Optional[ClientConfig] = None) -> None:
    """Configure root logging from the client configuration."""
    config = config or ClientConfig()

    handlers: list = [logging.StreamHandler()]
    if config.log_file:
        log_file = Path(config.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=config.log_format,
        handlers=handlers,
    )
