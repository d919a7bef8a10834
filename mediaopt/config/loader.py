import logging
from pathlib import Path
from typing import Optional
import yaml
from pydantic import ValidationError
from mediaopt.config.models import AppConfig
from mediaopt.domain.errors import ConfigError

logger = logging.getLogger(__name__)

def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Loads YAML configuration; a missing file yields the defaults."""
    if config_path is None or not config_path.exists():
        if config_path is not None:
            logger.debug(f"Config {config_path} not found, using defaults")
        return AppConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the top level")

    try:
        return AppConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e
