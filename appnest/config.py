"""Configuration management."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel

from .models import DEFAULT_LOGO_KEY


class Config(BaseModel):
    """Application configuration."""

    log_level: str = "INFO"
    log_file: Optional[Path] = None
    default_logo_key: str = DEFAULT_LOGO_KEY


_config: Optional[Config] = None


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from YAML file."""
    global _config

    if _config is not None:
        return _config

    if config_path is None:
        config_path = Path(__file__).parent.parent / "config" / "config.yaml"

    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}. "
            "Copy config/config.yaml.example to config/config.yaml and fill in your settings."
        )

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    _config = Config(**data)
    return _config


def get_config() -> Config:
    """Get the loaded configuration."""
    if _config is None:
        return load_config()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next load re-reads the file."""
    global _config
    _config = None
