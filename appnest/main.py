"""Application setup: configuration, logging and the store."""

import logging
import sys
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from .config import Config, load_config
from .models import Company
from .store import ApplicationStore


def setup_logging(config: Config) -> None:
    """Configure logging for the application."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


class AppNest:
    """Objects the presentation layer needs, built once at startup."""

    def __init__(self, config: Config, store: ApplicationStore):
        self.config = config
        self.store = store

    def new_company(self, name: str, logo_image: Optional[bytes] = None) -> Company:
        return Company(
            name=name,
            logo_key=self.config.default_logo_key,
            logo_image=logo_image,
        )


def create_app(
    config_path: Optional[Path] = None, clock: Callable[[], date] = date.today
) -> AppNest:
    """Load configuration, set up logging and construct an empty store."""
    config = load_config(config_path)
    setup_logging(config)

    logger = logging.getLogger(__name__)
    logger.info(f"Starting AppNest core (log level {config.log_level})")

    return AppNest(config=config, store=ApplicationStore(clock=clock))
