"""Logging utilities for the HTTP manager."""

import logging
import logging.config
from pathlib import Path
from typing import Optional

import yaml

from ..core.config import HttpClientSettings

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(settings: Optional[HttpClientSettings] = None) -> logging.Logger:
    """Setup logging configuration.

    Loads the YAML dictConfig named by ``settings.log_config_file``
    (relative to the package directory unless absolute). Falls back to
    basic logging at ``settings.log_level`` if the file is missing or
    cannot be applied.

    Args:
        settings: HTTP client settings. If None, will load from environment.

    Returns:
        The package logger.
    """
    settings = settings or HttpClientSettings()
    log_config_path = Path(settings.log_config_file)
    if not log_config_path.is_absolute():
        log_config_path = Path(__file__).parent.parent / log_config_path

    if log_config_path.exists():
        try:
            with open(log_config_path, 'r') as f:
                config = yaml.safe_load(f)
            logging.config.dictConfig(config)
        except Exception as e:
            # Fallback to basic logging if config file fails
            logging.basicConfig(
                level=getattr(logging, settings.log_level.upper()),
                format=DEFAULT_FORMAT
            )
            logging.getLogger(__name__).warning(
                f"Failed to load logging config from {log_config_path}: {e}"
            )
    else:
        logging.basicConfig(
            level=getattr(logging, settings.log_level.upper()),
            format=DEFAULT_FORMAT
        )

    return logging.getLogger("http_manager")
