from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional

from kiwi_lib.config import load_config


def configure_logging(config_path: Optional[Path] = None) -> logging.Logger:
    """Configure root logging for an application using the container.

    The level comes from ``log_level`` in the container config file and
    defaults to WARNING. A config file that cannot be parsed also falls back
    to WARNING. Returns a module logger for the caller.
    """
    level = logging.WARNING
    try:
        name = load_config(config_path).log_level
        numeric = getattr(logging, name.upper(), None)
        if isinstance(numeric, int):
            level = numeric
    except ValueError:
        level = logging.WARNING

    # Reconfigure root handlers to use the selected level and format
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s [%(name)s]: %(message)s')
    logger = logging.getLogger(__name__)
    logger.info("Log level set to: %s", logging.getLevelName(level))
    return logger
