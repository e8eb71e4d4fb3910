"""Bootstrap helper for building a configured container.

Applications call `bootstrap_container` once at startup and pass the
returned container to whatever needs it. There is deliberately no module
level instance: each call builds a new, empty container.
"""
import logging
from pathlib import Path
from typing import Optional

from kiwi_lib.config import load_config
from kiwi_lib.container import Container


def bootstrap_container(config_path: Optional[Path] = None, logger: Optional[logging.Logger] = None) -> Container:
    """Load the container config and return a fresh container.

    Parameters
    - config_path: YAML file with ``silent``/``log_level``; missing file means defaults
    - logger: logger for informational messages, defaults to this module's logger
    """
    logger = logger or logging.getLogger(__name__)
    cfg = load_config(config_path)
    container = Container(silent=cfg.silent)
    logger.info("Created container (silent=%s)", cfg.silent)
    return container
