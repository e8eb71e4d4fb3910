"""Container settings loaded from a YAML file.

The file is optional. Recognised keys::

    silent: false
    log_level: INFO

The ``KIWI_SILENT`` environment variable overrides ``silent``.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Optional, Union

import yaml

logger = logging.getLogger(__name__)

SILENT_ENV = 'KIWI_SILENT'
DEFAULT_CONFIG_PATH = Path('kiwi.yml')

_TRUE = ('1', 'true', 'yes', 'on')
_FALSE = ('0', 'false', 'no', 'off')


@dataclass
class ContainerConfig:
    silent: bool = False
    log_level: str = 'WARNING'


def _parse_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in _TRUE + _FALSE:
        return value.strip().lower() in _TRUE
    raise ValueError(f"invalid config format: '{field}' must be a boolean")


def parse_config(raw: Union[str, bytes, None]) -> ContainerConfig:
    """Build a ContainerConfig from YAML text. Empty text gives the defaults."""
    if isinstance(raw, bytes):
        raw = raw.decode('utf-8')
    try:
        data: Any = yaml.safe_load(raw or '')
    except yaml.YAMLError as e:
        raise ValueError("invalid config format: parse error") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("invalid config format: expected mapping")

    cfg = ContainerConfig()
    if 'silent' in data:
        cfg.silent = _parse_bool(data['silent'], 'silent')
    if data.get('log_level'):
        cfg.log_level = str(data['log_level']).upper()
    return cfg


def load_config(path: Optional[Path] = None) -> ContainerConfig:
    """Load settings from ``path``, falling back to defaults when it is missing."""
    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if cfg_path.exists():
        with cfg_path.open('r', encoding='utf-8') as f:
            cfg = parse_config(f.read())
        logger.debug('Loaded container config from %s', cfg_path)
    else:
        cfg = ContainerConfig()

    env = os.environ.get(SILENT_ENV)
    if env:
        cfg.silent = _parse_bool(env, SILENT_ENV)
    return cfg


def dump_config(cfg: ContainerConfig) -> str:
    return yaml.safe_dump(asdict(cfg), sort_keys=False)
