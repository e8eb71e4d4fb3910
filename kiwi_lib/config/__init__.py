"""Configuration package for the container."""

from .config import ContainerConfig, dump_config, load_config, parse_config

__all__ = ["ContainerConfig", "load_config", "parse_config", "dump_config"]
