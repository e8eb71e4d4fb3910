"""Container package: the registry and its binding strategies."""
from .container import Container
from .errors import (
    AlreadyRegisteredError,
    ContainerError,
    InvalidProviderError,
    NotRegisteredError,
)
from .providers import Factory

__all__ = [
    "Container",
    "Factory",
    "ContainerError",
    "AlreadyRegisteredError",
    "InvalidProviderError",
    "NotRegisteredError",
]
