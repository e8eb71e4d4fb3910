"""kiwi_lib: a small service locator / dependency injection container."""
from .annotations import Inject, Named, inject
from .container import (
    AlreadyRegisteredError,
    Container,
    ContainerError,
    Factory,
    InvalidProviderError,
    NotRegisteredError,
)

__all__ = [
    "Container",
    "Factory",
    "ContainerError",
    "AlreadyRegisteredError",
    "InvalidProviderError",
    "NotRegisteredError",
    "Inject",
    "inject",
    "Named",
]
