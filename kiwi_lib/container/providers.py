"""Binding strategies stored by the container.

Each provider knows how to produce a value for one (type, name) key:

- `InstanceProvider` returns the value given at registration.
- `FactoryProvider` calls its factory on every lookup.
- `SingletonProvider` calls its factory on the first lookup only and keeps
  the result.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

from .errors import InvalidProviderError

if TYPE_CHECKING:
    from .container import Container

T = TypeVar("T")

Factory = Callable[["Container"], T]

logger = logging.getLogger(__name__)


def _require_factory(factory: Any) -> None:
    if factory is None:
        raise InvalidProviderError("A factory must not be None")
    if not callable(factory):
        raise InvalidProviderError(f"A factory must be callable, got {type(factory).__name__}")


class Provider(ABC, Generic[T]):
    """Produces the value bound to one container key."""

    @abstractmethod
    def get(self, container: "Container") -> T:
        """Return the value for this binding."""


class InstanceProvider(Provider[T]):
    def __init__(self, instance: T):
        if instance is None:
            raise InvalidProviderError("An instance must not be None")
        self.instance = instance

    def get(self, container: "Container") -> T:
        return self.instance


class FactoryProvider(Provider[T]):
    def __init__(self, factory: Factory[T]):
        _require_factory(factory)
        self.factory = factory

    def get(self, container: "Container") -> T:
        return self.factory(container)


class SingletonProvider(Provider[T]):
    """Lazily creates its value once, then forgets the factory."""

    def __init__(self, factory: Factory[T]):
        _require_factory(factory)
        self._factory: Optional[Factory[T]] = factory
        self._instance: Optional[T] = None
        self.created = False

    def get(self, container: "Container") -> T:
        if not self.created:
            factory = self._factory
            assert factory is not None
            self._instance = factory(container)
            self.created = True
            # Release anything the factory closes over.
            self._factory = None
            logger.debug("Created singleton %r", type(self._instance).__name__)
        return self._instance  # type: ignore[return-value]
