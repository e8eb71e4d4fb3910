"""The container: a registry of bindings keyed by (name, type).

Bindings are stored in a two-level mapping. The outer key is the optional
name (``None`` is its own slot and never matches named entries), the inner
key is the type the binding was registered under. Lookups match keys
exactly; a value registered under ``Animal`` is not found by asking for
``Dog`` or ``object``.

The container holds no lock. Callers sharing one container between threads
must serialize access themselves. Factories run synchronously and may call
back into the same container to resolve their own dependencies.
"""
from __future__ import annotations

import inspect
import logging
import typing
from typing import Any, Dict, Optional, Type, TypeVar, Union, overload

from .errors import AlreadyRegisteredError, NotRegisteredError
from .providers import Factory, FactoryProvider, InstanceProvider, Provider, SingletonProvider

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _factory_return_type(factory: Any) -> Any:
    """Return the type a factory is annotated to produce, or None."""
    if inspect.isclass(factory):
        return factory
    try:
        hints = typing.get_type_hints(factory)
    except (NameError, TypeError):
        hints = getattr(factory, '__annotations__', None) or {}
    ret = hints.get('return')
    if ret is None or ret is type(None) or isinstance(ret, str):
        return None
    return ret


class Container:
    """A simple object container.

    ``silent`` controls what happens when the same type is registered twice
    under the same name, or when a type that was never registered is
    resolved or unregistered. When False (the default) these raise
    `AlreadyRegisteredError` / `NotRegisteredError`. When True the second
    registration replaces the first, `resolve` returns None and `unregister`
    does nothing. The flag may be flipped at any time.

    Registering ``None`` as an instance or factory always raises
    `InvalidProviderError`.
    """

    def __init__(self, silent: bool = False) -> None:
        self.silent = silent
        self._named_providers: Dict[Optional[str], Dict[Any, Provider[Any]]] = {}

    def register_instance(self, instance: T, name: Optional[str] = None, *, as_type: Any = None) -> None:
        """Register an already built object.

        The object is registered under ``as_type`` when given (usually a
        supertype or protocol of the object), otherwise under its own class.
        If ``name`` is set, the same name must be passed to `resolve`.
        """
        provider = InstanceProvider(instance)
        key = as_type if as_type is not None else type(instance)
        self._set_provider(key, name, provider)

    def register_factory(self, factory: Factory[T], name: Optional[str] = None, *, as_type: Any = None) -> None:
        """Register a factory called with this container on every `resolve`."""
        provider = FactoryProvider(factory)
        self._set_provider(self._factory_key(factory, as_type), name, provider)

    def register_singleton(self, factory: Factory[T], name: Optional[str] = None, *, as_type: Any = None) -> None:
        """Register a factory called only the first time its type is resolved.

        The result is cached and the factory is dropped afterwards.
        """
        provider = SingletonProvider(factory)
        self._set_provider(self._factory_key(factory, as_type), name, provider)

    @overload
    def resolve(self, type_: Type[T], name: Optional[str] = None) -> Optional[T]: ...

    @overload
    def resolve(self, type_: Any, name: Optional[str] = None) -> Any: ...

    def resolve(self, type_: Any, name: Optional[str] = None) -> Any:
        """Return the value bound to ``type_`` (and ``name``).

        Raises `NotRegisteredError` on a miss unless ``silent`` is set, in
        which case None is returned.
        """
        provider = self._named_providers.get(name, {}).get(type_)
        if not self._check(provider is not None, NotRegisteredError, type_, name):
            return None
        return provider.get(self)  # type: ignore[union-attr]

    def __call__(self, type_: Any, name: Optional[str] = None) -> Any:
        return self.resolve(type_, name)

    def unregister(self, type_: Any, name: Optional[str] = None) -> None:
        """Remove the binding for ``type_`` (and ``name``)."""
        providers = self._named_providers.get(name)
        registered = providers is not None and type_ in providers
        if not self._check(registered, NotRegisteredError, type_, name):
            return
        del providers[type_]  # type: ignore[index]
        if not providers:
            del self._named_providers[name]
        logger.debug("Unregistered %r (name=%r)", type_, name)

    def is_registered(self, type_: Any, name: Optional[str] = None) -> bool:
        return type_ in self._named_providers.get(name, {})

    def clear(self) -> None:
        """Remove every binding. After this the container is empty."""
        self._named_providers.clear()
        logger.debug("Cleared container")

    def _factory_key(self, factory: Any, as_type: Any) -> Any:
        if as_type is not None:
            return as_type
        key = _factory_return_type(factory)
        if key is None:
            raise TypeError(
                "Cannot infer the registered type from the factory; "
                "annotate its return type or pass as_type="
            )
        return key

    def _set_provider(self, type_: Any, name: Optional[str], provider: Provider[Any]) -> None:
        providers = self._named_providers.get(name)
        free = providers is None or type_ not in providers
        self._check(free, AlreadyRegisteredError, type_, name)
        self._named_providers.setdefault(name, {})[type_] = provider
        logger.debug("Registered %s for %r (name=%r)", type(provider).__name__, type_, name)

    def _check(self, ok: bool, error: Type[Union[AlreadyRegisteredError, NotRegisteredError]], type_: Any, name: Optional[str]) -> bool:
        """Shared collision/miss policy.

        Returns ``ok`` when the condition holds or the container is silent,
        raises ``error`` otherwise.
        """
        if ok:
            return True
        exc = error(type_, name)
        if not self.silent:
            raise exc
        logger.warning("Ignored in silent mode: %s", exc.message)
        return False


