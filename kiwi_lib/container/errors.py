"""Exceptions raised by the container.

Collision and miss errors are only raised in strict mode (``silent`` is
False). `InvalidProviderError` is raised regardless of the mode.
"""
from typing import Any, Optional


def describe_type(type_: Any) -> str:
    """Return a readable name for a registration key."""
    if isinstance(type_, type):
        return type_.__qualname__
    return repr(type_)


def registration_message(type_: Any, word: str, name: Optional[str] = None) -> str:
    suffix = '' if name is None else f' for the name `{name}`'
    return f'The type `{describe_type(type_)}` was {word} registered{suffix}'


class ContainerError(Exception):
    """Base class for all container errors."""


class InvalidProviderError(ContainerError, ValueError):
    """Raised when an instance or factory cannot be registered at all."""


class _RegistrationStateError(ContainerError):
    word = ''

    def __init__(self, type_: Any, name: Optional[str] = None):
        self.type_ = type_
        self.name = name
        self.message = registration_message(type_, self.word, name)
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class AlreadyRegisteredError(_RegistrationStateError):
    """A binding already exists for the (type, name) pair."""

    word = 'already'


class NotRegisteredError(_RegistrationStateError, KeyError):
    """No binding exists for the (type, name) pair.

    Subclasses KeyError so callers can treat it like any other lookup miss.
    """

    word = 'not'
