"""Markers read by code generators that emit container registrations.

They carry no behaviour: the container never looks at them. Typical use is
inside ``typing.Annotated`` on constructor parameters::

    class Service:
        @inject
        def __init__(self, repo: Annotated[Repository, Named('primary')]):
            ...
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Inject:
    """Marks the constructor a factory should be generated for."""

    def __call__(self, func):
        # Usable as a no-op decorator as well as a plain marker value.
        return func


inject = Inject()


@dataclass(frozen=True)
class Named:
    """Names the dependency a constructor parameter should be resolved from."""

    name: str

    def __post_init__(self) -> None:
        if self.name is None:
            raise ValueError("Named requires a name")
