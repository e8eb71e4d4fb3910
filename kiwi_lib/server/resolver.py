"""Resolve container bindings from FastAPI/Starlette request handlers.

The application's container lives on ``app.state.container``. Route
handlers either call `resolve_service` directly or declare a dependency::

    @app.get('/teams')
    def teams(svc: TeamService = Depends(Provide(TeamService))):
        ...
"""
import logging
from typing import Any, Callable, Optional

from fastapi import FastAPI, HTTPException
from starlette.requests import Request

from kiwi_lib.container import Container
from kiwi_lib.container.errors import describe_type

logger = logging.getLogger(__name__)


def install_container(app: FastAPI, container: Container) -> None:
    """Expose ``container`` to request handlers of ``app``."""
    app.state.container = container


def _container_for(request: Request) -> Optional[Container]:
    return getattr(request.app.state, 'container', None)


def resolve_service(request: Request, type_: Any, name: Optional[str] = None) -> Any:
    """Resolve ``type_`` from the application's container.

    A missing container or binding is a server misconfiguration and is
    reported as HTTP 500, whatever the container's ``silent`` setting.
    """
    container = _container_for(request)
    if container is None:
        raise HTTPException(status_code=500, detail="Service container not configured")
    if not container.is_registered(type_, name):
        label = describe_type(type_) if name is None else f"{describe_type(type_)}/{name}"
        logger.error("Service '%s' requested but not registered", label)
        raise HTTPException(status_code=500, detail=f"Service '{label}' not configured")
    return container.resolve(type_, name)


def resolve_optional_service(request: Request, type_: Any, name: Optional[str] = None) -> Any:
    """Like `resolve_service` but returns None instead of failing."""
    container = _container_for(request)
    if container is None or not container.is_registered(type_, name):
        return None
    return container.resolve(type_, name)


def Provide(type_: Any, name: Optional[str] = None) -> Callable[[Request], Any]:
    """Build a FastAPI dependency resolving ``type_`` for each request."""

    def dependency(request: Request) -> Any:
        return resolve_service(request, type_, name)

    return dependency
