from .resolver import Provide, install_container, resolve_optional_service, resolve_service

__all__ = ["Provide", "install_container", "resolve_service", "resolve_optional_service"]
