"""
Service Container

The service lookup capability consumed by the factory, plus a
mapping-backed implementation.

The factory only ever calls ``has(name)`` and ``get(name)``; any object
providing those two methods can be passed as ``service_container``.
"""

import logging
import threading
from typing import Any, Dict, Mapping, Optional, Protocol, runtime_checkable

from .deferred import Deferred
from .exceptions import ServiceNotFoundError

logger = logging.getLogger(__name__)


@runtime_checkable
class ServiceContainer(Protocol):
    """Named service lookup."""

    def has(self, name: str) -> bool:
        ...

    def get(self, name: str) -> Any:
        ...


class MappingServiceContainer:
    """Service container backed by a mapping of names to services.

    Values wrapped in :class:`~objectfactory.deferred.Deferred` are
    providers: they are called on the first ``get()`` and the result is
    cached, so every later lookup returns the same instance.

    Attributes:
        _services: Registered services and providers by name
        _instances: Services created from providers so far
        _lock: Guards provider instantiation, reentrant so providers can
            look up other services

    Example::

        container = MappingServiceContainer({
            'Config': config,
            'Database': Deferred(lambda: Database(config.dsn)),
        })
        construct(spec, {'service_container': container})
    """

    def __init__(self, services: Optional[Mapping[str, Any]] = None):
        self._services: Dict[str, Any] = dict(services or {})
        self._instances: Dict[str, Any] = {}
        self._lock = threading.RLock()

    def has(self, name: str) -> bool:
        return name in self._services

    def get(self, name: str) -> Any:
        """Look up a service by name.

        Args:
            name: Service name

        Returns:
            The service instance

        Raises:
            ServiceNotFoundError: When no service is registered under ``name``
        """
        try:
            service = self._services[name]
        except KeyError:
            registered = ", ".join(sorted(self._services)) or "None"
            raise ServiceNotFoundError(
                f"Service '{name}' is not registered.\n"
                f"Registered services: {registered}"
            ) from None

        if not isinstance(service, Deferred):
            return service

        with self._lock:
            if name not in self._instances:
                logger.debug("Instantiating service %r", name)
                self._instances[name] = service()
            return self._instances[name]

    def register(self, name: str, service: Any) -> None:
        """Register or replace a service (or a Deferred provider)."""
        with self._lock:
            self._services[name] = service
            self._instances.pop(name, None)

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        return len(self._services)
