# backend/thumbnail_api/dependencies/registry.py
"""
Service Registry for process-wide singletons.

Instances are built lazily on first request, so the app behaves the same
whether or not the lifespan handler has run (e.g. TestClient used without
a context manager). Services that hold resources register a teardown
callable which the lifespan invokes on shutdown.
"""

from threading import Lock
from typing import Any, Callable, Dict, Optional


class ServiceRegistry:
    """Thread-safe lazy singleton registry with optional per-service teardown."""

    def __init__(self) -> None:
        self._instances: Dict[str, Any] = {}
        self._factories: Dict[str, Callable[[], Any]] = {}
        self._teardowns: Dict[str, Callable[[Any], None]] = {}
        self._lock = Lock()

    def register_factory(
        self,
        service_name: str,
        factory: Callable[[], Any],
        teardown: Optional[Callable[[Any], None]] = None,
    ) -> None:
        """
        Register how to build (and optionally release) a service.

        Args:
            service_name: Unique name for the service
            factory: Zero-argument callable returning the instance
            teardown: Called with the instance when it is shut down
        """
        with self._lock:
            self._factories[service_name] = factory
            if teardown is not None:
                self._teardowns[service_name] = teardown

    def get_service(self, service_name: str) -> Any:
        """
        Return the live instance, building it on first use.

        Raises:
            KeyError: If no factory is registered for the service
        """
        with self._lock:
            instance = self._instances.get(service_name)
            if instance is not None:
                return instance

            try:
                factory = self._factories[service_name]
            except KeyError:
                raise KeyError(f"No factory registered for service: {service_name}") from None

            instance = factory()
            self._instances[service_name] = instance
            return instance

    def is_instantiated(self, service_name: str) -> bool:
        with self._lock:
            return service_name in self._instances

    def replace_service(self, service_name: str, instance: Any) -> None:
        """Install a ready-made instance (used by tests)."""
        with self._lock:
            self._instances[service_name] = instance

    def shutdown_service(self, service_name: str) -> bool:
        """
        Drop a live instance and run its teardown.

        The next get_service call builds a fresh instance.

        Returns:
            True if an instance existed and was shut down
        """
        with self._lock:
            instance = self._instances.pop(service_name, None)
            teardown = self._teardowns.get(service_name)

        if instance is None:
            return False
        if teardown is not None:
            teardown(instance)
        return True

    def shutdown_all(self) -> None:
        """Shut down every live instance."""
        with self._lock:
            names = list(self._instances)
        for name in names:
            self.shutdown_service(name)


# Global service registry instance
_service_registry = ServiceRegistry()


def get_registry() -> ServiceRegistry:
    return _service_registry
