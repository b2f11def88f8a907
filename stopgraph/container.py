"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(StopGraphService)

        # Testing
        container = Container()
        container.register(GraphSerializerPort, lambda: FakeSerializer())
        serializer = container.resolve(GraphSerializerPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        self._factories[port_type] = factory
        if singleton:
            self._singleton_types.add(port_type)
        else:
            self._singleton_types.discard(port_type)
        self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        if port_type not in self._factories:
            raise KeyError(f"Type not registered: {port_type}")

        if port_type in self._singleton_types:
            if port_type not in self._singletons:
                self._singletons[port_type] = self._factories[port_type]()
            return self._singletons[port_type]

        return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        self._singletons.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.rendering import FoliumMapRenderer
        from .adapters.serialization import RdflibGraphSerializer
        from .ports.rendering import MapRendererPort
        from .ports.serialization import GraphSerializerPort
        from .services import StopGraphService, StopIngestionService

        config = config or get_config()
        container = cls(config=config)

        container.register(GraphSerializerPort, lambda: RdflibGraphSerializer())
        container.register(MapRendererPort, lambda: FoliumMapRenderer())
        container.register(
            StopIngestionService,
            lambda: StopIngestionService(config=config.ingest),
        )

        def create_stop_graph_service() -> StopGraphService:
            return StopGraphService(
                ingestion=container.resolve(StopIngestionService),
                serializer=container.resolve(GraphSerializerPort),
                map_renderer=container.resolve(MapRendererPort),
                output=config.output,
            )

        container.register(StopGraphService, create_stop_graph_service)

        return container
