"""
Service Container - Dependency Injection Container for Guess The Word
Manages service creation, dependencies, and lifecycle.
"""

from typing import Dict, Any, List, Optional, Callable
import inspect
from enum import Enum


class ServiceLifecycle(Enum):
    """Service lifecycle management options"""
    SINGLETON = "singleton"  # One instance per container
    TRANSIENT = "transient"  # New instance every time


class ServiceDefinition:
    """Definition of how a service should be created"""

    def __init__(
        self,
        name: str,
        factory: Callable,
        dependencies: List[str] = None,
        lifecycle: ServiceLifecycle = ServiceLifecycle.SINGLETON,
        config: Dict[str, Any] = None
    ):
        self.name = name
        self.factory = factory
        self.dependencies = dependencies or []
        self.lifecycle = lifecycle
        self.config = config or {}


class CircularDependencyError(Exception):
    """Raised when circular dependency is detected"""
    pass


class ServiceNotFoundError(Exception):
    """Raised when requested service is not registered"""
    pass


class ServiceContainer:
    """
    Dependency Injection Container for managing services and their dependencies.

    Features:
    - Dependency resolution
    - Circular dependency detection
    - Singleton and transient lifecycle management
    - Configuration injection
    """

    def __init__(self):
        self._services: Dict[str, ServiceDefinition] = {}
        self._instances: Dict[str, Any] = {}
        self._creating: set = set()  # Track services being created (circular detection)
        self._config: Dict[str, Any] = {}

    def register(
        self,
        name: str,
        factory: Callable,
        dependencies: List[str] = None,
        lifecycle: ServiceLifecycle = ServiceLifecycle.SINGLETON,
        config: Dict[str, Any] = None
    ) -> 'ServiceContainer':
        """
        Register a service with the container.

        Args:
            name: Service name for retrieval
            factory: Class or function to create the service
            dependencies: List of service names this service depends on
            lifecycle: How the service instance should be managed
            config: Additional keyword arguments for function factories

        Returns:
            Self for method chaining
        """
        if name in self._services:
            raise ValueError(f"Service '{name}' is already registered")

        if not callable(factory):
            raise ValueError(f"Factory for '{name}' must be callable")

        self._services[name] = ServiceDefinition(
            name=name,
            factory=factory,
            dependencies=dependencies,
            lifecycle=lifecycle,
            config=config
        )
        return self

    def configure_services(self) -> 'ServiceContainer':
        """
        Register all Guess The Word services with their dependencies.
        This method contains the service configuration for the application.
        """
        from src.config.game_settings import GameSettings
        from src.services.error_response_factory import ErrorResponseFactory
        from src.services.game_state_presenter import GameStatePresenter
        from src.services.broadcast_service import BroadcastService
        from src.services.scheduler_service import SocketIOScheduler
        from src.services.session_service import SessionService

        # Error handling and presentation - no dependencies
        self.register('ErrorResponseFactory', ErrorResponseFactory)
        self.register('GameStatePresenter', GameStatePresenter)

        # Game settings and content come from the application config
        self.register('GameSettings', lambda: GameSettings(self._config.get('app_config')))
        self.register('ContentManager', _create_content_manager,
                      config={'words_file': self._config.get('words_file', 'words.yaml')})

        # Countdown ticks run as Socket.IO background tasks unless a scheduler was injected
        if 'Scheduler' not in self._instances:
            self.register('Scheduler', SocketIOScheduler, dependencies=['socketio'])

        # Broadcast service - depends on socketio and presenter
        # Note: socketio will be injected as external dependency
        self.register('BroadcastService', BroadcastService, dependencies=['socketio', 'GameStatePresenter'])

        # Sessions own the controllers
        self.register('SessionService', SessionService, dependencies=['ContentManager', 'GameSettings', 'Scheduler'])

        return self

    def set_external_dependency(self, name: str, instance: Any) -> 'ServiceContainer':
        """
        Set an external dependency that's created outside the container.
        Useful for Flask-SocketIO and similar framework objects.
        """
        self._instances[name] = instance
        return self

    def set_config(self, config: Dict[str, Any]) -> 'ServiceContainer':
        """Set global configuration for the container"""
        self._config.update(config)
        return self

    def get_config(self, name: str, default: Any = None) -> Any:
        """Get a configuration value by name."""
        return self._config.get(name, default)

    def get(self, name: str) -> Any:
        """
        Get a service instance, creating it if necessary.

        Args:
            name: Service name to retrieve

        Returns:
            Service instance

        Raises:
            ServiceNotFoundError: If service is not registered
            CircularDependencyError: If circular dependency detected
        """
        # Check for external dependency or existing singleton first
        if name in self._instances:
            return self._instances[name]

        if name not in self._services:
            raise ServiceNotFoundError(f"Service '{name}' is not registered")

        return self._create_service(name)

    def _create_service(self, name: str) -> Any:
        """
        Create a service instance with dependency injection.
        """
        if name in self._creating:
            cycle = ' -> '.join(list(self._creating) + [name])
            raise CircularDependencyError(f"Circular dependency detected: {cycle}")

        self._creating.add(name)

        try:
            service_def = self._services[name]

            # Resolve dependencies
            dependencies = [self.get(dep_name) for dep_name in service_def.dependencies]

            # Create service instance
            if inspect.isclass(service_def.factory):
                instance = service_def.factory(*dependencies)
            else:
                instance = service_def.factory(*dependencies, **service_def.config)

            # Store singleton instances
            if service_def.lifecycle == ServiceLifecycle.SINGLETON:
                self._instances[name] = instance

            return instance

        finally:
            self._creating.discard(name)

    def has_service(self, name: str) -> bool:
        """Check if a service is registered"""
        return name in self._services or name in self._instances

    def get_service_names(self) -> List[str]:
        """Get list of all registered service names"""
        return list(self._services.keys())

    def validate_dependencies(self) -> Dict[str, List[str]]:
        """
        Validate all service dependencies can be resolved.

        Returns:
            Dictionary mapping service names to lists of missing dependencies
        """
        issues = {}

        for name, service_def in self._services.items():
            missing_deps = [dep for dep in service_def.dependencies if not self.has_service(dep)]
            if missing_deps:
                issues[name] = missing_deps

        return issues

    def clear(self) -> 'ServiceContainer':
        """Clear all services and instances (useful for testing)"""
        self._services.clear()
        self._instances.clear()
        self._creating.clear()
        self._config.clear()
        return self

    def __repr__(self) -> str:
        return f"ServiceContainer(services={len(self._services)}, instances={len(self._instances)})"


def _create_content_manager(words_file: Optional[str] = None):
    from src.content_manager import ContentManager
    return ContentManager(words_file or None)


# Global container instance for the application
_app_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """Get the global application service container"""
    global _app_container
    if _app_container is None:
        _app_container = ServiceContainer()
    return _app_container


def configure_container(socketio=None, config=None, scheduler=None) -> ServiceContainer:
    """
    Configure the global service container with Guess The Word services.

    Args:
        socketio: Flask-SocketIO instance
        config: Application configuration values
        scheduler: Optional scheduler replacing the Socket.IO background tasks

    Returns:
        Configured service container
    """
    container = get_container()
    container.clear()  # Clear any existing configuration

    # Set external dependencies
    if socketio is not None:
        container.set_external_dependency('socketio', socketio)

    if scheduler is not None:
        container.set_external_dependency('Scheduler', scheduler)

    if config is not None:
        container.set_config(config)

    # Configure all services
    container.configure_services()

    return container


def reset_container() -> None:
    """Reset the global container (for testing)"""
    global _app_container
    if _app_container is not None:
        _app_container.clear()
    _app_container = None
