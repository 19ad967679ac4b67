# Standard library imports
from typing import Any, Callable, Dict


class BaseContainer:
    """
    Minimal registry mapping keys (interfaces, classes or names) to
    singleton instances or zero-argument factories.
    """

    def __init__(self) -> None:
        self._singletons: Dict[Any, Any] = {}
        self._factories: Dict[Any, Callable[[], Any]] = {}

    def register_singleton(self, key: Any, instance: Any) -> None:
        """Register a shared instance returned on every lookup"""
        self._singletons[key] = instance

    def register_factory(self, key: Any, factory: Callable[[], Any]) -> None:
        """Register a factory invoked on every lookup"""
        self._factories[key] = factory

    def get(self, key: Any) -> Any:
        """
        Resolve a registration

        Raises:
            ValueError: If nothing is registered under key
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        name = getattr(key, "__name__", key)
        raise ValueError(f"No registration found for {name}")
