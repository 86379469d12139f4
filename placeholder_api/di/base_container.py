# Standard library imports
from typing import Any, Callable, Dict, Hashable


class BaseContainer:
    """
    Minimal service registry.
    
    Keys are usually interface or use case classes; infrastructure handles
    are registered under string keys. Singletons are stored as-is, factories
    are called on every `get`.
    """
    
    def __init__(self) -> None:
        self._singletons: Dict[Hashable, Any] = {}
        self._factories: Dict[Hashable, Callable[[], Any]] = {}
    
    def register_singleton(self, key: Hashable, instance: Any) -> None:
        self._singletons[key] = instance
    
    def register_factory(self, key: Hashable, factory: Callable[[], Any]) -> None:
        self._factories[key] = factory
    
    def get(self, key: Hashable) -> Any:
        """
        Resolve a registered dependency
        
        Raises:
            KeyError: If nothing is registered under `key`
        """
        if key in self._singletons:
            return self._singletons[key]
        if key in self._factories:
            return self._factories[key]()
        raise KeyError(f"No dependency registered for {key!r}")
