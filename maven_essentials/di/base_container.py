# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar, Union

from maven_essentials.core.errors import ComponentNotFoundError

TypeVarType = TypeVar('TypeVarType')


class BaseContainer:
    """Base dependency injection container with core functionality"""

    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}
        self.factories: Dict[Union[Type, str], Callable] = {}

    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance

    def register_factory(self, interface: Union[Type[TypeVarType], str], factory: Callable[[], TypeVarType]) -> None:
        """Register a factory function; it is called on every lookup"""
        self.factories[interface] = factory

    def contains(self, interface: Union[Type, str]) -> bool:
        return interface in self.instances or interface in self.factories

    def get(self, interface: Union[Type[TypeVarType], str]) -> TypeVarType:
        """Get an instance of the requested type or string key"""
        if interface in self.instances:
            return self.instances[interface]

        if interface in self.factories:
            return self.factories[interface]()

        name = interface.__name__ if isinstance(interface, type) else interface
        raise ComponentNotFoundError(f"No registration found for {name}")
