# anyparams/core/registry.py
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .exceptions import MethodNotFoundError
from ..params.manager import ParameterManager
from ..params.parameter_set import ParameterSet

logger = logging.getLogger(__name__)

MethodFactory = Callable[[ParameterManager], Any]


class MethodRegistry:
    """
    Maps method names to factories that build a method from its parameters.

    A factory receives a ParameterManager and reads whatever it needs from it.
    After the factory returns, the registry checks that every parameter was
    consumed, so an unknown parameter fails the creation instead of being
    ignored.
    """

    def __init__(self, parent: Optional['MethodRegistry'] = None):
        self._factories: Dict[str, MethodFactory] = {}
        self._parent = parent
        logger.debug(f"MethodRegistry initialized{' (with parent)' if parent else ''}.")

    def register(self, name: str, factory: MethodFactory) -> None:
        if name in self._factories:
            logger.info(f"Method '{name}' is already registered. Overwriting.")
        self._factories[name] = factory
        logger.debug(f"Factory '{getattr(factory, '__name__', factory)}' registered for method '{name}'.")

    def is_registered(self, name: str, check_parent: bool = True) -> bool:
        if name in self._factories:
            return True
        if check_parent and self._parent:
            return self._parent.is_registered(name)
        return False

    def registered_names(self) -> List[str]:
        names = list(self._parent.registered_names()) if self._parent else []
        names.extend(name for name in self._factories if name not in names)
        return names

    def get_factory(self, name: str) -> MethodFactory:
        if name in self._factories:
            return self._factories[name]
        if self._parent:
            try:
                return self._parent.get_factory(name)
            except MethodNotFoundError:
                pass  # Continue to throw our own error below
        logger.error(f"No factory found for method '{name}'.")
        raise MethodNotFoundError(f"Method '{name}' is not registered. Known methods: {self.registered_names()}")

    def create(self, name: str, param_set: ParameterSet) -> Any:
        """
        Build method name from param_set.

        Raises:
            MethodNotFoundError: If name is not registered
            UnknownParameterError: If the factory left parameters unconsumed
        """
        factory = self.get_factory(name)
        logger.info(f"Creating method '{name}' with parameters: {param_set.to_tokens()}")
        with ParameterManager(param_set) as pmgr:
            instance = factory(pmgr)
        return instance

    def create_all(self, method_params: Iterable[Tuple[str, ParameterSet]]) -> List[Tuple[str, Any]]:
        return [(name, self.create(name, param_set)) for name, param_set in method_params]

    def reset(self) -> None:
        """Clear all registrations from this registry."""
        self._factories.clear()
        logger.info("MethodRegistry reset - all registrations cleared.")
