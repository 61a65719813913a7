"""
Typed, consumption-tracking access to a ParameterSet.

A ParameterManager hands out typed values and remembers which names were
read. finish() fails if any parameter of the underlying set was never
consumed, so a misspelled or stale parameter cannot be silently ignored.

Typical use::

    with ParameterManager(param_set) as pmgr:
        nn = pmgr.get_required('NN', int)
        ef = pmgr.get_optional('efSearch', 20)
        inner = pmgr.extract_except(['NN', 'efSearch'])
"""

import logging
from typing import Any, Iterable, List, Optional, Set

from ..core.exceptions import (
    InternalInvariantError,
    MissingRequiredError,
    UnknownParameterError,
)
from ..core.logging_setup import PARAM_LEVEL
from .converter import convert_str_to_value
from .parameter_set import ParameterSet

logger = logging.getLogger(__name__)


class ParameterManager:
    """
    Wraps a ParameterSet and tracks which of its names have been consumed.

    The manager holds a regular reference to the set, so the set lives at
    least as long as the manager. The manager is not thread-safe.
    """

    def __init__(self, param_set: ParameterSet):
        if len(param_set._names) != len(param_set._values):
            logger.critical("Bug: different # of parameters and values")
            raise InternalInvariantError(
                f"Different number of parameters ({len(param_set._names)}) "
                f"and values ({len(param_set._values)})"
            )
        self._params = param_set
        self._seen: Set[str] = set()
        self._finished = False

    @property
    def params(self) -> ParameterSet:
        return self._params

    @property
    def seen(self) -> frozenset:
        return frozenset(self._seen)

    def unseen(self) -> List[str]:
        """Names not consumed so far, in declaration order."""
        return [name for name in self._params._names if name not in self._seen]

    def get_required(self, name: str, param_type: Any = str) -> Any:
        """
        Return the value of name converted to param_type.

        Raises:
            MissingRequiredError: If name is not in the set
            ConversionError: If the value is not an exact param_type
        """
        found, value = self._get_param(name, param_type)
        if not found:
            logger.error(f"Mandatory parameter: {name} is missing!")
            raise MissingRequiredError(name)
        return value

    def get_optional(self, name: str, default: Any = None, param_type: Any = None) -> Any:
        """
        Return the value of name converted to param_type, or default if absent.

        param_type defaults to the type of default (str if default is None).
        For instance::

            val = pmgr.get_optional('name', 3)
            # if 'name' is not present, val == 3

        Raises:
            ConversionError: If the value is present but not an exact param_type
        """
        if param_type is None:
            param_type = str if default is None else type(default)
        found, value = self._get_param(name, param_type)
        if not found:
            logger.log(PARAM_LEVEL, f"@@@ Parameter: {name}={default} (default) @@@")
            return default
        return value

    def extract_except(self, except_list: Iterable[str]) -> ParameterSet:
        """
        Return a new ParameterSet with every entry whose name is not in except_list.

        The extracted names are marked as consumed here; the nested component
        receiving the subset checks them again with its own manager.
        """
        excluded = set(except_list)
        names, values = [], []
        for name, value in zip(self._params._names, self._params._values):
            if name not in excluded:
                names.append(name)
                values.append(value)
                self._seen.add(name)
        logger.debug(f"Extracted {len(names)} parameter(s) except {sorted(excluded)}: {names}")
        return ParameterSet.from_lists(names, values)

    def finish(self) -> None:
        """
        Check that every parameter of the set has been consumed.

        Raises:
            UnknownParameterError: Listing every unconsumed name
        """
        unknown = self.unseen()
        for name in unknown:
            logger.error(f"Unknown parameter: {name}")
        self._finished = True
        if unknown:
            logger.critical("Unknown parameters found, aborting!")
            raise UnknownParameterError(unknown)

    def _get_param(self, name: str, param_type: Any):
        for i, existing in enumerate(self._params._names):
            if existing == name:
                self._seen.add(name)
                value = convert_str_to_value(self._params._values[i], param_type, name)
                logger.log(PARAM_LEVEL, f"@@@ Parameter: {name}={value} @@@")
                return True, value
        return False, None

    def __enter__(self) -> 'ParameterManager':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> Optional[bool]:
        # An exception already in flight wins over the completeness check.
        if exc_type is None and not self._finished:
            self.finish()
        return None

    def __repr__(self) -> str:
        return f"ParameterManager(params={self._params!r}, seen={sorted(self._seen)!r})"
