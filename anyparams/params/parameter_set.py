"""
Ordered, name-unique collection of string-valued parameters.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from ..core.exceptions import DuplicateNameError, FormatError, NotFoundError
from .converter import to_param_str

logger = logging.getLogger(__name__)


def split_token(token: str) -> Tuple[str, str]:
    """
    Split a '<name>=<value>' token.

    The token must contain exactly one '=' and a non-empty name, so '=1'
    is a FormatError; the value may be empty.
    """
    parts = token.split('=')
    if len(parts) != 2 or not parts[0]:
        logger.error(f"Wrong format of the method argument: '{token}' should be in the format: <Name>=<Value>")
        raise FormatError(token)
    return parts[0], parts[1]


class ParameterSet:
    """
    Two index-aligned lists of parameter names and raw string values.

    Built once from '<name>=<value>' tokens, declaration order preserved.
    The only mutation allowed afterwards is change_param().
    """

    def __init__(self, tokens: Optional[Iterable[str]] = None):
        self._names: List[str] = []
        self._values: List[str] = []

        seen = set()
        for token in tokens or ():
            name, value = split_token(token)
            if name in seen:
                logger.error(f"Duplicate parameter: {name}")
                raise DuplicateNameError(name)
            seen.add(name)
            self._names.append(name)
            self._values.append(value)

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> 'ParameterSet':
        return cls(tokens)

    @classmethod
    def from_lists(cls, names: Iterable[str], values: Iterable[str]) -> 'ParameterSet':
        """Pair names with values directly, without validation. Used for subsets of an existing set."""
        param_set = cls()
        param_set._names = list(names)
        param_set._values = list(values)
        return param_set

    @property
    def names(self) -> List[str]:
        return list(self._names)

    @property
    def values(self) -> List[str]:
        return list(self._values)

    def change_param(self, name: str, value: Any) -> None:
        """
        Overwrite the value of an existing parameter.

        The value is serialized with to_param_str(), so it reads back with
        the matching converter. Managers already wrapping this set keep
        their consumption state.

        Raises:
            NotFoundError: If name is not in the set
        """
        for i, existing in enumerate(self._names):
            if existing == name:
                self._values[i] = to_param_str(value)
                logger.debug(f"Parameter '{name}' changed to '{self._values[i]}'")
                return
        logger.error(f"Parameter not found: {name}")
        raise NotFoundError(name)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Raw string value of name, or default."""
        for i, existing in enumerate(self._names):
            if existing == name:
                return self._values[i]
        return default

    def to_tokens(self) -> List[str]:
        return [f"{name}={value}" for name, value in zip(self._names, self._values)]

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(list(zip(self._names, self._values)))

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParameterSet):
            return NotImplemented
        return self._names == other._names and self._values == other._values

    def __repr__(self) -> str:
        return f"ParameterSet({self.to_tokens()!r})"
