"""
Parsing of method descriptions of the form '<method>:<name>=<value>,<name>=<value>'.
"""

import logging
from typing import Iterable, List, Tuple

from ..core.exceptions import FormatError
from .parameter_set import ParameterSet

logger = logging.getLogger(__name__)

METHOD_SEPARATOR = ':'
PARAM_SEPARATOR = ','


def parse_method_desc(desc: str) -> Tuple[str, ParameterSet]:
    """
    Split a method description into the method name and its parameters.

    'sw-graph:NN=10,efConstruction=200' -> ('sw-graph', ParameterSet(['NN=10', 'efConstruction=200']))
    'brute_force' -> ('brute_force', ParameterSet())
    """
    method_name, _, arg_str = desc.partition(METHOD_SEPARATOR)
    method_name = method_name.strip()
    if not method_name:
        logger.error(f"Empty method name in method description: '{desc}'")
        raise FormatError(desc, f"Wrong format of the method description: '{desc}' should be in the format: <Method>[:<Name>=<Value>,...]")

    tokens = arg_str.split(PARAM_SEPARATOR) if arg_str else []
    param_set = ParameterSet(tokens)
    logger.debug(f"Parsed method '{method_name}' with {len(param_set)} parameter(s)")
    return method_name, param_set


def parse_method_descs(descs: Iterable[str]) -> List[Tuple[str, ParameterSet]]:
    """Parse several descriptions; the same method may appear more than once."""
    return [parse_method_desc(desc) for desc in descs]
