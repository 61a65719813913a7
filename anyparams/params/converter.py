"""
String to typed-value conversion for parameter values.

Every converter must consume the whole string: partial parses such as
"12x" as an integer are rejected with a ConversionError.
"""

import logging
import math
import re
from typing import Any, Callable, Dict, Optional

import numpy as np

from ..core.exceptions import ConversionError

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r'[+-]?[0-9]+')
_FLOAT_RE = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')

_TRUE_STRINGS = ('1', 'true')
_FALSE_STRINGS = ('0', 'false')

Converter = Callable[[str], Any]


def _to_str(s: str) -> str:
    return s


def _to_int(s: str) -> int:
    if not _INT_RE.fullmatch(s):
        raise ValueError(f"not an integer: {s!r}")
    return int(s)


def _to_float(s: str) -> float:
    if not _FLOAT_RE.fullmatch(s):
        raise ValueError(f"not a number: {s!r}")
    value = float(s)
    if math.isinf(value):
        raise ValueError(f"out of range: {s!r}")
    return value


def _to_bool(s: str) -> bool:
    lowered = s.lower()
    if lowered in _TRUE_STRINGS:
        return True
    if lowered in _FALSE_STRINGS:
        return False
    raise ValueError(f"not a boolean: {s!r}")


def _numpy_integer_converter(param_type) -> Converter:
    info = np.iinfo(param_type)

    def convert(s: str):
        value = _to_int(s)
        if value < info.min or value > info.max:
            raise ValueError(f"{value} out of range [{info.min}, {info.max}]")
        return param_type(value)

    return convert


def _numpy_floating_converter(param_type) -> Converter:
    info = np.finfo(param_type)

    def convert(s: str):
        value = _to_float(s)
        if abs(value) > info.max:
            raise ValueError(f"{value} out of range [{info.min}, {info.max}]")
        return param_type(value)

    return convert


def _exact_converter(param_type) -> Converter:
    # Unregistered types must read back to the very same string.
    def convert(s: str):
        try:
            value = param_type(s)
        except Exception as e:
            raise ValueError(f"{type(e).__name__}: {e}") from e
        if str(value) != s:
            raise ValueError(f"{s!r} is not an exact representation (reads back as {str(value)!r})")
        return value

    return convert


_CONVERTERS: Dict[Any, Converter] = {
    str: _to_str,
    int: _to_int,
    float: _to_float,
    bool: _to_bool,
    np.bool_: lambda s: np.bool_(_to_bool(s)),
}


def register_converter(param_type: Any, converter: Converter) -> None:
    """
    Register (or replace) the converter used for param_type.

    The converter receives the raw string and must either return the typed
    value or raise ValueError/TypeError if the string is not an exact
    representation of that type.
    """
    if param_type in _CONVERTERS:
        logger.debug(f"Converter for '{getattr(param_type, '__name__', param_type)}' is already registered. Overwriting.")
    _CONVERTERS[param_type] = converter


def get_converter(param_type: Any) -> Converter:
    """Return the converter for param_type, falling back to an exact round trip through the type itself."""
    converter = _CONVERTERS.get(param_type)
    if converter is not None:
        return converter

    if isinstance(param_type, type):
        if issubclass(param_type, np.integer):
            return _numpy_integer_converter(param_type)
        if issubclass(param_type, np.floating):
            return _numpy_floating_converter(param_type)

    return _exact_converter(param_type)


def convert_str_to_value(s: str, param_type: Any, name: Optional[str] = None) -> Any:
    """
    Convert s to param_type, requiring the entire string to be consumed.

    Args:
        s: Raw parameter value
        param_type: Target type (str, int, float, bool, numpy scalar types,
            or any callable whose result str() maps back to s)
        name: Parameter name, used only for error reporting

    Returns:
        The converted value

    Raises:
        ConversionError: If s is not an exact representation of param_type
    """
    converter = get_converter(param_type)
    try:
        return converter(s)
    except (ValueError, TypeError, OverflowError) as e:
        type_name = getattr(param_type, '__name__', repr(param_type))
        logger.error(f"Failed to convert value '{s}' from type: {type_name}: {e}")
        raise ConversionError(s, param_type, name) from e


def to_param_str(value: Any) -> str:
    """Serialize value into the string form the converters read back."""
    if isinstance(value, (bool, np.bool_)):
        return '1' if value else '0'
    return str(value)
