"""
anyparams - typed, consumption-checked '<name>=<value>' parameters for pluggable methods.
"""

from .core.exceptions import (
    AnyParamsError,
    ConfigurationError,
    ConversionError,
    DuplicateNameError,
    FormatError,
    InternalInvariantError,
    MethodNotFoundError,
    MissingRequiredError,
    NotFoundError,
    UnknownParameterError,
)
from .params import (
    ParameterManager,
    ParameterSet,
    convert_str_to_value,
    parse_method_desc,
    parse_method_descs,
    register_converter,
    to_param_str,
)
from .core.config import SimpleConfigLoader
from .core.registry import MethodRegistry

__version__ = "0.1.0"

__all__ = [
    'AnyParamsError',
    'ConfigurationError',
    'ConversionError',
    'DuplicateNameError',
    'FormatError',
    'InternalInvariantError',
    'MethodNotFoundError',
    'MissingRequiredError',
    'NotFoundError',
    'UnknownParameterError',
    'ParameterManager',
    'ParameterSet',
    'convert_str_to_value',
    'parse_method_desc',
    'parse_method_descs',
    'register_converter',
    'to_param_str',
    'SimpleConfigLoader',
    'MethodRegistry',
]
