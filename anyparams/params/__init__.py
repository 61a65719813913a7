"""
String-keyed parameters for configuring pluggable methods.
"""

from .converter import convert_str_to_value, register_converter, to_param_str
from .parameter_set import ParameterSet, split_token
from .manager import ParameterManager
from .method_desc import parse_method_desc, parse_method_descs

__all__ = [
    'ParameterSet',
    'ParameterManager',
    'convert_str_to_value',
    'register_converter',
    'to_param_str',
    'split_token',
    'parse_method_desc',
    'parse_method_descs',
]
