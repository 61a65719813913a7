# anyparams/core/exceptions.py
from typing import Any, Iterable, Optional


class AnyParamsError(Exception):
    """Base class for exceptions in this library."""
    pass

class ConfigurationError(AnyParamsError):
    """Exception raised for errors in the configuration."""
    pass

class InternalInvariantError(AnyParamsError):
    """Exception raised when an internal consistency check fails (a bug, not a user error)."""
    pass

class MethodNotFoundError(AnyParamsError):
    """Exception raised when a method name is not present in the registry."""
    pass


class FormatError(ConfigurationError):
    """A token is not of the form <name>=<value>."""

    def __init__(self, token: str, message: Optional[str] = None):
        self.token = token
        super().__init__(message or f"Wrong format of the method argument: '{token}' should be in the format: <Name>=<Value>")

class DuplicateNameError(ConfigurationError):
    """A parameter name occurs more than once."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Duplicate parameter: {name}")

class NotFoundError(ConfigurationError):
    """The parameter to overwrite does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Parameter not found: {name}")

class MissingRequiredError(ConfigurationError):
    """A required parameter was not supplied."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Mandatory parameter: {name} is missing!")

class ConversionError(ConfigurationError):
    """A value cannot be parsed exactly as the requested type."""

    def __init__(self, value: str, param_type: Any, name: Optional[str] = None):
        self.value = value
        self.param_type = param_type
        self.name = name
        type_name = getattr(param_type, '__name__', repr(param_type))
        where = f" (parameter '{name}')" if name is not None else ""
        super().__init__(f"Failed to convert value '{value}' to type: {type_name}{where}")

class UnknownParameterError(ConfigurationError):
    """One or more parameters were never consumed."""

    def __init__(self, names: Iterable[str]):
        self.names = list(names)
        super().__init__(f"Unknown parameters found: {', '.join(self.names)}")
