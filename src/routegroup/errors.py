"""Errors raised when group or route arguments have the wrong type."""


class TypeValidationError(TypeError):
    """Base class for argument type failures."""


class InvalidNameError(TypeValidationError):
    """Group name or route name is not a str."""


class InvalidPrefixError(TypeValidationError):
    """Group prefix or route path is not a str."""


class InvalidMiddlewareError(TypeValidationError):
    """Middlewares is neither a callable nor a sequence of callables."""
