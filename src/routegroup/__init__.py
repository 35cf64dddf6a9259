from importlib.metadata import version

from .context import GroupConfig
from .errors import (
    InvalidMiddlewareError,
    InvalidNameError,
    InvalidPrefixError,
    TypeValidationError,
)
from .router import GroupedRouter, RouteGroups

__all__ = [
    "GroupConfig",
    "GroupedRouter",
    "InvalidMiddlewareError",
    "InvalidNameError",
    "InvalidPrefixError",
    "RouteGroups",
    "TypeValidationError",
    "__version__",
]

__version__ = version("routegroup")
