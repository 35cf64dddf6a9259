"""Accumulated group context and the argument rewrites built on it.

Every function here is pure: contexts are frozen and each nesting level
produces a new one.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .errors import InvalidMiddlewareError, InvalidNameError, InvalidPrefixError
from .types import Middleware


@dataclass(slots=True, frozen=True)
class GroupConfig:
    """Name prefix, path prefix and middleware shared by a group of routes.

    `middlewares` accepts a single callable or a sequence of callables and is
    always stored as a tuple.
    """

    name: str = ""
    prefix: str = ""
    middlewares: tuple[Middleware, ...] = field(default=())

    def __post_init__(self) -> None:
        middlewares = normalize_middlewares(self.middlewares)
        object.__setattr__(self, "middlewares", middlewares)
        check_name(self.name, "name")
        check_prefix(self.prefix, "prefix")

    @classmethod
    def from_options(
        cls, options: GroupConfig | Mapping[str, Any] | None
    ) -> GroupConfig:
        """Builds a config from a mapping, filling absent or None keys with defaults."""
        if options is None:
            return cls()
        if isinstance(options, GroupConfig):
            return options
        if not isinstance(options, Mapping):
            msg = f"group options must be a mapping, but got {options!r}"
            raise TypeError(msg)
        return cls(
            name=_option(options, "name", ""),
            prefix=_option(options, "prefix", ""),
            middlewares=_option(options, "middlewares", ()),
        )

    @property
    def is_empty(self) -> bool:
        return self.name == "" and self.prefix == "" and not self.middlewares

    def merge(self, options: GroupConfig | Mapping[str, Any] | None) -> GroupConfig:
        """Returns a new context with a nested group's options appended to this one.

        Only keys present in `options` contribute.
        """
        if options is None:
            return self
        if isinstance(options, GroupConfig):
            options = {
                "name": options.name,
                "prefix": options.prefix,
                "middlewares": options.middlewares,
            }
        elif not isinstance(options, Mapping):
            msg = f"group options must be a mapping, but got {options!r}"
            raise TypeError(msg)

        name, prefix, middlewares = self.name, self.prefix, self.middlewares
        if options.get("name") is not None:
            name = join_prefix(name, check_name(options["name"], "name"))
        if options.get("prefix") is not None:
            prefix = join_prefix(prefix, check_prefix(options["prefix"], "prefix"))
        if options.get("middlewares") is not None:
            middlewares = middlewares + normalize_middlewares(options["middlewares"])
        return GroupConfig(name=name, prefix=prefix, middlewares=middlewares)


def _option(options: Mapping[str, Any], key: str, default: Any) -> Any:
    value = options.get(key)
    return default if value is None else value


def check_name(value: object, label: str) -> str:
    if not isinstance(value, str):
        msg = f"{label} must be str, but got {value!r}"
        raise InvalidNameError(msg)
    return value


def check_prefix(value: object, label: str) -> str:
    if not isinstance(value, str):
        msg = f"{label} must be str, but got {value!r}"
        raise InvalidPrefixError(msg)
    return value


def normalize_middlewares(value: object) -> tuple[Middleware, ...]:
    """Wraps a single middleware in a tuple, or validates a sequence of them."""
    if callable(value):
        return (value,)
    # str is a Sequence but never a middleware list
    if not isinstance(value, Sequence) or isinstance(value, str | bytes):
        msg = (
            "middlewares must be callable or a sequence of callables, "
            f"but got {value!r}"
        )
        raise InvalidMiddlewareError(msg)
    for item in value:
        if not callable(item):
            msg = f"middlewares must only contain callables, but got {item!r}"
            raise InvalidMiddlewareError(msg)
    return tuple(value)


def join_prefix(prefix: str, value: str) -> str:
    """Plain concatenation: no separator normalisation."""
    return prefix + value


def is_named_call(args: Sequence[object]) -> bool:
    """Whether verb arguments look like `(name, path, *middleware, handler)`."""
    return len(args) >= 3 and isinstance(args[1], str | re.Pattern)


def rewrite_named(
    context: GroupConfig, args: Sequence[object]
) -> tuple[object, ...]:
    """`(name, path, *rest)` -> `(name', path', *middlewares, *rest)`."""
    if len(args) < 2:
        msg = f"named route needs a name and a path, but got {tuple(args)!r}"
        raise InvalidPrefixError(msg)
    route_name, path, *rest = args
    return (
        join_prefix(context.name, check_name(route_name, "route name")),
        join_prefix(context.prefix, check_prefix(path, "route path")),
        *context.middlewares,
        *rest,
    )


def rewrite_path(
    context: GroupConfig, args: Sequence[object]
) -> tuple[object, ...]:
    """`(path, *rest)` -> `(path', *middlewares, *rest)`."""
    path, *rest = args if args else (None,)
    return (
        join_prefix(context.prefix, check_prefix(path, "route path")),
        *context.middlewares,
        *rest,
    )
