"""Protocols for the host objects a group is layered over."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

type Middleware = Callable[..., Any]

VERBS = (
    "head",
    "options",
    "get",
    "put",
    "patch",
    "post",
    "delete",
    "del_",  # `del` is a keyword
    "all",
    "resources",
)


class HostRouter(Protocol):
    """Router whose verb methods take `([name,] path, *middleware, handler)`.

    Only the methods actually called through a group need to exist.
    """

    def group(
        self, config: Any, callback: Callable[[Any], object] | None = None
    ) -> object: ...


class HostApp(Protocol):
    router: Any
