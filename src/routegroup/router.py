"""Route groups layered over a host router."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from functools import partial
from typing import Any

from .context import GroupConfig, is_named_call, rewrite_named, rewrite_path
from .types import VERBS, HostApp, HostRouter

logger = logging.getLogger(__name__)

type GroupOptions = GroupConfig | Mapping[str, Any] | None
type GroupCallback = Callable[[GroupedRouter], object]


class GroupedRouter:
    """View over a host router that applies a group's context to registrations.

    Verb methods rewrite their arguments and return the view so calls chain.
    Any other attribute is read straight from the host router.
    """

    __slots__ = ("_context", "_router", "_verbs")

    def __init__(
        self,
        router: HostRouter,
        context: GroupConfig,
        verbs: tuple[str, ...] = VERBS,
    ) -> None:
        self._router = router
        self._context = context
        self._verbs = verbs

    def __getattr__(self, name: str) -> Any:
        # built-in verbs are real methods; this only sees extra verbs
        try:
            verbs = object.__getattribute__(self, "_verbs")
        except AttributeError:
            # slots are unset while copy/pickle rebuild the view
            raise AttributeError(name) from None
        if name in verbs:
            return partial(self._intercept, name)
        return getattr(self._router, name)

    def __repr__(self) -> str:
        return f"GroupedRouter({self._router!r}, {self._context!r})"

    @property
    def group_context(self) -> GroupConfig:
        return self._context

    def _intercept(self, verb: str, *args: Any, **kwargs: Any) -> Any:
        target = getattr(self._router, verb)
        if self._context.is_empty:
            return target(*args, **kwargs)
        if is_named_call(args):
            return self._forward(
                verb, rewrite_named(self._context, args), kwargs, named=True
            )
        return self._forward(verb, rewrite_path(self._context, args), kwargs)

    def _forward(
        self,
        verb: str,
        args: tuple[object, ...],
        kwargs: dict[str, Any],
        *,
        named: bool = False,
    ) -> GroupedRouter:
        route_name, path = (args[0], args[1]) if named else ("-", args[0])
        logger.debug("%s %s -> %s", verb, route_name, path)
        getattr(self._router, verb)(*args, **kwargs)
        return self

    def _check_verb(self, verb: str) -> None:
        if verb not in self._verbs:
            msg = f"unknown verb {verb!r}, expected one of {', '.join(self._verbs)}"
            raise ValueError(msg)

    def register(
        self, verb: str, path: str, *handlers: Any, **kwargs: Any
    ) -> GroupedRouter:
        """Registers `(path, *handlers)` for verb without call-shape detection."""
        self._check_verb(verb)
        return self._forward(
            verb, rewrite_path(self._context, (path, *handlers)), kwargs
        )

    def register_named(
        self, verb: str, route_name: str, path: str, *handlers: Any, **kwargs: Any
    ) -> GroupedRouter:
        """Registers `(route_name, path, *handlers)` for verb, no shape detection."""
        self._check_verb(verb)
        return self._forward(
            verb,
            rewrite_named(self._context, (route_name, path, *handlers)),
            kwargs,
            named=True,
        )

    def head(self, *args: Any, **kwargs: Any) -> Any:
        return self._intercept("head", *args, **kwargs)

    def options(self, *args: Any, **kwargs: Any) -> Any:
        return self._intercept("options", *args, **kwargs)

    def get(self, *args: Any, **kwargs: Any) -> Any:
        return self._intercept("get", *args, **kwargs)

    def put(self, *args: Any, **kwargs: Any) -> Any:
        return self._intercept("put", *args, **kwargs)

    def patch(self, *args: Any, **kwargs: Any) -> Any:
        return self._intercept("patch", *args, **kwargs)

    def post(self, *args: Any, **kwargs: Any) -> Any:
        return self._intercept("post", *args, **kwargs)

    def delete(self, *args: Any, **kwargs: Any) -> Any:
        return self._intercept("delete", *args, **kwargs)

    def del_(self, *args: Any, **kwargs: Any) -> Any:
        return self._intercept("del_", *args, **kwargs)

    def all(self, *args: Any, **kwargs: Any) -> Any:
        return self._intercept("all", *args, **kwargs)

    def resources(self, *args: Any, **kwargs: Any) -> Any:
        return self._intercept("resources", *args, **kwargs)

    def group(
        self, options: GroupOptions, callback: GroupCallback | None = None
    ) -> GroupedRouter:
        """Forwards a nested group, with this view's context prepended, to the host."""
        context = self._context.merge(options)
        logger.debug(
            "group name=%r prefix=%r middlewares=%d",
            context.name,
            context.prefix,
            len(context.middlewares),
        )
        self._router.group(context, callback)
        return self


class RouteGroups:
    """Entry point: builds grouped views over `app.router`.

    Extra verb names (e.g. "trace") are intercepted alongside the built-in
    ones when the host router exposes them.
    """

    __slots__ = ("_verbs", "app")

    def __init__(self, app: HostApp, *, verbs: Iterable[str] = ()) -> None:
        self.app = app
        extra = tuple(v for v in dict.fromkeys(verbs) if v not in VERBS)
        self._verbs = VERBS + extra

    @classmethod
    def install(cls, app: HostApp, *, verbs: Iterable[str] = ()) -> RouteGroups:
        """Creates a composer and binds its `group` onto `app.router` if it has none.

        Nested groups are forwarded to the host router's `group`, so this is
        what makes them resolve back here.
        """
        composer = cls(app, verbs=verbs)
        if getattr(app.router, "group", None) is None:
            app.router.group = composer.group
        return composer

    def group(
        self, options: GroupOptions, callback: GroupCallback | None = None
    ) -> Any:
        """Builds a grouped view, hands it to callback, and returns the host router."""
        context = GroupConfig.from_options(options)
        view = GroupedRouter(self.app.router, context, self._verbs)
        if callback is not None:
            callback(view)
        return self.app.router
