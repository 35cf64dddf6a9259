from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from routegroup import RouteGroups


# --- Mock objects -------------------------------------------------------------
class MockRouter:
    """Host router that records every registration it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...], dict[str, Any]]] = []
        self.prefix_setting = "unchanged"

    def _record(
        self, verb: str, args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> str:
        self.calls.append((verb, args, kwargs))
        return f"registered:{verb}"

    def head(self, *args: Any, **kwargs: Any) -> str:
        return self._record("head", args, kwargs)

    def options(self, *args: Any, **kwargs: Any) -> str:
        return self._record("options", args, kwargs)

    def get(self, *args: Any, **kwargs: Any) -> str:
        return self._record("get", args, kwargs)

    def put(self, *args: Any, **kwargs: Any) -> str:
        return self._record("put", args, kwargs)

    def patch(self, *args: Any, **kwargs: Any) -> str:
        return self._record("patch", args, kwargs)

    def post(self, *args: Any, **kwargs: Any) -> str:
        return self._record("post", args, kwargs)

    def delete(self, *args: Any, **kwargs: Any) -> str:
        return self._record("delete", args, kwargs)

    def del_(self, *args: Any, **kwargs: Any) -> str:
        return self._record("del_", args, kwargs)

    def all(self, *args: Any, **kwargs: Any) -> str:
        return self._record("all", args, kwargs)

    def resources(self, *args: Any, **kwargs: Any) -> str:
        return self._record("resources", args, kwargs)

    def trace(self, *args: Any, **kwargs: Any) -> str:
        return self._record("trace", args, kwargs)

    def url(self, name: str) -> str:
        return f"url:{name}"


@dataclass
class MockApp:
    router: MockRouter = field(default_factory=MockRouter)


@pytest.fixture
def app() -> MockApp:
    return MockApp()


@pytest.fixture
def groups(app: MockApp) -> RouteGroups:
    return RouteGroups.install(app)


# --- Handlers and middleware --------------------------------------------------
def handler(*args: Any) -> None:
    pass


def other_handler(*args: Any) -> None:
    pass


def make_middleware(name: str) -> Callable[..., Any]:
    def middleware(*args: Any) -> None:
        pass

    middleware.__name__ = name
    return middleware


auth = make_middleware("auth")
audit = make_middleware("audit")
csrf = make_middleware("csrf")
