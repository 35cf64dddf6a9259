# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "routegroup @ file:///${PROJECT_ROOT}/../routegroup",
# ]
# ///
"""Nested route groups demo.

Registers routes on a minimal host router that prints what it receives.
"""

import logging
from collections.abc import Callable
from typing import Any

from routegroup import GroupedRouter, RouteGroups


class PrintingRouter:
    """Host router stand-in: prints every registration."""

    def _register(self, verb: str, *args: Any) -> None:
        printable = [a if isinstance(a, str) else a.__name__ for a in args]
        print(f"{verb.upper():<7} {' '.join(printable)}")

    def get(self, *args: Any) -> None:
        self._register("get", *args)

    def post(self, *args: Any) -> None:
        self._register("post", *args)

    def delete(self, *args: Any) -> None:
        self._register("delete", *args)


class App:
    def __init__(self) -> None:
        self.router = PrintingRouter()


# middleware
def auth[T: Callable[..., Any]](f: T) -> T:
    return f


def admin_only[T: Callable[..., Any]](f: T) -> T:
    return f


# handlers
def home() -> None: ...
def list_users() -> None: ...
def create_user() -> None: ...
def delete_user() -> None: ...


def admin_routes(g: GroupedRouter) -> None:
    g.get("users", "/users", list_users).post("user_create", "/users", create_user)
    g.group(
        {"prefix": "/users/{id}"},
        lambda u: u.delete("user_delete", "", delete_user),
    )


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    app = App()
    groups = RouteGroups.install(app)
    groups.group({}, lambda g: g.get("/", home))
    groups.group(
        {"prefix": "/api", "middlewares": auth},
        lambda api: api.group(
            {"name": "admin_", "prefix": "/admin", "middlewares": [admin_only]},
            admin_routes,
        ),
    )
    """
    GET     / home
    GET     admin_users /api/admin/users auth admin_only list_users
    POST    admin_user_create /api/admin/users auth admin_only create_user
    DELETE  admin_user_delete /api/admin/users/{id} auth admin_only delete_user
    """


if __name__ == "__main__":
    main()
