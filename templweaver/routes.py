"""A table of request paths with their handlers and allowed methods."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


class MethodNotAllowed(Exception):
    """Raised when a route is called with a method it does not accept."""

    status = 405

    def __init__(self, method: str) -> None:
        super().__init__(f'method "{method}" not allowed')
        self.method = method


@dataclass
class Route:
    """A handler with its title and the methods it accepts; no methods means any."""

    handler: Callable[[Any], Any]
    title: str = ""
    api_only: bool = False
    allowed_methods: tuple[str, ...] = field(default_factory=tuple)

    def allows(self, method: str) -> bool:
        """Whether the route accepts the method."""
        return not self.allowed_methods or method in self.allowed_methods

    def __call__(self, method: str, request: Any) -> Any:
        if not self.allows(method):
            raise MethodNotAllowed(method)
        return self.handler(request)


class Routes(dict[str, Route]):
    """Routes by path pattern; a pattern ending in "/" covers its whole subtree."""

    def match(self, path: str) -> Route | None:
        """The route for a path: an exact pattern, else the longest subtree pattern."""
        exact = self.get(path)
        if exact is not None and not path.endswith("/"):
            return exact
        subtrees = [p for p in self if p.endswith("/") and path.startswith(p)]
        if not subtrees:
            return None
        return self[max(subtrees, key=len)]

    def dispatch(self, method: str, path: str, request: Any) -> Any:
        """Call the handler for the path, checking the method first."""
        route = self.match(path)
        if route is None:
            raise LookupError(f"no route for {path!r}")
        return route(method, request)