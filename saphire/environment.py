"""Variable bindings, chained through enclosing scopes."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .objects import Object


class Environment:
    """A scope of name bindings with an optional enclosing scope."""

    def __init__(self, outer: Environment | None = None) -> None:
        self._store: dict[str, Object] = {}
        self.outer = outer

    def get(self, name: str) -> Object | None:
        """Return the value bound to ``name`` here or in an outer scope."""
        env: Environment | None = self
        while env is not None:
            if name in env._store:
                return env._store[name]
            env = env.outer
        return None

    def set(self, name: str, value: Object) -> Object:
        """Bind ``name`` in this scope and return the value."""
        self._store[name] = value
        return value

    def enclosed(self) -> Environment:
        """Return a new scope whose outer scope is this one."""
        return Environment(outer=self)