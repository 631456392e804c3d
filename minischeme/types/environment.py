"""Runtime environment for minischeme.

An Environment is one binding frame: a mapping from identifier to Value plus
an optional `outer` link to its lexical parent. Frames are shared by
reference, so a mutation made through one closure is seen by every closure
holding the same frame.
"""

from __future__ import annotations

from typing import Optional

from minischeme import Value
from minischeme.errors import SchemeUnboundVariable


class Environment:
    """Hierarchical mapping from identifiers to values."""

    __slots__ = ("vars", "outer", "__weakref__")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Value] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: Value) -> None:
        """Bind `name` to `value` in this frame only, overwriting any existing binding."""
        self.vars[str(name)] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> Value:
        """Look up the value bound to `name`; nearer frames shadow outer ones.

        Raises SchemeUnboundVariable if no frame binds it.
        """
        env = self.find(str(name))
        if env is None:
            raise SchemeUnboundVariable(f"unbound variable: {name}")
        return env.vars[str(name)]

    def assign(self, name: str, value: Value) -> None:
        """Update an existing binding for `name` in the environment chain.

        Never creates a binding. Raises SchemeUnboundVariable if the name is not found.
        """
        env = self.find(str(name))
        if env is None:
            raise SchemeUnboundVariable(f"cannot set! unbound variable: {name}")
        env.vars[str(name)] = value

    def top_level(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: dict[str, Value]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: str) -> bool:
        return self.find(str(name)) is not None

    def __repr__(self) -> str:
        depth = 0
        env = self.outer
        while env is not None:
            depth += 1
            env = env.outer
        return f"<Environment {sorted(self.vars)} depth={depth}>"
