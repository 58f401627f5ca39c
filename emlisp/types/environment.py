"""Runtime environment for emlisp.

The Environment stores bindings of names to Lisp values and supports nested
scopes via an `outer` link. Every frame in a chain carries the same host, so
primitives can reach editor state from whatever scope they are called in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from emlisp import LispValue
from emlisp.errors import UnboundVariable

if TYPE_CHECKING:
    from emlisp.host import Host


class Environment:
    """Hierarchical mapping from names to Lisp values."""

    __slots__ = ("vars", "outer", "host")

    def __init__(self, host: Host, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        # Shared, not owned: the outer frame outlives this one.
        self.outer: Environment | None = outer
        self.host: Host = host

    def child(self) -> Environment:
        """Create a transient scope chained to this one."""
        return Environment(self.host, outer=self)

    def define(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in this frame."""
        self.vars[name] = value

    def set(self, name: str, value: LispValue) -> None:
        """Bind `name` in this frame only.

        Outer frames are never searched, so an existing outer binding is
        shadowed rather than updated.
        """
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> LispValue:
        """Look up the value bound to `name`, walking outward.

        Raises UnboundVariable if no frame defines it.
        """
        env = self.find(name)
        if env is None:
            raise UnboundVariable(name)
        return env.vars[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.vars[k] = v
