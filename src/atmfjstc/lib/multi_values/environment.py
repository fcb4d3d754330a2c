"""
Read-only variable environments in which binding expressions and bodies are evaluated.
"""

from typing import Any, Iterator, Mapping, Optional

from collections import ChainMap
from collections.abc import Mapping as AbstractMapping


class Environment(AbstractMapping):
    """
    A read-only set of variable bindings, as seen by the expressions and bodies evaluated by the binders.

    Variables can be read either as items (``env['x']``) or as attributes (``env.x``). New bindings are never added in
    place; instead, `extend` produces a child environment in which they shadow the parent's, leaving the parent
    untouched.
    """
    _chain = None

    def __init__(self, bindings: Optional[Mapping[str, Any]] = None):
        self._chain = ChainMap(dict(bindings or {}))

    @staticmethod
    def coerce(value: Any) -> 'Environment':
        """
        Converts None, a mapping or an existing `Environment` into an `Environment`.
        """
        if isinstance(value, Environment):
            return value
        if value is None:
            return Environment()
        if isinstance(value, AbstractMapping):
            return Environment(value)

        raise TypeError(f"Expected a mapping of variable bindings, got {value!r}")

    def extend(self, bindings: Mapping[str, Any]) -> 'Environment':
        child = Environment.__new__(Environment)
        child._chain = self._chain.new_child(dict(bindings))

        return child

    def __getitem__(self, name: str) -> Any:
        return self._chain[name]

    def __getattr__(self, name: str) -> Any:
        if name.startswith('_'):
            raise AttributeError(name)

        try:
            return self._chain[name]
        except KeyError:
            raise AttributeError(f"No variable named '{name}' in environment") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._chain)

    def __len__(self) -> int:
        return len(self._chain)

    def __repr__(self) -> str:
        return f"Environment({dict(self._chain)!r})"
