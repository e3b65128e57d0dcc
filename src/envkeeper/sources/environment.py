"""
Environment Sources - Where variable values come from.

The validator never touches os.environ directly. It is handed a source
exposing get / set / entries, so tests and embedding applications can
supply isolated fixtures instead of mutating process state.
"""

import os
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class EnvironmentSource(Protocol):
    """Protocol for environment sources."""
    def get(self, name: str) -> str | None: ...
    def set(self, name: str, value: str) -> None: ...
    def entries(self) -> Iterator[tuple[str, str]]: ...


class OsEnvironSource:
    """Live view over the process environment."""

    def __init__(self, environ: MutableMapping[str, str] | None = None):
        self._environ = os.environ if environ is None else environ

    def get(self, name: str) -> str | None:
        return self._environ.get(name)

    def set(self, name: str, value: str) -> None:
        self._environ[name] = value

    def entries(self) -> Iterator[tuple[str, str]]:
        # Copy first so callers can mutate the environment while iterating
        return iter(list(self._environ.items()))


class MappingSource:
    """In-memory source, isolated from the process environment."""

    def __init__(self, initial: Mapping[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, name: str) -> str | None:
        return self._values.get(name)

    def set(self, name: str, value: str) -> None:
        self._values[name] = value

    def unset(self, name: str) -> bool:
        """
        Remove a variable.

        Returns:
            True if removed, False if it was not set
        """
        return self._values.pop(name, None) is not None

    def entries(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._values.items()))
