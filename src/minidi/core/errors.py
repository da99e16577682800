"""Exceptions raised by the service container."""

from __future__ import annotations

from collections.abc import Sequence


class ContainerError(RuntimeError):
    """Base class for container failures."""


class DuplicateKeyError(ContainerError):
    """Raised when a key is registered a second time."""

    def __init__(self, name: str, kind: str) -> None:
        """Record the clashing key and the registry already holding it."""
        super().__init__(f"{kind.capitalize()} '{name}' is already registered")
        self.name = name
        self.kind = kind


class KeyNotFoundError(ContainerError, KeyError):
    """Raised when neither a parameter nor a service exists for a key."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise render the repr of the key.
        return f"No parameter or service registered for '{self.name}'"


class CyclicDependencyError(ContainerError):
    """Raised when cycle detection finds a service depending on itself."""

    def __init__(self, path: Sequence[str]) -> None:
        self.path = tuple(path)
        super().__init__("Cyclic dependency detected: " + " -> ".join(self.path))


__all__ = [
    "ContainerError",
    "CyclicDependencyError",
    "DuplicateKeyError",
    "KeyNotFoundError",
]
