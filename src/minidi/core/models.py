"""Records describing registered container entries."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class ServiceDefinition:
    """How to construct a service: factory, dependency keys, tag and sharing."""

    factory: Callable[..., Any]
    name: str
    dependencies: tuple[str, ...] = ()
    tag: str | None = None
    shared: bool = True

    @property
    def factory_name(self) -> str:
        """Qualified name of the factory, for display."""
        module = getattr(self.factory, "__module__", None)
        qualname = getattr(self.factory, "__qualname__", None)
        if qualname is None:
            return repr(self.factory)
        return f"{module}.{qualname}" if module else qualname


__all__ = ["ServiceDefinition"]
