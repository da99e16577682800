"""Service container mapping string keys to parameters and service definitions."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Any

from .config import ContainerSettings
from .errors import CyclicDependencyError, DuplicateKeyError, KeyNotFoundError
from .models import ServiceDefinition

LOGGER = logging.getLogger(__name__)

_ANONYMOUS_NAME = "<lambda>"


class Container:
    """Minimal dependency container with lazy, optionally shared services.

    Keys live in exactly one of two registries: parameters, returned as
    stored, and service definitions, constructed on ``fetch`` from their
    dependency keys. Shared services are built once and cached for the life
    of the container; transient ones are rebuilt on every fetch.

    Dependency cycles are not detected unless ``detect_cycles`` is enabled in
    the settings; otherwise a cyclic graph recurses until ``RecursionError``.
    Instances are not thread-safe.
    """

    def __init__(self, settings: ContainerSettings | None = None) -> None:
        """Initialise empty registries and the instance cache."""
        self._settings = settings or ContainerSettings()
        self._parameters: dict[str, Any] = {}
        self._services: dict[str, ServiceDefinition] = {}
        self._cache: dict[str, Any] = {}
        self._resolving: list[str] = []

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has(name)

    # Registration -------------------------------------------------------------
    def register(
        self,
        name: str,
        value: Any,
        dependencies: Iterable[str] = (),
        tag: str | None = None,
        shared: bool = True,
    ) -> None:
        """Register a service when ``value`` is a named callable, else a parameter."""
        if self.is_constructor(value):
            self.register_definition(name, value, dependencies, tag, shared)
        else:
            self.register_parameter(name, value)

    def register_definition(
        self,
        name: str,
        factory: Callable[..., Any],
        dependencies: Iterable[str] = (),
        tag: str | None = None,
        shared: bool = True,
    ) -> None:
        """Register a service definition built by ``factory``."""
        self._ensure_uniqueness(name)
        definition = ServiceDefinition(
            factory=factory,
            name=name,
            dependencies=tuple(dependencies),
            tag=tag,
            shared=shared,
        )
        self._services[name] = definition
        LOGGER.debug(
            "Registered service %s (deps=%s, tag=%s, shared=%s)",
            name,
            definition.dependencies,
            tag,
            shared,
        )

    register_service = register_definition

    def register_parameter(self, name: str, value: Any) -> None:
        """Register ``value`` verbatim under ``name``."""
        self._ensure_uniqueness(name)
        self._parameters[name] = value
        LOGGER.debug("Registered parameter %s", name)

    def _ensure_uniqueness(self, name: str) -> None:
        if name in self._parameters:
            raise DuplicateKeyError(name, "parameter")
        if name in self._services:
            raise DuplicateKeyError(name, "service")

    # Lookup -------------------------------------------------------------------
    def fetch(self, name: str) -> Any:
        """Return the resolved service or the parameter stored under ``name``."""
        if name in self._services:
            return self._resolve(self._services[name])
        if name in self._parameters:
            return self._parameters[name]
        raise KeyNotFoundError(name)

    def get_tagged_services(self, tag: str | None) -> list[ServiceDefinition]:
        """Return definitions carrying ``tag``, in registration order."""
        return [
            definition
            for definition in self._services.values()
            if definition.tag == tag
        ]

    get_tagged_service = get_tagged_services

    def has(self, name: str) -> bool:
        """Check whether ``name`` is registered as a parameter or a service."""
        return name in self._parameters or name in self._services

    def is_resolved(self, name: str) -> bool:
        """Check whether a shared instance is cached for ``name``."""
        return name in self._cache

    @property
    def parameters(self) -> Mapping[str, Any]:
        """Read-only view of registered parameters."""
        return MappingProxyType(self._parameters)

    @property
    def definitions(self) -> Mapping[str, ServiceDefinition]:
        """Read-only view of registered service definitions."""
        return MappingProxyType(self._services)

    # Resolution ---------------------------------------------------------------
    def _resolve(self, definition: ServiceDefinition) -> Any:
        name = definition.name
        if definition.shared and name in self._cache:
            return self._cache[name]

        if self._settings.detect_cycles:
            if name in self._resolving:
                start = self._resolving.index(name)
                raise CyclicDependencyError([*self._resolving[start:], name])
            self._resolving.append(name)
            try:
                service = self._construct(definition)
            finally:
                self._resolving.pop()
        else:
            service = self._construct(definition)

        if definition.shared:
            self._cache[name] = service
        return service

    def _construct(self, definition: ServiceDefinition) -> Any:
        arguments = [self.fetch(key) for key in definition.dependencies]
        LOGGER.debug(
            "Constructing %s via %s", definition.name, definition.factory_name
        )
        return definition.factory(*arguments)

    @staticmethod
    def is_constructor(value: Any) -> bool:
        """Return True for callables carrying a usable, non-anonymous name."""
        if not callable(value):
            return False
        name = getattr(value, "__name__", "")
        return isinstance(name, str) and name not in ("", _ANONYMOUS_NAME)


__all__ = ["Container"]
