"""Minimal dependency-injection container."""

from .core import (
    AppSettings,
    Container,
    ContainerError,
    ContainerSettings,
    CyclicDependencyError,
    DuplicateKeyError,
    KeyNotFoundError,
    ServiceDefinition,
    configure_logging,
    load_app_settings,
)

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "Container",
    "ContainerError",
    "ContainerSettings",
    "CyclicDependencyError",
    "DuplicateKeyError",
    "KeyNotFoundError",
    "ServiceDefinition",
    "configure_logging",
    "load_app_settings",
]
