"""Core container, configuration and logging."""

from .config import AppSettings, ContainerSettings, LoggingSettings, load_app_settings
from .container import Container
from .errors import (
    ContainerError,
    CyclicDependencyError,
    DuplicateKeyError,
    KeyNotFoundError,
)
from .logging import configure_logging
from .models import ServiceDefinition

__all__ = [
    "AppSettings",
    "Container",
    "ContainerError",
    "ContainerSettings",
    "CyclicDependencyError",
    "DuplicateKeyError",
    "KeyNotFoundError",
    "LoggingSettings",
    "ServiceDefinition",
    "configure_logging",
    "load_app_settings",
]
