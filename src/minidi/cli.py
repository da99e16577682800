"""Command-line entry point for inspecting a bootstrapped container."""

from __future__ import annotations

import argparse
import importlib
import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from minidi.core import (
    AppSettings,
    Container,
    ContainerError,
    ServiceDefinition,
    configure_logging,
    load_app_settings,
)

LOGGER = logging.getLogger(__name__)


class BootstrapError(RuntimeError):
    """Raised when a bootstrap callable cannot be located."""


def build_parser() -> argparse.ArgumentParser:
    """Create and configure the CLI argument parser."""
    parser = argparse.ArgumentParser(description="minidi container inspector")
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to a .env file containing configuration overrides.",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("info", help="Show effective settings.")

    describe = subparsers.add_parser(
        "describe", help="List the entries registered by a bootstrap callable."
    )
    describe.add_argument(
        "bootstrap", help="Callable registering entries, as 'package.module:function'."
    )
    describe.add_argument(
        "--tag",
        default=None,
        help="Only list service definitions carrying this tag.",
    )

    fetch = subparsers.add_parser(
        "fetch", help="Resolve one key from a bootstrapped container."
    )
    fetch.add_argument(
        "bootstrap", help="Callable registering entries, as 'package.module:function'."
    )
    fetch.add_argument("name", help="Parameter or service key to fetch.")
    return parser


def load_bootstrap(target: str) -> Callable[[Container], Any]:
    """Import the ``module:function`` bootstrap callable named by ``target``."""
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        raise BootstrapError(f"Expected 'module:function', got '{target}'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise BootstrapError(f"Cannot import module '{module_name}'") from exc

    bootstrap = getattr(module, attribute, None)
    if not callable(bootstrap):
        raise BootstrapError(f"'{target}' is not a callable")
    return bootstrap


def build_container(target: str, settings: AppSettings) -> Container:
    """Create a container and let the bootstrap callable populate it."""
    container = Container(settings.container)
    load_bootstrap(target)(container)
    LOGGER.info(
        "Bootstrapped %d parameter(s) and %d service(s) from %s",
        len(container.parameters),
        len(container.definitions),
        target,
    )
    return container


def execute(args: argparse.Namespace, settings: AppSettings) -> int:
    """Execute the requested CLI command and return the exit status."""
    command = args.command or "info"
    if command == "info":
        print("minidi is ready.")
        print(f"Cycle detection: {settings.container.detect_cycles}")
        print(f"Log level: {settings.logging.level}")
        return 0

    try:
        container = build_container(args.bootstrap, settings)
        if command == "describe":
            _describe(container, tag=args.tag)
        elif command == "fetch":
            print(repr(container.fetch(args.name)))
    except (BootstrapError, ContainerError) as exc:
        LOGGER.debug("Command %s failed", command, exc_info=True)
        print(f"Error: {exc}")
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_app_settings(env_file=args.env_file)
    configure_logging(settings.logging)
    return execute(args, settings)


def _describe(container: Container, *, tag: str | None) -> None:
    """Print parameters and a table of service definitions."""
    if tag is None:
        definitions: list[ServiceDefinition] = list(container.definitions.values())
        print(f"Parameters ({len(container.parameters)}):")
        for name in container.parameters:
            print(f"  {name}")
    else:
        definitions = container.get_tagged_services(tag)

    if not definitions:
        print("No service definitions found.")
        return

    print(f"Services ({len(definitions)}):")
    header = f"{'Name':<24}  {'Tag':<12}  {'Shared':<6}  {'Dependencies':<24}  Factory"
    print(header)
    print("-" * len(header))
    for definition in definitions:
        dependencies = ", ".join(definition.dependencies) or "-"
        print(
            f"{definition.name:<24}  {definition.tag or '-':<12}  "
            f"{str(definition.shared):<6}  {dependencies:<24}  {definition.factory_name}"
        )


if __name__ == "__main__":
    raise SystemExit(main())
