"""
Command line interface for inspecting secret resolution.

Commands:
    secretlayer contexts   - Show resolved contexts in precedence order
    secretlayer show       - Locate secrets and show the merged view
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import Any

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from secretlayer.config.loader import load_properties
from secretlayer.config.properties import SecretsManagerProperties
from secretlayer.contexts import resolve_contexts
from secretlayer.environment import APPLICATION_NAME_PROPERTY, StandardEnvironment
from secretlayer.errors import SecretFetchFailedError
from secretlayer.locator import Fetch, LocateResult, SecretsSourceLocator
from secretlayer.logging import bind_context, configure_logging

THEME = Theme(
    {
        "info": "#88C0D0",
        "success": "#A3BE8C",
        "warning": "#EBCB8B",
        "error": "#BF616A bold",
        "muted": "#D8DEE9",
    }
)

console = Console(
    theme=THEME,
    force_terminal=os.environ.get("FORCE_COLOR") is not None,
    no_color=os.environ.get("NO_COLOR") is not None,
)


def mask_value(value: Any) -> str:
    """Mask a secret value, keeping a short hint of long strings."""
    text = str(value)
    if len(text) <= 8:
        return "****"
    return f"{text[:2]}...{text[-2:]}"


def _build_properties(args: argparse.Namespace) -> SecretsManagerProperties:
    base = load_properties(args.config)
    overrides: dict[str, Any] = {}
    if args.name is not None:
        overrides["name"] = args.name
    if args.prefix is not None:
        overrides["prefix"] = args.prefix
    if args.default_context is not None:
        overrides["default_context"] = args.default_context
    if args.separator is not None:
        overrides["profile_separator"] = args.separator
    if args.secret_names:
        overrides["secret_names"] = args.secret_names
    if getattr(args, "region", None) is not None:
        overrides["region"] = args.region
    if getattr(args, "no_fail_fast", False):
        overrides["fail_fast"] = False
    if not overrides:
        return base
    # Re-validate merged values
    return SecretsManagerProperties(**{**base.model_dump(), **overrides})


def _build_environment(args: argparse.Namespace) -> StandardEnvironment:
    environment = StandardEnvironment.from_environ()
    if args.profiles:
        environment = StandardEnvironment(
            properties=environment.properties, active_profiles=args.profiles
        )
    if args.app_name_property is not None:
        environment.properties[APPLICATION_NAME_PROPERTY] = args.app_name_property
    return environment


def _build_fetch(args: argparse.Namespace, properties: SecretsManagerProperties) -> Fetch:
    if args.file:
        from secretlayer.fetchers import FileSecretFetcher

        return FileSecretFetcher(args.file)

    from secretlayer.fetchers.aws import AWSSecretsManagerFetcher

    return AWSSecretsManagerFetcher(region=properties.region)


def contexts_command(args: argparse.Namespace) -> int:
    """Print the resolved contexts, highest precedence first."""
    properties = _build_properties(args)
    environment = _build_environment(args)
    contexts = resolve_contexts(environment, properties)

    if not contexts:
        console.print("[warning]No contexts resolved[/warning]")
        return 0

    table = Table(title="Secret contexts (highest precedence first)")
    table.add_column("#", justify="right", style="muted")
    table.add_column("Context", style="info")
    for index, context in enumerate(contexts, start=1):
        table.add_row(str(index), escape(context))
    console.print(table)
    return 0


def _print_result(result: LocateResult, reveal: bool) -> None:
    table = Table(title=f"{result.source.name} ({len(result.source)} layers)")
    table.add_column("Key", style="info")
    table.add_column("Value")
    table.add_column("Layer", style="muted")

    for key, value in result.source.to_dict().items():
        layer = result.source.find_layer(key)
        shown = str(value) if reveal else mask_value(value)
        table.add_row(escape(key), escape(shown), escape(layer.name) if layer else "")
    console.print(table)

    for error in result.skipped:
        console.print(f"[warning]Skipped[/warning] {escape(error.context)}: {error.kind}")


def show_command(args: argparse.Namespace, fetch: Fetch | None = None) -> int:
    """Locate secrets and print the merged view."""
    properties = _build_properties(args)
    if not properties.enabled:
        console.print("[warning]Secrets Manager integration is disabled[/warning]")
        return 0

    environment = _build_environment(args)
    bind_context(
        application=properties.name or environment.get_property(APPLICATION_NAME_PROPERTY),
        profiles=environment.get_active_profiles(),
    )
    fetch = fetch or _build_fetch(args, properties)

    locator = SecretsSourceLocator(fetch, properties)
    try:
        result = locator.locate(environment)
    except SecretFetchFailedError as e:
        console.print(f"[error]Error:[/error] {escape(str(e))}")
        return 1

    _print_result(result, args.reveal)
    if result.skipped:
        console.print()
        console.print(f"[warning]{len(result.skipped)} context(s) skipped[/warning]")
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to config.yaml")
    parser.add_argument("--name", help="Application name override")
    parser.add_argument(
        "--app-name-property",
        help="Value for the environment's application.name property",
    )
    parser.add_argument(
        "--profile",
        dest="profiles",
        action="append",
        default=[],
        help="Active profile (repeatable, in declaration order)",
    )
    parser.add_argument("--prefix", help="Context prefix")
    parser.add_argument("--default-context", help="Shared default context name")
    parser.add_argument("--separator", help="Profile separator")
    parser.add_argument(
        "--secret-name",
        dest="secret_names",
        action="append",
        default=[],
        help="Explicit context (repeatable, bypasses derivation)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secretlayer", description="Profile-aware layered secrets"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    contexts_parser = subparsers.add_parser("contexts", help="Show resolved secret contexts")
    _add_common_arguments(contexts_parser)

    show_parser = subparsers.add_parser("show", help="Locate secrets and show merged values")
    _add_common_arguments(show_parser)
    show_parser.add_argument("--region", help="AWS region")
    show_parser.add_argument("--file", help="Read secrets from a YAML file instead of AWS")
    show_parser.add_argument(
        "--no-fail-fast", action="store_true", help="Skip contexts that fail to load"
    )
    show_parser.add_argument("--reveal", action="store_true", help="Show secret values")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING, json=False)

    try:
        if args.command == "contexts":
            return contexts_command(args)
        if args.command == "show":
            return show_command(args)
    except ValidationError as e:
        console.print(f"[error]Invalid configuration:[/error] {escape(str(e))}")
        return 2

    parser.print_help()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
