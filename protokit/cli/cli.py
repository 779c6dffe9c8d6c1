"""protokit CLI - inspect importable objects from the command line.

Usage:
    protokit protocol pkg.module:Class        - List the protocol definition
    protokit check pkg.module:Class NAME...   - Check names are callable
    protokit chain pkg.module:Class           - Show the ancestor chain
"""

import importlib
import json
import sys
from typing import Any

import click

from protokit import __version__
from protokit.ancestry.walker import build_ancestor_chain
from protokit.capabilities.checker import has_all_methods_called, missing_methods
from protokit.config import VALID_LOG_LEVELS, get_config
from protokit.core.errors import ConfigError, ProtokitError, TargetResolutionError
from protokit.core.logging import setup_logging
from protokit.models.member import is_capability
from protokit.protocols.builder import build_deep_protocol_definition, is_user_capability


def resolve_target(reference: str) -> Any:
    """Import ``module:attribute`` (attribute may be dotted)."""
    module_name, sep, attr_path = reference.partition(":")
    if not sep or not module_name or not attr_path:
        raise TargetResolutionError("Target must look like module:attribute", target=reference)

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise TargetResolutionError(f"Cannot import module '{module_name}'", target=reference, cause=e) from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise TargetResolutionError(f"'{part}' not found", target=reference, cause=e) from e

    return obj


def _fail(error: ProtokitError) -> None:
    click.echo(error.format_user_friendly(), err=True)
    sys.exit(2)


@click.group()
@click.version_option(version=__version__, prog_name="protokit")
@click.option("--log-level", default=None, help="Override PROTOKIT_LOG_LEVEL")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """protokit - runtime structural typing for Python objects.

    Inspect what an object can do: its protocol definition, whether it has
    a set of callable methods, and the ancestor chain behind both.
    """
    config = get_config()

    try:
        config.require_valid()
    except ProtokitError as e:
        _fail(e)

    level = (log_level or config.log.level).upper()
    if level not in VALID_LOG_LEVELS:
        _fail(ConfigError(f"Unknown log level: {log_level}", suggestion=f"Use one of {', '.join(VALID_LOG_LEVELS)}"))

    setup_logging(
        level=level,
        format_type=config.log.format,
        console_enabled=config.log.console_enabled,
        force=True,
    )
    ctx.obj = config


@cli.command()
@click.argument("target")
@click.option("--json", "as_json", is_flag=True, help="Print a JSON list")
@click.pass_obj
def protocol(config, target: str, as_json: bool):
    """List the methods and accessors TARGET exposes, inherited ones included."""
    try:
        subject = resolve_target(target)
    except ProtokitError as e:
        _fail(e)

    names = build_deep_protocol_definition(subject)

    if as_json or config.output.json:
        click.echo(json.dumps(names))
        return

    for name in names:
        click.echo(name)


@cli.command()
@click.argument("target")
@click.argument("names", nargs=-1)
def check(target: str, names: tuple[str, ...]):
    """Check that every NAME is callable on TARGET."""
    try:
        subject = resolve_target(target)
    except ProtokitError as e:
        _fail(e)

    if has_all_methods_called(subject, names):
        click.echo("OK")
        return

    missing = missing_methods(subject, names)
    click.echo(f"Missing: {', '.join(missing)}", err=True)
    sys.exit(1)


@cli.command()
@click.argument("target")
def chain(target: str):
    """Show each level of TARGET's ancestor chain and what it declares."""
    try:
        subject = resolve_target(target)
    except ProtokitError as e:
        _fail(e)

    for depth, level in enumerate(build_ancestor_chain(subject)):
        click.echo(f"{depth}: {level.name}")
        for name, member in level.members.items():
            if not is_capability(member) or not is_user_capability(name):
                continue
            click.echo(f"    {name} [{member.kind}]")


if __name__ == "__main__":
    cli()
