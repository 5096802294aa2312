"""authconf CLI - Main Entry Point.

Commands:
    detect   - Show which families a property set configures
    inspect  - Build the configuration and print its contents
"""

import json
import logging
import sys
from typing import Optional

import click

from . import __version__, __cli_name__
from .utils.colors import (
    success, error, warning, dim,
    banner, section, kv, bullet, table,
    _CHECK, _CROSS, _CIRCLE,
)
from ..config import PropertiesLoader
from ..factory import FAMILIES, PropertiesConfigFactory
from ..faults import Fault


class AuthconfGroup(click.Group):
    """Click group subclass with branded help output."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        if ctx.parent is None:
            banner("authconf", subtitle=f"v{__version__}  {_CHECK}  properties-driven auth configuration")
            click.echo()
        super().format_help(ctx, formatter)


@click.group(cls=AuthconfGroup)
@click.version_option(version=__version__, prog_name=__cli_name__)
@click.option('--verbose', '-v', is_flag=True, help='Verbose (DEBUG) logging')
@click.option('--env-prefix', default="AUTHCONF_", show_default=True, help='Environment variable prefix')
@click.option('--env-file', type=click.Path(dir_okay=False), help='.env file with prefixed keys')
@click.pass_context
def cli(ctx, verbose: bool, env_prefix: str, env_file: Optional[str]):
    """Build authentication configuration from flat properties.

    \b
    Quick start:
      authconf detect auth.properties
      authconf inspect auth.properties --callback-url https://app/callback
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['env_prefix'] = env_prefix
    ctx.obj['env_file'] = env_file


def _load(ctx, files):
    return PropertiesLoader.load(
        paths=list(files),
        env_prefix=ctx.obj['env_prefix'],
        env_file=ctx.obj['env_file'],
    )


def _fail(fault: Fault):
    error(f"  {_CROSS} {fault}")
    sys.exit(1)


# ============================================================================
# Commands
# ============================================================================

@cli.command('detect')
@click.argument('files', nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def detect(ctx, files):
    """
    Show which families are configured, in build order.

    Examples:
      authconf detect auth.properties
      AUTHCONF_anonymous=true authconf detect
    """
    try:
        properties = _load(ctx, files)
        result = PropertiesConfigFactory(properties).detect()
    except Fault as fault:
        _fail(fault)

    section("Detection")
    for family, detected in result.items():
        if detected:
            success(f"  {_CHECK} {family}")
        else:
            dim(f"  {_CIRCLE} {family}")


@cli.command('inspect')
@click.argument('files', nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option('--callback-url', help='Base callback URL for indirect clients')
@click.option('--family', 'families', multiple=True, type=click.Choice(FAMILIES),
              help='Only build these families (repeatable)')
@click.option('--json', 'as_json', is_flag=True, help='Output as JSON (secrets masked)')
@click.pass_context
def inspect(ctx, files, callback_url: Optional[str], families, as_json: bool):
    """
    Build the configuration and print clients, authenticators and encoders.

    Examples:
      authconf inspect auth.properties
      authconf inspect auth.properties --callback-url https://app/callback
      authconf inspect auth.yaml --family cas --family http --json
    """
    try:
        properties = _load(ctx, files)
        factory = PropertiesConfigFactory(
            properties,
            callback_url,
            families=families or None,
        )
        config = factory.build()
    except Fault as fault:
        _fail(fault)

    if as_json:
        click.echo(json.dumps(config.to_dict(), indent=2))
        return

    if config.is_empty():
        warning("  No clients, authenticators or encoders configured")
        return

    section("Configuration")
    kv("Callback URL", config.callback_url or "-")
    kv("Clients", str(len(config.clients)))
    kv("Authenticators", str(len(config.authenticators)))
    kv("Encoders", str(len(config.encoders)))

    if config.clients:
        click.echo()
        section("Clients")
        rows = [
            [
                client.name,
                client.family,
                type(client).__name__,
                (config.callback_url_for(client.name) or "-") if client.indirect else "direct",
            ]
            for client in config.clients
        ]
        table(["Name", "Family", "Type", "Callback"], rows)

    if config.authenticators:
        click.echo()
        section("Authenticators")
        for name, authenticator in config.authenticators.items():
            bullet(f"{name}  {type(authenticator).__name__}")

    if config.encoders:
        click.echo()
        section("Encoders")
        for name, encoder in config.encoders.items():
            bullet(f"{name}  {encoder!r}")


def main():
    """Entry point for `authconf` command."""
    cli(obj={})


if __name__ == '__main__':
    main()
