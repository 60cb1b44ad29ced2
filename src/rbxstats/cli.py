#!/usr/bin/env python3
"""
rbxstats - A CLI for the RbxStats API
Offsets, exploits, versions and games from your terminal
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .commands.offsets import offsets
from .commands.exploits import exploits
from .commands.versions import versions
from .commands.game import game
from .commands.fetch import fetch, endpoints
from .utils.config import load_config, get_config_path

console = Console()


def setup_logging(verbose: bool):
    """Route rbxstats log records through Rich"""
    logger = logging.getLogger("rbxstats")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Show request details")
@click.pass_context
@click.version_option(version=__version__, prog_name='rbxstats')
def cli(ctx, verbose):
    """
    rbxstats - RbxStats API CLI

    Query Roblox offsets, exploit status and client versions.

    Examples:
        rbxstats offsets --camera
        rbxstats exploits --undetected
        rbxstats versions --future
        rbxstats game 606849621
    """
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())

# Register commands
cli.add_command(offsets)
cli.add_command(exploits)
cli.add_command(versions)
cli.add_command(game)
cli.add_command(fetch)
cli.add_command(endpoints)

@cli.command()
def config():
    """View current configuration"""
    config_data = load_config()
    console.print(f"[bold cyan]Current Configuration[/bold cyan] [dim]({get_config_path()})[/dim]")
    for key, value in config_data.items():
        if key == "api_key" and value:
            value = value[:4] + "***" if len(value) > 4 else "***"
        console.print(f"  {key}: {value}")

def main():
    cli()

if __name__ == '__main__':
    main()
