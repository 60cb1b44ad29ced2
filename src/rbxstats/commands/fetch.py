"""Raw endpoint commands for rbxstats"""

from typing import Optional, Tuple

import click
from rich.table import Table

from ..client import ENDPOINTS, resolve_endpoint
from ..utils.output import console
from .base import output_options, run_query


@click.command()
@click.argument("endpoint")
@click.argument("params", nargs=-1)
@output_options
def fetch(
    endpoint: str,
    params: Tuple[str, ...],
    api_key: Optional[str],
    output: Optional[str],
    json_output: bool,
    pretty: Optional[bool],
    copy: bool,
):
    """Fetch any endpoint by registry name or raw path

    \b
    Examples:
        rbxstats fetch offsets.search RenderToEngine
        rbxstats fetch game.id 606849621
        rbxstats fetch exploits/free
    """
    if endpoint in ENDPOINTS:
        try:
            path = resolve_endpoint(endpoint, *params)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="PARAMS")
    elif params:
        raise click.BadParameter(
            "extra arguments are only accepted with a registry name", param_hint="PARAMS"
        )
    else:
        path = endpoint.strip("/")

    run_query(path, lambda c: c.fetch(path), api_key, output, json_output, pretty, copy)


@click.command()
def endpoints():
    """List known endpoints and their paths"""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Path", style="dim")
    for name, template in ENDPOINTS.items():
        table.add_row(name, template.replace("{}", "<arg>"))
    console.print(table)
