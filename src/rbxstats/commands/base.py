"""Shared plumbing for rbxstats query commands"""

from typing import Callable, Dict, Optional

import click
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from ..client import RbxStatsClient, RbxStatsError
from ..utils.config import get_client
from ..utils.output import console, handle_output, resolve_pretty


def output_options(func):
    """Attach the output options every query command accepts"""
    options = [
        click.option("--api-key", help="API key (overrides config and RBXSTATS_API_KEY)"),
        click.option("-o", "--output", help="Save output to file"),
        click.option("--json", "json_output", is_flag=True, help="Output as JSON"),
        click.option("--pretty/--no-pretty", default=None, help="Pretty print output"),
        click.option("--copy", is_flag=True, help="Copy output to clipboard"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def only_one(**flags) -> None:
    """Reject combinations of mutually exclusive filters"""
    given = [name for name, value in flags.items() if value]
    if len(given) > 1:
        raise click.BadParameter(
            f"Options {', '.join('--' + g for g in given)} cannot be combined"
        )


def run_query(
    label: str,
    call: Callable[[RbxStatsClient], Dict[str, str]],
    api_key: Optional[str],
    output: Optional[str],
    json_output: bool,
    pretty: Optional[bool],
    copy: bool,
) -> Dict[str, str]:
    """Run one API call with a spinner, then route the mapping to its outputs"""
    pretty = resolve_pretty(pretty)

    try:
        client = get_client(api_key)
    except RbxStatsError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort()

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(f"{escape(label)}...", total=None)
        try:
            with client:
                result = call(client)
        except RbxStatsError as e:
            progress.stop()
            console.print(f"[red]Error: {escape(str(e))}[/red]")
            raise click.Abort()

    handle_output(
        result,
        title=label,
        output_file=output,
        copy=copy,
        json_output=json_output,
        pretty=pretty,
    )
    return result
