"""Versions command for rbxstats"""

from typing import Optional

import click

from .base import output_options, run_query


@click.command()
@click.option("--future", is_flag=True, help="Show the upcoming version instead of the live one")
@output_options
def versions(
    future: bool,
    api_key: Optional[str],
    output: Optional[str],
    json_output: bool,
    pretty: Optional[bool],
    copy: bool,
):
    """Show the latest (or future) Roblox client version"""
    if future:
        label, call = "Future version", lambda c: c.versions.get_future()
    else:
        label, call = "Latest version", lambda c: c.versions.get_latest()

    run_query(label, call, api_key, output, json_output, pretty, copy)
