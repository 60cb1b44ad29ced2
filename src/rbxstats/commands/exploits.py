"""Exploits command for rbxstats"""

from typing import Optional

import click

from .base import only_one, output_options, run_query


@click.command()
@click.option(
    "--platform",
    type=click.Choice(["windows", "mac"]),
    default=None,
    help="Only exploits for this platform",
)
@click.option("--undetected", is_flag=True, help="Only currently undetected exploits")
@click.option("--detected", is_flag=True, help="Only currently detected exploits")
@click.option("--free", is_flag=True, help="Only free exploits")
@output_options
def exploits(
    platform: Optional[str],
    undetected: bool,
    detected: bool,
    free: bool,
    api_key: Optional[str],
    output: Optional[str],
    json_output: bool,
    pretty: Optional[bool],
    copy: bool,
):
    """List exploits and their status

    The API offers one filter per request, so filters cannot be combined.

    \b
    Examples:
        rbxstats exploits
        rbxstats exploits --platform mac
        rbxstats exploits --undetected --json
    """
    only_one(platform=platform, undetected=undetected, detected=detected, free=free)

    if platform == "windows":
        label, call = "Windows exploits", lambda c: c.exploits.get_windows()
    elif platform == "mac":
        label, call = "Mac exploits", lambda c: c.exploits.get_mac()
    elif undetected:
        label, call = "Undetected exploits", lambda c: c.exploits.get_undetected()
    elif detected:
        label, call = "Detected exploits", lambda c: c.exploits.get_detected()
    elif free:
        label, call = "Free exploits", lambda c: c.exploits.get_free()
    else:
        label, call = "Exploits", lambda c: c.exploits.get_all()

    run_query(label, call, api_key, output, json_output, pretty, copy)
