"""Offsets command for rbxstats"""

from typing import Optional

import click

from .base import only_one, output_options, run_query


@click.command()
@click.option("--name", "-n", help="Look up a single offset by name")
@click.option("--prefix", "-p", help="List offsets whose name starts with PREFIX")
@click.option("--camera", is_flag=True, help="Camera offsets only")
@output_options
def offsets(
    name: Optional[str],
    prefix: Optional[str],
    camera: bool,
    api_key: Optional[str],
    output: Optional[str],
    json_output: bool,
    pretty: Optional[bool],
    copy: bool,
):
    """Show Roblox memory offsets

    \b
    Examples:
        rbxstats offsets
        rbxstats offsets --name RenderToEngine
        rbxstats offsets --prefix Camera --json
        rbxstats offsets --camera
    """
    only_one(name=name, prefix=prefix, camera=camera)

    if name:
        label, call = f"Offset {name}", lambda c: c.offsets.get_offset_by_name(name)
    elif prefix:
        label, call = f"Offsets starting with {prefix}", lambda c: c.offsets.get_offsets_by_prefix(prefix)
    elif camera:
        label, call = "Camera offsets", lambda c: c.offsets.get_camera()
    else:
        label, call = "Offsets", lambda c: c.offsets.get_all()

    run_query(label, call, api_key, output, json_output, pretty, copy)
