"""Game command for rbxstats"""

from typing import Optional

import click

from .base import output_options, run_query


@click.command()
@click.argument("game_id", type=int)
@output_options
def game(
    game_id: int,
    api_key: Optional[str],
    output: Optional[str],
    json_output: bool,
    pretty: Optional[bool],
    copy: bool,
):
    """Look up a game by its place id

    \b
    Examples:
        rbxstats game 606849621
        rbxstats game 606849621 -o game.json
    """
    if game_id < 0:
        raise click.BadParameter("game id must be >= 0", param_hint="GAME_ID")

    run_query(
        f"Game {game_id}",
        lambda c: c.game.get_game_by_id(game_id),
        api_key, output, json_output, pretty, copy,
    )
