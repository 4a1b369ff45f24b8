"""Coloured rendering of a map snapshot."""

from __future__ import annotations

from rich.text import Text

from gridtactics.sim.contracts import ActorType, CellType, GridMap
from gridtactics.sim.map_text import TERRAIN_LETTERS, render_actor

TILE_STYLES = {
    CellType.EMPTY: "grey50",
    CellType.BLOCK: "bright_magenta",
    CellType.FINISH: "bold green3",
}

ACTOR_STYLES = {
    ActorType.PLAYER: "bold bright_cyan",
    ActorType.TARGET: "yellow",
    ActorType.ENEMY: "bold red",
}

DEAD_STYLE = "dim"


def render_board(grid_map: GridMap) -> Text:
    """Render the map text with one style per tile or actor token."""
    occupied = {actor.position: actor for actor in grid_map.actors}
    width = max([len(render_actor(actor)) for actor in grid_map.actors] + [1])

    board = Text()
    last = grid_map.width - 1
    for y in range(grid_map.height):
        if y:
            board.append("\n")
        for x in range(grid_map.width):
            pad = width if x < last else 0
            actor = occupied.get((x, y))
            if actor is not None:
                style = ACTOR_STYLES[actor.type] if actor.alive else DEAD_STYLE
                board.append(render_actor(actor).ljust(pad), style=style)
            else:
                cell = grid_map.cell(x, y)
                board.append(TERRAIN_LETTERS[cell].ljust(pad), style=TILE_STYLES[cell])
            if x < last:
                board.append(" ")
    return board
