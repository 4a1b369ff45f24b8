"""Parse and render the whitespace-separated map text format."""

from __future__ import annotations

import string
from pathlib import Path

from gridtactics.sim.contracts import (
    ActionQueue,
    Actor,
    ActorType,
    CellType,
    Command,
    Facing,
    GridMap,
    ParseError,
)

TERRAIN_TOKENS: dict[str, CellType] = {
    "_": CellType.EMPTY,
    "x": CellType.BLOCK,
    "f": CellType.FINISH,
}
TERRAIN_LETTERS: dict[CellType, str] = {
    cell: token for token, cell in TERRAIN_TOKENS.items()
}
ACTOR_LETTERS: dict[str, ActorType] = {
    actor_type.letter: actor_type for actor_type in ActorType
}
COMMAND_LETTERS: dict[str, Command] = {
    command.value: command for command in Command if command is not Command.INVALID
}


def parse_map(text: str) -> GridMap:
    rows = [line.split() for line in text.strip().splitlines()]
    if not rows or not rows[0]:
        raise ParseError("no rows")
    width = len(rows[0])
    for row in rows:
        if len(row) != width:
            raise ParseError("not rectangular")
    height = len(rows)

    grid: list[list[CellType]] = []
    actors: list[Actor] = []
    for x in range(width):
        column: list[CellType] = []
        for y in range(height):
            token = rows[y][x]
            if token in TERRAIN_TOKENS:
                column.append(TERRAIN_TOKENS[token])
                continue
            actor_type = ACTOR_LETTERS.get(token[0])
            if actor_type is None:
                raise ParseError(f"unknown tile '{token}'")
            actors.append(_parse_actor(token, actor_type, x, y))
            column.append(CellType.EMPTY)
        grid.append(column)

    orders = [actor.order for actor in actors]
    if len(orders) != len(set(orders)):
        raise ParseError("order must be unique")
    return GridMap(width=width, height=height, grid=grid, actors=actors)


def render_map(grid_map: GridMap) -> str:
    occupied = {actor.position: actor for actor in grid_map.actors}
    lines: list[str] = []
    for y in range(grid_map.height):
        tokens: list[str] = []
        for x in range(grid_map.width):
            actor = occupied.get((x, y))
            if actor is not None:
                tokens.append(render_actor(actor))
            else:
                tokens.append(TERRAIN_LETTERS[grid_map.cell(x, y)])
        lines.append(" ".join(tokens))
    return "\n".join(lines)


def render_actor(actor: Actor) -> str:
    return (
        f"{actor.type.letter}{_hex(actor.order)}{actor.facing.value}"
        f"{_hex(actor.health)}"
    )


def load_map(path: Path) -> GridMap:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing map file: {path}") from exc
    return parse_map(text)


def parse_actions(text: str, *, keep_unknown: bool = False) -> list[Command]:
    """Turn a command string such as ``"MMLS"`` into commands.

    Whitespace is ignored and letters are case-insensitive. Unknown
    characters are dropped unless ``keep_unknown`` is set, in which case
    they become ``Command.INVALID`` and end the run when reached.
    """
    commands: list[Command] = []
    for char in text:
        if char.isspace():
            continue
        command = COMMAND_LETTERS.get(char.upper())
        if command is not None:
            commands.append(command)
        elif keep_unknown:
            commands.append(Command.INVALID)
    return commands


def parse_action_spec(raw: str, *, keep_unknown: bool = False) -> ActionQueue:
    """Parse an ``ORDER=COMMANDS`` argument, e.g. ``"3=MMRS"``."""
    order_text, sep, actions_text = raw.partition("=")
    if not sep:
        raise ParseError(f"action spec '{raw}' must look like ORDER=COMMANDS")
    try:
        order = int(order_text.strip(), 16)
    except ValueError as exc:
        raise ParseError(f"action spec '{raw}' has an invalid order") from exc
    return ActionQueue(
        order=order, actions=parse_actions(actions_text, keep_unknown=keep_unknown)
    )


def _parse_actor(token: str, actor_type: ActorType, x: int, y: int) -> Actor:
    name = actor_type.value
    if len(token) != 4:
        raise ParseError(f"malformed {name} tag")
    order = _parse_hex_digit(token[1], name)
    facing_letter = token[2]
    health = _parse_hex_digit(token[3], name)
    try:
        facing = Facing(facing_letter)
    except ValueError as exc:
        raise ParseError(f"{name} face invalid") from exc
    return Actor(type=actor_type, order=order, facing=facing, health=health, x=x, y=y)


def _parse_hex_digit(char: str, name: str) -> int:
    if char not in string.hexdigits:
        raise ParseError(f"malformed {name} tag")
    return int(char, 16)


def _hex(value: int) -> str:
    if 0 <= value < 16:
        return format(value, "x")
    return str(value)
