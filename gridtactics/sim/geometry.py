"""Facing rotation and single-step movement on the grid."""

from __future__ import annotations

from gridtactics.sim.contracts import Facing, Position

CLOCKWISE: dict[Facing, Facing] = {
    Facing.NORTH: Facing.EAST,
    Facing.EAST: Facing.SOUTH,
    Facing.SOUTH: Facing.WEST,
    Facing.WEST: Facing.NORTH,
}

# y grows downwards: row 0 is the top line of the map text.
STEP_DELTAS: dict[Facing, Position] = {
    Facing.NORTH: (0, -1),
    Facing.EAST: (1, 0),
    Facing.SOUTH: (0, 1),
    Facing.WEST: (-1, 0),
}


def rotate_cw(facing: Facing) -> Facing:
    return CLOCKWISE[facing]


def rotate_ccw(facing: Facing) -> Facing:
    return rotate_cw(rotate_cw(rotate_cw(facing)))


def reverse(facing: Facing) -> Facing:
    return rotate_cw(rotate_cw(facing))


def step(position: Position, facing: Facing) -> Position:
    dx, dy = STEP_DELTAS[facing]
    return (position[0] + dx, position[1] + dy)
