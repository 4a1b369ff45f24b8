"""Straight-line scan used by shooting and probing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from gridtactics.sim.contracts import CellType, Facing, GridMap, Position
from gridtactics.sim.geometry import step


class RayOutcome(str, Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    WALL = "wall"
    ACTOR = "actor"


@dataclass(frozen=True)
class RayHit:
    """Where a ray stopped.

    ``distance`` counts the free cells passed before the terminating cell.
    ``finish_step`` is the 1-based step at which a finish cell was first
    crossed, counting the first cell beyond the origin as step 1.
    """

    outcome: RayOutcome
    position: Position
    distance: int
    actor_order: int | None = None
    finish_step: int | None = None


def iter_ray(grid_map: GridMap, start: Position, facing: Facing) -> Iterator[Position]:
    """Yield each in-bounds cell beyond ``start`` until the ray leaves the grid."""
    position = step(start, facing)
    while grid_map.in_bounds(*position):
        yield position
        position = step(position, facing)


def cast_ray(grid_map: GridMap, start: Position, facing: Facing) -> RayHit:
    finish_step: int | None = None
    distance = 0
    position = start
    for steps, position in enumerate(iter_ray(grid_map, start, facing), start=1):
        cell = grid_map.cell(*position)
        if cell == CellType.BLOCK:
            return RayHit(RayOutcome.WALL, position, distance, None, finish_step)
        if cell == CellType.FINISH and finish_step is None:
            finish_step = steps
        actor = grid_map.actor_at(*position)
        if actor is not None:
            return RayHit(
                RayOutcome.ACTOR, position, distance, actor.order, finish_step
            )
        distance += 1
    return RayHit(
        RayOutcome.OUT_OF_BOUNDS, step(position, facing), distance, None, finish_step
    )
