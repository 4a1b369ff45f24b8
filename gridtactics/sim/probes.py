"""Four-way sensor readings for a player."""

from __future__ import annotations

from gridtactics.sim.contracts import ActorType, Facing, GridMap, Position
from gridtactics.sim.geometry import reverse, rotate_ccw, rotate_cw
from gridtactics.sim.raycast import RayOutcome, cast_ray

HIT_PREFIXES: dict[ActorType, str] = {
    ActorType.TARGET: "E",
    ActorType.ENEMY: "E",
    ActorType.PLAYER: "P",
}


def probe(grid_map: GridMap, facing: Facing, position: Position) -> str:
    hit = cast_ray(grid_map, position, facing)
    prefix = ""
    if hit.outcome == RayOutcome.ACTOR and hit.actor_order is not None:
        actor = grid_map.actor_by_order(hit.actor_order)
        if actor is not None:
            prefix = HIT_PREFIXES[actor.type]
    output = f"{prefix}{hit.distance}"
    if hit.finish_step is not None:
        output += f"/F{hit.finish_step}"
    return output


def probe_string(grid_map: GridMap, order: int) -> str | None:
    actor = grid_map.actor_by_order(order)
    if actor is None:
        return None
    facing = actor.facing
    position = actor.position
    return (
        f"front: {probe(grid_map, facing, position)} "
        f"back: {probe(grid_map, reverse(facing), position)} "
        f"left: {probe(grid_map, rotate_ccw(facing), position)} "
        f"right: {probe(grid_map, rotate_cw(facing), position)}"
    )
