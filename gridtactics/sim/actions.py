"""Resolve one command for one actor against the current map."""

from __future__ import annotations

import logging

from gridtactics.sim.contracts import Actor, CellType, Command, GridMap
from gridtactics.sim.geometry import rotate_ccw, rotate_cw, step
from gridtactics.sim.raycast import RayOutcome, cast_ray

logger = logging.getLogger(__name__)


class UnknownCommandError(ValueError):
    """Raised when a queued command is outside the command set."""


def apply_command(grid_map: GridMap, order: int, command: Command) -> GridMap:
    """Mutate ``grid_map`` by applying ``command`` for the actor ``order``.

    A missing actor is a no-op. Dead actors are not removed here; the turn
    loop calls :func:`remove_dead` after each actor resolves.
    """
    actor = grid_map.actor_by_order(order)
    if actor is None:
        return grid_map

    if command == Command.ROTATE_LEFT:
        actor.facing = rotate_ccw(actor.facing)
    elif command == Command.ROTATE_RIGHT:
        actor.facing = rotate_cw(actor.facing)
    elif command == Command.MOVE:
        move(grid_map, actor)
    elif command == Command.SHOOT:
        fire(grid_map, actor)
    elif command == Command.WAIT:
        pass
    else:
        raise UnknownCommandError(f"unknown command {command!r} for actor {order}")
    logger.debug(
        "actor %s %s -> at %s facing %s health %s",
        order,
        command.name,
        actor.position,
        actor.facing.value,
        actor.health,
    )
    return grid_map


def move(grid_map: GridMap, actor: Actor) -> bool:
    """Step one cell forward; a blocked step costs one health instead."""
    x, y = step(actor.position, actor.facing)
    blocked = (
        not grid_map.in_bounds(x, y)
        or grid_map.cell(x, y) == CellType.BLOCK
        or grid_map.actor_at(x, y) is not None
    )
    if blocked:
        actor.health -= 1
        logger.debug("actor %s collided at %s", actor.order, (x, y))
        return False
    actor.x = x
    actor.y = y
    return True


def fire(grid_map: GridMap, actor: Actor) -> int | None:
    """Shoot along the actor's facing and return the order of the actor hit."""
    hit = cast_ray(grid_map, actor.position, actor.facing)
    if hit.outcome != RayOutcome.ACTOR or hit.actor_order is None:
        return None
    target = grid_map.actor_by_order(hit.actor_order)
    if target is None:
        return None
    target.health -= 1
    logger.debug(
        "actor %s hit actor %s (health %s)", actor.order, target.order, target.health
    )
    return target.order


def auto_fire(grid_map: GridMap, actor: Actor) -> int | None:
    """Turret shot for actors that fire every turn; a miss changes nothing."""
    if not actor.type.fires_automatically:
        return None
    return fire(grid_map, actor)


def remove_dead(grid_map: GridMap) -> list[Actor]:
    dead = [actor for actor in grid_map.actors if not actor.alive]
    if dead:
        grid_map.actors = [actor for actor in grid_map.actors if actor.alive]
        for actor in dead:
            logger.debug("actor %s (%s) removed", actor.order, actor.type.value)
    return dead
