"""Turn loop orchestration for the tactical simulator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from gridtactics.sim.actions import (
    UnknownCommandError,
    apply_command,
    auto_fire,
    remove_dead,
)
from gridtactics.sim.contracts import (
    FRIENDLY_DIED,
    UNKNOWN_ACTION,
    ActionQueue,
    GridMap,
    PlayerTurn,
    SimulationResult,
    TurnRecord,
)
from gridtactics.sim.probes import probe_string

logger = logging.getLogger(__name__)


@dataclass
class TurnOutcome:
    record: TurnRecord
    working_map: GridMap
    error_message: str | None = None


def simulate(grid_map: GridMap, queues: Iterable[ActionQueue]) -> SimulationResult:
    """Run every turn until the queues run out or a player dies.

    The input map is never mutated: each turn works on a clone of the map
    the previous turn produced, and the record keeps the pre-turn map.
    """
    queue_list = list(queues)
    by_order = _index_queues(grid_map, queue_list)

    turns: list[TurnRecord] = []
    current = grid_map
    error_message: str | None = None
    while True:
        outcome = run_turn(current, by_order, len(turns))
        turns.append(outcome.record)
        current = outcome.working_map
        if outcome.error_message is not None:
            error_message = outcome.error_message
            break
        alive_players = len(current.players())
        if alive_players < len(by_order):
            error_message = FRIENDLY_DIED
            break
        if not outcome.record.players:
            break

    logger.info(
        "simulation finished after %s turns: %s",
        len(turns),
        error_message or "completed",
    )
    return SimulationResult(turns=turns, error_message=error_message, final_map=current)


def run_turn(
    current: GridMap, queues: dict[int, ActionQueue], turn: int
) -> TurnOutcome:
    snapshot = current.clone()
    working = current.clone()
    order_list = [actor.order for actor in working.actors]

    players: dict[int, PlayerTurn] = {}
    error_message: str | None = None
    for order in order_list:
        actor = working.actor_by_order(order)
        if actor is None:
            continue

        queue = queues.get(order)
        command = queue.command_at(turn) if queue is not None else None
        if command is not None and actor.type.controllable:
            players[order] = PlayerTurn(
                command=command,
                health=actor.health,
                probes=probe_string(working, order) or "",
            )
            try:
                apply_command(working, order, command)
            except UnknownCommandError:
                logger.warning(
                    "turn %s: actor %s queued an unknown command", turn, order
                )
                error_message = UNKNOWN_ACTION

        auto_fire(working, actor)
        remove_dead(working)

    record = TurnRecord(turn=turn, map=snapshot, players=players)
    return TurnOutcome(
        record=record,
        working_map=working,
        error_message=error_message,
    )


def _index_queues(
    grid_map: GridMap, queues: list[ActionQueue]
) -> dict[int, ActionQueue]:
    by_order: dict[int, ActionQueue] = {}
    for queue in queues:
        if queue.order in by_order:
            raise ValueError(f"duplicate action queue for order {queue.order}")
        actor = grid_map.actor_by_order(queue.order)
        if actor is None or not actor.type.controllable:
            raise ValueError(f"order {queue.order} is not a player on this map")
        by_order[queue.order] = queue
    return by_order
