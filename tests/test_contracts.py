import pytest
from pydantic import ValidationError

from gridtactics.sim.contracts import (
    ActionQueue,
    Actor,
    ActorType,
    CellType,
    Command,
    Facing,
    GridMap,
)


def build_actor(order: int, x: int = 0, y: int = 0) -> Actor:
    return Actor(
        type=ActorType.PLAYER, order=order, facing=Facing.NORTH, health=1, x=x, y=y
    )


def build_grid(width: int, height: int) -> list[list[CellType]]:
    return [[CellType.EMPTY] * height for _ in range(width)]


def test_grid_map_rejects_duplicate_orders() -> None:
    with pytest.raises(ValidationError, match="order must be unique"):
        GridMap(
            width=2,
            height=1,
            grid=build_grid(2, 1),
            actors=[build_actor(1, x=0), build_actor(1, x=1)],
        )


def test_grid_map_rejects_actor_outside_grid() -> None:
    with pytest.raises(ValidationError, match="outside the grid"):
        GridMap(
            width=1, height=1, grid=build_grid(1, 1), actors=[build_actor(0, x=1)]
        )


def test_grid_map_rejects_ragged_columns() -> None:
    with pytest.raises(ValidationError, match="rectangular"):
        GridMap(width=2, height=2, grid=[[CellType.EMPTY] * 2, [CellType.EMPTY]])


def test_clone_is_independent() -> None:
    grid_map = GridMap(
        width=2, height=1, grid=build_grid(2, 1), actors=[build_actor(0)]
    )
    clone = grid_map.clone()
    clone.actors[0].health = 0
    clone.actors[0].x = 1

    assert grid_map.actors[0].health == 1
    assert grid_map.actors[0].position == (0, 0)


def test_action_queue_command_at() -> None:
    queue = ActionQueue(order=0, actions=[Command.MOVE, Command.WAIT])
    assert queue.command_at(1) == Command.WAIT
    assert queue.command_at(2) is None


def test_actor_type_hooks() -> None:
    assert ActorType.PLAYER.controllable
    assert not ActorType.ENEMY.controllable
    assert ActorType.ENEMY.fires_automatically
    assert not ActorType.TARGET.fires_automatically
    assert [actor_type.letter for actor_type in ActorType] == ["p", "t", "e"]
