import pytest

from gridtactics.sim.actions import (
    UnknownCommandError,
    apply_command,
    auto_fire,
    remove_dead,
)
from gridtactics.sim.contracts import Command, Facing
from gridtactics.sim.map_text import parse_map


def test_rotations() -> None:
    grid_map = parse_map("p0e1")
    apply_command(grid_map, 0, Command.ROTATE_LEFT)
    assert grid_map.actors[0].facing == Facing.NORTH

    apply_command(grid_map, 0, Command.ROTATE_RIGHT)
    apply_command(grid_map, 0, Command.ROTATE_RIGHT)
    assert grid_map.actors[0].facing == Facing.SOUTH

    for _ in range(4):
        apply_command(grid_map, 0, Command.ROTATE_RIGHT)
    assert grid_map.actors[0].facing == Facing.SOUTH


def test_wait_changes_nothing() -> None:
    grid_map = parse_map("p0e2 _")
    before = grid_map.clone()
    apply_command(grid_map, 0, Command.WAIT)
    assert grid_map == before


def test_move_into_empty_cell() -> None:
    grid_map = parse_map("p0e2 _")
    apply_command(grid_map, 0, Command.MOVE)
    player = grid_map.actors[0]
    assert player.position == (1, 0)
    assert player.health == 2
    assert player.facing == Facing.EAST


def test_move_into_block_costs_health() -> None:
    grid_map = parse_map("p0e2 x")
    apply_command(grid_map, 0, Command.MOVE)
    player = grid_map.actors[0]
    assert player.position == (0, 0)
    assert player.health == 1


def test_move_into_actor_behaves_like_block() -> None:
    grid_map = parse_map("p0e2 t1w1")
    apply_command(grid_map, 0, Command.MOVE)
    assert grid_map.actor_by_order(0).position == (0, 0)
    assert grid_map.actor_by_order(0).health == 1
    assert grid_map.actor_by_order(1).health == 1


def test_move_off_the_grid_is_a_collision() -> None:
    grid_map = parse_map("p0w2 _")
    apply_command(grid_map, 0, Command.MOVE)
    assert grid_map.actors[0].position == (0, 0)
    assert grid_map.actors[0].health == 1


def test_shoot_hits_only_first_actor() -> None:
    grid_map = parse_map("p0e1 _ t1w2 e2w3")
    apply_command(grid_map, 0, Command.SHOOT)
    assert grid_map.actor_by_order(1).health == 1
    assert grid_map.actor_by_order(2).health == 3
    assert grid_map.actor_by_order(0).health == 1


def test_shoot_blocked_by_wall() -> None:
    grid_map = parse_map("p0e1 x t1w2")
    apply_command(grid_map, 0, Command.SHOOT)
    assert grid_map.actor_by_order(1).health == 2


def test_friendly_fire() -> None:
    grid_map = parse_map("p0e1 p1w2")
    apply_command(grid_map, 0, Command.SHOOT)
    assert grid_map.actor_by_order(1).health == 1


def test_invalid_command_raises() -> None:
    grid_map = parse_map("p0e1")
    with pytest.raises(UnknownCommandError):
        apply_command(grid_map, 0, Command.INVALID)


def test_missing_actor_is_ignored() -> None:
    grid_map = parse_map("p0e1 _")
    assert apply_command(grid_map, 5, Command.MOVE) is grid_map
    assert grid_map.actors[0].position == (0, 0)


def test_auto_fire_only_for_enemies() -> None:
    grid_map = parse_map("t0e1 p1w2 e2w1")
    assert auto_fire(grid_map, grid_map.actor_by_order(0)) is None
    assert grid_map.actor_by_order(1).health == 2

    assert auto_fire(grid_map, grid_map.actor_by_order(2)) == 1
    assert grid_map.actor_by_order(1).health == 1


def test_auto_fire_miss_keeps_facing() -> None:
    grid_map = parse_map("e0e1 _ x")
    assert auto_fire(grid_map, grid_map.actors[0]) is None
    assert grid_map.actors[0].facing == Facing.EAST


def test_remove_dead() -> None:
    grid_map = parse_map("p0e1 t1w1")
    grid_map.actor_by_order(1).health = 0
    dead = remove_dead(grid_map)
    assert [actor.order for actor in dead] == [1]
    assert [actor.order for actor in grid_map.actors] == [0]
