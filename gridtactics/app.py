"""Application entry for running a scenario file end to end."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from rich.console import Console

from gridtactics.render.turn_player import run_turn_player
from gridtactics.render.viewer import render_result
from gridtactics.sim.contracts import SimulationResult
from gridtactics.sim.map_text import load_map, parse_action_spec
from gridtactics.sim.turn_loop import simulate

DEFAULT_LOG_LEVEL = "WARNING"


def run_scenario(
    map_path: Path,
    action_specs: Iterable[str],
    *,
    strict_actions: bool = False,
) -> SimulationResult:
    grid_map = load_map(map_path)
    queues = [
        parse_action_spec(spec, keep_unknown=strict_actions) for spec in action_specs
    ]
    return simulate(grid_map, queues)


def print_result(
    result: SimulationResult,
    *,
    show_map: bool | None = None,
    console: Console | None = None,
) -> None:
    console = console or Console()
    console.print(render_result(result, show_map=resolve_show_map(show_map)))


def view_result(result: SimulationResult, *, show_map: bool | None = None) -> None:
    run_turn_player(result, show_map=resolve_show_map(show_map))


def resolve_log_level(level: str | None) -> str:
    return (level or os.getenv("GRIDTACTICS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def resolve_show_map(show_map: bool | None) -> bool:
    if show_map is not None:
        return show_map
    return os.getenv("GRIDTACTICS_SHOW_MAP", "1").strip().lower() not in {
        "0",
        "false",
        "no",
    }
