"""Simulation core: map model, ray casting, action resolution and turns."""

from gridtactics.sim.actions import UnknownCommandError, apply_command, fire
from gridtactics.sim.contracts import (
    FRIENDLY_DIED,
    UNKNOWN_ACTION,
    ActionQueue,
    Actor,
    ActorType,
    CellType,
    Command,
    Facing,
    GridMap,
    ParseError,
    PlayerTurn,
    SimulationResult,
    TurnRecord,
)
from gridtactics.sim.map_text import (
    load_map,
    parse_action_spec,
    parse_actions,
    parse_map,
    render_map,
)
from gridtactics.sim.probes import probe, probe_string
from gridtactics.sim.raycast import RayHit, RayOutcome, cast_ray, iter_ray
from gridtactics.sim.turn_loop import run_turn, simulate

__all__ = [
    "ActionQueue",
    "Actor",
    "ActorType",
    "CellType",
    "Command",
    "FRIENDLY_DIED",
    "Facing",
    "GridMap",
    "ParseError",
    "PlayerTurn",
    "RayHit",
    "RayOutcome",
    "SimulationResult",
    "TurnRecord",
    "UNKNOWN_ACTION",
    "UnknownCommandError",
    "apply_command",
    "cast_ray",
    "fire",
    "iter_ray",
    "load_map",
    "parse_action_spec",
    "parse_actions",
    "parse_map",
    "probe",
    "probe_string",
    "render_map",
    "run_turn",
    "simulate",
]
