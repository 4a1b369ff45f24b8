"""Rich viewer rendering for turn records and simulation results."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gridtactics.render.board import render_board
from gridtactics.sim.contracts import SimulationResult, TurnRecord


def render_turn(record: TurnRecord, *, show_map: bool = True) -> RenderableType:
    header = Text(f"Turn {record.turn + 1}", style="bold")
    parts: list[RenderableType] = [header]
    if show_map:
        parts.append(Panel(render_board(record.map), title="Map", expand=False))
    parts.append(_render_players(record))
    return Panel(Group(*parts), title="Simulation")


def render_result(
    result: SimulationResult, *, show_map: bool = True
) -> RenderableType:
    parts: list[RenderableType] = [
        render_turn(record, show_map=show_map) for record in result.turns
    ]
    if show_map and result.final_map is not None:
        parts.append(
            Panel(render_board(result.final_map), title="Final Map", expand=False)
        )
    parts.append(render_status(result))
    return Group(*parts)


def render_status(result: SimulationResult) -> RenderableType:
    if result.ended_cleanly:
        text = Text(f"Completed after {len(result.turns)} turns.", style="bold green")
    else:
        text = Text(
            f"{result.error_message} (turn {len(result.turns)}).", style="bold red"
        )
    return Panel(text, title="Status")


def _render_players(record: TurnRecord) -> RenderableType:
    table = Table(title="Players", show_header=True, header_style="bold")
    table.add_column("Order")
    table.add_column("Action")
    table.add_column("Health")
    table.add_column("Probes")

    for order in sorted(record.players):
        player = record.players[order]
        table.add_row(
            format(order, "x"),
            player.command.value,
            str(player.health),
            player.probes,
        )
    if not record.players:
        table.add_row("-", "None", "-", "-")
    return table
