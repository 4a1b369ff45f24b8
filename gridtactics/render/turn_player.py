"""Step through a finished simulation result (Textual)."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Static

from gridtactics.render.viewer import render_status, render_turn
from gridtactics.sim.contracts import SimulationResult


@dataclass
class TurnCursor:
    total: int
    index: int = 0
    show_map: bool = True

    def next(self) -> int:
        self.index = min(self.index + 1, max(self.total - 1, 0))
        return self.index

    def previous(self) -> int:
        self.index = max(self.index - 1, 0)
        return self.index

    def first(self) -> int:
        self.index = 0
        return self.index

    def last(self) -> int:
        self.index = max(self.total - 1, 0)
        return self.index

    def toggle_map(self) -> bool:
        self.show_map = not self.show_map
        return self.show_map


def render_player_frame(
    result: SimulationResult, cursor: TurnCursor
) -> RenderableType:
    if not result.turns:
        return Panel(Text("No turns were simulated."), title="Turns")
    record = result.turns[cursor.index]
    position = Text(f"Turn {cursor.index + 1} of {len(result.turns)}", style="bold")
    return Group(
        position,
        render_turn(record, show_map=cursor.show_map),
        render_status(result),
    )


class TurnPlayerScreen(Screen):
    CSS = """
    Screen {
        layout: vertical;
    }
    #turn-view {
        height: 1fr;
    }
    """

    BINDINGS = [
        Binding("n", "next_turn", "Next"),
        Binding("p", "previous_turn", "Previous"),
        Binding("home", "first_turn", "First"),
        Binding("end", "last_turn", "Last"),
        Binding("m", "toggle_map", "Map"),
        Binding("q", "quit_player", "Quit"),
    ]

    def __init__(self, result: SimulationResult, *, show_map: bool = True) -> None:
        super().__init__()
        self._result = result
        self._cursor = TurnCursor(total=len(result.turns), show_map=show_map)
        self._view: Static | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            yield Static(id="turn-view")
        yield Footer()

    def on_mount(self) -> None:
        self._view = self.query_one("#turn-view", Static)
        self._refresh_view()

    def action_next_turn(self) -> None:
        self._cursor.next()
        self._refresh_view()

    def action_previous_turn(self) -> None:
        self._cursor.previous()
        self._refresh_view()

    def action_first_turn(self) -> None:
        self._cursor.first()
        self._refresh_view()

    def action_last_turn(self) -> None:
        self._cursor.last()
        self._refresh_view()

    def action_toggle_map(self) -> None:
        self._cursor.toggle_map()
        self._refresh_view()

    def action_quit_player(self) -> None:
        self.app.exit()

    def _refresh_view(self) -> None:
        if self._view:
            self._view.update(render_player_frame(self._result, self._cursor))


class TurnPlayerApp(App):
    """Host the turn player; the subtitle carries the run outcome."""

    TITLE = "Grid Tactics Turns"

    def __init__(self, result: SimulationResult, *, show_map: bool = True) -> None:
        super().__init__()
        self._result = result
        self._show_map = show_map
        self.sub_title = result.error_message or "Completed"

    def on_mount(self) -> None:
        self.push_screen(TurnPlayerScreen(self._result, show_map=self._show_map))


def run_turn_player(result: SimulationResult, *, show_map: bool = True) -> None:
    TurnPlayerApp(result, show_map=show_map).run()
