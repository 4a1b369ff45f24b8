"""Core data contracts for the map, turn records and simulation results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

FRIENDLY_DIED = "Friendly player died"
UNKNOWN_ACTION = "Unknown action"

Position = tuple[int, int]


class ParseError(ValueError):
    """Structural problem in map or action input."""


class CellType(str, Enum):
    EMPTY = "empty"
    BLOCK = "block"
    FINISH = "finish"


class ActorType(str, Enum):
    PLAYER = "player"
    TARGET = "target"
    ENEMY = "enemy"

    @property
    def letter(self) -> str:
        return self.value[0]

    @property
    def controllable(self) -> bool:
        return self is ActorType.PLAYER

    @property
    def fires_automatically(self) -> bool:
        return self is ActorType.ENEMY


class Facing(str, Enum):
    NORTH = "n"
    EAST = "e"
    SOUTH = "s"
    WEST = "w"


class Command(str, Enum):
    MOVE = "M"
    ROTATE_LEFT = "L"
    ROTATE_RIGHT = "R"
    SHOOT = "S"
    WAIT = "W"
    INVALID = "?"


class Actor(BaseModel):
    model_config = ConfigDict(extra="forbid")

    type: ActorType
    order: int = Field(ge=0)
    facing: Facing
    health: int
    x: int
    y: int

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    @property
    def alive(self) -> bool:
        return self.health > 0


class GridMap(BaseModel):
    """Static terrain plus the live actor roster.

    ``grid`` is column-major: ``grid[x][y]`` with ``x`` the column.
    """

    model_config = ConfigDict(extra="forbid")

    width: int
    height: int
    grid: list[list[CellType]]
    actors: list[Actor] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_map(self) -> "GridMap":
        if self.width < 1 or self.height < 1:
            raise ValueError("grid must not be empty")
        if len(self.grid) != self.width:
            raise ValueError("grid must have one column per unit of width")
        for column in self.grid:
            if len(column) != self.height:
                raise ValueError("grid must be rectangular")
        orders: set[int] = set()
        for actor in self.actors:
            if not self.in_bounds(actor.x, actor.y):
                raise ValueError(f"actor {actor.order} is outside the grid")
            if actor.order in orders:
                raise ValueError("order must be unique")
            orders.add(actor.order)
        self.actors.sort(key=lambda actor: actor.order)
        return self

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> CellType:
        return self.grid[x][y]

    def actor_at(self, x: int, y: int) -> Actor | None:
        for actor in self.actors:
            if actor.x == x and actor.y == y:
                return actor
        return None

    def actor_by_order(self, order: int) -> Actor | None:
        for actor in self.actors:
            if actor.order == order:
                return actor
        return None

    def players(self) -> list[Actor]:
        return [actor for actor in self.actors if actor.type.controllable]

    def clone(self) -> "GridMap":
        return self.model_copy(deep=True)


class ActionQueue(BaseModel):
    model_config = ConfigDict(extra="forbid")

    order: int
    actions: list[Command] = Field(default_factory=list)

    def command_at(self, turn: int) -> Command | None:
        if turn < len(self.actions):
            return self.actions[turn]
        return None


class PlayerTurn(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    command: Command
    health: int
    probes: str


class TurnRecord(BaseModel):
    """A map snapshot taken before the turn plus what each player did."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    turn: int
    map: GridMap
    players: dict[int, PlayerTurn] = Field(default_factory=dict)


class SimulationResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    turns: list[TurnRecord] = Field(default_factory=list)
    error_message: str | None = None
    final_map: GridMap | None = None

    @property
    def ended_cleanly(self) -> bool:
        return self.error_message is None
