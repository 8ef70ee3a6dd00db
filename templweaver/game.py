"""Tower defence game service: board layouts, path finding and drawing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Mapping, Sequence

from .state import GameState, new_game_state
from .units import Direction, Monster, Point, Turret

log = logging.getLogger(__name__)

SIZE_CLASS = "w-8 h-8"
_ALIVE = "fill-success"
_SPENT = "fill-error"


class DrawableType(IntEnum):
    """What a board cell shows."""

    MONSTER = 0
    TURRET = 1
    PATH = 2
    START = 3
    TREE = 4


@dataclass
class Drawable:
    """One cell of the rendered board."""

    position: Point
    symbol: str
    type: DrawableType = DrawableType.MONSTER
    tooltip: str = ""
    css_class: str = SIZE_CLASS


@dataclass(frozen=True)
class GameLayout:
    """A board, the stats (range, shots) of its turrets and the wave of monster healths."""

    board: tuple[str, ...]
    turrets: Mapping[str, tuple[int, int]]
    wave: tuple[int, ...]


LAYOUTS = (
    GameLayout(
        board=(
            "0111111",
            "  A  B1",
            " 111111",
            " 1     ",
            " 1C1111",
            " 111 D1",
            "      1",
        ),
        turrets={"A": (3, 2), "B": (1, 4), "C": (2, 2), "D": (1, 3)},
        wave=(30, 14, 27, 21, 13, 0, 15, 17, 0, 18, 26),
    ),
    GameLayout(
        board=(
            "011  1111",
            " A1  1BC1",
            " 11  1 11",
            " 1D  1 1E",
            " 111 1F11",
            "  G1 1  1",
            " 111 1 11",
            " 1H  1 1I",
            " 11111 11",
        ),
        turrets={
            "A": (1, 4),
            "B": (2, 2),
            "C": (1, 3),
            "D": (1, 3),
            "E": (1, 2),
            "F": (3, 3),
            "G": (1, 2),
            "H": (2, 3),
            "I": (2, 3),
        },
        wave=(36, 33, 46, 35, 44, 27, 25, 48, 39, 0, 39, 36, 55, 22, 26),
    ),
)

_OPPOSITE = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

_PREFERENCE = (
    (Direction.LEFT, -1, 0),
    (Direction.RIGHT, 1, 0),
    (Direction.UP, 0, -1),
    (Direction.DOWN, 0, 1),
)


def _cell(original: Sequence[str], x: int, y: int) -> str:
    if x < 0 or x >= len(original[0]) or y < 0 or y >= len(original):
        return ""
    return original[y][x]


def find_elements(
    original: Sequence[str], turret_map: Mapping[str, Sequence[int]]
) -> tuple[Point, list[Point], list[Direction], list[Turret]]:
    """Locate the start, the ordered path with its directions, and the turrets."""
    start = Point(0, 0)
    turrets: list[Turret] = []
    unsorted_path: list[Point] = []
    width = len(original[0])
    for y, row in enumerate(original):
        for x, value in enumerate(row[:width]):
            if value == " ":
                continue
            if value == "1":
                unsorted_path.append(Point(x, y))
            elif value == "0":
                start = Point(x, y)
            else:
                stats = turret_map.get(value)
                if stats is None:
                    raise ValueError(f"turret {value} not found")
                if len(stats) != 2:
                    raise ValueError(f"turret {value} has invalid stats")
                turret_range, shots = stats
                turrets.append(Turret(Point(x, y), value, turret_range, shots))

    path, directions = sort_path(original, unsorted_path, start)
    return start, path, directions, turrets


def sort_path(
    original: Sequence[str], unsorted_path: Sequence[Point], start: Point
) -> tuple[list[Point], list[Direction]]:
    """Walk the path from the start, never turning straight back."""
    position = start
    heading: Direction | None = None
    path = [start]
    directions: list[Direction] = []
    while len(path) <= len(unsorted_path):
        for direction, dx, dy in _PREFERENCE:
            if (
                _cell(original, position.x + dx, position.y + dy) == "1"
                and heading != _OPPOSITE[direction]
            ):
                heading = direction
                directions.append(direction)
                position = Point(position.x + dx, position.y + dy)
                break
        path.append(position)
    return path, directions


class GameService:
    """Runs a game on one layout and renders its rounds."""

    def __init__(self, layout: GameLayout = LAYOUTS[0]) -> None:
        log.info("Game board started")
        monsters = [Monster(health) for health in layout.wave]
        self.original = list(layout.board)
        start, path, directions, turrets = find_elements(self.original, layout.turrets)

        self.state: GameState = new_game_state(self.original, turrets, monsters)
        self.max_rounds = len(path) + len(monsters) - 1
        self.start = start
        self.final = path[-1]
        self.path = path[::-1]
        self.directions = directions[::-1]
        self.states: list[GameState] = [self.state]

    def draw(
        self, move: bool = False, reverse: bool = False
    ) -> tuple[GameState, list[list[Drawable]]]:
        """Optionally step one round (back when reverse) and render the board."""
        if move:
            self._update_state(reverse)

        monster_data, turret_data = self._cell_data()
        log.info("Drawing state at round %d", self.state.round)
        drawables = [
            [
                self._drawable(Point(x, y), symbol, monster_data, turret_data)
                for x, symbol in enumerate(row)
            ]
            for y, row in enumerate(self.state.current)
        ]
        return self.state, drawables

    @staticmethod
    def _drawable(
        position: Point,
        symbol: str,
        monster_data: Mapping[Point, tuple[str, str]],
        turret_data: Mapping[Point, tuple[str, str]],
    ) -> Drawable:
        drawable = Drawable(position=position, symbol=symbol)
        if symbol == " ":
            drawable.type = DrawableType.TREE
        elif symbol == "0":
            drawable.type = DrawableType.START
        elif symbol == "1":
            drawable.type = DrawableType.PATH
        elif symbol == "@":
            data = monster_data.get(position)
            if data is not None:
                tooltip, css = data
                if css == _SPENT:
                    drawable.type = DrawableType.PATH
                else:
                    drawable.type = DrawableType.MONSTER
                    drawable.tooltip = tooltip
                    drawable.css_class = f"{SIZE_CLASS} {css}"
        else:
            data = turret_data.get(position)
            if data is not None:
                tooltip, css = data
                drawable.type = DrawableType.TURRET
                drawable.tooltip = tooltip
                drawable.css_class = f"{SIZE_CLASS} {css}"
        return drawable

    def _update_state(self, reverse: bool) -> None:
        log.debug("Updating state at round %d (reverse=%s)", self.state.round, reverse)
        if reverse:
            if self.state.round == 0:
                return
            wanted = self.state.round - 1
            previous = next((s for s in self.states if s.round == wanted), None)
            if previous is None:
                raise LookupError(f"cannot find state for round {wanted}")
            self.state = previous
            return

        new_state = self.state.update(self.original, self.path, self.directions)
        self.states.append(new_state)
        self.state = new_state
        log.debug("Updated state to round %d", self.state.round)

    def _cell_data(
        self,
    ) -> tuple[dict[Point, tuple[str, str]], dict[Point, tuple[str, str]]]:
        monster_data: dict[Point, tuple[str, str]] = {}
        for index, monster in enumerate(self.state.monsters):
            position = monster.position
            css = _ALIVE
            if position.x != -1 and position.y != -1 and monster.is_dead():
                css = _SPENT
                log.debug("Monster at %s is dead (%d)", position, monster.health)
            monster_data[position] = (
                f"{index}, [{position.y}, {position.x}]\nHealth: {monster.health}",
                css,
            )

        turret_data: dict[Point, tuple[str, str]] = {}
        for turret in self.state.turrets:
            position = turret.position
            css = _ALIVE
            if turret.shots == 0:
                css = _SPENT
                log.debug("Turret at %s is empty", position)
            turret_data[position] = (
                f"{turret.symbol}\n[{position.y}, {position.x}]\n"
                f"Range: {turret.range}\nShots: {turret.shots}",
                css,
            )
        return monster_data, turret_data