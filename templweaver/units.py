"""Board coordinates, monsters and turrets of the tower defence game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class Direction(IntEnum):
    """A step a monster can take on the board."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


@dataclass(frozen=True)
class Point:
    """A cell on the board; x is the column and y the row."""

    x: int
    y: int

    def distance(self, other: Point) -> int:
        """Manhattan distance to another point."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __str__(self) -> str:
        return f"{{{self.x} {self.y}}}"


OFF_BOARD = Point(-1, -1)

_STEPS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass
class Monster:
    """A monster walking the path; it starts off the board."""

    health: int
    position: Point = OFF_BOARD

    def __str__(self) -> str:
        return f"Monster{{Position: {self.position}, Health: {self.health}}}"

    def is_dead(self) -> bool:
        """True when the monster has no health left or is off the board."""
        return self.health <= 0 or self.position.x == -1 or self.position.y == -1

    def move(self, direction: Direction) -> None:
        """Take one step in the given direction."""
        dx, dy = _STEPS[Direction(direction)]
        self.position = Point(self.position.x + dx, self.position.y + dy)


@dataclass
class Turret:
    """A turret that fires a fixed number of shots per round within its range."""

    position: Point
    symbol: str
    range: int
    shots: int
    ammo: int | None = field(default=None)

    def __post_init__(self) -> None:
        if self.ammo is None:
            self.ammo = self.shots

    def __str__(self) -> str:
        return f"Turret{{Symbol: {self.symbol}, Range: {self.range}, Shots: {self.shots}}}"

    def in_range(self, monster: Monster) -> bool:
        """Whether the monster is within the turret's reach."""
        return self.position.distance(monster.position) <= self.range

    def shoot(self, monster: Monster) -> None:
        """Spend one shot to take one health from the monster, if possible."""
        if self.ammo == 0 or not self.in_range(monster) or monster.health == 0:
            return
        self.ammo -= 1
        monster.health -= 1

    def reload(self) -> None:
        """Refill the turret's ammunition for a new round."""
        self.ammo = self.shots