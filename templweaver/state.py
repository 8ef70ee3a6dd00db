"""Round-by-round state of a tower defence game."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from .units import OFF_BOARD, Direction, Monster, Point, Turret

log = logging.getLogger(__name__)


@dataclass
class GameState:
    """One round of the game: board picture, units, survivors and score."""

    round: int
    current: list[str]
    turrets: list[Turret]
    monsters: list[Monster]
    survivors: list[tuple[int, int]] = field(default_factory=list)
    score: int = 0
    blank_count: int = 0

    def update(
        self,
        original: Sequence[str],
        path: Sequence[Point],
        directions: Sequence[Direction],
    ) -> GameState:
        """Return the state of the next round; path runs from the end back to the start."""
        log.debug("Updating state at round %d", self.round)
        size = len(self.current)
        board = list(original[:size])
        board.extend([""] * (size - len(board)))

        state = GameState(
            round=self.round,
            current=board,
            turrets=[Turret(t.position, t.symbol, t.range, t.shots) for t in self.turrets],
            monsters=[Monster(m.health, m.position) for m in self.monsters],
            survivors=list(self.survivors),
            score=self.score,
            blank_count=self.blank_count,
        )

        end = path[0]
        for index, monster in enumerate(state.monsters):
            if monster.position == end:
                log.debug("Monster reached end: %s", monster)
                monster.position = OFF_BOARD
                if monster.health > 0:
                    state.survivors.append((max(0, index - self.blank_count), monster.health))
                    state.score += monster.health

        state._advance(len(path) + len(self.monsters))
        moved = state._move_monsters(state.round, path)

        for turret in self.turrets:
            turret.reload()

        state._shoot_turrets()

        for position in moved:
            row = state.current[position.y]
            state.current[position.y] = row[: position.x] + "@" + row[position.x + 1 :]

        return state

    def _advance(self, max_rounds: int) -> None:
        self.round = min(self.round + 1, max_rounds)

    def _move_monsters(self, cursor: int, path: Sequence[Point]) -> list[Point]:
        wave_head = max(0, len(path) - cursor)
        offset = max(0, cursor - len(path))
        limit = len(self.monsters) - offset
        moved = []
        for index, point in enumerate(path[wave_head:]):
            if index >= limit:
                break
            monster = self.monsters[index + offset]
            monster.position = point
            moved.append(point)
        return moved

    def _shoot_turrets(self) -> None:
        finished: set[int] = set()
        while len(finished) != len(self.turrets):
            for index, turret in enumerate(self.turrets):
                if index in finished:
                    continue
                if turret.ammo == 0:
                    finished.add(index)
                    continue
                target = next(
                    (m for m in self.monsters if m.health != 0 and turret.in_range(m)),
                    None,
                )
                if target is not None:
                    turret.shoot(target)
                    log.debug("Turret %s shot %s", turret.symbol, target)
                if target is None or turret.ammo == turret.shots:
                    finished.add(index)


def new_game_state(
    board: Sequence[str], turrets: list[Turret], monsters: list[Monster]
) -> GameState:
    """The opening state; monsters with no health count as blanks in the wave."""
    blank_count = sum(1 for m in monsters if m.health == 0)
    return GameState(
        round=0,
        current=list(board),
        turrets=turrets,
        monsters=monsters,
        survivors=[],
        score=0,
        blank_count=blank_count,
    )