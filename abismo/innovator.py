"""Avatar that heads for a fixed goal while avoiding abysses and recent cells."""

from __future__ import annotations

import random
from collections import deque

from .board import Board, CellType
from .characters import STEPS, Avatar

GOAL = (10, 10)
HISTORY_SIZE = 8
RECENT_WINDOW = 4


class InnovatorAvatar(Avatar):
    """Avatar that steers towards the goal cell, with some variation."""

    kind = "AvatarInnovador"

    def __init__(
        self,
        row: int = 0,
        col: int = 0,
        board: Board | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(row, col)
        self.board = board
        self.active = True
        self.move_count = 0
        self.history: deque[tuple[int, int]] = deque(maxlen=HISTORY_SIZE)
        self._rng = rng if rng is not None else random.Random()

    def deactivate(self) -> None:
        self.active = False

    def safe_moves(self) -> list[str]:
        """Directions, in W, S, A, D order, that lead to a walkable cell."""
        if self.board is None:
            return []
        return [
            direction
            for direction, (dr, dc) in STEPS.items()
            if self.board.is_valid_position(self.row + dr, self.col + dc)
        ]

    def _priority(self, direction: str) -> int:
        """How far the goal lies in this direction; 0 if it lies elsewhere."""
        dr, dc = STEPS[direction]
        if dr:
            gap, step = GOAL[0] - self.row, dr
        else:
            gap, step = GOAL[1] - self.col, dc
        return abs(gap) if gap * step > 0 else 0

    def _recently_visited(self, position: tuple[int, int]) -> bool:
        return position in list(self.history)[-RECENT_WINDOW:]

    def _pick_strategy(self, ranked: list[str]) -> str:
        phase = self.move_count % 10
        if phase < 7:
            return ranked[0]
        if phase < 9:
            if len(ranked) >= 2 and self.move_count % 2 != 0:
                return ranked[1]
            return ranked[0]
        return self._rng.choice(ranked[:2])

    def choose_move(self) -> str | None:
        """Next direction to take, or None when no safe step exists."""
        if self.board is None:
            return "S"

        safe = self.safe_moves()
        if not safe:
            return None

        prioritised = sorted(
            ((direction, self._priority(direction)) for direction in safe),
            key=lambda item: item[1],
            reverse=True,
        )
        if prioritised[0][1] > 0:
            return self._pick_strategy([direction for direction, _ in prioritised])

        fresh = [
            direction
            for direction in safe
            if not self._recently_visited(
                (self.row + STEPS[direction][0], self.col + STEPS[direction][1])
            )
        ]
        return self._rng.choice(fresh or safe)

    def move(self, direction: str | None = None) -> bool:
        """Take the chosen step; the given direction is ignored."""
        if not self.active:
            return False

        if (
            self.board is not None
            and self.board.cell_type(self.row, self.col) is CellType.ABYSS
        ):
            print("¡AvatarInnovador ha caído en un abismo! Eliminado del juego.")
            self.deactivate()
            return False

        choice = self.choose_move()
        if choice is None:
            print(
                "AvatarInnovador no puede moverse - "
                "no hay movimientos seguros disponibles."
            )
            return False

        self.history.append((self.row, self.col))
        self.move_count += 1
        print(
            f"AvatarInnovador (IA Smart) -> {choice} "
            f"[Meta: ({GOAL[0]},{GOAL[1]}), Actual: ({self.row},{self.col})] "
            f"#{self.move_count}"
        )
        return super().move(choice)