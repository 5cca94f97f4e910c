"""Computer-controlled avatar that wanders at random while avoiding abysses."""

from __future__ import annotations

import random

from .board import Board, CellType
from .characters import STEPS, Avatar

_DIRECTION_NAMES = {
    "W": "arriba",
    "S": "abajo",
    "A": "la izquierda",
    "D": "la derecha",
}


class AvatarCPU(Avatar):
    """Avatar that picks a random safe step each turn."""

    kind = "AvatarCPU"

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

    def move(self, direction: str | None = None) -> bool:
        """Take a random safe step; the given direction is ignored."""
        if not self.active:
            return False

        if (
            self.board is not None
            and self.board.cell_type(self.row, self.col) is CellType.ABYSS
        ):
            print("¡AvatarCPU ha caído en un abismo! Eliminado del juego.")
            self.deactivate()
            return False

        moves = self.safe_moves()
        if not moves:
            print("AvatarCPU no puede moverse - no hay movimientos seguros disponibles.")
            return False

        choice = self._rng.choice(moves)
        print(f"AvatarCPU se mueve hacia {_DIRECTION_NAMES[choice]}.")
        return super().move(choice)