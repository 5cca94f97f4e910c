"""Applies moves to characters and keeps them on the board."""

from __future__ import annotations

from typing import Iterable

from .board import Board
from .characters import Character

RESET_POSITION = (6, 6)


class MovementRules:
    """Moves characters, sending any that leave the board back to a safe cell."""

    def __init__(self, board: Board | None = None) -> None:
        self.board = board

    def _off_board(self, character: Character) -> bool:
        board = self.board
        return board is not None and not (
            0 <= character.row < board.rows and 0 <= character.col < board.cols
        )

    def apply(self, characters: Iterable[Character], direction: str | None) -> None:
        """Move each character; abysses are allowed, leaving the board is not."""
        for character in characters:
            character.move(direction)
            if self._off_board(character):
                print(
                    f"{character.kind} intentó salir del tablero - "
                    "movimiento revertido"
                )
                character.row, character.col = RESET_POSITION