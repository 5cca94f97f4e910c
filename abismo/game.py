"""Game state: decides when the match is over and who won."""

from __future__ import annotations

from typing import MutableSequence

from .board import Board, CellType
from .characters import Character
from .movement import MovementRules


class Game:
    """Tracks whether the game is running and checks for its end."""

    def __init__(
        self,
        board: Board,
        players: MutableSequence[Character],
        rules: MovementRules,
        active: bool = True,
    ) -> None:
        self.board = board
        self.players = players
        self.rules = rules
        self.active = active
        self.winner: Character | None = None
        rules.board = board

    def check(self) -> bool:
        """End the game if the human fell or anyone reached the exit.

        Returns whether the game is still running.
        """
        for player in self.players:
            if (
                player.kind == "Avatar"
                and self.board.cell_type(player.row, player.col) is CellType.ABYSS
            ):
                print("\n¡El Avatar humano ha caído en un abismo! ¡Juego terminado!")
                print(f"Posición del abismo: ({player.row}, {player.col})")
                self.active = False
                return self.active

        for player in self.players:
            if self.board.is_exit(player.row, player.col):
                print(f"\n¡{player.kind} ha llegado a la salida! ¡Juego terminado!")
                print(f"¡{player.kind} es el ganador!")
                self.winner = player
                self.active = False
                return self.active

        return self.active

    def finish(self) -> None:
        self.active = False