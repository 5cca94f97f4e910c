"""Console rendering of the board and the players."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Sequence, TextIO

from .board import Board, CellType
from .characters import Character

_PLAYER_SYMBOLS = {
    "Avatar": "A",
    "AvatarCPU": "C",
    "AvatarInnovador": "I",
}

_CELL_SYMBOLS = {
    CellType.PATH: ".",
    CellType.ABYSS: "#",
    CellType.EXIT: "X",
}

_HEADER = (
    "=== JUEGO AVATAR CON POLIMORFISMO ===\n\n"
    "Leyenda: . = Camino, # = Abismo, X = Salida\n"
    "         A = Avatar, C = CPU, I = Innovador\n\n"
)


class ConsoleView:
    """Draws the game on a text stream and reads the player's moves."""

    def __init__(
        self,
        board: Board,
        players: Sequence[Character],
        out: TextIO | None = None,
        inp: TextIO | None = None,
    ) -> None:
        self.board = board
        self.players = players
        self.out = out if out is not None else sys.stdout
        self.inp = inp if inp is not None else sys.stdin

    def _symbol_at(self, row: int, col: int) -> str:
        for player in self.players:
            if player.position == (row, col) and player.active:
                return _PLAYER_SYMBOLS.get(player.kind, " ")
        return _CELL_SYMBOLS.get(self.board.cell_type(row, col), " ")

    def render(self) -> str:
        """The full screen as text: legend, grid and player positions."""
        grid = "".join(
            "".join(f"{self._symbol_at(r, c)} " for c in range(self.board.cols)) + "\n"
            for r in range(self.board.rows)
        )
        positions = "".join(
            f"{player.kind}: ({player.row}, {player.col})"
            f"{' (ACTIVO)' if player.active else ' (ELIMINADO)'}\n"
            for player in self.players
        )
        return f"{_HEADER}{grid}\nPosiciones:\n{positions}"

    def _clear_screen(self) -> None:
        isatty = getattr(self.out, "isatty", None)
        if self.out is not sys.stdout or isatty is None or not isatty():
            return
        command = ["cls"] if os.name == "nt" else ["clear"]
        try:
            subprocess.run(command, check=False, shell=os.name == "nt")
        except OSError:
            pass

    def show(self) -> None:
        """Clear the terminal and draw the current state."""
        self._clear_screen()
        self.out.write(self.render())
        self.out.flush()

    def message(self, text: str) -> None:
        self.out.write(f"\n{text} ")
        self.out.flush()

    def read_input(self) -> str | None:
        """Next non-blank character typed, or None at end of input."""
        while True:
            char = self.inp.read(1)
            if not char:
                return None
            if not char.isspace():
                return char