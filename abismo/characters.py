"""Characters that walk the board."""

from __future__ import annotations

STEPS: dict[str, tuple[int, int]] = {
    "W": (-1, 0),
    "S": (1, 0),
    "A": (0, -1),
    "D": (0, 1),
}


class Character:
    """Something with a position that moves with W/A/S/D."""

    kind = "Personaje"
    active = True

    def __init__(self, row: int = 0, col: int = 0) -> None:
        self.row = row
        self.col = col

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def move(self, direction: str | None) -> bool:
        """Take one step; return False and stay put on an unknown direction."""
        delta = STEPS.get(direction.upper()) if direction else None
        if delta is None:
            return False
        self.row += delta[0]
        self.col += delta[1]
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(row={self.row}, col={self.col})"


class Avatar(Character):
    """The human player's avatar."""

    kind = "Avatar"

    def move(self, direction: str | None) -> bool:
        if super().move(direction):
            return True
        print("Movimiento inválido. Use W/A/S/D")
        return False