"""Command that runs the abyss game in the terminal."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Sequence

from .board import Board
from .characters import Avatar, Character
from .cpu import AvatarCPU
from .game import Game
from .innovator import InnovatorAvatar
from .movement import MovementRules
from .view import ConsoleView

TURN_PAUSE = 0.5

_CONTROLS = (
    "\n=== CONTROLES ===\n"
    "W/w = Arriba\n"
    "S/s = Abajo\n"
    "A/a = Izquierda\n"
    "D/d = Derecha\n"
    "Q/q = Salir\n"
    "\nObjetivo: Llegar a la salida (X)\n"
    "Nota: Solo el Avatar humano puede terminar el juego cayendo en un abismo.\n"
    "      Los otros avatares simplemente desaparecen si caen.\n"
    "Presione Enter para comenzar..."
)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="abismo", description="Reach the exit without falling into an abyss."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    out, inp = sys.stdout, sys.stdin

    print("=== BIENVENIDO AL JUEGO AVATAR CON POLIMORFISMO ===\n")
    board = Board(rng)
    print("Generando tablero automáticamente...")

    human = Avatar(1, 1)
    cpu = AvatarCPU(1, 2, board, random.Random(rng.random()))
    innovator = InnovatorAvatar(2, 1, board, random.Random(rng.random()))
    players: list[Character] = [human, cpu, innovator]

    rules = MovementRules()
    game = Game(board, players, rules)
    view = ConsoleView(board, players, out, inp)

    out.write(_CONTROLS)
    out.flush()
    inp.readline()

    while game.active:
        view.show()
        if not game.check():
            break

        view.message("Ingrese movimiento para Avatar (W/A/S/D) o Q para salir:")
        entry = view.read_input()
        if entry is None or entry in "qQ":
            game.finish()
            break

        rules.apply([human], entry)
        if not game.check():
            break

        if cpu.active:
            rules.apply([cpu], None)
        if not game.check():
            break

        if innovator.active:
            rules.apply([innovator], None)
        if not game.check():
            break

        time.sleep(TURN_PAUSE)

    view.show()
    print("\n¡Gracias por jugar!")
    return 0


if __name__ == "__main__":
    sys.exit(main())