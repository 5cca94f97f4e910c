# abismo

A small turn-based game played in the terminal. You steer an avatar across a
12 × 12 board toward the exit and race two computer players. The board hides
abysses, and stepping into one ends your game. The game's messages are in
Spanish.

## Installing

```
pip install .
```

## Playing

```
abismo
```

Each start generates a new random board. To get the same board and the same
computer moves again, pass a seed:

```
abismo --seed 42
```

After the controls are shown, press Enter to begin. The screen shows:

| Symbol | Meaning                          |
|--------|----------------------------------|
| `.`    | path                             |
| `#`    | abyss                            |
| `X`    | exit                             |
| `A`    | your avatar                      |
| `C`    | the random computer player       |
| `I`    | the goal-seeking computer player |

You type one control per turn:

- `W` / `w`: up
- `S` / `s`: down
- `A` / `a`: left
- `D` / `d`: right
- `Q` / `q`: quit

Any other key leaves your avatar where it is. The game also ends when input
runs out.

In each turn you move first. Then the random player (`C`) steps to a random
neighbouring cell that is not an abyss. Then the goal-seeking player (`I`)
moves. It heads for cell `(10, 10)`, which is where the exit lies on a
generated board. When no step brings it closer, it prefers cells it has not
occupied in its last four moves. Between turns the game pauses for half a
second. The terminal is cleared before each redraw, but only when output goes
to a terminal.

The game ends when:

- any player reaches the exit `X`. That player wins.
- your avatar falls into an abyss. You lose.
- you press `Q`.

A computer player that lands in an abyss is removed, and the game goes on.
A move that would take any player off the board sends that player to cell
`(6, 6)` instead.

## Using it as a library

The modules are:

- `abismo.board`: `Board` and `CellType`.
- `abismo.characters`: `Character` and `Avatar`.
- `abismo.cpu`: `AvatarCPU`.
- `abismo.innovator`: `InnovatorAvatar`.
- `abismo.movement`: `MovementRules`.
- `abismo.game`: `Game`.
- `abismo.view`: `ConsoleView`.
- `abismo.main`: `main`, the command above.

Here is a game put together by hand on a fixed board:

```python
import random

from abismo.board import Board
from abismo.characters import Avatar
from abismo.cpu import AvatarCPU
from abismo.game import Game
from abismo.movement import MovementRules

board = Board.from_grid([
    [2, 2, 2, 2],
    [2, 1, 1, 2],
    [2, 1, 3, 2],
    [2, 2, 2, 2],
])
player = Avatar(1, 1)
cpu = AvatarCPU(1, 2, board, random.Random(0))
rules = MovementRules(board)
game = Game(board, [player, cpu], rules, True)

rules.apply([player], "d")
still_running = game.check()   # False once someone reaches the exit
```

`Board(rng)` generates a random 12 × 12 board from the given
`random.Random`. `Board.from_grid(rows)` builds a board from rows of cell
codes: `0` empty, `1` path, `2` abyss, `3` exit.

`Board.load(path)` reads a board from a text file. The file holds the number
of rows, the number of columns and then the cell codes, all separated by
whitespace. If the file cannot be opened, a new random board is generated
instead. A file that is malformed raises `ValueError`.

`ConsoleView(board, players, out, inp)` writes to any text stream and reads
from one. Its `render()` method returns the screen as a string.

## What it does not do

The game has no saved games, no scores and no options beyond `--seed`. It
always plays on a generated board. A board file can only be used through
`Board.load` from Python.