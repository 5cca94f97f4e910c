import random

import pytest

from abismo.board import Board, CellType

SAMPLE = [
    [2, 2, 2, 2],
    [2, 1, 1, 2],
    [2, 1, 3, 2],
    [2, 2, 2, 2],
]


def all_cells(board):
    return [
        [board.cell_type(r, c) for c in range(board.cols)] for r in range(board.rows)
    ]


def test_from_grid_round_trip():
    board = Board.from_grid(SAMPLE)
    assert board.rows == len(SAMPLE)
    assert board.cols == len(SAMPLE[0])
    assert all_cells(board) == [[CellType(v) for v in row] for row in SAMPLE]


@pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (4, 0), (0, 4), (100, 100)])
def test_off_board_is_abyss(row, col):
    board = Board.from_grid(SAMPLE)
    assert board.cell_type(row, col) is CellType.ABYSS
    assert not board.is_valid_position(row, col)


def test_is_valid_position():
    board = Board.from_grid(SAMPLE)
    assert board.is_valid_position(1, 1)
    assert board.is_valid_position(2, 2)
    assert not board.is_valid_position(0, 0)


def test_is_exit():
    board = Board.from_grid(SAMPLE)
    assert board.is_exit(2, 2)
    assert not board.is_exit(1, 1)
    assert not board.is_exit(-5, 2)


def test_count_abysses():
    board = Board.from_grid([[2, 2], [1, 3]])
    assert board.count_abysses() == 2


@pytest.mark.parametrize(
    "grid", [[], [[]], [[1, 1], [1]], [[1, 7]], [[1, -1]]]
)
def test_from_grid_rejects_bad_input(grid):
    with pytest.raises(ValueError):
        Board.from_grid(grid)


def test_generated_board_shape_and_borders():
    board = Board(random.Random(3))
    assert (board.rows, board.cols) == (12, 12)
    for r in range(board.rows):
        assert board.cell_type(r, 0) is CellType.ABYSS
        assert board.cell_type(r, board.cols - 1) is CellType.ABYSS
    for c in range(board.cols):
        assert board.cell_type(0, c) is CellType.ABYSS
        assert board.cell_type(board.rows - 1, c) is CellType.ABYSS


@pytest.mark.parametrize("seed", range(20))
def test_generated_board_keeps_starts_and_exit(seed):
    board = Board(random.Random(seed))
    for start in [(1, 1), (1, 2), (2, 1)]:
        row, col = start
        for offset in range(3):
            assert board.cell_type(row + offset, col) is CellType.PATH
            assert board.cell_type(row, col + offset) is CellType.PATH
    assert board.is_exit(board.rows - 2, board.cols - 2)
    exits = [
        (r, c) for r in range(board.rows) for c in range(board.cols) if board.is_exit(r, c)
    ]
    assert exits == [(board.rows - 2, board.cols - 2)]


def test_generation_is_deterministic_for_seed():
    first = Board(random.Random(42))
    second = Board(random.Random(42))
    assert all_cells(first) == all_cells(second)


def test_generation_reports_abyss_count(capsys):
    board = Board(random.Random(7))
    out = capsys.readouterr().out
    assert f"Tablero generado automáticamente con {board.count_abysses()} abismos." in out


def test_count_matches_cells():
    board = Board(random.Random(11))
    cells = all_cells(board)
    assert board.count_abysses() == sum(row.count(CellType.ABYSS) for row in cells)


def test_load_from_file(tmp_path, capsys):
    path = tmp_path / "board.txt"
    path.write_text("2 3\n1 2 3\n2 1 1\n")
    board = Board.from_grid(SAMPLE)
    board.load(path)
    assert (board.rows, board.cols) == (2, 3)
    assert all_cells(board) == [
        [CellType.PATH, CellType.ABYSS, CellType.EXIT],
        [CellType.ABYSS, CellType.PATH, CellType.PATH],
    ]
    assert "Tablero cargado desde archivo" in capsys.readouterr().out


def test_load_missing_file_regenerates(tmp_path, capsys):
    board = Board.from_grid(SAMPLE)
    board.load(tmp_path / "missing.txt")
    assert (board.rows, board.cols) == (12, 12)
    assert board.is_exit(10, 10)
    assert "No se pudo abrir el archivo" in capsys.readouterr().out


@pytest.mark.parametrize("content", ["2 2\n1 1 1\n", "", "3", "2 2\n1 x 1 1\n", "0 2\n"])
def test_load_malformed_file(tmp_path, content):
    path = tmp_path / "bad.txt"
    path.write_text(content)
    board = Board.from_grid(SAMPLE)
    with pytest.raises(ValueError):
        board.load(path)