import pytest

from dsakit.backtracking import rat_in_a_maze, solve_n_queens, solve_sudoku

SOURCE_SUDOKU = [
    [3, 0, 6, 5, 0, 8, 4, 0, 0],
    [5, 2, 0, 0, 0, 0, 0, 0, 0],
    [0, 8, 7, 0, 0, 0, 0, 3, 1],
    [0, 0, 3, 0, 1, 0, 0, 8, 0],
    [9, 0, 0, 8, 6, 3, 0, 0, 5],
    [0, 5, 0, 0, 9, 0, 6, 0, 0],
    [1, 3, 0, 0, 0, 0, 2, 5, 0],
    [0, 0, 0, 0, 0, 0, 0, 7, 4],
    [0, 0, 5, 2, 0, 6, 3, 0, 0],
]


def _check_queens(board):
    n = len(board)
    assert all(len(row) == n and row.count("Q") == 1 for row in board)
    cols = [row.index("Q") for row in board]
    assert len(set(cols)) == n
    assert len({r + c for r, c in enumerate(cols)}) == n
    assert len({r - c for r, c in enumerate(cols)}) == n


def test_four_queens_matches_documented_example():
    expected = [
        [".Q..", "...Q", "Q...", "..Q."],
        ["..Q.", "Q...", "...Q", ".Q.."],
    ]
    assert sorted(solve_n_queens(4)) == sorted(expected)


def test_one_queen():
    assert solve_n_queens(1) == [["Q"]]


@pytest.mark.parametrize("n", [2, 3])
def test_small_boards_have_no_solution(n):
    assert solve_n_queens(n) == []


@pytest.mark.parametrize("n", [5, 6, 7])
def test_queen_solutions_are_valid_and_distinct(n):
    solutions = solve_n_queens(n)
    assert solutions
    for board in solutions:
        _check_queens(board)
    assert len({tuple(board) for board in solutions}) == len(solutions)


def test_queens_rejects_empty_board():
    with pytest.raises(ValueError):
        solve_n_queens(0)


def _follow(grid, path):
    n = len(grid)
    x = y = 0
    seen = {(0, 0)}
    deltas = {"D": (1, 0), "L": (0, -1), "R": (0, 1), "U": (-1, 0)}
    for step in path:
        dx, dy = deltas[step]
        x, y = x + dx, y + dy
        assert 0 <= x < n and 0 <= y < n
        assert grid[x][y] == 1
        assert (x, y) not in seen
        seen.add((x, y))
    return x, y


def test_rat_source_open_grid():
    assert rat_in_a_maze([[1, 1], [1, 1]]) == ["DR", "RD"]


def test_rat_four_by_four():
    grid = [
        [1, 0, 0, 0],
        [1, 1, 0, 1],
        [1, 1, 0, 0],
        [0, 1, 1, 1],
    ]
    paths = rat_in_a_maze(grid)
    assert paths == ["DDRDRR", "DRDDRR"]
    for path in paths:
        assert _follow(grid, path) == (3, 3)


def test_rat_paths_are_valid_and_unique():
    grid = [[1, 1, 1], [1, 1, 1], [1, 1, 1]]
    paths = rat_in_a_maze(grid)
    assert len(set(paths)) == len(paths)
    for path in paths:
        assert _follow(grid, path) == (2, 2)


def test_rat_blocked_start():
    assert rat_in_a_maze([[0, 1], [1, 1]]) == []


def test_rat_rejects_non_square():
    with pytest.raises(ValueError):
        rat_in_a_maze([[1, 1, 1], [1, 1, 1]])


def test_sudoku_source_grid_solved():
    solved = solve_sudoku(SOURCE_SUDOKU)
    digits = set(range(1, 10))
    assert all(set(row) == digits for row in solved)
    assert all({row[c] for row in solved} == digits for c in range(9))
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            box = {solved[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)}
            assert box == digits
    for given_row, solved_row in zip(SOURCE_SUDOKU, solved):
        for given, value in zip(given_row, solved_row):
            assert given in (0, value)


def test_sudoku_does_not_modify_input():
    copy = [list(row) for row in SOURCE_SUDOKU]
    solve_sudoku(SOURCE_SUDOKU)
    assert SOURCE_SUDOKU == copy


def test_sudoku_solved_grid_is_returned_unchanged():
    solved = solve_sudoku(SOURCE_SUDOKU)
    assert solve_sudoku(solved) == solved


def test_sudoku_without_solution():
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [0, 1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][0] = 9
    assert solve_sudoku(grid) is None


def test_sudoku_rejects_bad_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9 for _ in range(8)])