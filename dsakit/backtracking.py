"""Backtracking searches: N queens, rat in a maze and sudoku."""

from __future__ import annotations

from collections.abc import Sequence

_MOVES = (("D", 1, 0), ("L", 0, -1), ("R", 0, 1), ("U", -1, 0))
_SIZE = 9


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens as rows of '.' and 'Q'.

    Queens are placed column by column, trying rows from the top.
    """
    if n < 1:
        raise ValueError("the board needs at least one square")
    solutions: list[list[str]] = []
    row_of_column: list[int] = []
    used_rows: set[int] = set()
    used_sums: set[int] = set()
    used_diffs: set[int] = set()

    def place(col: int) -> None:
        if col == n:
            board = [["."] * n for _ in range(n)]
            for column, row in enumerate(row_of_column):
                board[row][column] = "Q"
            solutions.append(["".join(line) for line in board])
            return
        for row in range(n):
            if row in used_rows or row + col in used_sums or col - row in used_diffs:
                continue
            used_rows.add(row)
            used_sums.add(row + col)
            used_diffs.add(col - row)
            row_of_column.append(row)
            place(col + 1)
            row_of_column.pop()
            used_rows.discard(row)
            used_sums.discard(row + col)
            used_diffs.discard(col - row)

    place(0)
    return solutions


def rat_in_a_maze(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return every path from the top-left to the bottom-right of a square maze.

    Cells equal to 1 are open. Paths are strings of D, L, R and U, found in that order.
    """
    n = len(grid)
    if n == 0 or any(len(row) != n for row in grid):
        raise ValueError("the maze must be a non-empty square grid")
    if grid[0][0] == 0:
        return []
    paths: list[str] = []
    visited = {(0, 0)}
    steps: list[str] = []

    def walk(x: int, y: int) -> None:
        if x == n - 1 and y == n - 1:
            paths.append("".join(steps))
            return
        for letter, dx, dy in _MOVES:
            nx, ny = x + dx, y + dy
            if 0 <= nx < n and 0 <= ny < n and (nx, ny) not in visited and grid[nx][ny] == 1:
                visited.add((nx, ny))
                steps.append(letter)
                walk(nx, ny)
                steps.pop()
                visited.discard((nx, ny))

    walk(0, 0)
    return paths


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]] | None:
    """Return a solved copy of a 9x9 sudoku, 0 marking empty cells, or None if unsolvable."""
    if len(grid) != _SIZE or any(len(row) != _SIZE for row in grid):
        raise ValueError("a sudoku grid must be 9 by 9")
    board = [list(row) for row in grid]
    empty = [(r, c) for r, row in enumerate(board) for c, value in enumerate(row) if value == 0]

    def candidates(r: int, c: int) -> list[int]:
        box_r, box_c = r - r % 3, c - c % 3
        used = set(board[r])
        used.update(row[c] for row in board)
        used.update(value for row in board[box_r : box_r + 3] for value in row[box_c : box_c + 3])
        return [num for num in range(1, 10) if num not in used]

    def fill(index: int) -> bool:
        if index == len(empty):
            return True
        r, c = empty[index]
        for num in candidates(r, c):
            board[r][c] = num
            if fill(index + 1):
                return True
        board[r][c] = 0
        return False

    return board if fill(0) else None