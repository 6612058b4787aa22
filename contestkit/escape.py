"""Escape from a grid labyrinth ahead of the monsters."""

from collections import deque
from collections.abc import Iterable
from math import inf

__all__ = ["find_escape"]

_MOVES = (("R", 0, 1), ("D", 1, 0), ("U", -1, 0), ("L", 0, -1))
_CELLS = frozenset("#.AM")

Cell = tuple[int, int]


def find_escape(grid: Iterable[str]) -> str | None:
    """Moves (R, D, U, L) that lead 'A' to the border strictly before any 'M' can arrive.

    Cells are '#' (wall), '.' (floor), 'A' (start, exactly one) and 'M'
    (monster). Monsters move one step per turn along shortest routes; the
    walker may enter a cell only if it gets there sooner than every monster.
    Returns a shortest route to the first reachable border cell, scanning
    rows for the left and right edges and then columns for the top and
    bottom edges, or None when no border cell can be reached in time.
    """
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    if any(ch not in _CELLS for row in rows for ch in row):
        raise ValueError("grid may only contain '#', '.', 'A' and 'M'")
    starts = [(i, j) for i, row in enumerate(rows) for j, ch in enumerate(row) if ch == "A"]
    if len(starts) != 1:
        raise ValueError("grid must contain exactly one 'A'")
    height = len(rows)
    start = starts[0]

    def neighbours(cell: Cell) -> Iterable[tuple[str, Cell]]:
        i, j = cell
        for letter, di, dj in _MOVES:
            ni, nj = i + di, j + dj
            if 0 <= ni < height and 0 <= nj < width and rows[ni][nj] != "#":
                yield letter, (ni, nj)

    monsters = [(i, j) for i, row in enumerate(rows) for j, ch in enumerate(row) if ch == "M"]
    monster_time: dict[Cell, int] = {cell: 0 for cell in monsters}
    queue = deque(monsters)
    while queue:
        cell = queue.popleft()
        for _, nxt in neighbours(cell):
            if nxt not in monster_time:
                monster_time[nxt] = monster_time[cell] + 1
                queue.append(nxt)

    walker_time: dict[Cell, int] = {start: 0}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        arrival = walker_time[cell] + 1
        for _, nxt in neighbours(cell):
            if nxt not in walker_time and arrival < monster_time.get(nxt, inf):
                walker_time[nxt] = arrival
                queue.append(nxt)

    border = [cell for i in range(height) for cell in ((i, 0), (i, width - 1))]
    border += [cell for j in range(width) for cell in ((0, j), (height - 1, j))]
    exit_cell = next((cell for cell in border if cell in walker_time), None)
    if exit_cell is None:
        return None

    route: list[str] = []
    cell = exit_cell
    while cell != start:
        i, j = cell
        for letter, di, dj in _MOVES:
            prev = (i - di, j - dj)
            if walker_time.get(prev) == walker_time[cell] - 1:
                route.append(letter)
                cell = prev
                break
    route.reverse()
    return "".join(route)