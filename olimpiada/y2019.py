"""Solutions to the 2019 olympiad problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

RAIN = "o"
WALL = "."
SHELF = "#"
CHAIRS = 3


def rain(grid: Sequence[str]) -> list[str]:
    """Let the water run from its source 'o' down the wall and along the shelves."""
    cells = [list(row) for row in grid]
    origin = None
    for i, row in enumerate(cells):
        for j, cell in enumerate(row):
            if cell == RAIN:
                row[j] = WALL
                origin = (i, j)
    if origin is None:
        raise ValueError("the wall has no source of water")
    pending = [origin]
    while pending:
        i, j = pending.pop()
        if cells[i][j] != WALL:
            continue
        cells[i][j] = RAIN
        below = None
        if i + 1 < len(cells) and j < len(cells[i + 1]):
            below = cells[i + 1][j]
        if below == SHELF:
            if j > 0:
                pending.append((i, j - 1))
            if j + 1 < len(cells[i]):
                pending.append((i, j + 1))
        elif below == WALL:
            pending.append((i + 1, j))
    return ["".join(row) for row in cells]


def eldest_age(m: int, a: int, b: int) -> int:
    """Age of the eldest of three siblings whose ages sum to m."""
    return max(a, b, m - (a + b))


def rectangle_count(values: Sequence[int], k: int) -> int:
    """Count runs of consecutive non-negative values that sum to k."""
    count = 0
    for start in range(len(values)):
        total = 0
        for value in values[start:]:
            total += value
            if total > k:
                break
            if total == k:
                count += 1
    return count


def cheapest_price(offers: Iterable[tuple[float, int]]) -> float:
    """Lowest price per kilogram among (price, grams) offers."""
    prices = [1000.0 * price / grams for price, grams in offers]
    if not prices:
        raise ValueError("at least one offer is needed")
    return min(prices)


def free_chair(a: int, b: int) -> int:
    """Chair left for the third person after two take theirs, or -1."""
    available = [True] * CHAIRS

    def take(position: int) -> int:
        for step in range(CHAIRS):
            index = (position + step) % CHAIRS
            if available[index]:
                available[index] = False
                return index
        return -1

    take(a)
    take(b)
    return take(0)