"""Solutions to the 2020 olympiad problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

CRACK = "*"
_MOVES = ((1, 0), (0, -1), (0, 1), (-1, 0))


def accelerator(d: int) -> int:
    """Sensor at which a particle travelling d stops.

    Distances that stop at no sensor wrap round as a 16-bit unsigned value.
    """
    diff = d - 3
    remainder = abs(diff) % 8
    if diff < 0:
        remainder = -remainder
    return (remainder - 2) % 65536


def fissure(grid: Sequence[str], f: str) -> list[str]:
    """Spread the crack from the top-left corner over cells no harder than f."""
    cells = [list(row) for row in grid]
    if not cells or not cells[0]:
        return ["".join(row) for row in cells]
    cells[0][0] = CRACK
    pending = [(0, 0)]
    while pending:
        i, j = pending.pop()
        for di, dj in _MOVES:
            ni, nj = i + di, j + dj
            if 0 <= ni < len(cells) and 0 <= nj < len(cells[ni]):
                cell = cells[ni][nj]
                if cell <= f and cell != CRACK:
                    cells[ni][nj] = CRACK
                    pending.append((ni, nj))
    return ["".join(row) for row in cells]


def pandemic(
    n: int, infected: int, start_day: int, meetings: Iterable[Sequence[int]]
) -> int:
    """Number of people infected after the meetings, one meeting a day.

    Infection spreads only at meetings from start_day on.
    """
    sick = {infected}
    total = 1
    for day, meeting in enumerate(meetings, 1):
        for person in meeting:
            if not 1 <= person <= n:
                raise ValueError(f"unknown person: {person}")
        carriers = sum(person in sick for person in meeting) if day >= start_day else 0
        if carriers:
            sick.update(meeting)
            total += len(meeting) - carriers
    return total


def three_for_two(prices: Iterable[int]) -> int:
    """Least total paid when every third item, dearest first, is free."""
    ordered = sorted(prices, reverse=True)
    return sum(price for i, price in enumerate(ordered) if i % 3 != 2)


def shirts_available(requests: Iterable[int], small: int, medium: int) -> bool:
    """Tell whether the stock covers the requests (1 is small, others medium)."""
    wanted_small = wanted_medium = 0
    for size in requests:
        if size == 1:
            wanted_small += 1
        else:
            wanted_medium += 1
    return small >= wanted_small and medium >= wanted_medium


def third_sibling_age(a: int, b: int) -> int:
    """Age of the third sibling, the ages being evenly spaced."""
    return b + (b - a)


def best_frame(a: int, l: int, frames: Iterable[tuple[int, int]]) -> int:
    """1-based index of the frame that fits the photo with least spare area, or -1."""
    best = -1
    least_area = 10000
    for index, (x, y) in enumerate(frames, 1):
        for width, height in ((a, l), (l, a)):
            if x >= width and y >= height:
                area = (x - width) * (y - height)
                if area < least_area:
                    least_area = area
                    best = index
    return best


def atlanta(a: int, b: int) -> tuple[int, int]:
    """Sides of a rectangle with a border cells and b inner cells, or (-1, -1)."""
    total = a + b
    for length in range(2, int(total / 2) + 1):
        width = total / length
        if a == 2 * (length + width) - 4 and b == (length - 2) * (width - 2):
            low, high = sorted((length, width))
            return int(low), int(high)
    return -1, -1