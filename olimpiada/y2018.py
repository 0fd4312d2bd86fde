"""Solutions to the 2018 olympiad problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from enum import Enum, auto
from itertools import pairwise

MAX_GAP = 8
BALLS = 8
SPOT = "*"
SKIN = "."


def missing_stamped(stamped: Sequence[int], bought: Iterable[int]) -> int:
    """How many stamped stickers are still missing after buying the given ones."""
    remaining = set(stamped)
    found = 0
    for sticker in bought:
        if sticker in remaining:
            remaining.discard(sticker)
            found += 1
    return len(stamped) - found


def floor_tiles(l: int, c: int) -> tuple[int, int]:
    """Count type-1 and type-2 tiles for a floor of l by c."""
    return l * c + (l - 1) * (c - 1), 2 * (l - 1) + 2 * (c - 1)


def elevator_possible(weights: Iterable[int]) -> bool:
    """Tell whether the boxes can all be moved, each step at most 8 heavier."""
    ordered = sorted(weights)
    if not ordered:
        raise ValueError("at least one weight is needed")
    if any(heavier - lighter > MAX_GAP for lighter, heavier in pairwise(ordered)):
        return False
    return ordered[0] <= MAX_GAP


def balls_possible(balls: Iterable[int]) -> bool:
    """Tell whether the eight balls can be lined up with no two neighbours alike."""
    values = list(balls)
    if len(values) != BALLS:
        raise ValueError(f"expected {BALLS} balls, got {len(values)}")
    return all(count <= BALLS // 2 for count in Counter(values).values())


def multiple_of_five(digits: Iterable[int]) -> list[int] | None:
    """Swap one digit to the end so the number is a multiple of five.

    Returns the new digits, or None when no digit is 0 or 5.
    """
    result = list(digits)
    if not result:
        return None
    last = len(result) - 1
    candidate = None
    for i, digit in enumerate(result):
        if digit in (0, 5):
            candidate = i
            if digit < result[last]:
                break
    if candidate is None:
        return None
    result[candidate], result[last] = result[last], result[candidate]
    return result


class _Run(Enum):
    EMPTY = auto()
    STARTED = auto()
    ENDED = auto()
    IRREGULAR = auto()


def _advance(state: _Run, pixel: str) -> _Run:
    if state is _Run.EMPTY and pixel == SPOT:
        return _Run.STARTED
    if state is _Run.STARTED and pixel == SKIN:
        return _Run.ENDED
    if state is _Run.ENDED and pixel == SPOT:
        return _Run.IRREGULAR
    return state


def spot_is_regular(grid: Iterable[str]) -> bool:
    """Tell whether every row and column of the image crosses the spot at most once."""
    columns: dict[int, _Run] = {}
    for row in grid:
        row_state = _Run.EMPTY
        for j, pixel in enumerate(row):
            row_state = _advance(row_state, pixel)
            columns[j] = _advance(columns.get(j, _Run.EMPTY), pixel)
            if _Run.IRREGULAR in (row_state, columns[j]):
                return False
    return True