"""Solutions to the 2015 olympiad problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import zip_longest


def count_box_ways(n: int, m: int) -> int:
    """Count ordered triples of integers in 1..m whose sum is n."""
    if 3 * m < n:
        return 0
    ways = 0
    for first in range(max(1, n - 2 * m), m + 1):
        rest = n - first
        low = max(1, rest - m)
        high = min(rest - 1, m)
        ways += max(0, high - low + 1)
    return ways


def coral_is_false(a: int, b: int, c: int, d: int) -> bool:
    """Tell whether the coral reading is false: the first and last values match."""
    return a == d


def assemble_puzzle(pieces: Iterable[tuple[int, str, int]]) -> str:
    """Join puzzle pieces given as (position, letter, next) starting at position 0.

    The piece whose next position is 1 is the last one.
    """
    links = {position: (letter, following) for position, letter, following in pieces}
    letters: list[str] = []
    seen: set[int] = set()
    position = 0
    while True:
        if position not in links:
            raise ValueError(f"no piece at position {position}")
        if position in seen:
            raise ValueError("the pieces form a cycle")
        seen.add(position)
        letter, position = links[position]
        letters.append(letter)
        if position == 1:
            return "".join(letters)


def add_binary(s1: Sequence[int], s2: Sequence[int]) -> list[int]:
    """Add two binary fractions given as digits after the point.

    The result has its trailing zeros removed (keeping at least one digit)
    and starts with an extra 1 when the sum reaches one.
    """
    for bit in (*s1, *s2):
        if bit not in (0, 1):
            raise ValueError(f"not a binary digit: {bit!r}")
    digits: list[int] = []
    carry = 0
    for x, y in reversed(list(zip_longest(s1, s2, fillvalue=0))):
        carry, digit = divmod(x + y + carry, 2)
        digits.append(digit)
    digits.reverse()
    last = max((i for i, bit in enumerate(digits) if bit), default=0)
    result = digits[: last + 1] or [0]
    return [1, *result] if carry else result


def _crosses(half: float, c1: int, c2: int) -> bool:
    return c1 > half > c2 or c1 < half < c2


def splits_evenly(n: int, x1: int, y1: int, x2: int, y2: int) -> bool:
    """Tell whether the cut between two squares splits an n-by-n bar in halves."""
    half = n // 2 + 0.5
    return _crosses(half, x1, x2) or _crosses(half, y1, y2)