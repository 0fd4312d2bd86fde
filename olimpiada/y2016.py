"""Solutions to the 2016 olympiad problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from math import factorial

STAR = 1
EXIT = 2
ORIGIN = 3
VISITED = 4

_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


def braces_balanced(lines: Iterable[str]) -> bool:
    """Tell whether the braces across all lines are balanced."""
    depth = 0
    for line in lines:
        for char in line:
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth < 0:
                    return False
    return depth == 0


def lamp_presses(ia: int, ib: int, fa: int, fb: int) -> int:
    """Fewest switch presses to go from the initial to the final lamp states."""
    if ia == fa and ib == fb:
        return 0
    if ia != fa:
        return 1
    return 2


def sandwich_ways(pieces: Sequence[int], d: int) -> int:
    """Count the starting pieces of a circular sandwich from which a run sums to d."""
    count = len(pieces)
    if count == 0:
        return 0
    if d > 0 and sum(pieces) <= 0:
        raise ValueError("pieces must have a positive total")
    total = 0
    end = 0
    ways = 0
    for start, piece in enumerate(pieces):
        while total < d:
            total += pieces[end % count]
            end += 1
        if total == d:
            ways += 1
        if total > 0:
            total -= piece
        else:
            end = start
    return ways


def burrow_length(grid: Sequence[Sequence[int]]) -> int:
    """Length of the burrow walked from the origin along star cells, ends included."""
    rows = [list(row) for row in grid]
    origin = None
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell == ORIGIN:
                origin = (i, j)
    if origin is None:
        raise ValueError("the grid has no origin")
    i, j = origin
    length = 2
    while True:
        rows[i][j] = VISITED
        for di, dj in _MOVES:
            ni, nj = i + di, j + dj
            if 0 <= ni < len(rows) and 0 <= nj < len(rows[ni]) and rows[ni][nj] == STAR:
                break
        else:
            return length
        i, j = ni, nj
        length += 1


def missing_permutation(n: int, permutations: Iterable[Sequence[int]]) -> list[int]:
    """Find the permutation of 1..n left out of a list of all the others."""
    expected = factorial(n) // n
    columns = [Counter() for _ in range(n)]
    for permutation in permutations:
        if len(permutation) != n:
            raise ValueError(f"permutation of wrong length: {permutation!r}")
        for column, value in zip(columns, permutation):
            column[value] += 1
    missing = []
    for column in columns:
        differing = [value for value in range(1, n + 1) if column[value] != expected]
        if not differing:
            raise ValueError("no permutation is missing")
        missing.append(differing[-1])
    return missing


def pokemon_count(candies: int, costs: Iterable[int]) -> int:
    """How many pokemon can evolve with the candies, cheapest first."""
    evolved = 0
    for cost in sorted(costs):
        if cost > candies:
            break
        candies -= cost
        evolved += 1
    return evolved


def count_almost_primes(n: int, primes: Iterable[int]) -> int:
    """Count the numbers in 1..n divisible by none of the given primes."""
    marked = bytearray(n + 1)
    for prime in primes:
        if prime < 1:
            raise ValueError(f"invalid prime: {prime}")
        multiples = range(prime, n + 1, prime)
        marked[prime::prime] = b"\x01" * len(multiples)
    return n - marked.count(1)