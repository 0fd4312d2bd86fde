"""Solutions to the 2017 olympiad problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

INFINITY = 1_000_000

_XERXES_TABLE = (
    (-1, 0, 0, 3, 4),
    (0, -1, 1, 1, 4),
    (0, 1, -1, 2, 2),
    (3, 1, 2, -1, 3),
    (4, 4, 2, 3, -1),
)

_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


def boot_pairs(boots: Iterable[tuple[int, str]]) -> int:
    """Count matching left ('E') and right boot pairs of sizes 30 to 60."""
    counts = Counter((size, side == "E") for size, side in boots)
    return sum(min(counts[size, True], counts[size, False]) for size in range(30, 61))


def game_ten(n: int, d: int, a: int) -> int:
    """Steps forward on a ring of n positions from a to d."""
    if d >= a:
        return d - a
    return n - a + d


def cheapest_freight(n: int, roads: Iterable[tuple[int, int, int]]) -> int:
    """Cheapest cost from town 1 to town n over two-way roads (a, b, cost)."""
    dist = [[INFINITY] * (n + 1) for _ in range(n + 1)]
    for a, b, cost in roads:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"road between unknown towns: {a}, {b}")
        dist[a][b] = cost
        dist[b][a] = cost
    towns = range(1, n + 1)
    for k in towns:
        through = dist[k]
        for i in towns:
            row = dist[i]
            to_k = row[k]
            for j in towns:
                if to_k + through[j] < row[j]:
                    row[j] = to_k + through[j]
    return dist[1][n]


def map_end(grid: Sequence[str]) -> tuple[int, int]:
    """Follow the 'H' trail from the origin 'o'; give the end as 1-based (row, column)."""
    cells = [list(row) for row in grid]
    origin = None
    for i, row in enumerate(cells):
        for j, cell in enumerate(row):
            if cell == "o":
                origin = (i, j)
    if origin is None:
        raise ValueError("the map has no origin")
    i, j = origin
    while True:
        cells[i][j] = "x"
        for di, dj in _MOVES:
            ni, nj = i + di, j + dj
            if 0 <= ni < len(cells) and 0 <= nj < len(cells[ni]) and cells[ni][nj] == "H":
                break
        else:
            return i + 1, j + 1
        i, j = ni, nj


def xerxes_winner(rounds: Iterable[tuple[int, int]]) -> str:
    """Name the winner of the (dario, xerxes) rounds; xerxes wins ties."""
    dario = xerxes = 0
    for d, x in rounds:
        if d == x:
            continue
        if _XERXES_TABLE[d][x] == x:
            xerxes += 1
        else:
            dario += 1
    return "dario" if dario > xerxes else "xerxes"


def empire_min_difference(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Smallest size difference after cutting one parent-child link of the tree."""
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for parent, child in edges:
        children[parent].append(child)
    descendants: list[int | None] = [None] * (n + 1)
    for start in range(1, n + 1):
        stack = [(start, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                descendants[node] = sum(1 + descendants[c] for c in children[node])
            elif descendants[node] is None:
                stack.append((node, True))
                stack.extend((c, False) for c in children[node] if descendants[c] is None)
    best = n
    for count in descendants[1:]:
        best = min(best, abs(n - 2 * (count + 1)))
    return best


def pole_repairs(values: Iterable[int]) -> tuple[int, int]:
    """Count poles to replace (below 50) and to repair (50 to 84)."""
    replaced = repaired = 0
    for value in values:
        if value < 50:
            replaced += 1
        elif value < 85:
            repaired += 1
    return replaced, repaired