"""Graph searches: the sliding puzzle, tournament champions, shortest paths."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

_SOLVED = (1, 2, 3, 4, 5, 0)
_NEIGHBOURS = ((1, 3), (0, 2, 4), (1, 5), (0, 4), (1, 3, 5), (2, 4))


def sliding_puzzle(board: Sequence[Sequence[int]]) -> int:
    """Return the fewest moves that solve a 2x3 sliding puzzle, or -1."""
    if len(board) != 2 or any(len(row) != 3 for row in board):
        raise ValueError("the board must be 2 rows of 3 tiles")
    start = tuple(tile for row in board for tile in row)
    if sorted(start) != list(range(6)):
        raise ValueError("the board must hold the tiles 0 to 5 once each")

    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        state, moves = queue.popleft()
        if state == _SOLVED:
            return moves
        blank = state.index(0)
        for other in _NEIGHBOURS[blank]:
            tiles = list(state)
            tiles[blank], tiles[other] = tiles[other], tiles[blank]
            following = tuple(tiles)
            if following not in seen:
                seen.add(following)
                queue.append((following, moves + 1))
    return -1


def find_champion(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Return the only team no one beats, or -1 if there is not exactly one."""
    if n < 1:
        raise ValueError("there must be at least one team")
    beaten = [False] * n
    for _, loser in edges:
        beaten[loser] = True
    unbeaten = [team for team, lost in enumerate(beaten) if not lost]
    return unbeaten[0] if len(unbeaten) == 1 else -1


def _distance(graph: list[list[int]]) -> int:
    """Return the fewest edges from city 0 to the last city, or -1."""
    target = len(graph) - 1
    dist = {0: 0}
    queue = deque([0])
    while queue:
        city = queue.popleft()
        if city == target:
            return dist[city]
        for following in graph[city]:
            if following not in dist:
                dist[following] = dist[city] + 1
                queue.append(following)
    return -1


def shortest_distance_after_queries(
    n: int, queries: Iterable[Sequence[int]]
) -> list[int]:
    """Add each one-way road in turn; report the shortest 0 to n-1 distance after each."""
    if n < 1:
        raise ValueError("there must be at least one city")
    graph = [[city + 1] if city < n - 1 else [] for city in range(n)]
    answers: list[int] = []
    for source, destination in queries:
        graph[source].append(destination)
        answers.append(_distance(graph))
    return answers