import pytest

from algobox.graphs import find_champion, shortest_distance_after_queries, sliding_puzzle

SOLVED = [[1, 2, 3], [4, 5, 0]]


def test_sliding_puzzle_solved_board():
    assert sliding_puzzle(SOLVED) == 0


def test_sliding_puzzle_one_move():
    assert sliding_puzzle([[1, 2, 3], [4, 0, 5]]) == 1
    assert sliding_puzzle([[1, 2, 0], [4, 5, 3]]) == 1


def test_sliding_puzzle_example():
    assert sliding_puzzle([[4, 1, 2], [5, 0, 3]]) == 5


def test_sliding_puzzle_unsolvable():
    assert sliding_puzzle([[2, 1, 3], [4, 5, 0]]) == -1


@pytest.mark.parametrize(
    "board", [[[4, 1, 2], [5, 0, 3]], [[3, 2, 4], [1, 5, 0]], [[0, 1, 2], [3, 4, 5]]]
)
def test_sliding_puzzle_neighbours_differ_by_at_most_one(board):
    flat = [tile for row in board for tile in row]
    moves = sliding_puzzle(board)
    blank = flat.index(0)
    row, col = divmod(blank, 3)
    for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
        r, c = row + dr, col + dc
        if 0 <= r < 2 and 0 <= c < 3:
            tiles = flat[:]
            other = r * 3 + c
            tiles[blank], tiles[other] = tiles[other], tiles[blank]
            neighbour = sliding_puzzle([tiles[:3], tiles[3:]])
            if moves == -1:
                assert neighbour == -1
            else:
                assert abs(neighbour - moves) == 1


@pytest.mark.parametrize(
    "board", [[[1, 2, 3], [4, 5]], [[1, 2, 3], [4, 5, 5]], [[1, 2, 3]]]
)
def test_sliding_puzzle_rejects_bad_boards(board):
    with pytest.raises(ValueError):
        sliding_puzzle(board)


def test_find_champion_chain():
    assert find_champion(3, [[0, 1], [1, 2]]) == 0


def test_find_champion_two_unbeaten_teams():
    assert find_champion(4, [[0, 2], [1, 3], [1, 2]]) == -1


def test_find_champion_single_team():
    assert find_champion(1, []) == 0


def test_find_champion_rejects_no_teams():
    with pytest.raises(ValueError):
        find_champion(0, [])


def test_shortest_distance_example():
    assert shortest_distance_after_queries(5, [[2, 4], [0, 2], [0, 4]]) == [3, 2, 1]


def test_shortest_distance_no_queries():
    assert shortest_distance_after_queries(4, []) == []


@pytest.mark.parametrize(
    "n,queries",
    [(6, [[1, 3], [0, 2], [2, 5], [3, 5]]), (8, [[0, 3], [4, 7], [3, 4], [1, 6]])],
)
def test_shortest_distance_never_grows(n, queries):
    answers = shortest_distance_after_queries(n, queries)
    assert len(answers) == len(queries)
    assert all(1 <= a <= n - 1 for a in answers)
    assert all(a >= b for a, b in zip(answers, answers[1:]))


def test_shortest_distance_direct_road():
    n = 7
    assert shortest_distance_after_queries(n, [[0, n - 1]]) == [1]


def test_shortest_distance_rejects_no_cities():
    with pytest.raises(ValueError):
        shortest_distance_after_queries(0, [])