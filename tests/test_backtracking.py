import pytest

from algobox.backtracking import (
    generate_parenthesis,
    letter_combinations,
    palindrome_partitions,
    solve_n_queens,
    total_n_queens,
    word_exists,
)

BOARD = [
    ["A", "B", "C", "E"],
    ["S", "F", "C", "S"],
    ["A", "D", "E", "E"],
]


def balanced(text):
    depth = 0
    for char in text:
        depth += 1 if char == "(" else -1
        if depth < 0:
            return False
    return depth == 0


def queens_valid(board):
    n = len(board)
    cells = [(r, c) for r, line in enumerate(board) for c, ch in enumerate(line) if ch == "Q"]
    return (
        len(cells) == n
        and len({r for r, _ in cells}) == n
        and len({c for _, c in cells}) == n
        and len({r - c for r, c in cells}) == n
        and len({r + c for r, c in cells}) == n
    )


def test_letter_combinations_two_digits():
    assert letter_combinations("23") == ["ad", "ae", "af", "bd", "be", "bf", "cd", "ce", "cf"]


def test_letter_combinations_shape():
    result = letter_combinations("794")
    assert result == sorted(result)
    assert len(set(result)) == len(result)
    assert all(len(word) == 3 for word in result)


def test_letter_combinations_empty_and_letterless():
    assert letter_combinations("") == []
    assert letter_combinations("21") == []


def test_letter_combinations_rejects_non_digit():
    with pytest.raises(ValueError):
        letter_combinations("2a")


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
def test_generate_parenthesis_invariants(n):
    result = generate_parenthesis(n)
    assert result == sorted(result)
    assert len(set(result)) == len(result)
    assert all(len(s) == 2 * n and balanced(s) for s in result)


def test_generate_parenthesis_zero():
    assert generate_parenthesis(0) == [""]


def test_solve_four_queens():
    assert solve_n_queens(4) == [
        ["..Q.", "Q...", "...Q", ".Q.."],
        [".Q..", "...Q", "Q...", "..Q."],
    ]


@pytest.mark.parametrize("n", range(1, 8))
def test_queens_boards_are_valid_and_counted(n):
    boards = solve_n_queens(n)
    assert all(queens_valid(board) for board in boards)
    assert total_n_queens(n) == len(boards)


def test_queens_negative_size():
    with pytest.raises(ValueError):
        total_n_queens(-1)


@pytest.mark.parametrize("word", ["ABCCED", "SEE", "ASADFB", "E"])
def test_word_exists_found(word):
    assert word_exists(BOARD, word) is True


def test_word_exists_cannot_reuse_cell():
    assert word_exists(BOARD, "ABCB") is False


def test_word_exists_missing_letter_and_empty_inputs():
    assert word_exists(BOARD, "ABZ") is False
    assert word_exists(BOARD, "") is False
    assert word_exists([], "A") is False


def test_word_exists_accepts_string_rows():
    rows = ["".join(line) for line in BOARD]
    assert word_exists(rows, "SEE") is True


def test_palindrome_partitions_example():
    assert palindrome_partitions("aab") == [["a", "a", "b"], ["aa", "b"]]


@pytest.mark.parametrize("text", ["racecar", "abba", "abc", "aaaa"])
def test_palindrome_partitions_invariants(text):
    parts = palindrome_partitions(text)
    assert all("".join(p) == text for p in parts)
    assert all(piece == piece[::-1] for p in parts for piece in p)
    assert len({tuple(p) for p in parts}) == len(parts)
    assert list(text) in parts


def test_palindrome_partitions_empty():
    assert palindrome_partitions("") == [[]]