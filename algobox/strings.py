"""String algorithms: parentheses, subsequences, folders, games on colours."""

from __future__ import annotations

from collections import Counter
from itertools import groupby
from typing import Iterable


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed parenthesised substring."""
    stack = [-1]
    best = 0
    for index, char in enumerate(s):
        if char == "(":
            stack.append(index)
        elif len(stack) == 1:
            stack[0] = index
        else:
            stack.pop()
            best = max(best, index - stack[-1])
    return best


def find_the_difference(s: str, t: str) -> str:
    """Return the one character that t holds beyond the characters of s."""
    if len(t) != len(s) + 1:
        raise ValueError("t must be exactly one character longer than s")
    extra = Counter(t) - Counter(s)
    if sum(extra.values()) != 1:
        raise ValueError("t is not s with one character added")
    return next(iter(extra))


def is_subsequence(s: str, t: str) -> bool:
    """Tell whether s can be obtained from t by deleting characters."""
    remaining = iter(t)
    return all(char in remaining for char in s)


def reverse_words(s: str) -> str:
    """Reverse the characters of each space-separated word, keeping the spaces."""
    return " ".join(word[::-1] for word in s.split(" "))


def _typed(text: str) -> list[str]:
    """Return what remains of text when '#' erases the character before it."""
    kept: list[str] = []
    for char in text:
        if char == "#":
            if kept:
                kept.pop()
        else:
            kept.append(char)
    return kept


def backspace_compare(s: str, t: str) -> bool:
    """Tell whether s and t type out the same text, '#' being a backspace."""
    return _typed(s) == _typed(t)


def remove_subfolders(folders: Iterable[str]) -> list[str]:
    """Return the folders, sorted, that lie inside no other listed folder."""
    kept: list[str] = []
    for folder in sorted(folders):
        if kept and (folder == kept[-1] or folder.startswith(kept[-1] + "/")):
            continue
        kept.append(folder)
    return kept


def count_palindromic_subsequence(s: str) -> int:
    """Count the distinct palindromes of length three that are subsequences of s."""
    first: dict[str, int] = {}
    last: dict[str, int] = {}
    for index, char in enumerate(s):
        first.setdefault(char, index)
        last[char] = index
    return sum(len(set(s[first[char] + 1 : last[char]])) for char in first)


def winner_of_game(colors: str) -> bool:
    """Tell whether Alice (playing 'A') wins the colour-removal game."""
    moves = {True: 0, False: 0}
    for is_a, run in groupby(colors, key=lambda char: char == "A"):
        moves[is_a] += max(0, sum(1 for _ in run) - 2)
    return moves[True] > moves[False]


def shortest_beautiful_substring(s: str, k: int) -> str:
    """Return the shortest, then smallest, substring with exactly k '1's, or ''."""
    if k < 1:
        raise ValueError("k must be at least 1")
    ones = [index for index, char in enumerate(s) if char == "1"]
    if len(ones) < k:
        return ""
    candidates = (
        s[start : end + 1] for start, end in zip(ones, ones[k - 1 :])
    )
    return min(candidates, key=lambda piece: (len(piece), piece))