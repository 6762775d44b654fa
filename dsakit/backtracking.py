"""Backtracking enumerations: subsets, permutations, combinations and paths."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")

_MOVES = (("D", 1, 0), ("R", 0, 1), ("L", 0, -1), ("U", -1, 0))


def subsets(items: Iterable[Any]) -> list[list[Any]]:
    """Return every subset, exploring 'exclude' before 'include' at each element."""
    values = list(items)
    result: list[list[Any]] = []
    chosen: list[Any] = []

    def solve(index: int) -> None:
        if index >= len(values):
            result.append(list(chosen))
            return
        solve(index + 1)
        chosen.append(values[index])
        solve(index + 1)
        chosen.pop()

    solve(0)
    return result


def unique_subsets(items: Iterable[Any]) -> list[list[Any]]:
    """Return the subsets with repeated listings removed, first occurrence kept."""
    seen: set[tuple[Any, ...]] = set()
    result: list[list[Any]] = []
    for subset in subsets(items):
        key = tuple(subset)
        if key not in seen:
            seen.add(key)
            result.append(subset)
    return result


def subsequences(text: str) -> list[str]:
    """Return every subsequence of ``text``, including the empty one."""
    return ["".join(chars) for chars in subsets(text)]


def permutations(items: Iterable[Any]) -> list[list[Any]]:
    """Return every ordering of ``items``, generated by swapping in place."""
    values = list(items)
    result: list[list[Any]] = []

    def solve(index: int) -> None:
        if index >= len(values):
            result.append(list(values))
            return
        for j in range(index, len(values)):
            values[index], values[j] = values[j], values[index]
            solve(index + 1)
            values[index], values[j] = values[j], values[index]

    solve(0)
    return result


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return combinations of positive candidates, reusable, that add up to ``target``."""
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must be positive")
    result: list[list[int]] = []
    chosen: list[int] = []

    def solve(index: int, remaining: int) -> None:
        if remaining == 0:
            result.append(list(chosen))
            return
        if remaining < 0 or index >= len(candidates):
            return
        if candidates[index] <= remaining:
            chosen.append(candidates[index])
            solve(index, remaining - candidates[index])
            chosen.pop()
        solve(index + 1, remaining)

    solve(0, target)
    return result


def letter_combinations(digits: str) -> list[str]:
    """Return the letter strings a phone keypad can spell for ``digits``."""
    if not digits:
        return []
    if not all(ch in "0123456789" for ch in digits):
        raise ValueError(f"not a string of digits: {digits!r}")
    result: list[str] = []

    def solve(index: int, prefix: str) -> None:
        if index >= len(digits):
            result.append(prefix)
            return
        for letter in KEYPAD[int(digits[index])]:
            solve(index + 1, prefix + letter)

    solve(0, "")
    return result


def rat_in_maze(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path of D/R/L/U moves from top-left to bottom-right over open cells.

    Open cells hold 1; a path never visits a cell twice.
    """
    size = len(maze)
    if any(len(row) != size for row in maze):
        raise ValueError("the maze must be square")
    if size == 0 or maze[0][0] != 1:
        return []

    visited: set[tuple[int, int]] = set()
    paths: list[str] = []

    def open_cell(x: int, y: int) -> bool:
        return (
            0 <= x < size
            and 0 <= y < size
            and maze[x][y] == 1
            and (x, y) not in visited
        )

    def solve(x: int, y: int, path: str) -> None:
        if x == size - 1 and y == size - 1:
            paths.append(path)
            return
        visited.add((x, y))
        for letter, dx, dy in _MOVES:
            if open_cell(x + dx, y + dy):
                solve(x + dx, y + dy, path + letter)
        visited.discard((x, y))

    solve(0, 0, "")
    return paths