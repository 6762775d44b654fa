"""Short string puzzles."""

from __future__ import annotations

from itertools import groupby

VOWELS = frozenset("aeiouy")


def can_say_hello(text: str) -> bool:
    """Return True if "hello" can be obtained by deleting letters from ``text``."""
    remaining = iter(text)
    return all(letter in remaining for letter in "hello")


def gender_by_username(name: str) -> str:
    """Judge a user name by the parity of its distinct letters."""
    if len(set(name)) % 2 == 0:
        return "CHAT WITH HER!"
    return "IGNORE HIM!"


def _ascii_lower(ch: str) -> str:
    return ch.lower() if "A" <= ch <= "Z" else ch


def string_task(text: str) -> str:
    """Lower-case ``text``, drop vowels and put a dot before each remaining letter."""
    return "".join(
        "." + ch for ch in map(_ascii_lower, text) if ch not in VOWELS
    )


def is_dangerous(positions: str) -> bool:
    """Return True if at least seven equal characters stand in a row."""
    return any(sum(1 for _ in run) >= 7 for _, run in groupby(positions))