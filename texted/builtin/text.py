"""Scanning helpers over raw buffer text (0-based indices)."""

from __future__ import annotations


def is_word_char(ch: str) -> bool:
    # Words are ASCII letters and digits only.
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ("0" <= ch <= "9")


def forward_word_end(text: str, pos: int, count: int) -> int:
    """Index reached after moving over `count` words forward from `pos`."""
    n = len(text)
    for _ in range(count):
        if pos >= n:
            break
        while pos < n and not is_word_char(text[pos]):
            pos += 1
        while pos < n and is_word_char(text[pos]):
            pos += 1
    return pos


def backward_word_start(text: str, pos: int, count: int) -> int:
    """Index reached after moving over `count` words backward from `pos`."""
    for _ in range(count):
        if pos <= 0:
            break
        while pos > 0 and not is_word_char(text[pos - 1]):
            pos -= 1
        while pos > 0 and is_word_char(text[pos - 1]):
            pos -= 1
    return pos


def line_start(text: str, pos: int) -> int:
    """Index of the first character of the line holding `pos`."""
    return text.rfind("\n", 0, pos) + 1


def line_end(text: str, pos: int) -> int:
    """Index of the newline ending the line holding `pos`, or len(text)."""
    end = text.find("\n", pos)
    return len(text) if end == -1 else end


def lines_end(text: str, pos: int, count: int) -> int:
    """Index just past `count` lines starting at `pos`, newlines included."""
    n = len(text)
    for _ in range(count):
        if pos >= n:
            break
        pos = line_end(text, pos)
        if pos < n:
            pos += 1
    return pos
