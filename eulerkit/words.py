"""Triangle-word counting over comma-separated, quoted word lists."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterable

_DELIMITERS = re.compile(r'[ ,"\n]+')


def parse_words(text: str) -> list[str]:
    """Split *text* into words on spaces, commas, double quotes and newlines."""
    return [word for word in _DELIMITERS.split(text) if word]


def word_value(word: str) -> int:
    """Sum the alphabet positions of the letters of *word*, with A counting 1."""
    return sum(ord(char) - ord("A") + 1 for char in word)


def count_triangle_words(words: Iterable[str]) -> int:
    """Count the words whose value is a triangle number."""
    values = [word_value(word) for word in words]
    if not values:
        return 0
    largest = max(values)
    triangles: set[int] = set()
    i = 1
    while (triangle := i * (i + 1) // 2) <= largest:
        triangles.add(triangle)
        i += 1
    return sum(value in triangles for value in values)


def count_triangle_words_in_file(path: str | os.PathLike[str]) -> int:
    """Count the triangle words in the word list stored at *path*."""
    return count_triangle_words(parse_words(Path(path).read_text()))