"""Small text, number and file exercises."""

from __future__ import annotations

import os
import string
from collections.abc import Callable, Sequence

KEYWORDS = (
    "extern", "return", "union", "const", "float", "short",
    "auto", "double", "int", "struct", "break", "else", "long",
    "goto", "sizeof", "volatile", "do", "if", "static", "while",
    "unsigned", "continue", "for", "signed", "void", "default",
    "switch", "case", "enum", "register", "typedef", "char",
)

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def average(scores: Sequence[float]) -> float:
    """Arithmetic mean of the scores."""
    if not scores:
        raise ValueError("cannot average an empty list of scores")
    return sum(scores) / len(scores)


def uppercase(text: str) -> str:
    """Upper-case the ASCII letters a-z, leaving everything else alone."""
    return text.translate(_TO_UPPER)


def capitalize_first(text: str) -> str:
    """Copy of ``text`` with its first character upper-cased (ASCII only)."""
    return text[:1].translate(_TO_UPPER) + text[1:]


def pyramid(height: int) -> str:
    """Rows of " * " cells, one more per row, each row ending in a newline."""
    if height < 0:
        raise ValueError("height must not be negative")
    return "".join(" * " * row + "\n" for row in range(1, height + 1))


def greeting(args: Sequence[str]) -> str:
    """Greet the single argument by name, or the world otherwise."""
    if len(args) == 1:
        return f"Hello, {args[0]}"
    return "Hello World"


def read_positive_int(
    prompt: str = "Positive Int : ",
    input_fn: Callable[[str], str] = input,
) -> int:
    """Prompt until the answer is an integer of at least 1."""
    while True:
        try:
            number = int(input_fn(prompt).strip())
        except ValueError:
            continue
        if number >= 1:
            return number


def write_keywords(path: str | os.PathLike[str]) -> int:
    """Write each keyword on its own line; return how many were written."""
    with open(path, "w", encoding="ascii") as handle:
        handle.writelines(f"{keyword}\n" for keyword in KEYWORDS)
    return len(KEYWORDS)


def count_lines(path: str | os.PathLike[str]) -> int:
    """Number of newline characters in the file."""
    with open(path, "rb") as handle:
        return sum(chunk.count(b"\n") for chunk in iter(lambda: handle.read(65536), b""))


def append_contact(path: str | os.PathLike[str], name: str, number: str) -> None:
    """Append a ``name,number`` line to a CSV phone book."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{name},{number}\n")