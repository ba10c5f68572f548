"""Linear search over a sequence and a small phone book."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Person:
    """A phone book entry."""

    name: str
    number: str


def linear_search(items: Sequence[Any], target: Any) -> int:
    """Index of the first item equal to ``target``; ValueError if absent."""
    for index, item in enumerate(items):
        if item == target:
            return index
    raise ValueError(f"{target!r} not found")


def find_number(people: Iterable[Person], name: str) -> str:
    """Number of the first person called ``name``; KeyError if absent."""
    for person in people:
        if person.name == name:
            return person.number
    raise KeyError(name)