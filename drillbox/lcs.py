"""Length of the longest common subsequence of two strings."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def lcs_length(first: Sequence, second: Sequence) -> int:
    """Length of the longest subsequence shared by ``first`` and ``second``."""
    previous = [0] * (len(second) + 1)
    for item in first:
        current = [0]
        for j, other in enumerate(second, start=1):
            if item == other:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def main(argv: list[str] | None = None) -> int:
    """Read two words from standard input and print their LCS length."""
    parser = argparse.ArgumentParser(
        prog="lcs", description="Read two strings from standard input."
    )
    parser.parse_args(argv)
    print("Enter two strings")
    words = sys.stdin.read().split()
    if len(words) < 2:
        parser.error("two strings are required")
    print(f"lcs is {lcs_length(words[0], words[1])}")
    return 0