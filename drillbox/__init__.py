"""Classic programming drills: data structures, algorithms, small exercises and a 4x4 tic-tac-toe game."""

__version__ = "0.1.0"