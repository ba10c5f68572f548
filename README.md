# drillbox

Classic programming drills in plain Python: an LRU cache, a rat-in-a-maze
path finder, 0/1 knapsack solved four ways, longest common subsequence,
breadth-first tree traversal, linear search, a doubly linked list, a few
beginner exercises and a two-player 4x4 tic-tac-toe game for the terminal.

There are no runtime dependencies. Python 3.10 or later is required.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### LRU cache (`drillbox.lru_cache`)

```python
from drillbox.lru_cache import LRUCache

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)        # 1, and key 1 becomes the most recently used
cache.put(3, 3)     # evicts key 2, the least recently used
cache.get(2)        # -1: absent keys give -1
len(cache)          # 2
3 in cache          # True
```

A capacity below 1 raises `ValueError`. Both `get` and `put` make the key
the most recently used one.

### Rat in a maze (`drillbox.maze`)

`find_paths(grid)` takes a square grid of 1 (open) and 0 (blocked) cells and
returns every simple route from the top-left to the bottom-right cell as a
string of moves `D`, `L`, `R`, `U`. Moves are tried in that order, so the
paths come out sorted. A blocked start gives `[]`; an empty or non-square
grid raises `ValueError`.

```python
from drillbox.maze import find_paths

grid = [
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [1, 1, 0, 0],
    [0, 1, 1, 1],
]
find_paths(grid)    # ['DDRDRR', 'DRDDRR']
```

### Knapsack (`drillbox.knapsack`)

`knapsack_recursive`, `knapsack_memo`, `knapsack_table` and
`knapsack_compact` all take `(values, weights, capacity)` and return the best
total value of a subset of items whose weights fit in `capacity`. They raise
`ValueError` if the two lists differ in length, the capacity is negative or a
weight is not positive.

```python
from drillbox.knapsack import knapsack_table

knapsack_table([60, 100, 120], [10, 20, 30], 50)   # 220
```

### Longest common subsequence (`drillbox.lcs`)

```python
from drillbox.lcs import lcs_length

lcs_length("ABCBDAB", "BDCABA")   # 4
```

`lcs_length` works on any two sequences whose items compare with `==`.

### Tree traversal (`drillbox.tree_bfs`)

`TreeNode(key, left=None, right=None)` is a binary tree node. `height(root)`
counts the levels (0 for `None`). `level_order(root)` returns the keys level
by level using a queue; `level_order_recursive(root)` gives the same list by
visiting one level at a time.

### Searching (`drillbox.search`)

`linear_search(items, target)` returns the index of the first equal item and
raises `ValueError` if there is none. `find_number(people, name)` returns the
number of the first `Person(name, number)` with that name and raises
`KeyError` otherwise.

### Beginner exercises (`drillbox.basics`)

- `average(scores)` – arithmetic mean; `ValueError` for an empty list.
- `uppercase(text)` – upper-cases ASCII `a`–`z` only.
- `capitalize_first(text)` – upper-cases the first character (ASCII only).
- `pyramid(height)` – rows of `" * "` cells, one more per row, each ending in
  a newline; `ValueError` for a negative height.
- `greeting(args)` – `"Hello, <name>"` for exactly one argument, otherwise
  `"Hello World"`.
- `read_positive_int(prompt="Positive Int : ", input_fn=input)` – asks until
  the answer is an integer of at least 1.
- `write_keywords(path)` – writes 32 C keywords, one per line, and returns
  how many were written.
- `count_lines(path)` – counts newline characters in a file.
- `append_contact(path, name, number)` – appends a `name,number` line to a
  CSV file.

### Doubly linked list (`drillbox.doubly_linked_list`)

`DoublyLinkedList` holds `Node` objects with unique keys, each carrying a
data value.

```python
from drillbox.doubly_linked_list import DoublyLinkedList

dll = DoublyLinkedList()
dll.append(1, 10)
dll.prepend(0, 5)
dll.insert_after(1, 2, 20)
dll.update(2, 25)
dll.delete(0)
list(dll)        # [(1, 10), (2, 25)]
dll.render()     # 'Doubly Linked List Values : (1,10) <--> (2,25) <--> '
```

Adding a key that is already present raises `ValueError`; naming a key that
is absent (`insert_after`'s anchor, `delete`, `update`) raises `KeyError`.
`find(key)` returns the node or `None`. The list also supports `len()` and
`in`.

### Tic-tac-toe (`drillbox.board`, `drillbox.tictactoe`)

`Board` has sixteen cells numbered 0–15 row by row. `set_position(index,
mark)` places `"x"` or `"o"`; it raises `PositionTakenError` for an occupied
cell, `IndexError` for an index outside 0–15 and `ValueError` for another
mark. `positions()` returns the cells as a 16-character string with `_` for
empty ones. `check_rows`, `check_columns`, `check_diagonals` and
`determine_winner` return the mark that fills a whole line, or `None`.

`drillbox.tictactoe.play(input_fn=None, output=None)` runs one game: it
reads two player names and then moves through `input_fn` (a function
returning one token per call), writes everything to `output`, and returns
the winning mark or `None` for a tie. `render_numbered()` and
`render_board(board)` return the board drawings the game prints;
`read_position(input_fn, output)` asks until it gets a number from 0 to 15.

## Commands

```
drillbox-knapsack       # read n, n value/weight pairs and a capacity; print the maximum profit
drillbox-lcs            # read two strings; print the length of their LCS
drillbox-linked-list    # menu-driven doubly linked list session
drillbox-tictactoe      # two players, 4x4 board, four in a line wins
```

All commands read their input from standard input, whitespace separated.
`drillbox-knapsack` uses `knapsack_compact`. In `drillbox-linked-list`,
options 1–6 append, prepend, insert after, delete, update and print; 7 clears
the screen; 0 or the end of input quits. In `drillbox-tictactoe` players
enter squares 0–15; after eight rounds without a winner the game is a tie,
and running out of input ends the game with exit status 1.

## What it does not do

The beginner exercises in `drillbox.basics` are library functions only;
there are no commands for them. The tic-tac-toe game is for two people at
one terminal: there is no computer opponent and no saving of games.