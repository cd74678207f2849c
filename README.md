# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. Each operation performed is printed on its own line, so
the output is the sequence of moves that sorts the input.

## Installation

```
pip install .
```

## Usage

Pass the numbers either as separate arguments or as one space-separated
argument:

```
pushswap 3 2 1
pushswap "5 4 3 2 1"
```

The first number given is the top of stack `a`. For `pushswap 3 2 1` the
output is:

```
ra
sa
```

Input that is already sorted produces no output. The command exits with
status 0 on success.

The input is rejected, with `Error.` followed by a message on standard
output and exit status 1, when:

- an argument is not an integer or does not fit in 32 signed bits;
- a number appears twice.

## Operations

| Move  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the two top elements of `a`                |
| `sb`  | swap the two top elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the top goes to the bottom       |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the bottom goes to the top     |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

These are the members of `pushswap.stacks.Operation`, and methods of the same
names on `pushswap.stacks.Stacks`. `Stacks.apply` performs any of them and
returns whether a stack changed.

## Strategy

- Two and three numbers are sorted in place with fixed sequences.
- Four and five numbers: the smallest value is rotated to the top and pushed
  to `b`, the rest is sorted, and the value is pushed back.
- Larger inputs are ranked, pushed to `b` in a sliding window of ranks
  (`sorter.sort_chunks`, window 0 to 15 by default), then brought back
  largest first: `b` is rotated up if the maximum lies in its upper half and
  down otherwise.

## Library use

```python
import io

from pushswap.parsing import parse_arguments
from pushswap.sorter import push_swap
from pushswap.stacks import Stacks

out = io.StringIO()
stacks = Stacks(parse_arguments(["3", "2", "1"]), [], out)
push_swap(stacks)
print(out.getvalue())
```

`parse_arguments` raises `PushSwapError` on invalid input.

The package also carries the small helpers the program is built on:
`chars` (character classification), `memory` (byte-buffer operations),
`output` (writing characters, strings and numbers to a stream),
`textutils` (string parsing and manipulation), `linkedlist` (a singly linked
list) and `printf` (a minimal formatter for `%c %s %d %i %u %x %X %p`).

## What it does not do

There is no checker: the package prints moves but offers no command that
reads a list of moves and verifies that they sort the input.

## Running the tests

```
pip install .[test]
pytest
```