# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of operations. It writes the name of each operation it performs, one per
line.

The operations, as methods of `pushswap.stack.Stacks`:

| Name  | Method         | Effect                                                  |
|-------|----------------|---------------------------------------------------------|
| `sa`  | `swap_a`       | swap the two top items of `a` (only when it holds 3+)   |
| `sb`  | `swap_b`       | swap the two top items of `b` (only when it holds 3+)   |
| `sr`  | `swap_both`    | `swap_a`, then `swap_b`                                 |
| `pa`  | `push_a`       | move the top of `b` onto `a`                            |
| `pb`  | `push_b`       | move the top of `a` onto `b`                            |
| `ra`  | `rotate_a`     | rotate `a` up: the top item goes to the bottom          |
| `rb`  | `rotate_b`     | rotate `b` up                                           |
| `rr`  | `rotate_both`  | `rotate_a`, then `rotate_b`                             |
| `rra` | `reverse_a`    | rotate `a` down: the bottom item goes to the top        |
| `rrb` | `reverse_b`    | rotate `b` down                                         |
| `rrr` | `reverse_both` | `reverse_a`, then `reverse_b`                           |

An operation that cannot change its stack (too few items) writes nothing.
The combined operations write their own name after the names written by the
two operations they perform.

## Installing

```
pip install .
```

## Command line

Pass the numbers as separate arguments; the first argument is the top of
stack `a`:

```
pushswap 3 1 2 5 4 9 8 7 6
```

or, without installing the script:

```
python -m pushswap.cli 3 1 2 5 4 9 8 7 6
```

The operations are written to standard error, one per line. When they are
done, `a` holds all the numbers in ascending order, smallest on top.

The command writes `Error` to standard error and exits with status 1 when an
argument does not start with an integer, when two arguments read as the same
number, or when there are more than two arguments and the first starts with
`"` and contains more than one space-separated word. Called with no
arguments, it does nothing. Called with a single argument, it writes the
integer that argument starts with and stops.

Numbers are read like C's `atoi`: leading whitespace and one sign are
allowed, reading stops at the first non-digit, and values wrap to 32 bits.

## Library use

```python
import io

from pushswap.cli import run

out = io.StringIO()
status = run(["3", "1", "2", "5", "4", "9", "8", "7", "6"], out)
print(status, out.getvalue().split())
```

`run` returns the exit status and writes messages and operations to the
stream it is given (standard error by default). `main(argv=None)` calls it
with the process's own arguments.

The building blocks are available on their own:

- `pushswap.parsing` — `parse_int`, `split_words`, `check_duplicates` and
  `check_arguments` check the input and raise `InputError` (a `ValueError`)
  on bad input; `parse_stack` turns arguments into `Item`s, a single
  argument being read as a space-separated list; `assign_indices` stores in
  each item's `index` its rank among the values.
- `pushswap.stack` — `Item` (a number with its `index` and `pos`) and
  `Stacks`, which holds lists `a` and `b` (top first), performs the
  operations above and offers `values_a()` and `values_b()`.
- `pushswap.small` — fixed move sequences: `sort_three` orders three items
  ranked 0 to 2, `insert_pair` brings two items on `b` back into three sorted
  items on `a`, and `sort_five` does both for five numbers.
- `pushswap.chunks` — scans and moves by chunks of ranks a fifth of the stack
  wide: `needs_sorting`, `scan_from_top`, `scan_from_bottom`,
  `scan_from_top_b`, `scan_from_bottom_b`, `move_to_top`, `move_to_top_b`,
  `bring_max_to_top_b`, `check_and_push_b` and `organise_rest_a`.

The command itself uses only `move_to_top` and `bring_max_to_top_b`; the
fixed sequences in `pushswap.small` are not used for short inputs.

## What it does not do

There is no checker: the package does not read a list of operations and
verify that they sort a given input. Nor does it aim for the fewest
operations.

## Running the tests

```
pip install .[test]
pytest
```