# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of operations. It prints the operations it used, one per line, so that
applying them in order to stack `a` leaves it sorted in ascending order with
the smallest number on top.

## Installing

```
pip install .
```

## Command line

Pass the numbers as separate arguments:

```
push_swap 3 2 1
```

or as one quoted argument separated by spaces:

```
push_swap "4 67 3 87 23"
```

Output for `push_swap 3 2 1`:

```
ra
sa
```

Rules:

- With no arguments nothing is printed and the exit status is 0.
- Input that is already sorted prints nothing.
- Every token must be an integer with an optional leading `+` or `-`,
  must fit in a signed 32-bit integer, and must not repeat. Otherwise `Error`
  is written to standard error and the exit status is 1. An empty single
  argument, or one holding only spaces, is an error as well.

## Operations

| Name  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the first two elements of `a`                |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` up: the first element becomes the last |
| `rb`  | rotate `b` up                                     |
| `rr`  | `ra` and `rb` together                            |
| `rra` | rotate `a` down: the last element becomes first   |
| `rrb` | rotate `b` down                                   |
| `rrr` | `rra` and `rrb` together                          |

Two and three numbers are sorted directly, four and five by moving the
smallest values to `b` first, and larger inputs by a cost-based "cheapest
move" strategy.

## Library use

```python
from pushswap.sorting import solve
from pushswap.stacks import Stacks

ops = solve([5, 1, 4, 2, 3])
print(ops)

stacks = Stacks([2, 1, 3])
stacks.sa()
print(list(stacks.a))      # [1, 2, 3]
print(stacks.operations)   # ['sa']
```

- `pushswap.stacks`: the `Stacks` class with the nine operations as methods,
  each recorded in `operations`, and `is_sorted`.
- `pushswap.sorting`: `solve`, `sort_if_needed`, `sort_three`, `sort_four`,
  `sort_five`, `sort_large`, and the helpers `above_median`,
  `targets_for_a`, `targets_for_b` and `push_costs`.
- `pushswap.parsing`: `collect_tokens`, `split_arguments`,
  `has_syntax_error` and `parse_numbers`, which raise `ParseError` on bad
  input.
- `pushswap.cli`: `main`, the `push_swap` command.

The `pushswap.libft` subpackage holds supporting helpers:

- `pushswap.libft.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), case mapping (`to_lower`,
  `to_upper`), and `atoi` / `itoa`.
- `pushswap.libft.strings`: `split`, `strchr`, `strrchr`, `strdup`,
  `striteri`, `strjoin`, `strlcat`, `strlcpy`, `strlen`, `strmapi`,
  `strncmp`, `strnstr`, `strtrim` and `substr`, returning indexes, new
  strings or `(text, length)` pairs instead of writing into buffers.
- `pushswap.libft.linked`: `LinkedList`, a singly linked list with
  `push_front`, `push_back`, `last`, `for_each`, `map` and `clear`.

## What it does not do

The package has no checker that reads operations back and verifies them,
and no general-purpose formatted-output or raw memory helpers; output is
written with Python's own `sys.stdout` and `sys.stderr`.

## Tests

```
pip install ".[test]"
pytest
```