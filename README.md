# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small fixed set
of operations, and check whether a given list of operations sorts a list.

## The operations

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` / `ss` | swap the top two items of `a`, of `b`, or of both |
| `pa` / `pb` | move the top item of `b` onto `a`, or of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate up: the top item goes to the bottom |
| `rra` / `rrb` / `rrr` | rotate down: the bottom item goes to the top |

A list counts as sorted when `a` is in strictly ascending order from top to
bottom and `b` is empty. The first number given is the top of `a`.

## Installing

```
pip install .
```

## Finding a sequence of operations

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

Each argument may hold several numbers separated by spaces. The operations
are printed one per line; input that is already sorted prints nothing, and
no arguments at all print nothing either.

An argument is refused if it holds anything but digits, spaces and signs, if
a sign is not followed by a digit or does not start a number, if it is empty
or only spaces, if a number does not fit in a 32-bit signed integer, or if a
number appears twice. Refused input prints `Error` on standard error and the
exit status is 1.

The strategy depends on the count: two or three numbers are sorted directly,
up to 20 by pushing the smallest to `b` and back, and larger lists by moving
rank windows around the median to `b` (20 wide up to 100 numbers, 70 wide
beyond) and gathering them back from the largest down. It is a heuristic:
it does not search for the shortest sequence.

## Checking a sequence of operations

```
push-swap 3 2 5 1 4 | pushswap-checker 3 2 5 1 4
```

`pushswap-checker` reads operations from standard input, one per line, and
runs them on the numbers given as arguments. It prints `OK` if the result is
sorted and `KO` if it is not. Every line must be an operation name followed
by a newline; anything else, including a last line without a newline, prints
`Error` on standard error with exit status 1.

The checker reads its arguments as `push-swap` does, with one further rule:
an argument of eleven characters or more is refused, so `-2147483648` as one
argument is accepted by `push-swap` but not by the checker.

## Using it from Python

```python
from pushswap.sorting import solve
from pushswap.checker import run_checker

ops = solve([3, 2, 5, 1, 4])
print(run_checker([3, 2, 5, 1, 4], [f"{op}\n" for op in ops]))
```

- `pushswap.stacks.Operation` is an enum of the eleven operations, each equal
  to its name (`Operation.RRA == "rra"`).
- `pushswap.stacks.Stacks` holds the deques `a` and `b` (top at index 0) and
  has one method per operation, plus `apply(operation)` taking an
  `Operation` or its name and `is_sorted()`. Each operation performed is
  appended to `operations`; a single-stack operation that has nothing to act
  on is not recorded.
- `pushswap.sorting` provides `solve(values)`, which returns the list of
  operations, as well as `rank`, `is_sorted`, `sort_two`, `sort_three`,
  `sort_small` and `chunk_sort(stacks, chunk)` that work on a `Stacks`.
- `pushswap.parsing.parse_arguments(args, strict=False)` turns command-line
  arguments into a list of integers and raises
  `pushswap.parsing.InputError` (a `ValueError`) if they are not valid;
  `parse_int` and `validate_signs` are the pieces it is built from.
- `pushswap.checker.apply_instruction(stacks, line)` performs one
  instruction line and `run_checker(values, lines)` runs a whole sequence.

## Running the tests

```
pip install ".[test]"
pytest
```