# pushswap

A model of the two-stack sorting puzzle: parsing and validating the input
integers, the two stacks with the eleven operations that act on them, and
helpers that find where a value sits or belongs in a stack.

The stacks are `a`, which holds the input with its first number on top, and
`b`, which starts empty. The operations are:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b` or both up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate `a`, `b` or both down: the bottom element goes to the top |

## Installation

```
pip install .
```

## Use

```python
import io

from pushswap.parsing import parse_args, InputError
from pushswap.stacks import Stacks

values = parse_args(["3 2", "1"])   # [3, 2, 1]

stacks = Stacks(values)
stacks.stream = io.StringIO()       # standard output when left as None
stacks.sa()
stacks.rra()
print(list(stacks.a))               # [3, 2, 1] -> [2, 3, 1] -> [1, 2, 3]
print(stacks.moves)                 # ['sa', 'rra']
```

### `pushswap.parsing`

- `parse_args(args)` turns a list of arguments into integers. Each argument
  may hold several space-separated numbers. An empty argument, a malformed
  number, a number outside the signed 32-bit range or a repeated value raises
  `InputError` (a `ValueError`).
- `is_valid_number_format(text)`, `parse_number(text)`,
  `has_duplicates(values)` and `is_sorted(values)` are the checks it is built
  from.

### `pushswap.stacks`

`Stacks(a, b)` holds both stacks as deques, top at index 0. Each operation is
a method of the same name. A move that cannot apply (for example `pa` with an
empty `b`, or `rr` when either stack has fewer than two elements) changes
nothing and is not recorded. Every move that does apply is appended to
`moves` and its name is written, one per line, to `stream`.

### `pushswap.positions`

- `index_of(stack, value)`: index of the first `value`, or 0 if absent.
- `position_a(stack, value)`: where `value` belongs in a stack that is
  ascending up to a rotation.
- `position_b(stack, value)`: where `value` belongs in a stack that is
  descending up to a rotation.
- `has_numbers_below(stack, limit)`: whether any element is at most `limit`.

### `pushswap.libft`

General helpers: `chars` (character classes, case, `atoi`, `itoa`),
`strings` (search, copy, compare, trim, `split`), `lines` (`LineReader`,
which reads a stream line by line in fixed-size chunks), `linked`
(`LinkedList`) and `output` (writing characters, strings and numbers to a
stream).

## What it does not do

The package has no command-line program and no solver: nothing here chooses
a sequence of operations that sorts a stack. It gives the pieces for one, the
validated input, the stacks and their operations, and the position helpers,
and leaves the choice of moves to the caller.

## Tests

```
pip install ".[test]"
pytest
```