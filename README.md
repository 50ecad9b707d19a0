# matcalc

A small library for building and evaluating operations on integer square
matrices. The matrices are small: sizes from 1 to 4, and every entry stays
strictly between -1024 and 1024. Any size or result outside those limits
raises `FileError`.

## Installation

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Matrices

```python
from matcalc.matrix import SquareMatrix

a = SquareMatrix(2, 3)        # 2x2 matrix, every entry 3
b = SquareMatrix.read(2, "1 2 3 4")
c = SquareMatrix(2)           # no value: filled with 0 1 / 2 3

print(a + b)
print((b * 2).transpose())
print(b[1, 0])                # 3
print(b.size)                 # 2
print(b.rows())               # [(1, 2), (3, 4)]
```

- `SquareMatrix(size, value)` fills every entry with `value`; without a
  value each entry holds its row-major position.
- `SquareMatrix.read(size, text)` takes `size * size` values in row order
  from whitespace-separated text. Too few values, or a value that is not an
  integer, raises `InputError`; an out-of-range value raises `FileError`.
- `+`, `-` and `*` (by an integer, on either side) return new matrices.
  Adding or subtracting matrices of different sizes raises `ValueError`.
- `transpose()` returns the transposed matrix; `str()` gives one line per
  row, each value followed by a space.
- Entries can be read and set with `m[row, col]`.

`check_size` and `check_value` in `matcalc.matrix` apply the same limits on
their own.

## Operations

Operations in `matcalc.operations` form a tree. Each one reports how many
input matrices it takes (`input_count`), computes a result from them
(`compute`), and gives a textual description (`describe`).

- `Identity`: returns its input unchanged (`id`)
- `Transpose`: transposes its input (`tran`)
- `Scalar(n)`: multiplies its input by `n` (`scal n`)
- `Add(f, g)`, `Sub(f, g)`: apply `f` and `g` to consecutive inputs, then
  add or subtract the results
- `Comp(f, g)`: feeds the result of `f` into `g` as its first input

A binary operation's description is wrapped in parentheses unless
`describe(top_level=True)` is asked for. `describe_with_inputs(inputs)`
appends each input matrix, in parentheses, after the description.

```python
from matcalc.matrix import SquareMatrix
from matcalc.operations import Add, Comp, Identity, Scalar, Transpose

op = Comp(Add(Identity(), Transpose()), Scalar(2))
m = SquareMatrix.read(2, "1 2 3 4")
n = SquareMatrix.read(2, "0 1 1 0")

print(op.describe(top_level=True))
print(op.input_count())        # 2
print(op.compute([m, n]))      # 2 6 / 8 8
print(op.describe_with_inputs([m, n]))
```

## Reading files

`LineReader` in `matcalc.reader` opens a text file and hands out its lines
one at a time, without line terminators. It raises `FileError` when the
file cannot be opened. `readline()` returns `None` at end of file.

```python
from matcalc.reader import LineReader

with LineReader("commands.txt") as lines:
    for line in lines:
        print(line)
```

## Errors

`matcalc.errors` defines `FileError`, raised for matrix values or sizes
outside the allowed limits and for files that cannot be opened, and
`InputError`, raised for matrix text that is malformed.

## What this package does not do

There is no command-line program or interactive calculator here: nothing
parses commands, keeps a list of operations, or prompts for input. The
package provides the matrices, the operations and the line reader for such
a program to be built on.