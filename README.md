# dslabs

Four small data-structure programs. Each one can be used as a library and
as an interactive console shell. The shells talk to the user in Russian.
The package needs only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command            | What it does |
|--------------------|--------------|
| `dslabs-realmul`   | Reads a real number (up to 40 mantissa digits, exponent up to ±99999) and an integer (up to 30 digits) from standard input, and prints their product normalised as `±0.ddd…E±n` and rounded half up to 30 digits. The exit status is 0 on success, or the error's code (1–5) otherwise. |
| `dslabs-phonebook` | Loads, saves, prints, sorts, extends and shrinks a table of subscribers (friends with birthdays, colleagues with job and organisation). Works with a key table of last names, lists friends whose birthday is at most a week away and compares bubble sort with the built-in sort on the table and on the key table. |
| `dslabs-matrix`    | Reads two matrices from a file, as typed rows, as (row, column, value) triples, or fills them at random with a chosen number of non-zero elements. Prints them densely or in column-compressed sparse form, adds them either way and compares the timings of both additions. |
| `dslabs-stack`     | Drives one stack kept in a list or in linked nodes: push, pop, print, and list what was popped from the linked stack. Evaluates expressions such as `1+2*3-4/2` and compares the two stack kinds in time and memory. |

Every shell prints a numbered menu; type the number of an item to run it.
The shells can also be started with `python -m`, for example
`python -m dslabs.matrix_cli`.

Some notes on the shells:

- The phone book comparison reads its data from `big_table.txt` in the
  current directory; the table must hold at least 1000 records.
- The comparisons repeat every measurement many times and can take a long
  while, the matrix one especially on 1000 × 1000 matrices.
- The "freed memory" list of the stack shell shows Python object
  identities of popped tokens, not addresses of real memory blocks; the
  byte sizes in the stack comparison are those of a fixed-width layout,
  not of the Python objects.

## Library use

### Long real times integer (`dslabs.realmul`)

```python
from dslabs.realmul import parse_real, parse_integer, multiply

product = multiply(parse_real("1.5E3"), parse_integer("-12"))
print(product)          # -0.18E+5
```

`parse_real` accepts `[+-]?[0-9]*\.?[0-9]*(E[-+]?[0-9]+)?` and returns a
`RealNumber` (sign, mantissa digits, exponent); `parse_integer` accepts
`[+-]?[0-9]+` and returns a `LongInteger`. Bad input raises
`InvalidInputError`, `InputTooLongError` or `EmptyInputError`; a result
whose exponent leaves the allowed range raises `MachineInfinityError` or
`MachineZeroError`. All of them derive from `RealNumberError` and carry a
numeric `code`.

### Phone book (`dslabs.phonebook`, `dslabs.phonebook_format`, `dslabs.phonebook_analysis`)

```python
from dslabs.phonebook import read_table, make_key_table, sort_keys
from dslabs.phonebook_format import format_by_keys

with open("table.txt", encoding="utf-8") as stream:
    subscribers = read_table(stream)

keys = sort_keys(make_key_table(subscribers))
print(format_by_keys(subscribers, keys))
```

A table file holds one field per line, each ending with a newline: last
name, first name, phone number, address, status (`0` for a friend, `1` for
a colleague), and then either the birthday as day, month and year on three
lines or the job and organisation on two. `read_table` raises
`TableFormatError`, `EmptyTableError` or `TableTooLongError` (more than
1000 records); `write_table` writes the same layout.

Other helpers: `sort_subscribers`, `bubble_sort_subscribers`,
`bubble_sort_keys`, `find_by_lastname`, `next_birthday`, `days_between`
and `friends_with_near_birthday`. `phonebook_format` lays tables out for
the terminal (`format_table`, `format_header`, `format_subscriber`,
`format_key_table`), and `phonebook_analysis.measure` returns
`SortTimings` that `format_report` turns into text.

### Matrices (`dslabs.matrix`, `dslabs.matrix_io`, `dslabs.matrix_analysis`)

```python
from dslabs.matrix_io import parse_matrix_file

with open("matrices.txt", encoding="utf-8") as stream:
    left, right = parse_matrix_file(stream.read())

total = left.to_sparse() + right.to_sparse()
print(total.format())
print(total.to_dense().format())
```

A matrix file starts with the number of rows and columns (1 to 1000
each), followed by the elements of the first matrix and then of the
second; nothing may follow. Errors raise `MatrixInputError`.

`DenseMatrix` and `SparseMatrix` both support `+` between matrices of the
same size. The sparse form keeps `a` (values column by column), `ia` (row
of each value) and `ja` (start of each column in `a`, or `-1` for an empty
column). `random_fill` builds a matrix holding `1..n` at random places;
`parse_standard` and `parse_coordinates` build matrices from typed input.
`matrix_analysis.measure` yields `SumTiming` records that `format_row`
prints.

### Stacks and expressions (`dslabs.stacks`, `dslabs.expression`)

```python
from dslabs.expression import solve

print(solve("1+2*3-4/2"))   # 5.0
```

`ArrayStack` and `ListStack` hold `Token` values (a float or one of
`+ - * /`), raise `StackFullError` past 50001 tokens and `StackEmptyError`
when popped empty, and iterate from the top down. `evaluate` computes an
expression held in a stack, doing `*` and `/` before `+` and `-`, each
from left to right; division by zero gives an infinity or NaN.
`ExpressionError` is raised for text that is not an alternation of
numbers and operators.