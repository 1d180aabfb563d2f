# dsexercises

This package holds three small data-structure exercises. Each one works as a library and as a command. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Complex-number vectors and sorting

`dsexercises.complexvec` provides `Complex`, a frozen value type with fields `re` and `im`.

- Values compare in lexicographic order: the real part first, then the imaginary part.
- `norm()` returns the modulus.
- `str()` renders a value as `(re,im)`.

The module also has helpers for lists of these values:

- `shuffle_vec(items, rng=None)` shuffles a list in place. It uses the given `random.Random`, or the module-level generator if none is given.
- `erase_first(items, key)` removes the first item equal to `key`. It returns whether it found one.
- `uniquify(items)` sorts the list and removes duplicates, in place.
- `bubble_sort(items)` and `merge_sort(items)` sort in place by modulus. Values with equal moduli are ordered by real part. `norm_key(value)` returns that ordering as a sort key.
- `range_find(items, low, high)` returns a new list of the values whose modulus lies in `[low, high)`, sorted by modulus.
- `timed_sort(data, sort, name)` sorts a copy of `data` with `sort`. It prints the CPU time in milliseconds and returns it.
- `format_vec(items, info="")` returns a string of the form `info size=N: (a,b) (c,d) ...`.

```python
from dsexercises.complexvec import Complex, range_find

values = [Complex(3, 4), Complex(1, 1), Complex(6, 8)]
range_find(values, 5.0, 10.0)   # [Complex(re=3, im=4)]; the modulus 10 is outside [5, 10)
```

The demonstration command works on random values:

1. It builds `--size` random values (default 10000, at least 20) and appends copies of the first 20.
2. It shuffles the values, searches for one of them, inserts a value and erases it again, then de-duplicates the list.
3. It times both sorts on ordered, shuffled and reversed input.
4. It lists the values whose modulus lies in `[5, 10)`.

`--seed` makes a run repeatable.

```
dsexercises-complex --size 2000 --seed 1
```

## Expression evaluator

`dsexercises.expression.evaluate(expr)` evaluates infix arithmetic. It uses two bounded stacks (`Stack`, capacity 200 by default) and an operator-precedence table. It supports:

- non-negative decimal numbers, the binary operators `+ - * /`, and parentheses;
- the functions `sin`, `cos`, `tan`, `log` (base 10), `ln` and `sqrt`, each followed by a parenthesised argument;
- whitespace, including the ideographic space U+3000, which is ignored;
- the angle brackets U+3008 and U+3009, which are read as `(` and `)`.

`^` and `!` are in the precedence table, but applying them raises an error. There is no unary minus.

Malformed input raises `EvaluationError`. Examples are `1 + + 2`, a divisor smaller than 1e-12 in magnitude, an unknown function, unbalanced parentheses and stack overflow.

A function argument outside the function's domain does not raise an error:

- `log(0)` and `ln(0)` give `-inf`;
- other domain errors, such as `sqrt` of a negative number, give `nan`.

The helpers `preprocess(text)`, `calc(a, op, b)` and `call_function(name, arg)` are public as well.

```python
from dsexercises.expression import evaluate

evaluate("1 + 2 * (3 + 4) / 5 - 6")   # about -2.2
evaluate("sqrt(16) * 2 + 1")          # 9.0
```

The command first evaluates a fixed set of sample expressions. It then reads expressions from standard input, one per line, until it reaches an empty line or end of input:

```
dsexercises-calc
```

## Largest rectangle in a histogram

`dsexercises.histogram` has three functions:

- `largest_rectangle_area(heights)` returns the largest rectangle area under a histogram. It uses a monotonic stack.
- `parse_heights(line)` reads non-negative integers from input such as `[2,1,5,6,2,3]`. Numbers are separated by commas or spaces. Reading stops at `]`, and other characters, including minus signs, are ignored.
- `random_heights(rng=None)` returns between 1 and 105 random heights, each in `[0, 104]`.

```python
from dsexercises.histogram import largest_rectangle_area, parse_heights

largest_rectangle_area(parse_heights("[2,1,5,6,2,3]"))   # 10
```

The command first runs ten random cases; `--seed` makes them repeatable. It then reads one height array from standard input and prints its largest area:

```
dsexercises-histogram --seed 7
```