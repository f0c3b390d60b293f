# arithkit

Small integer helpers that raise exceptions when something goes wrong.

- `arithkit.arith` has basic arithmetic, multiplication with overflow checks, and multipliers read from a config file.
- `arithkit.split` splits a string on a literal separator.

## Installation

```
pip install arithkit
```

To install the test dependencies as well:

```
pip install "arithkit[test]"
```

## Arithmetic

```python
from arithkit.arith import add, subtract, multiply, divide, is_positive

add(2, 3)          # 5
subtract(5, 3)     # 2
multiply(4, 5)     # 20
divide(8, 2)       # 4
divide(-7, 2)      # -3 (rounds toward zero)
is_positive(-5)    # False
divide(10, 0)      # raises ZeroDivisionError("division by zero")
```

### Checked multiplication

`safe_multiply(a, b)` returns `a * b`. It raises `OverflowError("multiplication overflow")` if the product falls outside the signed 64-bit range.

`safe_multiply2(a, b)` returns `a * b`. It raises `OverflowError` if the product would fall outside the signed 32-bit range. When `b` is zero it returns `0`.

```python
from arithkit.arith import safe_multiply, safe_multiply2

safe_multiply(2147483647, 2)    # 4294967294
safe_multiply2(2147483647, 2)   # raises OverflowError
```

## Config-driven multipliers

A config file holds a single integer, the multiplier. Surrounding whitespace is ignored. The value must be a plain decimal integer with an optional sign, and it must fit in the signed 64-bit range.

```python
from arithkit.arith import (
    multiply_with_config,
    multiply_slice,
    multiply_map,
    ConfigError,
    InvalidInputError,
)

# config.txt contains "3"
multiply_with_config(5, "config.txt")            # 15
multiply_slice([1, 2, 3], "config.txt")          # [3, 6, 9]
multiply_map({"a": 1, "b": 2}, "config.txt")     # {"a": 3, "b": 6}
```

`multiply_slice` and `multiply_map` check every product against the signed 32-bit range.

Errors:

- `ConfigError` is raised when the file cannot be read or does not hold a valid integer. Its `path` attribute names the file. Its `reason` attribute begins with `read config:` or `parse multiplier:`.
- `InvalidInputError` is a subclass of `ValueError`. It is raised for an empty sequence or an empty mapping; in that case the message is `invalid input: 0`. It is also raised when a product would leave the 32-bit range, with a message such as `overflow at index 1: invalid input: 2000000000` or `overflow for key a: ...`. Its `value` attribute holds the rejected value and its `context` attribute holds the location.

## Splitting

```python
from arithkit.split import split

split("a/b/c", "/")    # ["a", "b", "c"]
split("a/b/c", ",")    # ["a/b/c"]
split("a/b/c/", "/")   # ["a", "b", "c", ""]
split("abc", "")       # raises ValueError("empty separator")
```

## Running the tests

```
pytest
```