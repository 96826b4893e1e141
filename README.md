# polynum

A small family of number types that share one interface and can be mixed
freely in arithmetic and comparisons.

All of them derive from the abstract class `Numeric` in `polynum.numeric`.
Every `Numeric` has the following:

- the conversions `to_int()`, `to_double()` and `to_float()`
- the operators `+`, `-`, `*`, `/`, `<`, `>` and `==`
- a printable form through `str()`

The type of the left-hand operand decides two things:

- how the right-hand operand is converted
- the type of the result

An arithmetic operator or comparison with anything that is not a `Numeric`
returns `NotImplemented`. Instances are not hashable.

| Class     | Holds                         | Arithmetic uses the other's | Comparison                              |
|-----------|-------------------------------|-----------------------------|-----------------------------------------|
| `Int`     | `value`, a whole number       | `to_int()`                  | `value` against the other's `to_double()` |
| `Double`  | `value`, a double             | `to_double()`               | both sides rounded to single precision  |
| `Float`   | `value`, rounded to single precision | `to_float()`         | `value` against the other's `to_float()` |
| `Complex` | integer `real` and `imj`      | `to_int()`, with `real`     | `real` against the other's `to_double()` |

Details of the types:

- **`Complex` uses only its real part.** Its conversions, arithmetic and
  comparisons all use the real part. The result of its arithmetic has an
  imaginary part of zero.
- **Division of `Int` and `Complex`.** Division truncates toward zero, and
  dividing by zero raises `ZeroDivisionError`.
- **Division of `Double` and `Float`.** Division by zero gives `inf`,
  `-inf` or `nan` rather than raising.
- **Printed forms.** `Double` and `Float` print with six significant digits.

Each class has a `from_numeric(other)` constructor that converts any other
`Numeric` to that class:

| Class     | Converts through                          |
|-----------|-------------------------------------------|
| `Int`     | `to_int()`                                |
| `Double`  | `to_double()`                             |
| `Float`   | `to_float()`                              |
| `Complex` | `to_int()`, with an imaginary part of zero |

## Installation

```
pip install .
```

## Usage

```python
from polynum.numeric import Int, Double, Float, Complex

a = Double(2.71)
b = Complex(3, -2)

total = a + b                     # Double: 2.71 + 3.0
print(Int.from_numeric(total))    # Value of int:5

print(Complex(3, 2))              # Value of Complex:3+2j
print(Complex(3, -2))             # Value of Complex:3-2j
print(Int(10) > Complex(3, -2))   # True
print(Int(7) / Int(-2))           # Value of int:-3
```

## Demonstration

The `polynum.demo` module provides the following:

- `sample_numbers()` returns a fixed mixed list of `Int`, `Double`, `Float`
  and `Complex` values.
- `sort_numbers(numbers)` returns a new list ordered by an exchange sort
  that uses `>`. Mixed comparisons need not be consistent, so the result
  follows that exact procedure.
- `run(out)` writes the whole walkthrough to a text stream. It shows a few
  comparisons between the sample numbers, the initial list, a mixed-type
  sum converted to `Int`, and the sorted list.

The walkthrough is also available as a command:

```
polynum-demo
```

It writes the walkthrough to standard output.

## Tests

```
pip install .[test]
pytest
```