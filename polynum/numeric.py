"""Polymorphic numeric wrappers with mixed-type arithmetic and comparison."""

from __future__ import annotations

import math
import operator
import struct
from abc import ABC, abstractmethod
from typing import Any, Callable

__all__ = ["Numeric", "Int", "Double", "Float", "Complex"]


def _to_f32(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _ieee_div(dividend: float, divisor: float) -> float:
    """Floating-point division that yields inf or nan instead of raising."""
    try:
        return dividend / divisor
    except ZeroDivisionError:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


def _int_div(dividend: int, divisor: int) -> int:
    """Integer division truncating toward zero."""
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient


def _format_real(value: float) -> str:
    """Format a floating value with six significant digits."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return format(value, ".6g")


def _arith(self: Numeric, other: Any, op: Callable) -> Any:
    """Combine the operand pair of ``self`` and wrap it in the left operand's class."""
    if not isinstance(other, Numeric):
        return NotImplemented
    lhs, rhs = self._operands(other)
    return type(self)(op(lhs, rhs))


def _compare(self: Numeric, other: Any, op: Callable) -> Any:
    """Compare the comparand pair of ``self`` with ``op``."""
    if not isinstance(other, Numeric):
        return NotImplemented
    lhs, rhs = self._comparands(other)
    return op(lhs, rhs)


class Numeric(ABC):
    """Abstract numeric value that can be combined with any other Numeric."""

    __slots__ = ()

    @abstractmethod
    def to_int(self) -> int:
        """Return the value as an integer."""

    @abstractmethod
    def to_double(self) -> float:
        """Return the value as a double-precision float."""

    @abstractmethod
    def to_float(self) -> float:
        """Return the value rounded to single precision."""

    @abstractmethod
    def _operands(self, other: Numeric) -> tuple:
        """Return the pair of values that arithmetic combines."""

    @abstractmethod
    def _comparands(self, other: Numeric) -> tuple:
        """Return the pair of values that comparisons compare."""

    @abstractmethod
    def __add__(self, other: Numeric) -> Numeric: ...

    @abstractmethod
    def __sub__(self, other: Numeric) -> Numeric: ...

    @abstractmethod
    def __mul__(self, other: Numeric) -> Numeric: ...

    @abstractmethod
    def __truediv__(self, other: Numeric) -> Numeric: ...

    @abstractmethod
    def __lt__(self, other: Numeric) -> bool: ...

    @abstractmethod
    def __gt__(self, other: Numeric) -> bool: ...

    @abstractmethod
    def __eq__(self, other: object) -> bool: ...

    @abstractmethod
    def __str__(self) -> str: ...

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class Int(Numeric):
    """Integer value; arithmetic uses the other operand's integer value."""

    __slots__ = ("value",)

    def __init__(self, value: int = 0) -> None:
        self.value = int(value)

    @classmethod
    def from_numeric(cls, other: Numeric) -> Int:
        """Build an Int from any Numeric via its integer value."""
        return cls(other.to_int())

    def to_int(self) -> int:
        return self.value

    def to_double(self) -> float:
        return float(self.value)

    def to_float(self) -> float:
        return _to_f32(float(self.value))

    def _operands(self, other: Numeric) -> tuple[int, int]:
        return self.value, other.to_int()

    def _comparands(self, other: Numeric) -> tuple[int, float]:
        return self.value, other.to_double()

    def __add__(self, other):
        return _arith(self, other, operator.add)

    def __sub__(self, other):
        return _arith(self, other, operator.sub)

    def __mul__(self, other):
        return _arith(self, other, operator.mul)

    def __truediv__(self, other):
        return _arith(self, other, _int_div)

    def __lt__(self, other):
        return _compare(self, other, operator.lt)

    def __gt__(self, other):
        return _compare(self, other, operator.gt)

    def __eq__(self, other):
        return _compare(self, other, operator.eq)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Value of int:{self.value}"


class Double(Numeric):
    """Double-precision value; compares at single precision."""

    __slots__ = ("value",)

    def __init__(self, value: float = 0.0) -> None:
        self.value = float(value)

    @classmethod
    def from_numeric(cls, other: Numeric) -> Double:
        """Build a Double from any Numeric via its double value."""
        return cls(other.to_double())

    def to_int(self) -> int:
        return int(self.value)

    def to_double(self) -> float:
        return self.value

    def to_float(self) -> float:
        return _to_f32(self.value)

    def _operands(self, other: Numeric) -> tuple[float, float]:
        return self.value, other.to_double()

    def _comparands(self, other: Numeric) -> tuple[float, float]:
        return self.to_float(), other.to_float()

    def __add__(self, other):
        return _arith(self, other, operator.add)

    def __sub__(self, other):
        return _arith(self, other, operator.sub)

    def __mul__(self, other):
        return _arith(self, other, operator.mul)

    def __truediv__(self, other):
        return _arith(self, other, _ieee_div)

    def __lt__(self, other):
        return _compare(self, other, operator.lt)

    def __gt__(self, other):
        return _compare(self, other, operator.gt)

    def __eq__(self, other):
        return _compare(self, other, operator.eq)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Value of double:{_format_real(self.value)}"


class Float(Numeric):
    """Single-precision value; every result is rounded to single precision."""

    __slots__ = ("_value",)

    def __init__(self, value: float = 0.0) -> None:
        self._value = _to_f32(float(value))

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, new_value: float) -> None:
        self._value = _to_f32(float(new_value))

    @classmethod
    def from_numeric(cls, other: Numeric) -> Float:
        """Build a Float from any Numeric via its single-precision value."""
        return cls(other.to_float())

    def to_int(self) -> int:
        return int(self._value)

    def to_double(self) -> float:
        return self._value

    def to_float(self) -> float:
        return self._value

    def _operands(self, other: Numeric) -> tuple[float, float]:
        return self._value, other.to_float()

    def _comparands(self, other: Numeric) -> tuple[float, float]:
        return self._value, other.to_float()

    def __add__(self, other):
        return _arith(self, other, operator.add)

    def __sub__(self, other):
        return _arith(self, other, operator.sub)

    def __mul__(self, other):
        return _arith(self, other, operator.mul)

    def __truediv__(self, other):
        return _arith(self, other, _ieee_div)

    def __lt__(self, other):
        return _compare(self, other, operator.lt)

    def __gt__(self, other):
        return _compare(self, other, operator.gt)

    def __eq__(self, other):
        return _compare(self, other, operator.eq)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Value of float:{_format_real(self._value)}"


class Complex(Numeric):
    """Integer complex number; conversions and arithmetic use the real part only."""

    __slots__ = ("real", "imj")

    def __init__(self, real: int = 0, imj: int = 0) -> None:
        self.real = int(real)
        self.imj = int(imj)

    @classmethod
    def from_numeric(cls, other: Numeric) -> Complex:
        """Build a Complex with zero imaginary part from any Numeric."""
        return cls(other.to_int())

    def to_int(self) -> int:
        return self.real

    def to_double(self) -> float:
        return float(self.real)

    def to_float(self) -> float:
        return _to_f32(float(self.real))

    def _operands(self, other: Numeric) -> tuple[int, int]:
        return self.real, other.to_int()

    def _comparands(self, other: Numeric) -> tuple[int, float]:
        return self.real, other.to_double()

    def __add__(self, other):
        return _arith(self, other, operator.add)

    def __sub__(self, other):
        return _arith(self, other, operator.sub)

    def __mul__(self, other):
        return _arith(self, other, operator.mul)

    def __truediv__(self, other):
        return _arith(self, other, _int_div)

    def __lt__(self, other):
        return _compare(self, other, operator.lt)

    def __gt__(self, other):
        return _compare(self, other, operator.gt)

    def __eq__(self, other):
        return _compare(self, other, operator.eq)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        sign = "+" if self.imj >= 0 else ""
        return f"Value of Complex:{self.real}{sign}{self.imj}j"