from typing import Any, Callable, NamedTuple, Sequence, TypeVar, Union
import collections.abc
import numbers
import operator

import numpy as np


T = TypeVar('T')
J = TypeVar('J')

CoordLike = Union['Coord', numbers.Real, Sequence[numbers.Real], np.ndarray]

# Precision of distance() and Coord.distance()
DISTANCE_DTYPE = np.float32


class ConversionError(ValueError):
    pass


def _is_scalar(val: Any) -> bool:
    return isinstance(val, numbers.Real) and not isinstance(val, (bool, np.bool_))


def as_coord(val: 'CoordLike') -> 'Coord':
    """
    Convert anything usable as the other operand of a Coord operation.

    Scalars are broadcast to both components, pairs are mapped positionally.
    Raises ConversionError for sequences that do not hold exactly two values.
    """
    if isinstance(val, Coord):
        return val
    if _is_scalar(val):
        return Coord(val, val)
    if isinstance(val, np.ndarray) or (isinstance(val, collections.abc.Sequence) and not isinstance(val, (str, bytes, bytearray))):
        return Coord.from_sequence(val)
    raise ConversionError(f'Cannot convert {type(val).__name__} to Coord')


def _is_integral(a: Any, b: Any) -> bool:
    return isinstance(a, numbers.Integral) and isinstance(b, numbers.Integral)


def _div(a, b):
    if not _is_integral(a, b):
        return a / b
    if b == 0:
        raise ZeroDivisionError('integer division by zero')
    # Truncate towards zero
    quotient = a // b
    if quotient < 0 and quotient * b != a:
        quotient += 1
    return quotient


def _mod(a, b):
    if not _is_integral(a, b):
        return a % b
    return a - b * _div(a, b)


def _unordered(op: str) -> Callable:
    def compare(self, other):
        raise TypeError(f"'{op}' not supported between instances of {type(self).__name__!r} and {type(other).__name__!r}")
    return compare


class Coord(NamedTuple):
    x: T
    y: T

    # Numpy scalars and arrays on the left hand side defer to the reflected operators
    __array_ufunc__ = None

    @classmethod
    def from_sequence(cls, seq: Union[Sequence, np.ndarray]) -> 'Coord[T]':
        if isinstance(seq, np.ndarray) and seq.ndim != 1:
            raise ConversionError(f'Expected a flat array, got {seq.ndim} dimensions')
        if len(seq) != 2:
            raise ConversionError(f'Expected 2 values, got {len(seq)}')
        if not (_is_scalar(seq[0]) and _is_scalar(seq[1])):
            raise ConversionError(f'Expected real numbers, got {type(seq[0]).__name__} and {type(seq[1]).__name__}')
        return cls(seq[0], seq[1])

    def astype(self, dtype: Callable[[T], J]) -> 'Coord[J]':
        return Coord(dtype(self.x), dtype(self.y))

    def _apply(self, other: 'CoordLike', op: Callable[[T, T], T], reflected: bool = False) -> 'Coord[T]':
        other = as_coord(other)
        if reflected:
            return Coord(op(other.x, self.x), op(other.y, self.y))
        return Coord(op(self.x, other.x), op(self.y, other.y))

    def __add__(self, other: 'CoordLike') -> 'Coord[T]':
        return self._apply(other, operator.add)

    def __radd__(self, other: 'CoordLike') -> 'Coord[T]':
        return self._apply(other, operator.add, reflected=True)

    def __sub__(self, other: 'CoordLike') -> 'Coord[T]':
        return self._apply(other, operator.sub)

    def __rsub__(self, other: 'CoordLike') -> 'Coord[T]':
        return self._apply(other, operator.sub, reflected=True)

    def __mul__(self, other: 'CoordLike') -> 'Coord[T]':
        return self._apply(other, operator.mul)

    def __rmul__(self, other: 'CoordLike') -> 'Coord[T]':
        return self._apply(other, operator.mul, reflected=True)

    def __truediv__(self, other: 'CoordLike') -> 'Coord[T]':
        return self._apply(other, _div)

    def __rtruediv__(self, other: 'CoordLike') -> 'Coord[T]':
        return self._apply(other, _div, reflected=True)

    def __mod__(self, other: 'CoordLike') -> 'Coord[T]':
        return self._apply(other, _mod)

    def __rmod__(self, other: 'CoordLike') -> 'Coord[T]':
        return self._apply(other, _mod, reflected=True)

    __lt__ = _unordered('<')
    __le__ = _unordered('<=')
    __gt__ = _unordered('>')
    __ge__ = _unordered('>=')

    def distancef(self, other: 'CoordLike') -> T:
        return distancef(self, other)

    def distance(self, other: 'CoordLike') -> np.float32:
        return distance(self, other)


def _require_float(coord: Coord) -> None:
    for value in coord:
        if not isinstance(value, (float, np.floating)):
            raise TypeError(f'distancef() needs floating point components, got {type(value).__name__}')


def distancef(start: 'CoordLike', end: 'CoordLike') -> T:
    """
    Euclidean distance between two points, in the precision of their components.
    """
    start = as_coord(start)
    end = as_coord(end)
    _require_float(start)
    _require_float(end)

    delta = end - start
    return np.sqrt(delta.x * delta.x + delta.y * delta.y)


def distance(start: 'CoordLike', end: 'CoordLike') -> np.float32:
    return distancef(as_coord(start).astype(DISTANCE_DTYPE), as_coord(end).astype(DISTANCE_DTYPE))
