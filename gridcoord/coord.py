"""The coordinate value type.

Core Objects: Coord

A ``Coord`` is a frozen 2D point with numeric ``x`` and ``y`` components. The
layout is Cartesian: increasing ``y`` is up and increasing ``x`` is right, so
``up`` is ``(x, y + 1)`` rather than the row-major ``(x, y - 1)``.

Methods fall into two groups that ask different things of the component type:

- offsets and neighbor enumeration need a unit step: integral numbers
  (``int``, numpy integer scalars) or any non-numeric type with ``+``, ``-``
  and a constructor taking ``1``. Real numbers that are not integral are refused;
- distance metrics need subtraction, multiplication and a float conversion.
"""

# Postpone annotation evaluation to avoid NameError from forward references (PEP 563). Remove once Python 3.14+ is required.
from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from numbers import Integral, Number

import numpy as np

from gridcoord.exceptions import CapabilityError, ConversionError
from gridcoord.gridcoord_logging import create_module_logger, method_logger
from gridcoord.protocols import CoordLike, SupportsDistance, SupportsOffset

__all__ = ["Coord"]

_logger = create_module_logger()


def _unit(value, operation: str):
    """Return a one of the same type as value."""
    # non-integral numbers have a one but no unit cell
    if isinstance(value, Number) and not isinstance(value, Integral):
        raise CapabilityError(operation, value)
    if not isinstance(value, SupportsOffset):
        raise CapabilityError(operation, value)
    return type(value)(1)


def _to_float(value) -> float:
    """Convert an intermediate result to float, refusing lossy overflow."""
    try:
        result = float(value)
    except (OverflowError, TypeError, ValueError) as e:
        _logger.debug(f"float conversion of {value!r} failed: {e}")
        raise ConversionError(value, str(e)) from e

    # Decimal and friends overflow to inf instead of raising
    if math.isinf(result) and value != result:
        _logger.debug(f"float conversion of {value!r} overflowed to {result}")
        raise ConversionError(value, "magnitude exceeds the float range")
    return result


@dataclass(frozen=True, slots=True)
class Coord[T]:
    """An integer or real 2D point.

    Attributes:
        x (T): the horizontal component, growing to the right
        y (T): the vertical component, growing upwards

    Notes:
        Coords are immutable; every operation returns a new Coord. Equality and
        hashing are structural over ``(x, y)``. ``Coord()`` is the origin.

    """

    x: T = 0
    y: T = 0

    @classmethod
    def new(cls, x: T, y: T) -> Coord[T]:
        """Create a Coord from two components."""
        return cls(x, y)

    @classmethod
    def from_tuple(cls, pair: Sequence[T] | np.ndarray) -> Coord[T]:
        """Create a Coord from a pair.

        Args:
            pair: a 2-tuple, list or 1-D numpy array of length 2

        Raises:
            ValueError: if pair does not hold exactly two items

        """
        x, y = pair
        return cls(x, y)

    def __iter__(self) -> Iterator[T]:
        yield self.x
        yield self.y

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        if copy is False:
            raise ValueError("a Coord cannot be viewed as an array without copying")
        return np.array((self.x, self.y), dtype=dtype)

    def _step[I: SupportsOffset](
        self: Coord[I], dx: int, dy: int, operation: str
    ) -> Coord[I]:
        one_x = _unit(self.x, operation)
        one_y = _unit(self.y, operation)

        x = self.x
        if dx > 0:
            x = x + one_x
        elif dx < 0:
            x = x - one_x

        y = self.y
        if dy > 0:
            y = y + one_y
        elif dy < 0:
            y = y - one_y

        return type(self)(x, y)

    def up[I: SupportsOffset](self: Coord[I]) -> Coord[I]:
        """Return the cell above, ``(x, y + 1)``."""
        return self._step(0, 1, "up")

    def down[I: SupportsOffset](self: Coord[I]) -> Coord[I]:
        """Return the cell below, ``(x, y - 1)``."""
        return self._step(0, -1, "down")

    def left[I: SupportsOffset](self: Coord[I]) -> Coord[I]:
        """Return the cell to the left, ``(x - 1, y)``."""
        return self._step(-1, 0, "left")

    def right[I: SupportsOffset](self: Coord[I]) -> Coord[I]:
        """Return the cell to the right, ``(x + 1, y)``."""
        return self._step(1, 0, "right")

    def up_right[I: SupportsOffset](self: Coord[I]) -> Coord[I]:
        """Return ``(x + 1, y + 1)``."""
        return self._step(1, 1, "up_right")

    def up_left[I: SupportsOffset](self: Coord[I]) -> Coord[I]:
        """Return ``(x - 1, y + 1)``."""
        return self._step(-1, 1, "up_left")

    def down_right[I: SupportsOffset](self: Coord[I]) -> Coord[I]:
        """Return ``(x + 1, y - 1)``."""
        return self._step(1, -1, "down_right")

    def down_left[I: SupportsOffset](self: Coord[I]) -> Coord[I]:
        """Return ``(x - 1, y - 1)``."""
        return self._step(-1, -1, "down_left")

    def neighbors[I: SupportsOffset](self: Coord[I]) -> tuple[Coord[I], ...]:
        """Return the 8 surrounding cells.

        The order is clockwise starting from up: up, up_right, right,
        down_right, down, down_left, left, up_left.

        Raises:
            CapabilityError: if the components cannot be stepped by one

        """
        return (
            self.up(),
            self.up_right(),
            self.right(),
            self.down_right(),
            self.down(),
            self.down_left(),
            self.left(),
            self.up_left(),
        )

    def cardinal_neighbors[I: SupportsOffset](
        self: Coord[I],
    ) -> tuple[Coord[I], ...]:
        """Return the 4 edge-sharing cells in the order up, right, down, left.

        Raises:
            CapabilityError: if the components cannot be stepped by one

        """
        return (self.up(), self.right(), self.down(), self.left())

    @method_logger(__name__)
    def distance_to[D: SupportsDistance](
        self: Coord[D], other: CoordLike[D]
    ) -> float:
        """Return the Euclidean distance to other.

        The squared differences are summed in the component type and the sum is
        converted to float once, before taking the square root.

        Args:
            other: the Coord (or pair) to measure to

        Raises:
            ConversionError: if the sum of squares has no float representation

        """
        other = _as_coord(other)
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(_to_float(dx * dx + dy * dy))

    @method_logger(__name__)
    def manhattan_distance[D: SupportsDistance](
        self: Coord[D], other: CoordLike[D]
    ) -> float:
        """Return the sum of the absolute axis-wise differences to other.

        Unlike :meth:`distance_to`, each difference is converted to float on its
        own before the absolute values are summed.

        Args:
            other: the Coord (or pair) to measure to

        Raises:
            ConversionError: if a difference has no float representation

        """
        other = _as_coord(other)
        return abs(_to_float(self.x - other.x)) + abs(_to_float(self.y - other.y))


def _as_coord(value: CoordLike) -> Coord:
    return value if isinstance(value, Coord) else Coord.from_tuple(value)
