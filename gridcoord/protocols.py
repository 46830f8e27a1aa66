"""Numeric capability protocols for coordinate components.

This module provides:
- ``SupportsOffset``: the arithmetic needed to step to a neighboring cell
- ``SupportsDistance``: ``SupportsOffset`` plus what the distance metrics need
- ``CoordLike``: anything accepted where a coordinate is expected

The two tiers mirror how the methods of :class:`gridcoord.Coord` are split.
Offsets and neighbor enumeration only add and subtract a unit step, so a
component type without a float conversion can still use them. The distance
metrics additionally multiply and convert to ``float``.

Examples:
    Restricting a helper to coordinates a checker knows can be measured::

        from gridcoord import Coord
        from gridcoord.protocols import SupportsDistance

        def furthest[T: SupportsDistance](
            origin: Coord[T], points: list[Coord[T]]
        ) -> Coord[T]:
            return max(points, key=origin.distance_to)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from gridcoord.coord import Coord


@runtime_checkable
class SupportsOffset(Protocol):
    """Protocol for component types that can be stepped by a unit."""

    def __add__(self, other: Self, /) -> Self: ...

    def __sub__(self, other: Self, /) -> Self: ...


@runtime_checkable
class SupportsDistance(SupportsOffset, Protocol):
    """Protocol for component types usable with the distance metrics."""

    def __mul__(self, other: Self, /) -> Self: ...

    def __float__(self) -> float: ...


type CoordLike[T] = Coord[T] | tuple[T, T]
