"""Ring extraction: split a flat point stream into closed loops.

A single gesture can trace several loops (a figure-eight drag, or a
persisted multi-polygon shape stored as one flat list). Each loop ends
where the stream revisits the loop's first point. Whatever is left open
at the end of the stream is closed synthetically.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from mapdraw_shape.models.geometry import LatLng

MIN_PATH_POINTS = 3
MIN_RING_POINTS = 4  # including the closing duplicate


@dataclass
class Loop:
    """One loop found in the stream, before the degenerate-loop filter."""

    points: list[LatLng]
    closed: bool  # False when the end of input forced closure

    @property
    def is_ring(self) -> bool:
        return len(self.points) >= MIN_RING_POINTS


def iter_loops(points: Sequence[LatLng]) -> Iterator[Loop]:
    """Yield every loop in the stream, in input order.

    Degenerate loops are yielded too; callers decide whether to keep them.
    """
    if len(points) < MIN_PATH_POINTS:
        return

    first: LatLng | None = None
    loop: list[LatLng] = []
    last = len(points) - 1

    for i, point in enumerate(points):
        if first is None:
            first = point
            loop = [point]
            continue

        loop.append(point)

        if point == first:
            yield Loop(points=loop, closed=True)
            first = None
        elif i == last:
            loop.append(loop[0])
            yield Loop(points=loop, closed=False)


def extract_rings(points: Sequence[LatLng]) -> list[list[LatLng]]:
    """Partition ``points`` into closed rings of at least 4 points.

    Single linear pass. Loops shorter than ``MIN_RING_POINTS`` (closing
    point included) are dropped without affecting their siblings.
    """
    return [loop.points for loop in iter_loops(points) if loop.is_ring]
