"""Shape diagnostics: explain what the engine will do with a raw path.

The engine itself never reports why a shape came out empty or partial.
These checks replay the same steps and describe each loop that gets
dropped, force-closed, or repaired, so a host can tell the user why
"shape could not be created".

Stored shapes are split into loops the way ``process_shape`` does it.
Drawn paths (``drawn=True``) are closed on themselves as a single ring,
the way ``process_polygon`` does it.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from shapely.geometry import Polygon
from shapely.validation import explain_validity

from mapdraw_shape.engine import drawn_polygon
from mapdraw_shape.geometry.convert import ring_to_polygon
from mapdraw_shape.geometry.rings import MIN_PATH_POINTS, MIN_RING_POINTS, iter_loops
from mapdraw_shape.models.geometry import LatLng
from mapdraw_shape.validators.topology import repair_polygons


@dataclass
class ShapeIssue:
    """A single diagnostic about a traced shape."""

    severity: str  # "error" | "warning"
    element_type: str  # "Path" | "Loop"
    element_id: str
    message: str


def diagnose_shape(
    points: Sequence[LatLng],
    drawn: bool = False,
    zoom: int | None = None,
) -> list[ShapeIssue]:
    """Run all shape checks. Returns list of issues (empty when clean).

    Args:
        points: Stored shape, or a freshly drawn path when ``drawn``.
        drawn: Check the path as one ring closed on itself.
        zoom: Zoom at draw completion; only used for drawn paths.
    """
    if len(points) < MIN_PATH_POINTS:
        return [
            ShapeIssue(
                severity="error",
                element_type="Path",
                element_id="path",
                message=(
                    f"Path has {len(points)} point(s), at least "
                    f"{MIN_PATH_POINTS} are needed to enclose an area."
                ),
            )
        ]

    if drawn:
        return _diagnose_drawn(points, zoom)

    issues: list[ShapeIssue] = []
    usable = 0

    for index, loop in enumerate(iter_loops(points)):
        loop_id = f"loop-{index}"

        if not loop.is_ring:
            issues.append(
                ShapeIssue(
                    severity="warning",
                    element_type="Loop",
                    element_id=loop_id,
                    message=(
                        f"Loop {index} has {len(loop.points)} point(s) including "
                        f"closure (minimum {MIN_RING_POINTS}) and was dropped."
                    ),
                )
            )
            continue

        if not loop.closed:
            issues.append(
                ShapeIssue(
                    severity="warning",
                    element_type="Loop",
                    element_id=loop_id,
                    message=f"Loop {index} never returns to its start point and was closed automatically.",
                )
            )

        issue = _ring_issue(ring_to_polygon(loop.points), "Loop", loop_id, f"Loop {index}")
        if issue is None or issue.severity == "warning":
            usable += 1
        if issue is not None:
            issues.append(issue)

    if usable == 0:
        issues.append(_no_polygon())

    return issues


def _diagnose_drawn(points: Sequence[LatLng], zoom: int | None) -> list[ShapeIssue]:
    polygon = drawn_polygon(points, zoom)
    if polygon is None or polygon.is_empty:
        return [_no_polygon()]

    issue = _ring_issue(polygon, "Path", "path", "Drawn path")
    if issue is None:
        return []
    if issue.severity == "error":
        return [issue, _no_polygon()]
    return [issue]


def _ring_issue(
    polygon: Polygon, element_type: str, element_id: str, label: str
) -> ShapeIssue | None:
    """Validity issue for one ring: None if simple, warning if repairable."""
    if polygon.is_valid:
        return None

    if repair_polygons([polygon]) is None:
        return ShapeIssue(
            severity="error",
            element_type=element_type,
            element_id=element_id,
            message=(
                f"{label} is not a simple polygon "
                f"({explain_validity(polygon)}) and encloses no area. It was dropped."
            ),
        )
    return ShapeIssue(
        severity="warning",
        element_type=element_type,
        element_id=element_id,
        message=(
            f"{label} is not a simple polygon "
            f"({explain_validity(polygon)}) and will be repaired."
        ),
    )


def _no_polygon() -> ShapeIssue:
    return ShapeIssue(
        severity="error",
        element_type="Path",
        element_id="path",
        message="No usable polygon can be derived from this path.",
    )
