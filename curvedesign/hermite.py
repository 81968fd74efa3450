"""Interactive cubic Hermite spline editing model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from curvedesign.geometry import MouseButton, Point, distance

POINT_RADIUS = 8
HANDLE_RADIUS = 6
SNAP_DISTANCE = 20
MIN_RESOLUTION = 10
MAX_RESOLUTION = 1000
RESOLUTION_STEP = 10
DEFAULT_RESOLUTION = 100


@dataclass(eq=False)
class InterpPoint:
    """An interpolation point with its tangent vector."""

    position: Point
    tangent: Point = field(default_factory=lambda: Point(50, 0))
    has_tangent: bool = False


def hermite_basis(t: float) -> tuple[float, float, float, float]:
    """The four cubic Hermite basis values (h00, h10, h01, h11) at t."""
    t2 = t * t
    t3 = t2 * t
    h00 = 2 * t3 - 3 * t2 + 1
    h10 = t3 - 2 * t2 + t
    h01 = -2 * t3 + 3 * t2
    h11 = t3 - t2
    return h00, h10, h01, h11


def auto_tangents(positions: Sequence[Point]) -> list[Point]:
    """Estimate tangents by finite differences; needs at least two points."""
    if len(positions) < 2:
        raise ValueError("at least two points are needed to estimate tangents")
    last = len(positions) - 1
    tangents = []
    for i, _ in enumerate(positions):
        after = positions[min(i + 1, last)]
        before = positions[max(i - 1, 0)]
        tangents.append(0.5 * (after - before))
    return tangents


def sample_hermite(points: Sequence[InterpPoint], resolution: int) -> list[list[Point]]:
    """Sample each segment of the spline; one polyline of resolution+1 points per segment."""
    if resolution < 1:
        raise ValueError("resolution must be positive")
    if len(points) < 2:
        return []
    estimated = auto_tangents([p.position for p in points])
    tangents = [
        p.tangent if p.has_tangent else auto
        for p, auto in zip(points, estimated)
    ]
    segments = []
    for (p0, t0), (p1, t1) in zip(zip(points, tangents), zip(points[1:], tangents[1:])):
        polyline = []
        for j in range(resolution + 1):
            h00, h10, h01, h11 = hermite_basis(j / resolution)
            polyline.append(
                h00 * p0.position + h10 * t0 + h01 * p1.position + h11 * t1
            )
        segments.append(polyline)
    return segments


class HermiteEditor:
    """State and interaction rules of the Hermite spline editor."""

    def __init__(self) -> None:
        self.points: list[InterpPoint] = []
        self.selected: InterpPoint | None = None
        self.tangent_active = False
        self.dragging_point = False
        self.show_points = True
        self.sample_resolution = DEFAULT_RESOLUTION

    def press(self, pos: Point, button: MouseButton) -> None:
        """Select a tangent handle or a point; right button deletes."""
        self.selected = None
        if button is MouseButton.RIGHT:
            self.delete_point_at(pos)
            return

        for pt in self.points:
            forward = pt.position + pt.tangent
            backward = pt.position - pt.tangent
            if distance(pos, forward) < SNAP_DISTANCE:
                self.selected = pt
                self.tangent_active = True
                return
            if distance(pos, backward) < SNAP_DISTANCE:
                self.selected = pt
                self.tangent_active = True
                pt.tangent = pt.position - pos
                return

        for pt in self.points:
            if distance(pos, pt.position) < SNAP_DISTANCE:
                self.selected = pt
                self.dragging_point = True
                return

    def move(self, pos: Point) -> None:
        """Drag the active tangent handle or the selected point."""
        if self.selected is None:
            return
        if self.tangent_active:
            self.selected.tangent = pos - self.selected.position
            self.selected.has_tangent = True
        elif self.dragging_point:
            self.selected.position = pos

    def release(self) -> None:
        """End any drag in progress."""
        self.tangent_active = False
        self.dragging_point = False

    def double_click(self, pos: Point, button: MouseButton) -> None:
        """Append a new point with the left button."""
        if button is not MouseButton.LEFT:
            return
        new_point = InterpPoint(pos)
        if self.points:
            direction = new_point.position - self.points[-1].position
            if not direction.is_null():
                new_point.tangent = 0.5 * direction
        self.points.append(new_point)
        self.selected = new_point

    def key_press(self, key: str) -> None:
        """Handle a shortcut: C clears, +/= and - change resolution, V toggles points."""
        key = key.lower()
        if key == "c":
            self.points.clear()
            self.selected = None
        elif key in ("+", "="):
            self.sample_resolution = min(
                self.sample_resolution + RESOLUTION_STEP, MAX_RESOLUTION
            )
        elif key == "-":
            self.sample_resolution = max(
                self.sample_resolution - RESOLUTION_STEP, MIN_RESOLUTION
            )
        elif key == "v":
            self.show_points = not self.show_points

    def delete_point_at(self, pos: Point) -> bool:
        """Remove the first point near pos; return whether one was removed."""
        for pt in self.points:
            if distance(pos, pt.position) < SNAP_DISTANCE:
                self.points.remove(pt)
                self.selected = None
                return True
        return False

    def curve(self) -> list[list[Point]]:
        """Sampled polylines of the current spline."""
        return sample_hermite(self.points, self.sample_resolution)

    def help_lines(self) -> list[str]:
        """Text shown as on-screen help."""
        return [
            "Double-click to add a point, right-click to delete",
            "Drag a blue point to move it",
            "Drag a green handle to adjust the tangent",
            "C clears, +/- change curve resolution",
            "V shows/hides the points",
            f"Current resolution: {self.sample_resolution}",
        ]