"""Interactive NURBS curve editing model."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from curvedesign.geometry import MouseButton, Point, distance

POINT_SIZE = 14
HANDLE_SIZE = 10
SNAP_DISTANCE = 30
HANDLE_RADIUS = 60.0
MAX_VISUAL_HANDLE = 600.0
MIN_WEIGHT = 0.1
WEIGHT_STEP = 0.01
MIN_RESOLUTION = 10
MAX_RESOLUTION = 1000
RESOLUTION_STEP = 10
DEFAULT_RESOLUTION = 100
DEFAULT_DEGREE = 3
BORDER = 20.0
_FUZZY_ZERO = 1e-12


def _bound(low: float, value: float, high: float) -> float:
    return max(low, min(high, value))


@dataclass(eq=False)
class ControlPoint:
    """A weighted control point with two slope handles."""

    position: Point
    slope_handles: list[Point] = field(default_factory=list)
    slope_angle: float = 0.0
    weight: float = 1.0

    def init_handles(self) -> None:
        """Place both handles horizontally at the default radius and reset the weight."""
        self.slope_handles = [
            Point(self.position.x + HANDLE_RADIUS, self.position.y),
            Point(self.position.x - HANDLE_RADIUS, self.position.y),
        ]
        self.weight = 1.0

    def update_handles(self) -> None:
        """Recompute handle positions from the slope angle and weight."""
        length = min(self.weight * HANDLE_RADIUS, MAX_VISUAL_HANDLE)
        offset = Point(length * math.cos(self.slope_angle), length * math.sin(self.slope_angle))
        self.slope_handles = [self.position + offset, self.position - offset]

    def current_angle(self) -> float:
        """Angle of the first handle around the point, or 0 without handles."""
        if not self.slope_handles:
            return 0.0
        handle = self.slope_handles[0]
        return math.atan2(handle.y - self.position.y, handle.x - self.position.x)


def generate_knots(count: int, degree: int) -> list[float]:
    """Clamped uniform knot vector for count control points of the given degree."""
    if count < 0:
        raise ValueError("count must not be negative")
    if degree < 0:
        raise ValueError("degree must not be negative")
    n = count - 1
    m = n + degree + 1
    knots = [0.0] * (m + 1)
    for i in range(degree + 1):
        knots[i] = 0.0
    for i in range(m - degree, m + 1):
        knots[i] = 1.0
    for i in range(degree + 1, m - degree):
        knots[i] = (i - degree) / (n - degree + 1)
    return knots


def basis_function(p: int, i: int, knots: Sequence[float], t: float) -> float:
    """Cox-de Boor B-spline basis N(i, p) evaluated at t."""
    if p == 0:
        return 1.0 if knots[i] <= t < knots[i + 1] else 0.0

    term1 = 0.0
    denom1 = knots[i + p] - knots[i]
    if abs(denom1) > _FUZZY_ZERO:
        term1 = (t - knots[i]) / denom1 * basis_function(p - 1, i, knots, t)

    term2 = 0.0
    denom2 = knots[i + p + 1] - knots[i + 1]
    if abs(denom2) > _FUZZY_ZERO:
        term2 = (knots[i + p + 1] - t) / denom2 * basis_function(p - 1, i + 1, knots, t)

    return term1 + term2


def evaluate_nurbs(points: Sequence[ControlPoint], degree: int, t: float) -> Point:
    """Point of the rational curve at parameter t in [0, 1]."""
    if len(points) < 2:
        return Point()
    if t <= 0:
        return points[0].position
    if t >= 1:
        return points[-1].position

    knots = generate_knots(len(points), degree)
    x = y = denominator = 0.0
    for i, cp in enumerate(points):
        basis = basis_function(degree, i, knots, t) * cp.weight
        x += cp.position.x * basis
        y += cp.position.y * basis
        denominator += basis

    if denominator == 0.0:
        return Point()
    return Point(x / denominator, y / denominator)


class NurbsEditor:
    """State and interaction rules of the NURBS curve editor."""

    def __init__(self, width: float = 1280, height: float = 800) -> None:
        self.width = width
        self.height = height
        self.control_points: list[ControlPoint] = []
        self.selected: ControlPoint | None = None
        self.active_handle: int | None = None
        self.dragging_point = False
        self.show_control_points = True
        self.degree = DEFAULT_DEGREE
        self.sample_resolution = DEFAULT_RESOLUTION

    def _try_select_handle(self, pos: Point) -> bool:
        if self.selected is None:
            return False
        for index, handle in enumerate(self.selected.slope_handles):
            if distance(pos, handle) < HANDLE_SIZE:
                self.active_handle = index
                return True
        return False

    def press(self, pos: Point, button: MouseButton) -> None:
        """Right button deletes nearby points; left selects a handle or a point."""
        if button is MouseButton.RIGHT:
            self.delete_control_point(pos)
        elif button is MouseButton.LEFT:
            point_hit = False
            if not self._try_select_handle(pos):
                for cp in self.control_points:
                    if distance(pos, cp.position) < SNAP_DISTANCE:
                        self.selected = cp
                        self.dragging_point = True
                        point_hit = True
                        break
            if not point_hit and self.active_handle is None:
                self.selected = None

    def move(self, pos: Point) -> None:
        """Drag the active handle (angle and weight) or the selected point."""
        if self.selected is None:
            return
        if self.active_handle is not None:
            center = self.selected.position
            dx = pos.x - center.x
            dy = pos.y - center.y
            self.selected.slope_angle = math.atan2(dy, dx)
            self.selected.weight = max(MIN_WEIGHT, math.hypot(dx, dy) / HANDLE_RADIUS)
            self.selected.update_handles()
        elif self.dragging_point:
            self.selected.position = Point(
                _bound(BORDER, pos.x, self.width - BORDER),
                _bound(BORDER, pos.y, self.height - BORDER),
            )
            self.selected.update_handles()

    def release(self) -> None:
        """End any drag in progress."""
        self.active_handle = None
        if self.dragging_point and self.selected is not None:
            self.selected.update_handles()
        self.dragging_point = False

    def double_click(self, pos: Point, button: MouseButton) -> None:
        """Add a control point with the left button."""
        if button is MouseButton.LEFT:
            self.create_control_point(pos)

    def key_press(self, key: str) -> None:
        """Handle a shortcut key such as 'delete', 'c', 'up', 'down', 'v', '+', '-' or '1'-'5'."""
        key = key.lower()
        if self.selected is not None:
            if key == "delete":
                self.control_points.remove(self.selected)
                self.selected = None
            elif key == "c":
                self.control_points.clear()
                self.selected = None
            elif key == "up":
                self.selected.weight += WEIGHT_STEP
                self.selected.update_handles()
            elif key == "down":
                self.selected.weight = max(self.selected.weight - WEIGHT_STEP, MIN_WEIGHT)
                self.selected.update_handles()
            elif key == "v":
                self.show_control_points = not self.show_control_points

        if key in ("+", "="):
            self.sample_resolution = min(self.sample_resolution + RESOLUTION_STEP, MAX_RESOLUTION)
        elif key == "-":
            self.sample_resolution = max(self.sample_resolution - RESOLUTION_STEP, MIN_RESOLUTION)
        elif key in ("1", "2", "3", "4", "5"):
            self.degree = int(key)

    def delete_control_point(self, pos: Point) -> int:
        """Remove every control point near pos; return how many were removed."""
        kept = []
        removed = 0
        for cp in self.control_points:
            if distance(pos, cp.position) < SNAP_DISTANCE:
                if cp is self.selected:
                    self.selected = None
                removed += 1
            else:
                kept.append(cp)
        self.control_points = kept
        return removed

    def create_control_point(self, pos: Point) -> ControlPoint:
        """Append and select a new control point with default handles."""
        cp = ControlPoint(pos)
        self.control_points.append(cp)
        self.selected = cp
        cp.init_handles()
        return cp

    def select_or_create_control_point(self, pos: Point) -> ControlPoint:
        """Select the point near pos, or create one there."""
        for cp in self.control_points:
            if distance(pos, cp.position) < SNAP_DISTANCE:
                self.selected = cp
                if not cp.slope_handles:
                    cp.init_handles()
                return cp
        return self.create_control_point(pos)

    def opposite_handle(self) -> Point:
        """The handle of the selected point opposite the active one."""
        if self.selected is None or len(self.selected.slope_handles) < 2:
            raise LookupError("no selected point with handles")
        if self.active_handle == 0:
            return self.selected.slope_handles[1]
        return self.selected.slope_handles[0]

    def knots(self) -> list[float]:
        """Knot vector for the current points and degree."""
        return generate_knots(len(self.control_points), self.degree)

    def evaluate(self, t: float) -> Point:
        """Curve point at parameter t."""
        return evaluate_nurbs(self.control_points, self.degree, t)

    def curve(self) -> list[Point]:
        """Sampled polyline of the curve; empty with fewer than two points."""
        if len(self.control_points) < 2:
            return []
        return [self.evaluate(step / self.sample_resolution)
                for step in range(self.sample_resolution + 1)]

    def help_lines(self) -> list[str]:
        """Text shown as on-screen help."""
        lines = [
            "Left click: add/move point",
            "Drag green handle: adjust weight",
            "Up/Down arrows: fine-tune weight",
            "Delete: delete selected point",
            "C: clear all points",
            f"Current degree (keys 1-5): {self.degree}",
            f"Curve samples (+ / -): {self.sample_resolution}",
            f"Show control points: {'yes' if self.show_control_points else 'no'} (press V to toggle)",
        ]
        if self.selected is not None:
            lines.append(f"Weight: {self.selected.weight:.2f}")
        return lines

    def knot_label(self) -> str:
        """Knot vector formatted for display."""
        return "Knots: " + "".join(f"{k:.2f}, " for k in self.knots())