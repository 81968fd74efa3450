# curvedesign

Interactive editors for two kinds of planar curves:

- **Hermite splines**: cubic Hermite interpolation through the points you
  place. Each point uses an automatic tangent or one you drag yourself.
- **NURBS curves**: clamped rational B-splines with adjustable degree and
  per-point weights.

You can also use the curve mathematics on its own, without opening a window.

## Installation

```
pip install .
```

The editor window uses `tkinter`, which ships with most Python
installations. The package needs Python 3.10 or newer.

## Running the editor

```
curvedesign
```

A dialog asks which editor to open, the NURBS curve editor or the Hermite
spline editor. To skip the dialog, name the editor on the command line:

```
curvedesign nurbs
curvedesign hermite
```

The window opens at 1280 × 800.

### Hermite editor

| Action | Effect |
| --- | --- |
| Double-click (left) | Add a point after the last one |
| Drag a point | Move it |
| Drag a green handle | Set that point's tangent |
| Click an empty area | Deselect |
| Right-click a point | Delete it |
| `C` | Clear all points |
| `+` / `=`, `-` | Raise or lower the sampling resolution (10 to 1000, in steps of 10) |
| `V` | Show or hide the points |

A new point's tangent starts at half the vector from the previous point.
The first point's tangent starts at (50, 0).

If a point's tangent has not been dragged, the curve uses an automatic
tangent for it. The automatic tangent is half the difference between the
neighbouring points. At the two ends, the point itself stands in for the
missing neighbour.

### NURBS editor

| Action | Effect |
| --- | --- |
| Double-click (left) | Add a control point and select it |
| Click a point, then drag | Move it (kept 20 pixels inside the window) |
| Drag a green handle of the selected point | Set its slope angle and weight (handle length / 60, at least 0.1) |
| Click an empty area | Deselect |
| Right-click | Delete every control point within 30 pixels |
| `Up` / `Down` | Change the selected point's weight by 0.01 (never below 0.1) |
| `Delete` | Delete the selected point |
| `C` | Clear all points (only while a point is selected) |
| `V` | Show or hide the control polygon, points and handles (only while a point is selected) |
| `1` – `5` | Set the curve degree |
| `+` / `=`, `-` | Raise or lower the sampling resolution (10 to 1000, in steps of 10) |

The knot vector in use appears at the bottom of the window.

## Using the mathematics directly

These modules hold the pieces the editors are built from:

- `curvedesign.geometry`
  - `Point`: an immutable 2-D vector with `+`, `-`, scalar `*`, `length()` and `is_null()`.
  - `distance`.
  - `MouseButton`.
- `curvedesign.hermite`
  - `hermite_basis(t)`: returns the four basis values.
  - `auto_tangents(positions)`: raises `ValueError` for fewer than two points.
  - `sample_hermite(points, resolution)`: returns one polyline of `resolution + 1` points per segment.
  - `InterpPoint`: a point together with its tangent.
- `curvedesign.nurbs`
  - `generate_knots(count, degree)`.
  - `basis_function(p, i, knots, t)`: the Cox–de Boor basis.
  - `evaluate_nurbs(points, degree, t)`.
  - `ControlPoint`: a weighted point with its slope handles.

For example, this is the clamped knot vector for four control points of
degree 3:

```python
from curvedesign.nurbs import generate_knots

generate_knots(4, 3)   # [0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0]
```

### Driving the editors from scripts

The editors are `hermite.HermiteEditor` and `nurbs.NurbsEditor(width, height)`.
They take mouse and key events as plain method calls:

- `press(pos, button)`
- `move(pos)`
- `release()`
- `double_click(pos, button)`
- `key_press(key)`

Keys are names such as `"c"`, `"+"`, `"-"`, `"v"`, `"up"`, `"down"`,
`"delete"` or `"3"`.

`curve()` returns the sampled curve. `help_lines()` returns the on-screen
help text. `NurbsEditor` also has `knots()`, `evaluate(t)` and
`knot_label()`.

`curvedesign.app` holds the window:

- `create_editor(choice, width, height)`: builds an editor for `"nurbs"` or
  `"hermite"`, and raises `ValueError` for any other name.
- `EditorWindow`: the canvas that draws an editor.
- `main`: the command's entry point.

## What it does not do

Curves exist only while the window is open. There is no saving, loading or
exporting of points or curves.

## Tests

```
pip install .[test]
pytest
```