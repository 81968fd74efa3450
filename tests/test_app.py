from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from curvedesign.app import EDITORS, EditorWindow, create_editor, main
from curvedesign.hermite import DEFAULT_RESOLUTION, RESOLUTION_STEP, HermiteEditor
from curvedesign.nurbs import NurbsEditor


def _event(x=0, y=0, num=1, keysym="", char="", width=0, height=0):
    return SimpleNamespace(x=x, y=y, num=num, keysym=keysym, char=char, width=width, height=height)


def _bindings(canvas):
    return {c.args[0]: c.args[1] for c in canvas.bind.call_args_list}


def _texts(canvas):
    return [c.kwargs.get("text") for c in canvas.create_text.call_args_list]


def _line_fills(canvas):
    return [c.kwargs.get("fill") for c in canvas.create_line.call_args_list]


def test_create_nurbs_editor_keeps_size():
    editor = create_editor("nurbs", 640, 480)
    assert isinstance(editor, NurbsEditor)
    assert (editor.width, editor.height) == (640, 480)


def test_create_hermite_editor_case_insensitive():
    editor = create_editor("Hermite")
    assert isinstance(editor, HermiteEditor)
    assert editor.points == []
    assert editor.sample_resolution == DEFAULT_RESOLUTION


def test_create_unknown_editor_raises():
    with pytest.raises(ValueError):
        create_editor("bezier")


def test_window_sets_title_and_draws_help():
    editor = HermiteEditor()
    with patch("tkinter.Canvas") as canvas_cls:
        root = MagicMock()
        window = EditorWindow(root, editor, "My title")
        canvas = canvas_cls.return_value
    root.title.assert_called_with("My title")
    assert window.canvas is canvas
    texts = _texts(canvas)
    for line in editor.help_lines():
        assert line in texts


def test_hermite_double_click_adds_points_and_draws_curve():
    editor = HermiteEditor()
    with patch("tkinter.Canvas") as canvas_cls:
        EditorWindow(MagicMock(), editor, "t")
        canvas = canvas_cls.return_value
        bound = _bindings(canvas)
        bound["<Double-Button-1>"](_event(100, 100))
        bound["<Double-Button-1>"](_event(300, 200))
    assert [p.position for p in editor.points] == [
        editor.points[0].position,
        editor.points[1].position,
    ]
    assert len(editor.points) == 2
    assert editor.points[1].position.x == 300
    assert "red" in _line_fills(canvas)


def test_hermite_right_press_deletes_point():
    editor = HermiteEditor()
    with patch("tkinter.Canvas") as canvas_cls:
        EditorWindow(MagicMock(), editor, "t")
        bound = _bindings(canvas_cls.return_value)
        bound["<Double-Button-1>"](_event(100, 100))
        bound["<ButtonPress-3>"](_event(102, 101, num=3))
    assert editor.points == []


def test_key_binding_plus_raises_resolution():
    editor = HermiteEditor()
    with patch("tkinter.Canvas") as canvas_cls:
        EditorWindow(MagicMock(), editor, "t")
        bound = _bindings(canvas_cls.return_value)
        bound["<Key>"](_event(keysym="plus", char="+"))
    assert editor.sample_resolution == DEFAULT_RESOLUTION + RESOLUTION_STEP


def test_hermite_drag_point_moves_it():
    editor = HermiteEditor()
    with patch("tkinter.Canvas") as canvas_cls:
        EditorWindow(MagicMock(), editor, "t")
        bound = _bindings(canvas_cls.return_value)
        bound["<Double-Button-1>"](_event(100, 100))
        bound["<ButtonRelease-1>"](_event(100, 100))
        bound["<ButtonPress-1>"](_event(100, 100))
        bound["<Motion>"](_event(150, 160))
        bound["<ButtonRelease-1>"](_event(150, 160))
    assert (editor.points[0].position.x, editor.points[0].position.y) == (150, 160)
    assert editor.dragging_point is False


def test_nurbs_configure_updates_size_and_draws_knots():
    editor = NurbsEditor(1280, 800)
    with patch("tkinter.Canvas") as canvas_cls:
        EditorWindow(MagicMock(), editor, "t")
        canvas = canvas_cls.return_value
        bound = _bindings(canvas)
        bound["<Double-Button-1>"](_event(100, 100))
        bound["<Double-Button-1>"](_event(400, 300))
        bound["<Configure>"](_event(width=900, height=600))
    assert (editor.width, editor.height) == (900, 600)
    assert editor.knot_label() in _texts(canvas)
    assert len(editor.control_points) == 2


def test_nurbs_digit_key_sets_degree():
    editor = NurbsEditor()
    with patch("tkinter.Canvas") as canvas_cls:
        EditorWindow(MagicMock(), editor, "t")
        bound = _bindings(canvas_cls.return_value)
        bound["<Key>"](_event(keysym="2", char="2"))
    assert editor.degree == 2


def test_main_opens_named_editor():
    with patch("tkinter.Tk") as tk_cls, patch("tkinter.Canvas"):
        result = main(["nurbs"])
        root = tk_cls.return_value
    assert result == 0
    root.title.assert_called_with(EDITORS["nurbs"][1])
    root.mainloop.assert_called_once()


def test_main_rejects_unknown_editor():
    with pytest.raises(SystemExit) as info:
        main(["spline"])
    assert info.value.code == 2