"""Desktop window that hosts one of the curve editors."""

from __future__ import annotations

import argparse
import tkinter as tk
from tkinter import ttk
from typing import Sequence, Union

from curvedesign.geometry import MouseButton, Point
from curvedesign.hermite import HANDLE_RADIUS as HERMITE_HANDLE_RADIUS
from curvedesign.hermite import HermiteEditor
from curvedesign.nurbs import HANDLE_SIZE, POINT_SIZE, NurbsEditor

Editor = Union[NurbsEditor, HermiteEditor]

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 800

# choice key -> (label shown in the chooser, window title)
EDITORS = {
    "nurbs": ("NURBS curve", "NURBS Curve Editor"),
    "hermite": ("Hermite spline", "Hermite Spline Curve Editor"),
}

_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}

_KEYSYMS = {
    "plus": "+",
    "equal": "=",
    "minus": "-",
    "KP_Add": "+",
    "KP_Subtract": "-",
    "Delete": "delete",
    "Up": "up",
    "Down": "down",
}


def create_editor(choice: str, width: float = DEFAULT_WIDTH, height: float = DEFAULT_HEIGHT) -> Editor:
    """Build the editor named by choice ('nurbs' or 'hermite')."""
    key = choice.lower()
    if key == "nurbs":
        return NurbsEditor(width, height)
    if key == "hermite":
        return HermiteEditor()
    raise ValueError(f"unknown editor: {choice!r}")


def _key_name(event) -> str:
    keysym = getattr(event, "keysym", "") or ""
    if keysym in _KEYSYMS:
        return _KEYSYMS[keysym]
    char = getattr(event, "char", "") or ""
    if char and char.isprintable():
        return char
    return keysym.lower()


def _button(event) -> MouseButton:
    return _BUTTONS.get(getattr(event, "num", 1), MouseButton.LEFT)


def _flatten(points: Sequence[Point]) -> list[float]:
    return [coord for p in points for coord in (p.x, p.y)]


class EditorWindow:
    """A canvas that forwards input to an editor and draws its state."""

    def __init__(self, root, editor: Editor, title: str) -> None:
        self.root = root
        self.editor = editor
        root.title(title)
        width = getattr(editor, "width", DEFAULT_WIDTH)
        height = getattr(editor, "height", DEFAULT_HEIGHT)
        self.width = width
        self.height = height
        root.geometry(f"{int(width)}x{int(height)}")
        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)

        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<ButtonPress-3>", self._on_press)
        self.canvas.bind("<Motion>", self._on_move)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)
        self.canvas.bind("<ButtonRelease-3>", self._on_release)
        self.canvas.bind("<Double-Button-1>", self._on_double_click)
        self.canvas.bind("<Key>", self._on_key)
        self.canvas.bind("<Configure>", self._on_configure)
        self.canvas.focus_set()
        self.redraw()

    # -- input ---------------------------------------------------------------

    def _on_press(self, event) -> None:
        self.canvas.focus_set()
        self.editor.press(Point(event.x, event.y), _button(event))
        self.redraw()

    def _on_move(self, event) -> None:
        self.editor.move(Point(event.x, event.y))
        self.redraw()

    def _on_release(self, event) -> None:
        self.editor.release()
        self.redraw()

    def _on_double_click(self, event) -> None:
        self.editor.double_click(Point(event.x, event.y), _button(event))
        self.redraw()

    def _on_key(self, event) -> None:
        self.editor.key_press(_key_name(event))
        self.redraw()

    def _on_configure(self, event) -> None:
        self.width = event.width
        self.height = event.height
        if isinstance(self.editor, NurbsEditor):
            self.editor.width = event.width
            self.editor.height = event.height
        self.redraw()

    # -- drawing -------------------------------------------------------------

    def redraw(self) -> None:
        """Repaint the whole canvas from the editor state."""
        self.canvas.delete("all")
        if isinstance(self.editor, NurbsEditor):
            self._draw_nurbs(self.editor)
        else:
            self._draw_hermite(self.editor)

    def _oval(self, center: Point, radius: float, **options) -> None:
        self.canvas.create_oval(
            center.x - radius, center.y - radius, center.x + radius, center.y + radius, **options
        )

    def _draw_hermite(self, editor: HermiteEditor) -> None:
        self.canvas.configure(background="white")

        for polyline in editor.curve():
            self.canvas.create_line(*_flatten(polyline), fill="red", width=2)

        selected = editor.selected
        if selected is not None:
            p = selected.position
            forward = p + selected.tangent
            backward = p - selected.tangent
            if not selected.tangent.is_null():
                self.canvas.create_line(p.x, p.y, forward.x, forward.y, fill="darkgreen", width=1.5)
                self.canvas.create_line(p.x, p.y, backward.x, backward.y, fill="darkgreen", width=1.5)
            for handle in (forward, backward):
                self._oval(handle, HERMITE_HANDLE_RADIUS, outline="darkgreen", fill="green", width=1.5)

        if editor.show_points:
            for index, pt in enumerate(editor.points):
                self._oval(pt.position, 5, outline="darkblue", fill="darkblue")
                self.canvas.create_text(
                    pt.position.x + 6, pt.position.y - 6, text=str(index),
                    anchor="sw", fill="black", font=("TkDefaultFont", 8),
                )

        for line_no, line in enumerate(editor.help_lines()):
            self.canvas.create_text(10, 20 + 16 * line_no, text=line, anchor="sw", fill="black")

    def _draw_nurbs(self, editor: NurbsEditor) -> None:
        self.canvas.configure(background="#fafafa")
        points = editor.control_points

        if editor.show_control_points:
            for a, b in zip(points, points[1:]):
                self.canvas.create_line(
                    a.position.x, a.position.y, b.position.x, b.position.y,
                    fill="#c8c8c8", width=2,
                )

        curve = editor.curve()
        if curve:
            self.canvas.create_line(*_flatten(curve), fill="#dc5050", width=3.5)

        selected = editor.selected
        if editor.show_control_points and selected is not None:
            for handle in selected.slope_handles:
                self.canvas.create_line(
                    selected.position.x, selected.position.y, handle.x, handle.y,
                    fill="#96c896", width=1.5,
                )
                self._oval(handle, HANDLE_SIZE // 2, outline="#96c896", fill="#96c896", width=1.5)

        if editor.show_control_points:
            for index, cp in enumerate(points):
                is_selected = cp is selected
                self._oval(cp.position, POINT_SIZE // 2 + 3, outline="", fill="#d8d8d8")
                self._oval(
                    cp.position, POINT_SIZE // 2,
                    outline="white", width=1.5,
                    fill="#ff5a5a" if is_selected else "#508cdc",
                )
                self.canvas.create_text(
                    cp.position.x - 10, cp.position.y + 20, text=str(index),
                    anchor="sw", fill="darkgray",
                )
                if is_selected:
                    self.canvas.create_text(
                        cp.position.x + 15, cp.position.y - 5, text=f"{cp.weight:.2f}",
                        anchor="sw", fill="black",
                    )

        for line_no, line in enumerate(editor.help_lines()):
            self.canvas.create_text(10, 20 + 20 * line_no, text=line, anchor="sw", fill="black")

        self.canvas.create_text(
            10, editor.height - 20, text=editor.knot_label(), anchor="sw", fill="black"
        )


def _ask_choice(root) -> str | None:
    """Let the user pick an editor; None when the dialog is cancelled."""
    keys = list(EDITORS)
    labels = [EDITORS[key][0] for key in keys]
    chosen: str | None = None

    root.withdraw()
    dialog = tk.Toplevel(root)
    dialog.title("Choose curve type")
    tk.Label(dialog, text="Choose the curve editor to use:").pack(padx=12, pady=(12, 4))
    selection = tk.StringVar(dialog, value=labels[0])
    ttk.Combobox(dialog, textvariable=selection, values=labels, state="readonly").pack(
        padx=12, pady=4
    )

    def accept() -> None:
        nonlocal chosen
        chosen = keys[labels.index(selection.get())]
        dialog.destroy()

    buttons = tk.Frame(dialog)
    buttons.pack(padx=12, pady=(4, 12))
    tk.Button(buttons, text="OK", command=accept).pack(side="left", padx=4)
    tk.Button(buttons, text="Cancel", command=dialog.destroy).pack(side="left", padx=4)
    dialog.protocol("WM_DELETE_WINDOW", dialog.destroy)
    dialog.wait_window()
    root.deiconify()
    return chosen


def main(argv: Sequence[str] | None = None) -> int:
    """Start the curve editor window."""
    parser = argparse.ArgumentParser(prog="curvedesign", description="Interactive curve editor.")
    parser.add_argument(
        "editor", nargs="?", choices=sorted(EDITORS),
        help="editor to open; asked interactively when omitted",
    )
    args = parser.parse_args(argv)

    root = tk.Tk()
    choice = args.editor or _ask_choice(root)
    if choice is None:
        root.destroy()
        return 0

    editor = create_editor(choice, DEFAULT_WIDTH, DEFAULT_HEIGHT)
    EditorWindow(root, editor, EDITORS[choice][1])
    root.mainloop()
    return 0