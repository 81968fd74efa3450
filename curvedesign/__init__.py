"""Hermite spline and NURBS curve mathematics with interactive editors and a tkinter window."""

__version__ = "0.1.0"
__all__ = ["geometry", "hermite", "nurbs", "app"]