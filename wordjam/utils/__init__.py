from .grid_visualizer import render_row, render_snapshot, render_status

__all__ = ["render_row", "render_snapshot", "render_status"]
