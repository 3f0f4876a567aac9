from .layout_map import render_layout, render_map

__all__ = ["render_layout", "render_map"]
