"""Camera state for the 2D layout view and the world/screen mapping."""

from __future__ import annotations

from dataclasses import dataclass

from gdsview.geometry import Pos2, Rect, WorldBBox

__all__ = ["Viewport", "MIN_ZOOM", "MAX_ZOOM", "CELL_LOAD_THRESHOLD_PX"]

MIN_ZOOM = 1e-3
MAX_ZOOM = 1e15

# A grid cell smaller than this many screen pixels is drawn as one filled
# rectangle instead of its individual elements.
CELL_LOAD_THRESHOLD_PX = 24.0


def _clamp_zoom(zoom: float) -> float:
    return min(max(zoom, MIN_ZOOM), MAX_ZOOM)


def _midpoint(a: float, b: float) -> float:
    """Midpoint of two floats that does not overflow for huge values."""
    total = a + b
    if abs(total) != float("inf"):
        return total / 2.0
    return a / 2.0 + b / 2.0


@dataclass
class Viewport:
    """Centre position in world coordinates and zoom in pixels per world unit."""

    center_x: float = 0.0
    center_y: float = 0.0
    zoom: float = 1.0

    def world_to_screen(self, wx: float, wy: float, rect: Rect) -> Pos2:
        """Map a world point to screen space; world Y grows upwards, screen Y downwards."""
        center = rect.center()
        sx = center.x + (wx - self.center_x) * self.zoom
        sy = center.y - (wy - self.center_y) * self.zoom
        return Pos2(sx, sy)

    def screen_to_world(self, sx: float, sy: float, rect: Rect) -> tuple[float, float]:
        """Map a screen point back to world space."""
        center = rect.center()
        wx = (sx - center.x) / self.zoom + self.center_x
        wy = -(sy - center.y) / self.zoom + self.center_y
        return wx, wy

    def visible_world_rect(self, rect: Rect) -> WorldBBox:
        """The world-space rectangle currently shown in ``rect``."""
        min_x, max_y = self.screen_to_world(rect.min.x, rect.min.y, rect)
        max_x, min_y = self.screen_to_world(rect.max.x, rect.max.y, rect)
        return WorldBBox(min_x, min_y, max_x, max_y)

    def pan(self, dx_world: float, dy_world: float) -> None:
        """Move the centre by the given world-space deltas."""
        self.center_x += dx_world
        self.center_y += dy_world

    def zoom_at_center(self, factor: float) -> None:
        """Scale the zoom by ``factor`` keeping the centre fixed."""
        self.zoom = _clamp_zoom(self.zoom * factor)

    def zoom_at_point(self, sx: float, sy: float, factor: float, rect: Rect) -> None:
        """Scale the zoom by ``factor`` keeping the world point under (sx, sy) fixed."""
        wx, wy = self.screen_to_world(sx, sy, rect)
        new_zoom = _clamp_zoom(self.zoom * factor)
        center = rect.center()
        self.center_x = wx - (sx - center.x) / new_zoom
        self.center_y = wy + (sy - center.y) / new_zoom
        self.zoom = new_zoom

    def zoom_to_fit(self, bounds: WorldBBox, rect: Rect) -> None:
        """Centre on ``bounds`` and, if it has area, zoom so it fills 90% of ``rect``."""
        self.center_x = _midpoint(bounds.min_x, bounds.max_x)
        self.center_y = _midpoint(bounds.min_y, bounds.max_y)

        world_w = bounds.max_x - bounds.min_x
        world_h = bounds.max_y - bounds.min_y
        if world_w > 0.0 and world_h > 0.0:
            zoom_x = rect.width() / world_w
            zoom_y = rect.height() / world_h
            self.zoom = min(zoom_x, zoom_y) * 0.9