"""GDSII record codes, screen/world geometry types and a 2D layout viewport camera."""

__version__ = "0.1.0"
__all__ = ["records", "geometry", "viewport"]