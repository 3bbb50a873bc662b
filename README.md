# gdsview

Building blocks for viewing GDSII chip layouts. The package provides the
GDSII record and data-type codes, and the camera maths behind an interactive
2D layout view.

## Installation

```
pip install gdsview
```

The package has no runtime dependencies. To run the test suite:

```
pip install "gdsview[test]"
pytest
```

## Contents

- `gdsview.records`
  - `GDSRecord` is an `IntEnum` of the GDSII record kinds, `0x00` (`HEADER`)
    to `0x3B` (`LIB_SECURE`).
  - `GDSDataType` is an `IntEnum` of the data types, `NO_DATA` to
    `ASCII_STRING`.
  - An unknown code raises `ValueError`, for example `GDSRecord(0x3C)`.
  - `combine_record_and_data_type(record, data_type)` packs one record kind
    and one data type into the 16-bit header word. The record goes in the high
    byte and the data type in the low byte. For example,
    `combine_record_and_data_type(GDSRecord.UNITS, GDSDataType.EIGHT_BYTE_REAL)`
    returns `0x0305`.
- `gdsview.geometry` holds small frozen value types:
  - `Pos2` and `Vec2` are screen points and vectors.
  - `Rect` is a screen rectangle. It has `from_min_size`, `from_two_pos`,
    `width`, `height`, `center` and `contains`.
  - `WorldBBox` is a world-space box. It has `merge` and `overlaps`, and
    touching edges count as overlapping.
  - `TSTransform` scales a point and then translates it. Call it as
    `transform.apply(pos)` or `transform * pos`.
- `gdsview.viewport`
  - `Viewport` is the camera. It stores a world-space centre and a zoom in
    pixels per world unit. In world space Y points up; on screen Y points down.
    - `world_to_screen` and `screen_to_world` convert between the two spaces.
    - `visible_world_rect` returns the world area a screen rectangle shows.
    - `pan` moves the centre by world-space deltas.
    - `zoom_at_center` scales the zoom and keeps the centre fixed.
    - `zoom_at_point` scales the zoom and keeps the world point under a screen
      position fixed.
    - `zoom_to_fit` centres on a `WorldBBox`. If the box has non-zero width and
      height, it also sets the zoom so the box fills 90% of the view.
    - Zoom is always clamped to the range `MIN_ZOOM` (1e-3) to `MAX_ZOOM`
      (1e15).
  - `CELL_LOAD_THRESHOLD_PX` (24 pixels) is also defined here. A grid cell
    smaller than this on screen is meant to be drawn as a single filled
    rectangle.

## Example

```python
from gdsview.geometry import Pos2, Rect, Vec2, WorldBBox
from gdsview.viewport import Viewport

rect = Rect.from_min_size(Pos2(0.0, 0.0), Vec2(800.0, 600.0))
vp = Viewport()
vp.zoom_to_fit(WorldBBox(0.0, 0.0, 1e-6, 2e-6), rect)

screen = vp.world_to_screen(5e-7, 1e-6, rect)   # Pos2(400.0, 300.0), the screen centre
wx, wy = vp.screen_to_world(screen.x, screen.y, rect)

vp.zoom_at_point(200.0, 150.0, 1.5, rect)        # zoom in around a cursor position
```

## What this package does not do

- It does not read or write GDSII files. It defines the record codes and
  nothing more.
- It has no window and no drawing code. It does not keep a cache of rendered
  geometry.
- It does not format coordinates for display in nm, µm or mm.
- It has no command-line program.