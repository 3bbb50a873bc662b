import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gdsview.geometry import Pos2, Rect, TSTransform, Vec2, WorldBBox

finite = st.floats(min_value=-1e6, max_value=1e6, allow_nan=False, allow_infinity=False)
positive = st.floats(min_value=0.0, max_value=1e6, allow_nan=False, allow_infinity=False)


def test_rect_from_min_size_dimensions():
    rect = Rect.from_min_size(Pos2(0.0, 0.0), Vec2(800.0, 600.0))
    assert rect.width() == 800.0
    assert rect.height() == 600.0
    assert rect.min == Pos2(0.0, 0.0)


def test_rect_center_of_test_viewport():
    rect = Rect.from_min_size(Pos2(0.0, 0.0), Vec2(800.0, 600.0))
    assert rect.center() == Pos2(400.0, 300.0)


@given(finite, finite, positive, positive)
def test_rect_center_is_inside_and_equidistant(x, y, w, h):
    rect = Rect.from_min_size(Pos2(x, y), Vec2(w, h))
    c = rect.center()
    assert rect.contains(c) or math.isclose(w, 0.0) or math.isclose(h, 0.0)
    assert math.isclose(c.x - rect.min.x, rect.max.x - c.x, abs_tol=1e-6)
    assert math.isclose(c.y - rect.min.y, rect.max.y - c.y, abs_tol=1e-6)


def test_rect_from_two_pos_orders_corners():
    a = Pos2(10.0, 2.0)
    b = Pos2(-3.0, 7.0)
    rect = Rect.from_two_pos(a, b)
    assert rect.min == Pos2(-3.0, 2.0)
    assert rect.max == Pos2(10.0, 7.0)
    assert Rect.from_two_pos(b, a) == rect


def test_bbox_overlaps_fully_contained():
    a = WorldBBox(1.0, 1.0, 2.0, 2.0)
    b = WorldBBox(0.0, 0.0, 3.0, 3.0)
    assert a.overlaps(b)


def test_bbox_overlaps_disjoint():
    a = WorldBBox(0.0, 0.0, 1.0, 1.0)
    b = WorldBBox(2.0, 2.0, 3.0, 3.0)
    assert not a.overlaps(b)


def test_bbox_overlaps_touching_edge():
    a = WorldBBox(0.0, 0.0, 1.0, 1.0)
    b = WorldBBox(1.0, 0.0, 2.0, 1.0)
    assert a.overlaps(b)


def test_bbox_overlaps_is_symmetric_example():
    a = WorldBBox(0.0, 0.0, 2.0, 2.0)
    b = WorldBBox(1.0, 1.0, 3.0, 3.0)
    assert a.overlaps(b) == b.overlaps(a)


@given(finite, finite, positive, positive, finite, finite, positive, positive)
def test_bbox_overlaps_is_symmetric(ax, ay, aw, ah, bx, by, bw, bh):
    a = WorldBBox(ax, ay, ax + aw, ay + ah)
    b = WorldBBox(bx, by, bx + bw, by + bh)
    assert a.overlaps(b) == b.overlaps(a)


@given(finite, finite, positive, positive, finite, finite, positive, positive)
def test_bbox_merge_contains_both(ax, ay, aw, ah, bx, by, bw, bh):
    a = WorldBBox(ax, ay, ax + aw, ay + ah)
    b = WorldBBox(bx, by, bx + bw, by + bh)
    merged = a.merge(b)
    for box in (a, b):
        assert merged.min_x <= box.min_x
        assert merged.min_y <= box.min_y
        assert merged.max_x >= box.max_x
        assert merged.max_y >= box.max_y
        assert merged.overlaps(box)
    assert merged == b.merge(a)


def test_transform_default_is_identity():
    p = Pos2(12.5, -7.0)
    assert TSTransform().apply(p) == p


@given(finite, finite, st.floats(min_value=0.01, max_value=100.0))
def test_transform_maps_origin_to_translation(tx, ty, s):
    tsf = TSTransform(Vec2(tx, ty), s)
    assert tsf.apply(Pos2(0.0, 0.0)) == Pos2(tx, ty)


@given(finite, finite, finite, finite, finite, finite, st.floats(min_value=0.01, max_value=100.0))
def test_transform_scales_differences(px, py, qx, qy, tx, ty, s):
    tsf = TSTransform(Vec2(tx, ty), s)
    diff = tsf.apply(Pos2(px, py)) - tsf.apply(Pos2(qx, qy))
    assert diff.x == pytest.approx((px - qx) * s, rel=1e-9, abs=1e-3)
    assert diff.y == pytest.approx((py - qy) * s, rel=1e-9, abs=1e-3)


def test_transform_mul_matches_apply():
    tsf = TSTransform(Vec2(-50.0, 3.0), 1.5)
    p = Pos2(4.0, 8.0)
    assert tsf * p == tsf.apply(p)


def test_pos_vec_arithmetic_round_trip():
    p = Pos2(3.0, 4.0)
    v = Vec2(1.5, -2.0)
    assert (p + v) - v == p
    assert (p + v) - p == v
    assert (p - Pos2(0.0, 0.0)).length() == 5.0
    assert not Pos2(float("inf"), 0.0).is_finite()