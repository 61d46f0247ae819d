"""
test_orientation.py: Rotating coordinates and bounding boxes into the icosahedron frame
"""

import pytest

from common.types import FULL_SPHERE, GeoCoordinate
from geospatial.orientation import (
    DEFAULT_ORIENTATION,
    Orientation,
    change_orientation,
    change_orientation_bbox,
    revert_orientation,
)

from conftest import angular_difference

TILTED = Orientation(20.0, 10.0)


class TestOrientation:

    def test_identity_returns_input(self):
        c = GeoCoordinate(12.0, 34.0)
        assert change_orientation(c, DEFAULT_ORIENTATION) is c
        assert revert_orientation(c, DEFAULT_ORIENTATION) is c

    def test_longitude_only(self):
        c = change_orientation(GeoCoordinate(30.0, 100.0), Orientation(0.0, 15.0))
        assert c.lat == pytest.approx(30.0)
        assert c.lon == pytest.approx(115.0)

    def test_latitude_rotation_moves_along_prime_meridian(self):
        c = change_orientation(GeoCoordinate(10.0, 0.0), Orientation(25.0, 0.0))
        assert c.lat == pytest.approx(35.0)
        assert c.lon == pytest.approx(0.0, abs=1e-12)

    def test_pole_preimage(self):
        p = revert_orientation(GeoCoordinate(90.0, 0.0), TILTED)
        assert p.lat == pytest.approx(70.0)
        assert p.lon == pytest.approx(-10.0)

    @pytest.mark.parametrize("orientation", [
        Orientation(20.0, 10.0),
        Orientation(-33.3, 170.0),
        Orientation.symmetric_equator(52.6226318594, 10.8123169636),
    ])
    def test_revert_inverts_change(self, orientation, global_points):
        for c in global_points:
            back = revert_orientation(change_orientation(c, orientation), orientation)
            assert back.lat == pytest.approx(c.lat, abs=1e-9)
            assert angular_difference(back.lon, c.lon) == pytest.approx(0.0, abs=1e-9)

    def test_symmetric_equator(self):
        o = Orientation.symmetric_equator(52.0, 10.0)
        assert o.lat == 31.0
        assert o.lon == -11.25


class TestBoundingBox:

    def test_full_sphere(self):
        assert change_orientation_bbox(-90, 90, -180, 180, TILTED) == [FULL_SPHERE]

    def test_identity_keeps_box(self):
        (box,) = change_orientation_bbox(10, 20, 30, 40, DEFAULT_ORIENTATION)
        assert (box.lat_min, box.lat_max, box.lon_min, box.lon_max) == (10, 20, 30, 40)

    def test_contains_rotated_corners_and_edges(self):
        (box,) = change_orientation_bbox(10, 30, 20, 40, TILTED)
        for lat in (10, 20, 30):
            for lon in (20, 40):
                assert box.contains(change_orientation(GeoCoordinate(lat, lon), TILTED), 1e-9)

    def test_box_around_pole_preimage(self):
        (box,) = change_orientation_bbox(65, 75, -15, -5, TILTED)
        assert box.lat_max == 90.0
        assert (box.lon_min, box.lon_max) == (-180.0, 180.0)
        assert box.lat_min > -90.0

    def test_polar_cap_at_identity(self):
        (box,) = change_orientation_bbox(80, 90, -180, 180, DEFAULT_ORIENTATION)
        assert (box.lat_min, box.lat_max) == pytest.approx((80.0, 90.0))
        assert (box.lon_min, box.lon_max) == (-180.0, 180.0)

    def test_south_polar_cap_at_identity(self):
        (box,) = change_orientation_bbox(-90, -75, -180, 180, DEFAULT_ORIENTATION)
        assert box.lat_min == -90.0
        assert box.lat_max == pytest.approx(-75.0)

    def test_split_at_antimeridian(self):
        boxes = change_orientation_bbox(10, 20, 170, -170, DEFAULT_ORIENTATION)
        assert len(boxes) == 2
        east, west = boxes
        assert (east.lon_min, east.lon_max) == (170.0, 180.0)
        assert (west.lon_min, west.lon_max) == (-180.0, -170.0)
        assert east.lat_min == west.lat_min == 10.0

    def test_rotation_onto_canonical_antimeridian(self):
        o = Orientation(0.0, 10.0)
        boxes = change_orientation_bbox(10, 20, 170, 179, o)
        inside = change_orientation(GeoCoordinate(15.0, 175.0), o)
        assert inside.lon == pytest.approx(-175.0)
        assert any(b.contains(inside, 1e-9) for b in boxes)
        for lat in (10, 15, 20):
            for lon in (170, 174.5, 179):
                c = change_orientation(GeoCoordinate(lat, lon), o)
                assert any(b.contains(c, 1e-9) for b in boxes), c
        for b in boxes:
            assert b.lon_max - b.lon_min <= 9.0 + 1e-9

    def test_tilted_box_across_canonical_antimeridian(self):
        boxes = change_orientation_bbox(-10, 10, 160, 175, TILTED)
        assert len(boxes) == 2
        assert sum(b.lon_max - b.lon_min for b in boxes) < 40.0
        for lat in range(-10, 11, 5):
            for lon in range(160, 176, 3):
                c = change_orientation(GeoCoordinate(lat, lon), TILTED)
                assert any(b.contains(c, 0.01) for b in boxes), c
