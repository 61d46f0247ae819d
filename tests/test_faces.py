"""
test_faces.py: Face selection, parity and face extents
"""

import numpy as np
import pytest

from common.exceptions import InvalidFaceError
from common.types import FaceCoordinate, GeoCoordinate
from geospatial.faces import Face, face_orientation, select_face, select_face_of


class TestFaceOrientation:

    @pytest.mark.parametrize("face", list(range(0, 5)) + list(range(10, 15)))
    def test_upright(self, face):
        assert face_orientation(face) == 1

    @pytest.mark.parametrize("face", list(range(5, 10)) + list(range(15, 20)))
    def test_inverted(self, face):
        assert face_orientation(face) == -1

    def test_accepts_face_coordinate(self):
        assert face_orientation(FaceCoordinate(7, 1.0, 2.0)) == -1

    @pytest.mark.parametrize("face", [-1, 20])
    def test_invalid(self, face):
        with pytest.raises(InvalidFaceError):
            face_orientation(face)


class TestFaceSelection:

    @pytest.mark.parametrize("lat, lon, expected", [
        (60.0, -150.0, 0),
        (60.0, -72.0, 1),
        (60.0, 0.0, 2),
        (60.0, 100.0, 3),
        (60.0, 150.0, 4),
        (5.0, -144.0, 5),
        (0.0, 0.0, 7),
        (-5.0, 36.0, 12),
        (-5.0, 180.0, 14),
        (-60.0, -100.0, 15),
        (-60.0, 170.0, 19),
        (-60.0, -170.0, 19),
    ])
    def test_known_faces(self, projection, lat, lon, expected):
        assert select_face(GeoCoordinate(lat, lon), projection.constants) == expected

    def test_face_centers(self, projection):
        k = projection.constants
        for face in range(20):
            c = GeoCoordinate(k.lats[face], k.lons[face])
            assert select_face(c, k) == face

    def test_cap_face_reaching_into_belt(self, projection):
        # below E - F yet above the edge midpoint of the belt face
        k = projection.constants
        assert select_face(GeoCoordinate(35.0, -144.0), k) == 0
        assert select_face(GeoCoordinate(-35.0, 180.0), k) == 19

    def test_selected_face_has_nearest_center(self, projection):
        k = projection.constants
        for lat in np.arange(-87.5, 90.0, 5.0):
            for lon in np.arange(-178.0, 180.0, 7.0):
                c = GeoCoordinate(float(lat), float(lon))
                chosen = select_face_of(c, k)
                nearest = min(Face.of(face, c, k).z for face in range(20))
                assert chosen.z <= nearest + 1e-9, (c, chosen.face)

    def test_bound_face(self, projection):
        c = GeoCoordinate(40.0, 5.0)
        face = select_face_of(c, projection.constants)
        assert face.face == 2
        assert face.c is c
        assert face.sin_lat == pytest.approx(np.sin(np.radians(40.0)))
        assert face.cos_lon_lon0 == pytest.approx(np.cos(np.radians(5.0)))


class TestFaceExtent:

    def test_polar_face(self, projection):
        assert projection.get_lat_min(2) == pytest.approx(np.degrees(np.arctan(0.5)))
        assert projection.get_lat_max(2) == pytest.approx(90.0)
        assert projection.get_lat_min(17) == pytest.approx(-90.0)
        assert projection.get_lat_max(17) == pytest.approx(-np.degrees(np.arctan(0.5)))

    def test_inverted_belt_face_reaches_lowest_vertex(self, projection):
        assert projection.get_lat_min(7) == pytest.approx(-np.degrees(np.arctan(0.5)))

    def test_longitudes(self, projection):
        assert projection.get_lon_min(2) == -36.0
        assert projection.get_lon_max(2) == 36.0
        assert projection.get_lon_min(0) == -180.0
        assert projection.get_lon_max(4) == 180.0

    def test_antimeridian_face(self, projection):
        assert projection.get_lon_min(19) == 144.0
        assert projection.get_lon_max(19) == -144.0
        assert projection.get_lon_max(19) < projection.get_lon_min(19)

    def test_face_contents_within_extent(self, projection):
        k = projection.constants
        for lat in np.arange(-87.5, 90.0, 5.0):
            for lon in np.arange(-178.0, 180.0, 7.0):
                c = GeoCoordinate(float(lat), float(lon))
                face = select_face(c, k)
                assert projection.get_lat_min(face) - 1e-9 <= c.lat <= projection.get_lat_max(face) + 1e-9
                lon_min = projection.get_lon_min(face)
                lon_max = projection.get_lon_max(face)
                if lon_min <= lon_max:
                    assert lon_min <= c.lon <= lon_max
                else:
                    assert c.lon >= lon_min or c.lon <= lon_max

    @pytest.mark.parametrize("method", [
        "get_lat", "get_lon", "get_lat_min", "get_lat_max", "get_lon_min", "get_lon_max",
    ])
    def test_invalid_face(self, projection, method):
        with pytest.raises(InvalidFaceError):
            getattr(projection, method)(20)
