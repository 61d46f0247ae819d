"""
test_geometry.py: Ellipsoids, the authalic sphere and the icosahedron constants
"""

import logging

import numpy as np
import pytest

from common.constants import GeodeticConstants
from common.logging_config import LOG_LEVEL_ENV_VAR, get_logger
from geospatial import trigonometric as trig
from geospatial.coordinate_models import EllipsoidParameters, WGS84Ellipsoid
from geospatial.isea_constants import GOLDEN_RATIO, ISEAConstants
from geospatial.projections import authalic_radius_km


class TestEllipsoid:

    def test_wgs84_authalic_radius(self):
        assert WGS84Ellipsoid.authalic_radius == pytest.approx(6371007.1809, abs=1e-3)
        assert authalic_radius_km() == pytest.approx(6371.0071809, abs=1e-6)

    def test_wgs84_axes(self):
        assert WGS84Ellipsoid.a == 6378137.0
        assert WGS84Ellipsoid.b == pytest.approx(6356752.314245, abs=1e-3)

    def test_matches_quoted_constants(self):
        radius = GeodeticConstants.EARTH_AUTHALIC_RADIUS
        assert WGS84Ellipsoid.authalic_radius == pytest.approx(radius.value, abs=radius.uncertainty)
        minor = GeodeticConstants.EARTH_SEMI_MINOR_AXIS
        assert WGS84Ellipsoid.b == pytest.approx(minor.value, abs=1e-3)

    def test_from_name_matches_registry(self):
        wgs84 = EllipsoidParameters.from_name("WGS84")
        assert wgs84.a == pytest.approx(WGS84Ellipsoid.a)
        assert wgs84.f == pytest.approx(WGS84Ellipsoid.f, rel=1e-12)

    def test_grs80_is_close_to_wgs84(self):
        grs80 = EllipsoidParameters.from_name("GRS80")
        assert grs80.authalic_radius == pytest.approx(6371007.181, abs=0.01)

    def test_sphere_authalic_radius_is_radius(self):
        sphere = EllipsoidParameters(a=1000.0, f=0.0, name="sphere")
        assert sphere.authalic_radius == 1000.0


class TestTrigonometry:

    def test_degree_functions(self):
        assert trig.sin(30.0) == pytest.approx(0.5)
        assert trig.cos(60.0) == pytest.approx(0.5)
        assert trig.tan(45.0) == pytest.approx(1.0)
        assert trig.cot(45.0) == pytest.approx(1.0)
        assert trig.atan2(1.0, -1.0) == pytest.approx(135.0)

    def test_inverse_functions_clip_rounding_noise(self):
        assert trig.asin(1.0 + 1e-15) == pytest.approx(90.0)
        assert trig.acos(-1.0 - 1e-15) == pytest.approx(180.0)


class TestISEAConstants:

    @pytest.fixture
    def k(self):
        return ISEAConstants.from_radius(6371.0071809)

    def test_structural_angles(self, k):
        assert k.G == 36
        assert k.theta == 30
        assert k.az_max == 120
        assert k.golden_ratio == pytest.approx(GOLDEN_RATIO)

    def test_derived_angles(self, k):
        assert k.g == pytest.approx(37.3773681406, abs=1e-8)
        assert k.E == pytest.approx(52.6226318594, abs=1e-8)
        assert k.F == pytest.approx(10.8123169636, abs=1e-6)
        assert k.EF == pytest.approx(41.8103148958, abs=1e-6)
        assert k.E + k.g == pytest.approx(90.0)

    def test_face_center_distance(self, k):
        # the two face-center latitudes satisfy F = 90 + g - 2 atan(phi)
        assert k.F == pytest.approx(90 + k.g - 2 * np.degrees(np.arctan(GOLDEN_RATIO)))

    def test_radius_ratio(self, k):
        assert k.radius_ratio == pytest.approx(0.9103832815309029, abs=1e-9)
        assert k.R == pytest.approx(k.radius * k.radius_ratio)

    def test_face_area_is_one_twentieth_of_sphere(self, k):
        # equilateral triangle with half base G
        face_area = np.sqrt(3) * k.half_base ** 2
        assert face_area == pytest.approx(4 * np.pi * k.radius ** 2 / 20, rel=1e-12)

    def test_face_tables(self, k):
        assert k.lats[:5] == (k.E,) * 5
        assert k.lats[5:10] == (k.F,) * 5
        assert k.lats[10:15] == (-k.F,) * 5
        assert k.lats[15:] == (-k.E,) * 5
        assert k.lons[:10] == (-144, -72, 0, 72, 144) * 2
        assert k.lons[10:] == (-108, -36, 36, 108, 180) * 2

    def test_distortion_constants(self, k):
        assert k.max_angular_distortion == GeodeticConstants.ISEA_MAX_ANGULAR_DISTORTION.value
        assert k.max_scale_variation == pytest.approx(1.163)
        assert k.min_scale_variation == pytest.approx(0.860)

    @pytest.mark.parametrize("radius", [0.0, -1.0])
    def test_invalid_radius(self, radius):
        with pytest.raises(ValueError):
            ISEAConstants.from_radius(radius)

    def test_frozen(self, k):
        with pytest.raises(AttributeError):
            k.g = 1.0


class TestLogging:

    def test_default_level(self, monkeypatch):
        monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
        assert get_logger("isea.tests.default").level == logging.WARNING

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")
        assert get_logger("isea.tests.env").level == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
        assert get_logger("isea.tests.unknown").level == logging.WARNING

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")
        assert get_logger("isea.tests.explicit", level=logging.ERROR).level == logging.ERROR

    def test_single_handler(self):
        logger = get_logger("isea.tests.handlers")
        get_logger("isea.tests.handlers")
        assert len(logger.handlers) == 1
