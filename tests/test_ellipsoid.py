"""Unit tests for ellipsoid parameters and constant tables."""

import dataclasses
import math

import pytest

from common.constants import GRS80Constants, WGS84Constants
from geodesy.ellipsoid import EllipsoidParameters, GRS80Ellipsoid, WGS84Ellipsoid


class TestConstantTables:
    """The derived table values agree with the defining pair (a, f)."""

    @pytest.mark.parametrize("table", [WGS84Constants, GRS80Constants])
    def test_semi_minor_axis(self, table):
        a = table.SEMI_MAJOR_AXIS.value
        f = table.FLATTENING.value

        assert table.SEMI_MINOR_AXIS.value == pytest.approx(a * (1 - f), abs=1e-3)
        assert table.SEMI_MINOR_AXIS.value < a

    @pytest.mark.parametrize("table", [WGS84Constants, GRS80Constants])
    def test_flattening_inverse(self, table):
        assert table.FLATTENING_INVERSE.value == pytest.approx(1 / table.FLATTENING.value)

    @pytest.mark.parametrize("table", [WGS84Constants, GRS80Constants])
    def test_aspect_ratio_and_mean_radius(self, table):
        a = table.SEMI_MAJOR_AXIS.value
        b = table.SEMI_MINOR_AXIS.value

        assert table.ASPECT_RATIO.value == pytest.approx(b / a, rel=1e-12)
        assert table.MEAN_RADIUS.value == pytest.approx((2 * a + b) / 3, abs=1e-3)

    def test_rotation_period(self):
        omega = WGS84Constants.ANGULAR_VELOCITY.value

        assert WGS84Constants.ROTATION_PERIOD.value == pytest.approx(2 * math.pi / omega)

    def test_constant_metadata(self):
        c = WGS84Constants.SEMI_MAJOR_AXIS

        assert c.unit == "m"
        assert c.uncertainty == 0.0
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.value = 0.0


class TestEllipsoidParameters:
    """Test suite for EllipsoidParameters."""

    def test_wgs84_derived_values(self):
        e = WGS84Ellipsoid

        assert e.name == "WGS84"
        assert e.a == 6_378_137.0
        assert e.b == pytest.approx(WGS84Constants.SEMI_MINOR_AXIS.value, abs=1e-6)
        assert e.flattening_inverse == pytest.approx(298.257223563)
        assert e.aspect_ratio == pytest.approx(WGS84Constants.ASPECT_RATIO.value, rel=1e-15)
        assert e.mean_radius == pytest.approx(WGS84Constants.MEAN_RADIUS.value, abs=1e-6)
        assert e.e2 == pytest.approx(0.00669437999014, rel=1e-11)
        assert e.ep2 == pytest.approx(0.00673949674228, rel=1e-11)

    def test_grs80_differs_slightly_from_wgs84(self):
        assert GRS80Ellipsoid.a == WGS84Ellipsoid.a
        assert GRS80Ellipsoid.b == pytest.approx(6_356_752.314140, abs=1e-3)
        assert 0 < WGS84Ellipsoid.b - GRS80Ellipsoid.b < 1e-3

    def test_b_is_less_than_a(self):
        for e in (WGS84Ellipsoid, GRS80Ellipsoid):
            assert e.b < e.a

    def test_sphere(self):
        """A zero flattening gives a sphere with infinite inverse flattening."""
        sphere = EllipsoidParameters(a=6_371_000.0, f=0.0, name="sphere")

        assert sphere.b == sphere.a
        assert sphere.mean_radius == sphere.a
        assert math.isinf(sphere.flattening_inverse)
        assert sphere.e2 == 0.0

    def test_hashable(self):
        assert hash(WGS84Ellipsoid) == hash(EllipsoidParameters(
            a=WGS84Constants.SEMI_MAJOR_AXIS.value,
            f=WGS84Constants.FLATTENING.value,
            name="WGS84"
        ))

    @pytest.mark.parametrize("a,f,expected", [
        (6_378_137.0, 1 / 298.257223563, True),
        (6_371_000.0, 0.0, True),
        (0.0, 0.003, False),
        (-6_378_137.0, 0.003, False),
        (6_378_137.0, 1.0, False),
        (6_378_137.0, 1.5, False),
        (6_378_137.0, -0.01, False),
        (math.inf, 0.003, False),
        (math.nan, 0.003, False),
        (6_378_137.0, math.nan, False),
    ])
    def test_is_valid(self, a, f, expected):
        """Construction accepts anything; is_valid flags malformed pairs."""
        assert EllipsoidParameters(a=a, f=f, name="candidate").is_valid() is expected
