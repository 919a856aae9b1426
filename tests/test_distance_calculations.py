"""Unit tests for method dispatch and batch distances."""

import logging
import math

import numpy as np
import pytest

from common.constants import WGS84Constants
from common.types import Coordinate
from geodesy.distance_calculations import (
    DistanceMethod,
    geodesic_distance,
    geodesic_distance_batch,
    geodesic_distance_quantity,
    karney_inverse,
)
from geodesy.ellipsoid import EllipsoidParameters, GRS80Ellipsoid
from geodesy.haversine import haversine_distance
from geodesy.vincenty import SolverConfig, SolverState, solve_inverse, vincenty_inverse

HALF_MERIDIAN = 2 * WGS84Constants.MERIDIAN_QUADRANT.value


def pair_arrays(pairs):
    return (
        np.array([p1.latitude for p1, _ in pairs]),
        np.array([p1.longitude for p1, _ in pairs]),
        np.array([p2.latitude for _, p2 in pairs]),
        np.array([p2.longitude for _, p2 in pairs]),
    )


class TestGeodesicDistance:
    """Test suite for geodesic_distance."""

    @pytest.mark.parametrize("method", list(DistanceMethod))
    def test_reference_case(self, flinders_peak, buninyong, method):
        d = geodesic_distance(flinders_peak, buninyong, method)

        expected = 64_985.585355322924
        if method is DistanceMethod.HAVERSINE:
            assert d == pytest.approx(expected, rel=6e-3)
        else:
            assert d == pytest.approx(expected, abs=1e-3)

    def test_method_by_name(self, flinders_peak, buninyong):
        assert geodesic_distance(flinders_peak, buninyong, "haversine") == \
            haversine_distance(flinders_peak, buninyong)
        assert geodesic_distance(flinders_peak, buninyong, "vincenty") == \
            vincenty_inverse(flinders_peak, buninyong)[0]

    def test_unknown_method(self, flinders_peak, buninyong):
        with pytest.raises(ValueError):
            geodesic_distance(flinders_peak, buninyong, "euclidean")

    def test_solver_config_is_passed(self, flinders_peak, buninyong):
        d = geodesic_distance(flinders_peak, buninyong, config=SolverConfig(max_iterations=1))

        assert math.isnan(d)

    @pytest.mark.parametrize("method", list(DistanceMethod))
    def test_shared_input_contract(self, method):
        """Equal points give 0 and invalid coordinates give NaN for every method."""
        p = Coordinate(-34.579340, -57.534954)

        assert geodesic_distance(p, p, method) == 0.0
        assert math.isnan(geodesic_distance(p, Coordinate(91.0, 0.0), method))

    def test_antipode(self):
        """Only the Karney method resolves exact antipodes."""
        p1 = Coordinate(0.0, 0.0)
        p2 = Coordinate(0.0, 180.0)

        assert math.isnan(geodesic_distance(p1, p2, DistanceMethod.VINCENTY))
        assert geodesic_distance(p1, p2, DistanceMethod.KARNEY) == pytest.approx(HALF_MERIDIAN, abs=1e-3)

    def test_quantity(self, flinders_peak, buninyong):
        d = geodesic_distance_quantity(flinders_peak, buninyong)

        assert str(d.units) == "meter"
        assert d.to("km").magnitude == pytest.approx(64.985585355, rel=1e-9)

    def test_quantity_uses_solver_config(self, flinders_peak, buninyong):
        d = geodesic_distance_quantity(
            flinders_peak, buninyong, config=SolverConfig(max_iterations=1)
        )

        assert math.isnan(d.magnitude)
        assert str(d.units) == "meter"


class TestKarneyInverse:
    """Test suite for karney_inverse."""

    def test_matches_vincenty(self, flinders_peak, buninyong):
        karney = karney_inverse(flinders_peak, buninyong)
        vincenty = vincenty_inverse(flinders_peak, buninyong, compute_azimuth=True)

        assert karney == pytest.approx(vincenty, abs=1e-4)

    def test_equal_and_invalid(self):
        p = Coordinate(10.0, 10.0)

        assert karney_inverse(p, p) == (0.0, 0.0, 0.0)
        assert all(math.isnan(v) for v in karney_inverse(p, Coordinate(0.0, 200.0)))

    def test_ellipsoid(self, flinders_peak, buninyong):
        d_wgs84, _, _ = karney_inverse(flinders_peak, buninyong)
        d_grs80, _, _ = karney_inverse(flinders_peak, buninyong, GRS80Ellipsoid)

        assert d_grs80 == pytest.approx(d_wgs84, abs=1e-3)


class TestGeodesicDistanceBatch:
    """Test suite for geodesic_distance_batch."""

    @pytest.mark.parametrize("method", list(DistanceMethod))
    def test_matches_scalar(self, random_pairs, method):
        distances = geodesic_distance_batch(*pair_arrays(random_pairs), method=method)

        expected = [geodesic_distance(p1, p2, method) for p1, p2 in random_pairs]
        np.testing.assert_allclose(distances, expected, rtol=1e-12)

    def test_special_pairs(self, flinders_peak, buninyong):
        pairs = [
            (flinders_peak, buninyong),
            (Coordinate(0.0, 0.0), Coordinate(0.0, 180.0)),
            (Coordinate(91.0, 0.0), Coordinate(0.0, 0.0)),
            (flinders_peak, flinders_peak),
        ]
        arrays = pair_arrays(pairs)

        vincenty = geodesic_distance_batch(*arrays, method=DistanceMethod.VINCENTY)
        karney = geodesic_distance_batch(*arrays, method=DistanceMethod.KARNEY)

        assert vincenty[0] == pytest.approx(64_985.585355322924, abs=1e-6)
        assert np.isnan(vincenty[1])
        assert np.isnan(vincenty[2])
        assert vincenty[3] == 0.0

        assert karney[0] == pytest.approx(vincenty[0], abs=1e-3)
        assert karney[1] == pytest.approx(HALF_MERIDIAN, abs=1e-3)
        assert np.isnan(karney[2])
        assert karney[3] == 0.0

    @pytest.mark.parametrize("method", list(DistanceMethod))
    def test_broadcast_shape(self, method):
        lats = np.array([[0.0, 10.0], [20.0, 30.0]])

        distances = geodesic_distance_batch(0.0, 0.0, lats, 1.0, method=method)

        assert distances.shape == (2, 2)
        assert np.all(np.isfinite(distances))
        assert np.all(np.diff(distances.ravel()) > 0)

    def test_nan_results_are_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="geodesy.distance_calculations"):
            geodesic_distance_batch([0.0, 91.0], [0.0, 0.0], [1.0, 0.0], [0.0, 0.0])

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "1 of 2 vincenty distances are NaN" in warnings[0].getMessage()
        assert any("Computed 2 vincenty distances on WGS84" in r.getMessage() for r in caplog.records)


MALFORMED_ELLIPSOIDS = [
    EllipsoidParameters(a=0.0, f=0.003, name="zero axis"),
    EllipsoidParameters(a=-6_378_137.0, f=0.003, name="negative axis"),
    EllipsoidParameters(a=6_378_137.0, f=1.0, name="flat"),
    EllipsoidParameters(a=6_378_137.0, f=1.5, name="inverted"),
]


@pytest.mark.parametrize("ellipsoid", MALFORMED_ELLIPSOIDS, ids=lambda e: e.name)
class TestMalformedEllipsoid:
    """A malformed ellipsoid yields NaN from every entry point, never an exception."""

    def test_vincenty(self, flinders_peak, buninyong, ellipsoid):
        result = solve_inverse(flinders_peak, buninyong, ellipsoid=ellipsoid, compute_azimuth=True)

        assert result.state is SolverState.INVALID
        assert all(math.isnan(v) for v in vincenty_inverse(
            flinders_peak, buninyong, compute_azimuth=True, ellipsoid=ellipsoid
        ))

    def test_haversine(self, flinders_peak, buninyong, ellipsoid):
        assert math.isnan(haversine_distance(flinders_peak, buninyong, ellipsoid))

    @pytest.mark.parametrize("method", list(DistanceMethod))
    def test_geodesic_distance(self, flinders_peak, buninyong, ellipsoid, method):
        assert math.isnan(geodesic_distance(flinders_peak, buninyong, method, ellipsoid))
        assert all(math.isnan(v) for v in karney_inverse(flinders_peak, buninyong, ellipsoid))

    @pytest.mark.parametrize("method", list(DistanceMethod))
    def test_batch(self, flinders_peak, buninyong, ellipsoid, method):
        arrays = pair_arrays([(flinders_peak, buninyong), (flinders_peak, flinders_peak)])

        distances = geodesic_distance_batch(*arrays, method=method, ellipsoid=ellipsoid)

        assert np.isnan(distances[0])
        assert distances[1] == 0.0

    def test_identity_still_holds(self, flinders_peak, ellipsoid):
        for method in DistanceMethod:
            assert geodesic_distance(flinders_peak, flinders_peak, method, ellipsoid) == 0.0
