# tests/domain/test_geo_math.py
import math

import numpy as np

from campus_router.domain import geo_math


def test_identical_points_are_zero():
    assert geo_math.distance(12.193817, 79.082816, 12.193817, 79.082816) == 0.0


def test_one_degree_of_latitude():
    # arc length of 1 degree on a 6371 km sphere
    expected = geo_math.EARTH_RADIUS_M * math.pi / 180.0
    assert abs(geo_math.distance(0.0, 0.0, 1.0, 0.0) - expected) < 1e-6


def test_symmetric():
    a = geo_math.distance(12.1928, 79.0829, 12.1938, 79.0834)
    b = geo_math.distance(12.1938, 79.0834, 12.1928, 79.0829)
    assert abs(a - b) < 1e-9


def test_campus_scale_distance_is_plausible():
    # two blocks ~120 m apart on the survey campus
    d = geo_math.distance(12.193817, 79.082816, 12.192795, 79.082949)
    assert 100.0 < d < 130.0


def test_vectorized_matches_scalar():
    lats = np.array([12.193817, 12.192795, 12.192571, -33.0])
    lons = np.array([79.082816, 79.082949, 79.082783, 151.0])
    got = geo_math.distance_many(12.1931, 79.0830, lats, lons)
    want = [geo_math.distance(12.1931, 79.0830, la, lo) for la, lo in zip(lats, lons)]
    assert np.allclose(got, want, rtol=0, atol=1e-6)


def test_antipodal_pairs_never_fail():
    # rounding pushes the haversine term past 1 for some of these
    rng = np.random.default_rng(11)
    lats = rng.uniform(-89.0, 89.0, 2000)
    lons = rng.uniform(-180.0, 180.0, 2000)
    half = math.pi * geo_math.EARTH_RADIUS_M
    for la, lo in zip(lats, lons):
        d = geo_math.distance(la, lo, -la, lo + 180.0)
        assert abs(d - half) < 1.0
    got = geo_math.distance_many(69.5123, 86.5812, -lats, lons + 180.0)
    assert np.isfinite(got).all()
    assert abs(geo_math.distance(69.5123, 86.5812, -69.5123, 86.5812 + 180.0) - half) < 1.0
