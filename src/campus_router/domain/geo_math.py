"""
Geodesy helpers.

Haversine is the only distance metric used for node selection and for
deriving edge weights the data does not supply.
"""

from __future__ import annotations

import math

import numpy as np

EARTH_RADIUS_M: float = 6_371_000.0


def distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in meters between two lat/lon points."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlmb = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    a = min(1.0, max(0.0, a))  # rounding can push near-antipodal pairs past 1
    return EARTH_RADIUS_M * (2 * math.atan2(math.sqrt(a), math.sqrt(1 - a)))


def distance_many(lat: float, lon: float, lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
    """Vectorized `distance` from one point to many (degrees in, meters out)."""
    phi1 = math.radians(lat)
    phi2 = np.radians(lats)
    dphi = np.radians(np.asarray(lats, dtype=float) - lat)
    dlmb = np.radians(np.asarray(lons, dtype=float) - lon)
    a = np.sin(dphi / 2) ** 2 + math.cos(phi1) * np.cos(phi2) * np.sin(dlmb / 2) ** 2
    a = np.clip(a, 0.0, 1.0)
    return EARTH_RADIUS_M * (2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a)))
