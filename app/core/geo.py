"""Geo utilities: approximate flat-earth distance used by the nearby-venue filter."""

import math

# Rough length of one degree of latitude, applied to both axes
KM_PER_DEGREE = 111.0


def approx_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Approximate distance between two (lat, lon) points in kilometers.

    Euclidean distance in degrees scaled by KM_PER_DEGREE. Ignores the earth's
    curvature and the shrinking of longitude degrees away from the equator, so
    east-west distances are overstated at high latitudes.
    """
    return math.sqrt((lat2 - lat1) ** 2 + (lon2 - lon1) ** 2) * KM_PER_DEGREE
