"""
Inverse Transverse Mercator projection from planar meters to WGS84.

Uses the closed-form footpoint-latitude series (Snyder, "Map Projections:
A Working Manual") with the per-region cs2cs parameters from
``taipower_grid.regions``. Regions on a local datum get a three-parameter
geocentric shift afterwards.
"""

import math
from typing import Tuple

from ..regions import REGION_PARAMS, Ellipsoid, Region, RegionProjectionParams


def geodetic_to_ecef(
    latitude: float, longitude: float, height: float, ellipsoid: Ellipsoid
) -> Tuple[float, float, float]:
    """
    Convert geodetic coordinates to Earth-centred Earth-fixed meters.

    Args:
        latitude: Degrees
        longitude: Degrees
        height: Ellipsoidal height in meters
        ellipsoid: Reference ellipsoid
    """
    a = ellipsoid.semi_major_axis
    e2 = ellipsoid.eccentricity_squared

    lat = math.radians(latitude)
    lon = math.radians(longitude)
    sin_lat = math.sin(lat)
    cos_lat = math.cos(lat)

    n = a / math.sqrt(1 - e2 * sin_lat * sin_lat)

    x = (n + height) * cos_lat * math.cos(lon)
    y = (n + height) * cos_lat * math.sin(lon)
    z = (n * (1 - e2) + height) * sin_lat
    return x, y, z


def ecef_to_geodetic(
    x: float, y: float, z: float, ellipsoid: Ellipsoid
) -> Tuple[float, float]:
    """
    Convert Earth-centred Earth-fixed meters to latitude/longitude in degrees.

    Single-step (Bowring-style) approximation without iteration.
    """
    a = ellipsoid.semi_major_axis
    e2 = ellipsoid.eccentricity_squared

    p = math.sqrt(x * x + y * y)
    theta = math.atan2(z * a, p * a * (1 - e2))
    sin_theta = math.sin(theta)
    cos_theta = math.cos(theta)

    latitude = math.atan2(
        z + e2 * a * sin_theta ** 3,
        p - e2 * a * cos_theta ** 3,
    )
    longitude = math.atan2(y, x)
    return math.degrees(latitude), math.degrees(longitude)


class GeodeticProjector:
    """Projects planar grid meters to WGS84 latitude/longitude."""

    def project(
        self, x: float, y: float, params: RegionProjectionParams
    ) -> Tuple[float, float]:
        """
        Inverse Transverse Mercator projection.

        Args:
            x: Easting in meters
            y: Northing in meters
            params: Projection parameters of the region the point belongs to

        Returns:
            (latitude, longitude) in degrees
        """
        a = params.ellipsoid.semi_major_axis
        e2 = params.ellipsoid.eccentricity_squared
        k0 = params.scale_factor

        dx = x - params.false_easting
        dy = y - params.false_northing

        # Meridional arc
        m = dy / k0

        # Footpoint latitude
        e1 = (1 - math.sqrt(1 - e2)) / (1 + math.sqrt(1 - e2))
        mu = m / (a * (1 - e2 / 4 - 3 * e2 ** 2 / 64 - 5 * e2 ** 3 / 256))

        j1 = 3 * e1 / 2 - 27 * e1 ** 3 / 32
        j2 = 21 * e1 ** 2 / 16 - 55 * e1 ** 4 / 32
        j3 = 151 * e1 ** 3 / 96
        j4 = 1097 * e1 ** 4 / 512

        fp = (mu + j1 * math.sin(2 * mu) + j2 * math.sin(4 * mu)
              + j3 * math.sin(6 * mu) + j4 * math.sin(8 * mu))

        sin_fp = math.sin(fp)
        cos_fp = math.cos(fp)
        tan_fp = math.tan(fp)

        c1 = e2 * cos_fp * cos_fp / (1 - e2)
        t1 = tan_fp * tan_fp
        r1 = a * (1 - e2) / (1 - e2 * sin_fp * sin_fp) ** 1.5
        n1 = a / math.sqrt(1 - e2 * sin_fp * sin_fp)
        d = dx / (n1 * k0)

        q1 = n1 * tan_fp / r1
        q2 = d ** 2 / 2
        q3 = (5 + 3 * t1 + 10 * c1 - 4 * c1 ** 2 - 9 * e2) * d ** 4 / 24
        q4 = (61 + 90 * t1 + 298 * c1 + 45 * t1 ** 2 - 1.6 * e2 - 37 * e2 * c1) * d ** 6 / 720
        lat = fp - q1 * (q2 - q3 + q4)

        q6 = (1 + 2 * t1 + c1) * d ** 3 / 6
        q7 = (5 - 2 * c1 + 28 * t1 - 3 * c1 ** 2 + 8 * e2 + 24 * t1 ** 2) * d ** 5 / 120
        lon = math.radians(params.central_meridian) + (d - q6 + q7) / cos_fp

        latitude = math.degrees(lat)
        longitude = math.degrees(lon)

        shift = params.datum_shift
        if shift is not None:
            ex, ey, ez = geodetic_to_ecef(latitude, longitude, 0.0, params.ellipsoid)
            latitude, longitude = ecef_to_geodetic(
                ex + shift.dx, ey + shift.dy, ez + shift.dz, params.ellipsoid
            )

        return latitude, longitude

    def project_region(self, x: float, y: float, region: Region) -> Tuple[float, float]:
        """Project with the parameter set of a named region."""
        return self.project(x, y, REGION_PARAMS[region])
