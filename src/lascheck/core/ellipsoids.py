from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class ReferenceEllipsoid:
    """
    Reference ellipsoid as listed in the catalog.

    Only the defining constants are stored; polar radius, eccentricity,
    second eccentricity squared and the e1 series coefficient are derived
    on access.
    """
    id: int
    name: str
    equatorial_radius: float
    eccentricity_squared: float
    inverse_flattening: float

    @property
    def polar_radius(self) -> float:
        return self.equatorial_radius * math.sqrt(1.0 - self.eccentricity_squared)

    @property
    def eccentricity(self) -> float:
        return math.sqrt(self.eccentricity_squared)

    @property
    def eccentricity_prime_squared(self) -> float:
        return self.eccentricity_squared / (1.0 - self.eccentricity_squared)

    @property
    def e1(self) -> float:
        root = math.sqrt(1.0 - self.eccentricity_squared)
        return (1.0 - root) / (1.0 + root)

    def describe(self) -> str:
        return f"{self.id:2d} - {self.name} ({self.equatorial_radius:g} {self.eccentricity_squared:g})"


ELLIPSOIDS: Tuple[ReferenceEllipsoid, ...] = (
    ReferenceEllipsoid(1, "Airy", 6377563.396, 0.00667054, 299.3249646),
    ReferenceEllipsoid(2, "Australian National", 6378160.0, 0.006694542, 298.25),
    ReferenceEllipsoid(3, "Bessel 1841", 6377397.155, 0.006674372, 299.1528128),
    ReferenceEllipsoid(4, "Bessel 1841 (Nambia) ", 6377483.865, 0.006674372, 299.1528128),
    ReferenceEllipsoid(5, "Clarke 1866 (NAD-27)", 6378206.4, 0.006768658, 294.9786982),
    ReferenceEllipsoid(6, "Clarke 1880", 6378249.145, 0.006803511, 293.465),
    ReferenceEllipsoid(7, "Everest 1830", 6377276.345, 0.006637847, 300.8017),
    ReferenceEllipsoid(8, "Fischer 1960 (Mercury) ", 6378166.0, 0.006693422, 298.3),
    ReferenceEllipsoid(9, "Fischer 1968", 6378150.0, 0.006693422, 298.3),
    ReferenceEllipsoid(10, "GRS 1967", 6378160.0, 0.006694605, 298.247167427),
    ReferenceEllipsoid(11, "GRS 1980 (NAD-83)", 6378137.0, 0.00669438002290, 298.257222101),
    ReferenceEllipsoid(12, "Helmert 1906", 6378200.0, 0.006693422, 298.3),
    ReferenceEllipsoid(13, "Hough", 6378270.0, 0.00672267, 297.0),
    ReferenceEllipsoid(14, "International", 6378388.0, 0.00672267, 297.0),
    ReferenceEllipsoid(15, "Krassovsky", 6378245.0, 0.006693422, 298.3),
    ReferenceEllipsoid(16, "Modified Airy", 6377340.189, 0.00667054, 299.3249646),
    ReferenceEllipsoid(17, "Modified Everest", 6377304.063, 0.006637847, 300.8017),
    ReferenceEllipsoid(18, "Modified Fischer 1960", 6378155.0, 0.006693422, 298.3),
    ReferenceEllipsoid(19, "South American 1969", 6378160.0, 0.006694542, 298.25),
    ReferenceEllipsoid(20, "WGS 60", 6378165.0, 0.006693422, 298.3),
    ReferenceEllipsoid(21, "WGS 66", 6378145.0, 0.006694542, 298.25),
    ReferenceEllipsoid(22, "WGS-72", 6378135.0, 0.006694318, 298.26),
    ReferenceEllipsoid(23, "WGS-84", 6378137.0, 0.00669437999013, 298.257223563),
    ReferenceEllipsoid(24, "Indonesian National 1974", 6378160.0, 0.0066946091071419115, 298.2469988070381),
)

_BY_ID: Dict[int, ReferenceEllipsoid] = {e.id: e for e in ELLIPSOIDS}

AIRY = 1
BESSEL_1841 = 3
NAD27 = 5
NAD83 = 11
INTERNATIONAL = 14
SAD69 = 19
WGS72 = 22
WGS84 = 23
ID74 = 24
GDA94 = WGS84


def get_ellipsoid(ellipsoid_id: int) -> Optional[ReferenceEllipsoid]:
    """Catalog entry for ids 1..24, None otherwise."""
    return _BY_ID.get(ellipsoid_id)
