from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from pyproj import CRS

from lascheck.core.ellipsoids import ReferenceEllipsoid
from lascheck.core.units import LinearUnit

ParamValue = Union[float, int, str, bool]


class Projection(ABC):
    """
    A map projection definition. Only the parameters are held here; the
    actual forward/inverse math is left to PROJ via ``to_crs``.
    """

    name: str

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def proj_parameters(self) -> Dict[str, ParamValue]:
        pass

    def to_proj4(self, ellipsoid: Optional[ReferenceEllipsoid] = None, unit: Optional[LinearUnit] = None) -> str:
        params = dict(self.proj_parameters())
        if ellipsoid is not None:
            params["a"] = ellipsoid.equatorial_radius
            params["rf"] = ellipsoid.inverse_flattening
        if unit is not None and params["proj"] != "longlat":
            params["units"] = unit.proj_name
        parts = []
        for key, value in params.items():
            if value is True:
                parts.append(f"+{key}")
            else:
                parts.append(f"+{key}={value}")
        parts.append("+no_defs")
        return " ".join(parts)

    def to_crs(self, ellipsoid: Optional[ReferenceEllipsoid] = None, unit: Optional[LinearUnit] = None) -> CRS:
        return CRS.from_proj4(self.to_proj4(ellipsoid, unit))


@dataclass(frozen=True)
class LongLat(Projection):
    name: str = field(default="longitude/latitude", init=False)

    @property
    def description(self) -> str:
        return self.name

    def proj_parameters(self) -> Dict[str, ParamValue]:
        return {"proj": "longlat"}


@dataclass(frozen=True)
class LatLong(Projection):
    name: str = field(default="latitude/longitude", init=False)

    @property
    def description(self) -> str:
        return self.name

    def proj_parameters(self) -> Dict[str, ParamValue]:
        return {"proj": "longlat", "axis": "neu"}


def _hemisphere(northern: bool) -> str:
    return "northern hemisphere" if northern else "southern hemisphere"


@dataclass(frozen=True)
class UTM(Projection):
    zone_number: int
    northern: bool
    zone_letter: str = " "
    name: str = field(default="", init=False)

    def __post_init__(self) -> None:
        if not 1 <= self.zone_number <= 60:
            raise ValueError(f"UTM zone must be between 1 and 60, got {self.zone_number}")
        if self.zone_letter == " ":
            label = str(self.zone_number)
        else:
            label = f"{self.zone_number}{self.zone_letter}"
        object.__setattr__(self, "name", f"UTM zone {label} ({_hemisphere(self.northern)})")

    @classmethod
    def from_zone_string(cls, zone: str) -> "UTM":
        """
        Parse a zone designator such as "17T" or "32U".
        Latitude band letters run from C to X; N and above are northern.
        """
        text = zone.strip().upper()
        digits = text.rstrip("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
        letter = text[len(digits):]
        if not digits.isdigit() or len(letter) != 1:
            raise ValueError(f"Invalid UTM zone designator: {zone!r}")
        if not "C" <= letter <= "X":
            raise ValueError(f"UTM latitude band must be between C and X, got {letter!r}")
        return cls(int(digits), letter >= "N", letter)

    @property
    def central_meridian(self) -> float:
        return (self.zone_number - 1) * 6 - 180 + 3

    @property
    def central_meridian_radians(self) -> float:
        return math.radians(self.central_meridian)

    @property
    def description(self) -> str:
        return f"UTM {self.zone_number} {_hemisphere(self.northern)}"

    def proj_parameters(self) -> Dict[str, ParamValue]:
        params: Dict[str, ParamValue] = {"proj": "utm", "zone": self.zone_number}
        if not self.northern:
            params["south"] = True
        return params


@dataclass(frozen=True)
class TransverseMercator(Projection):
    false_easting: float
    false_northing: float
    lat_origin: float
    central_meridian: float
    scale_factor: float
    name: str = field(default="Transverse Mercator", init=False)

    @property
    def lat_origin_radians(self) -> float:
        return math.radians(self.lat_origin)

    @property
    def central_meridian_radians(self) -> float:
        return math.radians(self.central_meridian)

    @property
    def description(self) -> str:
        return (
            f"false east/north: {self.false_easting:g}/{self.false_northing:g} [m], "
            f"origin lat/meridian long: {self.lat_origin:g}/{self.central_meridian:g}, "
            f"scale: {self.scale_factor:g}"
        )

    def proj_parameters(self) -> Dict[str, ParamValue]:
        return {
            "proj": "tmerc",
            "lat_0": self.lat_origin,
            "lon_0": self.central_meridian,
            "k": self.scale_factor,
            "x_0": self.false_easting,
            "y_0": self.false_northing,
        }


@dataclass(frozen=True)
class LambertConformalConic(Projection):
    false_easting: float
    false_northing: float
    lat_origin: float
    central_meridian: float
    std_parallel_1: float
    std_parallel_2: float
    name: str = field(default="Lambert Conformal Conic", init=False)

    @property
    def lat_origin_radians(self) -> float:
        return math.radians(self.lat_origin)

    @property
    def central_meridian_radians(self) -> float:
        return math.radians(self.central_meridian)

    @property
    def std_parallel_1_radians(self) -> float:
        return math.radians(self.std_parallel_1)

    @property
    def std_parallel_2_radians(self) -> float:
        return math.radians(self.std_parallel_2)

    @property
    def description(self) -> str:
        return (
            f"false east/north: {self.false_easting:g}/{self.false_northing:g} [m], "
            f"origin lat/ meridian long: {self.lat_origin:g}/{self.central_meridian:g}, "
            f"parallel 1st/2nd: {self.std_parallel_1:g}/{self.std_parallel_2:g}"
        )

    def proj_parameters(self) -> Dict[str, ParamValue]:
        return {
            "proj": "lcc",
            "lat_1": self.std_parallel_1,
            "lat_2": self.std_parallel_2,
            "lat_0": self.lat_origin,
            "lon_0": self.central_meridian,
            "x_0": self.false_easting,
            "y_0": self.false_northing,
        }


class ProjectionFactory:
    @staticmethod
    def create(method: str, **kwargs) -> Projection:
        if method == "longlat":
            return LongLat()
        elif method == "latlong":
            return LatLong()
        elif method == "utm":
            if kwargs.get("zone") is not None:
                return UTM.from_zone_string(kwargs["zone"])
            return UTM(
                zone_number=kwargs.get("zone_number"),
                northern=kwargs.get("northern", True),
            )
        elif method == "tm":
            return TransverseMercator(
                false_easting=kwargs.get("false_easting"),
                false_northing=kwargs.get("false_northing"),
                lat_origin=kwargs.get("lat_origin"),
                central_meridian=kwargs.get("central_meridian"),
                scale_factor=kwargs.get("scale_factor"),
            )
        elif method == "lcc":
            return LambertConformalConic(
                false_easting=kwargs.get("false_easting"),
                false_northing=kwargs.get("false_northing"),
                lat_origin=kwargs.get("lat_origin"),
                central_meridian=kwargs.get("central_meridian"),
                std_parallel_1=kwargs.get("std_parallel_1"),
                std_parallel_2=kwargs.get("std_parallel_2"),
            )
        else:
            raise ValueError(f"Unknown projection method: {method}")
