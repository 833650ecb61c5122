from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pyproj import CRS

from lascheck.core import ellipsoids
from lascheck.core.ellipsoids import ReferenceEllipsoid, get_ellipsoid
from lascheck.core.projections import Projection, ProjectionFactory
from lascheck.core.state_plane import StatePlaneLCC, find_state_plane
from lascheck.core.units import LinearUnit, classify_vertical_cs
from lascheck.models import UserCRSConfig


@dataclass
class CRSSlot:
    ellipsoid: Optional[ReferenceEllipsoid] = None
    projection: Optional[Projection] = None
    horizontal_unit: Optional[LinearUnit] = None
    elevation_unit: Optional[LinearUnit] = None
    user_defined_ellipsoid: bool = False
    description: Optional[str] = None

    def describe(self, text: str) -> None:
        # first match only
        if self.description is None:
            self.description = text


class CRSContext:
    """
    Active CRS selection, kept twice: once as decoded from the file's
    geokeys and once as declared by the user. Every setter takes
    ``from_geokeys`` to pick the slot and replaces what the slot held.
    """

    def __init__(self) -> None:
        self.geokeys = CRSSlot()
        self.user = CRSSlot()
        self.vertical_epsg = 0

    def slot(self, from_geokeys: bool = True) -> CRSSlot:
        return self.geokeys if from_geokeys else self.user

    def set_ellipsoid(self, ellipsoid_id: int, from_geokeys: bool = True) -> bool:
        ellipsoid = get_ellipsoid(ellipsoid_id)
        if ellipsoid is None:
            return False
        self.slot(from_geokeys).ellipsoid = ellipsoid
        return True

    def set_projection(self, projection: Projection, from_geokeys: bool = True) -> None:
        self.slot(from_geokeys).projection = projection

    def set_longlat_projection(self, from_geokeys: bool = True) -> bool:
        self.set_projection(ProjectionFactory.create("longlat"), from_geokeys)
        return True

    def set_latlong_projection(self, from_geokeys: bool = True) -> bool:
        self.set_projection(ProjectionFactory.create("latlong"), from_geokeys)
        return True

    def set_utm_projection(self, zone_number: int, northern: bool, from_geokeys: bool = True) -> bool:
        if not 1 <= zone_number <= 60:
            return False
        self.set_projection(ProjectionFactory.create("utm", zone_number=zone_number, northern=northern), from_geokeys)
        return True

    def set_utm_projection_from_zone(self, zone: str, from_geokeys: bool = False) -> bool:
        try:
            projection = ProjectionFactory.create("utm", zone=zone)
        except ValueError:
            return False
        self.set_projection(projection, from_geokeys)
        return True

    def set_transverse_mercator_projection(
        self,
        false_easting: float,
        false_northing: float,
        lat_origin: float,
        central_meridian: float,
        scale_factor: float,
        from_geokeys: bool = True,
    ) -> bool:
        self.set_projection(
            ProjectionFactory.create(
                "tm",
                false_easting=false_easting,
                false_northing=false_northing,
                lat_origin=lat_origin,
                central_meridian=central_meridian,
                scale_factor=scale_factor,
            ),
            from_geokeys,
        )
        return True

    def set_lambert_conformal_conic_projection(
        self,
        false_easting: float,
        false_northing: float,
        lat_origin: float,
        central_meridian: float,
        std_parallel_1: float,
        std_parallel_2: float,
        from_geokeys: bool = True,
    ) -> bool:
        self.set_projection(
            ProjectionFactory.create(
                "lcc",
                false_easting=false_easting,
                false_northing=false_northing,
                lat_origin=lat_origin,
                central_meridian=central_meridian,
                std_parallel_1=std_parallel_1,
                std_parallel_2=std_parallel_2,
            ),
            from_geokeys,
        )
        return True

    def set_state_plane(self, zone: str, datum: str, from_geokeys: bool = True) -> bool:
        """Select a state plane zone by mnemonic; datum is "NAD27" or "NAD83"."""
        entry = find_state_plane(zone, datum)
        if entry is None:
            return False
        self.set_ellipsoid(ellipsoids.NAD27 if datum == "NAD27" else ellipsoids.NAD83, from_geokeys)
        if isinstance(entry, StatePlaneLCC):
            self.set_lambert_conformal_conic_projection(
                entry.false_easting,
                entry.false_northing,
                entry.lat_origin,
                entry.central_meridian,
                entry.std_parallel_1,
                entry.std_parallel_2,
                from_geokeys,
            )
        else:
            self.set_transverse_mercator_projection(
                entry.false_easting,
                entry.false_northing,
                entry.lat_origin,
                entry.central_meridian,
                entry.scale_factor,
                from_geokeys,
            )
        self.slot(from_geokeys).describe(f"stateplane{datum[-2:]} {entry.zone}")
        return True

    def set_horizontal_unit(self, unit: LinearUnit, from_geokeys: bool = True) -> None:
        self.slot(from_geokeys).horizontal_unit = unit

    def set_elevation_unit(self, unit: LinearUnit, from_geokeys: bool = True) -> None:
        self.slot(from_geokeys).elevation_unit = unit

    def set_vertical_epsg(self, code: int) -> bool:
        if classify_vertical_cs(code) is None:
            return False
        self.vertical_epsg = code
        return True

    def description(self, from_geokeys: bool = True) -> Optional[str]:
        return self.slot(from_geokeys).description

    def to_crs(self, from_geokeys: bool = True) -> Optional[CRS]:
        """pyproj CRS for the slot's projection, None if no projection is selected."""
        slot = self.slot(from_geokeys)
        if slot.projection is None:
            return None
        return slot.projection.to_crs(slot.ellipsoid, slot.horizontal_unit)

    def to_proj4(self, from_geokeys: bool = True) -> Optional[str]:
        slot = self.slot(from_geokeys)
        if slot.projection is None:
            return None
        return slot.projection.to_proj4(slot.ellipsoid, slot.horizontal_unit)


def apply_user_overrides(context: CRSContext, config: UserCRSConfig) -> bool:
    """
    Fill the user slot from explicit settings. Returns False if any of the
    given settings could not be applied.
    """
    ok = True
    if config.ellipsoid_id is not None:
        ok = context.set_ellipsoid(config.ellipsoid_id, from_geokeys=False) and ok
    if config.utm_zone is not None:
        if context.set_utm_projection_from_zone(config.utm_zone, from_geokeys=False):
            if context.user.ellipsoid is None:
                context.set_ellipsoid(ellipsoids.WGS84, from_geokeys=False)
            context.user.describe(context.user.projection.description)
        else:
            ok = False
    if config.state_plane is not None:
        ok = context.set_state_plane(config.state_plane, config.state_plane_datum, from_geokeys=False) and ok
    if config.horizontal_unit is not None:
        context.set_horizontal_unit(LinearUnit(config.horizontal_unit), from_geokeys=False)
    if config.elevation_unit is not None:
        context.set_elevation_unit(LinearUnit(config.elevation_unit), from_geokeys=False)
    return ok
