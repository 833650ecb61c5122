"""
Single forward pass over a GeoKeyDirectory.

Ellipsoid and unit keys are last-write-wins. The projection is taken from
whichever key resolves one first (model type geographic or a projected CRS
code); later projection keys are ignored. Projection parameter keys only
record offsets into the GeoDoubleParams array; they are turned into a
generic TM/LCC projection after the pass, and only when no CRS code matched.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from lascheck.core.crs_codes import resolve_projected_cs
from lascheck.core.crs_context import CRSContext
from lascheck.core.diagnostics import DiagnosticSink
from lascheck.core.units import linear_unit_from_code
from lascheck.domain.schemas import GeoKeyEntry

logger = logging.getLogger(__name__)

GT_MODEL_TYPE = 1024
GEOGRAPHIC_TYPE = 2048
GEOG_GEODETIC_DATUM = 2050
GEOG_LINEAR_UNITS = 2052
GEOG_ELLIPSOID = 2056
PROJECTED_CS_TYPE = 3072
PROJ_COORD_TRANS = 3075
PROJ_LINEAR_UNITS = 3076
PROJ_STD_PARALLEL_1 = 3078
PROJ_STD_PARALLEL_2 = 3079
PROJ_NAT_ORIGIN_LAT = 3081
PROJ_FALSE_EASTING = 3082
PROJ_FALSE_NORTHING = 3083
PROJ_CENTER_LONG = 3088
PROJ_SCALE_AT_NAT_ORIGIN = 3092
VERTICAL_CS_TYPE = 4096
VERTICAL_UNITS = 4099

KEY_NAMES: Dict[int, str] = {
    GT_MODEL_TYPE: "GTModelTypeGeoKey",
    GEOGRAPHIC_TYPE: "GeographicTypeGeoKey",
    GEOG_GEODETIC_DATUM: "GeogGeodeticDatumGeoKey",
    GEOG_LINEAR_UNITS: "GeogLinearUnitsGeoKey",
    GEOG_ELLIPSOID: "GeogEllipsoidGeoKey",
    PROJECTED_CS_TYPE: "ProjectedCSTypeGeoKey",
    PROJ_COORD_TRANS: "ProjCoordTransGeoKey",
    PROJ_LINEAR_UNITS: "ProjLinearUnitsGeoKey",
    VERTICAL_CS_TYPE: "VerticalCSTypeGeoKey",
    VERTICAL_UNITS: "VerticalUnitsGeoKey",
}

MODEL_TYPE_GEOGRAPHIC = 2
USER_DEFINED = 32767

CT_TRANSVERSE_MERCATOR = 1
CT_LAMBERT_CONF_CONIC_2SP = 8

UNSUPPORTED_TRANSFORMS: Dict[int, str] = {
    2: "TransvMercator_Modified_Alaska",
    3: "ObliqueMercator",
    4: "ObliqueMercator_Laborde",
    5: "ObliqueMercator_Rosenmund",
    6: "ObliqueMercator_Spherical",
    7: "Mercator",
    9: "LambertConfConic_Helmert",
    10: "LambertAzimEqualArea",
    11: "AlbersEqualArea",
    12: "AzimuthalEquidistant",
    13: "EquidistantConic",
    14: "Stereographic",
    15: "PolarStereographic",
    16: "ObliqueStereographic",
    17: "Equirectangular",
    18: "CassiniSoldner",
    19: "Gnomonic",
    20: "MillerCylindrical",
    21: "Orthographic",
    22: "Polyconic",
    23: "Robinson",
    24: "Sinusoidal",
    25: "VanDerGrinten",
    26: "NewZealandMapGrid",
    27: "TransvMercator_SouthOriented",
}

# EPSG ellipsoid-based codes share their last two digits across the
# GCSE_ (40xx), DatumE_ (60xx) and Ellipse_ (70xx) families.
_ELLIPSOID_BY_SUFFIX: Dict[int, int] = {
    1: 1, 2: 16, 3: 2, 4: 3, 5: 3, 6: 4, 8: 5, 9: 5,
    10: 6, 11: 6, 12: 6, 13: 6, 14: 6, 34: 6,
    15: 7, 16: 7, 17: 7, 18: 17, 19: 11, 20: 12,
    22: 14, 23: 14, 24: 15, 30: 23,
}

_GEOGRAPHIC_TYPES: Dict[int, int] = {4267: 5, 4269: 11, 4322: 22, 4326: 23}
_GEODETIC_DATUMS: Dict[int, int] = {6202: 2, 6203: 2, 6267: 5, 6269: 11, 6322: 22, 6326: 23}

_ELLIPSOID_KEY_FAMILY = {
    GEOGRAPHIC_TYPE: (4000, _GEOGRAPHIC_TYPES),
    GEOG_GEODETIC_DATUM: (6000, _GEODETIC_DATUMS),
    GEOG_ELLIPSOID: (7000, {}),
}


def ellipsoid_for_key(key_id: int, value: int) -> Optional[int]:
    """Ellipsoid catalog id for a geographic/datum/ellipsoid key value, or None."""
    base, named = _ELLIPSOID_KEY_FAMILY[key_id]
    if value in named:
        return named[value]
    if base < value < base + 100:
        return _ELLIPSOID_BY_SUFFIX.get(value - base)
    return None


@dataclass
class _ParameterOffsets:
    std_parallel_1: int = -1
    std_parallel_2: int = -1
    nat_origin_lat: int = -1
    false_easting: int = -1
    false_northing: int = -1
    center_long: int = -1
    scale: int = -1


_OFFSET_FIELDS = {
    PROJ_STD_PARALLEL_1: "std_parallel_1",
    PROJ_STD_PARALLEL_2: "std_parallel_2",
    PROJ_NAT_ORIGIN_LAT: "nat_origin_lat",
    PROJ_FALSE_EASTING: "false_easting",
    PROJ_FALSE_NORTHING: "false_northing",
    PROJ_CENTER_LONG: "center_long",
    PROJ_SCALE_AT_NAT_ORIGIN: "scale",
}


def _params(offsets: Sequence[int], doubles: Sequence[float]) -> Optional[list]:
    if any(offset < 0 or offset >= len(doubles) for offset in offsets):
        return None
    return [doubles[offset] for offset in offsets]


def interpret_geokeys(
    entries: Sequence[GeoKeyEntry],
    double_params: Sequence[float],
    context: CRSContext,
    sink: Optional[DiagnosticSink] = None,
) -> bool:
    """
    Decode ``entries`` into the geokeys slot of ``context``.

    Returns True if a projection was selected, either by a key or by the
    generic TM/LCC fallback from the double parameters.
    """
    slot = context.geokeys
    has_projection = False
    transform = 0
    offsets = _ParameterOffsets()

    def unsupported(key_id: int, value: int, note: str) -> None:
        if sink is not None:
            sink.add_unsupported(KEY_NAMES.get(key_id, str(key_id)), value, note)
        else:
            logger.debug("%s: %s", KEY_NAMES.get(key_id, key_id), note)

    for entry in entries:
        key_id = entry.key_id
        value = entry.value_offset

        if key_id == GT_MODEL_TYPE:
            if value == MODEL_TYPE_GEOGRAPHIC and not has_projection:
                has_projection = context.set_longlat_projection(True)
                slot.describe(slot.projection.description)
        elif key_id in _ELLIPSOID_KEY_FAMILY:
            if value == USER_DEFINED:
                if key_id in (GEOGRAPHIC_TYPE, GEOG_GEODETIC_DATUM):
                    slot.user_defined_ellipsoid = True
                continue
            ellipsoid_id = ellipsoid_for_key(key_id, value)
            if ellipsoid_id is None:
                unsupported(key_id, value, f"look-up for {value} not implemented")
            else:
                context.set_ellipsoid(ellipsoid_id, True)
        elif key_id == GEOG_LINEAR_UNITS:
            if linear_unit_from_code(value) is None:
                unsupported(key_id, value, f"look-up for {value} not implemented")
        elif key_id == PROJECTED_CS_TYPE:
            if value != USER_DEFINED and not has_projection:
                has_projection = resolve_projected_cs(value, context, sink, from_geokeys=True)
        elif key_id == PROJ_COORD_TRANS:
            transform = 0
            if value in (CT_TRANSVERSE_MERCATOR, CT_LAMBERT_CONF_CONIC_2SP):
                transform = value
            elif value in UNSUPPORTED_TRANSFORMS:
                unsupported(key_id, value, f"{UNSUPPORTED_TRANSFORMS[value]} not implemented")
            else:
                unsupported(key_id, value, f"look-up for {value} not implemented")
        elif key_id == PROJ_LINEAR_UNITS:
            unit = linear_unit_from_code(value)
            if unit is None:
                unsupported(key_id, value, f"look-up for {value} not implemented")
            else:
                context.set_horizontal_unit(unit, True)
        elif key_id in _OFFSET_FIELDS:
            setattr(offsets, _OFFSET_FIELDS[key_id], value)
        elif key_id == VERTICAL_CS_TYPE:
            if not context.set_vertical_epsg(value):
                unsupported(key_id, value, f"look-up for {value} not implemented")
        elif key_id == VERTICAL_UNITS:
            unit = linear_unit_from_code(value)
            if unit is None:
                unsupported(key_id, value, f"look-up for {value} not implemented")
            else:
                context.set_elevation_unit(unit, True)

    if has_projection:
        return True

    if transform == CT_TRANSVERSE_MERCATOR:
        values = _params(
            (offsets.false_easting, offsets.false_northing, offsets.nat_origin_lat, offsets.center_long, offsets.scale),
            double_params,
        )
        if values is not None:
            context.set_transverse_mercator_projection(*values, from_geokeys=True)
            slot.describe("generic transverse mercator")
            return True
    elif transform == CT_LAMBERT_CONF_CONIC_2SP:
        values = _params(
            (
                offsets.false_easting,
                offsets.false_northing,
                offsets.nat_origin_lat,
                offsets.center_long,
                offsets.std_parallel_1,
                offsets.std_parallel_2,
            ),
            double_params,
        )
        if values is not None:
            context.set_lambert_conformal_conic_projection(*values, from_geokeys=True)
            slot.describe("generic lambert conformal conic")
            return True
    return False
