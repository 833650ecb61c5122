"""
Resolution of a projected CRS code (GeoTIFF ProjectedCSTypeGeoKey / EPSG)
into an ellipsoid and a projection.

Three rule families are tried in order:

1. UTM ranges: contiguous code blocks with a hemisphere, a zone offset and
   optionally a datum ellipsoid (WGS84 when the block has none).
2. Named special cases: national and regional grids with literal
   parameters, plus a few code ranges whose parameters follow a formula.
3. State plane codes: mapped to a zone mnemonic and looked up in the
   NAD27/NAD83 catalogs.

The families cover disjoint codes; ``check_tables()`` enforces this at
import time.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from lascheck.core import ellipsoids
from lascheck.core.crs_context import CRSContext
from lascheck.core.diagnostics import DiagnosticSink
from lascheck.core.projections import ProjectionFactory
from lascheck.core.state_plane import NAD27_CODES, NAD83_CODES, state_plane_for_code
from lascheck.core.units import SURVEY_FEET_TO_METER, LinearUnit


@dataclass(frozen=True)
class UTMRange:
    first: int
    last: int
    base: int
    northern: bool
    ellipsoid_id: Optional[int] = None

    def __contains__(self, code: int) -> bool:
        return self.first <= code <= self.last


UTM_RANGES: Tuple[UTMRange, ...] = (
    UTMRange(3154, 3157, 3147, True, ellipsoids.NAD83),      # NAD83(CSRS) 7N-10N
    UTMRange(3158, 3160, 3144, True, ellipsoids.NAD83),      # NAD83(CSRS) 14N-16N
    UTMRange(20137, 20138, 20100, True),                    # Adindan
    UTMRange(20437, 20439, 20400, True),                    # Ain el Abd
    UTMRange(20538, 20539, 20500, True),                    # Afgooye
    UTMRange(20822, 20824, 20800, False),                   # Aratu
    UTMRange(21148, 21150, 21100, False),                   # Batavia
    UTMRange(21817, 21818, 21800, True),                    # Bogota
    UTMRange(22032, 22033, 22000, False),                   # Camacupa
    UTMRange(22332, 22332, 22300, True),                    # Carthage
    UTMRange(22523, 22524, 22500, False),                   # Corrego Alegre
    UTMRange(22832, 22832, 22800, True),                    # Douala
    UTMRange(23028, 23038, 23000, True, ellipsoids.INTERNATIONAL),  # ED50
    UTMRange(23239, 23240, 23200, True),                    # Fahud
    UTMRange(23433, 23433, 23400, True),                    # Garoua
    UTMRange(23846, 23853, 23800, True, ellipsoids.ID74),   # ID74 north
    UTMRange(23886, 23894, 23840, False, ellipsoids.ID74),  # ID74 south
    UTMRange(23947, 23948, 23900, True),                    # Indian 1954
    UTMRange(24047, 24048, 24000, True),                    # Indian 1975
    UTMRange(24547, 24548, 24500, True),                    # Kertau
    UTMRange(24720, 24721, 24700, True),                    # La Canoa
    UTMRange(24818, 24821, 24800, True),                    # PSAD56 north
    UTMRange(24877, 24880, 24860, False),                   # PSAD56 south
    UTMRange(25231, 25231, 25200, True),                    # Lome
    UTMRange(25828, 25838, 25800, True, ellipsoids.NAD83),  # ETRS89
    UTMRange(25932, 25932, 25900, False),                   # Malongo 1987
    UTMRange(26237, 26237, 26200, True),                    # Massawa
    UTMRange(26331, 26332, 26300, True),                    # Minna
    UTMRange(26432, 26432, 26400, False),                   # Mhast
    UTMRange(26632, 26632, 26600, True),                    # M'poraloko north
    UTMRange(26692, 26692, 26660, False),                   # M'poraloko south
    UTMRange(26703, 26722, 26700, True, ellipsoids.NAD27),  # NAD27
    UTMRange(26903, 26923, 26900, True, ellipsoids.NAD83),  # NAD83
    UTMRange(28348, 28358, 28300, False, ellipsoids.GDA94),  # GDA94 MGA
    UTMRange(29118, 29122, 29100, True, ellipsoids.SAD69),  # SAD69 north
    UTMRange(29177, 29185, 29160, False, ellipsoids.SAD69),  # SAD69 south
    UTMRange(29220, 29221, 29200, False),                   # Sapper Hill
    UTMRange(29333, 29333, 29300, False),                   # Schwarzeck
    UTMRange(29635, 29636, 29600, True),                    # Sudan
    UTMRange(29738, 29739, 29700, False),                   # Tananarive
    UTMRange(29849, 29850, 29800, True),                    # Timbalai 1948
    UTMRange(30339, 30340, 30300, True),                    # TC 1948
    UTMRange(30729, 30732, 30700, True),                    # Nord Sahara
    UTMRange(31028, 31028, 31000, True),                    # Yoff
    UTMRange(31121, 31121, 31100, True),                    # Zanderij
    UTMRange(32201, 32260, 32200, True, ellipsoids.WGS72),
    UTMRange(32301, 32360, 32300, False, ellipsoids.WGS72),
    UTMRange(32401, 32460, 32400, True, ellipsoids.WGS72),   # WGS72BE
    UTMRange(32501, 32560, 32500, False, ellipsoids.WGS72),  # WGS72BE
    UTMRange(32601, 32660, 32600, True, ellipsoids.WGS84),
    UTMRange(32701, 32760, 32700, False, ellipsoids.WGS84),
)


@dataclass(frozen=True)
class SpecialCase:
    ellipsoid_id: int
    method: str
    params: Dict[str, float] = field(hash=False)
    unit: LinearUnit
    description: str


def _tm(false_easting, false_northing, lat_origin, central_meridian, scale_factor) -> Dict[str, float]:
    return {
        "false_easting": false_easting,
        "false_northing": false_northing,
        "lat_origin": lat_origin,
        "central_meridian": central_meridian,
        "scale_factor": scale_factor,
    }


def _lcc(false_easting, false_northing, lat_origin, central_meridian, std_parallel_1, std_parallel_2) -> Dict[str, float]:
    return {
        "false_easting": false_easting,
        "false_northing": false_northing,
        "lat_origin": lat_origin,
        "central_meridian": central_meridian,
        "std_parallel_1": std_parallel_1,
        "std_parallel_2": std_parallel_2,
    }


M = LinearUnit.METER
FTUS = LinearUnit.US_SURVEY_FOOT

_SPECIAL_CASE_ROWS: List[Tuple[int, SpecialCase]] = [
    (2180, SpecialCase(ellipsoids.NAD83, "tm", _tm(500000.0, -5300000.0, 0.0, 19.0, 0.9993), M,
                       "ETRS89 / Poland CS92")),
    (2193, SpecialCase(ellipsoids.NAD83, "tm", _tm(1600000.0, 10000000.0, 0.0, 173.0, 0.9996), M,
                       "NZGD2000")),
    (2195, SpecialCase(ellipsoids.NAD83, "tm", _tm(500000.0, 10000000.0, 0.0, -171.0, 0.9996), M,
                       "UTM zone 2S (American Samoa)")),
    (2924, SpecialCase(ellipsoids.NAD83, "lcc",
                       _lcc(11482916.667, 6561666.667, 37.66666666666666, -78.5, 39.2, 38.03333333333333), FTUS,
                       "NAD83(HARN) / Virginia North (ftUS)")),
    (2925, SpecialCase(ellipsoids.NAD83, "lcc",
                       _lcc(11482916.667, 3280833.333, 36.33333333333334, -78.5, 37.96666666666667, 36.76666666666667),
                       FTUS, "NAD83(HARN) / Virginia South (ftUS)")),
    (3034, SpecialCase(ellipsoids.NAD83, "lcc", _lcc(4000000.0, 2800000.0, 52.0, 10.0, 35.0, 65.0), M,
                       "ETRS89 / ETRS-LCC")),
    (3046, SpecialCase(ellipsoids.NAD83, "tm", _tm(500000.0, 0.0, 0.0, 21.0, 0.9996), M, "ETRS89 / ETRS-TM34")),
    (3047, SpecialCase(ellipsoids.NAD83, "tm", _tm(500000.0, 0.0, 0.0, 27.0, 0.9996), M, "ETRS89 / ETRS-TM35")),
    (3048, SpecialCase(ellipsoids.NAD83, "tm", _tm(500000.0, 0.0, 0.0, 33.0, 0.9996), M, "ETRS89 / ETRS-TM36")),
    (3067, SpecialCase(ellipsoids.NAD83, "tm", _tm(500000.0, 0.0, 0.0, 27.0, 0.9996), M,
                       "ETRS89 / ETRS-TM35FIN")),
    (3141, SpecialCase(ellipsoids.INTERNATIONAL, "utm", {"zone_number": 60, "northern": False}, M,
                       "Fiji 1956 / UTM zone 60S")),
    (3142, SpecialCase(ellipsoids.INTERNATIONAL, "utm", {"zone_number": 1, "northern": False}, M,
                       "Fiji 1956 / UTM zone 1S")),
    (3460, SpecialCase(ellipsoids.WGS72, "tm", _tm(2000000.0, 4000000.0, -17.0, 178.75, 0.99985), M,
                       "Fiji 1986 / Fiji Map Grid")),
    (3582, SpecialCase(ellipsoids.NAD83, "lcc",
                       _lcc(1312333.333 * SURVEY_FEET_TO_METER, 0.0, 37.66666666666666, -77.0, 39.45, 38.3), FTUS,
                       "NAD83(NSRS2007) / Maryland (ftUS)")),
    (3794, SpecialCase(ellipsoids.NAD83, "tm", _tm(500000.0, -5000000.0, 0.0, 15.0, 0.9999), M,
                       "Slovenia 1996 / Slovene National Grid")),
    (3912, SpecialCase(ellipsoids.BESSEL_1841, "tm", _tm(500000.0, -5000000.0, 0.0, 15.0, 0.9999), M,
                       "MGI 1901 / Slovene National Grid")),
    (4647, SpecialCase(ellipsoids.NAD83, "tm", _tm(32500000.0, 0.0, 0.0, 9.0, 0.9996), M,
                       "ETRS89 / UTM zone 32N (zE-N)")),
    (5650, SpecialCase(ellipsoids.NAD83, "tm", _tm(33500000.0, 0.0, 0.0, 15.0, 0.9996), M,
                       "ETRS89 / UTM zone 33N (zE-N)")),
    (27700, SpecialCase(ellipsoids.AIRY, "tm", _tm(400000.0, -100000.0, 49.0, -2.0, 0.9996012717), M,
                        "OSGB 1936 / British National Grid")),
    (31370, SpecialCase(ellipsoids.INTERNATIONAL, "lcc",
                        _lcc(150000.013, 5400088.438, 90.0, 4.367486666666666, 51.16666723333333, 49.8333339), M,
                        "Belge 1972 / Belgian Lambert 72")),
]


def _rgf93(code: int) -> SpecialCase:
    # CC42..CC50: one degree and 1,000,000 m false northing per zone
    v = code - 3942
    return SpecialCase(
        ellipsoids.NAD83, "lcc",
        _lcc(1700000.0, 1200000.0 + v * 1000000.0, 42.0 + v, 3.0, 41.25 + v, 42.75 + v), M,
        f"RGF93 / CC{code - 3900} Reseau_Geodesique_Francais_1993",
    )


_DKTM_MERIDIAN_SHIFT = (0.0, 1.0, 2.75, 6.0)


def _dktm(code: int) -> SpecialCase:
    v = (code - 4093) % 4 + 1
    return SpecialCase(
        ellipsoids.NAD83, "tm",
        _tm(200000.0 * v, -5000000.0, 0.0, 9.0 + _DKTM_MERIDIAN_SHIFT[v - 1], 0.99998), M,
        f"ETRS89 / DKTM{v}",
    )


def _ntm(code: int) -> SpecialCase:
    v = code - 5100
    return SpecialCase(
        ellipsoids.NAD83, "tm", _tm(100000.0, 1000000.0, 58.0, v + 0.5, 1.0), M,
        f"ETRS89 / NTM zone {v}",
    )


PARAMETRIC_RANGES: Tuple[Tuple[int, int, Callable[[int], SpecialCase]], ...] = (
    (3942, 3950, _rgf93),
    (4093, 4096, _dktm),
    (5105, 5130, _ntm),
)


def _build_special_cases(rows: Iterable[Tuple[int, SpecialCase]]) -> Dict[int, SpecialCase]:
    table: Dict[int, SpecialCase] = {}
    for code, case in rows:
        if code in table:
            raise ValueError(f"Duplicate special-case CRS code: {code}")
        table[code] = case
    return table


SPECIAL_CASES: Dict[int, SpecialCase] = _build_special_cases(_SPECIAL_CASE_ROWS)


def find_utm_range(code: int) -> Optional[UTMRange]:
    for rule in UTM_RANGES:
        if code in rule:
            return rule
    return None


def find_special_case(code: int) -> Optional[SpecialCase]:
    if code in SPECIAL_CASES:
        return SPECIAL_CASES[code]
    for first, last, build in PARAMETRIC_RANGES:
        if first <= code <= last:
            return build(code)
    return None


def check_tables() -> None:
    """Raise ValueError if any code is claimed by more than one rule family."""
    owners: Dict[int, str] = {}

    def claim(code: int, owner: str) -> None:
        if code in owners:
            raise ValueError(f"CRS code {code} claimed by both {owners[code]} and {owner}")
        owners[code] = owner

    for rule in UTM_RANGES:
        for code in range(rule.first, rule.last + 1):
            claim(code, "UTM range")
    for code in SPECIAL_CASES:
        claim(code, "special case")
    for first, last, _ in PARAMETRIC_RANGES:
        for code in range(first, last + 1):
            claim(code, "special case range")
    for code in NAD27_CODES:
        claim(code, "NAD27 state plane")
    for code in NAD83_CODES:
        claim(code, "NAD83 state plane")


check_tables()


def _apply_special_case(case: SpecialCase, context: CRSContext, from_geokeys: bool) -> None:
    context.set_ellipsoid(case.ellipsoid_id, from_geokeys)
    context.set_projection(ProjectionFactory.create(case.method, **case.params), from_geokeys)
    context.set_horizontal_unit(case.unit, from_geokeys)
    context.slot(from_geokeys).describe(case.description)


def resolve_projected_cs(
    code: int,
    context: CRSContext,
    sink: Optional[DiagnosticSink] = None,
    from_geokeys: bool = True,
) -> bool:
    """
    Select ellipsoid and projection for a projected CRS code.

    Returns False, and reports the code as unsupported, if no rule knows it.
    Nothing in the context changes for an unresolved code.
    """
    rule = find_utm_range(code)
    if rule is not None:
        zone = code - rule.base
        if context.set_utm_projection(zone, rule.northern, from_geokeys):
            ellipsoid_id = rule.ellipsoid_id if rule.ellipsoid_id is not None else ellipsoids.WGS84
            context.set_ellipsoid(ellipsoid_id, from_geokeys)
            context.slot(from_geokeys).describe(context.slot(from_geokeys).projection.description)
            return True

    case = find_special_case(code)
    if case is not None:
        _apply_special_case(case, context, from_geokeys)
        return True

    state_plane = state_plane_for_code(code)
    if state_plane is not None:
        datum, zone_name = state_plane
        if context.set_state_plane(zone_name, datum, from_geokeys):
            return True

    if sink is not None:
        sink.add_unsupported("ProjectedCSTypeGeoKey", code, f"{code} not implemented")
    return False
