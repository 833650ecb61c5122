"""
US state plane zone catalogs.

Four static tables (NAD27/NAD83 x Lambert Conformal Conic/Transverse Mercator)
plus the EPSG projected CRS codes that map onto their zone mnemonics.
Parameters are in meters and degrees.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class StatePlaneLCC:
    geokey: int
    zone: str
    false_easting: float
    false_northing: float
    lat_origin: float
    central_meridian: float
    std_parallel_1: float
    std_parallel_2: float


@dataclass(frozen=True)
class StatePlaneTM:
    geokey: int
    zone: str
    false_easting: float
    false_northing: float
    lat_origin: float
    central_meridian: float
    scale_factor: float


StatePlaneZone = Union[StatePlaneLCC, StatePlaneTM]

# geokey, zone, false easting, false northing, origin lat, central meridian, 1st std parallel, 2nd std parallel
_LCC_NAD27_ROWS = (
    (26740, "AK_10", 914401.8288, 0, 51, -176, 51.83333333, 53.83333333),
    (26751, "AR_N", 609601.2192, 0, 34.33333333, -92, 34.93333333, 36.23333333),
    (26752, "AR_S", 609601.2192, 0, 32.66666667, -92, 33.3, 34.76666667),
    (26741, "CA_I", 609601.2192, 0, 39.33333333, -122, 40, 41.66666667),
    (26742, "CA_II", 609601.2192, 0, 37.66666667, -122, 38.33333333, 39.83333333),
    (26743, "CA_III", 609601.2192, 0, 36.5, -120.5, 37.06666667, 38.43333333),
    (26744, "CA_IV", 609601.2192, 0, 35.33333333, -119, 36, 37.25),
    (26745, "CA_V", 609601.2192, 0, 33.5, -118, 34.03333333, 35.46666667),
    (26746, "CA_VI", 609601.2192, 0, 32.16666667, -116.25, 32.78333333, 33.88333333),
    (26747, "CA_VII", 1276106.451, 1268253.007, 34.13333333, -118.3333333, 33.86666667, 34.41666667),
    (26753, "CO_N", 609601.2192, 0, 39.33333333, -105.5, 39.71666667, 40.78333333),
    (26754, "CO_C", 609601.2192, 0, 37.83333333, -105.5, 38.45, 39.75),
    (26755, "CO_S", 609601.2192, 0, 36.66666667, -105.5, 37.23333333, 38.43333333),
    (26756, "CT", 182880.3658, 0, 40.83333333, -72.75, 41.2, 41.86666667),
    (26760, "FL_N", 609601.2192, 0, 29, -84.5, 29.58333333, 30.75),
    (26775, "IA_N", 609601.2192, 0, 41.5, -93.5, 42.06666667, 43.26666667),
    (26776, "IA_S", 609601.2192, 0, 40, -93.5, 40.61666667, 41.78333333),
    (26777, "KS_N", 609601.2192, 0, 38.33333333, -98, 38.71666667, 39.78333333),
    (26778, "KS_S", 609601.2192, 0, 36.66666667, -98.5, 37.26666667, 38.56666667),
    (26779, "KY_N", 609601.2192, 0, 37.5, -84.25, 37.96666667, 38.96666667),
    (26780, "KY_S", 609601.2192, 0, 36.33333333, -85.75, 36.73333333, 37.93333333),
    (26781, "LA_N", 609601.2192, 0, 30.66666667, -92.5, 31.16666667, 32.66666667),
    (26782, "LA_S", 609601.2192, 0, 28.66666667, -91.33333333, 29.3, 30.7),
    (26785, "MD", 243840.4877, 0, 37.83333333, -77, 38.3, 39.45),
    (26786, "MA_M", 182880.3658, 0, 41, -71.5, 41.71666667, 42.68333333),
    (26787, "MA_I", 60960.12192, 0, 41, -70.5, 41.28333333, 41.48333333),
    (26788, "MI_N", 609601.2192, 0, 44.78333333, -87, 45.48333333, 47.08333333),
    (26789, "MI_C", 609601.2192, 0, 43.31666667, -84.33333333, 44.18333333, 45.7),
    (26790, "MI_S", 609601.2192, 0, 41.5, -84.33333333, 42.1, 43.66666667),
    (26791, "MN_N", 609601.2192, 0, 46.5, -93.1, 47.03333333, 48.63333333),
    (26792, "MN_C", 609601.2192, 0, 45, -94.25, 45.61666667, 47.05),
    (26793, "MN_S", 609601.2192, 0, 43, -94, 43.78333333, 45.21666667),
    (32001, "MT_N", 609601.2192, 0, 47, -109.5, 47.85, 48.71666667),
    (32002, "MT_C", 609601.2192, 0, 45.83333333, -109.5, 46.45, 47.88333333),
    (32003, "MT_S", 609601.2192, 0, 44, -109.5, 44.86666667, 46.4),
    (32005, "NE_N", 609601.2192, 0, 41.33333333, -100, 41.85, 42.81666667),
    (32006, "NE_S", 609601.2192, 0, 39.66666667, -99.5, 40.28333333, 41.71666667),
    (32018, "NY_LI", 609601.2192, 30480.06096, 40.5, -74, 40.66666667, 41.03333333),
    (32019, "NC", 609601.2192, 0, 33.75, -79, 34.33333333, 36.16666667),
    (32020, "ND_N", 609601.2192, 0, 47, -100.5, 47.43333333, 48.73333333),
    (32021, "ND_S", 609601.2192, 0, 45.66666667, -100.5, 46.18333333, 47.48333333),
    (32022, "OH_N", 609601.2192, 0, 39.66666667, -82.5, 40.43333333, 41.7),
    (32023, "OH_S", 609601.2192, 0, 38, -82.5, 38.73333333, 40.03333333),
    (32024, "OK_N", 609601.2192, 0, 35, -98, 35.56666667, 36.76666667),
    (32025, "OK_S", 609601.2192, 0, 33.33333333, -98, 33.93333333, 35.23333333),
    (32026, "OR_N", 609601.2192, 0, 43.66666667, -120.5, 44.33333333, 46),
    (32027, "OR_S", 609601.2192, 0, 41.66666667, -120.5, 42.33333333, 44),
    (32028, "PA_N", 609601.2192, 0, 40.16666667, -77.75, 40.88333333, 41.95),
    (32029, "PA_S", 609601.2192, 0, 39.33333333, -77.75, 39.93333333, 40.96666667),
    (32059, "PR", 152400.3048, 0, 17.83333333, -66.43333333, 18.03333333, 18.43333333),
    (32060, "St.Croix", 152400.3048, 30480.06096, 17.83333333, -66.43333333, 18.03333333, 18.43333333),
    (32031, "SC_N", 609601.2192, 0, 33, -81, 33.76666667, 34.96666667),
    (32033, "SC_S", 609601.2192, 0, 31.83333333, -81, 32.33333333, 33.66666667),
    (32034, "SD_N", 609601.2192, 0, 43.83333333, -100, 44.41666667, 45.68333333),
    (32035, "SD_S", 609601.2192, 0, 42.33333333, -100.3333333, 42.83333333, 44.4),
    (2204, "TN", 609601.2192, 30480.06096, 34.66666667, -86, 35.25, 36.41666667),
    (32037, "TX_N", 609601.2192, 0, 34, -101.5, 34.65, 36.18333333),
    (32038, "TX_NC", 609601.2192, 0, 31.66666667, -97.5, 32.13333333, 33.96666667),
    (32039, "TX_C", 609601.2192, 0, 29.66666667, -100.3333333, 30.11666667, 31.88333333),
    (32040, "TX_SC", 609601.2192, 0, 27.83333333, -99, 28.38333333, 30.28333333),
    (32041, "TX_S", 609601.2192, 0, 25.66666667, -98.5, 26.16666667, 27.83333333),
    (32042, "UT_N", 609601.2192, 0, 40.33333333, -111.5, 40.71666667, 41.78333333),
    (32043, "UT_C", 609601.2192, 0, 38.33333333, -111.5, 39.01666667, 40.65),
    (32044, "UT_S", 609601.2192, 0, 36.66666667, -111.5, 37.21666667, 38.35),
    (32046, "VA_N", 609601.2192, 0, 37.66666667, -78.5, 38.03333333, 39.2),
    (32047, "VA_S", 609601.2192, 0, 36.33333333, -78.5, 36.76666667, 37.96666667),
    (32048, "WA_N", 609601.2192, 0, 47, -120.8333333, 47.5, 48.73333333),
    (32049, "WA_S", 609601.2192, 0, 45.33333333, -120.5, 45.83333333, 47.33333333),
    (32050, "WV_N", 609601.2192, 0, 38.5, -79.5, 39, 40.25),
    (32051, "WV_S", 609601.2192, 0, 37, -81, 37.48333333, 38.88333333),
    (32052, "WI_N", 609601.2192, 0, 45.16666667, -90, 45.56666667, 46.76666667),
    (32053, "WI_C", 609601.2192, 0, 43.83333333, -90, 44.25, 45.5),
    (32054, "WI_S", 609601.2192, 0, 42, -90, 42.73333333, 44.06666667),
)
LCC_NAD27: Tuple[StatePlaneLCC, ...] = tuple(StatePlaneLCC(*row) for row in _LCC_NAD27_ROWS)

# geokey, zone, false easting, false northing, origin lat, central meridian, 1st std parallel, 2nd std parallel
_LCC_NAD83_ROWS = (
    (26940, "AK_10", 1000000, 0, 51.000000, -176.000000, 51.833333, 53.833333),
    (26951, "AR_N", 400000, 0, 34.333333, -92.000000, 34.933333, 36.233333),
    (26952, "AR_S", 400000, 400000, 32.666667, -92.000000, 33.300000, 34.766667),
    (26941, "CA_I", 2000000, 500000, 39.333333, -122.000000, 40.000000, 41.666667),
    (26942, "CA_II", 2000000, 500000, 37.666667, -122.000000, 38.333333, 39.833333),
    (26943, "CA_III", 2000000, 500000, 36.500000, -120.500000, 37.066667, 38.433333),
    (26944, "CA_IV", 2000000, 500000, 35.333333, -119.000000, 36.000000, 37.250000),
    (26945, "CA_V", 2000000, 500000, 33.500000, -118.000000, 34.033333, 35.466667),
    (26946, "CA_VI", 2000000, 500000, 32.166667, -116.250000, 32.783333, 33.883333),
    (26953, "CO_N", 914401.8289, 304800.6096, 39.333333, -105.500000, 39.716667, 40.783333),
    (26954, "CO_C", 914401.8289, 304800.6096, 37.833333, -105.500000, 38.450000, 39.750000),
    (26955, "CO_S", 914401.8289, 304800.6096, 36.666667, -105.500000, 37.233333, 38.433333),
    (26956, "CT", 304800.6096, 152400.3048, 40.833333, -72.750000, 41.200000, 41.866667),
    (26960, "FL_N", 600000, 0, 29.000000, -84.500000, 29.583333, 30.750000),
    (26975, "IA_N", 1500000, 1000000, 41.500000, -93.500000, 42.066667, 43.266667),
    (26976, "IA_S", 500000, 0, 40.000000, -93.500000, 40.616667, 41.783333),
    (26977, "KS_N", 400000, 0, 38.333333, -98.000000, 38.716667, 39.783333),
    (26978, "KS_S", 400000, 400000, 36.666667, -98.500000, 37.266667, 38.566667),
    (2205, "KY_N", 500000, 0, 37.500000, -84.250000, 37.966667, 38.966667),
    (26980, "KY_S", 500000, 500000, 36.333333, -85.750000, 36.733333, 37.933333),
    (26981, "LA_N", 1000000, 0, 30.500000, -92.500000, 31.166667, 32.666667),
    (26982, "LA_S", 1000000, 0, 28.500000, -91.333333, 29.300000, 30.700000),
    (26985, "MD", 400000, 0, 37.666667, -77.000000, 38.300000, 39.450000),
    (26986, "MA_M", 200000, 750000, 41.000000, -71.500000, 41.716667, 42.683333),
    (26987, "MA_I", 500000, 0, 41.000000, -70.500000, 41.283333, 41.483333),
    (26988, "MI_N", 8000000, 0, 44.783333, -87.000000, 45.483333, 47.083333),
    (26989, "MI_C", 6000000, 0, 43.316667, -84.366667, 44.183333, 45.700000),
    (26990, "MI_S", 4000000, 0, 41.500000, -84.366667, 42.100000, 43.666667),
    (26991, "MN_N", 800000, 100000, 46.500000, -93.100000, 47.033333, 48.633333),
    (26992, "MN_C", 800000, 100000, 45.000000, -94.250000, 45.616667, 47.050000),
    (26993, "MN_S", 800000, 100000, 43.000000, -94.000000, 43.783333, 45.216667),
    (32100, "MT", 600000, 0, 44.250000, -109.500000, 45.000000, 49.000000),
    (32104, "NE", 500000, 0, 39.833333, -100.000000, 40.000000, 43.000000),
    (32118, "NY_LI", 300000, 0, 40.166667, -74.000000, 40.666667, 41.033333),
    (32119, "NC", 609601.22, 0, 33.750000, -79.000000, 34.333333, 36.166667),
    (32120, "ND_N", 600000, 0, 47.000000, -100.500000, 47.433333, 48.733333),
    (32121, "ND_S", 600000, 0, 45.666667, -100.500000, 46.183333, 47.483333),
    (32122, "OH_N", 600000, 0, 39.666667, -82.500000, 40.433333, 41.700000),
    (32123, "OH_S", 600000, 0, 38.000000, -82.500000, 38.733333, 40.033333),
    (32124, "OK_N", 600000, 0, 35.000000, -98.000000, 35.566667, 36.766667),
    (32125, "OK_S", 600000, 0, 33.333333, -98.000000, 33.933333, 35.233333),
    (32126, "OR_N", 2500000, 0, 43.666667, -120.500000, 44.333333, 46.000000),
    (32127, "OR_S", 1500000, 0, 41.666667, -120.500000, 42.333333, 44.000000),
    (32128, "PA_N", 600000, 0, 40.166667, -77.750000, 40.883333, 41.950000),
    (32129, "PA_S", 600000, 0, 39.333333, -77.750000, 39.933333, 40.966667),
    (32161, "PR", 200000, 200000, 17.833333, -66.433333, 18.033333, 18.433333),
    (32133, "SC", 609600, 0, 31.833333, -81.000000, 32.500000, 34.833333),
    (32134, "SD_N", 600000, 0, 43.833333, -100.000000, 44.416667, 45.683333),
    (32135, "SD_S", 600000, 0, 42.333333, -100.333333, 42.833333, 44.400000),
    (32136, "TN", 600000, 0, 34.333333, -86.000000, 35.250000, 36.416667),
    (32137, "TX_N", 200000, 1000000, 34.000000, -101.500000, 34.650000, 36.183333),
    (32138, "TX_NC", 600000, 2000000, 31.666667, -98.500000, 32.133333, 33.966667),
    (32139, "TX_C", 700000, 3000000, 29.666667, -100.333333, 30.116667, 31.883333),
    (32140, "TX_SC", 600000, 4000000, 27.833333, -99.000000, 28.383333, 30.283333),
    (32141, "TX_S", 300000, 5000000, 25.666667, -98.500000, 26.166667, 27.833333),
    (32142, "UT_N", 500000, 1000000, 40.333333, -111.500000, 40.716667, 41.783333),
    (32143, "UT_C", 500000, 2000000, 38.333333, -111.500000, 39.016667, 40.650000),
    (32144, "UT_S", 500000, 3000000, 36.666667, -111.500000, 37.216667, 38.350000),
    (32146, "VA_N", 3500000, 2000000, 37.666667, -78.500000, 38.033333, 39.200000),
    (32147, "VA_S", 3500000, 1000000, 36.333333, -78.500000, 36.766667, 37.966667),
    (32148, "WA_N", 500000, 0, 47.000000, -120.833333, 47.500000, 48.733333),
    (32149, "WA_S", 500000, 0, 45.333333, -120.500000, 45.833333, 47.333333),
    (32150, "WV_N", 600000, 0, 38.500000, -79.500000, 39.000000, 40.250000),
    (32151, "WV_S", 600000, 0, 37.000000, -81.000000, 37.483333, 38.883333),
    (32152, "WI_N", 600000, 0, 45.166667, -90.000000, 45.566667, 46.766667),
    (32153, "WI_C", 600000, 0, 43.833333, -90.000000, 44.250000, 45.500000),
    (32154, "WI_S", 600000, 0, 42.000000, -90.000000, 42.733333, 44.066667),
)
LCC_NAD83: Tuple[StatePlaneLCC, ...] = tuple(StatePlaneLCC(*row) for row in _LCC_NAD83_ROWS)

# geokey, zone, false easting, false northing, origin lat, central meridian, scale factor
_TM_NAD27_ROWS = (
    (26729, "AL_E", 152400.3048, 0, 30.5, -85.83333333, 0.99996),
    (26730, "AL_W", 152400.3048, 0, 30, -87.5, 0.999933333),
    (26732, "AK_2", 152400.3048, 0, 54, -142, 0.9999),
    (26733, "AK_3", 152400.3048, 0, 54, -146, 0.9999),
    (26734, "AK_4", 152400.3048, 0, 54, -150, 0.9999),
    (26735, "AK_5", 152400.3048, 0, 54, -154, 0.9999),
    (26736, "AK_6", 152400.3048, 0, 54, -158, 0.9999),
    (26737, "AK_7", 213360.4267, 0, 54, -162, 0.9999),
    (26738, "AK_8", 152400.3048, 0, 54, -166, 0.9999),
    (26739, "AK_9", 182880.3658, 0, 54, -170, 0.9999),
    (26748, "AZ_E", 152400.3048, 0, 31, -110.1666667, 0.9999),
    (26749, "AZ_C", 152400.3048, 0, 31, -111.9166667, 0.9999),
    (26750, "AZ_W", 152400.3048, 0, 31, -113.75, 0.999933333),
    (26757, "DE", 152400.3048, 0, 38, -75.41666667, 0.999995),
    (26758, "FL_E", 152400.3048, 0, 24.33333333, -81, 0.999941177),
    (26759, "FL_W", 152400.3048, 0, 24.33333333, -82, 0.999941177),
    (26766, "GA_E", 152400.3048, 0, 30, -82.16666667, 0.9999),
    (26767, "GA_W", 152400.3048, 0, 30, -84.16666667, 0.9999),
    (26761, "HI_1", 152400.3048, 0, 18.83333333, -155.5, 0.999966667),
    (26762, "HI_2", 152400.3048, 0, 20.33333333, -156.6666667, 0.999966667),
    (26763, "HI_3", 152400.3048, 0, 21.16666667, -158, 0.99999),
    (26764, "HI_4", 152400.3048, 0, 21.83333333, -159.5, 0.99999),
    (26765, "HI_5", 152400.3048, 0, 21.66666667, -160.1666667, 1),
    (26768, "ID_E", 152400.3048, 0, 41.66666667, -112.1666667, 0.999947368),
    (26769, "ID_C", 152400.3048, 0, 41.66666667, -114, 0.999947368),
    (26770, "ID_W", 152400.3048, 0, 41.66666667, -115.75, 0.999933333),
    (26771, "IL_E", 152400.3048, 0, 36.66666667, -88.33333333, 0.999975),
    (26772, "IL_W", 152400.3048, 0, 36.66666667, -90.16666667, 0.999941177),
    (26773, "IN_E", 152400.3048, 0, 37.5, -85.66666667, 0.999966667),
    (26774, "IN_W", 152400.3048, 0, 37.5, -87.08333333, 0.999966667),
    (26783, "ME_E", 152400.3048, 0, 43.83333333, -68.5, 0.9999),
    (26784, "ME_W", 152400.3048, 0, 42.83333333, -70.16666667, 0.999966667),
    (26794, "MS_E", 152400.3048, 0, 29.66666667, -88.83333333, 0.99996),
    (26795, "MS_W", 152400.3048, 0, 30.5, -90.33333333, 0.999941177),
    (26796, "MO_E", 152400.3048, 0, 35.83333333, -90.5, 0.999933333),
    (26797, "MO_C", 152400.3048, 0, 35.83333333, -92.5, 0.999933333),
    (26798, "MO_W", 152400.3048, 0, 36.16666667, -94.5, 0.999941177),
    (32007, "NV_E", 152400.3048, 0, 34.75, -115.5833333, 0.9999),
    (32008, "NV_C", 152400.3048, 0, 34.75, -116.6666667, 0.9999),
    (32009, "NV_W", 152400.3048, 0, 34.75, -118.5833333, 0.9999),
    (32010, "NH", 152400.3048, 0, 42.5, -71.66666667, 0.999966667),
    (32011, "NJ", 609601.2192, 0, 38.83333333, -74.66666667, 0.999975),
    (32012, "NM_E", 152400.3048, 0, 31, -104.3333333, 0.999909091),
    (32013, "NM_C", 152400.3048, 0, 31, -106.25, 0.9999),
    (32014, "NM_W", 152400.3048, 0, 31, -107.8333333, 0.999916667),
    (32015, "NY_E", 152400.3048, 0, 40, -74.33333333, 0.999966667),
    (32016, "NY_C", 152400.3048, 0, 40, -76.58333333, 0.9999375),
    (32017, "NY_W", 152400.3048, 0, 40, -78.58333333, 0.9999375),
    (32030, "RI", 152400.3048, 0, 41.08333333, -71.5, 0.99999375),
    (32045, "VT", 152400.3048, 0, 42.5, -72.5, 0.999964286),
    (32055, "WY_E", 152400.3048, 0, 40.66666667, -105.1666667, 0.999941177),
    (32056, "WY_EC", 152400.3048, 0, 40.66666667, -107.3333333, 0.999941177),
    (32057, "WY_WC", 152400.3048, 0, 40.66666667, -108.75, 0.999941177),
    (32058, "WY_W", 152400.3048, 0, 40.66666667, -110.0833333, 0.999941177),
)
TM_NAD27: Tuple[StatePlaneTM, ...] = tuple(StatePlaneTM(*row) for row in _TM_NAD27_ROWS)

# geokey, zone, false easting, false northing, origin lat, central meridian, scale factor
_TM_NAD83_ROWS = (
    (26929, "AL_E", 200000, 0, 30.5, -85.83333333, 0.99996),
    (26930, "AL_W", 600000, 0, 30, -87.5, 0.999933333),
    (26932, "AK_2", 500000, 0, 54, -142, 0.9999),
    (26933, "AK_3", 500000, 0, 54, -146, 0.9999),
    (26934, "AK_4", 500000, 0, 54, -150, 0.9999),
    (26935, "AK_5", 500000, 0, 54, -154, 0.9999),
    (26936, "AK_6", 500000, 0, 54, -158, 0.9999),
    (26937, "AK_7", 500000, 0, 54, -162, 0.9999),
    (26938, "AK_8", 500000, 0, 54, -166, 0.9999),
    (26939, "AK_9", 500000, 0, 54, -170, 0.9999),
    (26948, "AZ_E", 213360, 0, 31, -110.1666667, 0.9999),
    (26949, "AZ_C", 213360, 0, 31, -111.9166667, 0.9999),
    (26950, "AZ_W", 213360, 0, 31, -113.75, 0.999933333),
    (26957, "DE", 200000, 0, 38, -75.41666667, 0.999995),
    (26958, "FL_E", 200000, 0, 24.33333333, -81, 0.999941177),
    (26959, "FL_W", 200000, 0, 24.33333333, -82, 0.999941177),
    (26966, "GA_E", 200000, 0, 30, -82.16666667, 0.9999),
    (26967, "GA_W", 700000, 0, 30, -84.16666667, 0.9999),
    (26961, "HI_1", 500000, 0, 18.83333333, -155.5, 0.999966667),
    (26962, "HI_2", 500000, 0, 20.33333333, -156.6666667, 0.999966667),
    (26963, "HI_3", 500000, 0, 21.16666667, -158, 0.99999),
    (26964, "HI_4", 500000, 0, 21.83333333, -159.5, 0.99999),
    (26965, "HI_5", 500000, 0, 21.66666667, -160.1666667, 1),
    (26968, "ID_E", 200000, 0, 41.66666667, -112.1666667, 0.999947368),
    (26969, "ID_C", 500000, 0, 41.66666667, -114, 0.999947368),
    (26970, "ID_W", 800000, 0, 41.66666667, -115.75, 0.999933333),
    (26971, "IL_E", 300000, 0, 36.66666667, -88.33333333, 0.999975),
    (26972, "IL_W", 700000, 0, 36.66666667, -90.16666667, 0.999941177),
    (26973, "IN_E", 100000, 250000, 37.5, -85.66666667, 0.999966667),
    (26974, "IN_W", 900000, 250000, 37.5, -87.08333333, 0.999966667),
    (26983, "ME_E", 300000, 0, 43.66666667, -68.5, 0.9999),
    (26984, "ME_W", 900000, 0, 42.83333333, -70.16666667, 0.999966667),
    (26994, "MS_E", 300000, 0, 29.5, -88.83333333, 0.99995),
    (26995, "MS_W", 700000, 0, 29.5, -90.33333333, 0.99995),
    (26996, "MO_E", 250000, 0, 35.83333333, -90.5, 0.999933333),
    (26997, "MO_C", 500000, 0, 35.83333333, -92.5, 0.999933333),
    (26998, "MO_W", 850000, 0, 36.16666667, -94.5, 0.999941177),
    (32107, "NV_E", 200000, 8000000, 34.75, -115.5833333, 0.9999),
    (32108, "NV_C", 500000, 6000000, 34.75, -116.6666667, 0.9999),
    (32109, "NV_W", 800000, 4000000, 34.75, -118.5833333, 0.9999),
    (32110, "NH", 300000, 0, 42.5, -71.66666667, 0.999966667),
    (32111, "NJ", 150000, 0, 38.83333333, -74.5, 0.9999),
    (32112, "NM_E", 165000, 0, 31, -104.3333333, 0.999909091),
    (32113, "NM_C", 500000, 0, 31, -106.25, 0.9999),
    (32114, "NM_W", 830000, 0, 31, -107.8333333, 0.999916667),
    (32115, "NY_E", 150000, 0, 38.83333333, -74.5, 0.9999),
    (32116, "NY_C", 250000, 0, 40, -76.58333333, 0.9999375),
    (32117, "NY_W", 350000, 0, 40, -78.58333333, 0.9999375),
    (32130, "RI", 100000, 0, 41.08333333, -71.5, 0.99999375),
    (32145, "VT", 500000, 0, 42.5, -72.5, 0.999964286),
    (32155, "WY_E", 200000, 0, 40.5, -105.1666667, 0.9999375),
    (32156, "WY_EC", 400000, 100000, 40.5, -107.3333333, 0.9999375),
    (32157, "WY_WC", 600000, 0, 40.5, -108.75, 0.9999375),
    (32158, "WY_W", 800000, 100000, 40.5, -110.0833333, 0.9999375),
)
TM_NAD83: Tuple[StatePlaneTM, ...] = tuple(StatePlaneTM(*row) for row in _TM_NAD83_ROWS)

NAD27_CODES: Dict[int, str] = {
    26729: "AL_E", 26730: "AL_W", 26731: "AK_1", 26732: "AK_2", 26733: "AK_3",
    26734: "AK_4", 26735: "AK_5", 26736: "AK_6", 26737: "AK_7", 26738: "AK_8",
    26739: "AK_9", 26740: "AK_10", 26741: "CA_I", 26742: "CA_II", 26743: "CA_III",
    26744: "CA_IV", 26745: "CA_V", 26746: "CA_VI", 26747: "CA_VII", 26748: "AZ_E",
    26749: "AZ_C", 26750: "AZ_W", 26751: "AR_N", 26752: "AR_S", 26753: "CO_N",
    26754: "CO_C", 26755: "CO_S", 26756: "CT", 26757: "DE", 26758: "FL_E",
    26759: "FL_W", 26760: "FL_N", 26761: "HI_1", 26762: "HI_2", 26763: "HI_3",
    26764: "HI_4", 26765: "HI_5", 26766: "GA_E", 26767: "GA_W", 26768: "ID_E",
    26769: "ID_C", 26770: "ID_W", 26771: "IL_E", 26772: "IL_W", 26773: "IN_E",
    26774: "IN_W", 26775: "IA_N", 26776: "IA_S", 26777: "KS_N", 26778: "KS_S",
    26779: "KY_N", 26780: "KY_S", 26781: "LA_N", 26782: "LA_S", 26783: "ME_E",
    26784: "ME_W", 26785: "MD", 26786: "MA_M", 26787: "MA_I", 26788: "MI_N",
    26789: "MI_C", 26790: "MI_S", 26791: "MN_N", 26792: "MN_C", 26793: "MN_S",
    26794: "MS_E", 26795: "MS_W", 26796: "MO_E", 26797: "MO_C", 26798: "MO_W",
    32001: "MT_N", 32002: "MT_C", 32003: "MT_S", 32005: "NE_N", 32006: "NE_S",
    32007: "NV_E", 32008: "NV_C", 32009: "NV_W", 32010: "NH", 32011: "NJ",
    32012: "NM_E", 32013: "NM_C", 32014: "NM_W", 32015: "NY_E", 32016: "NY_C",
    32017: "NY_W", 32018: "NY_LI", 32019: "NC", 32020: "ND_N", 32021: "ND_S",
    32022: "OH_N", 32023: "OH_S", 32024: "OK_N", 32025: "OK_S", 32026: "OR_N",
    32027: "OR_S", 32028: "PA_N", 32029: "PA_S", 32030: "RI", 32031: "SC_N",
    32033: "SC_S", 32034: "SD_N", 32035: "SD_S", 32036: "TN", 32037: "TX_N",
    32038: "TX_NC", 32039: "TX_C", 32040: "TX_SC", 32041: "TX_S", 32042: "UT_N",
    32043: "UT_C", 32044: "UT_S", 32045: "VT", 32046: "VA_N", 32047: "VA_S",
    32048: "WA_N", 32049: "WA_S", 32050: "WV_N", 32051: "WV_S", 32052: "WI_N",
    32053: "WI_C", 32054: "WI_S", 32055: "WY_E", 32056: "WY_EC", 32057: "WY_WC",
    32058: "WY_W", 32059: "PR", 32060: "St.Croix",
    2204: "TN",
}

NAD83_CODES: Dict[int, str] = {
    26929: "AL_E", 26930: "AL_W", 26931: "AK_1", 26932: "AK_2", 26933: "AK_3",
    26934: "AK_4", 26935: "AK_5", 26936: "AK_6", 26937: "AK_7", 26938: "AK_8",
    26939: "AK_9", 26940: "AK_10", 26941: "CA_I", 26942: "CA_II", 26943: "CA_III",
    26944: "CA_IV", 26945: "CA_V", 26946: "CA_VI", 26947: "CA_VII", 26948: "AZ_E",
    26949: "AZ_C", 26950: "AZ_W", 26951: "AR_N", 26952: "AR_S", 26953: "CO_N",
    26954: "CO_C", 26955: "CO_S", 26956: "CT", 26957: "DE", 26958: "FL_E",
    26959: "FL_W", 26960: "FL_N", 26961: "HI_1", 26962: "HI_2", 26963: "HI_3",
    26964: "HI_4", 26965: "HI_5", 26966: "GA_E", 26967: "GA_W", 26968: "ID_E",
    26969: "ID_C", 26970: "ID_W", 26971: "IL_E", 26972: "IL_W", 26973: "IN_E",
    26974: "IN_W", 26975: "IA_N", 26976: "IA_S", 26977: "KS_N", 26978: "KS_S",
    26979: "KY_N", 26980: "KY_S", 26981: "LA_N", 26982: "LA_S", 26983: "ME_E",
    26984: "ME_W", 26985: "MD", 26986: "MA_M", 26987: "MA_I", 26988: "MI_N",
    26989: "MI_C", 26990: "MI_S", 26991: "MN_N", 26992: "MN_C", 26993: "MN_S",
    26994: "MS_E", 26995: "MS_W", 26996: "MO_E", 26997: "MO_C", 26998: "MO_W",
    32100: "MT", 32104: "NE", 32107: "NV_E", 32108: "NV_C", 32109: "NV_W",
    32110: "NH", 32111: "NJ", 32112: "NM_E", 32113: "NM_C", 32114: "NM_W",
    32115: "NY_E", 32116: "NY_C", 32117: "NY_W", 32118: "NY_LI", 32119: "NC",
    32120: "ND_N", 32121: "ND_S", 32122: "OH_N", 32123: "OH_S", 32124: "OK_N",
    32125: "OK_S", 32126: "OR_N", 32127: "OR_S", 32128: "PA_N", 32129: "PA_S",
    32130: "RI", 32133: "SC", 32134: "SD_N", 32135: "SD_S", 32136: "TN",
    32137: "TX_N", 32138: "TX_NC", 32139: "TX_C", 32140: "TX_SC", 32141: "TX_S",
    32142: "UT_N", 32143: "UT_C", 32144: "UT_S", 32145: "VT", 32146: "VA_N",
    32147: "VA_S", 32148: "WA_N", 32149: "WA_S", 32150: "WV_N", 32151: "WV_S",
    32152: "WI_N", 32153: "WI_C", 32154: "WI_S", 32155: "WY_E", 32156: "WY_EC",
    32157: "WY_WC", 32158: "WY_W", 32161: "PR",
    2205: "KY_N",
}

_CATALOGS = {
    "NAD27": (LCC_NAD27, TM_NAD27),
    "NAD83": (LCC_NAD83, TM_NAD83),
}


def find_state_plane(zone: str, datum: str) -> Optional[StatePlaneZone]:
    """
    Look up a zone mnemonic (e.g. "CA_I") for datum "NAD27" or "NAD83".

    The LCC table is scanned before the TM table; the first exact match wins.
    """
    for catalog in _CATALOGS.get(datum, ()):
        for entry in catalog:
            if entry.zone == zone:
                return entry
    return None


def state_plane_for_code(code: int) -> Optional[Tuple[str, str]]:
    """Map a projected CRS code to (datum, zone mnemonic), if it is a state plane code."""
    if code in NAD27_CODES:
        return "NAD27", NAD27_CODES[code]
    if code in NAD83_CODES:
        return "NAD83", NAD83_CODES[code]
    return None
