"""
tests/test_geokeys.py
=====================
Geokey traversal, CRS context slots and projection definitions.
"""

import sys
import os

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from lascheck.core import ellipsoids
from lascheck.core.crs_check import check_crs
from lascheck.core.crs_context import CRSContext, apply_user_overrides
from lascheck.core.diagnostics import DiagnosticSink
from lascheck.core.geokeys import ellipsoid_for_key, interpret_geokeys
from lascheck.core.projections import (
    LambertConformalConic,
    LatLong,
    LongLat,
    ProjectionFactory,
    TransverseMercator,
    UTM,
)
from lascheck.core.units import LinearUnit, classify_vertical_cs
from lascheck.domain.schemas import GeoKeyEntry, LASHeader
from lascheck.infrastructure.reports import build_report, diagnostics_dataframe
from lascheck.models import UserCRSConfig


def keys(*pairs):
    return [GeoKeyEntry(key_id=k, value_offset=v) for k, v in pairs]


def interpret(entries, doubles=()):
    context = CRSContext()
    sink = DiagnosticSink()
    ok = interpret_geokeys(entries, list(doubles), context, sink)
    return ok, context, sink


# TM fallback parameters: FE, FN, lat, long, scale
TM_DOUBLES = [500000.0, 0.0, 0.0, 15.0, 0.9996]
TM_OFFSET_KEYS = ((3082, 0), (3083, 1), (3081, 2), (3088, 3), (3092, 4))

# LCC fallback parameters: FE, FN, lat, long, SP1, SP2
LCC_DOUBLES = [700000.0, 6600000.0, 46.5, 3.0, 49.0, 44.0]
LCC_OFFSET_KEYS = ((3082, 0), (3083, 1), (3081, 2), (3088, 3), (3078, 4), (3079, 5))


# ===========================================================================
# 1. TRAVERSAL
# ===========================================================================

class TestTraversal:

    def test_geographic_model_type(self):
        ok, context, _ = interpret(keys((1024, 2), (2048, 4326)))
        assert ok
        assert isinstance(context.geokeys.projection, LongLat)
        assert context.geokeys.ellipsoid.id == ellipsoids.WGS84
        assert context.description() == "longitude/latitude"

    def test_projected_code_with_units(self):
        ok, context, sink = interpret(keys((1024, 1), (3072, 26915), (3076, 9001), (4096, 5103), (4099, 9001)))
        assert ok
        assert context.geokeys.projection.zone_number == 15
        assert context.geokeys.horizontal_unit == LinearUnit.METER
        assert context.geokeys.elevation_unit == LinearUnit.METER
        assert context.vertical_epsg == 5103
        assert sink.unsupported == []

    def test_elevation_unit_does_not_touch_horizontal_unit(self):
        _, context, _ = interpret(keys((3072, 32615), (3076, 9001), (4099, 9003)))
        assert context.geokeys.horizontal_unit == LinearUnit.METER
        assert context.geokeys.elevation_unit == LinearUnit.US_SURVEY_FOOT

    def test_first_projection_wins(self):
        ok, context, _ = interpret(keys((3072, 32615), (3072, 32733), (1024, 2)))
        assert ok
        assert context.geokeys.projection.zone_number == 15
        assert context.geokeys.projection.northern is True

    def test_ellipsoid_keys_are_last_write_wins(self):
        _, context, _ = interpret(keys((3072, 32615), (2050, 6267)))
        assert context.geokeys.ellipsoid.id == ellipsoids.NAD27

    def test_user_defined_ellipsoid_flag(self):
        _, context, sink = interpret(keys((2048, 32767), (3072, 32615)))
        assert context.geokeys.user_defined_ellipsoid is True
        assert sink.unsupported == []

    def test_user_defined_projected_cs_is_skipped(self):
        ok, _, sink = interpret(keys((3072, 32767)))
        assert not ok
        assert sink.unsupported == []

    def test_unsupported_values_go_to_side_channel(self):
        ok, _, sink = interpret(keys((2048, 4999), (3075, 11), (3076, 9005), (4096, 1234)))
        assert not ok
        assert [(u.key, u.value) for u in sink.unsupported] == [
            ("GeographicTypeGeoKey", 4999),
            ("ProjCoordTransGeoKey", 11),
            ("ProjLinearUnitsGeoKey", 9005),
            ("VerticalCSTypeGeoKey", 1234),
        ]
        assert sink.unsupported[0].note == "look-up for 4999 not implemented"
        assert sink.unsupported[1].note == "AlbersEqualArea not implemented"
        assert sink.diagnostics == []

    def test_ellipsoid_suffix_families(self):
        assert ellipsoid_for_key(2048, 4030) == ellipsoids.WGS84
        assert ellipsoid_for_key(2050, 6030) == ellipsoids.WGS84
        assert ellipsoid_for_key(2056, 7030) == ellipsoids.WGS84
        assert ellipsoid_for_key(2056, 7019) == ellipsoids.NAD83
        assert ellipsoid_for_key(2056, 7022) == ellipsoids.INTERNATIONAL
        assert ellipsoid_for_key(2048, 4267) == ellipsoids.NAD27
        assert ellipsoid_for_key(2050, 6202) == 2
        assert ellipsoid_for_key(2056, 7007) is None
        assert ellipsoid_for_key(2048, 4326) == ellipsoids.WGS84


# ===========================================================================
# 2. GENERIC FALLBACK FROM DOUBLE PARAMETERS
# ===========================================================================

class TestGenericFallback:

    def test_generic_transverse_mercator(self):
        ok, context, _ = interpret(keys((3075, 1), *TM_OFFSET_KEYS), TM_DOUBLES)
        assert ok
        projection = context.geokeys.projection
        assert isinstance(projection, TransverseMercator)
        np.testing.assert_allclose(
            [projection.false_easting, projection.false_northing, projection.lat_origin,
             projection.central_meridian, projection.scale_factor],
            TM_DOUBLES,
            rtol=1e-15,
            err_msg="generic TM parameters not taken from the double array",
        )
        assert context.description() == "generic transverse mercator"

    def test_generic_lambert_conformal_conic(self):
        ok, context, _ = interpret(keys((3075, 8), *LCC_OFFSET_KEYS), LCC_DOUBLES)
        assert ok
        projection = context.geokeys.projection
        assert isinstance(projection, LambertConformalConic)
        assert projection.std_parallel_1 == 49.0
        assert projection.std_parallel_2 == 44.0
        assert context.description() == "generic lambert conformal conic"

    def test_missing_offset_means_no_projection(self):
        ok, context, _ = interpret(keys((3075, 1), *TM_OFFSET_KEYS[:4]), TM_DOUBLES)
        assert not ok
        assert context.geokeys.projection is None

    def test_offset_beyond_double_array(self):
        ok, _, _ = interpret(keys((3075, 1), *TM_OFFSET_KEYS), TM_DOUBLES[:4])
        assert not ok

    def test_resolved_code_takes_precedence(self):
        ok, context, _ = interpret(keys((3072, 32615), (3075, 1), *TM_OFFSET_KEYS), TM_DOUBLES)
        assert ok
        assert isinstance(context.geokeys.projection, UTM)

    def test_transform_key_resets_previous_choice(self):
        ok, _, _ = interpret(keys((3075, 1), (3075, 99), *TM_OFFSET_KEYS), TM_DOUBLES)
        assert not ok


# ===========================================================================
# 3. CRS CHECK ENTRY POINT
# ===========================================================================

class TestCheckCRS:

    def test_nothing_declared(self):
        sink = DiagnosticSink()
        check_crs(LASHeader(), sink)
        assert [d.message for d in sink.fails] == [
            "file does not specify a Coordinate Reference System with GEOTIFF tags"
        ]

    def test_extended_format_with_geokeys_only(self):
        sink = DiagnosticSink()
        context = check_crs(LASHeader(point_data_format=6, geokeys=keys((3072, 32615))), sink)
        assert [d.message for d in sink.fails] == [
            "file with point data format 6 does not specify Coordinate Reference System with OGC WKT string"
        ]
        assert context.description() == "UTM 15 northern hemisphere"

    def test_counts_geokeys_in_message(self):
        sink = DiagnosticSink()
        check_crs(LASHeader(geokeys=keys((1024, 1), (3072, 4000))), sink)
        assert [d.message for d in sink.fails] == [
            "the 2 geokeys do not properly specify a Coordinate Reference System"
        ]
        assert sink.unsupported[0].note == "4000 not implemented"

    def test_dataframe_export(self):
        sink = DiagnosticSink()
        context = check_crs(LASHeader(), sink)
        df = diagnostics_dataframe(build_report(LASHeader(), sink, context))
        assert list(df.columns) == ["category", "severity", "message"]
        assert df.iloc[0]["severity"] == "fail"


# ===========================================================================
# 4. CONTEXT SLOTS AND USER OVERRIDES
# ===========================================================================

class TestContext:

    def test_slots_are_independent(self):
        context = CRSContext()
        context.set_utm_projection(10, True, from_geokeys=True)
        context.set_latlong_projection(from_geokeys=False)
        assert isinstance(context.geokeys.projection, UTM)
        assert isinstance(context.user.projection, LatLong)

    def test_out_of_range_utm_zone_is_rejected(self):
        context = CRSContext()
        assert context.set_utm_projection(0, True) is False
        assert context.set_utm_projection(61, True) is False
        assert context.geokeys.projection is None

    def test_setting_projection_replaces_previous(self):
        context = CRSContext()
        context.set_utm_projection(10, True)
        context.set_longlat_projection()
        assert isinstance(context.geokeys.projection, LongLat)

    def test_vertical_epsg_ranges(self):
        assert classify_vertical_cs(5030) == "ellipsoidal"
        assert classify_vertical_cs(5103) == "orthometric"
        assert classify_vertical_cs(5200) == "reserved"
        assert classify_vertical_cs(5100) is None
        context = CRSContext()
        assert context.set_vertical_epsg(6000) is False
        assert context.vertical_epsg == 0

    def test_user_overrides(self):
        context = CRSContext()
        ok = apply_user_overrides(
            context,
            UserCRSConfig(utm_zone="17T", horizontal_unit="us-survey-foot", elevation_unit="foot"),
        )
        assert ok
        assert context.user.projection.zone_number == 17
        assert context.user.projection.name == "UTM zone 17T (northern hemisphere)"
        assert context.user.ellipsoid.id == ellipsoids.WGS84
        assert context.user.horizontal_unit == LinearUnit.US_SURVEY_FOOT
        assert context.user.elevation_unit == LinearUnit.FOOT
        assert context.geokeys.projection is None

    def test_user_state_plane(self):
        context = CRSContext()
        assert apply_user_overrides(context, UserCRSConfig(state_plane="CA_I", state_plane_datum="NAD27"))
        assert context.description(from_geokeys=False) == "stateplane27 CA_I"
        assert context.user.ellipsoid.id == ellipsoids.NAD27

    def test_bad_user_settings(self):
        context = CRSContext()
        assert not apply_user_overrides(context, UserCRSConfig(utm_zone="17A"))
        assert not apply_user_overrides(context, UserCRSConfig(state_plane="NOPE"))
        assert not apply_user_overrides(context, UserCRSConfig(ellipsoid_id=99))

    def test_utm_to_pyproj(self):
        context = CRSContext()
        context.set_utm_projection(15, True)
        context.set_ellipsoid(ellipsoids.WGS84)
        crs = context.to_crs()
        assert crs.is_projected
        assert "+proj=utm" in context.to_proj4()
        assert "+zone=15" in context.to_proj4()


# ===========================================================================
# 5. PROJECTION DEFINITIONS
# ===========================================================================

class TestProjections:

    def test_utm_central_meridian_and_name(self):
        projection = UTM(33, False)
        assert projection.central_meridian == 15
        assert projection.name == "UTM zone 33 (southern hemisphere)"
        assert projection.proj_parameters()["south"] is True

    def test_utm_zone_string(self):
        assert UTM.from_zone_string("32u").northern is True
        assert UTM.from_zone_string("19H").northern is False
        with pytest.raises(ValueError, match="latitude band"):
            UTM.from_zone_string("19Y")
        with pytest.raises(ValueError, match="between 1 and 60"):
            UTM.from_zone_string("61N")

    def test_radians_are_derived(self):
        projection = TransverseMercator(0.0, 0.0, 45.0, 90.0, 1.0)
        np.testing.assert_allclose(
            [projection.lat_origin_radians, projection.central_meridian_radians],
            [np.pi / 4, np.pi / 2],
            rtol=1e-15,
            err_msg="radian forms are not derived from degrees",
        )

    def test_tm_description(self):
        projection = TransverseMercator(500000.0, 0.0, 0.0, 27.0, 0.9996)
        assert projection.description == (
            "false east/north: 500000/0 [m], origin lat/meridian long: 0/27, scale: 0.9996"
        )

    def test_proj4_for_lcc_in_survey_feet(self):
        projection = LambertConformalConic(2000000.0, 500000.0, 39.333333, -122.0, 40.0, 41.666667)
        text = projection.to_proj4(ellipsoids.get_ellipsoid(ellipsoids.NAD83), LinearUnit.US_SURVEY_FOOT)
        assert text.startswith("+proj=lcc ")
        assert "+units=us-ft" in text
        assert text.endswith("+no_defs")

    def test_factory_raises_for_unknown_method(self):
        with pytest.raises(ValueError, match="Unknown projection method"):
            ProjectionFactory.create("mercator")
