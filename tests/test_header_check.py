"""
tests/test_header_check.py
==========================
Rule-by-rule tests of the header conformance checker.

Each test starts from a conforming LAS 1.2 / point data format 1 header
(the LASHeader defaults), changes one field, and pins the exact
(category, severity, message) triples the checker emits. The reference
date is fixed at 2026-10-19 (day of year 292) so the creation-date rule
does not depend on the day the suite runs.
"""

import sys
import os
from datetime import date

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from lascheck.core.diagnostics import DiagnosticSink
from lascheck.core.formatting import format_double
from lascheck.core.header_check import (
    HeaderConformanceChecker,
    maximum_point_data_format,
    minimum_header_size,
)
from lascheck.domain.schemas import GeoKeyEntry, LASHeader, Severity, VariableLengthRecord
from lascheck.models import CheckConfig, PointRecord


# ===========================================================================
# Shared helpers
# ===========================================================================

TODAY = date(2026, 10, 19)
CONFIG = CheckConfig(today=TODAY)

GEOGRAPHIC_KEYS = [GeoKeyEntry(key_id=1024, value_offset=2)]

FAIL = Severity.FAIL
WARNING = Severity.WARNING


def run_check(header, points=()):
    checker = HeaderConformanceChecker(header, CONFIG)
    for point in points:
        checker.parse(point)
    sink = DiagnosticSink()
    checker.check(sink)
    return [(d.category, d.severity, d.message) for d in sink.diagnostics]


def header_with(**fields):
    """Conforming header with a CRS, plus the given overrides."""
    fields.setdefault("geokeys", GEOGRAPHIC_KEYS)
    return LASHeader(**fields)


def point(X=0, Y=0, Z=0, return_number=1, number_of_returns=1, gps_time=None, rgb=None):
    return PointRecord(
        return_number=return_number,
        number_of_returns=number_of_returns,
        X=X, Y=Y, Z=Z,
        gps_time=gps_time,
        rgb=rgb,
    )


@pytest.fixture(scope="module")
def conforming_header():
    return header_with()


# ===========================================================================
# 1. BASELINE
# ===========================================================================

class TestBaseline:

    def test_conforming_header_has_no_findings(self, conforming_header):
        assert run_check(conforming_header) == []

    def test_missing_crs_is_the_only_finding(self):
        assert run_check(LASHeader()) == [
            ("CRS", FAIL, "file does not specify a Coordinate Reference System with GEOTIFF tags"),
        ]

    def test_checker_is_deterministic(self):
        header = header_with(header_size=200, x_scale_factor=0.003, file_creation_year=0)
        checker = HeaderConformanceChecker(header, CONFIG)
        checker.parse(point(X=5))
        first, second = DiagnosticSink(), DiagnosticSink()
        checker.check(first)
        checker.check(second)
        assert first.diagnostics == second.diagnostics
        assert len(first.diagnostics) > 3


# ===========================================================================
# 2. SIGNATURE, VERSION, SIZES
# ===========================================================================

class TestStructure:

    def test_signature(self):
        assert ("file signature", FAIL, "should be 'LASF' and not 'LASX'") in run_check(
            header_with(file_signature="LASX")
        )

    def test_header_size_227_passes(self):
        assert run_check(header_with(header_size=227)) == []

    def test_header_size_226_fails(self):
        assert run_check(header_with(header_size=226, offset_to_point_data=226)) == [
            ("header size", FAIL, "should be at least 227 and not 226"),
        ]

    def test_minimum_header_size_by_version(self):
        assert minimum_header_size(1, 2) == 227
        assert minimum_header_size(1, 3) == 235
        assert minimum_header_size(1, 4) == 375
        assert minimum_header_size(2, 4) == 227

    def test_version(self):
        diagnostics = run_check(header_with(version_major=2, version_minor=7))
        assert ("version major", FAIL, "should be 1 and not 2") in diagnostics
        assert ("version minor", FAIL, "should be between 0 and 4 and not 7") in diagnostics

    def test_offset_to_point_data_counts_vlrs(self):
        header = header_with(
            vlrs=[VariableLengthRecord(record_length_after_header=100)],
            offset_to_point_data=300,
        )
        assert run_check(header) == [("offset to point data", FAIL, "should be at least 381 and not 300")]

    def test_point_data_format_limit(self):
        assert maximum_point_data_format(1, 0) == 1
        assert maximum_point_data_format(1, 2) == 3
        assert maximum_point_data_format(1, 3) == 5
        assert maximum_point_data_format(1, 4) == 10
        diagnostics = run_check(header_with(point_data_format=4, point_data_record_length=57))
        assert ("point data format", FAIL, "should be between 0 and 3 and not 4") in diagnostics

    def test_point_data_record_length(self):
        assert run_check(header_with(point_data_record_length=27)) == [
            ("point data record length", FAIL, "should be at least 28 and not 27"),
        ]


# ===========================================================================
# 3. GLOBAL ENCODING
# ===========================================================================

class TestGlobalEncoding:

    def test_value_above_31(self):
        diagnostics = run_check(header_with(version_minor=4, header_size=375, offset_to_point_data=375,
                                            global_encoding=32))
        assert ("global encoding", FAIL, "should be 31 or smaller but is 32") in diagnostics

    def test_bit_4_before_14(self):
        assert ("global encoding", FAIL, "set bit 4 not defined for LAS version 1.2") in run_check(
            header_with(global_encoding=16)
        )

    def test_bit_4_required_for_extended_formats(self):
        header = header_with(version_minor=4, header_size=375, offset_to_point_data=375,
                             point_data_format=6, point_data_record_length=30, ogc_wkt="PROJCS[]")
        assert ("global encoding", FAIL, "bit 4 must be set (OGC WKT must be used) for point data format 6") in (
            run_check(header)
        )

    def test_waveform_format_needs_bit_1_or_2(self):
        header = header_with(version_minor=3, header_size=235, offset_to_point_data=235,
                             point_data_format=4, point_data_record_length=57)
        assert run_check(header) == [
            ("global encoding", FAIL, "neither bit 1 nor bit 2 are set for point data format 4"),
        ]

    def test_bits_1_and_2_exclusive(self):
        header = header_with(version_minor=3, header_size=235, offset_to_point_data=235,
                             point_data_format=4, point_data_record_length=57,
                             global_encoding=6, start_of_waveform_data_packet_record=1000)
        assert run_check(header) == [
            ("global encoding", FAIL, "although bit 1 and bit 2 are mutually exclusive they are both set"),
        ]

    def test_bit_0_on_format_0(self):
        assert run_check(header_with(point_data_format=0, point_data_record_length=20, global_encoding=1)) == [
            ("global encoding", FAIL, "set bit 0 not defined for point data format 0"),
        ]

    def test_gps_week_time_out_of_range(self):
        header = header_with(legacy_number_of_point_records=1, legacy_number_of_points_by_return=[1, 0, 0, 0, 0])
        diagnostics = run_check(header, [point(gps_time=700000.0)])
        assert diagnostics == [
            ("global encoding", FAIL, "unset bit 0 suggests GPS week time but GPS time ranges from 700000 to 700000"),
        ]


# ===========================================================================
# 4. IDENTIFIERS AND CREATION DATE
# ===========================================================================

class TestIdentifiersAndDate:

    def test_empty_identifier_is_warning(self):
        assert run_check(header_with(system_identifier=b"\0" * 32)) == [
            ("system identifier", WARNING, "empty string. first character is '\\0'"),
        ]

    def test_unterminated_identifier(self):
        assert run_check(header_with(generating_software=b"A" * 32)) == [
            ("generating software", FAIL, "string should be terminated by a '\\0' character"),
        ]

    def test_garbage_after_terminator(self):
        assert run_check(header_with(system_identifier=b"AB\0C" + b"\0" * 28)) == [
            ("system identifier", FAIL, "remaining characters should all be '\\0'"),
        ]

    def test_year_zero(self):
        assert run_check(header_with(file_creation_year=0, file_creation_day=0)) == [
            ("file creation day", FAIL, "not set"),
            ("file creation year", FAIL, "not set"),
        ]

    def test_year_zero_with_impossible_day(self):
        assert run_check(header_with(file_creation_year=0, file_creation_day=400)) == [
            ("file creation day", WARNING, "should be between 1 and 365 and not 400"),
            ("file creation year", FAIL, "not set"),
        ]

    def test_year_out_of_range(self):
        assert run_check(header_with(file_creation_year=1980)) == [
            ("file creation year", FAIL, "should be between 1990 and 2026 and not 1980"),
        ]

    def test_current_year_limited_to_today(self):
        assert run_check(header_with(file_creation_year=2026, file_creation_day=292)) == []
        assert run_check(header_with(file_creation_year=2026, file_creation_day=300)) == [
            ("file creation day", FAIL, "should be between 0 and 292 and not 300"),
        ]

    def test_leap_year(self):
        assert run_check(header_with(file_creation_year=2024, file_creation_day=366)) == []
        assert run_check(header_with(file_creation_year=2023, file_creation_day=366)) == [
            ("file creation day", FAIL, "should be between 0 and 365 and not 366"),
        ]


# ===========================================================================
# 5. SCALE FACTORS AND WAVEFORM OFFSET
# ===========================================================================

class TestScaleAndWaveform:

    def test_non_round_scale_is_warning_only(self):
        assert run_check(header_with(x_scale_factor=0.005)) == [
            ("x scale factor", WARNING, "should be factor ten of 0.1 or 0.25 and not 0.005"),
        ]

    def test_quarter_scales_are_round(self):
        assert run_check(header_with(x_scale_factor=0.25, y_scale_factor=0.0025, z_scale_factor=0.00025)) == []

    def test_non_positive_scale(self):
        assert run_check(header_with(z_scale_factor=0.0)) == [
            ("z scale factor", FAIL, "0 is equal to or smaller than zero"),
        ]

    def test_waveform_offset_without_bit_1(self):
        header = header_with(version_minor=3, header_size=235, offset_to_point_data=235,
                             start_of_waveform_data_packet_record=4096)
        assert run_check(header) == [
            ("start of waveform data packet record", FAIL,
             "should be 0 because global encoding bit 1 is not set and not 4096"),
        ]


# ===========================================================================
# 6. LAS 1.4 COUNTS
# ===========================================================================

class TestLegacyCounts:

    @pytest.fixture(scope="class")
    def header_14(self):
        return header_with(
            version_minor=4, header_size=375, offset_to_point_data=375,
            number_of_point_records=5,
            number_of_points_by_return=[5] + [0] * 14,
            legacy_number_of_point_records=3,
            legacy_number_of_points_by_return=[4, 0, 0, 0, 0],
        )

    def test_legacy_count_mismatch(self, header_14):
        diagnostics = run_check(header_14)
        assert diagnostics == [
            ("legacy number of point records", FAIL,
             "should be consistent with number of point records and either be 0 or 5 and not 3"),
            ("legacy number of point by return", FAIL,
             "should be consistent with number of point by return and either be 0 or 5 and not 4"),
        ]

    def test_zero_legacy_counts_are_allowed(self):
        header = header_with(
            version_minor=4, header_size=375, offset_to_point_data=375,
            number_of_point_records=5, number_of_points_by_return=[5] + [0] * 14,
        )
        assert run_check(header) == []


# ===========================================================================
# 7. INVENTORY CROSS-CHECKS
# ===========================================================================

class TestInventoryChecks:

    def test_point_counts_against_inventory(self):
        diagnostics = run_check(header_with(), [point(), point(return_number=2, number_of_returns=2)])
        assert diagnostics == [
            ("number of point records", FAIL, "there are only 2 point records and not 0"),
            ("number of point by return", FAIL, "the number of 1st return(s) is 1 and not 0"),
            ("number of point by return", FAIL, "the number of 2nd return(s) is 1 and not 0"),
            ("GPS time", WARNING, "time stamps of all 2 points are 0"),
        ]

    def test_min_x_outside_declared_bounds(self):
        header = header_with(
            min_x=100.0, max_x=200.0,
            legacy_number_of_point_records=1, legacy_number_of_points_by_return=[1, 0, 0, 0, 0],
        )
        assert run_check(header, [point(X=9000)]) == [
            ("min x", FAIL, "should be 90.00 and not 100.00"),
        ]

    def test_half_scale_unit_tolerance(self):
        header = header_with(
            min_x=100.004, max_x=200.0,
            legacy_number_of_point_records=1, legacy_number_of_points_by_return=[1, 0, 0, 0, 0],
        )
        assert run_check(header, [point(X=10000)]) == []

    def test_max_z_below_points(self):
        header = header_with(
            legacy_number_of_point_records=1, legacy_number_of_points_by_return=[1, 0, 0, 0, 0],
        )
        assert run_check(header, [point(Z=250)]) == [
            ("max z", FAIL, "should be 2.50 and not 0.00"),
        ]

    def test_invalid_return_numbers_before_14(self):
        header = header_with(
            legacy_number_of_point_records=2, legacy_number_of_points_by_return=[0, 0, 0, 0, 0],
        )
        points = [point(return_number=0, number_of_returns=0), point(return_number=6, number_of_returns=7, gps_time=1.0)]
        assert run_check(header, points) == [
            ("return number", WARNING, "there are 1 points with a return number of 0"),
            ("return number", WARNING, "there are 1 points with a return number of 6"),
            ("number of returns of given pulse", WARNING,
             "there are 1 points with a number of returns of given pulse of 0"),
            ("number of returns of given pulse", WARNING,
             "there are 1 points with a number of returns of given pulse of 7"),
        ]

    def test_constant_rgb(self):
        header = header_with(
            point_data_format=2, point_data_record_length=26,
            legacy_number_of_point_records=2, legacy_number_of_points_by_return=[2, 0, 0, 0, 0],
        )
        points = [point(rgb=(10, 20, 30), gps_time=1.0), point(rgb=(10, 20, 30), gps_time=2.0)]
        assert run_check(header, points) == [
            ("RGB", WARNING, "color of all 2 points is (10/20/30)"),
        ]

    def test_parse_counters(self):
        header = header_with(min_x=0.0, max_x=1.0)
        checker = HeaderConformanceChecker(header, CONFIG)
        checker.parse(point(X=50, return_number=0))
        checker.parse(point(X=500, return_number=3, number_of_returns=2))
        assert checker.counters.as_dict() == {
            "return number 0": 1,
            "number of returns 0": 0,
            "return number larger than number of returns": 1,
            "outside bounding box": 1,
        }


# ===========================================================================
# 8. CRS PRESENCE
# ===========================================================================

class TestCRSPresence:

    def test_unresolvable_geokeys(self):
        header = header_with(geokeys=[GeoKeyEntry(key_id=3072, value_offset=4000)])
        assert run_check(header) == [
            ("CRS", FAIL, "the 1 geokeys do not properly specify a Coordinate Reference System"),
        ]

    def test_extended_format_needs_wkt(self):
        header = header_with(
            version_minor=4, header_size=375, offset_to_point_data=375, global_encoding=16,
            point_data_format=6, point_data_record_length=30, geokeys=None,
        )
        assert run_check(header) == [
            ("CRS", FAIL,
             "file with point data format 6 does not specify Coordinate Reference System with OGC WKT string"),
        ]

    def test_wkt_is_not_validated(self):
        header = header_with(
            version_minor=4, header_size=375, offset_to_point_data=375, global_encoding=16,
            point_data_format=6, point_data_record_length=30, geokeys=None, ogc_wkt="PROJCS[\"x\"]",
        )
        assert run_check(header) == [
            ("CRS", WARNING, "there is a OGC WKT string but its check is not yet implemented"),
        ]

    def test_check_returns_resolved_context(self):
        header = header_with(geokeys=[GeoKeyEntry(key_id=3072, value_offset=32617)])
        context = HeaderConformanceChecker(header, CONFIG).check(DiagnosticSink())
        assert context.description() == "UTM 17 northern hemisphere"


# ===========================================================================
# 9. NUMBER FORMATTING
# ===========================================================================

class TestFormatting:

    def test_trim_trailing_zeros(self):
        assert format_double(2.0) == "2"
        assert format_double(2.5) == "2.5"
        assert format_double(0.1) == "0.1"
        assert format_double(-17.25) == "-17.25"

    def test_digits_follow_scale(self):
        assert format_double(90.0, 0.01) == "90.00"
        assert format_double(12.3456, 0.001) == "12.346"
        assert format_double(1.5, 0.25) == "1.5"
        assert format_double(17.9, 1.0) == "17"

    def test_very_fine_scale_falls_back_to_trim(self):
        assert format_double(1.0, 1e-9) == "1"

    def test_non_finite_values(self):
        assert format_double(float("inf"), 1.0) == "inf"
        assert format_double(float("-inf"), 0.01) == "-inf"
        assert format_double(float("nan")) == "nan"


class TestNonFiniteHeader:

    def test_infinite_offset_is_reported(self):
        header = header_with(x_scale_factor=1.0, x_offset=float("inf"))
        diagnostics = run_check(header, [point(X=0)])
        assert ("max x", FAIL, "should be inf and not 0") in diagnostics

    def test_nan_bound_does_not_stop_the_check(self):
        header = header_with(max_y=float("nan"))
        diagnostics = run_check(header, [point()])
        assert not any(category in ("min y", "max y") for category, _, _ in diagnostics)
