"""
Conformance checks of a LAS public header against the LAS 1.0-1.4 rules
and against the inventory of the points actually stored in the file.

Every rule runs, in a fixed order, regardless of what earlier rules found;
diagnostics are appended to the sink in that order.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from lascheck.core.crs_check import check_crs
from lascheck.core.crs_context import CRSContext
from lascheck.core.diagnostics import DiagnosticSink
from lascheck.core.formatting import format_double
from lascheck.core.inventory import Inventory, ParseCounters
from lascheck.domain.schemas import U32_MAX, LASHeader
from lascheck.models import CheckConfig, PointRecord

logger = logging.getLogger(__name__)

VLR_HEADER_SIZE = 54

WAVEFORM_FORMATS = (4, 5, 9, 10)
RGB_FORMATS = (2, 3, 7, 8, 10)

MIN_POINT_RECORD_LENGTH = {1: 28, 2: 26, 3: 34, 4: 57, 5: 63, 6: 30, 7: 36, 8: 38, 9: 59, 10: 67}

ROUND_SCALE_FACTORS = (
    0.01, 0.001, 0.1, 0.000001, 0.0000001, 0.00000001, 0.0001, 0.00001, 1.0,
    0.25, 0.025, 0.0025, 0.00025, 0.000025, 0.0000025,
)


def u32_clamp(value: int) -> int:
    return U32_MAX if value > U32_MAX else value


def ordinal_suffix(index: int) -> str:
    return ("st", "nd", "rd")[index] if index < 3 else "th"


def minimum_header_size(version_major: int, version_minor: int) -> int:
    size = 227
    if version_major == 1:
        if version_minor >= 3:
            size += 8
        if version_minor >= 4:
            size += 40
    return size


def maximum_point_data_format(version_major: int, version_minor: int) -> int:
    if version_major == 1:
        return {2: 3, 3: 5, 4: 10}.get(version_minor, 1)
    return 1


class HeaderConformanceChecker:
    """
    Feed every point with ``parse`` (or chunks with ``parse_points``), then
    call ``check`` once.
    """

    def __init__(self, header: LASHeader, config: Optional[CheckConfig] = None) -> None:
        self.header = header
        self.config = config or CheckConfig()
        self.inventory = Inventory()
        self.counters = ParseCounters(header)

    def parse(self, point: PointRecord) -> None:
        self.inventory.add_point(point)
        self.counters.add_point(point)

    def parse_points(
        self,
        return_number: np.ndarray,
        number_of_returns: np.ndarray,
        X: np.ndarray,
        Y: np.ndarray,
        Z: np.ndarray,
        gps_time: Optional[np.ndarray] = None,
        red: Optional[np.ndarray] = None,
        green: Optional[np.ndarray] = None,
        blue: Optional[np.ndarray] = None,
    ) -> None:
        self.inventory.add_points(return_number, number_of_returns, X, Y, Z, gps_time, red, green, blue)
        self.counters.add_points(return_number, number_of_returns, X, Y, Z)

    def check(self, sink: DiagnosticSink, context: Optional[CRSContext] = None) -> CRSContext:
        """Run all rules into ``sink``; returns the CRS context of the CRS check."""
        if context is None:
            context = CRSContext()
        self._check_signature(sink)
        self._check_global_encoding(sink)
        self._check_version(sink)
        self._check_identifier(sink, "system identifier", self.header.system_identifier)
        self._check_identifier(sink, "generating software", self.header.generating_software)
        self._check_creation_date(sink)
        self._check_header_size(sink)
        self._check_offset_to_point_data(sink)
        self._check_point_data_format(sink)
        self._check_point_data_record_length(sink)
        self._check_legacy_counts(sink)
        self._check_inventory_counts(sink)
        self._check_scale_factors(sink)
        self._check_waveform_offset(sink)
        self._check_bounding_box(sink)
        self._check_return_numbers(sink)
        self._check_gps_time(sink)
        self._check_rgb(sink)
        self._check_crs_presence(sink, context)
        logger.info("header check finished with %d fails and %d warnings", len(sink.fails), len(sink.warnings))
        return context

    # ------------------------------------------------------------------
    # individual rules
    # ------------------------------------------------------------------

    def _v14(self) -> bool:
        h = self.header
        return h.version_major == 1 and h.version_minor >= 4

    def _check_signature(self, sink: DiagnosticSink) -> None:
        if self.header.file_signature != "LASF":
            sink.add_fail("file signature", f"should be 'LASF' and not '{self.header.file_signature}'")

    def _check_global_encoding(self, sink: DiagnosticSink) -> None:
        h = self.header
        enc = h.global_encoding
        major, minor = h.version_major, h.version_minor
        pdf = h.point_data_format
        category = "global encoding"

        if enc > 31:
            sink.add_fail(category, f"should be 31 or smaller but is {enc}")

        if enc & 16:
            if major == 1 and minor <= 3:
                sink.add_fail(category, f"set bit 4 not defined for LAS version {major}.{minor}")
        elif major == 1 and minor >= 4 and pdf >= 6:
            sink.add_fail(category, f"bit 4 must be set (OGC WKT must be used) for point data format {pdf}")

        if enc & 8:
            if major == 1 and minor <= 2:
                sink.add_fail(category, f"set bit 3 not defined for LAS version {major}.{minor}")

        if enc & 4:
            if major == 1 and minor <= 2:
                sink.add_fail(category, f"set bit 2 not defined for LAS version {major}.{minor}")
            if pdf not in WAVEFORM_FORMATS:
                sink.add_fail(category, f"set bit 2 not defined for point data format {pdf}")
            if enc & 2:
                sink.add_fail(category, "although bit 1 and bit 2 are mutually exclusive they are both set")
        elif major == 1 and minor >= 3:
            if pdf in WAVEFORM_FORMATS and not enc & 2:
                sink.add_fail(category, f"neither bit 1 nor bit 2 are set for point data format {pdf}")

        if enc & 2:
            if major == 1 and minor <= 2:
                sink.add_fail(category, f"set bit 1 not defined for LAS version {major}.{minor}")
            if pdf not in WAVEFORM_FORMATS:
                sink.add_fail(category, f"set bit 1 not defined for point data format {pdf}")

        if enc & 1:
            if major == 1 and minor <= 0:
                sink.add_fail(category, f"set bit 0 not defined for LAS version {major}.{minor}")
            if pdf == 0:
                sink.add_fail(category, "set bit 0 not defined for point data format 0")
        elif pdf > 0 and self.inventory.active:
            inv = self.inventory
            if inv.min_gps_time < 0.0 or inv.max_gps_time > self.config.gps_week_seconds:
                sink.add_fail(
                    category,
                    f"unset bit 0 suggests GPS week time but GPS time ranges from "
                    f"{inv.min_gps_time:g} to {inv.max_gps_time:g}",
                )

    def _check_version(self, sink: DiagnosticSink) -> None:
        if self.header.version_major != 1:
            sink.add_fail("version major", f"should be 1 and not {self.header.version_major}")
        if self.header.version_minor not in (0, 1, 2, 3, 4):
            sink.add_fail("version minor", f"should be between 0 and 4 and not {self.header.version_minor}")

    @staticmethod
    def _check_identifier(sink: DiagnosticSink, category: str, value: bytes) -> None:
        terminator = value.find(b"\0")
        if terminator == -1:
            sink.add_fail(category, "string should be terminated by a '\\0' character")
            return
        if terminator == 0:
            sink.add_warning(category, "empty string. first character is '\\0'")
        if value[terminator:].strip(b"\0"):
            sink.add_fail(category, "remaining characters should all be '\\0'")

    def _check_creation_date(self, sink: DiagnosticSink) -> None:
        year = self.header.file_creation_year
        day = self.header.file_creation_day
        if year == 0:
            if day == 0:
                sink.add_fail("file creation day", "not set")
            elif day > 365:
                sink.add_warning("file creation day", f"should be between 1 and 365 and not {day}")
            sink.add_fail("file creation year", "not set")
            return

        today = self.config.reference_date()
        if year < 1990 or year > today.year:
            sink.add_fail("file creation year", f"should be between 1990 and {today.year} and not {year}")

        max_day_of_year = 365
        if year == today.year:
            max_day_of_year = today.timetuple().tm_yday
        elif year % 4 == 0:
            max_day_of_year += 1
        if day > max_day_of_year:
            sink.add_fail("file creation day", f"should be between 0 and {max_day_of_year} and not {day}")

    def _check_header_size(self, sink: DiagnosticSink) -> None:
        minimum = minimum_header_size(self.header.version_major, self.header.version_minor)
        if self.header.header_size < minimum:
            sink.add_fail("header size", f"should be at least {minimum} and not {self.header.header_size}")

    def _check_offset_to_point_data(self, sink: DiagnosticSink) -> None:
        minimum = self.header.header_size + sum(
            VLR_HEADER_SIZE + vlr.record_length_after_header for vlr in self.header.vlrs
        )
        if self.header.offset_to_point_data < minimum:
            sink.add_fail(
                "offset to point data", f"should be at least {minimum} and not {self.header.offset_to_point_data}"
            )

    def _check_point_data_format(self, sink: DiagnosticSink) -> None:
        maximum = maximum_point_data_format(self.header.version_major, self.header.version_minor)
        if self.header.point_data_format > maximum:
            sink.add_fail(
                "point data format", f"should be between 0 and {maximum} and not {self.header.point_data_format}"
            )

    def _check_point_data_record_length(self, sink: DiagnosticSink) -> None:
        minimum = MIN_POINT_RECORD_LENGTH.get(self.header.point_data_format, 20)
        if self.header.point_data_record_length < minimum:
            sink.add_fail(
                "point data record length",
                f"should be at least {minimum} and not {self.header.point_data_record_length}",
            )

    def _check_legacy_counts(self, sink: DiagnosticSink) -> None:
        if not self._v14():
            return
        h = self.header
        expected = u32_clamp(h.number_of_point_records)
        if h.legacy_number_of_point_records != 0 and h.legacy_number_of_point_records != expected:
            sink.add_fail(
                "legacy number of point records",
                f"should be consistent with number of point records and either be 0 or {expected} "
                f"and not {h.legacy_number_of_point_records}",
            )
        for i in range(5):
            legacy = h.legacy_number_of_points_by_return[i]
            expected = u32_clamp(h.number_of_points_by_return[i])
            if legacy != 0 and legacy != expected:
                sink.add_fail(
                    "legacy number of point by return",
                    f"should be consistent with number of point by return and either be 0 or {expected} "
                    f"and not {legacy}",
                )

    def _check_inventory_counts(self, sink: DiagnosticSink) -> None:
        inv = self.inventory
        if not inv.active:
            return
        h = self.header
        counted = inv.number_of_point_records
        if self._v14():
            if h.number_of_point_records != counted:
                sink.add_fail(
                    "number of point records",
                    f"there are only {counted} point records and not {h.number_of_point_records}",
                )
            for i in range(15):
                by_return = int(inv.number_of_points_by_return[i + 1])
                if h.number_of_points_by_return[i] != by_return:
                    sink.add_fail(
                        "number of point by return",
                        f"the number of {i + 1}{ordinal_suffix(i)} return(s) is {by_return} "
                        f"and not {h.number_of_points_by_return[i]}",
                    )
        else:
            if h.legacy_number_of_point_records != u32_clamp(counted):
                sink.add_fail(
                    "number of point records",
                    f"there are only {u32_clamp(counted)} point records and not {h.legacy_number_of_point_records}",
                )
            for i in range(5):
                by_return = u32_clamp(int(inv.number_of_points_by_return[i + 1]))
                if h.legacy_number_of_points_by_return[i] != by_return:
                    sink.add_fail(
                        "number of point by return",
                        f"the number of {i + 1}{ordinal_suffix(i)} return(s) is {by_return} "
                        f"and not {h.legacy_number_of_points_by_return[i]}",
                    )

    def _is_round_scale(self, scale: float) -> bool:
        tolerance = self.config.scale_tolerance
        return any(abs(scale - target) <= tolerance for target in ROUND_SCALE_FACTORS)

    def _check_scale_factors(self, sink: DiagnosticSink) -> None:
        scales = (
            ("x scale factor", self.header.x_scale_factor),
            ("y scale factor", self.header.y_scale_factor),
            ("z scale factor", self.header.z_scale_factor),
        )
        for category, scale in scales:
            if scale <= 0.0:
                sink.add_fail(category, f"{scale:g} is equal to or smaller than zero")
        for category, scale in scales:
            if not self._is_round_scale(scale):
                sink.add_warning(category, f"should be factor ten of 0.1 or 0.25 and not {scale:g}")

    def _check_waveform_offset(self, sink: DiagnosticSink) -> None:
        h = self.header
        if not (h.version_major == 1 and h.version_minor >= 3):
            return
        category = "start of waveform data packet record"
        bit_1 = bool(h.global_encoding & 2)
        if not bit_1 and h.start_of_waveform_data_packet_record != 0:
            sink.add_fail(
                category,
                f"should be 0 because global encoding bit 1 is not set and not {h.start_of_waveform_data_packet_record}",
            )
        elif bit_1 and h.start_of_waveform_data_packet_record == 0:
            sink.add_fail(category, "should not be 0 because global encoding bit 1 is set")

    def _check_bounding_box(self, sink: DiagnosticSink) -> None:
        inv = self.inventory
        if not inv.active:
            return
        h = self.header
        axes = (
            ("x", h.get_x, h.x_scale_factor, h.min_x, h.max_x, inv.min_X, inv.max_X),
            ("y", h.get_y, h.y_scale_factor, h.min_y, h.max_y, inv.min_Y, inv.max_Y),
            ("z", h.get_z, h.z_scale_factor, h.min_z, h.max_z, inv.min_Z, inv.max_Z),
        )
        for axis, convert, scale, declared_min, declared_max, raw_min, raw_max in axes:
            actual_min = convert(raw_min)
            actual_max = convert(raw_max)
            if declared_min - 0.5 * scale > actual_min:
                sink.add_fail(
                    f"min {axis}",
                    f"should be {format_double(actual_min, scale)} and not {format_double(declared_min, scale)}",
                )
            if declared_max + 0.5 * scale < actual_max:
                sink.add_fail(
                    f"max {axis}",
                    f"should be {format_double(actual_max, scale)} and not {format_double(declared_max, scale)}",
                )

    def _check_return_numbers(self, sink: DiagnosticSink) -> None:
        inv = self.inventory
        if not inv.active:
            return
        pre_14 = self.header.version_major == 1 and self.header.version_minor < 4
        histograms = (
            ("return number", "a return number", inv.number_of_points_by_return),
            (
                "number of returns of given pulse",
                "a number of returns of given pulse",
                inv.number_of_returns_of_given_pulse,
            ),
        )
        for category, label, counts in histograms:
            values = (0, 6, 7) if pre_14 else (0,)
            for value in values:
                if counts[value] != 0:
                    sink.add_warning(category, f"there are {int(counts[value])} points with {label} of {value}")

    def _check_gps_time(self, sink: DiagnosticSink) -> None:
        inv = self.inventory
        if self.header.point_data_format > 0 and inv.active:
            if inv.number_of_point_records > 1 and inv.min_gps_time == inv.max_gps_time:
                sink.add_warning(
                    "GPS time", f"time stamps of all {inv.number_of_point_records} points are {inv.min_gps_time:g}"
                )

    def _check_rgb(self, sink: DiagnosticSink) -> None:
        inv = self.inventory
        if self.header.point_data_format in RGB_FORMATS and inv.active:
            if (
                inv.number_of_point_records > 1
                and inv.min_R == inv.max_R
                and inv.min_G == inv.max_G
                and inv.min_B == inv.max_B
            ):
                sink.add_warning(
                    "RGB",
                    f"color of all {inv.number_of_point_records} points is ({inv.max_R}/{inv.max_G}/{inv.max_B})",
                )

    def _check_crs_presence(self, sink: DiagnosticSink, context: CRSContext) -> None:
        check_crs(self.header, sink, context)
