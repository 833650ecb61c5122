from __future__ import annotations

from typing import Dict, Optional

import numpy as np

from lascheck.domain.schemas import LASHeader
from lascheck.models import PointRecord

RETURN_SLOTS = 16


class Inventory:
    """
    Statistics gathered in one pass over the point records.

    Counts are indexed by the value found in the point (0..15), so index 0
    and, before LAS 1.4, indices 6 and 7 hold invalid values for the checker
    to report. Extrema are raw integer coordinates. Missing GPS time or RGB
    count as zero.
    """

    def __init__(self) -> None:
        self.number_of_point_records = 0
        self.number_of_points_by_return = np.zeros(RETURN_SLOTS, dtype=np.int64)
        self.number_of_returns_of_given_pulse = np.zeros(RETURN_SLOTS, dtype=np.int64)
        self.min_X = self.max_X = 0
        self.min_Y = self.max_Y = 0
        self.min_Z = self.max_Z = 0
        self.min_gps_time = self.max_gps_time = 0.0
        self.min_R = self.max_R = 0
        self.min_G = self.max_G = 0
        self.min_B = self.max_B = 0

    @property
    def active(self) -> bool:
        return self.number_of_point_records > 0

    def add_point(self, point: PointRecord) -> None:
        gps_time = point.gps_time if point.gps_time is not None else 0.0
        r, g, b = point.rgb if point.rgb is not None else (0, 0, 0)

        self.number_of_points_by_return[point.return_number] += 1
        self.number_of_returns_of_given_pulse[point.number_of_returns] += 1

        if self.number_of_point_records == 0:
            self.min_X = self.max_X = point.X
            self.min_Y = self.max_Y = point.Y
            self.min_Z = self.max_Z = point.Z
            self.min_gps_time = self.max_gps_time = gps_time
            self.min_R = self.max_R = r
            self.min_G = self.max_G = g
            self.min_B = self.max_B = b
        else:
            self.min_X = min(self.min_X, point.X)
            self.max_X = max(self.max_X, point.X)
            self.min_Y = min(self.min_Y, point.Y)
            self.max_Y = max(self.max_Y, point.Y)
            self.min_Z = min(self.min_Z, point.Z)
            self.max_Z = max(self.max_Z, point.Z)
            self.min_gps_time = min(self.min_gps_time, gps_time)
            self.max_gps_time = max(self.max_gps_time, gps_time)
            self.min_R = min(self.min_R, r)
            self.max_R = max(self.max_R, r)
            self.min_G = min(self.min_G, g)
            self.max_G = max(self.max_G, g)
            self.min_B = min(self.min_B, b)
            self.max_B = max(self.max_B, b)
        self.number_of_point_records += 1

    def add_points(
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
        """Chunked equivalent of calling add_point for every element."""
        n = len(X)
        if n == 0:
            return
        zeros = np.zeros(n, dtype=np.int64)
        if gps_time is None:
            gps_time = np.zeros(n, dtype=np.float64)
        red = zeros if red is None else red
        green = zeros if green is None else green
        blue = zeros if blue is None else blue

        self.number_of_points_by_return += np.bincount(
            np.asarray(return_number, dtype=np.int64), minlength=RETURN_SLOTS
        )[:RETURN_SLOTS]
        self.number_of_returns_of_given_pulse += np.bincount(
            np.asarray(number_of_returns, dtype=np.int64), minlength=RETURN_SLOTS
        )[:RETURN_SLOTS]

        chunk = {
            "X": (int(np.min(X)), int(np.max(X))),
            "Y": (int(np.min(Y)), int(np.max(Y))),
            "Z": (int(np.min(Z)), int(np.max(Z))),
            "gps_time": (float(np.min(gps_time)), float(np.max(gps_time))),
            "R": (int(np.min(red)), int(np.max(red))),
            "G": (int(np.min(green)), int(np.max(green))),
            "B": (int(np.min(blue)), int(np.max(blue))),
        }
        first = self.number_of_point_records == 0
        for name, (lo, hi) in chunk.items():
            if first:
                setattr(self, f"min_{name}", lo)
                setattr(self, f"max_{name}", hi)
            else:
                setattr(self, f"min_{name}", min(getattr(self, f"min_{name}"), lo))
                setattr(self, f"max_{name}", max(getattr(self, f"max_{name}"), hi))
        self.number_of_point_records += n


class ParseCounters:
    """
    Per-point anomaly counts reported in the summary only.

    The bounding box is the header's, widened by one scale unit per side.
    """

    def __init__(self, header: LASHeader) -> None:
        self.header = header
        self.min_x = header.min_x - header.x_scale_factor
        self.min_y = header.min_y - header.y_scale_factor
        self.min_z = header.min_z - header.z_scale_factor
        self.max_x = header.max_x + header.x_scale_factor
        self.max_y = header.max_y + header.y_scale_factor
        self.max_z = header.max_z + header.z_scale_factor
        self.points_with_return_number_zero = 0
        self.points_with_number_of_returns_zero = 0
        self.points_with_return_number_larger_than_number_of_returns = 0
        self.points_outside_bounding_box = 0

    def add_point(self, point: PointRecord) -> None:
        if point.return_number == 0:
            self.points_with_return_number_zero += 1
        if point.number_of_returns == 0:
            self.points_with_number_of_returns_zero += 1
        if point.return_number > point.number_of_returns:
            self.points_with_return_number_larger_than_number_of_returns += 1
        x = self.header.get_x(point.X)
        y = self.header.get_y(point.Y)
        z = self.header.get_z(point.Z)
        if not (
            self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y and self.min_z <= z <= self.max_z
        ):
            self.points_outside_bounding_box += 1

    def add_points(
        self,
        return_number: np.ndarray,
        number_of_returns: np.ndarray,
        X: np.ndarray,
        Y: np.ndarray,
        Z: np.ndarray,
    ) -> None:
        return_number = np.asarray(return_number)
        number_of_returns = np.asarray(number_of_returns)
        x = self.header.x_scale_factor * np.asarray(X, dtype=np.float64) + self.header.x_offset
        y = self.header.y_scale_factor * np.asarray(Y, dtype=np.float64) + self.header.y_offset
        z = self.header.z_scale_factor * np.asarray(Z, dtype=np.float64) + self.header.z_offset
        inside = (
            (x >= self.min_x) & (x <= self.max_x)
            & (y >= self.min_y) & (y <= self.max_y)
            & (z >= self.min_z) & (z <= self.max_z)
        )
        self.points_with_return_number_zero += int(np.count_nonzero(return_number == 0))
        self.points_with_number_of_returns_zero += int(np.count_nonzero(number_of_returns == 0))
        self.points_with_return_number_larger_than_number_of_returns += int(
            np.count_nonzero(return_number > number_of_returns)
        )
        self.points_outside_bounding_box += int(np.count_nonzero(~inside))

    def as_dict(self) -> Dict[str, int]:
        return {
            "return number 0": self.points_with_return_number_zero,
            "number of returns 0": self.points_with_number_of_returns_zero,
            "return number larger than number of returns": (
                self.points_with_return_number_larger_than_number_of_returns
            ),
            "outside bounding box": self.points_outside_bounding_box,
        }
