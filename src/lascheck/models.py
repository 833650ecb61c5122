from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional, Tuple


@dataclass(frozen=True)
class CheckConfig:
    """
    Knobs of the header conformance check.

    today:
      reference date for the creation-date rule; None means the current
      UTC date at check time.
    scale_tolerance:
      absolute tolerance when comparing scale factors to the round values.
    gps_week_seconds:
      upper bound of GPS week time when global encoding bit 0 is unset.
    chunk_size:
      points per chunk when streaming a file.
    """
    today: Optional[date] = None
    scale_tolerance: float = 1e-7
    gps_week_seconds: float = 604800.0
    chunk_size: int = 1_000_000

    def reference_date(self) -> date:
        if self.today is not None:
            return self.today
        return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class UserCRSConfig:
    """
    CRS declared by the user rather than by the file.

    utm_zone:           zone designator such as "17T"
    state_plane:        zone mnemonic such as "CA_I"
    state_plane_datum:  "NAD27" or "NAD83"
    horizontal_unit / elevation_unit: "meter" | "foot" | "us-survey-foot"
    """
    utm_zone: Optional[str] = None
    state_plane: Optional[str] = None
    state_plane_datum: str = "NAD83"
    ellipsoid_id: Optional[int] = None
    horizontal_unit: Optional[str] = None
    elevation_unit: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return all(
            v is None
            for v in (self.utm_zone, self.state_plane, self.ellipsoid_id, self.horizontal_unit, self.elevation_unit)
        )


@dataclass(frozen=True)
class PointRecord:
    return_number: int
    number_of_returns: int
    X: int
    Y: int
    Z: int
    gps_time: Optional[float] = None
    rgb: Optional[Tuple[int, int, int]] = None
