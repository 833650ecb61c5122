from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

SURVEY_FEET_TO_METER = 0.3048006096012


class LinearUnit(str, Enum):
    METER = "meter"
    FOOT = "foot"
    US_SURVEY_FOOT = "us-survey-foot"

    @property
    def proj_name(self) -> str:
        return {"meter": "m", "foot": "ft", "us-survey-foot": "us-ft"}[self.value]


# EPSG linear unit codes as used by the GeoTIFF unit keys
LINEAR_UNIT_CODES: Dict[int, LinearUnit] = {
    9001: LinearUnit.METER,
    9002: LinearUnit.FOOT,
    9003: LinearUnit.US_SURVEY_FOOT,
}


def linear_unit_from_code(code: int) -> Optional[LinearUnit]:
    return LINEAR_UNIT_CODES.get(code)


def classify_vertical_cs(code: int) -> Optional[str]:
    """
    Classify a vertical CS code into "ellipsoidal" [5000, 5099],
    "orthometric" [5101, 5199] or "reserved" [5200, 5999].
    Anything else (5100 included) is not a vertical CS code.
    """
    if 5000 <= code <= 5099:
        return "ellipsoidal"
    if 5101 <= code <= 5199:
        return "orthometric"
    if 5200 <= code <= 5999:
        return "reserved"
    return None
