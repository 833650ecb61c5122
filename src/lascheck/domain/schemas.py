from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

U32_MAX = 0xFFFFFFFF


def _identifier(text: str) -> bytes:
    raw = text.encode("ascii")
    return raw + b"\0" * (32 - len(raw))


class VariableLengthRecord(BaseModel):
    user_id: str = ""
    record_id: int = 0
    record_length_after_header: int = Field(0, ge=0)
    description: str = ""


class GeoKeyEntry(BaseModel):
    key_id: int
    tiff_tag_location: int = 0
    count: int = 1
    value_offset: int


class LASHeader(BaseModel):
    """
    Public header block of a LAS file plus the CRS-relevant VLR payloads.

    Field names follow the LAS specification. ``geokeys`` is None when the
    file carries no GeoKeyDirectory record, ``ogc_wkt`` is None when it
    carries no OGC WKT record.
    """
    file_signature: str = "LASF"
    global_encoding: int = Field(0, ge=0, le=0xFFFF)
    version_major: int = 1
    version_minor: int = 2
    system_identifier: bytes = Field(default_factory=lambda: _identifier("LAScheck"))
    generating_software: bytes = Field(default_factory=lambda: _identifier("lascheck"))
    file_creation_day: int = 1
    file_creation_year: int = 2020
    header_size: int = 227
    offset_to_point_data: int = 227
    vlrs: List[VariableLengthRecord] = Field(default_factory=list)
    point_data_format: int = 1
    point_data_record_length: int = 28
    legacy_number_of_point_records: int = Field(0, ge=0, le=U32_MAX)
    legacy_number_of_points_by_return: List[int] = Field(default_factory=lambda: [0] * 5)
    x_scale_factor: float = 0.01
    y_scale_factor: float = 0.01
    z_scale_factor: float = 0.01
    x_offset: float = 0.0
    y_offset: float = 0.0
    z_offset: float = 0.0
    max_x: float = 0.0
    min_x: float = 0.0
    max_y: float = 0.0
    min_y: float = 0.0
    max_z: float = 0.0
    min_z: float = 0.0
    start_of_waveform_data_packet_record: int = 0
    number_of_point_records: int = 0
    number_of_points_by_return: List[int] = Field(default_factory=lambda: [0] * 15)
    geokeys: Optional[List[GeoKeyEntry]] = None
    geokey_double_params: List[float] = Field(default_factory=list)
    ogc_wkt: Optional[str] = None

    @field_validator("system_identifier", "generating_software")
    @classmethod
    def check_identifier_width(cls, value: bytes) -> bytes:
        if len(value) != 32:
            raise ValueError(f"identifier fields are 32 bytes wide, got {len(value)}")
        return value

    @model_validator(mode="after")
    def check_return_arrays(self) -> "LASHeader":
        if len(self.legacy_number_of_points_by_return) != 5:
            raise ValueError("legacy_number_of_points_by_return must have 5 entries")
        if len(self.number_of_points_by_return) != 15:
            raise ValueError("number_of_points_by_return must have 15 entries")
        return self

    @property
    def number_of_variable_length_records(self) -> int:
        return len(self.vlrs)

    def get_x(self, X: int) -> float:
        return self.x_scale_factor * X + self.x_offset

    def get_y(self, Y: int) -> float:
        return self.y_scale_factor * Y + self.y_offset

    def get_z(self, Z: int) -> float:
        return self.z_scale_factor * Z + self.z_offset


class Severity(str, Enum):
    FAIL = "fail"
    WARNING = "warning"


class Diagnostic(BaseModel):
    category: str
    severity: Severity
    message: str


class UnsupportedCode(BaseModel):
    key: str
    value: int
    note: str


class CheckReport(BaseModel):
    file: Optional[str] = None
    version: str
    point_data_format: int
    diagnostics: List[Diagnostic]
    unsupported: List[UnsupportedCode]
    crs_description: Optional[str] = None
    proj4: Optional[str] = None
    point_counters: Dict[str, int] = Field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return not any(d.severity == Severity.FAIL for d in self.diagnostics)
