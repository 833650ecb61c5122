"""
LAS file adapter.

The public header and the (E)VLR headers are decoded straight from the
bytes so that non-conforming values reach the checker unchanged. The point
records are streamed with laspy.
"""
from __future__ import annotations

import logging
import struct
from pathlib import Path
from typing import BinaryIO, Dict, Iterator, List, Optional, Tuple, Union

import laspy
import numpy as np
from laspy.errors import LaspyException

from lascheck.domain.schemas import GeoKeyEntry, LASHeader, VariableLengthRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_PUBLIC_HEADER = struct.Struct("<4sHH16sBB32s32sHHHIIBHI5I3d3d6d")
_WAVEFORM = struct.Struct("<Q")
_LAS14_EXTENSION = struct.Struct("<QIQ15Q")
_VLR_HEADER = struct.Struct("<H16sHH32s")
_EVLR_HEADER = struct.Struct("<H16sHQ32s")

GEOKEY_DIRECTORY = 34735
GEO_DOUBLE_PARAMS = 34736
OGC_WKT = 2112


class LASReadError(ValueError):
    """The file is not readable as LAS."""


def _text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("ascii", errors="replace")


def _read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise LASReadError(f"truncated {what}: expected {size} bytes, got {len(data)}")
    return data


def parse_geokey_directory(payload: bytes) -> List[GeoKeyEntry]:
    """Decode a GeoKeyDirectoryTag payload into its key entries."""
    if len(payload) < 8:
        raise LASReadError(f"GeoKeyDirectory record too short ({len(payload)} bytes)")
    shorts = np.frombuffer(payload[: len(payload) - len(payload) % 2], dtype="<u2")
    number_of_keys = int(shorts[3])
    available = (len(shorts) - 4) // 4
    if number_of_keys > available:
        logger.warning("GeoKeyDirectory declares %d keys but holds %d", number_of_keys, available)
        number_of_keys = available
    entries = shorts[4: 4 + 4 * number_of_keys].reshape(-1, 4)
    return [
        GeoKeyEntry(
            key_id=int(key_id),
            tiff_tag_location=int(location),
            count=int(count),
            value_offset=int(value_offset),
        )
        for key_id, location, count, value_offset in entries
    ]


def parse_geo_double_params(payload: bytes) -> List[float]:
    usable = len(payload) - len(payload) % 8
    return [float(v) for v in np.frombuffer(payload[:usable], dtype="<f8")]


def parse_ogc_wkt(payload: bytes) -> str:
    return payload.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def _read_records(
    stream: BinaryIO, count: int, layout: struct.Struct, what: str
) -> List[Tuple[VariableLengthRecord, bytes]]:
    records = []
    for index in range(count):
        _, user_id, record_id, length, description = layout.unpack(
            _read_exact(stream, layout.size, f"{what} header {index}")
        )
        payload = _read_exact(stream, length, f"{what} {index} payload")
        vlr = VariableLengthRecord(
            user_id=_text(user_id),
            record_id=record_id,
            record_length_after_header=length,
            description=_text(description),
        )
        records.append((vlr, payload))
    return records


def read_header(path: PathLike) -> LASHeader:
    """
    Read the public header block and the CRS records of a LAS file.

    Raises LASReadError if the file is too short to hold a header or a
    declared record.
    """
    path = Path(path)
    with path.open("rb") as stream:
        raw = stream.read(_PUBLIC_HEADER.size)
        if len(raw) < _PUBLIC_HEADER.size:
            raise LASReadError(f"{path} is too short to be a LAS file ({len(raw)} bytes)")
        (
            signature, _file_source_id, global_encoding, _guid,
            version_major, version_minor, system_identifier, generating_software,
            creation_day, creation_year, header_size, offset_to_point_data,
            number_of_vlrs, point_data_format, point_data_record_length,
            legacy_point_count, *rest,
        ) = _PUBLIC_HEADER.unpack(raw)
        legacy_by_return = list(rest[0:5])
        x_scale, y_scale, z_scale, x_offset, y_offset, z_offset = rest[5:11]
        max_x, min_x, max_y, min_y, max_z, min_z = rest[11:17]

        fields: Dict[str, object] = {}
        evlr_start, evlr_count = 0, 0
        if version_major == 1 and version_minor >= 3 and header_size >= _PUBLIC_HEADER.size + _WAVEFORM.size:
            (fields["start_of_waveform_data_packet_record"],) = _WAVEFORM.unpack(
                _read_exact(stream, _WAVEFORM.size, "waveform offset")
            )
        if (
            version_major == 1
            and version_minor >= 4
            and header_size >= _PUBLIC_HEADER.size + _WAVEFORM.size + _LAS14_EXTENSION.size
        ):
            evlr_start, evlr_count, point_count, *by_return = _LAS14_EXTENSION.unpack(
                _read_exact(stream, _LAS14_EXTENSION.size, "LAS 1.4 header extension")
            )
            fields["number_of_point_records"] = point_count
            fields["number_of_points_by_return"] = list(by_return)

        stream.seek(header_size)
        records = _read_records(stream, number_of_vlrs, _VLR_HEADER, "VLR")
        evlrs: List[Tuple[VariableLengthRecord, bytes]] = []
        if evlr_count:
            stream.seek(evlr_start)
            evlrs = _read_records(stream, evlr_count, _EVLR_HEADER, "EVLR")

    geokeys: Optional[List[GeoKeyEntry]] = None
    double_params: List[float] = []
    ogc_wkt: Optional[str] = None
    for vlr, payload in records + evlrs:
        if vlr.user_id != "LASF_Projection":
            continue
        if vlr.record_id == GEOKEY_DIRECTORY:
            geokeys = parse_geokey_directory(payload)
        elif vlr.record_id == GEO_DOUBLE_PARAMS:
            double_params = parse_geo_double_params(payload)
        elif vlr.record_id == OGC_WKT:
            ogc_wkt = parse_ogc_wkt(payload)

    logger.debug(
        "%s: LAS %d.%d, point data format %d, %d VLRs, %d EVLRs",
        path, version_major, version_minor, point_data_format & 0x3F, len(records), len(evlrs),
    )
    return LASHeader(
        file_signature=signature.decode("latin-1"),
        global_encoding=global_encoding,
        version_major=version_major,
        version_minor=version_minor,
        system_identifier=system_identifier,
        generating_software=generating_software,
        file_creation_day=creation_day,
        file_creation_year=creation_year,
        header_size=header_size,
        offset_to_point_data=offset_to_point_data,
        vlrs=[vlr for vlr, _ in records],
        point_data_format=point_data_format & 0x3F,
        point_data_record_length=point_data_record_length,
        legacy_number_of_point_records=legacy_point_count,
        legacy_number_of_points_by_return=legacy_by_return,
        x_scale_factor=x_scale,
        y_scale_factor=y_scale,
        z_scale_factor=z_scale,
        x_offset=x_offset,
        y_offset=y_offset,
        z_offset=z_offset,
        max_x=max_x,
        min_x=min_x,
        max_y=max_y,
        min_y=min_y,
        max_z=max_z,
        min_z=min_z,
        geokeys=geokeys,
        geokey_double_params=double_params,
        ogc_wkt=ogc_wkt,
        **fields,
    )


def iter_point_chunks(path: PathLike, chunk_size: int = 1_000_000) -> Iterator[Dict[str, np.ndarray]]:
    """
    Yield the point records as dicts of numpy arrays with the keys
    return_number, number_of_returns, X, Y, Z and, where the point format
    has them, gps_time, red, green, blue.
    """
    try:
        with laspy.open(str(path)) as reader:
            names = set(reader.header.point_format.dimension_names)
            extra = [name for name in ("gps_time", "red", "green", "blue") if name in names]
            for points in reader.chunk_iterator(chunk_size):
                chunk = {
                    "return_number": np.asarray(points.return_number),
                    "number_of_returns": np.asarray(points.number_of_returns),
                    "X": np.asarray(points.X),
                    "Y": np.asarray(points.Y),
                    "Z": np.asarray(points.Z),
                }
                for name in extra:
                    chunk[name] = np.asarray(points[name])
                yield chunk
    except LaspyException as exc:
        raise LASReadError(f"cannot read points of {path}: {exc}") from exc
