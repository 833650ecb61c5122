from __future__ import annotations

from typing import Optional

from lascheck.core.crs_context import CRSContext
from lascheck.core.diagnostics import DiagnosticSink
from lascheck.core.geokeys import interpret_geokeys
from lascheck.domain.schemas import LASHeader

# point data formats 6 and up declare their CRS with OGC WKT
FIRST_WKT_FORMAT = 6


def check_crs(header: LASHeader, sink: DiagnosticSink, context: Optional[CRSContext] = None) -> CRSContext:
    """
    Report whether the file declares the CRS record its point data format
    requires, then resolve whatever geokeys it carries. Returns the context
    holding the selection.
    """
    if context is None:
        context = CRSContext()

    if header.point_data_format < FIRST_WKT_FORMAT:
        if header.geokeys is None:
            sink.add_fail("CRS", "file does not specify a Coordinate Reference System with GEOTIFF tags")
    elif header.ogc_wkt is None:
        sink.add_fail(
            "CRS",
            f"file with point data format {header.point_data_format} does not specify Coordinate Reference System "
            f"with OGC WKT string",
        )

    if header.geokeys is not None:
        if not interpret_geokeys(header.geokeys, header.geokey_double_params, context, sink):
            sink.add_fail(
                "CRS",
                f"the {len(header.geokeys)} geokeys do not properly specify a Coordinate Reference System",
            )
    if header.ogc_wkt is not None:
        sink.add_warning("CRS", "there is a OGC WKT string but its check is not yet implemented")
    return context
