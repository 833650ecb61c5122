from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from lascheck.core.crs_context import CRSContext, apply_user_overrides
from lascheck.core.diagnostics import DiagnosticSink
from lascheck.core.header_check import HeaderConformanceChecker
from lascheck.domain.schemas import CheckReport
from lascheck.infrastructure.reports import build_report
from lascheck.io import LASReadError, iter_point_chunks, read_header
from lascheck.models import CheckConfig, UserCRSConfig

logger = logging.getLogger(__name__)


def run(
    path: Path,
    config: Optional[CheckConfig] = None,
    user_crs: Optional[UserCRSConfig] = None,
    skip_points: bool = False,
) -> CheckReport:
    """
    Check one LAS file: header, points (unless skipped) and CRS.

    Raises LASReadError if the header cannot be read. Point records that
    cannot be read are logged and the header is checked without them.
    """
    config = config or CheckConfig()
    header = read_header(path)

    checker = HeaderConformanceChecker(header, config)
    points_read = False
    if skip_points:
        logger.info("skipping point records of %s", path)
    else:
        try:
            for chunk in iter_point_chunks(path, config.chunk_size):
                checker.parse_points(**chunk)
        except LASReadError as exc:
            # a header laspy rejects is still checked, without point statistics
            logger.warning("checking the header of %s only: %s", path, exc)
            checker = HeaderConformanceChecker(header, config)
        else:
            points_read = True
            logger.info("read %d points from %s", checker.inventory.number_of_point_records, path)

    context = CRSContext()
    if user_crs is not None and not user_crs.is_empty:
        if not apply_user_overrides(context, user_crs):
            logger.warning("some of the user CRS settings could not be applied")

    sink = DiagnosticSink()
    checker.check(sink, context)
    return build_report(header, sink, context, checker.counters if points_read else None, file=str(path))
