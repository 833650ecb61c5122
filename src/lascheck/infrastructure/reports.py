from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import pandas as pd

from lascheck.core.crs_context import CRSContext
from lascheck.core.diagnostics import DiagnosticSink
from lascheck.core.inventory import ParseCounters
from lascheck.domain.schemas import CheckReport, LASHeader, Severity


def build_report(
    header: LASHeader,
    sink: DiagnosticSink,
    context: CRSContext,
    counters: Optional[ParseCounters] = None,
    file: Optional[str] = None,
) -> CheckReport:
    # the user slot wins over what the geokeys declared
    from_geokeys = context.user.projection is None
    return CheckReport(
        file=file,
        version=f"{header.version_major}.{header.version_minor}",
        point_data_format=header.point_data_format,
        diagnostics=list(sink.diagnostics),
        unsupported=list(sink.unsupported),
        crs_description=context.description(from_geokeys),
        proj4=context.to_proj4(from_geokeys),
        point_counters=counters.as_dict() if counters is not None else {},
    )


def diagnostics_dataframe(report: CheckReport) -> pd.DataFrame:
    rows = [d.model_dump(mode="json") for d in report.diagnostics]
    return pd.DataFrame(rows, columns=["category", "severity", "message"])


def save_diagnostics_csv(report: CheckReport, path: Union[str, Path]) -> None:
    diagnostics_dataframe(report).to_csv(path, index=False)


def format_summary(report: CheckReport) -> str:
    """Plain-text lines as printed by the CLI."""
    lines = []
    for d in report.diagnostics:
        lines.append(f"  {d.severity.value:<8} {d.category}: {d.message}")
    if report.crs_description:
        lines.append(f"  CRS: {report.crs_description}")
    for code in report.unsupported:
        lines.append(f"  unsupported {code.key}: {code.note}")
    for name, count in report.point_counters.items():
        if count:
            lines.append(f"  {count} points with {name}")
    verdict = "pass" if report.passed else "fail"
    n_fail = sum(1 for d in report.diagnostics if d.severity == Severity.FAIL)
    n_warn = len(report.diagnostics) - n_fail
    lines.append(f"{verdict}: {n_fail} fail(s), {n_warn} warning(s)")
    return "\n".join(lines)


def generate_markdown_report(report: CheckReport, output_path: Union[str, Path]) -> None:
    """
    Write a Markdown report of a header check.
    """
    df = diagnostics_dataframe(report)

    lines = [
        "# LAS Header Check Report",
        "",
        f"**File:** {report.file or '-'}",
        "",
        f"**LAS version:** {report.version}  ",
        f"**Point data format:** {report.point_data_format}  ",
        f"**Result:** {'PASS' if report.passed else 'FAIL'}",
        "",
        "## Coordinate Reference System",
        "",
        f"- Description: {report.crs_description or 'not resolved'}",
    ]
    if report.proj4:
        lines.append(f"- PROJ: `{report.proj4}`")
    lines.append("")

    lines.extend(["## Diagnostics", ""])
    if df.empty:
        lines.append("No findings.")
    else:
        lines.append("| Severity | Category | Message |")
        lines.append("|---|---|---|")
        for row in df.itertuples(index=False):
            lines.append(f"| {row.severity} | {row.category} | {row.message} |")
    lines.append("")

    if report.unsupported:
        lines.extend(["## Unsupported Codes", ""])
        for code in report.unsupported:
            lines.append(f"- {code.key} {code.value}: {code.note}")
        lines.append("")

    if report.point_counters:
        lines.extend(["## Point Statistics", ""])
        for name, count in report.point_counters.items():
            lines.append(f"- points with {name}: {count}")
        lines.append("")

    Path(output_path).write_text("\n".join(lines), encoding="utf-8")
