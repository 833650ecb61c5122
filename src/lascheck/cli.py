import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from lascheck.commands import check as check_command
from lascheck.core.crs_codes import resolve_projected_cs
from lascheck.core.crs_context import CRSContext
from lascheck.core.diagnostics import DiagnosticSink
from lascheck.core.units import LinearUnit
from lascheck.infrastructure.reports import format_summary, generate_markdown_report, save_diagnostics_csv
from lascheck.io import LASReadError
from lascheck.models import CheckConfig, UserCRSConfig

__version__ = "0.1.0"

app = typer.Typer(no_args_is_help=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@app.callback()
def main() -> None:
    """lascheck: LAS header conformance and CRS checks."""
    pass


@app.command()
def version() -> None:
    """Print version."""
    typer.echo(f"lascheck {__version__}")


@app.command()
def check(
    las_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="LAS file to check."),
    report: Optional[Path] = typer.Option(None, "--report", help="Write a Markdown report to this path."),
    csv: Optional[Path] = typer.Option(None, "--csv", help="Write the diagnostics as CSV to this path."),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON instead of text."),
    skip_points: bool = typer.Option(False, "--skip-points", help="Check the header only, without reading points."),
    utm: Optional[str] = typer.Option(None, "--utm", help="Declare a UTM zone such as 17T."),
    sp27: Optional[str] = typer.Option(None, "--sp27", help="Declare a NAD27 state plane zone such as CA_I."),
    sp83: Optional[str] = typer.Option(None, "--sp83", help="Declare a NAD83 state plane zone such as CA_I."),
    ellipsoid: Optional[int] = typer.Option(None, "--ellipsoid", help="Declare an ellipsoid by id (1-24)."),
    feet: bool = typer.Option(False, "--feet", help="Coordinates and elevations are in international feet."),
    survey_feet: bool = typer.Option(False, "--survey-feet", help="Coordinates and elevations are in US survey feet."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """
    Checks the header of a LAS file for conformance with the LAS
    specification, cross-checks it against the point records, and resolves
    the Coordinate Reference System declared by its GeoTIFF keys.
    """
    setup_logging(verbose)

    if sp27 and sp83:
        typer.echo("Error: --sp27 and --sp83 are mutually exclusive.", err=True)
        raise typer.Exit(code=2)
    if feet and survey_feet:
        typer.echo("Error: --feet and --survey-feet are mutually exclusive.", err=True)
        raise typer.Exit(code=2)

    unit = None
    if feet:
        unit = LinearUnit.FOOT.value
    elif survey_feet:
        unit = LinearUnit.US_SURVEY_FOOT.value
    user_crs = UserCRSConfig(
        utm_zone=utm,
        state_plane=sp27 or sp83,
        state_plane_datum="NAD27" if sp27 else "NAD83",
        ellipsoid_id=ellipsoid,
        horizontal_unit=unit,
        elevation_unit=unit,
    )

    try:
        result = check_command.run(las_file, CheckConfig(), user_crs, skip_points=skip_points)
    except (LASReadError, FileNotFoundError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        typer.echo(f"{las_file} (LAS {result.version}, point data format {result.point_data_format})")
        typer.echo(format_summary(result))

    if report:
        generate_markdown_report(result, report)
        typer.echo(f"Report generated at: {report}", err=as_json)
    if csv:
        save_diagnostics_csv(result, csv)
        typer.echo(f"Diagnostics saved to: {csv}", err=as_json)

    if not result.passed:
        raise typer.Exit(code=1)


@app.command("describe-crs")
def describe_crs(
    epsg: int = typer.Argument(..., help="Projected CRS code (ProjectedCSTypeGeoKey value)."),
    wkt: bool = typer.Option(False, "--wkt", help="Also print the CRS as WKT, as built by PROJ."),
) -> None:
    """
    Shows the ellipsoid and projection a projected CRS code resolves to.
    """
    context = CRSContext()
    sink = DiagnosticSink()
    if not resolve_projected_cs(epsg, context, sink):
        for code in sink.unsupported:
            typer.echo(f"Error: {code.note}", err=True)
        raise typer.Exit(code=1)

    slot = context.geokeys
    typer.echo(f"{epsg}: {slot.description}")
    if slot.ellipsoid is not None:
        typer.echo(f"ellipsoid: {slot.ellipsoid.describe()}")
    typer.echo(f"projection: {slot.projection.name}")
    typer.echo(f"  {slot.projection.description}")
    if slot.horizontal_unit is not None:
        typer.echo(f"units: {slot.horizontal_unit.value}")
    typer.echo(f"proj: {context.to_proj4()}")
    if wkt:
        typer.echo(context.to_crs().to_wkt(pretty=True))


if __name__ == "__main__":
    app()
