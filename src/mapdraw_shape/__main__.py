"""mapdraw-shape CLI.

Usage:
    python -m mapdraw_shape <command> <file> [options]

Input files are JSON arrays of {"lat": .., "lng": ..} records, as the map
host persists them. Every command prints JSON to stdout.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from mapdraw_shape.engine import build_shape_result, process_polygon, process_shape
from mapdraw_shape.models.geometry import LatLng, load_path
from mapdraw_shape.validators.diagnostics import diagnose_shape

app = typer.Typer(
    name="mapdraw_shape",
    help="mapdraw-shape: turn traced map paths into clean polygons.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log engine steps to stderr"),
):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load_points(file: Path) -> list[LatLng]:
    """Load a path file, exiting with a JSON error if it can't be used."""
    if not file.exists():
        _output({"ok": False, "error": f"File not found: {file}"})
        raise typer.Exit(1)
    try:
        return load_path(file)
    except json.JSONDecodeError as e:
        _output({"ok": False, "error": f"Invalid JSON in {file}: {e}"})
        raise typer.Exit(1)
    except ValidationError as e:
        _output({"ok": False, "error": f"Invalid coordinates in {file}: {e.error_count()} error(s)"})
        raise typer.Exit(1)


def _shape_json(polygons: list[list[LatLng]]) -> dict:
    """Structured view of a processed shape."""
    result = build_shape_result(polygons)
    anchor = result.highest_point
    bounds = result.bounds
    return {
        "ok": True,
        "count": len(result.polygons),
        "polygons": [[p.as_record() for p in polygon] for polygon in result.polygons],
        "shape": result.records,
        "anchor": anchor.as_record() if anchor else None,
        "bounds": bounds.model_dump() if bounds else None,
    }


def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def process(
    file: Path = typer.Argument(..., help="JSON file with the stored shape"),
    validate: bool = typer.Option(
        True, "--validate/--no-validate", help="Validate and repair the rings"
    ),
):
    """Split a stored shape into polygons."""
    points = _load_points(file)
    _output(_shape_json(process_shape(points, validate=validate)))


@app.command()
def draw(
    file: Path = typer.Argument(..., help="JSON file with the drawn path"),
    zoom: Optional[int] = typer.Option(
        None, "--zoom", "-z", help="Map zoom at draw completion (enables simplification)"
    ),
):
    """Close, simplify and validate a freshly drawn path."""
    points = _load_points(file)
    _output(_shape_json(process_polygon(points, simplify_zoom=zoom)))


@app.command()
def diagnose(
    file: Path = typer.Argument(..., help="JSON file with the path"),
    drawn: bool = typer.Option(
        False, "--drawn", help="Check as a freshly drawn path (as the draw command does)"
    ),
    zoom: Optional[int] = typer.Option(
        None, "--zoom", "-z", help="Map zoom at draw completion (with --drawn)"
    ),
):
    """Report loops that will be dropped, closed or repaired."""
    points = _load_points(file)
    issues = diagnose_shape(points, drawn=drawn, zoom=zoom)
    _output({
        "ok": True,
        "errors": sum(1 for i in issues if i.severity == "error"),
        "warnings": sum(1 for i in issues if i.severity == "warning"),
        "details": [
            {
                "severity": i.severity,
                "element_type": i.element_type,
                "element_id": i.element_id,
                "message": i.message,
            }
            for i in issues
        ],
    })


@app.command()
def version() -> None:
    """Show version."""
    from mapdraw_shape import __version__

    typer.echo(f"mapdraw-shape v{__version__}")


if __name__ == "__main__":
    app()
