"""deleteproject list — show the projects of a solution."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from deleteproject.cli import ui
from deleteproject.cli.delete import load_solution


def list_cmd(
    solution_path: Path = typer.Argument(..., help="Path to the .sln file"),
) -> None:
    """List the projects of a solution."""
    solution = load_solution(solution_path)
    projects = solution.projects

    if not projects:
        ui.info(f"No projects found in {escape(str(solution_path))}")
        return

    ui.header(f"Projects ({len(projects)})")
    ui.plain()
    rows = [(escape(p.name), escape(p.path), p.braced_guid) for p in projects]
    ui.table(["Name", "Path", "GUID"], rows)
