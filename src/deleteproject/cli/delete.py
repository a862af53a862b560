"""deleteproject delete — remove projects from a solution and delete them from disk."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
import yaml
from pydantic import ValidationError
from rich.markup import escape

from deleteproject.cli import ui
from deleteproject.cli.dialogs import AutoConfirmDialogs, ConsoleDialogs
from deleteproject.core.commands import CommandService, DeleteProjectCommand, SolutionHost
from deleteproject.core.config import GlobalConfig
from deleteproject.core.errors import SolutionParseError
from deleteproject.core.solution import SolutionFile


def load_solution(solution_path: Path) -> SolutionFile:
    """Load *solution_path* or exit with an error."""
    if not solution_path.is_file():
        ui.error(f"'{escape(str(solution_path))}' does not exist.")
        raise typer.Exit(1)
    try:
        return SolutionFile.load(solution_path)
    except (OSError, UnicodeDecodeError, SolutionParseError) as e:
        ui.error(f"Could not read '{escape(str(solution_path))}': {escape(str(e))}")
        raise typer.Exit(1)


def delete(
    solution_path: Path = typer.Argument(..., help="Path to the .sln file"),
    projects: List[str] = typer.Argument(..., help="Names of the projects to delete"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation prompt"),
    no_save: bool = typer.Option(False, "--no-save", help="Do not write the updated solution file"),
    backup: Optional[bool] = typer.Option(
        None, "--backup/--no-backup", help="Keep a .bak copy of the solution file (default from config)"
    ),
) -> None:
    """Remove projects from a solution and delete their directories."""
    try:
        cfg = GlobalConfig.load()
    except (ValidationError, yaml.YAMLError) as e:
        ui.error(f"Invalid config: {escape(str(e))}")
        raise typer.Exit(1)
    solution = load_solution(solution_path)

    selection = []
    missing = []
    for name in projects:
        project = solution.find(name)
        if project is None:
            missing.append(name)
        else:
            selection.append(project)
    if missing:
        for name in missing:
            ui.error(f"Project '{escape(name)}' not found in {escape(solution_path.name)}.")
        raise typer.Exit(1)

    dialogs = AutoConfirmDialogs() if yes or not cfg.confirm else ConsoleDialogs()
    service = CommandService()
    command = DeleteProjectCommand.initialize(SolutionHost(solution, selection, dialogs), service)
    result = service.invoke(command.command_id)

    if not result.confirmed:
        typer.echo("Aborted.")
        raise typer.Exit(0)

    failed = {id(f.project) for f in result.failures}
    for project in result.removed:
        if id(project) not in failed:
            ui.success(f"Deleted project '{escape(project.name)}'.")

    if solution.dirty and not no_save:
        try:
            saved = solution.save(backup=cfg.backup if backup is None else backup)
        except OSError as e:
            ui.error(f"Could not write '{escape(solution.file_name)}': {escape(str(e))}")
            raise typer.Exit(1)
        ui.info(f"Updated {escape(str(saved))}")

    if not result.ok:
        raise typer.Exit(1)
