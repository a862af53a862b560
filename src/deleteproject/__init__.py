"""deleteproject — remove projects from a Visual Studio solution and delete them from disk."""

from deleteproject.core.commands import CommandID, CommandService, DeleteProjectCommand, SolutionHost
from deleteproject.core.config import GlobalConfig
from deleteproject.core.deleter import DeletionResult, ProjectDeleter, ProjectFailure
from deleteproject.core.errors import (
    DeleteProjectError,
    ProjectNotInSolutionError,
    SameDirectoryError,
    SolutionParseError,
)
from deleteproject.core.solution import SolutionFile, SolutionProject

__all__ = [
    "CommandID",
    "CommandService",
    "DeleteProjectCommand",
    "SolutionHost",
    "GlobalConfig",
    "DeletionResult",
    "ProjectDeleter",
    "ProjectFailure",
    "DeleteProjectError",
    "ProjectNotInSolutionError",
    "SameDirectoryError",
    "SolutionParseError",
    "SolutionFile",
    "SolutionProject",
]
