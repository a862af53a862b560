"""Exception types raised by deleteproject."""

from __future__ import annotations

SAME_DIRECTORY_MESSAGE = "solution and project share the same directory"


class DeleteProjectError(Exception):
    """Base class for errors raised by deleteproject itself."""


class SameDirectoryError(DeleteProjectError):
    """The project lives in the solution's own directory and must not be deleted."""

    def __init__(self, message: str = SAME_DIRECTORY_MESSAGE) -> None:
        super().__init__(message)


class SolutionParseError(DeleteProjectError):
    """The solution file could not be parsed."""


class ProjectNotInSolutionError(DeleteProjectError):
    """The project is not (or no longer) part of the solution."""
