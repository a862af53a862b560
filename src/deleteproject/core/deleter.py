"""Confirm, detach and delete the selected projects of a solution."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from typing import Callable, Sequence

from deleteproject.core.errors import SameDirectoryError
from deleteproject.core.host import (
    DefaultButton,
    DialogResult,
    DialogService,
    MessageButtons,
    MessageIcon,
    ProjectRef,
    SolutionRef,
)
from deleteproject.core.paths import directory_of, same_directory

logger = logging.getLogger(__name__)

DELETING_PROJECT_MESSAGE = (
    "Project {0} will be removed from the solution and its directory deleted from disk."
)
DELETING_PROJECTS_MESSAGE = (
    "Projects {0} will be removed from the solution and their directories deleted from disk."
)


@dataclass
class ProjectFailure:
    project: ProjectRef
    error: BaseException

    @property
    def message(self) -> str:
        return str(self.error) or type(self.error).__name__

    def line(self) -> str:
        return f"'{self.project.name}': {self.message}"


@dataclass
class DeletionResult:
    confirmed: bool = False
    removed: list[ProjectRef] = field(default_factory=list)
    deleted: list[str] = field(default_factory=list)
    failures: list[ProjectFailure] = field(default_factory=list)
    critical: bool = False

    @property
    def ok(self) -> bool:
        return not self.failures

    def report(self) -> str:
        return "\n".join(f.line() for f in self.failures)


def confirmation_message(projects: Sequence[ProjectRef]) -> str:
    """Build the singular or plural confirmation text for *projects*."""
    if len(projects) == 1:
        return DELETING_PROJECT_MESSAGE.format(f"'{projects[0].name}'")
    return DELETING_PROJECTS_MESSAGE.format(", ".join(f"'{p.name}'" for p in projects))


def _unique(projects: Sequence[ProjectRef]) -> list[ProjectRef]:
    seen: set[int] = set()
    result = []
    for project in projects:
        if id(project) in seen:
            continue
        seen.add(id(project))
        result.append(project)
    return result


class ProjectDeleter:
    """Deletes projects from a solution and from disk after asking the user.

    ``remove_tree`` defaults to :func:`shutil.rmtree`; tests and hosts can
    pass another callable taking the directory to delete.
    """

    def __init__(
        self,
        dialogs: DialogService,
        remove_tree: Callable[[str], None] | None = None,
    ) -> None:
        self.dialogs = dialogs
        self.remove_tree = remove_tree or shutil.rmtree

    def confirm_and_delete(
        self, active_projects: Sequence[ProjectRef], solution: SolutionRef
    ) -> DeletionResult:
        result = DeletionResult()
        projects = _unique(active_projects)
        if not projects:
            return result

        answer = self.dialogs.show(
            confirmation_message(projects),
            None,
            MessageIcon.WARNING,
            MessageButtons.OK_CANCEL,
            DefaultButton.FIRST,
        )
        if answer != DialogResult.OK:
            logger.debug("Deletion cancelled by user")
            return result

        result.confirmed = True
        solution_dir = directory_of(solution.file_name)

        for project in projects:
            try:
                project_dir = directory_of(project.file_name)

                # Detached even when the guard below keeps the directory.
                solution.remove(project)
                result.removed.append(project)
                logger.debug("Removed '%s' from %s", project.name, solution.file_name)

                if same_directory(solution_dir, project_dir):
                    raise SameDirectoryError()
                self.remove_tree(project_dir)
                result.deleted.append(project_dir)
                logger.debug("Deleted directory %s", project_dir)
            except Exception as e:
                logger.info("Could not delete '%s': %s", project.name, e)
                result.failures.append(ProjectFailure(project, e))
                if not isinstance(e, SameDirectoryError):
                    result.critical = True

        if result.failures:
            self.dialogs.show(
                result.report(),
                None,
                MessageIcon.CRITICAL if result.critical else MessageIcon.WARNING,
                MessageButtons.OK,
                DefaultButton.FIRST,
            )

        return result
