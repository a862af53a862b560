"""Command registration and the delete-project command handler."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from deleteproject.core.deleter import DeletionResult, ProjectDeleter
from deleteproject.core.errors import DeleteProjectError
from deleteproject.core.host import DialogService, Host, ProjectRef
from deleteproject.core.solution import SolutionFile, SolutionProject

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandID:
    group: uuid.UUID
    id: int

    def __str__(self) -> str:
        return f"{self.group}:{self.id:#06x}"


class CommandService:
    """Maps command ids to handlers for the lifetime of the host."""

    def __init__(self) -> None:
        self._handlers: dict[CommandID, Callable[[], Any]] = {}

    def add_command(self, command_id: CommandID, handler: Callable[[], Any]) -> None:
        if command_id in self._handlers:
            raise DeleteProjectError(f"Command {command_id} is already registered.")
        self._handlers[command_id] = handler
        logger.debug("Registered command %s", command_id)

    def invoke(self, command_id: CommandID) -> Any:
        return self._handlers[command_id]()

    def __contains__(self, command_id: object) -> bool:
        return command_id in self._handlers


class SolutionHost:
    """Host backed by a loaded solution file and an explicit selection."""

    def __init__(
        self,
        solution: SolutionFile,
        selection: Sequence[SolutionProject],
        dialogs: DialogService,
    ) -> None:
        self._solution = solution
        self._selection = list(selection)
        self.dialogs = dialogs

    @property
    def solution(self) -> SolutionFile:
        return self._solution

    def active_projects(self) -> list[ProjectRef]:
        return list(self._selection)


class DeleteProjectCommand:
    """Deletes the host's active projects when invoked."""

    COMMAND_SET = uuid.UUID("dcab2cd5-10ac-48ff-b398-34b8e2dc4f5b")
    COMMAND_ID = 0x0100

    def __init__(self, host: Host, command_service: CommandService) -> None:
        if host is None:
            raise ValueError("host is required")
        if command_service is None:
            raise ValueError("command_service is required")
        self.host = host
        self.command_id = CommandID(self.COMMAND_SET, self.COMMAND_ID)
        command_service.add_command(self.command_id, self.execute)

    @classmethod
    def initialize(cls, host: Host, command_service: CommandService) -> DeleteProjectCommand:
        return cls(host, command_service)

    def execute(self) -> DeletionResult:
        deleter = ProjectDeleter(self.host.dialogs)
        return deleter.confirm_and_delete(self.host.active_projects(), self.host.solution)
