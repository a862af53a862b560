"""Interfaces the command consumes from its host."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Protocol, Sequence, runtime_checkable


class MessageIcon(str, Enum):
    WARNING = "warning"
    CRITICAL = "critical"


class MessageButtons(str, Enum):
    OK = "ok"
    OK_CANCEL = "ok_cancel"


class DefaultButton(IntEnum):
    FIRST = 1
    SECOND = 2


class DialogResult(IntEnum):
    OK = 1
    CANCEL = 2


@runtime_checkable
class ProjectRef(Protocol):
    """A project selected in the host."""

    @property
    def name(self) -> str: ...

    @property
    def file_name(self) -> str: ...


@runtime_checkable
class SolutionRef(Protocol):
    """The solution owning the selected projects."""

    @property
    def file_name(self) -> str: ...

    def remove(self, project: ProjectRef) -> None: ...


class DialogService(Protocol):
    """Modal message boxes. ``show`` blocks until the user answers."""

    def show(
        self,
        message: str,
        title: str | None,
        icon: MessageIcon,
        buttons: MessageButtons,
        default_button: DefaultButton,
    ) -> DialogResult: ...


class Host(Protocol):
    """Everything a command needs from the application it runs in."""

    dialogs: DialogService

    @property
    def solution(self) -> SolutionRef: ...

    def active_projects(self) -> Sequence[ProjectRef]: ...
