"""Terminal implementations of the modal dialog service."""

from __future__ import annotations

import typer
from rich.markup import escape

from deleteproject.cli import ui
from deleteproject.core.host import DefaultButton, DialogResult, MessageButtons, MessageIcon


def _print(message: str, title: str | None, icon: MessageIcon) -> None:
    if title:
        ui.header(title)
    emit = ui.error if icon is MessageIcon.CRITICAL else ui.warning
    for line in message.splitlines():
        emit(escape(line))


class ConsoleDialogs:
    """Asks on stdin for OK/Cancel, prints OK-only messages."""

    def show(
        self,
        message: str,
        title: str | None,
        icon: MessageIcon,
        buttons: MessageButtons,
        default_button: DefaultButton,
    ) -> DialogResult:
        if buttons is MessageButtons.OK_CANCEL:
            if title:
                ui.header(title)
            ok = typer.confirm(message, default=default_button is DefaultButton.FIRST)
            return DialogResult.OK if ok else DialogResult.CANCEL

        _print(message, title, icon)
        return DialogResult.OK


class AutoConfirmDialogs:
    """Answers OK to every prompt without asking (``--yes``)."""

    def show(
        self,
        message: str,
        title: str | None,
        icon: MessageIcon,
        buttons: MessageButtons,
        default_button: DefaultButton,
    ) -> DialogResult:
        if buttons is not MessageButtons.OK_CANCEL:
            _print(message, title, icon)
        return DialogResult.OK
