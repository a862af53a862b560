"""Centralized CLI output with Rich — colors and tables."""

from __future__ import annotations

import logging
from typing import Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.padding import Padding
from rich.table import Table

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


# ── Status messages ──────────────────────────────────────────────────────────

def success(msg: str) -> None:
    console.print(f"  [green]✓[/green] {msg}")


def error(msg: str) -> None:
    err_console.print(f"  [red]✗[/red] {msg}")


def warning(msg: str) -> None:
    console.print(f"  [yellow]⚠[/yellow] {msg}")


def info(msg: str) -> None:
    console.print(f"  [dim]ℹ {msg}[/dim]")


# ── Structure ────────────────────────────────────────────────────────────────

def header(msg: str) -> None:
    console.print()
    console.print(f"  [bold]{msg}[/bold]")


def plain(msg: str = "") -> None:
    console.print(msg)


# ── Tables ───────────────────────────────────────────────────────────────────

def table(headers: Sequence[str], rows: Sequence[Sequence[str]], indent: int = 2) -> None:
    t = Table(show_edge=True, pad_edge=False)
    for h in headers:
        t.add_column(h)
    for row in rows:
        t.add_row(*row)
    console.print(Padding(t, (0, 0, 0, indent)))


# ── Logging ──────────────────────────────────────────────────────────────────

def setup_logging(level: str | int) -> None:
    """Route log records to stderr through Rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
