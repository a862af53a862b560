"""Read, edit and write Visual Studio .sln files (line-based text, not XML)."""

from __future__ import annotations

import logging
import os
import re
import shutil
from dataclasses import dataclass
from pathlib import Path

from deleteproject.core.errors import ProjectNotInSolutionError, SolutionParseError
from deleteproject.core.paths import directory_of

logger = logging.getLogger(__name__)

SOLUTION_HEADER = "Microsoft Visual Studio Solution File"
SOLUTION_FOLDER_GUID = "2150E333-8FDC-42A3-9474-1A3956D46DE8"

# Project("{TYPE-GUID}") = "Name", "Path\To\Project.csproj", "{PROJECT-GUID}"
_PROJECT_RE = re.compile(
    r'^Project\(\"\{([^}]+)\}\"\)\s*=\s*\"([^\"]+)\"\s*,\s*\"([^\"]+)\"\s*,\s*\"\{([^}]+)\}\"'
)


@dataclass
class SolutionProject:
    """A project entry from a .sln file."""

    type_guid: str
    name: str
    path: str
    project_guid: str
    file_name: str

    @property
    def is_folder(self) -> bool:
        return self.type_guid == SOLUTION_FOLDER_GUID

    @property
    def braced_guid(self) -> str:
        return "{" + self.project_guid + "}"


class SolutionFile:
    """In-memory model of a solution file.

    ``remove`` only edits the model; call ``save`` to write it back.
    """

    def __init__(
        self,
        file_name: str | Path,
        lines: list[str],
        newline: str = "\r\n",
        bom: bool = True,
        final_newline: bool = True,
    ) -> None:
        self._file_name = str(Path(file_name).resolve())
        self.lines = lines
        self.newline = newline
        self.bom = bom
        self.final_newline = final_newline
        self.dirty = False
        self._entries = self._parse()

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def directory(self) -> str:
        return directory_of(self._file_name)

    # ── Loading ──────────────────────────────────────────────────────────────

    @classmethod
    def load(cls, path: str | Path) -> SolutionFile:
        path = Path(path)
        raw = path.read_bytes()
        bom = raw.startswith(b"\xef\xbb\xbf")
        text = raw.decode("utf-8-sig")
        newline = "\r\n" if "\r\n" in text else "\n"
        lines = text.split(newline)
        final_newline = lines[-1] == ""
        if final_newline:
            lines.pop()
        logger.debug("Loaded %s (%d lines)", path, len(lines))
        return cls(path, lines, newline=newline, bom=bom, final_newline=final_newline)

    def _parse(self) -> list[SolutionProject]:
        header = next((line for line in self.lines if line.strip()), "")
        if SOLUTION_HEADER not in header:
            raise SolutionParseError(f"'{self._file_name}' is not a solution file (missing header).")

        entries = []
        open_block: str | None = None
        for number, line in enumerate(self.lines, 1):
            stripped = line.strip()
            match = _PROJECT_RE.match(stripped)
            if match:
                if open_block is not None:
                    raise SolutionParseError(
                        f"Line {number}: project '{match.group(2)}' starts before "
                        f"'{open_block}' is closed with EndProject."
                    )
                open_block = match.group(2)
                entries.append(self._entry_from_match(match))
            elif stripped == "EndProject":
                open_block = None

        if open_block is not None:
            raise SolutionParseError(f"Project '{open_block}' is missing EndProject.")
        return entries

    def _entry_from_match(self, match: re.Match[str]) -> SolutionProject:
        type_guid = match.group(1).upper()
        relative = match.group(3)
        if type_guid == SOLUTION_FOLDER_GUID:
            file_name = relative
        else:
            file_name = os.path.normpath(os.path.join(self.directory, relative.replace("\\", os.sep)))
            # Web site entries name a directory, not a project file.
            if relative.endswith(("\\", "/")):
                file_name += os.sep
        return SolutionProject(
            type_guid=type_guid,
            name=match.group(2),
            path=relative,
            project_guid=match.group(4).upper(),
            file_name=file_name,
        )

    # ── Queries ──────────────────────────────────────────────────────────────

    @property
    def projects(self) -> list[SolutionProject]:
        return [e for e in self._entries if not e.is_folder]

    @property
    def folders(self) -> list[SolutionProject]:
        return [e for e in self._entries if e.is_folder]

    def find(self, name: str) -> SolutionProject | None:
        """Look a project up by name: exact match first, then case-insensitive."""
        for project in self.projects:
            if project.name == name:
                return project
        folded = name.casefold()
        for project in self.projects:
            if project.name.casefold() == folded:
                return project
        return None

    # ── Editing ──────────────────────────────────────────────────────────────

    def remove(self, project: SolutionProject) -> None:
        """Detach *project* from the solution model.

        Drops its Project/EndProject block and every other line that refers
        to its GUID (configurations, nesting, dependencies).
        """
        if not any(e.project_guid == project.project_guid for e in self._entries):
            raise ProjectNotInSolutionError(f"'{project.name}' is not part of the solution.")

        start, end = self._block_span(project.project_guid)
        guid = project.braced_guid.casefold()
        kept = self.lines[:start] + self.lines[end + 1:]
        self.lines = [line for line in kept if guid not in line.casefold()]
        self._entries = [e for e in self._entries if e.project_guid != project.project_guid]
        self.dirty = True
        logger.debug("Detached %s %s", project.name, project.braced_guid)

    def _block_span(self, project_guid: str) -> tuple[int, int]:
        start = None
        for index, line in enumerate(self.lines):
            match = _PROJECT_RE.match(line.strip())
            if start is None:
                if match and match.group(4).upper() == project_guid:
                    start = index
            elif line.strip() == "EndProject":
                return start, index
        raise SolutionParseError(f"No project block for {{{project_guid}}}.")

    # ── Saving ───────────────────────────────────────────────────────────────

    def text(self) -> str:
        text = self.newline.join(self.lines)
        return text + self.newline if self.final_newline else text

    def save(self, path: str | Path | None = None, backup: bool = False) -> Path:
        """Write the model to *path* (defaults to the file it was loaded from)."""
        target = Path(path) if path is not None else Path(self._file_name)
        if backup and target.exists():
            backup_path = target.with_name(target.name + ".bak")
            shutil.copy2(target, backup_path)
            logger.debug("Backed up %s to %s", target, backup_path)

        data = self.text().encode("utf-8")
        if self.bom:
            data = b"\xef\xbb\xbf" + data
        target.write_bytes(data)
        self.dirty = False
        logger.debug("Saved %s", target)
        return target
