"""Filesystem storage for feature ledgers.

Ledgers are markdown files named `<feature-id>.md` in `.ai/ledgers/`.
Files whose name starts with the reserved prefix `_` (`_active.md`,
`_template.md`) are bookkeeping files, never features. Archived ledgers
live in `.ai/ledgers/archived/`.

Nothing is cached: every query rescans the directory.
"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from wrinkl.config.settings import ProjectPaths
from wrinkl.utils.logging import log_file_write, log_message

LEDGER_EXTENSION = ".md"
RESERVED_PREFIX = "_"
UP_NEXT_MARKER = "## 🔴 Up Next (Priority Order)"
ARCHIVE_NOTES_HEADING = "## Archive Notes"

_TITLE_PATTERN = re.compile(r"^# (.+)$", re.MULTILINE)
_SUMMARY_PATTERN = re.compile(r"\*\*Summary:\*\* (.+)")
_STATUS_PATTERN = re.compile(r"\*\*Status:\*\* (.+)")
_TYPE_PATTERN = re.compile(r"\*\*Type:\*\* (.+)")
_STACK_PATTERN = re.compile(r"\*\*Stack:\*\* (.+)")


class ActiveListUpdate(Enum):
    """Outcome of adding a feature to `_active.md`."""

    ADDED = "added"
    NO_ACTIVE_FILE = "no_active_file"
    NO_UP_NEXT_SECTION = "no_up_next_section"


@dataclass
class LedgerSummary:
    """Header fields extracted from a ledger for display.

    Attributes:
        feature_id: Canonical identifier (file name without extension)
        file_name: Ledger file name
        title: First level-1 heading, or the identifier when missing
        summary: `**Summary:**` value, or a placeholder when missing
        status: `**Status:**` value, or "Unknown" when missing
    """

    feature_id: str
    file_name: str
    title: str
    summary: str
    status: str


@dataclass
class ProjectInfo:
    """Fields parsed from `.ai/project.md`."""

    name: str | None
    type: str | None
    stack: str | None


# Rewritten files keep undecodable bytes as they were
_KEEP_BYTES = "surrogateescape"


def _read_lossy(path: Path) -> str:
    """Read a ledger for display; bytes that are not UTF-8 become U+FFFD."""
    return path.read_text(encoding="utf-8", errors="replace")


def _first_group(pattern: re.Pattern[str], content: str) -> str | None:
    match = pattern.search(content)
    return match.group(1).strip() if match else None


def parse_ledger(feature_id: str, file_name: str, content: str) -> LedgerSummary:
    """Extract the display fields from ledger markdown.

    Args:
        feature_id: Identifier used when the ledger has no title
        file_name: Name of the ledger file
        content: Ledger markdown

    Returns:
        The parsed summary
    """
    return LedgerSummary(
        feature_id=feature_id,
        file_name=file_name,
        title=_first_group(_TITLE_PATTERN, content) or feature_id,
        summary=_first_group(_SUMMARY_PATTERN, content) or "No summary available",
        status=_first_group(_STATUS_PATTERN, content) or "Unknown",
    )


def mark_archived(content: str, date: str) -> str:
    """Rewrite ledger markdown into its archived form.

    The first `**Status:**` line becomes `Archived (<date>)` and an
    `## Archive Notes` section is appended unless one exists.

    Args:
        content: Ledger markdown
        date: Archive date

    Returns:
        Updated markdown
    """
    content = _STATUS_PATTERN.sub(lambda _: f"**Status:** Archived ({date})", content, count=1)
    if ARCHIVE_NOTES_HEADING not in content:
        content += f"\n\n{ARCHIVE_NOTES_HEADING}\n\nArchived on {date}.\n"
    return content


def active_entry(feature_id: str, summary: str) -> str:
    """Format the `_active.md` line linking to a ledger."""
    return f"1. **[{feature_id}]({feature_id}{LEDGER_EXTENSION})** - {summary}"


class LedgerStore:
    """Reads and writes the ledgers of one project.

    Attributes:
        paths: Project path layout
    """

    def __init__(self, paths: ProjectPaths) -> None:
        self.paths = paths

    def ledger_path(self, feature_id: str) -> Path:
        """Path of the active ledger for an identifier."""
        return self.paths.ledgers_dir / f"{feature_id}{LEDGER_EXTENSION}"

    def archived_path(self, feature_id: str) -> Path:
        """Path of the archived ledger for an identifier."""
        return self.paths.archived_dir / f"{feature_id}{LEDGER_EXTENSION}"

    def exists(self, feature_id: str) -> bool:
        return self.ledger_path(feature_id).is_file()

    def is_archived(self, feature_id: str) -> bool:
        return self.archived_path(feature_id).is_file()

    @staticmethod
    def _scan(directory: Path) -> list[str]:
        """List ledger identifiers in a directory, sorted by file name.

        Raises:
            OSError: If the directory cannot be read
        """
        if not directory.is_dir():
            return []
        return [
            entry.name[: -len(LEDGER_EXTENSION)]
            for entry in sorted(directory.iterdir(), key=lambda p: p.name)
            if entry.is_file()
            and entry.name.endswith(LEDGER_EXTENSION)
            and not entry.name.startswith(RESERVED_PREFIX)
        ]

    def active_ids(self) -> list[str]:
        """Identifiers of every active ledger."""
        return self._scan(self.paths.ledgers_dir)

    def archived_ids(self) -> list[str]:
        """Identifiers of every archived ledger."""
        return self._scan(self.paths.archived_dir)

    def active_ledgers(self) -> list[LedgerSummary]:
        """Parsed summaries of every active ledger."""
        return [
            parse_ledger(
                feature_id,
                self.ledger_path(feature_id).name,
                _read_lossy(self.ledger_path(feature_id)),
            )
            for feature_id in self.active_ids()
        ]

    def archived_ledgers(self) -> list[LedgerSummary]:
        """Parsed summaries of every archived ledger."""
        return [
            parse_ledger(
                feature_id,
                self.archived_path(feature_id).name,
                _read_lossy(self.archived_path(feature_id)),
            )
            for feature_id in self.archived_ids()
        ]

    def write_ledger(self, feature_id: str, content: str) -> Path:
        """Write an active ledger, creating the ledgers directory if needed."""
        path = self.ledger_path(feature_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        log_file_write(path)
        return path

    def archive(self, feature_id: str, date: str) -> Path:
        """Move a ledger into the archive, marking it archived.

        Args:
            feature_id: Identifier of an existing active ledger
            date: Archive date written into the ledger

        Returns:
            Path of the archived ledger
        """
        source = self.ledger_path(feature_id)
        destination = self.archived_path(feature_id)

        content = mark_archived(source.read_text(encoding="utf-8", errors=_KEEP_BYTES), date)

        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding="utf-8", errors=_KEEP_BYTES)
        source.unlink()
        log_file_write(source, action="archive")
        return destination

    def add_to_active(self, feature_id: str, summary: str) -> ActiveListUpdate:
        """Insert a feature at the top of the "Up Next" section of `_active.md`.

        Args:
            feature_id: Identifier of the new ledger
            summary: Summary shown next to the link

        Returns:
            Whether the entry was added, or why not
        """
        active_file = self.paths.active_file
        if not active_file.is_file():
            return ActiveListUpdate.NO_ACTIVE_FILE

        content = active_file.read_text(encoding="utf-8", errors=_KEEP_BYTES)
        marker_index = content.find(UP_NEXT_MARKER)
        if marker_index == -1:
            return ActiveListUpdate.NO_UP_NEXT_SECTION

        line_end = content.find("\n", marker_index)
        if line_end == -1:
            content += "\n"
            line_end = len(content) - 1

        insert_at = line_end + 1
        content = (
            content[:insert_at] + active_entry(feature_id, summary) + "\n" + content[insert_at:]
        )
        active_file.write_text(content, encoding="utf-8", errors=_KEEP_BYTES)
        log_file_write(active_file)
        return ActiveListUpdate.ADDED

    def remove_from_active(self, feature_id: str) -> bool:
        """Drop every `_active.md` line referencing a feature.

        Returns:
            True if any line was removed

        Raises:
            OSError: If `_active.md` exists but cannot be read or written
        """
        active_file = self.paths.active_file
        if not active_file.is_file():
            return False

        lines = active_file.read_text(encoding="utf-8", errors=_KEEP_BYTES).split("\n")
        link_text = f"[{feature_id}]"
        link_target = f"({feature_id}{LEDGER_EXTENSION})"
        kept = [line for line in lines if link_text not in line and link_target not in line]

        if len(kept) == len(lines):
            return False

        active_file.write_text("\n".join(kept), encoding="utf-8", errors=_KEEP_BYTES)
        log_file_write(active_file)
        return True

    def read_project_info(self) -> ProjectInfo | None:
        """Parse name, type and stack from `.ai/project.md`.

        Returns:
            The project info, or None when the file is missing or unreadable
        """
        project_file = self.paths.project_file
        if not project_file.is_file():
            return None
        try:
            content = _read_lossy(project_file)
        except OSError as e:
            log_message(f"Could not read {project_file}: {e}")
            return None
        return ProjectInfo(
            name=_first_group(_TITLE_PATTERN, content),
            type=_first_group(_TYPE_PATTERN, content),
            stack=_first_group(_STACK_PATTERN, content),
        )


__all__ = [
    "LEDGER_EXTENSION",
    "RESERVED_PREFIX",
    "UP_NEXT_MARKER",
    "ARCHIVE_NOTES_HEADING",
    "ActiveListUpdate",
    "LedgerSummary",
    "ProjectInfo",
    "LedgerStore",
    "active_entry",
    "mark_archived",
    "parse_ledger",
]
