"""Result classes for directory cleaning runs."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from validstring_utils.core import ProcessEntry, ProcessLog

EntryKind = Literal["file", "directory"]


@dataclass(frozen=True)
class CleanupEntry:
    """One attempted deletion.

    Attributes:
        path: Path that was (or should have been) deleted.
        kind: "file" for suffix matches, "directory" for empty directories.
        success: True if the path is gone.
        error: Reason for the failure, None on success.
    """

    path: Path
    kind: EntryKind
    success: bool
    error: str | None = None


@dataclass
class CleanupReport:
    """Outcome of one cleaning run.

    Every attempted deletion is kept in ``entries`` in the order it
    happened and mirrored into ``process_log``: successes as cleaning
    entries, failures as error entries.
    """

    root: Path
    suffix: str
    entries: list[CleanupEntry] = field(default_factory=list)
    process_log: ProcessLog = field(default_factory=ProcessLog)

    def record_deletion(self, path: Path, kind: EntryKind) -> CleanupEntry:
        """Record a successful deletion."""
        entry = CleanupEntry(path=path, kind=kind, success=True)
        self.entries.append(entry)
        self.process_log.cleaning.append(
            ProcessEntry(
                entry_type="cleaning",
                field=kind,
                message=f"Deleted {kind}",
                original_value=str(path),
                new_value=None,
                context={"operation_type": "deletion", "suffix": self.suffix},
            )
        )
        return entry

    def record_failure(
        self, path: Path, kind: EntryKind, error: BaseException | str
    ) -> CleanupEntry:
        """Record a deletion (or directory listing) that failed."""
        reason = str(error)
        entry = CleanupEntry(path=path, kind=kind, success=False, error=reason)
        self.entries.append(entry)
        self.process_log.errors.append(
            ProcessEntry(
                entry_type="error",
                field=kind,
                message=reason,
                original_value=str(path),
                context={"suffix": self.suffix},
            )
        )
        return entry

    @property
    def deleted_files(self) -> list[Path]:
        return [e.path for e in self.entries if e.success and e.kind == "file"]

    @property
    def deleted_directories(self) -> list[Path]:
        return [e.path for e in self.entries if e.success and e.kind == "directory"]

    @property
    def failures(self) -> list[CleanupEntry]:
        return [e for e in self.entries if not e.success]

    @property
    def is_successful(self) -> bool:
        """True if no deletion failed."""
        return not self.failures

    def summary(self) -> dict[str, int]:
        """Counts of deleted files, deleted directories and failures."""
        counts = Counter(e.kind for e in self.entries if e.success)
        return {
            "files": counts.get("file", 0),
            "directories": counts.get("directory", 0),
            "failures": len(self.failures),
        }

    def audit_log(self) -> list[dict[str, Any]]:
        """Combined cleaning and error entries sorted by timestamp.

        Returns:
            List of dicts suitable for pd.DataFrame(), each tagged with
            source="cleanup".
        """
        entries = [
            {**entry.model_dump(), "source": "cleanup"}
            for entry in [*self.process_log.cleaning, *self.process_log.errors]
        ]
        return sorted(entries, key=lambda x: x.get("timestamp", ""))
