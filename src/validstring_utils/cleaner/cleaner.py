from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from validstring_utils.models.results import CleanupEntry, CleanupReport, EntryKind

logger = logging.getLogger(__name__)

EntryCallback = Callable[[CleanupEntry], None]


class DirectoryCleaner:
    """Deletes files by name suffix and prunes directories left empty.

    The walk is depth first. A directory is removed once its children have
    been visited and it has no entries left; this includes the root.
    Symbolic links below the root are never followed: a link is treated like
    a file and only removed when its own name ends with the suffix. A root
    that is a link to a directory is walked, but the link itself is kept.

    Failures never stop the walk. They are recorded in the returned
    CleanupReport and logged at WARNING.

    Example:
        >>> report = DirectoryCleaner().clean(Path.home() / ".m2", ".lastUpdated")
        >>> report.summary()
        {'files': 3, 'directories': 1, 'failures': 0}
    """

    def clean(
        self,
        root_path: str | Path,
        suffix: str,
        on_entry: EntryCallback | None = None,
    ) -> CleanupReport:
        """Delete matching files and empty directories under ``root_path``.

        Args:
            root_path: Directory (or single file) to start from.
            suffix: Literal, case-sensitive file-name suffix to delete.
            on_entry: Called with every CleanupEntry as soon as it is recorded.

        Returns:
            CleanupReport with one entry per attempted deletion.

        Raises:
            ValueError: If ``suffix`` is empty (every file would match).
        """
        if not suffix:
            raise ValueError("suffix must be a non-empty string")

        root = Path(root_path)
        report = CleanupReport(root=root, suffix=suffix)

        if not root.exists() and not root.is_symlink():
            missing = FileNotFoundError(f"No such path: {root}")
            self._fail(report, root, "directory", missing, on_entry)
            return report

        logger.debug("Cleaning %s for suffix %r", root, suffix)
        if root.is_symlink() and root.is_dir():
            # A linked root is walked; the link itself is never removed
            self._visit_children(root, suffix, report, on_entry)
        else:
            self._visit(root, suffix, report, on_entry)
        logger.info(
            "Cleaned %s: %d files, %d directories deleted, %d failures",
            root,
            len(report.deleted_files),
            len(report.deleted_directories),
            len(report.failures),
        )
        return report

    def _visit(
        self,
        path: Path,
        suffix: str,
        report: CleanupReport,
        on_entry: EntryCallback | None,
    ) -> None:
        if path.is_symlink() or not path.is_dir():
            if path.name.endswith(suffix):
                self._delete(path, "file", report, on_entry)
            return

        if not self._visit_children(path, suffix, report, on_entry):
            return

        try:
            is_empty = next(path.iterdir(), None) is None
        except OSError as e:
            self._fail(report, path, "directory", e, on_entry)
            return

        if is_empty:
            self._delete(path, "directory", report, on_entry)

    def _visit_children(
        self,
        path: Path,
        suffix: str,
        report: CleanupReport,
        on_entry: EntryCallback | None,
    ) -> bool:
        """Visit every entry of directory ``path``; False if it cannot be listed."""
        try:
            children = sorted(path.iterdir())
        except OSError as e:
            self._fail(report, path, "directory", e, on_entry)
            return False

        for child in children:
            self._visit(child, suffix, report, on_entry)
        return True

    def _delete(
        self,
        path: Path,
        kind: EntryKind,
        report: CleanupReport,
        on_entry: EntryCallback | None,
    ) -> None:
        try:
            if kind == "directory":
                path.rmdir()
            else:
                path.unlink()
        except OSError as e:
            self._fail(report, path, kind, e, on_entry)
            return

        logger.info("Deleted %s: %s", kind, path)
        entry = report.record_deletion(path, kind)
        if on_entry is not None:
            on_entry(entry)

    def _fail(
        self,
        report: CleanupReport,
        path: Path,
        kind: EntryKind,
        error: BaseException,
        on_entry: EntryCallback | None,
    ) -> None:
        logger.warning("Failed to delete %s %s - %s", kind, path, error)
        entry = report.record_failure(path, kind, error)
        if on_entry is not None:
            on_entry(entry)


def clean_directory(
    root_path: str | Path,
    suffix: str,
    on_entry: EntryCallback | None = None,
) -> CleanupReport:
    """Run a DirectoryCleaner over ``root_path``; see DirectoryCleaner.clean."""
    return DirectoryCleaner().clean(root_path, suffix, on_entry=on_entry)
