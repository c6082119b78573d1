"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/archive.py
Walks the entries of zip/jar archives and feeds each one to the match dispatcher
as if it were an ordinary file.

Entry display paths have the form <archive-display-path>@<entry-path>.
The '@' separator is not escaped, so paths containing '@' are ambiguous.
Directory entries are dispatched like files, named by their last segment
(META-INF/ -> META-INF). Archives nested inside archives are not opened.
"""

import logging
import zipfile
from pathlib import Path
from typing import Optional

from findjar.core.content import StreamContent
from findjar.core.dispatcher import MatchDispatcher
from findjar.core.interfaces import OutputHandler
from findjar.core.models import SearchOptions, ScanStats

logger = logging.getLogger(__name__)

ENTRY_SEPARATOR = "@"


def entry_base_name(entry_path: str) -> str:
    """Last segment of an archive entry path; archive paths always use '/'."""
    return entry_path.rstrip("/").rsplit("/", 1)[-1]


def entry_display_path(archive_display_path: str, entry_path: str) -> str:
    return f"{archive_display_path}{ENTRY_SEPARATOR}{entry_path}"


class ArchiveWalker:
    """
    Opens an archive and dispatches every entry in the archive's own order.
    """

    def __init__(self, dispatcher: Optional[MatchDispatcher] = None):
        self.dispatcher = dispatcher or MatchDispatcher()

    def walk(
        self,
        archive_path: Path,
        display_path: str,
        options: SearchOptions,
        handler: OutputHandler,
        stats: Optional[ScanStats] = None
    ) -> None:
        """
        Dispatches each entry of the archive.
        Zero-length archives are skipped silently. Failure to open the archive is
        reported once through handler.warn and never raised.
        """
        try:
            if archive_path.stat().st_size == 0:
                logger.debug(f"Skipping zero-length archive: {archive_path}")
                return
        except OSError as e:
            self._warn_open_failure(archive_path, e, options, handler)
            return

        try:
            archive = zipfile.ZipFile(archive_path)
        except Exception as e:  # corrupt or unsupported archive, reported and skipped
            self._warn_open_failure(archive_path, e, options, handler)
            return

        if stats is not None:
            stats.archives_opened += 1

        def warn(message: str, cause: BaseException) -> None:
            handler.warn(message, cause, options)

        with archive:
            for info in archive.infolist():
                content = StreamContent(
                    entry_display_path(display_path, info.filename),
                    lambda info=info: archive.open(info),
                    warn
                )
                if stats is not None:
                    stats.entries_scanned += 1
                self.dispatcher.dispatch(
                    options,
                    entry_base_name(info.filename),
                    content.display_path,
                    content,
                    handler
                )

    @staticmethod
    def _warn_open_failure(archive_path: Path, error: Exception,
                           options: SearchOptions, handler: OutputHandler) -> None:
        message = f"{type(error).__name__} opening archive {archive_path}: {error}"
        logger.debug(message)
        handler.warn(message, error, options)
