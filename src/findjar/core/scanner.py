"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements the scan over a search root using pathlib.
Features:
- Recursively walks the search root with os.walk (directory symlinks are not followed)
- Warns about unreadable files and skips them
- Applies the active file type filter
- Routes each file to its registered file type (plain file or archive)
"""

import os
import time
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Local imports
from findjar.core.file_types import FileTypeRegistry, default_registry
from findjar.core.interfaces import OutputHandler
from findjar.core.models import SearchOptions, ScanStats


class FileScannerImpl:
    """
    Scans a directory tree and searches every eligible file.

    Attributes:
        root_dir: Root directory to scan
        options: Resolved search options
        handler: Receives all events of the scan
        registry: File types used to route each file
    """

    def __init__(
        self,
        root_dir: str,
        options: SearchOptions,
        handler: OutputHandler,
        registry: Optional[FileTypeRegistry] = None
    ):
        self.root_dir = root_dir
        self.options = options
        self.handler = handler
        self.registry = registry or default_registry()

    def scan(self) -> ScanStats:
        """
        Single-pass scan. Per-file problems are reported through the handler;
        an invalid root directory raises ValueError before anything is scanned.
        """
        logger.debug("Starting scan operation")
        logger.debug(f"Root directory: {self.root_dir}")
        logger.debug(f"Active types: {sorted(str(t) for t in self.options.active_types)}")

        root_path = Path(self.root_dir)

        # Validate root directory exists and is accessible
        if not root_path.exists():
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise ValueError(error_msg)
        if not root_path.is_dir():
            error_msg = f"invalid non-directory search root: {self.root_dir}"
            logger.error(error_msg)
            raise ValueError(error_msg)

        stats = ScanStats()
        start_time = time.time()

        for root, dirs, files in os.walk(str(root_path)):
            for filename in files:
                path = Path(root) / filename
                stats.files_visited += 1
                self._process_file(root_path, path, stats)

        stats.total_time = time.time() - start_time
        logger.debug(f"Total scan time: {stats.total_time:.2f} seconds")
        return stats

    def _process_file(self, root_path: Path, path: Path, stats: ScanStats) -> None:
        """
        Filter and route an individual file.
        """
        if not self._is_valid_file(path):
            return

        display_path = self.display_path(root_path, path)
        file_type = self.registry.resolve(path)
        logger.debug(f"Searching {display_path} as {file_type.descriptor.description}")
        file_type.find(path, display_path, self.options, self.handler, stats)

    def _is_valid_file(self, path: Path) -> bool:
        """
        Regular, readable file of an active type.
        Unreadable files are reported through the warning channel.
        """
        try:
            if not path.is_file():
                return False
        except OSError as e:
            logger.debug(f"Could not stat {path}: {e}")
            return False

        if not os.access(path, os.R_OK):
            self.handler.warn(f"can not read file {path}", None, self.options)
            return False

        return self.registry.is_active(path, self.options.active_types)

    def display_path(self, root_path: Path, path: Path) -> str:
        """
        Relative path from the search root, or the absolute path when an
        absolute-path pattern is configured.
        """
        if self.options.apath is not None:
            return str(path.resolve())
        return path.relative_to(root_path).as_posix()
