"""
Unified command orchestrator for searching.
This is the SINGLE source of truth for running a scan, used by the CLI and by library callers.
No presentation dependencies: output goes through the OutputHandler passed in.
"""
import logging
from typing import Optional

from findjar.core.file_types import FileTypeRegistry, default_registry
from findjar.core.interfaces import OutputHandler
from findjar.core.models import SearchOptions, ScanStats
from findjar.core.scanner import FileScannerImpl

logger = logging.getLogger(__name__)


class SearchCommand:
    """
    Orchestrates a search:
    1. Validate the search root
    2. Walk it, filtering by active file types
    3. Dispatch every disk file and archive entry to the output handler

    Usage:
        options = SearchOptions.create(name=r"\\.properties$", grep="logging", context=1)
        command = SearchCommand()
        stats = command.execute("/path/to/repo", options, ConsoleOutputHandler())
    """

    def __init__(self, registry: Optional[FileTypeRegistry] = None):
        self.registry = registry or default_registry()
        self.stats: Optional[ScanStats] = None

    def execute(self, search_root: str, options: SearchOptions, handler: OutputHandler) -> ScanStats:
        """
        Execute a search with the given options.

        Args:
            search_root: Existing directory to search
            options: Validated search options
            handler: Receives match, grep, dump, hash and warning events

        Returns:
            Statistics collected during the scan

        Raises:
            ValueError: If the search root is missing or not a directory
        """
        scanner = FileScannerImpl(search_root, options, handler, self.registry)
        self.stats = scanner.scan()
        logger.debug(f"Scan finished: {self.stats.files_visited} files, "
                     f"{self.stats.entries_scanned} archive entries")
        return self.stats
