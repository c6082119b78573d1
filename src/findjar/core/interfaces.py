"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the search pipeline.
These protocols enforce structural typing using Python's `typing.Protocol` so that
matching logic never depends on where bytes come from or where results go.

Key Components:
---------------
- ContentProvider: Scoped access to one logical file (disk file or archive entry).
- OutputHandler: Receives warning/match/grep/dump/hash events (presentation layer).
- HashAlgorithm: Standardized interface for streaming digests (MD5, SHA-*, CRC32, xxHash).
- FileTypeHandler: One registered file type (plain files, jar, zip) and how to search it.
"""

from pathlib import Path
from typing import Protocol, Callable, Iterator, Optional, BinaryIO, TypeVar

from findjar.core.models import (
    SearchOptions,
    LineMatch,
    HashType,
    FileTypeDescriptor,
    ScanStats,
)

T = TypeVar("T")


# ===== Interfaces =====

class ContentProvider(Protocol):
    """
    Interface for reading the content of exactly one logical file.

    Each method opens a fresh underlying resource, hands it to the consumer and
    closes it before returning. Read failures are reported through the bound
    warning channel and the method returns None instead of raising.
    """
    display_path: str

    def with_bytes(self, consumer: Callable[[BinaryIO], T]) -> Optional[T]:
        """Call consumer with an open binary stream of the content."""
        ...

    def with_lines(self, consumer: Callable[[Iterator[str]], T]) -> Optional[T]:
        """Call consumer with a lazy iterator over the content lines."""
        ...


class OutputHandler(Protocol):
    """
    Interface for all side effects of a search.

    The core pushes events through this protocol; the CLI presentation layer
    implements it. Alternative implementations (tests, library callers) can
    collect events instead of printing them.
    """

    def warn(self, message: str, cause: Optional[BaseException], options: SearchOptions) -> None:
        """Non-fatal problem: unreadable file, corrupt archive, I/O error."""
        ...

    def match(self, display_path: str, options: SearchOptions) -> None:
        """Plain name/path match, no content shown."""
        ...

    def grep_match(self, max_line_number: int, line_match: LineMatch, options: SearchOptions) -> None:
        """
        One content line to render.

        Args:
            max_line_number: Largest 0-based line number reported for this file
                             (for column alignment).
            line_match: The hit or context line.
            options: Options used to start the scan.
        """
        ...

    def dump_content(self, display_path: str, content: ContentProvider, options: SearchOptions) -> None:
        """Render or write the full content of a matched file."""
        ...

    def print_hash(self, display_path: str, hash_type: HashType, hex_digest: str,
                   options: SearchOptions) -> None:
        """One computed digest."""
        ...


class HashAlgorithm(Protocol):
    """
    Interface for incremental hash functions.

    Matches the hashlib object API so hashlib, zlib and xxhash based
    implementations can be used interchangeably.
    """

    def update(self, data: bytes) -> None:
        ...

    def hexdigest(self) -> str:
        ...


class FileTypeHandler(Protocol):
    """
    Interface for a registered file type.

    Methods:
        find: Searches the given file and reports results to the handler.
    """
    descriptor: FileTypeDescriptor

    def find(
        self,
        path: Path,
        display_path: str,
        options: SearchOptions,
        handler: OutputHandler,
        stats: Optional[ScanStats] = None
    ) -> None:
        """
        Search one file found by the scanner.

        Args:
            path: Location of the file on disk
            display_path: Relative (or absolute) path shown to the user
            options: Resolved search options
            handler: Receives the resulting events
            stats: Optional counters to update
        """
        ...
