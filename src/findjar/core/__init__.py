"""
Core search engine: content access, context grep, hashing, dispatch and scanning.

This package contains the match-and-report pipeline of findjar:
- StreamContent: scoped byte/line access to disk files and archive entries
- ContextGrep: sliding-window grep with hit-wins deduplication and match spans
- HasherImpl: streaming MD5/SHA-1/SHA-256/SHA-512/CRC32/xxHash64 digests
- MatchDispatcher: per-file operation selection in strict priority order
- ArchiveWalker: zip/jar entry enumeration
- FileTypeRegistry: extension-keyed file type handlers with plain-file fallback
- FileScannerImpl: directory walk, filtering and routing
- Models: SearchOptions, LineMatch, MatchSpan and friends

All components are free of presentation concerns; output goes through OutputHandler.
"""

from .models import (
    SearchOptions, LineMatch, MatchSpan, FileTypeDescriptor, HashType, ScanStats,
    DEFAULT_ACTIVE_TYPES)
from .interfaces import ContentProvider, OutputHandler, HashAlgorithm, FileTypeHandler
from .hasher import HasherImpl, Crc32AlgorithmImpl
from .content import StreamContent
from .grep import ContextGrep, content_matches, grep_lines, match_spans
from .dispatcher import MatchDispatcher
from .archive import ArchiveWalker
from .file_types import FileTypeRegistry, DiskFileType, ArchiveFileType, default_registry
from .scanner import FileScannerImpl

__all__ = [
    "SearchOptions",
    "LineMatch",
    "MatchSpan",
    "FileTypeDescriptor",
    "HashType",
    "ScanStats",
    "DEFAULT_ACTIVE_TYPES",
    "ContentProvider",
    "OutputHandler",
    "HashAlgorithm",
    "FileTypeHandler",
    "HasherImpl",
    "Crc32AlgorithmImpl",
    "StreamContent",
    "ContextGrep",
    "content_matches",
    "grep_lines",
    "match_spans",
    "MatchDispatcher",
    "ArchiveWalker",
    "FileTypeRegistry",
    "DiskFileType",
    "ArchiveFileType",
    "default_registry",
    "FileScannerImpl",
]
