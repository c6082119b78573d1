"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for file/content search: search options, grep records, file type
descriptors and hash algorithm identifiers.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import FrozenSet, Optional, Tuple


# =============================
# Enums
# =============================

class HashType(Enum):
    """
    Digest algorithms that can be computed for matched files.
    """
    MD5 = "md5"
    SHA1 = "sha1"
    SHA256 = "sha256"
    SHA512 = "sha512"
    CRC32 = "crc32"
    XXH64 = "xxh64"

    @property
    def description(self) -> str:
        """Human-readable description for help text."""
        mapping = {
            HashType.MD5: "md5 hash",
            HashType.SHA1: "sha1 hash",
            HashType.SHA256: "sha256 hash",
            HashType.SHA512: "sha512 hash",
            HashType.CRC32: "crc32 checksum",
            HashType.XXH64: "xxHash64 hash",
        }
        return mapping.get(self, self.value)

    @property
    def hex_length(self) -> int:
        """Number of hex characters in a digest of this type."""
        mapping = {
            HashType.MD5: 32,
            HashType.SHA1: 40,
            HashType.SHA256: 64,
            HashType.SHA512: 128,
            HashType.CRC32: 8,
            HashType.XXH64: 16,
        }
        return mapping[self]

    def __repr__(self) -> str:
        return self.value


# Single-letter regex flags accepted on the command line
REGEX_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "a": re.ASCII,
    "u": 0,  # str patterns are unicode already
}

# Plain files on disk (None) and jar files
DEFAULT_ACTIVE_TYPES: FrozenSet[Optional[str]] = frozenset({None, "jar"})


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class MatchSpan:
    """Character offsets of one regex match within a line (end exclusive)."""
    start: int
    end: int


@dataclass(frozen=True)
class LineMatch:
    """
    One line to report from a content grep.
    Context lines carry no spans; hits carry one span per non-overlapping match.
    """
    path: str
    line_number: int  # 0-based
    is_hit: bool
    line: str
    spans: Tuple[MatchSpan, ...] = ()

    @property
    def display_number(self) -> int:
        return self.line_number + 1

    def __repr__(self):
        marker = ">" if self.is_hit else " "
        return f"<LineMatch {self.path}:{self.display_number}{marker} spans={len(self.spans)}>"


@dataclass(frozen=True)
class FileTypeDescriptor:
    """
    Describes a searchable file type.
    extension is None for plain files on disk.
    """
    extension: Optional[str]
    description: str
    is_default: bool
    selector: str

    def __post_init__(self):
        if len(self.selector) != 1:
            raise ValueError(f"Selector must be a single character: '{self.selector}'")


@dataclass
class ScanStats:
    """
    Counters collected during a scan.
    """
    files_visited: int = 0
    archives_opened: int = 0
    entries_scanned: int = 0
    total_time: float = 0.0

    def print_summary(self) -> str:
        lines = [
            "Scan Statistics:",
            f"Files visited: {self.files_visited}",
            f"Archives opened: {self.archives_opened}",
            f"Archive entries scanned: {self.entries_scanned}",
            f"Total Execution Time: {self.total_time:.3f}s",
        ]
        return "\n".join(lines)


# =============================
# Search options
# =============================

def compile_flags(flags: Optional[str]) -> int:
    """
    Convert a flag string such as "is" into re module flags.
    Raises ValueError for unknown letters.
    """
    result = 0
    for letter in flags or "":
        if letter not in REGEX_FLAGS:
            raise ValueError(
                f"Unknown regex flag '{letter}'. Valid flags: {', '.join(REGEX_FLAGS)}"
            )
        result |= REGEX_FLAGS[letter]
    return result


def compile_pattern(pattern: Optional[str], flags: int = 0) -> Optional[re.Pattern]:
    """Compile a pattern, turning regex syntax errors into ValueError."""
    if pattern is None:
        return None
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise ValueError(f"Invalid regular expression '{pattern}': {e}") from e


@dataclass(frozen=True)
class SearchOptions:
    """
    Search parameters resolved once per invocation, with built-in validation.
    Interface-agnostic, used by the CLI and by library callers.
    """
    name: Optional[re.Pattern] = None
    path: Optional[re.Pattern] = None
    apath: Optional[re.Pattern] = None
    grep: Optional[re.Pattern] = None
    active_types: FrozenSet[Optional[str]] = DEFAULT_ACTIVE_TYPES
    context: int = 0
    flags: str = ""
    cat: bool = False
    out_file: Optional[Path] = None
    hashes: Tuple[HashType, ...] = field(default_factory=tuple)
    monochrome: bool = False

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if self.context < 0:
            raise ValueError("Context line count cannot be negative")

        if self.path is not None and self.apath is not None:
            raise ValueError("can not use path (-p) and apath (-a) together")

        if not self.active_types:
            raise ValueError("At least one file type must be active")

        compile_flags(self.flags)

    @property
    def is_macro_operation(self) -> bool:
        """True when a whole-file operation (cat or hash) is requested."""
        return self.cat or bool(self.hashes)

    @staticmethod
    def create(
            name: Optional[str] = None,
            path: Optional[str] = None,
            apath: Optional[str] = None,
            grep: Optional[str] = None,
            active_types: Optional[FrozenSet[Optional[str]]] = None,
            context: int = 0,
            flags: Optional[str] = None,
            cat: bool = False,
            out_file: Optional[str] = None,
            hashes: Tuple[HashType, ...] = (),
            monochrome: bool = False,
    ) -> 'SearchOptions':
        """
        Factory method to create options from raw pattern strings.
        The global flags are applied to all four patterns here, once.
        """
        flags = flags or ""
        re_flags = compile_flags(flags)

        # Preserve request order, drop repeats
        unique_hashes = tuple(dict.fromkeys(hashes))

        kwargs = {}
        if active_types is not None:
            kwargs["active_types"] = frozenset(active_types)

        return SearchOptions(
            name=compile_pattern(name, re_flags),
            path=compile_pattern(path, re_flags),
            apath=compile_pattern(apath, re_flags),
            grep=compile_pattern(grep, re_flags),
            context=context,
            flags=flags,
            cat=cat,
            out_file=Path(out_file) if out_file else None,
            hashes=unique_hashes,
            monochrome=monochrome,
            **kwargs,
        )
