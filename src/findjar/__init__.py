"""
findjar: search files and file content, including files inside jar/zip archives.

Core features:
- Regex matching on file name, relative path, absolute path and content lines
- Transparent search of zip/jar archive entries (<archive>@<entry> paths)
- Context grep with intra-line match highlighting
- Full-content dumps and MD5/SHA-1/SHA-256/SHA-512/CRC32/xxHash64 digests of matches
- Pluggable output through the OutputHandler protocol
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("findjar")
except Exception:
    try:
        import tomllib  # Python 3.11+
    except ImportError:
        import tomli as tomllib  # Python < 3.11: pip install tomli

    from pathlib import Path as _Path
    _pyproject = _Path(__file__).resolve().parents[2] / "pyproject.toml"
    with open(_pyproject, "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API: only what users should import directly
from findjar.commands import SearchCommand
from findjar.core import (
    SearchOptions, LineMatch, MatchSpan, HashType, ScanStats,
    ContentProvider, OutputHandler, FileTypeRegistry, default_registry)
from findjar.services import ConsoleOutputHandler

__all__ = [
    "SearchCommand",
    "SearchOptions",
    "LineMatch",
    "MatchSpan",
    "HashType",
    "ScanStats",
    "ContentProvider",
    "OutputHandler",
    "FileTypeRegistry",
    "default_registry",
    "ConsoleOutputHandler",
    "__version__",
]
