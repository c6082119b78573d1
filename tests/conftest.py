"""
Shared fixtures for findjar tests.
Creates isolated search trees with plain files, jar files and zip files, and a
recording output handler that collects events instead of printing them.
"""
import pytest
import tempfile
import zipfile
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import sys

# Add src/ to sys.path so 'findjar' package is importable without installing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from findjar.core.interfaces import ContentProvider, OutputHandler
from findjar.core.models import HashType, LineMatch, SearchOptions


class RecordingOutputHandler(OutputHandler):
    """Collects every event of a search in call order."""

    def __init__(self):
        self.events: List[Tuple] = []

    def warn(self, message: str, cause: Optional[BaseException], options: SearchOptions) -> None:
        self.events.append(("warn", message, cause))

    def match(self, display_path: str, options: SearchOptions) -> None:
        self.events.append(("match", display_path))

    def grep_match(self, max_line_number: int, line_match: LineMatch, options: SearchOptions) -> None:
        self.events.append(("grep", max_line_number, line_match))

    def dump_content(self, display_path: str, content: ContentProvider, options: SearchOptions) -> None:
        self.events.append(("dump", display_path, content.with_lines(list)))

    def print_hash(self, display_path: str, hash_type: HashType, hex_digest: str,
                   options: SearchOptions) -> None:
        self.events.append(("hash", display_path, hash_type, hex_digest))

    def of_kind(self, kind: str) -> List[Tuple]:
        return [e for e in self.events if e[0] == kind]

    @property
    def matched_paths(self) -> List[str]:
        return [e[1] for e in self.of_kind("match")]

    @property
    def warnings(self) -> List[str]:
        return [e[1] for e in self.of_kind("warn")]


def make_zip(path: Path, entries: Dict[str, bytes]) -> Path:
    """Write a zip/jar archive with the given entries, in insertion order."""
    with zipfile.ZipFile(path, "w") as archive:
        for name, data in entries.items():
            archive.writestr(name, data)
    return path


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def recorder() -> RecordingOutputHandler:
    return RecordingOutputHandler()


@pytest.fixture
def search_tree(temp_dir) -> Dict[str, Path]:
    """
    Creates a small search root:
    - readme.txt and src/app.properties as plain files
    - lib/tools.jar with a manifest and a nested class entry
    - dist/bundle.zip with one text entry (not searched by default)
    - lib/empty.jar of zero length (skipped silently)
    """
    files = {}

    files["readme"] = temp_dir / "readme.txt"
    files["readme"].write_text("findjar test tree\nsecond line\n")

    (temp_dir / "src").mkdir()
    files["properties"] = temp_dir / "src" / "app.properties"
    files["properties"].write_text("name=demo\nlogging=debug\nversion=1.0\n")

    (temp_dir / "lib").mkdir()
    files["jar"] = make_zip(temp_dir / "lib" / "tools.jar", {
        "META-INF/": b"",
        "META-INF/MANIFEST.MF": b"Manifest-Version: 1.0\nCreated-By: test\n",
        "org/example/Tool.class": b"\xca\xfe\xba\xbe",
    })
    files["empty_jar"] = temp_dir / "lib" / "empty.jar"
    files["empty_jar"].write_bytes(b"")

    (temp_dir / "dist").mkdir()
    files["zip"] = make_zip(temp_dir / "dist" / "bundle.zip", {
        "notes.txt": b"logging is configured here\n",
    })

    return files
