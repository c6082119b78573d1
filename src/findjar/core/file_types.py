"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/file_types.py
Registry of searchable file types, keyed by file extension.

Plain files on disk are the fallback type. Archive formats are registered by
extension; adding a format means registering a new handler, never touching the
scanner or dispatcher.
"""

from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional

from findjar.core.archive import ArchiveWalker
from findjar.core.content import StreamContent
from findjar.core.dispatcher import MatchDispatcher
from findjar.core.interfaces import FileTypeHandler, OutputHandler
from findjar.core.models import FileTypeDescriptor, SearchOptions, ScanStats


def file_extension(path: Path) -> Optional[str]:
    """Lowercase extension without the dot, or None."""
    suffix = path.suffix
    if len(suffix) <= 1:
        return None
    return suffix[1:].lower()


class DiskFileType(FileTypeHandler):
    """Plain files read directly from disk."""

    def __init__(self, dispatcher: Optional[MatchDispatcher] = None):
        self.descriptor = FileTypeDescriptor(
            extension=None,
            description="files on disk",
            is_default=True,
            selector="d"
        )
        self.dispatcher = dispatcher or MatchDispatcher()

    def find(self, path: Path, display_path: str, options: SearchOptions,
             handler: OutputHandler, stats: Optional[ScanStats] = None) -> None:
        content = StreamContent(
            display_path,
            lambda: open(path, "rb"),
            lambda message, cause: handler.warn(message, cause, options)
        )
        self.dispatcher.dispatch(options, path.name, display_path, content, handler)


class ArchiveFileType(FileTypeHandler):
    """Zip-format archives (zip, jar, ...) whose entries are searched."""

    def __init__(self, extension: str, description: str, is_default: bool, selector: str,
                 walker: Optional[ArchiveWalker] = None):
        self.descriptor = FileTypeDescriptor(
            extension=extension.lower(),
            description=description,
            is_default=is_default,
            selector=selector
        )
        self.walker = walker or ArchiveWalker()

    def find(self, path: Path, display_path: str, options: SearchOptions,
             handler: OutputHandler, stats: Optional[ScanStats] = None) -> None:
        self.walker.walk(path, display_path, options, handler, stats)


class FileTypeRegistry:
    """
    Maps extensions to file type handlers with an explicit plain-file fallback.
    """

    def __init__(self, fallback: Optional[FileTypeHandler] = None):
        self.fallback = fallback or DiskFileType()
        self._by_extension: Dict[str, FileTypeHandler] = {}

    def register(self, handler: FileTypeHandler) -> None:
        descriptor = handler.descriptor
        if descriptor.extension is None:
            raise ValueError("Only the fallback type may have no extension")
        if any(h.descriptor.selector == descriptor.selector for h in self.handlers()):
            raise ValueError(f"Selector '{descriptor.selector}' is already registered")
        self._by_extension[descriptor.extension] = handler

    def handlers(self) -> List[FileTypeHandler]:
        """Fallback first, then archive types in registration order."""
        return [self.fallback, *self._by_extension.values()]

    def resolve(self, path: Path) -> FileTypeHandler:
        """Single resolution point: registered archive type or plain file."""
        ext = file_extension(path)
        return self._by_extension.get(ext, self.fallback) if ext else self.fallback

    def type_key(self, path: Path) -> Optional[str]:
        """Active-type key for a file: archive extension, or None for plain files."""
        return self.resolve(path).descriptor.extension

    def is_active(self, path: Path, active_types: FrozenSet[Optional[str]]) -> bool:
        """
        Archive files are searched only if their extension is active; every other
        file only if plain files (None) are active.
        """
        return self.type_key(path) in active_types

    def by_selector(self, selector: str) -> FileTypeHandler:
        for handler in self.handlers():
            if handler.descriptor.selector == selector:
                return handler
        raise ValueError(f"type must be one of {self.selectors()}")

    def parse_selectors(self, selectors: Iterable[str]) -> FrozenSet[Optional[str]]:
        """Converts selector characters such as "dj" to a set of active type keys."""
        return frozenset(self.by_selector(s).descriptor.extension for s in selectors)

    def selectors(self) -> str:
        return "|".join(h.descriptor.selector for h in self.handlers())

    def default_types(self) -> FrozenSet[Optional[str]]:
        return frozenset(h.descriptor.extension for h in self.handlers() if h.descriptor.is_default)

    def descriptions(self) -> str:
        return ", ".join(f"{h.descriptor.selector} - {h.descriptor.description}" for h in self.handlers())


def default_registry(dispatcher: Optional[MatchDispatcher] = None) -> FileTypeRegistry:
    """Registry with the built-in types: disk files, jar files and zip files."""
    dispatcher = dispatcher or MatchDispatcher()
    walker = ArchiveWalker(dispatcher)
    registry = FileTypeRegistry(DiskFileType(dispatcher))
    registry.register(ArchiveFileType("jar", "files in jar files", True, "j", walker))
    registry.register(ArchiveFileType("zip", "files in zip files", False, "z", walker))
    return registry
