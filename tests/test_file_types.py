"""
Tests for FileTypeRegistry: resolution by extension, selectors and active types.
"""
from pathlib import Path

import pytest

from findjar.core.file_types import (
    ArchiveFileType, DiskFileType, FileTypeRegistry, default_registry, file_extension,
)
from findjar.core.models import DEFAULT_ACTIVE_TYPES


class TestFileTypeRegistry:

    def test_default_types_match_default_active_types(self):
        assert default_registry().default_types() == DEFAULT_ACTIVE_TYPES

    def test_resolve_by_extension_case_insensitive(self):
        registry = default_registry()
        assert registry.resolve(Path("a/LIB.JAR")).descriptor.extension == "jar"
        assert registry.resolve(Path("a/bundle.zip")).descriptor.extension == "zip"
        assert isinstance(registry.resolve(Path("a/readme.txt")), DiskFileType)
        assert isinstance(registry.resolve(Path("Makefile")), DiskFileType)

    def test_selectors(self):
        registry = default_registry()
        assert registry.selectors() == "d|j|z"
        assert registry.parse_selectors("dz") == frozenset({None, "zip"})

    def test_unknown_selector_rejected(self):
        with pytest.raises(ValueError, match="type must be one of d\\|j\\|z"):
            default_registry().parse_selectors("q")

    def test_archive_only_types_exclude_plain_files(self):
        registry = default_registry()
        active = registry.parse_selectors("j")
        assert registry.is_active(Path("x.jar"), active)
        assert not registry.is_active(Path("x.txt"), active)
        assert not registry.is_active(Path("x.zip"), active)

    def test_zip_not_searched_by_default(self):
        registry = default_registry()
        assert not registry.is_active(Path("x.zip"), DEFAULT_ACTIVE_TYPES)
        assert registry.is_active(Path("x.properties"), DEFAULT_ACTIVE_TYPES)

    def test_duplicate_selector_rejected(self):
        registry = default_registry()
        with pytest.raises(ValueError, match="already registered"):
            registry.register(ArchiveFileType("war", "files in war files", False, "j"))

    def test_register_new_archive_type(self):
        registry = FileTypeRegistry()
        registry.register(ArchiveFileType("war", "files in war files", True, "w"))
        assert registry.selectors() == "d|w"
        assert registry.default_types() == frozenset({None, "war"})

    def test_descriptions(self):
        assert default_registry().descriptions() == (
            "d - files on disk, j - files in jar files, z - files in zip files"
        )


class TestFileExtension:

    def test_extension(self):
        assert file_extension(Path("a/b.Jar")) == "jar"
        assert file_extension(Path("noext")) is None
        assert file_extension(Path(".hidden")) is None
