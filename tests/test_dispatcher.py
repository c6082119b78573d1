"""
Tests for MatchDispatcher: filter order, operation priority and grep gating.
"""
import hashlib
import io
from unittest import mock

from findjar.core.content import StreamContent
from findjar.core.dispatcher import MatchDispatcher
from findjar.core.models import HashType, SearchOptions

DATA = b"alpha\nbeta\ngamma\n"


def content_of(data: bytes = DATA, path: str = "dir/file.txt") -> StreamContent:
    return StreamContent(path, lambda: io.BytesIO(data), None)


def dispatch(recorder, options, file_name="file.txt", display_path="dir/file.txt", data=DATA):
    MatchDispatcher().dispatch(options, file_name, display_path, content_of(data, display_path), recorder)


class TestFilters:
    """Name, path and apath patterns filter before any operation runs."""

    def test_no_patterns_reports_plain_match(self, recorder):
        dispatch(recorder, SearchOptions.create())
        assert recorder.events == [("match", "dir/file.txt")]

    def test_name_pattern_tested_against_base_name_only(self, recorder):
        dispatch(recorder, SearchOptions.create(name="dir"))
        assert recorder.events == []

        dispatch(recorder, SearchOptions.create(name=r"\.txt$"))
        assert recorder.matched_paths == ["dir/file.txt"]

    def test_path_pattern_tested_against_display_path(self, recorder):
        dispatch(recorder, SearchOptions.create(path="^dir/"))
        dispatch(recorder, SearchOptions.create(path="^other/"))
        assert recorder.matched_paths == ["dir/file.txt"]

    def test_apath_pattern(self, recorder):
        dispatch(recorder, SearchOptions.create(apath="^/abs/"), display_path="/abs/dir/file.txt")
        dispatch(recorder, SearchOptions.create(apath="^/elsewhere/"), display_path="/abs/dir/file.txt")
        assert recorder.matched_paths == ["/abs/dir/file.txt"]

    def test_patterns_combine_with_and(self, recorder):
        dispatch(recorder, SearchOptions.create(name="file", path="nomatch"))
        assert recorder.events == []

    def test_filtered_file_content_never_read(self, recorder):
        content = mock.Mock()
        MatchDispatcher().dispatch(SearchOptions.create(name="zzz", grep="a"),
                                   "file.txt", "file.txt", content, recorder)
        content.with_lines.assert_not_called()
        content.with_bytes.assert_not_called()


class TestOperations:
    """Exactly one operation per file, hash over cat over grep."""

    def test_grep_only_reports_lines(self, recorder):
        dispatch(recorder, SearchOptions.create(grep="beta"))
        grep_events = recorder.of_kind("grep")
        assert len(grep_events) == 1
        assert grep_events[0][2].line == "beta"
        assert recorder.of_kind("match") == []

    def test_grep_without_hits_reports_nothing(self, recorder):
        dispatch(recorder, SearchOptions.create(grep="delta"))
        assert recorder.events == []

    def test_cat_dumps_whole_file(self, recorder):
        dispatch(recorder, SearchOptions.create(cat=True))
        assert recorder.events == [("dump", "dir/file.txt", ["alpha", "beta", "gamma"])]

    def test_hash_events_in_request_order(self, recorder):
        dispatch(recorder, SearchOptions.create(hashes=(HashType.SHA1, HashType.MD5)))
        assert recorder.events == [
            ("hash", "dir/file.txt", HashType.SHA1, hashlib.sha1(DATA).hexdigest()),
            ("hash", "dir/file.txt", HashType.MD5, hashlib.md5(DATA).hexdigest()),
        ]

    def test_hash_wins_over_cat(self, recorder):
        dispatch(recorder, SearchOptions.create(cat=True, hashes=(HashType.MD5,)))
        assert [e[0] for e in recorder.events] == ["hash"]

    def test_grep_gates_cat(self, recorder):
        dispatch(recorder, SearchOptions.create(cat=True, grep="delta"))
        assert recorder.events == []

        dispatch(recorder, SearchOptions.create(cat=True, grep="gamma"))
        assert [e[0] for e in recorder.events] == ["dump"]

    def test_grep_gates_hash(self, recorder):
        dispatch(recorder, SearchOptions.create(hashes=(HashType.CRC32,), grep="delta"))
        assert recorder.events == []

        dispatch(recorder, SearchOptions.create(hashes=(HashType.CRC32,), grep="alpha"))
        assert [e[0] for e in recorder.events] == ["hash"]

    def test_hashes_computed_in_one_read(self, recorder):
        content = content_of()
        with mock.patch.object(content, "with_bytes", wraps=content.with_bytes) as with_bytes:
            MatchDispatcher().dispatch(
                SearchOptions.create(hashes=(HashType.MD5, HashType.SHA256, HashType.XXH64)),
                "file.txt", "dir/file.txt", content, recorder)
        assert with_bytes.call_count == 1
        assert len(recorder.of_kind("hash")) == 3

    def test_unreadable_content_warns_without_hash(self, recorder):
        options = SearchOptions.create(hashes=(HashType.MD5,))

        def fail():
            raise OSError("permission denied")

        content = StreamContent("locked.bin", fail, lambda m, c: recorder.warn(m, c, options))
        MatchDispatcher().dispatch(options, "locked.bin", "locked.bin", content, recorder)

        assert recorder.of_kind("hash") == []
        assert recorder.warnings == ["can not read locked.bin: permission denied"]
