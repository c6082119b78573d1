"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/console_output.py
Console implementation of the OutputHandler protocol.
Renders matches, grep lines, dumps and hashes with rich; colours are switched
off per call through SearchOptions.monochrome, never through global state.

When colours are off (monochrome, or the stream is not a terminal) lines are
written verbatim. Coloured lines go through rich, which expands tabs and drops
control characters such as form feeds.
"""
import logging
import re
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from rich.console import Console
from rich.text import Text

from findjar.core.grep import match_spans
from findjar.core.interfaces import ContentProvider, OutputHandler
from findjar.core.models import HashType, LineMatch, MatchSpan, SearchOptions

logger = logging.getLogger(__name__)

HIT_STYLE = "bold red"
LINE_NUMBER_STYLE = "green"
MARKER_STYLE = "red"
WARNING_STYLE = "red"

DUMP_START = "<<<<<<<"
DUMP_END = ">>>>>>>"


def _new_console(stderr: bool = False) -> Console:
    return Console(stderr=stderr, highlight=False, emoji=False, soft_wrap=True)


class ConsoleOutputHandler(OutputHandler):
    """
    Prints search results to stdout and warnings to stderr.
    Full-content dumps go to stdout, or are appended to options.out_file.
    """

    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None):
        self.console = console or _new_console()
        self.error_console = error_console or _new_console(stderr=True)

    # ===== OutputHandler =====

    def warn(self, message: str, cause: Optional[BaseException], options: SearchOptions) -> None:
        if cause is not None:
            logger.debug(f"Warning cause: {cause!r}")
        line = f"WARN: {message}"
        self._print(self.error_console, line, lambda: Text(line, style=WARNING_STYLE), options)

    def match(self, display_path: str, options: SearchOptions) -> None:
        self._print(self.console, display_path, lambda: Text(display_path), options)

    def grep_match(self, max_line_number: int, line_match: LineMatch, options: SearchOptions) -> None:
        self._print(
            self.console,
            self.grep_prefix(max_line_number, line_match, options) + line_match.line,
            lambda: self.format_grep_line(max_line_number, line_match, options),
            options
        )

    def dump_content(self, display_path: str, content: ContentProvider, options: SearchOptions) -> None:
        lines = content.with_lines(list)
        if lines is None:  # read failure, already reported
            return

        if options.out_file is not None:
            self._append_to_file(options.out_file, display_path, lines)
            notice = f"{display_path} >> {options.out_file}"
            self._print(self.console, notice, lambda: Text(notice), options)
            return

        if self._plain(self.console, options):
            for line in self.dump_lines(display_path, lines):
                self._write(self.console, line)
            return

        for text in self.format_dump(display_path, lines, options):
            self.console.print(text)

    def print_hash(self, display_path: str, hash_type: HashType, hex_digest: str,
                   options: SearchOptions) -> None:
        line = f"{hex_digest} {display_path}"
        self._print(self.console, line, lambda: Text(line), options)

    # ===== Formatting =====

    @staticmethod
    def grep_prefix(max_line_number: int, line_match: LineMatch, options: SearchOptions) -> str:
        """
        <path><sep><n><pad>, with sep ' ' for context lines when context is
        requested and ':' otherwise; line numbers are left-aligned in a column
        as wide as the largest line number of the file.
        """
        separator = " " if (options.context > 0 and not line_match.is_hit) else ":"
        number = str(line_match.display_number)
        width = len(str(max_line_number + 1))
        padding = " " * (width - len(number) + 1)
        return f"{line_match.path}{separator}{number}{padding}"

    def format_grep_line(self, max_line_number: int, line_match: LineMatch, options: SearchOptions) -> Text:
        text = Text(self.grep_prefix(max_line_number, line_match, options))
        text.append_text(self.highlight(line_match.line, line_match.spans, options))
        return text

    @staticmethod
    def dump_lines(display_path: str, lines: Sequence[str]) -> List[str]:
        """Numbered plain rendering of a whole file."""
        width = len(str(len(lines)))
        numbered = [f"{str(n).rjust(width)} {line}" for n, line in enumerate(lines, 1)]
        return [f"{DUMP_START} {display_path}", *numbered, DUMP_END]

    def format_dump(self, display_path: str, lines: Sequence[str], options: SearchOptions) -> List[Text]:
        """Numbered console rendering of a whole file, grep matches highlighted."""
        result = [Text.assemble((DUMP_START, self._style(MARKER_STYLE, options)), " ", display_path)]
        width = len(str(len(lines)))
        for n, line in enumerate(lines, 1):
            text = Text(str(n).rjust(width), style=self._style(LINE_NUMBER_STYLE, options))
            text.append(" ")
            text.append_text(self.highlight(line, self._spans(options.grep, line), options))
            result.append(text)
        result.append(Text(DUMP_END, style=self._style(MARKER_STYLE, options)))
        return result

    def highlight(self, line: str, spans: Sequence[MatchSpan], options: SearchOptions) -> Text:
        text = Text(line)
        style = self._style(HIT_STYLE, options)
        if style:
            for span in spans:
                text.stylize(style, span.start, span.end)
        return text

    # ===== Helpers =====

    def _print(self, console: Console, plain: str, render: Callable[[], Text],
               options: SearchOptions) -> None:
        if self._plain(console, options):
            self._write(console, plain)
        else:
            console.print(render())

    @staticmethod
    def _plain(console: Console, options: SearchOptions) -> bool:
        return options.monochrome or console.no_color or console.color_system is None

    @staticmethod
    def _write(console: Console, line: str) -> None:
        console.file.write(line + "\n")

    @staticmethod
    def _append_to_file(out_file: Path, display_path: str, lines: Sequence[str]) -> None:
        """Opened and closed per dump so an interrupted run keeps earlier output."""
        block = "\n".join([f"{DUMP_START} {display_path}", *lines, DUMP_END]) + "\n"
        with open(out_file, "a", encoding="utf-8") as f:
            f.write(block)

    @staticmethod
    def _spans(pattern: Optional[re.Pattern], line: str) -> Sequence[MatchSpan]:
        return match_spans(pattern, line) if pattern is not None else ()

    @staticmethod
    def _style(style: str, options: SearchOptions) -> str:
        return "" if options.monochrome else style
