"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grep.py
Context grep over the lines of one logical file.

ALGORITHM
---------
A window of 2N+1 lines slides over the content, padded with N empty slots at
each end so hits near the boundaries still see a full-width window without
made-up context lines. Only the centre line of each window is tested. When it
matches, every line present in the window becomes a candidate record, flagged
as a hit only for the centre.

Neighbouring hits produce overlapping windows, so a line can be emitted several
times: once as a hit and/or several times as context. Candidates are folded by
line number with "hit wins": the first hit record survives if there is one,
otherwise the first context record. Survivors are reported in line order.
"""

import logging
import re
from collections import deque
from typing import Deque, Dict, Iterable, Iterator, List, Optional, Tuple

from findjar.core.interfaces import ContentProvider, OutputHandler
from findjar.core.models import LineMatch, MatchSpan, SearchOptions

logger = logging.getLogger(__name__)

# (line number, line text) or None for padding
WindowSlot = Optional[Tuple[int, str]]


def match_spans(pattern: re.Pattern, line: str) -> Tuple[MatchSpan, ...]:
    """
    All non-overlapping matches of pattern in line, left to right.
    Zero-width matches are left out: they have nothing to highlight.
    """
    return tuple(
        MatchSpan(m.start(), m.end())
        for m in pattern.finditer(line)
        if m.end() > m.start()
    )


def sliding_windows(lines: Iterable[str], context: int) -> Iterator[Tuple[int, List[WindowSlot]]]:
    """
    Yields (centre line number, window) for every line of the input.
    Windows are 2*context+1 slots wide; slots outside the content are None.
    """
    width = 2 * context + 1
    window: Deque[WindowSlot] = deque([None] * context, maxlen=width)

    def padded() -> Iterator[WindowSlot]:
        yield from enumerate(lines)
        for _ in range(context):
            yield None

    for slot in padded():
        window.append(slot)
        if len(window) < width:
            continue
        centre = window[context]
        if centre is not None:
            yield centre[0], list(window)


def matches_with_context(
        lines: Iterable[str],
        pattern: re.Pattern,
        context: int,
        display_path: str
) -> Iterator[LineMatch]:
    """
    Candidate records for every window whose centre line matches.
    May yield the same line number more than once.
    """
    for centre_number, window in sliding_windows(lines, context):
        centre_line = window[context][1]
        if not pattern.search(centre_line):
            continue
        for slot in window:
            if slot is None:
                continue
            line_number, line = slot
            is_hit = line_number == centre_number
            yield LineMatch(
                path=display_path,
                line_number=line_number,
                is_hit=is_hit,
                line=line,
                spans=match_spans(pattern, line) if is_hit else (),
            )


def remove_duplicated_lines(candidates: Iterable[LineMatch]) -> List[LineMatch]:
    """
    Folds candidates with the same line number into one record, preferring the
    first hit over any context record. Result is sorted by line number.
    """
    survivors: Dict[int, LineMatch] = {}
    for candidate in candidates:
        current = survivors.get(candidate.line_number)
        if current is None or (candidate.is_hit and not current.is_hit):
            survivors[candidate.line_number] = candidate
    return [survivors[n] for n in sorted(survivors)]


def grep_lines(lines: Iterable[str], pattern: re.Pattern, context: int, display_path: str) -> List[LineMatch]:
    """Deduplicated, ordered grep records for an iterable of lines."""
    if context < 0:
        raise ValueError("Context line count cannot be negative")
    return remove_duplicated_lines(matches_with_context(lines, pattern, context, display_path))


def content_matches(content: ContentProvider, pattern: re.Pattern) -> bool:
    """True if at least one line of the content matches. Stops at the first hit."""
    result = content.with_lines(lambda lines: any(pattern.search(line) for line in lines))
    return bool(result)


class ContextGrep:
    """
    Runs a context grep over a content provider and reports the records.
    """

    def __init__(self, pattern: re.Pattern, context: int = 0):
        self.pattern = pattern
        self.context = context

    def grep(self, content: ContentProvider) -> Optional[List[LineMatch]]:
        """
        Returns the records for one file, or None if the content could not be read.
        """
        return content.with_lines(
            lambda lines: grep_lines(lines, self.pattern, self.context, content.display_path)
        )

    def report(self, content: ContentProvider, handler: OutputHandler, options: SearchOptions) -> int:
        """
        Greps the content and sends each record to handler.grep_match.
        Returns the number of records emitted.
        """
        records = self.grep(content)
        if not records:
            return 0

        max_line_number = max(r.line_number for r in records)
        for record in records:
            handler.grep_match(max_line_number, record, options)

        logger.debug(f"{content.display_path}: {sum(r.is_hit for r in records)} hits, "
                     f"{len(records)} lines reported")
        return len(records)
