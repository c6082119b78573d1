"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/dispatcher.py
Per-file decision logic: which single operation runs for a logical file.

PRIORITY ORDER
--------------
1. name pattern set and base name does not match          -> skip
2. path pattern set and display path does not match       -> skip
3. apath pattern set and absolute display path no match   -> skip
4. no cat/hash and no grep                                -> plain match event
5. cat/hash and grep, but no content line matches grep    -> skip
6. hash requested                                         -> one event per digest
7. cat requested                                          -> dump event
8. grep only                                              -> context grep records

Grep gates the whole-file operations in step 5; the dump itself is not gated a
second time. Hash wins over cat when both are requested.
"""

import logging
from typing import Optional

from findjar.core.grep import ContextGrep, content_matches
from findjar.core.hasher import HasherImpl
from findjar.core.interfaces import ContentProvider, OutputHandler
from findjar.core.models import SearchOptions

logger = logging.getLogger(__name__)


class MatchDispatcher:
    """
    Decides and runs the operation for one logical file.
    Uses an injected HasherImpl for flexibility and testability.
    """

    def __init__(self, hasher: Optional[HasherImpl] = None):
        self.hasher = hasher or HasherImpl()

    def dispatch(
            self,
            options: SearchOptions,
            file_name: str,
            display_path: str,
            content: ContentProvider,
            handler: OutputHandler
    ) -> None:
        """
        Args:
            options: Resolved search options
            file_name: Base name of the file (last path segment)
            display_path: Path shown to the user; absolute when an apath pattern is set
            content: Content provider for the file
            handler: Receives the resulting events
        """
        if options.name is not None and not options.name.search(file_name):
            return
        if options.path is not None and not options.path.search(display_path):
            return
        if options.apath is not None and not options.apath.search(display_path):
            return

        if not options.is_macro_operation and options.grep is None:
            handler.match(display_path, options)
            return

        if options.is_macro_operation and options.grep is not None:
            if not content_matches(content, options.grep):
                logger.debug(f"Skipping {display_path} (no content match)")
                return

        if options.hashes:
            self._print_hashes(options, display_path, content, handler)
        elif options.cat:
            handler.dump_content(display_path, content, options)
        else:
            ContextGrep(options.grep, options.context).report(content, handler, options)

    def _print_hashes(
            self,
            options: SearchOptions,
            display_path: str,
            content: ContentProvider,
            handler: OutputHandler
    ) -> None:
        digests = content.with_bytes(lambda stream: self.hasher.compute_many(stream, options.hashes))
        if digests is None:
            return
        for hash_type, hex_digest in digests:
            handler.print_hash(display_path, hash_type, hex_digest, options)
