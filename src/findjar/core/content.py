"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/content.py
Uniform access to "a file's bytes", whether the bytes live in a plain file on disk
or in an entry of a zip/jar archive.

A StreamContent is built from a stream factory: a zero-argument callable that
returns a fresh binary stream on every call. Archive entry streams can not be
rewound, so every access opens a new stream and closes it before returning.
"""

import io
import logging
import lzma
import zipfile
import zlib
from typing import BinaryIO, Callable, Iterator, Optional, TypeVar

from findjar.core.interfaces import ContentProvider

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Failures that mean "this file can not be read", as opposed to programming errors.
# zipfile raises RuntimeError for encrypted entries and NotImplementedError for
# unsupported compression methods. Corrupt deflate and LZMA payloads raise their
# codec errors.
READ_ERRORS = (
    OSError,
    EOFError,
    zipfile.BadZipFile,
    zlib.error,
    lzma.LZMAError,
    RuntimeError,
    NotImplementedError,
)

DEFAULT_ENCODING = "utf-8"


class StreamContent(ContentProvider):
    """
    Content provider bound to exactly one logical file.

    Attributes:
        display_path: Path used in warnings and output
        stream_factory: Returns a new readable binary stream on each call
        warn: Warning channel, called as warn(message, exception)
        encoding: Text encoding used by with_lines; undecodable bytes are replaced
    """

    def __init__(
        self,
        display_path: str,
        stream_factory: Callable[[], BinaryIO],
        warn: Callable[[str, BaseException], None],
        encoding: str = DEFAULT_ENCODING
    ):
        self.display_path = display_path
        self.stream_factory = stream_factory
        self.warn = warn
        self.encoding = encoding

    def with_bytes(self, consumer: Callable[[BinaryIO], T]) -> Optional[T]:
        """
        Opens one stream and passes it to consumer.
        Returns the consumer's result, or None if the content could not be read.
        """
        try:
            with self.stream_factory() as stream:
                return consumer(stream)
        except READ_ERRORS as e:
            self._report(e)
            return None

    def with_lines(self, consumer: Callable[[Iterator[str]], T]) -> Optional[T]:
        """
        Opens one stream as text and passes a lazy line iterator to consumer.
        Lines are split on \\n, \\r\\n and \\r and returned without terminators.
        Returns the consumer's result, or None if the content could not be read.
        """
        try:
            with self.stream_factory() as stream, \
                    io.TextIOWrapper(stream, encoding=self.encoding, errors="replace", newline=None) as reader:
                return consumer(_strip_newlines(reader))
        except READ_ERRORS as e:
            self._report(e)
            return None

    def _report(self, error: BaseException) -> None:
        message = f"can not read {self.display_path}: {error}"
        logger.debug(message)
        self.warn(message, error)

    def __repr__(self):
        return f"<StreamContent {self.display_path}>"


def _strip_newlines(reader: io.TextIOWrapper) -> Iterator[str]:
    for line in reader:
        yield line[:-1] if line.endswith("\n") else line
