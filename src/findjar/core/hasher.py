"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Streaming digest computation over byte streams.

Every algorithm is exposed through the HashAlgorithm interface (update/hexdigest),
so one pass over a stream can feed several digests at once and the content is
never loaded into memory as a whole.
"""

import hashlib
import zlib
from typing import BinaryIO, Callable, Dict, Iterable, List, Tuple

import xxhash

from findjar.core.interfaces import HashAlgorithm
from findjar.core.models import HashType

READ_CHUNK_SIZE = 64 * 1024


class Crc32AlgorithmImpl(HashAlgorithm):
    """CRC32 checksum with a hashlib-style API."""

    def __init__(self):
        self._value = 0

    def update(self, data: bytes) -> None:
        self._value = zlib.crc32(data, self._value)

    def hexdigest(self) -> str:
        return f"{self._value & 0xFFFFFFFF:08x}"


# Use the same way to register any other hashing algorithm
ALGORITHMS: Dict[HashType, Callable[[], HashAlgorithm]] = {
    HashType.MD5: hashlib.md5,
    HashType.SHA1: hashlib.sha1,
    HashType.SHA256: hashlib.sha256,
    HashType.SHA512: hashlib.sha512,
    HashType.CRC32: Crc32AlgorithmImpl,
    HashType.XXH64: xxhash.xxh64,
}


class HasherImpl:
    """
    Computes digests of byte streams for any registered algorithm.
    """

    def __init__(self, chunk_size: int = READ_CHUNK_SIZE):
        self.chunk_size = chunk_size

    @staticmethod
    def new(hash_type: HashType) -> HashAlgorithm:
        try:
            return ALGORITHMS[hash_type]()
        except KeyError:
            raise ValueError(f"Unsupported hash algorithm: {hash_type}") from None

    def compute(self, stream: BinaryIO, hash_type: HashType) -> str:
        """Reads the stream to the end and returns the hex digest."""
        return self.compute_many(stream, [hash_type])[0][1]

    def compute_many(self, stream: BinaryIO, hash_types: Iterable[HashType]) -> List[Tuple[HashType, str]]:
        """
        Reads the stream once, feeding every requested algorithm.

        Returns:
            (hash type, hex digest) pairs in request order.
        """
        digests = [(hash_type, self.new(hash_type)) for hash_type in hash_types]
        while True:
            chunk = stream.read(self.chunk_size)
            if not chunk:
                break
            for _, digest in digests:
                digest.update(chunk)
        return [(hash_type, digest.hexdigest()) for hash_type, digest in digests]
