"""
Unit tests for HasherImpl.
Verifies digest lengths, known values and single-pass multi-digest computation.
"""
import hashlib
import io
import zlib

import pytest
import xxhash

from findjar.core.hasher import Crc32AlgorithmImpl, HasherImpl
from findjar.core.models import HashType


class TestHasherImpl:
    """Digest computation over byte streams."""

    @pytest.mark.parametrize("hash_type", list(HashType))
    def test_digest_length_matches_algorithm(self, hash_type):
        digest = HasherImpl().compute(io.BytesIO(b"findjar"), hash_type)
        assert len(digest) == hash_type.hex_length
        assert all(c in "0123456789abcdef" for c in digest)

    def test_known_values(self):
        data = b"hello world\n" * 100
        hasher = HasherImpl(chunk_size=7)  # force many small reads
        assert hasher.compute(io.BytesIO(data), HashType.MD5) == hashlib.md5(data).hexdigest()
        assert hasher.compute(io.BytesIO(data), HashType.SHA256) == hashlib.sha256(data).hexdigest()
        assert hasher.compute(io.BytesIO(data), HashType.XXH64) == xxhash.xxh64(data).hexdigest()

    def test_compute_many_reads_stream_once(self):
        data = b"abc" * 1000
        stream = io.BytesIO(data)
        result = HasherImpl().compute_many(stream, [HashType.SHA1, HashType.MD5])

        assert [t for t, _ in result] == [HashType.SHA1, HashType.MD5]
        assert result[0][1] == hashlib.sha1(data).hexdigest()
        assert result[1][1] == hashlib.md5(data).hexdigest()
        assert stream.read() == b""

    def test_empty_stream(self):
        digest = HasherImpl().compute(io.BytesIO(b""), HashType.MD5)
        assert digest == hashlib.md5(b"").hexdigest()


class TestCrc32:

    def test_matches_zlib(self):
        crc = Crc32AlgorithmImpl()
        crc.update(b"hello ")
        crc.update(b"world")
        assert crc.hexdigest() == f"{zlib.crc32(b'hello world'):08x}"

    def test_zero_padded(self):
        assert Crc32AlgorithmImpl().hexdigest() == "00000000"
