"""
Tests for the SHA-1 / SHA-256 hash consumers
"""

import hashlib

import pytest

from graded_bits import GradedInteger, InvalidWidthError
from graded_bits.hashes import (
    SHA1_DIGEST_WIDTH,
    SHA256_DIGEST_WIDTH,
    hex_digest,
    message_from_bytes,
    pad_message,
    sha1,
    sha256,
    tap_bit,
)


SHA1_VECTORS = [
    ("", "da39a3ee5e6b4b0d3255bfef95601890afd80709"),
    ("The quick brown fox jumps over the lazy dog",
     "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12"),
    ("The quick brown fox jumps over the lazy cog",
     "de9f2c7fd25e1b3afad3e85a0bd17d9b100db4b3"),
    ("hello world", "2aae6c35c94fcfb415dbe95f408b9ce91ee846ed"),
]

SHA256_VECTORS = [
    ("", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    ("hello world",
     "b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9"),
]

BASE_MESSAGE = b"test\x00"


class TestPadding:
    def test_empty_message(self):
        words = pad_message([])
        assert len(words) == 16
        assert words[0].collapse() == 0x80000000
        assert all(w.collapse() == 0 for w in words[1:])

    def test_length_field(self):
        words = pad_message(message_from_bytes(b"abc"))
        assert words[0].collapse() == 0x61626380
        assert words[15].collapse() == 24

    def test_two_blocks(self):
        assert len(pad_message(message_from_bytes(b"x" * 56))) == 32

    def test_rejects_wide_elements(self):
        with pytest.raises(InvalidWidthError):
            pad_message([GradedInteger.from_classical(16, 1)])


class TestClassicalDigests:
    @pytest.mark.parametrize("text,expected", SHA1_VECTORS)
    def test_sha1(self, text, expected):
        digest = sha1(message_from_bytes(text))
        assert digest.width == SHA1_DIGEST_WIDTH == 160
        assert hex_digest(digest) == expected

    @pytest.mark.parametrize("text,expected", SHA256_VECTORS)
    def test_sha256(self, text, expected):
        digest = sha256(message_from_bytes(text))
        assert digest.width == SHA256_DIGEST_WIDTH == 256
        assert hex_digest(digest) == expected

    def test_digest_is_crisp(self):
        digest = sha1(message_from_bytes("abc"))
        assert all(p in (0.0, 1.0) for p in digest.probabilities())


class TestTappedDigests:
    @pytest.mark.parametrize("hash_fn", [sha1, sha256])
    def test_half_tap_stays_in_range(self, hash_fn):
        message = tap_bit(message_from_bytes(BASE_MESSAGE), 4, 0, 0.5)
        digest = hash_fn(message)
        for p in digest.probabilities():
            assert -1e-9 <= p <= 1 + 1e-9

    @pytest.mark.parametrize("hash_fn,oracle", [
        (sha1, hashlib.sha1),
        (sha256, hashlib.sha256),
    ])
    @pytest.mark.parametrize("tap", [0.0, 1.0])
    def test_crisp_tap_matches_classical(self, hash_fn, oracle, tap):
        message = tap_bit(message_from_bytes(BASE_MESSAGE), 4, 0, tap)
        classical = bytearray(BASE_MESSAGE)
        classical[4] |= int(tap)

        tapped = hex_digest(hash_fn(message))
        assert tapped == oracle(bytes(classical)).hexdigest()
        assert tapped == hex_digest(hash_fn(message_from_bytes(bytes(classical))))

    def test_tap_replaces_single_bit(self):
        base = message_from_bytes(BASE_MESSAGE)
        tapped = tap_bit(base, 4, 0, 0.5)
        assert tapped[:4] == base[:4]
        assert tapped[4][0].probability == 0.5
        assert all(tapped[4][i] is base[4][i] for i in range(1, 8))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
