"""
Tests for word-phrase secret sharing.
"""

from itertools import combinations

import pytest

from wordshard.errors import InsufficientShares, InvalidEncoding, MalformedShare, UnknownWord
from wordshard.shamir import (
    Share,
    ShareSet,
    generate_shares,
    restore_secret,
    restore_secret_bytes,
    sharing_encoding,
)
from wordshard.words import byte_to_word, decode_phrase, encode_phrase


def secret_as_share(secret_phrase: str) -> str:
    """The secret column written as a share phrase with index 0."""
    return f"{byte_to_word(0)} {secret_phrase}"


class TestGenerateShares:
    """Tests for splitting a secret."""

    def test_shape(self):
        secret_phrase, shares = generate_shares(total=6, required=3, word_count=8)

        assert len(secret_phrase.split()) == 8
        assert len(shares) == 6
        for i, phrase in enumerate(shares, start=1):
            words = phrase.split()
            assert len(words) == 9
            assert words[0] == byte_to_word(i)

    def test_returns_share_set(self):
        result = generate_shares(total=3, required=2, word_count=4)

        assert isinstance(result, ShareSet)
        assert result.secret_phrase == result[0]
        assert result.shares == result[1]

    def test_caller_supplied_secret(self):
        secret = b"\x10\x20\x30\x40"
        result = generate_shares(total=5, required=2, word_count=4, secret=secret)

        assert result.secret_phrase == encode_phrase(secret)

    def test_secret_is_truncated_and_padded(self):
        truncated = generate_shares(total=3, required=2, word_count=2, secret=b"abcd")
        padded = generate_shares(total=3, required=2, word_count=4, secret=b"ab")

        assert decode_phrase(truncated.secret_phrase) == b"ab"
        assert decode_phrase(padded.secret_phrase) == b"ab\x00\x00"

    def test_shares_are_randomized(self):
        """The same secret gives different shares on each run."""
        first = generate_shares(total=4, required=3, word_count=8, secret=b"12345678")
        second = generate_shares(total=4, required=3, word_count=8, secret=b"12345678")

        assert first.secret_phrase == second.secret_phrase
        assert first.shares != second.shares

    def test_secret_is_not_a_share(self):
        result = generate_shares(total=6, required=3, word_count=8)

        assert secret_as_share(result.secret_phrase) not in result.shares

    def test_invalid_parameters(self):
        with pytest.raises(InvalidEncoding):
            generate_shares(total=2, required=3, word_count=4)
        with pytest.raises(InvalidEncoding):
            generate_shares(total=3, required=0, word_count=4)
        with pytest.raises(InvalidEncoding):
            generate_shares(total=256, required=3, word_count=4)
        with pytest.raises(InvalidEncoding):
            generate_shares(total=3, required=2, word_count=0)


class TestRestoreSecret:
    """Tests for restoring a secret from shares."""

    def test_any_three_of_six(self, rng):
        """Every 3-subset of the shares and the secret column, in any order."""
        secret_phrase, shares = generate_shares(total=6, required=3, word_count=8)
        candidates = [secret_as_share(secret_phrase)] + shares

        for subset in combinations(candidates, 3):
            subset = list(subset)
            rng.shuffle(subset)
            assert restore_secret(3, 6, subset) == secret_phrase

    def test_more_than_required(self):
        secret_phrase, shares = generate_shares(total=6, required=3, word_count=5)

        assert restore_secret(3, 6, shares) == secret_phrase

    def test_missing_entries_are_skipped(self):
        secret_phrase, shares = generate_shares(total=5, required=2, word_count=6)
        positional = [None, shares[1], None, shares[4], None]

        assert restore_secret(2, 5, positional) == secret_phrase

    def test_accepts_share_objects(self):
        secret = b"\x01\x02\x03"
        _, shares = generate_shares(total=4, required=2, word_count=3, secret=secret)
        parsed = [Share.parse(p) for p in shares[2:]]

        assert restore_secret_bytes(2, 4, parsed) == secret

    def test_insufficient_shares(self):
        _, shares = generate_shares(total=6, required=3, word_count=8)

        with pytest.raises(InsufficientShares) as exc_info:
            restore_secret(3, 6, shares[:2])

        assert exc_info.value.available == 2
        assert exc_info.value.required == 3

    def test_no_shares(self):
        with pytest.raises(InsufficientShares):
            restore_secret(3, 6, [])

    def test_duplicate_share_counts_once(self):
        _, shares = generate_shares(total=6, required=3, word_count=8)

        with pytest.raises(InsufficientShares):
            restore_secret(3, 6, [shares[0], shares[0], shares[1]])

    def test_conflicting_duplicate(self):
        _, shares = generate_shares(total=6, required=3, word_count=2)
        words = shares[0].split()
        words[1] = byte_to_word((decode_phrase(words[1])[0] + 1) % 256)
        altered = " ".join(words)

        with pytest.raises(MalformedShare, match="Conflicting"):
            restore_secret(3, 6, [shares[0], altered, shares[1], shares[2]])

    def test_unknown_word(self):
        _, shares = generate_shares(total=6, required=3, word_count=4)
        typo = shares[0].rsplit(" ", 1)[0] + " typo"

        with pytest.raises(UnknownWord):
            restore_secret(3, 6, [typo, shares[1], shares[2]])

    def test_index_out_of_range(self):
        _, shares = generate_shares(total=6, required=3, word_count=4)
        payload = shares[0].split(" ", 1)[1]
        stray = f"{byte_to_word(7)} {payload}"

        with pytest.raises(MalformedShare, match="out of range"):
            restore_secret(3, 6, [stray, shares[1], shares[2]])

    def test_negative_index_rejected(self):
        """A Share built by hand with a negative index must not be dropped silently."""
        _, shares = generate_shares(total=6, required=3, word_count=4)
        known = [Share.parse(p) for p in shares[:3]]
        stray = Share(index=-1, payload=known[0].payload)

        with pytest.raises(MalformedShare, match="out of range"):
            restore_secret_bytes(3, 6, [stray] + known)

    def test_length_mismatch(self):
        _, shares = generate_shares(total=6, required=3, word_count=4)
        short = shares[0].rsplit(" ", 1)[0]

        with pytest.raises(MalformedShare, match="different lengths"):
            restore_secret(3, 6, [short, shares[1], shares[2]])

    def test_index_word_only(self):
        with pytest.raises(MalformedShare):
            restore_secret(2, 3, [byte_to_word(1), byte_to_word(2)])

    def test_empty_phrase(self):
        with pytest.raises(MalformedShare):
            restore_secret(2, 3, ["   "])

    def test_threshold_of_one(self):
        secret_phrase, shares = generate_shares(total=3, required=1, word_count=4)

        for share in shares:
            assert restore_secret(1, 3, [share]) == secret_phrase


class TestShare:
    """Tests for the Share value."""

    def test_phrase_round_trip(self):
        share = Share(index=3, payload=b"\x00\xff")

        assert share.phrase == "apex able zoom"
        assert str(share) == share.phrase
        assert Share.parse(share.phrase) == share

    def test_parse_normalizes_case(self):
        assert Share.parse("APEX Able zoom") == Share(index=3, payload=b"\x00\xff")

    def test_sharing_encoding_reserves_secret_column(self):
        encoding = sharing_encoding(total=6, required=3)

        assert encoding.data_chunks == 3
        assert encoding.total == 7
