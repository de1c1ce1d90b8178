"""
Threshold secret sharing with word-phrase shares.

A secret of W bytes is spread over `total` shares so that any `required`
of them rebuild it. Each byte of the secret becomes one row of the erasure
code: the row holds the secret byte followed by required - 1 random bytes,
and is encoded into total + 1 columns. Column 0 is the secret itself and
is never handed out; columns 1..total are the shares.

Read as polynomials, the secret is each row's value at x = 0 and share j is
its value at x = j, so fewer than `required` shares say nothing about it.

Share phrases start with an index word (the column number, through the
same byte/word mapping) followed by one word per byte of the column.
"""

import logging
import secrets
from dataclasses import dataclass
from typing import Dict, Iterable, List, NamedTuple, Optional, Union

from .encoding import EncodingParameters
from .erasure import StreamRecord, decode, encode_stream
from .errors import InvalidEncoding, MalformedShare
from .words import byte_to_word, encode_phrase, from_words, to_words, word_to_byte

logger = logging.getLogger(__name__)

# One column is reserved for the secret, and share indices must fit in one word.
MAX_SHARES = 255

SECRET_COLUMN = 0


@dataclass(frozen=True)
class Share:
    """One distributable column: its index and its bytes."""
    index: int
    payload: bytes

    @property
    def words(self) -> List[str]:
        return to_words(self.payload)

    @property
    def phrase(self) -> str:
        return " ".join([byte_to_word(self.index)] + self.words)

    def __str__(self) -> str:
        return self.phrase

    @classmethod
    def parse(cls, phrase: str) -> "Share":
        """
        Parse "<index word> <payload words...>".

        Raises:
            MalformedShare: If the phrase is empty
            UnknownWord: If any word is not in the vocabulary
        """
        words = phrase.split()
        if not words:
            raise MalformedShare("Empty share phrase")
        return cls(index=word_to_byte(words[0]), payload=from_words(words[1:]))


class ShareSet(NamedTuple):
    """Output of generate_shares: the secret's phrase and one phrase per share."""
    secret_phrase: str
    shares: List[str]


def sharing_encoding(total: int, required: int) -> EncodingParameters:
    """Encoding for `total` shares with threshold `required`, plus the secret column."""
    if required < 1:
        raise InvalidEncoding(f"required must be at least 1, got {required}")
    if total < required:
        raise InvalidEncoding(f"total ({total}) must be at least required ({required})")
    if total > MAX_SHARES:
        raise InvalidEncoding(f"total ({total}) exceeds the limit of {MAX_SHARES} shares")
    return EncodingParameters(data_chunks=required, code_chunks=total - required + 1)


def generate_shares(
    total: int,
    required: int,
    word_count: int,
    secret: Optional[bytes] = None
) -> ShareSet:
    """
    Split a secret into `total` share phrases, any `required` of which restore it.

    Args:
        total: Number of shares to hand out
        required: Shares needed to restore the secret
        word_count: Length of the secret phrase in words (one byte per word)
        secret: Secret bytes, truncated or zero-padded to word_count;
            random when omitted

    Returns:
        ShareSet of (secret_phrase, share phrases for columns 1..total)
    """
    encoding = sharing_encoding(total, required)
    if word_count < 1:
        raise InvalidEncoding(f"word_count must be at least 1, got {word_count}")

    if secret is None:
        secret = secrets.token_bytes(word_count)
    else:
        secret = bytes(secret[:word_count]).ljust(word_count, b"\x00")

    rows = bytearray()
    for b in secret:
        rows.append(b)
        rows += secrets.token_bytes(required - 1)

    stream = encode_stream(bytes(rows), encoding)
    shares = [
        Share(index=j, payload=stream.columns[j]).phrase
        for j in range(1, encoding.total)
    ]
    logger.debug("Generated %d shares (threshold %d) of %d words", total, required, word_count)
    return ShareSet(secret_phrase=encode_phrase(stream.columns[SECRET_COLUMN]), shares=shares)


def _place_shares(
    partial_shares: Iterable[Union[str, Share, None]],
    encoding: EncodingParameters
) -> Dict[int, bytes]:
    placed: Dict[int, bytes] = {}
    for item in partial_shares:
        if item is None:
            continue
        share = item if isinstance(item, Share) else Share.parse(item)
        if not 0 <= share.index < encoding.total:
            raise MalformedShare(
                f"Share index {share.index} out of range for {encoding.total - 1} shares"
            )
        previous = placed.get(share.index)
        if previous is not None and previous != share.payload:
            raise MalformedShare(f"Conflicting phrases given for share {share.index}")
        placed[share.index] = share.payload

    lengths = {len(p) for p in placed.values()}
    if len(lengths) > 1:
        raise MalformedShare(f"Shares have different lengths: {sorted(lengths)}")
    if 0 in lengths:
        raise MalformedShare("Share phrase has an index word but no payload")
    return placed


def restore_secret_bytes(
    required: int,
    total: int,
    partial_shares: Iterable[Union[str, Share, None]]
) -> bytes:
    """
    Rebuild the secret bytes from any `required` shares.

    Args:
        required: Threshold the shares were generated with
        total: Number of shares that were generated
        partial_shares: Share phrases (or Share objects); None marks a missing one

    Raises:
        UnknownWord: If a phrase contains a word outside the vocabulary
        MalformedShare: If phrases are inconsistent with each other or with total
        InsufficientShares: If fewer than `required` distinct shares are given
    """
    encoding = sharing_encoding(total, required)
    placed = _place_shares(partial_shares, encoding)
    word_count = len(next(iter(placed.values()), b""))

    stream = StreamRecord(
        original_length=word_count * required,
        encoding=encoding,
        columns=[placed.get(i, b"") for i in range(encoding.total)],
        valid=[i in placed for i in range(encoding.total)],
    )
    logger.debug("Restoring from shares %s", sorted(placed))
    data = decode(stream)
    return data[::required]


def restore_secret(
    required: int,
    total: int,
    partial_shares: Iterable[Union[str, Share, None]]
) -> str:
    """Rebuild the secret phrase from any `required` share phrases."""
    return encode_phrase(restore_secret_bytes(required, total, partial_shares))
