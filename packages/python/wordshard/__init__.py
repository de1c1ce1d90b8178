"""
wordshard - Reed-Solomon erasure coding and word-phrase secret sharing

Any k of n encoded columns rebuild the original bytes; on top of that,
secrets are split into shares that are written down as word phrases.
"""

from .encoding import EncodingParameters
from .erasure import (
    encode,
    encode_stream,
    decode,
    analyze_reconstruction,
    generator_matrix,
    StreamRecord,
)
from .errors import (
    WordshardError,
    DivisionByZero,
    DimensionMismatch,
    Singular,
    InvalidEncoding,
    MalformedStream,
    InsufficientShares,
    UnknownWord,
    MalformedShare,
)
from .matrix import Matrix
from .shamir import (
    generate_shares,
    restore_secret,
    restore_secret_bytes,
    Share,
    ShareSet,
)
from .words import byte_to_word, word_to_byte, encode_phrase, decode_phrase

__version__ = "0.1.0"
__all__ = [
    # Erasure coding
    "EncodingParameters",
    "encode",
    "encode_stream",
    "decode",
    "analyze_reconstruction",
    "generator_matrix",
    "StreamRecord",
    "Matrix",
    # Secret sharing
    "generate_shares",
    "restore_secret",
    "restore_secret_bytes",
    "Share",
    "ShareSet",
    # Words
    "byte_to_word",
    "word_to_byte",
    "encode_phrase",
    "decode_phrase",
    # Errors
    "WordshardError",
    "DivisionByZero",
    "DimensionMismatch",
    "Singular",
    "InvalidEncoding",
    "MalformedStream",
    "InsufficientShares",
    "UnknownWord",
    "MalformedShare",
]
