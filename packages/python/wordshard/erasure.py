"""
Reed-Solomon Erasure Coding for wordshard.

Implements systematic RS encoding over GF(256) where:
- First k columns are data columns (original data regrouped row-major)
- Next (n-k) columns are parity columns (redundancy)
- Any k columns can reconstruct the original data

Column i is the evaluation, at x = i, of the polynomial of degree < k that
passes through a row's data bytes at x = 0..k-1. In matrix form the
generator is V * inverse(V_top), V being the Vandermonde matrix over the
column indices and V_top its first k rows.
"""

import logging
import math
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import List, Sequence

from . import field
from .encoding import EncodingParameters
from .errors import InsufficientShares, MalformedStream
from .matrix import Matrix

logger = logging.getLogger(__name__)

Codeword = List[bytes]


@dataclass
class StreamRecord:
    """Encoded data plus which of its columns are present and trusted."""
    original_length: int
    encoding: EncodingParameters
    columns: Codeword
    valid: List[bool]

    @property
    def row_count(self) -> int:
        """Bytes per column: one per group of data_chunks original bytes."""
        return math.ceil(self.original_length / self.encoding.data_chunks)

    @property
    def valid_indices(self) -> List[int]:
        return [i for i, ok in enumerate(self.valid) if ok]

    def erase(self, *indices: int) -> "StreamRecord":
        """Return a copy with the given columns blanked and marked invalid."""
        total = self.encoding.total
        for i in indices:
            if not 0 <= i < total:
                raise MalformedStream(f"Column {i} out of range for {total} columns")
        erased = set(indices)
        return replace(
            self,
            columns=[b"" if i in erased else col for i, col in enumerate(self.columns)],
            valid=[False if i in erased else ok for i, ok in enumerate(self.valid)],
        )


@lru_cache(maxsize=64)
def generator_matrix(encoding: EncodingParameters) -> Matrix:
    """
    Build the total x data_chunks generator matrix.

    The top data_chunks rows are the identity. Every subset of data_chunks
    rows is invertible because the evaluation points are distinct.
    """
    k = encoding.data_chunks
    vandermonde = Matrix.vandermonde(range(encoding.total), k)
    top_inverse = vandermonde.select_rows(range(k)).invert()
    return vandermonde @ top_inverse


def _combine(coefficients: Sequence[int], columns: Sequence[bytes], row_count: int) -> bytes:
    """Linear combination of columns, computed byte-row by byte-row."""
    out = bytearray(row_count)
    mul = field.multiply
    for coeff, column in zip(coefficients, columns):
        if coeff == 0:
            continue
        if coeff == 1:
            for r, b in enumerate(column):
                out[r] ^= b
            continue
        for r, b in enumerate(column):
            if b:
                out[r] ^= mul(coeff, b)
    return bytes(out)


def encode_stream(data: bytes, encoding: EncodingParameters) -> StreamRecord:
    """
    Encode data into encoding.total columns.

    Args:
        data: Original data to encode
        encoding: Data/code chunk counts

    Returns:
        All-valid StreamRecord holding the codeword

    The encoding works as follows:
    1. Pad data to be divisible by data_chunks
    2. Deal the bytes row-major into data_chunks data columns
    3. Generate code_chunks parity columns from the generator matrix
    """
    k = encoding.data_chunks
    original_length = len(data)
    row_count = math.ceil(original_length / k)
    padded = bytes(data).ljust(row_count * k, b"\x00")

    data_columns = [padded[c::k] for c in range(k)]
    columns = list(data_columns)

    if encoding.code_chunks:
        generator = generator_matrix(encoding)
        for i in range(k, encoding.total):
            columns.append(_combine(generator.row(i), data_columns, row_count))

    logger.debug(
        "Encoded %d bytes with %s into %d columns of %d bytes",
        original_length, encoding, encoding.total, row_count,
    )
    return StreamRecord(
        original_length=original_length,
        encoding=encoding,
        columns=columns,
        valid=[True] * encoding.total,
    )


def encode(data: bytes, data_chunks: int, code_chunks: int) -> Codeword:
    """Encode data and return just the codeword columns."""
    return encode_stream(data, EncodingParameters(data_chunks, code_chunks)).columns


def _check_stream(stream: StreamRecord) -> None:
    total = stream.encoding.total
    if stream.original_length < 0:
        raise MalformedStream(f"Negative original length {stream.original_length}")
    if len(stream.columns) != total:
        raise MalformedStream(f"Expected {total} columns, got {len(stream.columns)}")
    if len(stream.valid) != total:
        raise MalformedStream(f"Expected {total} validity flags, got {len(stream.valid)}")
    row_count = stream.row_count
    for i in stream.valid_indices:
        if len(stream.columns[i]) != row_count:
            raise MalformedStream(
                f"Column {i} has {len(stream.columns[i])} bytes, expected {row_count}"
            )


def decode(stream: StreamRecord) -> bytes:
    """
    Reconstruct original data from the valid columns of a stream.

    Args:
        stream: Encoded columns with validity flags

    Returns:
        The original bytes, truncated to stream.original_length

    Raises:
        MalformedStream: If column counts or lengths disagree with the encoding
        InsufficientShares: If fewer than data_chunks columns are valid
    """
    _check_stream(stream)
    encoding = stream.encoding
    k = encoding.data_chunks

    available = stream.valid_indices
    if len(available) < k:
        raise InsufficientShares(
            f"Need {k} valid columns, only {len(available)} available",
            available=len(available),
            required=k,
        )

    selected = available[:k]
    chosen = [stream.columns[i] for i in selected]
    row_count = stream.row_count

    if selected == list(range(k)):
        # All data columns present, no arithmetic needed
        data_columns = chosen
        logger.debug("Decoding from data columns directly")
    else:
        recovery = generator_matrix(encoding).select_rows(selected).invert()
        data_columns = [_combine(recovery.row(c), chosen, row_count) for c in range(k)]
        logger.debug("Decoding from columns %s", selected)

    out = bytearray(row_count * k)
    for c, column in enumerate(data_columns):
        out[c::k] = column
    return bytes(out[:stream.original_length])


def analyze_reconstruction(
    available_indices: Sequence[int],
    encoding: EncodingParameters
) -> dict:
    """
    Analyze whether reconstruction is feasible without actually decoding.

    Args:
        available_indices: Indices of columns that are present
        encoding: Encoding the columns were produced with

    Returns:
        Analysis dict with feasibility and details
    """
    k = encoding.data_chunks
    n = encoding.total
    available = sorted(set(i for i in available_indices if 0 <= i < n))
    available_count = len(available)
    missing_indices = [i for i in range(n) if i not in available]

    return {
        "feasible": available_count >= k,
        "available_columns": available_count,
        "required_columns": k,
        "total_columns": n,
        "missing_columns": missing_indices,
        "missing_count": len(missing_indices),
        "redundancy_margin": available_count - k,
        "fast_path": set(range(k)).issubset(available),  # no matrix inversion needed
        "message": (
            "Reconstruction possible" if available_count >= k
            else f"Need {k - available_count} more column(s)"
        )
    }
