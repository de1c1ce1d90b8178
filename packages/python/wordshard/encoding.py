"""
Reed-Solomon encoding parameters.
"""

from dataclasses import dataclass

from .errors import InvalidEncoding

# Evaluation points are the column indices, which must be distinct field elements.
MAX_TOTAL_CHUNKS = 256


@dataclass(frozen=True)
class EncodingParameters:
    """
    How data is spread across columns.

    data_chunks columns carry the data itself, code_chunks columns carry
    parity. Any data_chunks of the total columns rebuild the data.
    """
    data_chunks: int
    code_chunks: int

    def __post_init__(self):
        if self.data_chunks < 1:
            raise InvalidEncoding(f"data_chunks must be at least 1, got {self.data_chunks}")
        if self.code_chunks < 0:
            raise InvalidEncoding(f"code_chunks must not be negative, got {self.code_chunks}")
        if self.total > MAX_TOTAL_CHUNKS:
            raise InvalidEncoding(
                f"Total chunks {self.total} exceeds GF(256) limit of {MAX_TOTAL_CHUNKS}"
            )

    @property
    def total(self) -> int:
        return self.data_chunks + self.code_chunks

    @classmethod
    def parse(cls, text: str) -> "EncodingParameters":
        """
        Parse the "rs=<data>.<code>" form, e.g. "rs=6.4".

        Raises:
            InvalidEncoding: If the text is not in that form or out of range
        """
        text = text.strip()
        if not text.startswith("rs="):
            raise InvalidEncoding(f'Encodings must start with "rs=", got {text!r}')
        parts = text[3:].split(".")
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            raise InvalidEncoding(
                f"Chunks must be given as rs=m.n with integer m and n, got {text!r}"
            )
        return cls(data_chunks=int(parts[0]), code_chunks=int(parts[1]))

    def __str__(self) -> str:
        return f"rs={self.data_chunks}.{self.code_chunks}"
