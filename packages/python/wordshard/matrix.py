"""
Dense matrices over GF(256).

Used by the erasure coder to build generator matrices and to invert the
rows that survive an erasure.
"""

from typing import Iterable, List, Sequence, Tuple

from . import field
from .errors import DimensionMismatch, Singular


class Matrix:
    """
    Rectangular matrix of field elements.

    Instances are treated as values: operations return new matrices and
    never modify their operands.
    """

    __slots__ = ("_rows", "rows", "cols")

    def __init__(self, rows: Iterable[Sequence[int]]):
        data = [list(r) for r in rows]
        if not data or not data[0]:
            raise DimensionMismatch("Cannot build a matrix with zero rows or columns")
        width = len(data[0])
        for i, r in enumerate(data):
            if len(r) != width:
                raise DimensionMismatch(
                    f"Row {i} has {len(r)} entries, expected {width}"
                )
        self._rows = data
        self.rows = len(data)
        self.cols = width

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        return cls([1 if i == j else 0 for j in range(n)] for i in range(n))

    @classmethod
    def vandermonde(cls, points: Sequence[int], cols: int) -> "Matrix":
        """Row i is [1, p_i, p_i^2, ..., p_i^(cols-1)]."""
        return cls([field.power(p, j) for j in range(cols)] for p in points)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def row(self, i: int) -> List[int]:
        return list(self._rows[i])

    def to_lists(self) -> List[List[int]]:
        return [list(r) for r in self._rows]

    def __getitem__(self, key: Tuple[int, int]) -> int:
        i, j = key
        return self._rows[i][j]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        body = "; ".join(" ".join(str(x) for x in r) for r in self._rows)
        return f"Matrix({self.rows}x{self.cols}: {body})"

    def select_rows(self, indices: Iterable[int]) -> "Matrix":
        return Matrix(self._rows[i] for i in indices)

    def multiply(self, other: "Matrix") -> "Matrix":
        if self.cols != other.rows:
            raise DimensionMismatch(
                f"Cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        other_cols = list(zip(*other._rows))
        mul = field.multiply
        result = []
        for r in self._rows:
            out_row = []
            for c in other_cols:
                acc = 0
                for a, b in zip(r, c):
                    if a and b:
                        acc ^= mul(a, b)
                out_row.append(acc)
            result.append(out_row)
        return Matrix(result)

    __matmul__ = multiply

    def invert(self) -> "Matrix":
        """
        Invert by Gauss-Jordan elimination on [A | I].

        Raises:
            DimensionMismatch: If the matrix is not square
            Singular: If some column has no nonzero pivot left
        """
        n = self.rows
        if n != self.cols:
            raise DimensionMismatch(f"Cannot invert a non-square {self.rows}x{self.cols} matrix")

        work = [r + [1 if i == j else 0 for j in range(n)] for i, r in enumerate(self.to_lists())]

        for col in range(n):
            pivot = next((r for r in range(col, n) if work[r][col] != 0), None)
            if pivot is None:
                raise Singular(f"No pivot in column {col}; matrix is singular")
            if pivot != col:
                work[col], work[pivot] = work[pivot], work[col]

            lead = work[col][col]
            if lead != 1:
                scale = field.inverse(lead)
                work[col] = [field.multiply(x, scale) for x in work[col]]

            pivot_row = work[col]
            for r in range(n):
                factor = work[r][col]
                if r == col or factor == 0:
                    continue
                work[r] = [
                    x ^ field.multiply(p, factor) for x, p in zip(work[r], pivot_row)
                ]

        return Matrix(r[n:] for r in work)
