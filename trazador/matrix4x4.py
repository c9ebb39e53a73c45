"""Square 4x4 matrices of floats."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_SIZE = 4

Rows = tuple[tuple[float, ...], ...]


def _minor(rows: Rows, skip_row: int, skip_col: int) -> Rows:
    return tuple(
        tuple(value for j, value in enumerate(row) if j != skip_col)
        for i, row in enumerate(rows)
        if i != skip_row
    )


def _determinant(rows: Rows) -> float:
    if len(rows) == 1:
        return rows[0][0]
    return sum(
        (-1) ** j * value * _determinant(_minor(rows, 0, j))
        for j, value in enumerate(rows[0])
    )


@dataclass(frozen=True, eq=False)
class Matrix4x4:
    """An immutable 4x4 matrix stored as a tuple of rows."""

    rows: Rows

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
            raise ValueError("a Matrix4x4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def from_rows(
        cls,
        row1: Iterable[float],
        row2: Iterable[float],
        row3: Iterable[float],
        row4: Iterable[float],
    ) -> Matrix4x4:
        """Build a matrix from its four rows."""
        return cls((tuple(row1), tuple(row2), tuple(row3), tuple(row4)))

    def _map(self, other: Matrix4x4, op) -> Matrix4x4:
        return Matrix4x4(
            tuple(
                tuple(op(a, b) for a, b in zip(row_a, row_b))
                for row_a, row_b in zip(self.rows, other.rows)
            )
        )

    def _scaled(self, op) -> Matrix4x4:
        return Matrix4x4(tuple(tuple(op(value) for value in row) for row in self.rows))

    def __add__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self._map(other, lambda a, b: a + b)

    def __sub__(self, other: Matrix4x4) -> Matrix4x4:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self._map(other, lambda a, b: a - b)

    def __mul__(self, other: Matrix4x4 | float) -> Matrix4x4:
        if isinstance(other, Matrix4x4):
            columns = tuple(zip(*other.rows))
            return Matrix4x4(
                tuple(
                    tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                    for row in self.rows
                )
            )
        if isinstance(other, (int, float)):
            return self._scaled(lambda value: value * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Matrix4x4:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self._scaled(lambda value: value * scalar)

    def __truediv__(self, scalar: float) -> Matrix4x4:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return self._scaled(lambda value: value / scalar)

    def __getitem__(self, row: int) -> tuple[float, ...]:
        return self.rows[row]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4x4):
            return NotImplemented
        return self.rows == other.rows

    def __hash__(self) -> int:
        return hash(self.rows)

    def det(self) -> float:
        """Determinant of the matrix."""
        return _determinant(self.rows)

    def adjugate(self) -> Matrix4x4:
        """Matrix of cofactors; ``inverse`` transposes it and divides by the determinant."""
        return Matrix4x4(
            tuple(
                tuple(
                    (-1) ** (i + j) * _determinant(_minor(self.rows, i, j))
                    for j in range(_SIZE)
                )
                for i in range(_SIZE)
            )
        )

    def transpose(self) -> Matrix4x4:
        """Rows and columns swapped."""
        return Matrix4x4(tuple(zip(*self.rows)))

    def inverse(self) -> Matrix4x4:
        """Inverse matrix; raises ValueError when the matrix is singular."""
        determinant = self.det()
        if determinant == 0:
            raise ValueError("matrix is singular and has no inverse")
        return self.adjugate().transpose() / determinant

    def __str__(self) -> str:
        return "".join(
            "( " + "".join(f"{value:g} " for value in row) + ")" for row in self.rows
        )