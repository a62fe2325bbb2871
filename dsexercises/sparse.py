"""Sparse matrices stored as row-major lists of non-zero terms."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import groupby


@dataclass(frozen=True, order=True)
class Term:
    """One non-zero entry of a sparse matrix, addressed by 0-based row and column."""

    row: int
    col: int
    value: int


@dataclass(frozen=True)
class SparseMatrix:
    """A ``rows`` by ``cols`` matrix holding only its non-zero terms.

    Terms are kept in row-major order; zero values are dropped and a
    position may appear only once.
    """

    rows: int
    cols: int
    terms: tuple[Term, ...] = field(default=())

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        normalised = []
        seen: set[tuple[int, int]] = set()
        for term in self.terms:
            if not isinstance(term, Term):
                term = Term(*term)
            if not (0 <= term.row < self.rows and 0 <= term.col < self.cols):
                raise ValueError(
                    f"term at ({term.row}, {term.col}) is outside "
                    f"a {self.rows}x{self.cols} matrix"
                )
            key = (term.row, term.col)
            if key in seen:
                raise ValueError(f"duplicate term at {key}")
            seen.add(key)
            if term.value:
                normalised.append(term)
        object.__setattr__(self, "terms", tuple(sorted(normalised)))

    @classmethod
    def from_dense(cls, rows: Sequence[Sequence[int]]) -> SparseMatrix:
        """Collect the non-zero entries of a rectangular list of rows."""
        grid = [list(row) for row in rows]
        width = len(grid[0]) if grid else 0
        if any(len(row) != width for row in grid):
            raise ValueError("rows must all have the same length")
        terms = [
            Term(r, c, value)
            for r, row in enumerate(grid)
            for c, value in enumerate(row)
            if value
        ]
        return cls(len(grid), width, tuple(terms))

    def to_dense(self) -> list[list[int]]:
        """Return the matrix as a list of rows, zeros filled in."""
        grid = [[0] * self.cols for _ in range(self.rows)]
        for term in self.terms:
            grid[term.row][term.col] = term.value
        return grid

    def _combine(self, other: SparseMatrix, sign: int) -> SparseMatrix:
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError(
                f"cannot combine a {self.rows}x{self.cols} matrix "
                f"with a {other.rows}x{other.cols} matrix"
            )
        values = {(t.row, t.col): t.value for t in self.terms}
        for term in other.terms:
            key = (term.row, term.col)
            values[key] = values.get(key, 0) + sign * term.value
        return SparseMatrix(
            self.rows, self.cols, tuple(Term(r, c, v) for (r, c), v in values.items())
        )

    def add(self, other: SparseMatrix) -> SparseMatrix:
        """Return the element-wise sum of two matrices of equal shape."""
        return self._combine(other, 1)

    def subtract(self, other: SparseMatrix) -> SparseMatrix:
        """Return the element-wise difference of two matrices of equal shape."""
        return self._combine(other, -1)

    def transpose(self) -> SparseMatrix:
        """Return the matrix with rows and columns exchanged."""
        return SparseMatrix(
            self.cols, self.rows, tuple(Term(t.col, t.row, t.value) for t in self.terms)
        )

    def multiply(self, other: SparseMatrix) -> SparseMatrix:
        """Return the matrix product; only non-zero sums are stored."""
        if self.cols != other.rows:
            raise ValueError("Incompatible matrices")
        columns: dict[int, dict[int, int]] = defaultdict(dict)
        for term in other.transpose().terms:
            columns[term.row][term.col] = term.value
        ordered_columns = sorted(columns.items())
        product: list[Term] = []
        for row, group in groupby(self.terms, key=lambda t: t.row):
            row_values = {t.col: t.value for t in group}
            for col, col_values in ordered_columns:
                total = sum(
                    value * col_values.get(k, 0) for k, value in row_values.items()
                )
                if total:
                    product.append(Term(row, col, total))
        return SparseMatrix(self.rows, other.cols, tuple(product))

    def __iter__(self) -> Iterable[Term]:
        return iter(self.terms)