from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

import numpy as np

from mat2.vec.core import DEFAULT_ATOL, Vec2

Row = tuple[float, float]


def _is_index(i) -> bool:
    return isinstance(i, numbers.Integral) and i in (0, 1)


@dataclass(frozen=True)
class Mat2:
    """
    Immutable 2x2 real matrix, row-major.

    The fields hold the grid::

        [[a, b],
         [c, d]]

    Values are stored verbatim (NaN and infinity included). Every operation
    returns a new instance; equality is exact and element-wise.
    """

    a: float
    b: float
    c: float
    d: float

    # keeps numpy scalars/arrays from broadcasting over us in binary operators
    __array_ufunc__ = None

    @classmethod
    def from_grid(cls, values: Union[Sequence[Sequence[float]], np.ndarray]) -> "Mat2":
        """
        Build from a 2x2 grid (rows outer, columns inner).

        Accepts nested sequences or a (2, 2) array. Entries are kept as given,
        so `Mat2.from_grid([[a, b], [c, d]]) == Mat2(a, b, c, d)`; array input
        is unpacked to Python scalars.
        """
        try:
            shape = np.shape(values)
        except ValueError as exc:
            raise ValueError("Mat2 expects a 2x2 grid. Got a ragged sequence") from exc
        if shape != (2, 2):
            raise ValueError(f"Mat2 expects a 2x2 grid. Got shape {shape}")
        rows = values.tolist() if isinstance(values, np.ndarray) else values
        return cls(rows[0][0], rows[0][1], rows[1][0], rows[1][1])

    @classmethod
    def from_numpy(cls, arr: np.ndarray) -> "Mat2":
        return cls.from_grid(arr)

    # named constants
    @classmethod
    def zero(cls) -> "Mat2":
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def identity(cls) -> "Mat2":
        return cls(1.0, 0.0, 0.0, 1.0)

    @classmethod
    def ones(cls) -> "Mat2":
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def rotation(cls, theta: float) -> "Mat2":
        """Counter-clockwise rotation by theta radians."""
        from mat2.mat.rotation import rotation_matrix

        return rotation_matrix(theta)

    # element access
    @property
    def values(self) -> tuple[Row, Row]:
        return ((self.a, self.b), (self.c, self.d))

    def __getitem__(self, key: Union[int, tuple[int, int]]):
        rows = self.values
        if isinstance(key, tuple):
            if len(key) != 2:
                raise IndexError(f"Mat2 takes one or two indices. Got {key}")
            i, j = key
            if not (_is_index(i) and _is_index(j)):
                raise IndexError(f"Mat2 index out of range: {key}")
            return rows[i][j]
        if not _is_index(key):
            raise IndexError(f"Mat2 row index out of range: {key}")
        return rows[key]

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[Row]:
        return iter(self.values)

    def to_numpy(self) -> np.ndarray:
        """Fresh (2, 2) float array; writing to it never touches the matrix."""
        return np.array(self.values, dtype=float)

    # algebra
    def transpose(self) -> "Mat2":
        """Transposed copy: rows become columns."""
        return Mat2(self.a, self.c, self.b, self.d)

    @property
    def T(self) -> "Mat2":
        return self.transpose()

    def negate(self) -> "Mat2":
        """Copy with every sign flipped."""
        return Mat2(-self.a, -self.b, -self.c, -self.d)

    def add(self, other: "Mat2") -> "Mat2":
        """Element-wise sum (self + other)."""
        return Mat2(self.a + other.a, self.b + other.b, self.c + other.c, self.d + other.d)

    def sub(self, other: "Mat2") -> "Mat2":
        """Difference (self - other), computed as self + (-other)."""
        return self.add(other.negate())

    def times_num(self, num: float) -> "Mat2":
        """Scalar product (num * self)."""
        return Mat2(num * self.a, num * self.b, num * self.c, num * self.d)

    def times_mat(self, other: "Mat2") -> "Mat2":
        """Matrix product (self @ other)."""
        return Mat2(
            self.a * other.a + self.b * other.c,
            self.a * other.b + self.b * other.d,
            self.c * other.a + self.d * other.c,
            self.c * other.b + self.d * other.d,
        )

    def times_vec(self, vec: Union[Vec2, Sequence[float]]) -> Vec2:
        """Matrix-vector product (self @ vec). Accepts any two-component indexable."""
        x, y = vec[0], vec[1]
        return Vec2(self.a * x + self.b * y, self.c * x + self.d * y)

    def trace(self) -> float:
        """Sum of the diagonal."""
        return self.a + self.d

    def determinant(self) -> float:
        return self.a * self.d - self.c * self.b

    def rank(self) -> int:
        """
        Rank in {0, 1, 2}.

        Zero tests are exact, with no tolerance: a singular matrix whose
        entries are tiny but non-zero has rank 1.
        """
        if self.determinant() != 0:
            return 2
        for row in self.values:
            for v in row:
                if v != 0:
                    return 1
        return 0

    def isclose(self, other: Union["Mat2", Sequence[Sequence[float]], np.ndarray], atol: float = DEFAULT_ATOL) -> bool:
        """
        Element-wise absolute-tolerance comparison.
        `other` may be a Mat2 or anything `from_grid` accepts.
        """
        if not isinstance(other, Mat2):
            other = Mat2.from_grid(other)
        return all(abs(x - y) <= atol for x, y in zip(self._flat(), other._flat()))

    def _flat(self) -> tuple[float, float, float, float]:
        return (self.a, self.b, self.c, self.d)

    # operators
    def __neg__(self) -> "Mat2":
        return self.negate()

    def __add__(self, other: "Mat2") -> "Mat2":
        if not isinstance(other, Mat2):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Mat2") -> "Mat2":
        if not isinstance(other, Mat2):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, num: float) -> "Mat2":
        if not isinstance(num, numbers.Real):
            return NotImplemented
        return self.times_num(num)

    def __rmul__(self, num: float) -> "Mat2":
        return self.__mul__(num)

    def __matmul__(self, other: Union["Mat2", Vec2]):
        if isinstance(other, Mat2):
            return self.times_mat(other)
        if isinstance(other, Vec2):
            return self.times_vec(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Mat2([[{self.a!r}, {self.b!r}], [{self.c!r}, {self.d!r}]])"


ZERO = Mat2.zero()
IDENTITY = Mat2.identity()
ONES = Mat2.ones()
