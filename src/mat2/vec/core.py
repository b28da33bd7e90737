from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Iterator, Sequence

import numpy as np

DEFAULT_ATOL = 1e-4


@dataclass(frozen=True)
class Vec2:
    """
    Immutable two-component vector.

    Component 0 is x (right), component 1 is y (up).
    """

    x: float
    y: float

    __array_ufunc__ = None

    @staticmethod
    def from_sequence(values: Sequence[float]) -> "Vec2":
        """
        Build from a two-element sequence or a (2,) array.
        Components are kept as given; array input is unpacked to Python scalars.
        """
        try:
            shape = np.shape(values)
        except ValueError as exc:
            raise ValueError("Vec2 expects exactly two components. Got a ragged sequence") from exc
        if shape != (2,):
            raise ValueError(f"Vec2 expects exactly two components. Got shape {shape}")
        comps = values.tolist() if isinstance(values, np.ndarray) else values
        return Vec2(comps[0], comps[1])

    # named constants
    @classmethod
    def zero(cls) -> "Vec2":
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> "Vec2":
        return cls(1.0, 1.0)

    @classmethod
    def unit_x(cls) -> "Vec2":
        return cls(1.0, 0.0)

    @classmethod
    def unit_y(cls) -> "Vec2":
        return cls(0.0, 1.0)

    @classmethod
    def right(cls) -> "Vec2":
        return cls(1.0, 0.0)

    @classmethod
    def left(cls) -> "Vec2":
        return cls(-1.0, 0.0)

    @classmethod
    def up(cls) -> "Vec2":
        return cls(0.0, 1.0)

    @classmethod
    def down(cls) -> "Vec2":
        return cls(0.0, -1.0)

    @property
    def values(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __getitem__(self, i: int) -> float:
        if i == 0:
            return self.x
        if i == 1:
            return self.y
        raise IndexError(f"Vec2 index out of range: {i}")

    def __len__(self) -> int:
        return 2

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Vec2":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vec2":
        return self.__mul__(scalar)

    def isclose(self, other: "Vec2", atol: float = DEFAULT_ATOL) -> bool:
        """Absolute-tolerance comparison, component by component."""
        return abs(self.x - other[0]) <= atol and abs(self.y - other[1]) <= atol

    def to_numpy(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)
