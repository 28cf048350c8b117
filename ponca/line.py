"""Parametrized line primitive."""

from __future__ import annotations

import numpy as np

from ponca.primitive import PrimitiveBase

_PRECISION = 1e-12


def _is_approx(a: np.ndarray, b: np.ndarray) -> bool:
    return float(np.linalg.norm(a - b)) <= _PRECISION * min(
        float(np.linalg.norm(a)), float(np.linalg.norm(b))
    )


class Line(PrimitiveBase):
    """Line ``o + t * d`` with origin ``o`` and unit direction ``d``.

    The line is expressed in the local basis of the weight function; its
    scalar field is the squared distance to the line.
    """

    def __init__(self, dim: int = 3) -> None:
        super().__init__(dim)
        self._origin = np.zeros(self._dim)
        self._direction = np.zeros(self._dim)

    def init(self, basis_center=None) -> None:
        """Reset the fit and the line parameters."""
        super().init(basis_center)
        self._origin = np.zeros(self._dim)
        self._direction = np.zeros(self._dim)

    def is_valid(self) -> bool:
        """False straight after ``init``, True once a line has been set."""
        return bool(np.any(self._origin != 0.0) or np.any(self._direction != 0.0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line):
            return NotImplemented
        return _is_approx(self._origin, other._origin) and _is_approx(
            self._direction, other._direction
        )

    __hash__ = None  # type: ignore[assignment]

    def set_line(self, origin, direction) -> None:
        """Set the line; ``direction`` need not be normalized."""
        origin = np.asarray(origin, dtype=float)
        direction = np.asarray(direction, dtype=float)
        if origin.shape != (self._dim,) or direction.shape != (self._dim,):
            raise ValueError(f"expected vectors of dimension {self._dim}")
        norm = float(np.linalg.norm(direction))
        self._origin = origin.copy()
        self._direction = direction / norm if norm > 0.0 else direction.copy()

    def origin(self) -> np.ndarray:
        return self._origin.copy()

    def direction(self) -> np.ndarray:
        return self._direction.copy()

    def _projection(self, p: np.ndarray) -> np.ndarray:
        return self._origin + self._direction.dot(p - self._origin) * self._direction

    def _squared_distance(self, p: np.ndarray) -> float:
        diff = p - self._projection(p)
        return float(diff.dot(diff))

    def potential(self, q=None) -> float:
        """Squared distance from ``q`` (or the basis center) to the line."""
        local = np.zeros(self._dim) if q is None else self._to_local(q)
        return self._squared_distance(local)

    def project(self, q) -> np.ndarray:
        """Orthogonal projection of ``q`` on the line."""
        return self._projection(self._to_local(q)) + self._basis_center()