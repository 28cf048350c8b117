"""Distance-based weighting functions and their derivatives."""

from __future__ import annotations

from typing import Any, Protocol

import numpy as np


class WeightKernel(Protocol):
    """A 1D kernel defined on [0, 1] with its first two derivatives."""

    def f(self, x: float) -> float: ...

    def df(self, x: float) -> float: ...

    def ddf(self, x: float) -> float: ...


class DistWeightFunc:
    """Weight a sample by its distance to a basis center, scaled by ``t``.

    The weight is ``kernel.f(d / t)`` for ``d <= t`` and zero beyond, where
    ``d`` is the distance between the query and the basis center.
    """

    def __init__(self, kernel: WeightKernel, t: float = 1.0) -> None:
        if t <= 0:
            raise ValueError("evaluation scale must be positive")
        self._kernel = kernel
        self._t = float(t)
        self._p: np.ndarray | None = None

    def init(self, basis_center=None) -> None:
        """Set the basis center (origin when omitted)."""
        self._p = None if basis_center is None else np.asarray(basis_center, dtype=float)

    def basis_center(self) -> np.ndarray | None:
        return None if self._p is None else self._p.copy()

    def evaluation_scale(self) -> float:
        return self._t

    def convert_to_local_basis(self, q) -> np.ndarray:
        """Express ``q`` relative to the basis center."""
        q = np.asarray(q, dtype=float)
        return q.copy() if self._p is None else q - self._p

    def _local(self, q) -> tuple[np.ndarray, float]:
        local = self.convert_to_local_basis(q)
        return local, float(np.linalg.norm(local))

    def w(self, q, attributes: Any = None) -> tuple[float, np.ndarray]:
        """Return the weight of ``q`` and ``q`` in the local basis."""
        local, d = self._local(q)
        weight = self._kernel.f(d / self._t) if d <= self._t else 0.0
        return weight, local

    def spacedw(self, q, attributes: Any = None) -> np.ndarray:
        """First order derivative in space."""
        local, d = self._local(q)
        if d <= self._t and d != 0.0:
            return local / (d * self._t) * self._kernel.df(d / self._t)
        return np.zeros_like(local)

    def spaced2w(self, q, attributes: Any = None) -> np.ndarray:
        """Second order derivative in space."""
        local, d = self._local(q)
        t = self._t
        if d <= t and d != 0.0:
            der = self._kernel.df(d / t)
            result = np.outer(local, local) / d * (self._kernel.ddf(d / t) / t - der / d)
            result[np.diag_indices_from(result)] += der
            return result / (t * d)
        return np.zeros((local.size, local.size))

    def scaledw(self, q, attributes: Any = None) -> float:
        """First order derivative in scale."""
        _, d = self._local(q)
        t = self._t
        return -d * self._kernel.df(d / t) / (t * t) if d <= t else 0.0

    def scaled2w(self, q, attributes: Any = None) -> float:
        """Second order derivative in scale."""
        _, d = self._local(q)
        t = self._t
        if d > t:
            return 0.0
        return 2.0 * d / t**3 * self._kernel.df(d / t) + d * d / t**4 * self._kernel.ddf(d / t)

    def scale_spaced2w(self, q, attributes: Any = None) -> np.ndarray:
        """Cross derivative in scale and space."""
        local, d = self._local(q)
        t = self._t
        if d <= t and d != 0.0:
            return -local / (t * t) * (self._kernel.df(d / t) / d + self._kernel.ddf(d / t) / t)
        return np.zeros_like(local)