"""Base classes holding the state of a fitting procedure."""

from __future__ import annotations

from typing import Any

import numpy as np

from ponca.enums import DiffType, FitResult
from ponca.weight_func import DistWeightFunc


class PrimitiveBase:
    """Fitting state shared by every primitive.

    Subclasses update the neighbour count and the weight sum while samples
    are added; ``finalize`` then decides whether the fit can be used.
    """

    def __init__(self, dim: int = 3) -> None:
        if dim < 1:
            raise ValueError("dimension must be positive")
        self._dim = int(dim)
        self._state = FitResult.UNDEFINED
        self._nb_neighbors = 0
        self._sum_w = 0.0
        self._w: DistWeightFunc | None = None

    @property
    def dim(self) -> int:
        return self._dim

    @property
    def nb_neighbors(self) -> int:
        return self._nb_neighbors

    @property
    def sum_w(self) -> float:
        return self._sum_w

    @property
    def weight_func(self) -> DistWeightFunc | None:
        return self._w

    def set_weight_func(self, w: DistWeightFunc) -> None:
        """Use ``w`` to weight the neighbours."""
        self._w = w

    def init(self, basis_center=None) -> None:
        """Reset the fit and center the weight function on ``basis_center``."""
        self._state = FitResult.UNDEFINED
        self._nb_neighbors = 0
        self._sum_w = 0.0
        if self._w is not None:
            center = np.zeros(self._dim) if basis_center is None else basis_center
            self._w.init(center)

    def _basis_center(self) -> np.ndarray:
        center = None if self._w is None else self._w.basis_center()
        return np.zeros(self._dim) if center is None else center

    def _to_local(self, q) -> np.ndarray:
        if self._w is None:
            return np.asarray(q, dtype=float).copy()
        return self._w.convert_to_local_basis(q)

    def is_ready(self) -> bool:
        """True once finalized with a stable or unstable result."""
        return self._state in (FitResult.STABLE, FitResult.UNSTABLE)

    def is_stable(self) -> bool:
        return self._state == FitResult.STABLE

    def current_state(self) -> FitResult:
        return self._state

    def add_local_neighbor(self, w: float, local_q, attributes: Any) -> bool:
        """Accept a neighbour expressed in the local basis."""
        return True

    def finalize(self) -> FitResult:
        """Close the fit; at least one neighbour with non-zero weight is needed."""
        if self._sum_w == 0.0 or self._nb_neighbors < 1:
            self.init(self._basis_center())
            self._state = FitResult.UNDEFINED
            return self._state
        self._state = FitResult.STABLE
        return self._state


class PrimitiveDer(PrimitiveBase):
    """Fitting state that also accumulates weight derivatives.

    Derivatives are taken in scale and/or space according to ``diff_type``.
    When scale is differentiated, its derivative is stored at index 0 and
    the space derivatives follow.
    """

    def __init__(self, dim: int = 3, diff_type: DiffType = DiffType.FIT_SCALE_SPACE_DER) -> None:
        super().__init__(dim)
        self._diff_type = DiffType(diff_type)
        self._d_sum_w = np.zeros(self.der_dimension())

    @property
    def diff_type(self) -> DiffType:
        return self._diff_type

    @property
    def d_sum_w(self) -> np.ndarray:
        """Sum of the weight derivatives."""
        return self._d_sum_w.copy()

    def init(self, basis_center=None) -> None:
        super().init(basis_center)
        self._d_sum_w = np.zeros(self.der_dimension())

    def add_local_neighbor(self, w: float, local_q, attributes: Any, dw: np.ndarray | None = None) -> bool:
        """Accept a neighbour and compute its weight derivatives.

        ``attributes.pos`` gives the neighbour position. The derivatives are
        written into ``dw`` when it is given, and added to ``d_sum_w``.
        """
        if not super().add_local_neighbor(w, local_q, attributes):
            return False
        if self._w is None:
            raise RuntimeError("no weight function set")
        if dw is None:
            dw = np.zeros(self.der_dimension())
        pos = np.asarray(attributes.pos, dtype=float)
        space_id = 1 if self.is_scale_der() else 0
        if self.is_scale_der():
            dw[0] = self._w.scaledw(pos, attributes)
        if self.is_space_der():
            dw[space_id : space_id + self._dim] = -self._w.spacedw(pos, attributes)
        self._d_sum_w += dw
        return True

    def is_scale_der(self) -> bool:
        return bool(self._diff_type & DiffType.FIT_SCALE_DER)

    def is_space_der(self) -> bool:
        return bool(self._diff_type & DiffType.FIT_SPACE_DER)

    def der_dimension(self) -> int:
        """Number of differentiated variables."""
        return (1 if self.is_scale_der() else 0) + (self._dim if self.is_space_der() else 0)