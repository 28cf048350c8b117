"""Fitting states and differentiation flags."""

from enum import IntEnum, IntFlag


class FitResult(IntEnum):
    """State of a fitting procedure, as returned by ``finalize``."""

    STABLE = 0
    """The fit is stable and ready to use."""
    UNSTABLE = 1
    """The fit is ready to use but may be unstable (few neighbours)."""
    UNDEFINED = 2
    """The fit is undefined; its results must not be used."""
    NEED_OTHER_PASS = 3
    """The procedure needs another pass over the neighbourhood."""
    CONFLICT_ERROR_FOUND = 4
    """Several fitting steps initialised the primitive: treat as an error."""
    NBMAX = 5
    """Number of states."""


class DiffType(IntFlag):
    """Flags selecting which derivatives are computed; combine with ``|``."""

    FIT_SCALE_DER = 0x01
    FIT_SPACE_DER = 0x02
    FIT_SCALE_SPACE_DER = FIT_SCALE_DER | FIT_SPACE_DER