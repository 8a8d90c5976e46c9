"""
Solver configuration

Numeric tolerances for the ellipsoid fit. Defaults come from
utils/constants.py.
"""

from dataclasses import dataclass
from typing import Optional

from ..utils.constants import (
    MIN_FIT_SAMPLES,
    DEFAULT_MAX_CONDITION_NUMBER,
    DEFAULT_TOLERANCE_SCALE,
    DEFAULT_COPLANARITY_TOLERANCE,
    MACHINE_EPSILON,
)


@dataclass(frozen=True)
class SolverConfig:
    """
    Tolerances used by solve()

    Attributes:
        max_condition_number: largest accepted condition number of the
            least-squares system; None disables the check (a system past
            singular_condition_limit() is still rejected)
        eigenvalue_tolerance: absolute threshold below which a shape matrix
            eigenvalue counts as zero or negative; None derives it from
            tolerance_scale and the matrix norm
        tolerance_scale: multiple of machine epsilon used for derived
            tolerances
        coplanarity_tolerance: smallest accepted ratio between the smallest
            and largest singular value of the centered samples
        min_samples: minimum number of distinct samples
    """
    max_condition_number: Optional[float] = DEFAULT_MAX_CONDITION_NUMBER
    eigenvalue_tolerance: Optional[float] = None
    tolerance_scale: float = DEFAULT_TOLERANCE_SCALE
    coplanarity_tolerance: float = DEFAULT_COPLANARITY_TOLERANCE
    min_samples: int = MIN_FIT_SAMPLES

    def __post_init__(self):
        if self.max_condition_number is not None and self.max_condition_number < 1.0:
            raise ValueError("max_condition_number must be >= 1")
        if self.eigenvalue_tolerance is not None and self.eigenvalue_tolerance < 0.0:
            raise ValueError("eigenvalue_tolerance must be >= 0")
        if self.tolerance_scale <= 0.0:
            raise ValueError("tolerance_scale must be > 0")
        if not 0.0 <= self.coplanarity_tolerance < 1.0:
            raise ValueError("coplanarity_tolerance must be in [0, 1)")
        if self.min_samples < MIN_FIT_SAMPLES:
            raise ValueError(f"min_samples must be at least {MIN_FIT_SAMPLES}")

    def eigenvalue_threshold(self, matrix_norm):
        """Absolute eigenvalue threshold for a shape matrix of the given 2-norm"""
        if self.eigenvalue_tolerance is not None:
            return self.eigenvalue_tolerance
        return self.tolerance_scale * MACHINE_EPSILON * matrix_norm

    def singular_condition_limit(self):
        """Condition number past which the least-squares system counts as singular"""
        return 1.0 / (self.tolerance_scale * MACHINE_EPSILON)
