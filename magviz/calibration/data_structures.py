"""
Calibration result structures

- SolvedResult: hard-iron bias and soft-iron correction matrix
- RadiusStatistics: distance statistics of a sample cloud
"""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True, eq=False)
class SolvedResult:
    """
    Output of the ellipsoid solver

    A raw sample p is corrected with ``matrix @ (p - bias)``; corrected
    samples of a good fit lie on the unit sphere.

    Attributes:
        bias: hard-iron offset, the ellipsoid center, shape (3,)
        matrix: soft-iron correction matrix, shape (3, 3)
    """
    bias: np.ndarray
    matrix: np.ndarray

    def __post_init__(self):
        """Validate shapes and freeze the arrays"""
        bias = np.array(self.bias, dtype=np.float64)
        matrix = np.array(self.matrix, dtype=np.float64)

        if bias.shape != (3,):
            raise ValueError(f"bias must have shape (3,), got {bias.shape}")
        if matrix.shape != (3, 3):
            raise ValueError(f"matrix must have shape (3, 3), got {matrix.shape}")
        if not (np.all(np.isfinite(bias)) and np.all(np.isfinite(matrix))):
            raise ValueError("bias and matrix must be finite")

        bias.flags.writeable = False
        matrix.flags.writeable = False
        object.__setattr__(self, "bias", bias)
        object.__setattr__(self, "matrix", matrix)


@dataclass(frozen=True)
class RadiusStatistics:
    """
    Distances of a sample cloud from a center

    Attributes:
        count: number of samples
        mean: arithmetic mean distance
        max: largest distance
        standard_deviation: sample standard deviation (n - 1 denominator)
    """
    count: int
    mean: float
    max: float
    standard_deviation: float
