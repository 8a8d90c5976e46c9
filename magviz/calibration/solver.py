"""
Ellipsoid-to-sphere solver

Fits a general quadric to raw magnetometer samples and derives the
hard-iron bias and the soft-iron correction matrix.

Quadric model (9 coefficients, constant normalized to 1):
    a*x^2 + b*y^2 + c*z^2 + 2d*xy + 2e*xz + 2f*yz + 2g*x + 2h*y + 2i*z = 1

In matrix form:
    X^T A X + 2 v^T X = 1
Where:
    A = [a  d  e]      v = [g]
        [d  b  f]          [h]
        [e  f  c]          [i]

Center (hard-iron bias):  B = -A^(-1) v
Recentered constant:      k = 1 + B^T A B
Radii:                    r_i = sqrt(k / lambda_i), lambda_i eigenvalues of A
Correction matrix:        M = R diag(1 / r_i) R^T, R eigenvectors of A
"""

from dataclasses import dataclass
import logging

import numpy as np
import scipy.linalg

from .config import SolverConfig
from .data_structures import SolvedResult
from .errors import DegenerateFitError, NumericalInstabilityError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuadricCoefficients:
    """Least-squares coefficients of the quadric surface"""
    a: float
    b: float
    c: float
    d: float
    e: float
    f: float
    g: float
    h: float
    i: float

    def shape_matrix(self):
        """Symmetric 3x3 matrix of the quadratic terms"""
        return np.array([
            [self.a, self.d, self.e],
            [self.d, self.b, self.f],
            [self.e, self.f, self.c],
        ])

    def translation(self):
        """Vector of the linear terms"""
        return np.array([self.g, self.h, self.i])


def design_matrix(points):
    """
    Build the least-squares design matrix

    Each row is [x^2, y^2, z^2, 2xy, 2xz, 2yz, 2x, 2y, 2z].

    Args:
        points: (N, 3) array

    Returns:
        ndarray: (N, 9) design matrix
    """
    x = points[:, 0]
    y = points[:, 1]
    z = points[:, 2]

    return np.column_stack([
        x * x,
        y * y,
        z * z,
        2.0 * x * y,
        2.0 * x * z,
        2.0 * y * z,
        2.0 * x,
        2.0 * y,
        2.0 * z,
    ])


def check_sample_geometry(points, config):
    """
    Reject sample clouds that cannot determine an ellipsoid

    Raises:
        DegenerateFitError: too few distinct samples, or samples that are
            coincident, collinear or coplanar
    """
    distinct = np.unique(points, axis=0).shape[0] if points.shape[0] else 0
    if distinct < config.min_samples:
        raise DegenerateFitError(
            f"need at least {config.min_samples} distinct samples, got {distinct}",
            DegenerateFitError.INSUFFICIENT_SAMPLES,
        )

    # Spread of the cloud along its principal directions
    singular_values = scipy.linalg.svdvals(points - points.mean(axis=0))
    ratio = singular_values[-1] / singular_values[0]
    if ratio <= config.coplanarity_tolerance:
        raise DegenerateFitError(
            f"samples are coplanar (singular value ratio {ratio:.3g}); "
            "rotate the sensor through more orientations",
            DegenerateFitError.COPLANAR,
        )


def fit_quadric(points, config):
    """
    Least-squares quadric fit by QR decomposition

    Args:
        points: (N, 3) array, ideally centered and scaled to unit size
        config: SolverConfig

    Returns:
        QuadricCoefficients

    Raises:
        NumericalInstabilityError: if the system is numerically singular,
            whatever the configured threshold, or its condition number
            exceeds config.max_condition_number
    """
    design = design_matrix(points)
    q, r = scipy.linalg.qr(design, mode="economic")

    with np.errstate(divide="ignore", invalid="ignore"):
        condition = float(np.linalg.cond(r))
    logger.debug("Quadric fit over %d samples, condition number %.3g",
                 points.shape[0], condition)

    if not np.isfinite(condition) or condition > config.singular_condition_limit():
        raise NumericalInstabilityError(condition, None)
    if config.max_condition_number is not None and condition > config.max_condition_number:
        raise NumericalInstabilityError(condition, config.max_condition_number)

    coefficients = scipy.linalg.solve_triangular(r, q.T @ np.ones(points.shape[0]))
    return QuadricCoefficients(*coefficients)


def ellipsoid_transform(coefficients, config):
    """
    Derive center and correction matrix from quadric coefficients

    Args:
        coefficients: QuadricCoefficients
        config: SolverConfig

    Returns:
        tuple: (center (3,), correction matrix (3, 3), radii (3,))

    Raises:
        DegenerateFitError: if the shape matrix is singular or the quadric
            is not an ellipsoid
    """
    shape = coefficients.shape_matrix()
    translation = coefficients.translation()

    eigenvalues, rotation = scipy.linalg.eigh(shape)
    tolerance = config.eigenvalue_threshold(np.linalg.norm(shape, 2))

    if np.min(np.abs(eigenvalues)) <= tolerance:
        raise DegenerateFitError(
            f"shape matrix is singular (eigenvalues {eigenvalues})",
            DegenerateFitError.SINGULAR_SHAPE,
        )

    center = -scipy.linalg.solve(shape, translation, assume_a="sym")
    constant = 1.0 + center @ shape @ center

    # k / lambda_i > 0 for every axis, whatever the overall sign
    signed = eigenvalues * np.sign(constant)
    if constant == 0.0 or np.any(signed <= tolerance):
        raise DegenerateFitError(
            f"fitted quadric is not an ellipsoid (eigenvalues {eigenvalues}, "
            f"constant {constant:.3g})",
            DegenerateFitError.NON_POSITIVE_RADIUS,
        )

    radii = np.sqrt(constant / eigenvalues)
    matrix = rotation @ np.diag(1.0 / radii) @ rotation.T
    return center, matrix, radii


def solve(samples, config=None):
    """
    Solve the ellipsoid-to-sphere mapping for a sample set

    The samples are translated by their centroid and scaled by their RMS
    distance from it before fitting, which keeps the "= 1" normalization
    well posed and the condition number independent of sensor units. The
    solution is mapped back exactly:
        bias = centroid + scale * center
        matrix = matrix' / scale

    Args:
        samples: SampleSet of raw readings
        config: SolverConfig (defaults if None)

    Returns:
        SolvedResult: bias and correction matrix

    Raises:
        DegenerateFitError: insufficient or degenerate sample geometry
        NumericalInstabilityError: ill-conditioned least-squares system
    """
    if config is None:
        config = SolverConfig()

    points = samples.points
    check_sample_geometry(points, config)

    centroid = points.mean(axis=0)
    centered = points - centroid
    scale = float(np.sqrt(np.mean(np.sum(centered * centered, axis=1))))
    normalized = centered / scale

    coefficients = fit_quadric(normalized, config)
    center, matrix, radii = ellipsoid_transform(coefficients, config)

    bias = centroid + scale * center
    logger.debug("Solved bias %s, radii %s", bias, radii * scale)

    return SolvedResult(bias=bias, matrix=matrix / scale)
