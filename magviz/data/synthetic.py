"""
Synthetic magnetometer clouds

Generates points on a biased, rotated ellipsoid, the shape a sensor with
hard-iron and soft-iron distortion traces when rotated through all
orientations. Used by the demo mode and the tests.
"""

import numpy as np

from ..calibration.samples import SampleSet, as_vector3


def fibonacci_directions(count):
    """
    Nearly uniform unit vectors on the sphere (Fibonacci lattice)

    Args:
        count: number of directions

    Returns:
        ndarray: (count, 3) unit vectors
    """
    if count < 1:
        raise ValueError("count must be >= 1")

    index = np.arange(count, dtype=np.float64) + 0.5
    z = 1.0 - 2.0 * index / count
    radius = np.sqrt(1.0 - z * z)
    golden_angle = np.pi * (3.0 - np.sqrt(5.0))
    theta = golden_angle * index

    return np.column_stack([radius * np.cos(theta), radius * np.sin(theta), z])


def random_rotation(rng):
    """
    Random proper rotation matrix

    Args:
        rng: numpy Generator

    Returns:
        ndarray: (3, 3) orthonormal matrix with determinant +1
    """
    q, r = np.linalg.qr(rng.normal(size=(3, 3)))
    q = q * np.sign(np.diag(r))
    if np.linalg.det(q) < 0.0:
        q[:, 0] = -q[:, 0]
    return q


def ellipsoid_surface(radii, bias=(0.0, 0.0, 0.0), rotation=None, count=200,
                      radial_noise=0.0, rng=None):
    """
    Sample points on an ellipsoid

    Each point is bias + rotation @ diag(radii) @ (u * (1 + noise)) for a
    unit direction u, so with zero noise every point lies exactly on the
    surface.

    Args:
        radii: three semi-axis lengths
        bias: ellipsoid center
        rotation: (3, 3) rotation of the principal axes, identity if None
        count: number of points
        radial_noise: standard deviation of the relative radial noise
        rng: numpy Generator, needed when radial_noise > 0

    Returns:
        SampleSet
    """
    radii = as_vector3(radii, "radii")
    bias = as_vector3(bias, "bias")
    if np.any(radii <= 0.0):
        raise ValueError("radii must be positive")
    if rotation is None:
        rotation = np.eye(3)

    directions = fibonacci_directions(count)
    if radial_noise > 0.0:
        if rng is None:
            rng = np.random.default_rng()
        directions = directions * (1.0 + rng.normal(0.0, radial_noise, size=(count, 1)))

    points = (directions * radii) @ np.asarray(rotation, dtype=np.float64).T + bias
    return SampleSet(points)
