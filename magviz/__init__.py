"""
MagViz - Magnetometer Calibration
=================================

Recovers the hard-iron bias and soft-iron distortion of a 3-axis
magnetometer from a cloud of raw samples, and corrects the samples onto a
sphere centered at the origin.

Example:
    >>> from magviz import load_samples, calibrate
    >>>
    >>> samples = load_samples("mag_samples.csv")
    >>> report = calibrate(samples, allowed_deviation_factor=2.0)
    >>> report.result.bias, report.result.matrix
"""

from .calibration import (
    Sample,
    SampleSet,
    SolvedResult,
    RadiusStatistics,
    SolverConfig,
    CalibrationError,
    DegenerateFitError,
    NumericalInstabilityError,
    EmptyInputError,
    solve,
    apply_correction,
    compute_radius_statistics,
    filter_by_deviation,
    CalibrationReport,
    calibrate,
)
from .data.loader import SampleFormatError, load_samples, read_samples, save_samples

__version__ = "1.0.0"
__all__ = [
    "Sample",
    "SampleSet",
    "SolvedResult",
    "RadiusStatistics",
    "SolverConfig",
    "CalibrationError",
    "DegenerateFitError",
    "NumericalInstabilityError",
    "EmptyInputError",
    "solve",
    "apply_correction",
    "compute_radius_statistics",
    "filter_by_deviation",
    "CalibrationReport",
    "calibrate",
    "SampleFormatError",
    "load_samples",
    "read_samples",
    "save_samples",
]
