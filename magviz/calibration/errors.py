"""
Calibration errors

Every error derives from ValueError so callers that guard a fit with
``except ValueError`` keep working.
"""


class CalibrationError(ValueError):
    """Base class for errors raised by the calibration core"""


class DegenerateFitError(CalibrationError):
    """
    Sample geometry does not determine an ellipsoid

    The ``check`` attribute names the test that failed so the user knows
    what kind of data to collect next.
    """

    INSUFFICIENT_SAMPLES = "insufficient_samples"
    COPLANAR = "coplanar"
    SINGULAR_SHAPE = "singular_shape"
    NON_POSITIVE_RADIUS = "non_positive_radius"

    def __init__(self, message, check):
        super().__init__(message)
        self.check = check


class NumericalInstabilityError(CalibrationError):
    """
    Least-squares system is too ill-conditioned to trust

    Warning grade: the caller may re-solve with the condition check
    disabled and accept a result of reduced confidence.
    """

    def __init__(self, condition_number, threshold):
        if threshold is None:
            message = f"least-squares system is singular (condition number {condition_number:.3g})"
        else:
            message = (
                f"least-squares condition number {condition_number:.3g} "
                f"exceeds threshold {threshold:.3g}"
            )
        super().__init__(message)
        self.condition_number = condition_number
        self.threshold = threshold


class EmptyInputError(CalibrationError):
    """Operation needs at least one sample"""
