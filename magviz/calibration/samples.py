"""
Magnetometer sample store

- Sample: one raw (x, y, z) field reading
- SampleSet: ordered, read-only collection of samples
"""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class Sample:
    """One magnetometer reading"""
    x: float
    y: float
    z: float

    def __post_init__(self):
        """Store components as plain floats"""
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    def as_array(self):
        return np.array([self.x, self.y, self.z], dtype=np.float64)


def as_vector3(value, name="vector"):
    """
    Convert a 3-vector (Sample, tuple, list or array) to a float64 array

    Raises:
        ValueError: if value is not three finite numbers
    """
    if isinstance(value, Sample):
        return value.as_array()
    vector = np.array(value, dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got shape {vector.shape}")
    if not np.all(np.isfinite(vector)):
        raise ValueError(f"{name} must be finite, got {vector}")
    return vector


class SampleSet:
    """
    Ordered, immutable collection of samples

    Backed by a read-only (N, 3) float64 array. Operations that select or
    transform samples return a new SampleSet; the input is never modified.
    An empty set is valid.
    """

    __slots__ = ("_points",)

    def __init__(self, points=()):
        """
        Args:
            points: (N, 3) array-like, iterable of Sample, or another SampleSet

        Raises:
            ValueError: on wrong shape or non-finite components
        """
        if isinstance(points, SampleSet):
            array = points.points.copy()
        elif isinstance(points, np.ndarray):
            array = np.array(points, dtype=np.float64)
        else:
            rows = [(p.x, p.y, p.z) if isinstance(p, Sample) else p for p in points]
            array = np.array(rows, dtype=np.float64)

        if array.size == 0:
            array = array.reshape(0, 3)
        if array.ndim != 2 or array.shape[1] != 3:
            raise ValueError(f"samples must have shape (N, 3), got {array.shape}")
        if not np.all(np.isfinite(array)):
            raise ValueError("samples must not contain NaN or infinite components")

        array.flags.writeable = False
        self._points = array

    @property
    def points(self):
        """Read-only (N, 3) array of the samples"""
        return self._points

    @property
    def is_empty(self):
        return self._points.shape[0] == 0

    def select(self, mask):
        """Return the samples where mask is True, preserving order"""
        mask = np.asarray(mask, dtype=bool)
        if mask.shape != (len(self),):
            raise ValueError(f"mask must have shape ({len(self)},), got {mask.shape}")
        return SampleSet(self._points[mask])

    def __len__(self):
        return self._points.shape[0]

    def __iter__(self):
        for x, y, z in self._points:
            yield Sample(x, y, z)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return SampleSet(self._points[index])
        x, y, z = self._points[index]
        return Sample(x, y, z)

    def __eq__(self, other):
        if not isinstance(other, SampleSet):
            return NotImplemented
        return np.array_equal(self._points, other._points)

    __hash__ = None

    def __repr__(self):
        return f"SampleSet({len(self)} samples)"
