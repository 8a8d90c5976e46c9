"""
Sample file loading and saving

File format: one sample per line, three real numbers separated by a
delimiter (";" by default). Blank lines and lines starting with "#" are
skipped. Fields after the third are ignored.

Example:
    # x;y;z
    -23.4;45.1;12.7
    -21.2;43.9;15.3
"""

import logging

import numpy as np

from ..calibration.samples import SampleSet
from ..utils.constants import DEFAULT_DELIMITER, COMMENT_PREFIX

logger = logging.getLogger(__name__)


class SampleFormatError(ValueError):
    """Sample data could not be parsed"""


def read_samples(lines, delimiter=DEFAULT_DELIMITER):
    """
    Parse samples from an iterable of text lines

    Args:
        lines: iterable of str (an open text file works)
        delimiter: field separator

    Returns:
        SampleSet

    Raises:
        SampleFormatError: on a malformed line
    """
    rows = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        rows.append(stripped)

    if not rows:
        return SampleSet()

    try:
        data = np.loadtxt(rows, delimiter=delimiter, usecols=(0, 1, 2),
                          comments=None, ndmin=2, dtype=np.float64)
    except (ValueError, IndexError) as e:
        raise SampleFormatError(
            f"expected three {delimiter!r}-separated numbers per line: {e}"
        ) from e

    try:
        return SampleSet(data)
    except ValueError as e:
        raise SampleFormatError(str(e)) from e


def load_samples(path, delimiter=DEFAULT_DELIMITER):
    """
    Load samples from a delimited text file

    Args:
        path: file path
        delimiter: field separator

    Returns:
        SampleSet

    Raises:
        SampleFormatError: on a malformed line
        OSError: if the file cannot be read
    """
    with open(path, "r", encoding="utf-8") as fh:
        samples = read_samples(fh, delimiter)
    logger.debug("Loaded %d samples from %s", len(samples), path)
    return samples


def save_samples(path, samples, delimiter=DEFAULT_DELIMITER, header=None):
    """
    Write samples in the format read_samples() accepts

    Args:
        path: file path
        samples: SampleSet
        delimiter: field separator
        header: optional comment written as the first line
    """
    np.savetxt(path, samples.points, fmt="%.17g", delimiter=delimiter,
               header=header or "", comments=COMMENT_PREFIX + " ")
    logger.debug("Saved %d samples to %s", len(samples), path)
