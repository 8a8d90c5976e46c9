"""
Unit tests for sample file handling

Tests loader.py parsing, loading and saving
"""

import os
import tempfile
import unittest
import numpy as np
from magviz.calibration.samples import SampleSet
from magviz.data.loader import (
    SampleFormatError,
    load_samples,
    read_samples,
    save_samples,
)


class TestReadSamples(unittest.TestCase):
    """Test parsing of sample lines"""

    def test_basic_lines(self):
        """Test semicolon separated readings"""
        samples = read_samples(["-23.4;45.1;12.7\n", "-21.2;43.9;15.3\n"])
        np.testing.assert_array_equal(samples.points, [[-23.4, 45.1, 12.7], [-21.2, 43.9, 15.3]])

    def test_comments_and_blank_lines(self):
        """Test that blank and '#' lines are skipped"""
        lines = [
            "# x;y;z\n",
            "\n",
            "1;2;3\n",
            "   \n",
            "  # indented comment\n",
            "4;5;6\n",
        ]
        samples = read_samples(lines)
        np.testing.assert_array_equal(samples.points, [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])

    def test_extra_fields_ignored(self):
        """Test that fields after the third are ignored"""
        samples = read_samples(["1;2;3;99\n", "4;5;6;100\n"])
        np.testing.assert_array_equal(samples.points, [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])

    def test_custom_delimiter(self):
        """Test a comma separated file"""
        samples = read_samples(["1.5,2.5,3.5\n"], delimiter=",")
        np.testing.assert_array_equal(samples.points, [[1.5, 2.5, 3.5]])

    def test_single_line(self):
        """Test that one reading still gives an (1, 3) set"""
        samples = read_samples(["7;8;9"])
        self.assertEqual(samples.points.shape, (1, 3))

    def test_only_comments(self):
        """Test that a file without readings gives an empty set"""
        samples = read_samples(["# nothing here\n", "\n"])
        self.assertTrue(samples.is_empty)

    def test_malformed_number(self):
        """Test that a non-numeric field is rejected"""
        with self.assertRaises(SampleFormatError):
            read_samples(["1;2;3\n", "1;abc;3\n"])

    def test_too_few_fields(self):
        """Test that a line with two fields is rejected"""
        with self.assertRaises(SampleFormatError):
            read_samples(["1;2;3\n", "4;5\n"])

    def test_non_finite_value(self):
        """Test that NaN readings are rejected"""
        with self.assertRaises(SampleFormatError):
            read_samples(["nan;2;3\n"])

    def test_format_error_is_value_error(self):
        """Test the error hierarchy"""
        self.assertTrue(issubclass(SampleFormatError, ValueError))


class TestLoadSave(unittest.TestCase):
    """Test sample files on disk"""

    def setUp(self):
        """Set up test fixtures"""
        self.tmpdir = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmpdir.name, "samples.csv")

    def tearDown(self):
        """Clean up temporary files"""
        self.tmpdir.cleanup()

    def test_load(self):
        """Test loading a file with a header comment"""
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.write("# raw magnetometer\n10;20;30\n-1.25;0;4e2\n")

        samples = load_samples(self.path)
        np.testing.assert_array_equal(samples.points, [[10.0, 20.0, 30.0], [-1.25, 0.0, 400.0]])

    def test_save_and_load(self):
        """Test that saved samples load back exactly"""
        rng = np.random.default_rng(0)
        samples = SampleSet(rng.normal(scale=100.0, size=(25, 3)))

        save_samples(self.path, samples, header="corrected samples")
        with open(self.path, "r", encoding="utf-8") as fh:
            first_line = fh.readline()
        self.assertEqual(first_line, "# corrected samples\n")

        self.assertEqual(load_samples(self.path), samples)

    def test_save_custom_delimiter(self):
        """Test writing with a different separator"""
        save_samples(self.path, SampleSet([(1.0, 2.0, 3.0)]), delimiter=",")
        with open(self.path, "r", encoding="utf-8") as fh:
            self.assertEqual(fh.read().strip(), "1,2,3")

    def test_missing_file(self):
        """Test that a missing file raises OSError"""
        with self.assertRaises(OSError):
            load_samples(os.path.join(self.tmpdir.name, "missing.csv"))


if __name__ == '__main__':
    unittest.main()
