"""
Unit tests for the sample store

Tests samples.py Sample / SampleSet validation and immutability
"""

import unittest
import numpy as np
from magviz.calibration.samples import Sample, SampleSet, as_vector3


class TestSample(unittest.TestCase):
    """Test single samples"""

    def test_components_are_floats(self):
        """Test that integer components are stored as floats"""
        sample = Sample(1, 2, 3)
        self.assertIsInstance(sample.x, float)
        self.assertEqual((sample.x, sample.y, sample.z), (1.0, 2.0, 3.0))

    def test_sample_is_frozen(self):
        """Test that a sample cannot be modified"""
        sample = Sample(1.0, 2.0, 3.0)
        with self.assertRaises(AttributeError):
            sample.x = 5.0

    def test_as_array(self):
        """Test conversion to numpy"""
        np.testing.assert_array_equal(Sample(1.0, -2.0, 0.5).as_array(), [1.0, -2.0, 0.5])


class TestSampleSet(unittest.TestCase):
    """Test sample set construction and access"""

    def setUp(self):
        """Set up test fixtures"""
        self.rows = [(1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (-1.0, 0.0, 7.5)]
        self.samples = SampleSet(self.rows)

    def test_length_and_points(self):
        """Test that rows become an (N, 3) array"""
        self.assertEqual(len(self.samples), 3)
        self.assertEqual(self.samples.points.shape, (3, 3))
        np.testing.assert_array_equal(self.samples.points, self.rows)

    def test_from_sample_objects(self):
        """Test construction from Sample instances"""
        samples = SampleSet([Sample(*row) for row in self.rows])
        self.assertEqual(samples, self.samples)

    def test_iteration_yields_samples(self):
        """Test iterating over a sample set"""
        items = list(self.samples)
        self.assertEqual(len(items), 3)
        self.assertIsInstance(items[0], Sample)
        self.assertEqual(items[2], Sample(-1.0, 0.0, 7.5))

    def test_indexing(self):
        """Test integer and slice indexing"""
        self.assertEqual(self.samples[1], Sample(4.0, 5.0, 6.0))
        tail = self.samples[1:]
        self.assertIsInstance(tail, SampleSet)
        self.assertEqual(len(tail), 2)

    def test_empty_set(self):
        """Test that an empty sample set is valid"""
        samples = SampleSet()
        self.assertTrue(samples.is_empty)
        self.assertEqual(len(samples), 0)
        self.assertEqual(samples.points.shape, (0, 3))

    def test_rejects_wrong_shape(self):
        """Test that rows without 3 components are rejected"""
        with self.assertRaises(ValueError):
            SampleSet([(1.0, 2.0), (3.0, 4.0)])
        with self.assertRaises(ValueError):
            SampleSet(np.zeros((4, 4)))

    def test_rejects_non_finite(self):
        """Test that NaN and infinity are rejected"""
        with self.assertRaises(ValueError):
            SampleSet([(1.0, np.nan, 3.0)])
        with self.assertRaises(ValueError):
            SampleSet([(1.0, 2.0, np.inf)])

    def test_points_are_read_only(self):
        """Test that the backing array cannot be written"""
        with self.assertRaises(ValueError):
            self.samples.points[0, 0] = 99.0

    def test_source_array_is_copied(self):
        """Test that later changes to the source array do not leak in"""
        source = np.array(self.rows)
        samples = SampleSet(source)
        source[0, 0] = 99.0
        self.assertEqual(samples.points[0, 0], 1.0)

    def test_select_preserves_order(self):
        """Test selecting samples with a mask"""
        selected = self.samples.select([True, False, True])
        np.testing.assert_array_equal(selected.points, [self.rows[0], self.rows[2]])
        # Input unchanged
        self.assertEqual(len(self.samples), 3)

    def test_select_rejects_wrong_mask(self):
        """Test that a mask of the wrong length is rejected"""
        with self.assertRaises(ValueError):
            self.samples.select([True, False])

    def test_equality(self):
        """Test value equality of sample sets"""
        self.assertEqual(SampleSet(self.rows), self.samples)
        self.assertNotEqual(SampleSet(self.rows[:2]), self.samples)


class TestVector3(unittest.TestCase):
    """Test 3-vector conversion"""

    def test_accepts_tuple_and_sample(self):
        """Test accepted vector forms"""
        np.testing.assert_array_equal(as_vector3((1, 2, 3)), [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(as_vector3(Sample(1, 2, 3)), [1.0, 2.0, 3.0])

    def test_rejects_bad_vectors(self):
        """Test rejected vector forms"""
        with self.assertRaises(ValueError):
            as_vector3((1.0, 2.0))
        with self.assertRaises(ValueError):
            as_vector3((1.0, np.nan, 2.0))


if __name__ == '__main__':
    unittest.main()
