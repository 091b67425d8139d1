"""
Unit tests for box layout helpers.
"""
import unittest

import torch

from layers.box import point_form, center_size, split_priors
from layers.functions import PriorBox


class TestBoxForms(unittest.TestCase):
    """Tests for corner / center-size conversion."""

    def test_center_size(self):
        boxes = torch.tensor([[0.2, 0.2, 0.3, 0.4]])
        out = center_size(boxes)
        for got, want in zip(out[0].tolist(), [0.25, 0.3, 0.1, 0.2]):
            self.assertAlmostEqual(got, want, places=6)

    def test_point_form(self):
        boxes = torch.tensor([[0.25, 0.3, 0.1, 0.2]])
        out = point_form(boxes)
        for got, want in zip(out[0].tolist(), [0.2, 0.2, 0.3, 0.4]):
            self.assertAlmostEqual(got, want, places=6)

    def test_prior_centers(self):
        layer = PriorBox({'min_size': [30], 'aspect_ratio': [2]})
        out = layer.forward([torch.empty(1, 1, 2, 2), torch.empty(1, 3, 300, 300)])
        boxes, _ = split_priors(out)
        centers = center_size(boxes)
        # the three priors of a cell share its centre
        self.assertTrue(torch.allclose(centers[:3, :2], torch.full((3, 2), 0.25)))
        self.assertTrue(torch.allclose(point_form(centers), boxes, atol=1e-6))


class TestSplitPriors(unittest.TestCase):
    """Tests for splitting a prior box output into its channels."""

    def test_split(self):
        layer = PriorBox({'min_size': [30], 'variance': [0.1, 0.1, 0.2, 0.2]})
        out = layer.forward([torch.empty(1, 1, 3, 2), torch.empty(1, 3, 300, 300)])
        boxes, variances = split_priors(out)
        self.assertEqual(tuple(boxes.shape), (6, 4))
        self.assertEqual(tuple(variances.shape), (6, 4))
        self.assertEqual(boxes.data_ptr(), out[0, 0].data_ptr())

    def test_bad_shape(self):
        with self.assertRaises(AssertionError):
            split_priors(torch.empty(2, 8))
        with self.assertRaises(AssertionError):
            split_priors(torch.empty(1, 3, 8))


if __name__ == "__main__":
    unittest.main()
