# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import math
import unittest

from time_to_interactive import statistics


class LogNormalDistributionTest(unittest.TestCase):

  def setUp(self):
    self.distribution = (
        statistics.LogNormalDistribution.FromMedianAndDiminishingReturns(
            5000, 1700))

  def testParameters(self):
    self.assertAlmostEqual(math.log(5000), self.distribution.location)
    self.assertAlmostEqual(0.5696, self.distribution.shape, places=3)
    self.assertAlmostEqual(5000, self.distribution.median)

  def testMedianIsHalfway(self):
    self.assertAlmostEqual(0.5, self.distribution.ComputePercentile(5000))
    self.assertAlmostEqual(
        0.5, self.distribution.ComputeComplementaryPercentile(5000))

  def testComplementaryPercentileIsNonIncreasing(self):
    values = [self.distribution.ComputeComplementaryPercentile(x)
              for x in range(0, 30000, 250)]
    for previous, current in zip(values, values[1:]):
      self.assertLessEqual(current, previous)
    self.assertTrue(all(0 <= v <= 1 for v in values))

  def testNonPositiveValues(self):
    self.assertEqual(0, self.distribution.ComputePercentile(0))
    self.assertEqual(1, self.distribution.ComputeComplementaryPercentile(0))
    self.assertEqual(1, self.distribution.ComputeComplementaryPercentile(-10))

  def testPercentilesAreComplementary(self):
    for x in (100, 1700, 4000, 12000):
      self.assertAlmostEqual(
          1, self.distribution.ComputePercentile(x) +
          self.distribution.ComputeComplementaryPercentile(x))

  def testInvalidParameters(self):
    with self.assertRaises(ValueError):
      statistics.LogNormalDistribution.FromMedianAndDiminishingReturns(0, 1700)
    with self.assertRaises(ValueError):
      statistics.LogNormalDistribution.FromMedianAndDiminishingReturns(
          5000, 10000)


class DistributionTest(unittest.TestCase):

  def testComplementaryPercentileDerivesFromPercentile(self):
    class FixedDistribution(statistics.Distribution):
      def ComputePercentile(self, x):
        return 0.25

    self.assertEqual(0.75,
                     FixedDistribution().ComputeComplementaryPercentile(42))

  def testPercentileIsAbstract(self):
    with self.assertRaises(NotImplementedError):
      statistics.Distribution().ComputePercentile(1)
