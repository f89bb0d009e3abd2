# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import unittest

import mock

from time_to_interactive import config as config_module
from time_to_interactive import scoring


def _FakeDistribution(complementary_percentile):
  distribution = mock.Mock()
  distribution.ComputeComplementaryPercentile = mock.Mock(
      return_value=complementary_percentile)
  return distribution


class ComputeScoreTest(unittest.TestCase):

  def testCalibrationAnchors(self):
    self.assertGreaterEqual(scoring.ComputeScore(1200), 99)
    self.assertEqual(50, scoring.ComputeScore(5000))
    self.assertLessEqual(scoring.ComputeScore(15000), 3)

  def testTypicalPage(self):
    self.assertAlmostEqual(94, scoring.ComputeScore(2100), delta=1)

  def testScoreIsBoundedIntegerAndNonIncreasing(self):
    scores = [scoring.ComputeScore(t) for t in range(0, 40000, 100)]
    for previous, current in zip(scores, scores[1:]):
      self.assertLessEqual(current, previous)
    for score in scores:
      self.assertIsInstance(score, int)
      self.assertTrue(0 <= score <= 100)
    self.assertEqual(100, scores[0])
    self.assertEqual(0, scoring.ComputeScore(10 ** 9))

  def testClampsDistributionOutput(self):
    self.assertEqual(100, scoring.ComputeScore(
        1000, distribution=_FakeDistribution(1.5)))
    self.assertEqual(0, scoring.ComputeScore(
        1000, distribution=_FakeDistribution(-0.2)))

  def testRoundsHalfUp(self):
    self.assertEqual(13, scoring.ComputeScore(
        1000, distribution=_FakeDistribution(0.125)))

  def testPassesInteractiveTimeToDistribution(self):
    distribution = _FakeDistribution(0.5)
    scoring.ComputeScore(4213.5, distribution=distribution)
    distribution.ComputeComplementaryPercentile.assert_called_once_with(4213.5)

  def testAlternateCalibration(self):
    config = config_module.ScoringConfig(
        scoring_median=10000, scoring_point_of_diminishing_returns=3000)
    self.assertEqual(50, scoring.ComputeScore(10000, config=config))
    self.assertGreater(scoring.ComputeScore(5000, config=config),
                       scoring.ComputeScore(5000))
