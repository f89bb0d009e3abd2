# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import unittest

import mock

from time_to_interactive import responsiveness
from time_to_interactive.timeline import bounds
from time_to_interactive.timeline import model as model_module
from time_to_interactive.timeline import slice as slice_module


def _CreateModel(*tasks):
  """Creates a model whose main thread runs (start, duration) tasks."""
  b = bounds.Bounds()
  b.AddValue(0)
  slices = []
  for start, duration in tasks:
    slices.append(slice_module.Slice('toplevel', 'Task', start, duration))
    b.AddValue(start + duration)
  return model_module.TraceModel(b, (1, 2), slices)


def _Latency(model, start, end, percentile=0.9):
  return responsiveness.EstimateResponseRisk(
      model, None, start, end, [percentile])[0].time


class EstimateResponseRiskTest(unittest.TestCase):

  def testIdleWindowHasBaseLatency(self):
    self.assertEqual(16, _Latency(_CreateModel(), 0, 500))

  def testTaskInsideWindow(self):
    model = _CreateModel((0, 400))
    self.assertAlmostEqual(366, _Latency(model, 0, 500))
    self.assertAlmostEqual(166, _Latency(model, 0, 500, percentile=0.5))

  def testTwoTasks(self):
    # Waits are uniform over [0, 100] and [0, 300]; 450ms of the window wait
    # at most 250ms.
    model = _CreateModel((0, 100), (200, 300))
    self.assertAlmostEqual(266, _Latency(model, 0, 500))

  def testTaskClippedAtWindowStart(self):
    model = _CreateModel((-100, 300))
    self.assertAlmostEqual(166, _Latency(model, 0, 500))

  def testTaskClippedAtWindowEnd(self):
    # Input in [400, 500] waits between 200 and 300ms.
    model = _CreateModel((400, 300))
    self.assertAlmostEqual(266, _Latency(model, 0, 500))

  def testTasksOutsideWindowAreIgnored(self):
    model = _CreateModel((0, 100), (600, 1000))
    self.assertEqual(16, _Latency(model, 100, 600))

  def testResultsFollowRequestedOrder(self):
    model = _CreateModel((0, 400))
    results = responsiveness.EstimateResponseRisk(
        model, None, 0, 500, [0.9, 0.5, 0.1])
    self.assertEqual([0.9, 0.5, 0.1], [r.percentile for r in results])
    self.assertAlmostEqual(366, results[0].time)
    self.assertAlmostEqual(166, results[1].time)
    self.assertEqual(16, results[2].time)

  def testInvalidArguments(self):
    model = _CreateModel()
    with self.assertRaises(ValueError):
      responsiveness.EstimateResponseRisk(model, None, 500, 500, [0.9])
    with self.assertRaises(ValueError):
      responsiveness.EstimateResponseRisk(model, None, 0, 500, [1.5])


class CachingRiskEstimatorTest(unittest.TestCase):

  def testMemoizesPerWindow(self):
    result = [responsiveness.RiskPercentile(0.9, 20)]
    estimator = mock.Mock(return_value=result)
    caching_estimator = responsiveness.CachingRiskEstimator(estimator)
    model = _CreateModel()

    self.assertEqual(result, caching_estimator(model, None, 0, 500, [0.9]))
    self.assertEqual(result, caching_estimator(model, None, 0, 500, [0.9]))
    caching_estimator(model, None, 50, 550, [0.9])

    self.assertEqual(2, estimator.call_count)
    self.assertEqual(1, caching_estimator.hits)

  def testDifferentTraceDropsCache(self):
    estimator = mock.Mock(side_effect=[
        [responsiveness.RiskPercentile(0.9, 20)],
        [responsiveness.RiskPercentile(0.9, 300)]])
    caching_estimator = responsiveness.CachingRiskEstimator(estimator)
    idle_model = _CreateModel()
    busy_model = _CreateModel((0, 400))

    idle = caching_estimator(idle_model, [{'name': 'idle'}], 0, 500, [0.9])
    busy = caching_estimator(busy_model, [{'name': 'busy'}], 0, 500, [0.9])

    self.assertEqual(20, idle[0].time)
    self.assertEqual(300, busy[0].time)
    self.assertEqual(2, estimator.call_count)
    self.assertEqual(0, caching_estimator.hits)
