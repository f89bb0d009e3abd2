# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import unittest

import mock

from time_to_interactive import config as config_module
from time_to_interactive import responsiveness
from time_to_interactive import window_search


def _FakeModel(end_of_trace_time):
  model = mock.Mock()
  model.bounds.max = end_of_trace_time
  return model


def _FakeEstimator(*latencies):
  return mock.Mock(side_effect=[
      [responsiveness.RiskPercentile(0.9, latency)] for latency in latencies])


class SearchForResponsiveWindowTest(unittest.TestCase):

  def setUp(self):
    self.config = config_module.ScoringConfig()
    self.trace_events = [{'name': 'fake'}]

  def _Search(self, ready_time, model, estimator, config=None, clock=None):
    kwargs = {}
    if clock is not None:
      kwargs['clock'] = clock
    return window_search.SearchForResponsiveWindow(
        ready_time, model, self.trace_events, estimator,
        config or self.config, **kwargs)

  def testFirstWindowIsResponsive(self):
    model = _FakeModel(10000)
    estimator = _FakeEstimator(40)
    result = self._Search(2100, model, estimator)

    self.assertTrue(result.found)
    self.assertEqual(2100, result.interactive_time)
    self.assertEqual(
        [window_search.LatencyObservation(2100, 40)],
        list(result.latency_observations))
    self.assertEqual(40, result.expected_latency)
    estimator.assert_called_once_with(
        model, self.trace_events, 2100, 2600, [0.9])

  def testStepsUntilLatencyDrops(self):
    estimator = _FakeEstimator(80, 60, 55, 49.75)
    result = self._Search(2100, _FakeModel(10000), estimator)

    self.assertTrue(result.found)
    self.assertEqual(2250, result.interactive_time)
    starts = [o.window_start_time for o in result.latency_observations]
    self.assertEqual([2100, 2150, 2200, 2250], starts)
    for previous, current in zip(starts, starts[1:]):
      self.assertEqual(50, current - previous)
    # Fractional latencies are kept as they are.
    self.assertEqual(49.75, result.expected_latency)

  def testThresholdIsStrict(self):
    result = self._Search(0, _FakeModel(10000), _FakeEstimator(50, 49.99))
    self.assertEqual(50, result.interactive_time)
    self.assertEqual(2, len(result.latency_observations))

  def testExhaustedOnFirstWindow(self):
    estimator = _FakeEstimator()
    result = self._Search(2100, _FakeModel(2599), estimator)

    self.assertFalse(result.found)
    self.assertFalse(result.timed_out)
    self.assertIsNone(result.interactive_time)
    self.assertIsNone(result.expected_latency)
    self.assertEqual((), result.latency_observations)
    self.assertFalse(estimator.called)

  def testWindowEndingAtTraceEndIsSearched(self):
    result = self._Search(2100, _FakeModel(2600), _FakeEstimator(10))
    self.assertTrue(result.found)

  def testExhaustedKeepsObservations(self):
    # Windows at 2100, 2150 and 2200 fit before 2700.
    estimator = _FakeEstimator(300, 200, 100)
    result = self._Search(2100, _FakeModel(2700), estimator)

    self.assertFalse(result.found)
    self.assertEqual([2100, 2150, 2200],
                     [o.window_start_time for o in result.latency_observations])
    self.assertTrue(all(o.estimated_latency >= 50
                        for o in result.latency_observations))
    self.assertEqual(100, result.expected_latency)

  def testUsesConfiguredWindow(self):
    config = config_module.ScoringConfig(
        window_duration=1000, window_step=100, latency_percentile=0.5,
        latency_threshold=20)
    estimator = _FakeEstimator(30, 10)
    result = self._Search(0, _FakeModel(10000), estimator, config=config)

    self.assertEqual(100, result.interactive_time)
    estimator.assert_called_with(mock.ANY, mock.ANY, 100, 1100, [0.5])

  def testTimesOut(self):
    config = config_module.ScoringConfig(search_timeout=1)
    clock = mock.Mock(side_effect=[0, 0.5, 2.0])
    estimator = _FakeEstimator(100, 10)
    result = self._Search(0, _FakeModel(10000), estimator, config=config,
                          clock=clock)

    self.assertFalse(result.found)
    self.assertTrue(result.timed_out)
    self.assertEqual(1, len(result.latency_observations))
    self.assertEqual(1, estimator.call_count)
