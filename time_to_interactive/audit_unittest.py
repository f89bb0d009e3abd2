# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import unittest

import mock

from time_to_interactive import artifacts as artifacts_module
from time_to_interactive import audit
from time_to_interactive import config as config_module
from time_to_interactive import paint_timing
from time_to_interactive import responsiveness
from time_to_interactive import visual_progress


def _PaintResult(first_meaningful_paint=2000, navigation_start=1000):
  return paint_timing.MeaningfulPaintResult(
      first_meaningful_paint,
      timings=paint_timing.PaintTiming(first_meaningful_paint,
                                       navigation_start))


def _FakeModelBuilder(end_of_trace_time):
  model = mock.Mock()
  model.bounds.max = end_of_trace_time
  return mock.Mock(return_value=model)


def _FakeEstimator(*latencies):
  return mock.Mock(side_effect=[
      [responsiveness.RiskPercentile(0.9, latency)] for latency in latencies])


def _Artifacts(frames=None):
  if frames is None:
    # 85% visually complete 2100ms after navigation start.
    frames = [visual_progress.SpeedlineFrame(50, 2500),
              visual_progress.SpeedlineFrame(86, 3100)]
  return artifacts_module.Artifacts(trace_events=[{'name': 'fake'}],
                                    speedline_frames=frames)


class TimeToInteractiveAuditTest(unittest.TestCase):

  def _Audit(self, artifacts=None, paint_result=None, model_builder=None,
             estimator=None, **kwargs):
    self.meaningful_paint = mock.Mock(
        return_value=paint_result or _PaintResult())
    self.model_builder = model_builder or _FakeModelBuilder(10000)
    self.estimator = estimator or _FakeEstimator(40)
    tti_audit = audit.TimeToInteractiveAudit(
        meaningful_paint=self.meaningful_paint,
        model_builder=self.model_builder,
        risk_estimator=self.estimator, **kwargs)
    return tti_audit.Audit(artifacts or _Artifacts())

  def testResponsiveAsSoonAsReady(self):
    result = self._Audit()

    self.assertTrue(result.succeeded)
    self.assertIsNone(result.failure_type)
    self.assertAlmostEqual(94, result.score, delta=1)
    self.assertEqual('2100.0ms', result.raw_value)
    self.assertEqual({
        'timings': {
            'firstMeaningfulPaint': 2000,
            'visuallyReady': 2100,
            'mainThreadAvailable': 2100,
        },
        'expectedLatencyAtInteractive': 40,
        'latencyObservations': [
            {'windowStartTime': 2100, 'estimatedLatency': 40}],
    }, result.extended_info)
    self.model_builder.assert_called_once_with([{'name': 'fake'}],
                                               time_origin=1000)

  def testBusyMainThreadDelaysInteractive(self):
    result = self._Audit(estimator=_FakeEstimator(300, 120.5, 60, 45))

    self.assertEqual('2250.0ms', result.raw_value)
    observations = result.extended_info['latencyObservations']
    self.assertEqual([2100, 2150, 2200, 2250],
                     [o['windowStartTime'] for o in observations])
    self.assertEqual(120.5, observations[1]['estimatedLatency'])
    self.assertEqual(45, result.extended_info['expectedLatencyAtInteractive'])

  def testUpstreamFailureShortCircuits(self):
    result = self._Audit(
        paint_result=paint_timing.MeaningfulPaintResult.Failure(
            'No firstMeaningfulPaint event found in trace'))

    self.assertFalse(result.succeeded)
    self.assertEqual(-1, result.score)
    self.assertEqual(-1, result.raw_value)
    self.assertEqual('No firstMeaningfulPaint event found in trace',
                     result.debug_string)
    self.assertEqual('UpstreamMetricUnavailable', result.failure_type)
    self.assertFalse(self.model_builder.called)
    self.assertFalse(self.estimator.called)

  def testUpstreamExceptionIsAFailure(self):
    tti_audit = audit.TimeToInteractiveAudit(
        meaningful_paint=mock.Mock(side_effect=RuntimeError('trace broken')))
    result = tti_audit.Audit(_Artifacts())
    self.assertEqual('UpstreamMetricUnavailable', result.failure_type)
    self.assertEqual('trace broken', result.debug_string)

  def testNeverVisuallyComplete(self):
    result = self._Audit(
        artifacts=_Artifacts([visual_progress.SpeedlineFrame(80, 3100)]))

    self.assertEqual(-1, result.score)
    self.assertEqual('NoVisualCompletionFound', result.failure_type)
    self.assertIn('85%', result.debug_string)
    self.assertFalse(self.model_builder.called)

  def testTraceEndsBeforeFirstWindow(self):
    result = self._Audit(model_builder=_FakeModelBuilder(2000))

    self.assertFalse(result.succeeded)
    self.assertEqual(-1, result.score)
    self.assertEqual(-1, result.raw_value)
    self.assertEqual('NoResponsiveWindowFound', result.failure_type)
    self.assertIn('end of the trace', result.debug_string)
    self.assertEqual([], result.extended_info['latencyObservations'])
    self.assertFalse(self.estimator.called)

  def testExhaustedSearchKeepsObservations(self):
    result = self._Audit(model_builder=_FakeModelBuilder(2700),
                         estimator=_FakeEstimator(300, 200, 100))

    self.assertEqual('NoResponsiveWindowFound', result.failure_type)
    self.assertEqual(
        [{'windowStartTime': 2100, 'estimatedLatency': 300},
         {'windowStartTime': 2150, 'estimatedLatency': 200},
         {'windowStartTime': 2200, 'estimatedLatency': 100}],
        result.extended_info['latencyObservations'])
    self.assertNotIn('mainThreadAvailable', result.extended_info['timings'])

  def testSearchTimeout(self):
    result = self._Audit(
        estimator=_FakeEstimator(300, 10),
        config=config_module.ScoringConfig(search_timeout=5),
        clock=mock.Mock(side_effect=[0, 1, 6]))

    self.assertEqual('NoResponsiveWindowFound', result.failure_type)
    self.assertIn('timed out', result.debug_string)
    self.assertEqual(1, len(result.extended_info['latencyObservations']))

  def testUnexpectedError(self):
    result = self._Audit(estimator=mock.Mock(side_effect=KeyError('boom')))

    self.assertEqual(-1, result.score)
    self.assertEqual('UnexpectedComputationError', result.failure_type)
    self.assertIn('boom', result.debug_string)

  def testMissingArtifact(self):
    result = self._Audit(
        artifacts=artifacts_module.Artifacts(trace_events=[]))
    self.assertEqual('MissingArtifact', result.failure_type)
    self.assertIn('speedline_frames', result.debug_string)
    self.assertFalse(self.meaningful_paint.called)

  def testAlternateCalibration(self):
    config = config_module.ScoringConfig(latency_threshold=30)
    result = self._Audit(estimator=_FakeEstimator(40, 20), config=config)
    self.assertEqual('2150.0ms', result.raw_value)

  def testCachedEstimatesAcrossAudits(self):
    estimator = _FakeEstimator(300, 40)
    tti_audit = audit.TimeToInteractiveAudit(
        config=config_module.ScoringConfig(cache_latency_estimates=True),
        meaningful_paint=mock.Mock(return_value=_PaintResult()),
        model_builder=_FakeModelBuilder(10000), risk_estimator=estimator)
    artifacts = _Artifacts()

    first = tti_audit.Audit(artifacts)
    second = tti_audit.Audit(artifacts)

    self.assertEqual('2150.0ms', first.raw_value)
    self.assertEqual(first.AsDict(), second.AsDict())
    # Both windows of the second audit come from the cache.
    self.assertEqual(2, estimator.call_count)

  def testCachedEstimatesAreNotSharedBetweenTraces(self):
    estimator = _FakeEstimator(40, 300, 40)
    tti_audit = audit.TimeToInteractiveAudit(
        config=config_module.ScoringConfig(cache_latency_estimates=True),
        meaningful_paint=mock.Mock(return_value=_PaintResult()),
        model_builder=_FakeModelBuilder(10000), risk_estimator=estimator)

    first = tti_audit.Audit(_Artifacts())
    second = tti_audit.Audit(_Artifacts())

    self.assertEqual('2100.0ms', first.raw_value)
    self.assertEqual('2150.0ms', second.raw_value)
    self.assertEqual(3, estimator.call_count)

  def testWithoutCacheEveryAuditQueriesEstimator(self):
    estimator = _FakeEstimator(300, 40, 300, 40)
    tti_audit = audit.TimeToInteractiveAudit(
        meaningful_paint=mock.Mock(return_value=_PaintResult()),
        model_builder=_FakeModelBuilder(10000), risk_estimator=estimator)
    artifacts = _Artifacts()

    tti_audit.Audit(artifacts)
    tti_audit.Audit(artifacts)

    self.assertEqual(4, estimator.call_count)

  def testAsDict(self):
    result = self._Audit(model_builder=_FakeModelBuilder(2000))
    d = result.AsDict()
    self.assertEqual('time-to-interactive', d['name'])
    self.assertEqual(-1, d['score'])
    self.assertEqual(-1, d['rawValue'])
    self.assertEqual('NoResponsiveWindowFound', d['failureType'])
    self.assertIn('debugString', d)
    self.assertEqual('< 1700ms', d['optimalValue'])

  def testSuccessAsDict(self):
    d = self._Audit().AsDict()
    self.assertEqual('2100.0ms', d['rawValue'])
    self.assertEqual('< 1700ms', d['optimalValue'])
    self.assertNotIn('failureType', d)
    self.assertNotIn('debugString', d)

  def testOptimalValueFollowsCalibration(self):
    config = config_module.ScoringConfig(
        scoring_point_of_diminishing_returns=1000)
    result = self._Audit(config=config)
    self.assertEqual('< 1000ms', result.optimal_value)


def _UserTiming(name, ts):
  return {'name': name, 'ph': 'R', 'cat': 'blink.user_timing', 'pid': 1,
          'tid': 2, 'ts': ts}


class AuditEndToEndTest(unittest.TestCase):

  def testRealCollaborators(self):
    # Navigation starts at 1000ms, first meaningful paint is at 2000ms and the
    # page is visually ready at 2100ms. A task keeps the main thread busy
    # until 2500ms; input latency drops below 50ms for the window at 2450ms.
    trace_events = [
        {'name': 'TracingStartedInPage', 'ph': 'I', 'pid': 1, 'tid': 2,
         'ts': 900000},
        _UserTiming('navigationStart', 1000000),
        _UserTiming('firstMeaningfulPaint', 3000000),
        {'name': 'Task', 'cat': 'toplevel', 'ph': 'X', 'pid': 1, 'tid': 2,
         'ts': 3100000, 'dur': 400000},
        {'name': 'Task', 'cat': 'toplevel', 'ph': 'X', 'pid': 1, 'tid': 2,
         'ts': 5990000, 'dur': 10000},
    ]
    frames = [visual_progress.SpeedlineFrame(0, 1000),
              visual_progress.SpeedlineFrame(70, 3000),
              visual_progress.SpeedlineFrame(90, 3100)]

    result = audit.Audit(artifacts_module.Artifacts(trace_events, frames))

    self.assertTrue(result.succeeded, result.debug_string)
    self.assertEqual('2450.0ms', result.raw_value)
    self.assertAlmostEqual(89, result.score, delta=1)
    timings = result.extended_info['timings']
    self.assertEqual(2000, timings['firstMeaningfulPaint'])
    self.assertEqual(2100, timings['visuallyReady'])
    self.assertEqual(2450, timings['mainThreadAvailable'])
    self.assertEqual(8, len(result.extended_info['latencyObservations']))
    self.assertAlmostEqual(
        16, result.extended_info['expectedLatencyAtInteractive'])
