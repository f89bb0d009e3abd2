# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import logging
import time

from time_to_interactive import audit_result
from time_to_interactive import config as config_module
from time_to_interactive import exceptions
from time_to_interactive import paint_timing
from time_to_interactive import responsiveness
from time_to_interactive import scoring
from time_to_interactive import signal_fusion
from time_to_interactive import visual_progress
from time_to_interactive import window_search
from time_to_interactive.timeline import model as model_module


class TimeToInteractiveAudit(object):
  """Identifies the time the page is "interactive".

  The user thinks the page is ready, i.e. they believe it is done enough to
  start interacting with, once:
    - Layout has stabilized and key webfonts are visible. AKA first
      meaningful paint has fired.
    - The page is nearly visually complete (85% by default).

  The page is actually ready for the user once the main thread is available
  enough to handle input: the first 500ms window where the estimated input
  latency is below 50ms at the 90th percentile.

  Every collaborator can be replaced, which is how tests feed it synthetic
  paint timings and latencies.
  """
  NAME = 'time-to-interactive'
  CATEGORY = 'Performance'
  DESCRIPTION = 'Time To Interactive'

  def __init__(self, config=None,
               meaningful_paint=paint_timing.ComputeMeaningfulPaint,
               model_builder=model_module.BuildTraceModel,
               risk_estimator=responsiveness.EstimateResponseRisk,
               distribution=None, clock=time.time):
    self._config = config or config_module.ScoringConfig()
    self._meaningful_paint = meaningful_paint
    self._model_builder = model_builder
    if self._config.cache_latency_estimates:
      risk_estimator = responsiveness.CachingRiskEstimator(risk_estimator)
    self._risk_estimator = risk_estimator
    self._distribution = (distribution or
                          scoring.CreateScoringDistribution(self._config))
    self._clock = clock

  @property
  def config(self):
    return self._config

  @property
  def optimal_value(self):
    # Scores flatten out below the point of diminishing returns.
    return '< %sms' % self._config.scoring_point_of_diminishing_returns

  def Audit(self, artifacts):
    """Returns an AuditResult for |artifacts|. Never raises."""
    try:
      return self._Audit(artifacts)
    except exceptions.Error as e:
      logging.warning('Time to interactive failed: %s', e)
      return self._CreateFailure(e.failure_type, str(e))
    except Exception as e: # pylint: disable=broad-except
      logging.exception('Unexpected error computing time to interactive')
      return self._CreateFailure(
          exceptions.Error.failure_type, str(e) or e.__class__.__name__)

  def _ComputeMeaningfulPaint(self, artifacts):
    try:
      paint_result = self._meaningful_paint(artifacts)
    except Exception as e: # pylint: disable=broad-except
      raise exceptions.UpstreamMetricUnavailable(
          str(e) or e.__class__.__name__)
    if paint_result.value == paint_timing.MeaningfulPaintResult.FAILURE_VALUE:
      raise exceptions.UpstreamMetricUnavailable(
          paint_result.debug_string or 'First meaningful paint unavailable')
    return paint_result.timings

  def _Audit(self, artifacts):
    artifacts.CheckRequiredArtifacts()
    timings = self._ComputeMeaningfulPaint(artifacts)

    samples = visual_progress.SamplesFromFrames(artifacts.speedline_frames)
    signals = signal_fusion.FuseReadySignals(timings, samples, self._config)

    # The model shares the page relative time base of the ready signals.
    model = self._model_builder(artifacts.trace_events,
                                time_origin=timings.navigation_start)
    search = window_search.SearchForResponsiveWindow(
        signals.ready_time, model, artifacts.trace_events,
        self._risk_estimator, self._config, clock=self._clock)

    timings_info = {
        'firstMeaningfulPaint': signals.first_meaningful_paint,
        'visuallyReady': signals.visually_ready,
    }
    extended_info = {
        'timings': timings_info,
        'expectedLatencyAtInteractive': search.expected_latency,
        'latencyObservations': [
            {'windowStartTime': o.window_start_time,
             'estimatedLatency': o.estimated_latency}
            for o in search.latency_observations],
    }

    if not search.found:
      return self._CreateFailure(
          exceptions.NoResponsiveWindowFound.failure_type,
          self._DescribeExhaustedSearch(search, model),
          extended_info=extended_info)

    interactive_time = search.interactive_time
    timings_info['mainThreadAvailable'] = interactive_time
    score = scoring.ComputeScore(interactive_time,
                                 distribution=self._distribution)
    logging.info('Time to interactive is %.1fms (score %d)',
                 interactive_time, score)
    return audit_result.AuditResult(
        self.NAME, self.CATEGORY, self.DESCRIPTION, score,
        '%.1fms' % interactive_time, extended_info=extended_info,
        optimal_value=self.optimal_value)

  def _DescribeExhaustedSearch(self, search, model):
    if search.timed_out:
      return ('Search for a responsive window timed out after %ss and %d '
              'windows' % (self._config.search_timeout,
                           len(search.latency_observations)))
    return ('No %sms window with %s percentile input latency below %sms '
            'found before the end of the trace (%.1fms)' % (
                self._config.window_duration,
                self._config.latency_percentile,
                self._config.latency_threshold,
                model.bounds.max))

  def _CreateFailure(self, failure_type, debug_string, extended_info=None):
    return audit_result.AuditResult(
        self.NAME, self.CATEGORY, self.DESCRIPTION,
        audit_result.FAILURE_SCORE, audit_result.FAILURE_RAW_VALUE,
        debug_string=debug_string, extended_info=extended_info,
        failure_type=failure_type, optimal_value=self.optimal_value)


def Audit(artifacts, config=None):
  return TimeToInteractiveAudit(config=config).Audit(artifacts)
