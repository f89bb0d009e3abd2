# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import collections
import logging
import time


LatencyObservation = collections.namedtuple(
    'LatencyObservation', ['window_start_time', 'estimated_latency'])


class WindowSearchResult(object):
  """Terminal state of a responsiveness window search.

  Either found is True and interactive_time is the start of the first
  responsive window, or the search was exhausted (or timed out) and
  interactive_time is None. latency_observations holds every window that was
  queried, in chronological order, in both cases.
  """

  def __init__(self, found, interactive_time, latency_observations,
               timed_out=False):
    self._found = found
    self._interactive_time = interactive_time
    self._latency_observations = tuple(latency_observations)
    self._timed_out = timed_out

  def __repr__(self):
    return 'WindowSearchResult(found=%s, interactive_time=%s, windows=%d)' % (
        self._found, self._interactive_time, len(self._latency_observations))

  @property
  def found(self):
    return self._found

  @property
  def interactive_time(self):
    return self._interactive_time

  @property
  def latency_observations(self):
    return self._latency_observations

  @property
  def timed_out(self):
    return self._timed_out

  @property
  def expected_latency(self):
    if not self._latency_observations:
      return None
    return self._latency_observations[-1].estimated_latency


def SearchForResponsiveWindow(ready_time, model, trace_events, risk_estimator,
                              config, clock=time.time):
  """Finds the first window after |ready_time| with low input latency.

  The first window starts at ready_time. Each later window moves forward by
  config.window_step. Every window is passed to |risk_estimator| for its
  config.latency_percentile latency. The search ends when that latency is
  strictly below config.latency_threshold, when the window no longer fits in
  the trace, or when config.search_timeout elapses.

  Args:
    ready_time: When the page looks ready, in the model's time base.
    model: A TraceModel; its bounds.max ends the search.
    trace_events: Raw trace events, passed through to risk_estimator.
    risk_estimator: Callable (model, trace_events, start, end, percentiles)
        returning one object with a |time| attribute per percentile.
    config: A ScoringConfig.
    clock: Returns the current wall time in seconds.

  Returns:
    A WindowSearchResult.
  """
  end_of_trace_time = model.bounds.max
  deadline = None
  if config.search_timeout is not None:
    deadline = clock() + config.search_timeout

  observations = []
  start_time = ready_time - config.window_step
  while True:
    start_time += config.window_step
    end_time = start_time + config.window_duration
    if end_time > end_of_trace_time:
      logging.warning('No responsive window before the end of the trace '
                      '(%.1fms) after %d windows', end_of_trace_time,
                      len(observations))
      return WindowSearchResult(False, None, observations)
    if deadline is not None and clock() > deadline:
      logging.warning('Window search timed out after %d windows',
                      len(observations))
      return WindowSearchResult(False, None, observations, timed_out=True)

    latencies = risk_estimator(model, trace_events, start_time, end_time,
                               [config.latency_percentile])
    estimated_latency = latencies[0].time
    observations.append(LatencyObservation(start_time, estimated_latency))
    logging.debug('At %.1fms, %s percentile est latency is ~%.2fms',
                  start_time, config.latency_percentile, estimated_latency)

    if estimated_latency < config.latency_threshold:
      return WindowSearchResult(True, start_time, observations)
