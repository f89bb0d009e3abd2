# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""Estimates how long input would wait for the renderer main thread.

Input is assumed to arrive at a uniformly random time within a window. Input
that arrives while a main thread task runs has to wait until that task ends;
input that arrives while the thread is idle waits for nothing. The percentiles
of that waiting time, plus a fixed base latency, are the expected input
latency of the window.
"""

import collections

from time_to_interactive.timeline import bounds as bounds_module


# Input handling costs at least a frame even on an idle main thread.
BASE_RESPONSE_LATENCY = 16

RiskPercentile = collections.namedtuple('RiskPercentile', ['percentile', 'time'])


def GetWaitIntervals(model, start, end):
  """Returns (min_wait, length) for each main thread task in [start, end].

  Input arriving anywhere in the part of a task inside the window waits
  between min_wait and min_wait + length ms. Parts of a task outside the
  window are clipped.
  """
  intervals = []
  for s in model.toplevel_slices:
    if s.end <= start or s.start >= end:
      continue
    length = bounds_module.Bounds.GetOverlap(s.start, s.end, start, end)
    if length <= 0:
      continue
    min_wait = s.end - min(s.end, end)
    intervals.append((min_wait, length))
  return intervals


def _TimeAtOrBelow(intervals, idle_time, wait):
  total = idle_time
  for min_wait, length in intervals:
    total += min(max(wait - min_wait, 0), length)
  return total


def _ComputeWaitTime(intervals, idle_time, target_time):
  """Returns the smallest wait w such that time(wait <= w) >= target_time."""
  if target_time <= idle_time:
    return 0
  breakpoints = sorted(set(
      [min_wait for min_wait, _ in intervals] +
      [min_wait + length for min_wait, length in intervals]))
  previous_wait = 0
  previous_time = idle_time
  for wait in breakpoints:
    if wait <= previous_wait:
      continue
    time_at_wait = _TimeAtOrBelow(intervals, idle_time, wait)
    if time_at_wait >= target_time:
      slope = (time_at_wait - previous_time) / float(wait - previous_wait)
      return previous_wait + (target_time - previous_time) / slope
    previous_wait = wait
    previous_time = time_at_wait
  return previous_wait


def EstimateResponseRisk(model, trace_events, start, end, percentiles):
  """Returns the estimated input latency of [start, end] at |percentiles|.

  Args:
    model: A TraceModel whose time base matches start and end.
    trace_events: The raw trace events the model was built from. Unused by
        this estimator, which reads the model only.
    start, end: The window in ms.
    percentiles: Percentiles in [0, 1].

  Returns:
    One RiskPercentile per requested percentile, in the order requested.
  """
  del trace_events  # Unused.
  if end <= start:
    raise ValueError('Window end %s must be after its start %s' % (end, start))
  window_duration = float(end - start)
  intervals = GetWaitIntervals(model, start, end)
  idle_time = window_duration - sum(length for _, length in intervals)

  results = []
  for percentile in percentiles:
    if not 0 <= percentile <= 1:
      raise ValueError('percentile must be in [0,1], got %s' % percentile)
    wait = _ComputeWaitTime(intervals, idle_time, percentile * window_duration)
    results.append(RiskPercentile(percentile, wait + BASE_RESPONSE_LATENCY))
  return results


class CachingRiskEstimator(object):
  """Memoizes a risk estimator for the trace it is currently queried on.

  Results are keyed by window and percentiles. The model is derived from the
  trace events, so the cache is dropped whenever the estimator is called with
  a different trace_events object.
  """

  def __init__(self, estimator=EstimateResponseRisk):
    self._estimator = estimator
    self._cache = {}
    self._trace_events = None
    self.hits = 0

  def __call__(self, model, trace_events, start, end, percentiles):
    if trace_events is not self._trace_events:
      self._cache = {}
      self._trace_events = trace_events
    key = (start, end, tuple(percentiles))
    if key in self._cache:
      self.hits += 1
    else:
      self._cache[key] = self._estimator(
          model, trace_events, start, end, percentiles)
    return list(self._cache[key])
