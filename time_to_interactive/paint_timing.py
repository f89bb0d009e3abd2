# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import collections
import logging


NAVIGATION_START = 'navigationStart'
FIRST_MEANINGFUL_PAINT = 'firstMeaningfulPaint'
FIRST_MEANINGFUL_PAINT_CANDIDATE = 'firstMeaningfulPaintCandidate'

# first_meaningful_paint is relative to navigation start, navigation_start is
# an absolute trace timestamp. Both are in ms.
PaintTiming = collections.namedtuple(
    'PaintTiming', ['first_meaningful_paint', 'navigation_start'])


class MeaningfulPaintResult(object):
  """Outcome of the first meaningful paint computation.

  A value of -1 means the computation failed and debug_string says why.
  """
  FAILURE_VALUE = -1

  def __init__(self, value, timings=None, debug_string=None):
    self.value = value
    self.timings = timings
    self.debug_string = debug_string

  @property
  def failed(self):
    return self.value == self.FAILURE_VALUE

  @classmethod
  def Failure(cls, debug_string):
    return cls(cls.FAILURE_VALUE, debug_string=debug_string)


def _Timestamp(event):
  return event['ts'] / 1000.0


def ComputeMeaningfulPaint(artifacts):
  """Reads first meaningful paint from the user timing events of the trace."""
  trace_events = artifacts.trace_events
  navigation_starts = [e for e in trace_events
                       if e.get('name') == NAVIGATION_START and 'ts' in e]
  if not navigation_starts:
    return MeaningfulPaintResult.Failure(
        'No navigationStart event found in trace')
  navigation_start_event = min(navigation_starts, key=_Timestamp)
  navigation_start = _Timestamp(navigation_start_event)

  def IsPaintOfThisNavigation(event, name):
    return (event.get('name') == name and 'ts' in event and
            event.get('pid') == navigation_start_event.get('pid') and
            _Timestamp(event) >= navigation_start)

  paints = [e for e in trace_events
            if IsPaintOfThisNavigation(e, FIRST_MEANINGFUL_PAINT)]
  if paints:
    paint_event = min(paints, key=_Timestamp)
  else:
    candidates = [e for e in trace_events
                  if IsPaintOfThisNavigation(
                      e, FIRST_MEANINGFUL_PAINT_CANDIDATE)]
    if not candidates:
      return MeaningfulPaintResult.Failure(
          'No firstMeaningfulPaint event found in trace')
    logging.info('No firstMeaningfulPaint event, using the last of %d '
                 'candidates', len(candidates))
    paint_event = max(candidates, key=_Timestamp)

  first_meaningful_paint = _Timestamp(paint_event) - navigation_start
  return MeaningfulPaintResult(
      first_meaningful_paint,
      timings=PaintTiming(first_meaningful_paint, navigation_start))
