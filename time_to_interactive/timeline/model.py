# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""A minimal timeline model for the renderer main thread of a Chrome trace.

Only what the responsiveness estimate needs is modeled: the bounds of the
trace and the slices of the renderer main thread. Times are converted from
trace microseconds into milliseconds relative to a caller supplied origin.
"""

import logging

from time_to_interactive import exceptions
from time_to_interactive.timeline import bounds as bounds_module
from time_to_interactive.timeline import slice as slice_module


TRACING_STARTED_IN_PAGE = 'TracingStartedInPage'
RENDERER_MAIN_THREAD_NAME = 'CrRendererMain'

_METADATA_PHASE = 'M'
_COMPLETE_PHASE = 'X'
_BEGIN_PHASE = 'B'
_END_PHASE = 'E'


class TraceModel(object):
  def __init__(self, bounds, main_thread_id, toplevel_slices, time_origin=0):
    self._bounds = bounds
    self._main_thread_id = main_thread_id
    self._toplevel_slices = tuple(toplevel_slices)
    self._time_origin = time_origin

  @property
  def bounds(self):
    return self._bounds

  @property
  def main_thread_id(self):
    """(pid, tid) of the renderer main thread."""
    return self._main_thread_id

  @property
  def toplevel_slices(self):
    return self._toplevel_slices

  @property
  def time_origin(self):
    return self._time_origin


def _ToMilliseconds(microseconds, time_origin):
  return microseconds / 1000.0 - time_origin


def FindMainThreadId(trace_events):
  """Returns the (pid, tid) of the renderer main thread.

  The first TracingStartedInPage event identifies the thread that was traced
  for the page. Traces without it fall back to the first thread named
  CrRendererMain.
  """
  for event in trace_events:
    if event.get('name') == TRACING_STARTED_IN_PAGE:
      return (event.get('pid'), event.get('tid'))
  for event in trace_events:
    if (event.get('ph') == _METADATA_PHASE and
        event.get('name') == 'thread_name' and
        event.get('args', {}).get('name') == RENDERER_MAIN_THREAD_NAME):
      return (event.get('pid'), event.get('tid'))
  raise exceptions.TraceModelError(
      'Could not find the renderer main thread in the trace')


def _NestSlices(slices):
  """Links |slices| into a tree and returns the top-level ones."""
  toplevel_slices = []
  open_slices = []
  for s in sorted(slices, key=lambda s: (s.start, -s.duration)):
    while open_slices and s.start >= open_slices[-1].end:
      open_slices.pop()
    if open_slices:
      open_slices[-1].AddSubSlice(s)
    else:
      toplevel_slices.append(s)
    open_slices.append(s)
  return toplevel_slices


def BuildTraceModel(trace_events, time_origin=0):
  """Creates a TraceModel from raw Chrome trace events.

  Args:
    trace_events: A list of trace event dicts as found in a JSON trace.
    time_origin: Absolute time in ms that becomes time 0 of the model.

  Raises:
    TraceModelError: the trace has no renderer main thread.
  """
  main_thread_id = FindMainThreadId(trace_events)
  bounds = bounds_module.Bounds()
  slices = []
  open_slices = []

  for event in trace_events:
    phase = event.get('ph')
    if phase == _METADATA_PHASE or 'ts' not in event:
      continue
    start = _ToMilliseconds(event['ts'], time_origin)
    bounds.AddValue(start)
    if phase == _COMPLETE_PHASE:
      duration = event.get('dur', 0) / 1000.0
      bounds.AddValue(start + duration)

    if (event.get('pid'), event.get('tid')) != main_thread_id:
      continue
    if phase == _COMPLETE_PHASE:
      slices.append(slice_module.Slice(
          event.get('cat'), event.get('name'), start, duration,
          event.get('args')))
    elif phase == _BEGIN_PHASE:
      open_slices.append(slice_module.Slice(
          event.get('cat'), event.get('name'), start, 0, event.get('args')))
    elif phase == _END_PHASE:
      if not open_slices:
        logging.debug('Ignoring unmatched end event %s at %s',
                      event.get('name'), start)
        continue
      s = open_slices.pop()
      s.duration = start - s.start
      slices.append(s)

  # Slices still open when the trace ends are closed at the end of the trace.
  for s in open_slices:
    logging.debug('Closing slice %s at end of trace', s.name)
    s.duration = bounds.max - s.start
    slices.append(s)

  if bounds.is_empty:
    raise exceptions.TraceModelError('Trace contains no timed events')

  return TraceModel(bounds, main_thread_id, _NestSlices(slices),
                    time_origin=time_origin)
