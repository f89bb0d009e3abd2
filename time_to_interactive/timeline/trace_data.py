# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import json
import logging

from time_to_interactive import exceptions


def GetTraceEvents(trace_contents):
  """Returns the list of trace events held by |trace_contents|.

  Chrome writes traces either as a bare array of events or as an object with
  a 'traceEvents' key; both are accepted.
  """
  if isinstance(trace_contents, list):
    return trace_contents
  if isinstance(trace_contents, dict) and 'traceEvents' in trace_contents:
    return trace_contents['traceEvents']
  raise exceptions.TraceModelError(
      'Trace contents are neither an event list nor a traceEvents container')


def LoadTraceEvents(path):
  logging.info('Loading trace from %s', path)
  with open(path) as f:
    try:
      trace_contents = json.load(f)
    except ValueError as e:
      raise exceptions.TraceModelError(
          'Trace %s is not valid JSON: %s' % (path, e))
  return GetTraceEvents(trace_contents)
