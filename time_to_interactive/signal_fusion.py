# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import collections
import logging

from time_to_interactive import exceptions


# All times are in ms relative to navigation start.
ReadySignals = collections.namedtuple(
    'ReadySignals', ['first_meaningful_paint', 'visually_ready', 'ready_time'])


def FindVisuallyReadyTime(paint_timing, samples, threshold):
  """Returns when the page first looks ready, relative to navigation start.

  The first sample at or after first meaningful paint whose progress is at
  least |threshold| is used. Progress is treated as non-decreasing, so a later
  dip below the threshold is ignored.

  Raises:
    NoVisualCompletionFound: no such sample exists.
  """
  paint_absolute = (paint_timing.first_meaningful_paint +
                    paint_timing.navigation_start)
  for sample in samples:
    if sample.time >= paint_absolute and sample.progress >= threshold:
      return sample.time - paint_timing.navigation_start
  raise exceptions.NoVisualCompletionFound(
      threshold, paint_timing.first_meaningful_paint)


def FuseReadySignals(paint_timing, samples, config):
  """The page isn't ready until both paint and visual progress say so."""
  visually_ready = FindVisuallyReadyTime(
      paint_timing, samples, config.visual_completeness_threshold)
  ready_time = max(paint_timing.first_meaningful_paint, visually_ready)
  logging.debug('First meaningful paint at %.1fms, visually ready at %.1fms',
                paint_timing.first_meaningful_paint, visually_ready)
  return ReadySignals(paint_timing.first_meaningful_paint, visually_ready,
                      ready_time)
