# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import unittest

from time_to_interactive import artifacts as artifacts_module
from time_to_interactive import paint_timing


def _Event(name, ts, pid=1):
  return {'name': name, 'ph': 'R', 'cat': 'blink.user_timing', 'pid': pid,
          'tid': 2, 'ts': ts}


def _ComputeMeaningfulPaint(trace_events):
  return paint_timing.ComputeMeaningfulPaint(
      artifacts_module.Artifacts(trace_events=trace_events,
                                 speedline_frames=[]))


class ComputeMeaningfulPaintTest(unittest.TestCase):

  def testFirstMeaningfulPaint(self):
    result = _ComputeMeaningfulPaint([
        _Event('navigationStart', 1000000),
        _Event('firstMeaningfulPaintCandidate', 2500000),
        _Event('firstMeaningfulPaint', 3000000),
    ])
    self.assertFalse(result.failed)
    self.assertEqual(2000, result.value)
    self.assertEqual(paint_timing.PaintTiming(2000, 1000), result.timings)

  def testFallsBackToLastCandidate(self):
    result = _ComputeMeaningfulPaint([
        _Event('navigationStart', 1000000),
        _Event('firstMeaningfulPaintCandidate', 1500000),
        _Event('firstMeaningfulPaintCandidate', 2500000),
    ])
    self.assertEqual(1500, result.timings.first_meaningful_paint)

  def testIgnoresPaintsOfOtherProcessesAndEarlierNavigations(self):
    result = _ComputeMeaningfulPaint([
        _Event('firstMeaningfulPaint', 500000),
        _Event('navigationStart', 1000000),
        _Event('firstMeaningfulPaint', 1200000, pid=7),
        _Event('firstMeaningfulPaint', 1800000),
    ])
    self.assertEqual(800, result.value)

  def testNoNavigationStart(self):
    result = _ComputeMeaningfulPaint([_Event('firstMeaningfulPaint', 1000)])
    self.assertTrue(result.failed)
    self.assertEqual(-1, result.value)
    self.assertIn('navigationStart', result.debug_string)

  def testNoMeaningfulPaint(self):
    result = _ComputeMeaningfulPaint([_Event('navigationStart', 1000)])
    self.assertTrue(result.failed)
    self.assertIsNone(result.timings)
    self.assertIn('firstMeaningfulPaint', result.debug_string)
