# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import unittest

from time_to_interactive import config as config_module
from time_to_interactive import exceptions
from time_to_interactive import paint_timing
from time_to_interactive import signal_fusion
from time_to_interactive.visual_progress import VisualProgressSample


# First meaningful paint 2000ms after a navigation starting at 1000ms.
_PAINT_TIMING = paint_timing.PaintTiming(2000, 1000)


class FindVisuallyReadyTimeTest(unittest.TestCase):

  def testFirstCompleteFrameAfterPaint(self):
    samples = [
        VisualProgressSample(50, 2500),
        VisualProgressSample(90, 2900),  # Before first meaningful paint.
        VisualProgressSample(80, 3000),
        VisualProgressSample(86, 3100),
        VisualProgressSample(100, 3500),
    ]
    self.assertEqual(2100, signal_fusion.FindVisuallyReadyTime(
        _PAINT_TIMING, samples, 85))

  def testFrameAtPaintCounts(self):
    samples = [VisualProgressSample(85, 3000)]
    self.assertEqual(2000, signal_fusion.FindVisuallyReadyTime(
        _PAINT_TIMING, samples, 85))

  def testFirstCrossingWinsOverLaterDip(self):
    samples = [
        VisualProgressSample(90, 3200),
        VisualProgressSample(60, 3300),
        VisualProgressSample(95, 3400),
    ]
    self.assertEqual(2200, signal_fusion.FindVisuallyReadyTime(
        _PAINT_TIMING, samples, 85))

  def testNeverComplete(self):
    samples = [VisualProgressSample(84.9, 3100), VisualProgressSample(95, 2000)]
    with self.assertRaises(exceptions.NoVisualCompletionFound) as context:
      signal_fusion.FindVisuallyReadyTime(_PAINT_TIMING, samples, 85)
    self.assertEqual(85, context.exception.threshold)
    self.assertEqual('NoVisualCompletionFound',
                     context.exception.failure_type)


class FuseReadySignalsTest(unittest.TestCase):

  def testVisuallyReadyAfterPaint(self):
    signals = signal_fusion.FuseReadySignals(
        _PAINT_TIMING, [VisualProgressSample(86, 3100)],
        config_module.ScoringConfig())
    self.assertEqual(2000, signals.first_meaningful_paint)
    self.assertEqual(2100, signals.visually_ready)
    self.assertEqual(2100, signals.ready_time)

  def testReadyTimeIsNeverBeforePaint(self):
    for sample_time in (3000, 3050, 4000, 10000):
      signals = signal_fusion.FuseReadySignals(
          _PAINT_TIMING, [VisualProgressSample(100, sample_time)],
          config_module.ScoringConfig())
      self.assertGreaterEqual(signals.ready_time, 2000)
      self.assertGreaterEqual(signals.ready_time, sample_time - 1000)

  def testUsesConfiguredThreshold(self):
    samples = [VisualProgressSample(60, 3100), VisualProgressSample(90, 3300)]
    config = config_module.ScoringConfig(visual_completeness_threshold=50)
    signals = signal_fusion.FuseReadySignals(_PAINT_TIMING, samples, config)
    self.assertEqual(2100, signals.ready_time)
