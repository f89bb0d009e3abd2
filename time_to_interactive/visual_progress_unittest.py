# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import json
import os
import shutil
import tempfile
import unittest

import mock

from time_to_interactive import visual_progress


class SamplesFromFramesTest(unittest.TestCase):

  def testNormalizesFrames(self):
    frame = mock.Mock()
    frame.GetProgress.return_value = 42.5
    frame.GetTimeStamp.return_value = 1234.5
    samples = visual_progress.SamplesFromFrames(
        [frame, visual_progress.SpeedlineFrame(100, 2000)])
    self.assertEqual([visual_progress.VisualProgressSample(42.5, 1234.5),
                      visual_progress.VisualProgressSample(100, 2000)],
                     samples)
    self.assertEqual(42.5, samples[0].progress)
    self.assertEqual(1234.5, samples[0].time)


class LoadSpeedlineFramesTest(unittest.TestCase):

  def setUp(self):
    self._temp_dir = tempfile.mkdtemp()

  def tearDown(self):
    shutil.rmtree(self._temp_dir)

  def _WriteJson(self, data):
    path = os.path.join(self._temp_dir, 'speedline.json')
    with open(path, 'w') as f:
      json.dump(data, f)
    return path

  def testLoadsFrameList(self):
    path = self._WriteJson([{'progress': 0, 'timestamp': 1000},
                            {'progress': 86, 'timestamp': 3100}])
    frames = visual_progress.LoadSpeedlineFrames(path)
    self.assertEqual([0, 86], [f.GetProgress() for f in frames])
    self.assertEqual([1000, 3100], [f.GetTimeStamp() for f in frames])

  def testLoadsFramesContainer(self):
    path = self._WriteJson({'frames': [{'progress': 100, 'timestamp': 5}]})
    frames = visual_progress.LoadSpeedlineFrames(path)
    self.assertEqual(1, len(frames))
    self.assertEqual(100, frames[0].GetProgress())
