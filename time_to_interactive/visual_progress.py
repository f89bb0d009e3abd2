# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import collections
import json
import logging


# progress is in [0, 100], time is an absolute trace timestamp in ms.
VisualProgressSample = collections.namedtuple(
    'VisualProgressSample', ['progress', 'time'])


class SpeedlineFrame(object):
  """A rendered frame with its visual completeness."""

  def __init__(self, progress, timestamp):
    self._progress = progress
    self._timestamp = timestamp

  def __repr__(self):
    return 'SpeedlineFrame(progress=%s, timestamp=%s)' % (
        self._progress, self._timestamp)

  def GetProgress(self):
    return self._progress

  def GetTimeStamp(self):
    return self._timestamp


def SamplesFromFrames(frames):
  """Normalizes frames exposing GetProgress/GetTimeStamp into samples."""
  return [VisualProgressSample(frame.GetProgress(), frame.GetTimeStamp())
          for frame in frames]


def LoadSpeedlineFrames(path):
  """Reads frames from a JSON list of {"progress", "timestamp"} objects."""
  logging.info('Loading speedline frames from %s', path)
  with open(path) as f:
    frame_dicts = json.load(f)
  if isinstance(frame_dicts, dict):
    frame_dicts = frame_dicts.get('frames', [])
  return [SpeedlineFrame(d['progress'], d['timestamp']) for d in frame_dicts]
