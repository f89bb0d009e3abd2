# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from time_to_interactive import exceptions
from time_to_interactive import visual_progress
from time_to_interactive.timeline import trace_data


class Artifacts(object):
  """Everything gathered from a page load that the audit reads.

  Attributes:
    trace_events: The raw trace events of the page load.
    speedline_frames: Frames exposing GetProgress() and GetTimeStamp(), in
        chronological order.
  """
  REQUIRED_ARTIFACTS = ('trace_events', 'speedline_frames')

  def __init__(self, trace_events=None, speedline_frames=None):
    self.trace_events = trace_events
    self.speedline_frames = speedline_frames

  def CheckRequiredArtifacts(self):
    for name in self.REQUIRED_ARTIFACTS:
      if getattr(self, name) is None:
        raise exceptions.MissingArtifactError(name)

  @staticmethod
  def FromFiles(trace_path, speedline_path):
    return Artifacts(
        trace_events=trace_data.LoadTraceEvents(trace_path),
        speedline_frames=visual_progress.LoadSpeedlineFrames(speedline_path))
