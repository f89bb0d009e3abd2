# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.


class Error(Exception):
  """Base class for time to interactive exceptions."""
  failure_type = 'UnexpectedComputationError'


class UpstreamMetricUnavailable(Error):
  """The first meaningful paint computation did not produce a value."""
  failure_type = 'UpstreamMetricUnavailable'


class NoVisualCompletionFound(Error):
  """No speedline frame after first meaningful paint is visually complete."""
  failure_type = 'NoVisualCompletionFound'

  def __init__(self, threshold, paint_time):
    super(NoVisualCompletionFound, self).__init__(
        'No frame reached %s%% visual completeness at or after first '
        'meaningful paint (%.1fms)' % (threshold, paint_time))
    self.threshold = threshold
    self.paint_time = paint_time


class NoResponsiveWindowFound(Error):
  """The window search ran off the end of the trace."""
  failure_type = 'NoResponsiveWindowFound'


class MissingArtifactError(Error):
  failure_type = 'MissingArtifact'

  def __init__(self, artifact_name):
    super(MissingArtifactError, self).__init__(
        'Required artifact %s is missing' % artifact_name)
    self.artifact_name = artifact_name


class TraceModelError(Error):
  """The trace cannot be turned into a model suitable for this metric."""


class ConfigError(Error, ValueError):
  pass
