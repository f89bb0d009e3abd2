# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.


class Slice(object):
  """A Slice represents an interval of time on a thread resource with
  associated nesting slices.

  Start and duration are in milliseconds relative to the model's time origin.
  """

  def __init__(self, category, name, start, duration, args=None):
    self.category = category
    self.name = name
    self.start = start
    self.duration = duration
    self.args = args or {}
    self.sub_slices = []

  def __repr__(self):
    return 'Slice(%s, %s, start=%s, duration=%s)' % (
        self.category, self.name, self.start, self.duration)

  @property
  def end(self):
    return self.start + self.duration

  def AddSubSlice(self, sub_slice):
    assert sub_slice.start >= self.start
    self.sub_slices.append(sub_slice)
