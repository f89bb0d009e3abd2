# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.


class Bounds(object):
  """Represents a min-max bounds."""

  def __init__(self):
    self.is_empty_ = True
    self.min_ = None
    self.max_ = None

  def __repr__(self):
    if self.is_empty_:
      return 'Bounds()'
    return 'Bounds(min=%s,max=%s)' % (self.min_, self.max_)

  @property
  def is_empty(self):
    return self.is_empty_

  @property
  def min(self):
    if self.is_empty_:
      return None
    return self.min_

  @property
  def max(self):
    if self.is_empty_:
      return None
    return self.max_

  @property
  def duration(self):
    if self.is_empty_:
      return 0
    return self.max_ - self.min_

  def AddValue(self, value):
    if self.is_empty_:
      self.max_ = value
      self.min_ = value
      self.is_empty_ = False
      return

    self.max_ = max(self.max_, value)
    self.min_ = min(self.min_, value)

  @staticmethod
  def GetOverlap(first_bounds_min, first_bounds_max,
                 second_bounds_min, second_bounds_max):
    assert first_bounds_min <= first_bounds_max
    assert second_bounds_min <= second_bounds_max
    overlapped_range_start = max(first_bounds_min, second_bounds_min)
    overlapped_range_end = min(first_bounds_max, second_bounds_max)
    return max(overlapped_range_end - overlapped_range_start, 0)
