# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

FAILURE_SCORE = -1
FAILURE_RAW_VALUE = -1


class AuditResult(object):
  """The outcome of an audit; failures are results too.

  A failed result has score and raw_value of -1, a failure_type naming what
  went wrong and a debug_string describing it.
  """

  def __init__(self, name, category, description, score, raw_value,
               debug_string=None, extended_info=None, failure_type=None,
               optimal_value=None):
    self.name = name
    self.category = category
    self.description = description
    self.score = score
    self.raw_value = raw_value
    self.debug_string = debug_string
    self.extended_info = extended_info or {}
    self.failure_type = failure_type
    self.optimal_value = optimal_value

  def __repr__(self):
    return 'AuditResult(%s, score=%s, raw_value=%s, failure_type=%s)' % (
        self.name, self.score, self.raw_value, self.failure_type)

  @property
  def succeeded(self):
    return self.failure_type is None

  def AsDict(self):
    d = {
        'name': self.name,
        'category': self.category,
        'description': self.description,
        'score': self.score,
        'rawValue': self.raw_value,
        'extendedInfo': self.extended_info,
    }
    if self.optimal_value is not None:
      d['optimalValue'] = self.optimal_value
    if self.debug_string is not None:
      d['debugString'] = self.debug_string
    if self.failure_type is not None:
      d['failureType'] = self.failure_type
    return d
