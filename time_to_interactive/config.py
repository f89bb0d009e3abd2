# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import json
import logging
import numbers

from time_to_interactive import exceptions


# Parameters (in ms) for log-normal CDF scoring.
DEFAULT_SCORING_MEDIAN = 5000
DEFAULT_SCORING_POINT_OF_DIMINISHING_RETURNS = 1700

# Percentage of visual completeness at which the page is considered ready.
DEFAULT_VISUAL_COMPLETENESS_THRESHOLD = 85

# First 500ms window where estimated input latency is < 50ms at the 90th
# percentile.
DEFAULT_WINDOW_DURATION = 500
DEFAULT_WINDOW_STEP = 50
DEFAULT_LATENCY_PERCENTILE = 0.9
DEFAULT_LATENCY_THRESHOLD = 50

_NUMERIC_KEYS = (
    'scoring_median',
    'scoring_point_of_diminishing_returns',
    'visual_completeness_threshold',
    'window_duration',
    'window_step',
    'latency_percentile',
    'latency_threshold',
)

_DEFAULTS = {
    'scoring_median': DEFAULT_SCORING_MEDIAN,
    'scoring_point_of_diminishing_returns':
        DEFAULT_SCORING_POINT_OF_DIMINISHING_RETURNS,
    'visual_completeness_threshold': DEFAULT_VISUAL_COMPLETENESS_THRESHOLD,
    'window_duration': DEFAULT_WINDOW_DURATION,
    'window_step': DEFAULT_WINDOW_STEP,
    'latency_percentile': DEFAULT_LATENCY_PERCENTILE,
    'latency_threshold': DEFAULT_LATENCY_THRESHOLD,
    'search_timeout': None,
    'cache_latency_estimates': False,
}


def _CheckNumber(name, value):
  # bool is an int subclass.
  if isinstance(value, bool) or not isinstance(value, numbers.Real):
    raise exceptions.ConfigError(
        '%s must be a number, got %r' % (name, value))


class ScoringConfig(object):
  """Calibration of the time to interactive search and score.

  Attributes:
    scoring_median: Interactive time (ms) that scores 50.
    scoring_point_of_diminishing_returns: Interactive time (ms) below which
        improvements barely move the score.
    visual_completeness_threshold: Speedline progress (0-100) at which the
        page is visually ready.
    window_duration: Width (ms) of the window whose input latency is
        estimated.
    window_step: Amount (ms) the window moves forward on every iteration.
    latency_percentile: Percentile (0-1] of the input latency distribution
        compared against latency_threshold.
    latency_threshold: The search stops at the first window whose estimated
        latency is strictly below this value (ms).
    search_timeout: Optional wall-clock budget in seconds for the window
        search. None means the search is bounded by the trace only.
    cache_latency_estimates: Whether latency estimates are memoized per
        window.
  """

  def __init__(self, **kwargs):
    unknown = set(kwargs) - set(_DEFAULTS)
    if unknown:
      raise exceptions.ConfigError(
          'Unknown scoring config keys: %s' % ', '.join(sorted(unknown)))
    for name, default in _DEFAULTS.items():
      setattr(self, name, kwargs.get(name, default))
    self.Validate()

  def __eq__(self, other):
    if not isinstance(other, ScoringConfig):
      return False
    return self.AsDict() == other.AsDict()

  def __ne__(self, other):
    return not self == other

  def __repr__(self):
    return 'ScoringConfig(%s)' % ', '.join(
        '%s=%r' % (k, v) for k, v in sorted(self.AsDict().items()))

  def Validate(self):
    for name in _NUMERIC_KEYS:
      _CheckNumber(name, getattr(self, name))
    if self.search_timeout is not None:
      _CheckNumber('search_timeout', self.search_timeout)
    if not isinstance(self.cache_latency_estimates, bool):
      raise exceptions.ConfigError(
          'cache_latency_estimates must be a bool, got %r' %
          self.cache_latency_estimates)
    if self.window_step <= 0:
      raise exceptions.ConfigError('window_step must be positive')
    if self.window_duration <= 0:
      raise exceptions.ConfigError('window_duration must be positive')
    if not 0 < self.latency_percentile <= 1:
      raise exceptions.ConfigError('latency_percentile must be in (0, 1]')
    if self.latency_threshold < 0:
      raise exceptions.ConfigError('latency_threshold must not be negative')
    if self.scoring_median <= 0 or self.scoring_point_of_diminishing_returns <= 0:
      raise exceptions.ConfigError(
          'scoring_median and scoring_point_of_diminishing_returns must be '
          'positive')
    if self.scoring_point_of_diminishing_returns >= self.scoring_median:
      raise exceptions.ConfigError(
          'scoring_point_of_diminishing_returns must be below scoring_median')
    if self.search_timeout is not None and self.search_timeout <= 0:
      raise exceptions.ConfigError('search_timeout must be positive')

  def AsDict(self):
    return dict((name, getattr(self, name)) for name in _DEFAULTS)

  @staticmethod
  def FromDict(config_dict):
    if not isinstance(config_dict, dict):
      raise exceptions.ConfigError(
          'Scoring config must be a dict, got %r' % type(config_dict))
    return ScoringConfig(**config_dict)

  @staticmethod
  def FromFile(path):
    logging.info('Loading scoring config from %s', path)
    with open(path) as f:
      try:
        config_dict = json.load(f)
      except ValueError as e:
        raise exceptions.ConfigError(
            'Scoring config %s is not valid JSON: %s' % (path, e))
    return ScoringConfig.FromDict(config_dict)
