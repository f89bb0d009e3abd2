# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import math

from time_to_interactive import config as config_module
from time_to_interactive import statistics


MIN_SCORE = 0
MAX_SCORE = 100


def CreateScoringDistribution(config=None):
  config = config or config_module.ScoringConfig()
  return statistics.LogNormalDistribution.FromMedianAndDiminishingReturns(
      config.scoring_median, config.scoring_point_of_diminishing_returns)


def ComputeScore(interactive_time, config=None, distribution=None):
  """Maps an interactive time in ms to an integer score in [0, 100].

  Uses the complementary CDF of a log-normal distribution. With the default
  calibration:
    < 1200ms: score~100
    5000ms: score=50
    >= 15000ms: score~0
  """
  if distribution is None:
    distribution = CreateScoringDistribution(config)
  score = 100 * distribution.ComputeComplementaryPercentile(interactive_time)

  # Clamp the score to 0 <= x <= 100.
  score = min(MAX_SCORE, score)
  score = max(MIN_SCORE, score)
  return int(math.floor(score + 0.5))
