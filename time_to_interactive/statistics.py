# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import math

from scipy import stats


class Distribution(object):
  """The query interface scoring relies on.

  Alternate statistical backends only have to provide ComputePercentile.
  """

  def ComputePercentile(self, x):
    """Returns the fraction of the distribution at or below |x|, in [0, 1]."""
    raise NotImplementedError()

  def ComputeComplementaryPercentile(self, x):
    return 1 - self.ComputePercentile(x)


class LogNormalDistribution(Distribution):
  """A log-normal distribution given by the location and shape of ln(x)."""

  def __init__(self, location, shape):
    super(LogNormalDistribution, self).__init__()
    self._location = location
    self._shape = shape
    self._frozen = stats.lognorm(s=shape, scale=math.exp(location))

  def __repr__(self):
    return 'LogNormalDistribution(location=%s, shape=%s)' % (
        self._location, self._shape)

  @property
  def location(self):
    return self._location

  @property
  def shape(self):
    return self._shape

  @property
  def median(self):
    return math.exp(self._location)

  @staticmethod
  def FromMedianAndDiminishingReturns(median, diminishing_returns):
    """Creates a distribution from a median and a point of diminishing returns.

    The point of diminishing returns is where the slope of the complementary
    CDF starts flattening out, i.e. values below it score close to 1.
    """
    if median <= 0 or diminishing_returns <= 0:
      raise ValueError('median and diminishing_returns must be positive')
    log_ratio = math.log(float(diminishing_returns) / median)
    discriminant = (log_ratio - 3) ** 2 - 8
    if discriminant < 0 or 1 - 3 * log_ratio - math.sqrt(discriminant) <= 0:
      raise ValueError(
          'diminishing_returns %s is too large for median %s' % (
              diminishing_returns, median))
    shape = math.sqrt(1 - 3 * log_ratio - math.sqrt(discriminant)) / 2
    return LogNormalDistribution(math.log(median), shape)

  def ComputePercentile(self, x):
    if x <= 0:
      return 0.0
    return float(self._frozen.cdf(x))

  def ComputeComplementaryPercentile(self, x):
    # sf keeps precision in the upper tail better than 1 - cdf.
    if x <= 0:
      return 1.0
    return float(self._frozen.sf(x))
