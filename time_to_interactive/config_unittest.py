# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import json
import os
import shutil
import tempfile
import unittest

from time_to_interactive import config as config_module
from time_to_interactive import exceptions


class ScoringConfigTest(unittest.TestCase):

  def testDefaults(self):
    config = config_module.ScoringConfig()
    self.assertEqual(5000, config.scoring_median)
    self.assertEqual(1700, config.scoring_point_of_diminishing_returns)
    self.assertEqual(85, config.visual_completeness_threshold)
    self.assertEqual(500, config.window_duration)
    self.assertEqual(50, config.window_step)
    self.assertEqual(0.9, config.latency_percentile)
    self.assertEqual(50, config.latency_threshold)
    self.assertIsNone(config.search_timeout)
    self.assertFalse(config.cache_latency_estimates)

  def testOverrides(self):
    config = config_module.ScoringConfig(window_step=25, latency_threshold=30)
    self.assertEqual(25, config.window_step)
    self.assertEqual(30, config.latency_threshold)
    self.assertEqual(500, config.window_duration)
    self.assertNotEqual(config, config_module.ScoringConfig())

  def testUnknownKey(self):
    with self.assertRaises(exceptions.ConfigError):
      config_module.ScoringConfig(window_size=500)

  def testInvalidValues(self):
    for overrides in ({'window_step': 0}, {'window_duration': -1},
                      {'latency_percentile': 0}, {'latency_percentile': 1.1},
                      {'latency_threshold': -5}, {'scoring_median': 0},
                      {'scoring_point_of_diminishing_returns': 6000},
                      {'search_timeout': 0}):
      with self.assertRaises(ValueError):
        config_module.ScoringConfig(**overrides)

  def testNonNumericValues(self):
    for overrides in ({'window_step': '50'}, {'window_step': None},
                      {'window_duration': [500]}, {'latency_threshold': True},
                      {'scoring_median': '5000'}, {'search_timeout': '10'},
                      {'cache_latency_estimates': 'yes'}):
      with self.assertRaises(exceptions.ConfigError):
        config_module.ScoringConfig(**overrides)

  def testNonNumericValueFromDict(self):
    with self.assertRaises(exceptions.ConfigError):
      config_module.ScoringConfig.FromDict({'window_step': '50'})

  def testFromDict(self):
    config = config_module.ScoringConfig.FromDict({'window_step': 100})
    self.assertEqual(100, config.window_step)
    self.assertEqual(config, config_module.ScoringConfig.FromDict(
        config.AsDict()))
    with self.assertRaises(exceptions.ConfigError):
      config_module.ScoringConfig.FromDict([('window_step', 100)])


class ScoringConfigFromFileTest(unittest.TestCase):

  def setUp(self):
    self._temp_dir = tempfile.mkdtemp()
    self._path = os.path.join(self._temp_dir, 'scoring.json')

  def tearDown(self):
    shutil.rmtree(self._temp_dir)

  def testFromFile(self):
    with open(self._path, 'w') as f:
      json.dump({'scoring_median': 4000, 'search_timeout': 30}, f)
    config = config_module.ScoringConfig.FromFile(self._path)
    self.assertEqual(4000, config.scoring_median)
    self.assertEqual(30, config.search_timeout)

  def testInvalidJson(self):
    with open(self._path, 'w') as f:
      f.write('scoring_median = 4000')
    with self.assertRaises(exceptions.ConfigError):
      config_module.ScoringConfig.FromFile(self._path)
