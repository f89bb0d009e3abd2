# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import json
import os
import shutil
import tempfile
import unittest

from time_to_interactive import cmdline


_TRACE_EVENTS = [
    {'name': 'TracingStartedInPage', 'ph': 'I', 'pid': 1, 'tid': 2,
     'ts': 1000000},
    {'name': 'navigationStart', 'ph': 'R', 'pid': 1, 'tid': 2,
     'ts': 1000000},
    {'name': 'firstMeaningfulPaint', 'ph': 'R', 'pid': 1, 'tid': 2,
     'ts': 2000000},
    {'name': 'Task', 'ph': 'X', 'pid': 1, 'tid': 2, 'ts': 5000000,
     'dur': 1000},
]

_FRAMES = [{'progress': 0, 'timestamp': 1000},
           {'progress': 100, 'timestamp': 2000}]


class CmdlineTest(unittest.TestCase):

  def setUp(self):
    self._temp_dir = tempfile.mkdtemp()
    self._output_path = os.path.join(self._temp_dir, 'result.json')

  def tearDown(self):
    shutil.rmtree(self._temp_dir)

  def _WriteJson(self, name, data):
    path = os.path.join(self._temp_dir, name)
    with open(path, 'w') as f:
      json.dump(data, f)
    return path

  def _ReadOutput(self):
    with open(self._output_path) as f:
      return json.load(f)

  def testComputesResult(self):
    trace_path = self._WriteJson('trace.json', {'traceEvents': _TRACE_EVENTS})
    speedline_path = self._WriteJson('speedline.json', _FRAMES)

    self.assertEqual(0, cmdline.Main(
        [trace_path, speedline_path, '-o', self._output_path]))

    result = self._ReadOutput()
    self.assertEqual('time-to-interactive', result['name'])
    self.assertEqual('1000.0ms', result['rawValue'])
    self.assertEqual(100, result['score'])

  def testFailureResultExitCode(self):
    trace_path = self._WriteJson('trace.json', _TRACE_EVENTS[:1])
    speedline_path = self._WriteJson('speedline.json', _FRAMES)

    self.assertEqual(255, cmdline.Main(
        [trace_path, speedline_path, '-o', self._output_path]))

    result = self._ReadOutput()
    self.assertEqual(-1, result['score'])
    self.assertEqual('UpstreamMetricUnavailable', result['failureType'])

  def testConfigOverrides(self):
    trace_path = self._WriteJson('trace.json', _TRACE_EVENTS)
    speedline_path = self._WriteJson('speedline.json', _FRAMES)
    config_path = self._WriteJson('scoring.json', {'window_duration': 5000})

    self.assertEqual(255, cmdline.Main(
        [trace_path, speedline_path, '--config', config_path,
         '-o', self._output_path]))
    self.assertEqual('NoResponsiveWindowFound',
                     self._ReadOutput()['failureType'])

  def testInvalidConfig(self):
    trace_path = self._WriteJson('trace.json', _TRACE_EVENTS)
    speedline_path = self._WriteJson('speedline.json', _FRAMES)
    config_path = self._WriteJson('scoring.json', {'window_size': 500})

    self.assertEqual(255, cmdline.Main(
        [trace_path, speedline_path, '--config', config_path]))

  def testNonNumericConfigValue(self):
    trace_path = self._WriteJson('trace.json', _TRACE_EVENTS)
    speedline_path = self._WriteJson('speedline.json', _FRAMES)
    config_path = self._WriteJson('scoring.json', {'window_step': '50'})

    self.assertEqual(255, cmdline.Main(
        [trace_path, speedline_path, '--config', config_path,
         '-o', self._output_path]))
    self.assertFalse(os.path.exists(self._output_path))

  def testMissingTraceFile(self):
    speedline_path = self._WriteJson('speedline.json', _FRAMES)
    with self.assertRaises(SystemExit):
      cmdline.Main([os.path.join(self._temp_dir, 'missing.json'),
                    speedline_path])
