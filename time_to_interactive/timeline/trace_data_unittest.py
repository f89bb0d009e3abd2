# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import json
import os
import shutil
import tempfile
import unittest

from time_to_interactive import exceptions
from time_to_interactive.timeline import trace_data


class TraceDataTest(unittest.TestCase):

  def setUp(self):
    self._temp_dir = tempfile.mkdtemp()

  def tearDown(self):
    shutil.rmtree(self._temp_dir)

  def _WriteFile(self, contents):
    path = os.path.join(self._temp_dir, 'trace.json')
    with open(path, 'w') as f:
      f.write(contents)
    return path

  def testGetTraceEvents(self):
    events = [{'name': 'a', 'ts': 1}]
    self.assertEqual(events, trace_data.GetTraceEvents(events))
    self.assertEqual(events, trace_data.GetTraceEvents({'traceEvents': events}))
    with self.assertRaises(exceptions.TraceModelError):
      trace_data.GetTraceEvents({'events': events})

  def testLoadTraceEvents(self):
    events = [{'name': 'a', 'ts': 1}]
    path = self._WriteFile(json.dumps({'traceEvents': events}))
    self.assertEqual(events, trace_data.LoadTraceEvents(path))

  def testLoadInvalidTrace(self):
    path = self._WriteFile('{not json')
    with self.assertRaises(exceptions.TraceModelError):
      trace_data.LoadTraceEvents(path)
