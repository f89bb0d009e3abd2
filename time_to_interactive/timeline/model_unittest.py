# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import unittest

from time_to_interactive import exceptions
from time_to_interactive.timeline import model as model_module


def _MainThreadEvents():
  return [
      {'name': 'thread_name', 'ph': 'M', 'pid': 1, 'tid': 2, 'ts': 0,
       'args': {'name': 'CrRendererMain'}},
      {'name': 'TracingStartedInPage', 'ph': 'I', 'pid': 1, 'tid': 2,
       'ts': 1000000},
      {'name': 'Task', 'cat': 'toplevel', 'ph': 'X', 'pid': 1, 'tid': 2,
       'ts': 1100000, 'dur': 50000},
      {'name': 'Layout', 'cat': 'blink', 'ph': 'X', 'pid': 1, 'tid': 2,
       'ts': 1110000, 'dur': 10000},
      {'name': 'Task', 'cat': 'toplevel', 'ph': 'B', 'pid': 1, 'tid': 2,
       'ts': 1200000},
      {'name': 'Task', 'cat': 'toplevel', 'ph': 'E', 'pid': 1, 'tid': 2,
       'ts': 1230000},
      {'name': 'Other', 'cat': 'toplevel', 'ph': 'X', 'pid': 3, 'tid': 4,
       'ts': 1500000, 'dur': 100000},
  ]


class TraceModelTest(unittest.TestCase):

  def testBoundsAreRelativeToTimeOrigin(self):
    model = model_module.BuildTraceModel(_MainThreadEvents(), time_origin=1000)
    # Metadata events do not count, the other thread's slice does.
    self.assertEqual(0, model.bounds.min)
    self.assertEqual(600, model.bounds.max)
    self.assertEqual(1000, model.time_origin)

  def testDefaultTimeOriginKeepsTraceClock(self):
    model = model_module.BuildTraceModel(_MainThreadEvents())
    self.assertEqual(1000, model.bounds.min)
    self.assertEqual(1600, model.bounds.max)

  def testToplevelSlicesOfMainThread(self):
    model = model_module.BuildTraceModel(_MainThreadEvents(), time_origin=1000)
    self.assertEqual((1, 2), model.main_thread_id)
    toplevel = model.toplevel_slices
    self.assertEqual(2, len(toplevel))
    self.assertEqual((100, 50), (toplevel[0].start, toplevel[0].duration))
    self.assertEqual(['Layout'], [s.name for s in toplevel[0].sub_slices])
    self.assertEqual((200, 30), (toplevel[1].start, toplevel[1].duration))
    self.assertEqual(230, toplevel[1].end)

  def testFallsBackToRendererMainThreadName(self):
    events = [e for e in _MainThreadEvents()
              if e['name'] != 'TracingStartedInPage']
    self.assertEqual((1, 2), model_module.FindMainThreadId(events))

  def testNoMainThread(self):
    events = [{'name': 'Other', 'ph': 'X', 'pid': 3, 'tid': 4, 'ts': 1,
               'dur': 1}]
    with self.assertRaises(exceptions.TraceModelError):
      model_module.BuildTraceModel(events)

  def testNoTimedEvents(self):
    events = [{'name': 'thread_name', 'ph': 'M', 'pid': 1, 'tid': 2,
               'args': {'name': 'CrRendererMain'}}]
    with self.assertRaises(exceptions.TraceModelError):
      model_module.BuildTraceModel(events)

  def testUnclosedSliceEndsWithTrace(self):
    events = _MainThreadEvents() + [
        {'name': 'Task', 'ph': 'B', 'pid': 1, 'tid': 2, 'ts': 1300000}]
    model = model_module.BuildTraceModel(events, time_origin=1000)
    last = model.toplevel_slices[-1]
    self.assertEqual(300, last.start)
    self.assertEqual(600, last.end)

  def testUnmatchedEndIsIgnored(self):
    events = _MainThreadEvents() + [
        {'name': 'Task', 'ph': 'E', 'pid': 1, 'tid': 2, 'ts': 1400000}]
    model = model_module.BuildTraceModel(events, time_origin=1000)
    self.assertEqual(2, len(model.toplevel_slices))
