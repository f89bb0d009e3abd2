# Copyright 2016 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import unittest

from time_to_interactive.timeline import bounds


class BoundsTests(unittest.TestCase):

  def testGetOverlap(self):
    # Non overlap cases.
    self.assertEqual(0, bounds.Bounds.GetOverlap(10, 20, 30, 40))
    self.assertEqual(0, bounds.Bounds.GetOverlap(30, 40, 10, 20))
    # Overlap cases.
    self.assertEqual(10, bounds.Bounds.GetOverlap(10, 30, 20, 40))
    self.assertEqual(10, bounds.Bounds.GetOverlap(20, 40, 10, 30))
    # Inclusive cases.
    self.assertEqual(10, bounds.Bounds.GetOverlap(10, 40, 20, 30))
    self.assertEqual(10, bounds.Bounds.GetOverlap(20, 30, 10, 40))

  def testEmpty(self):
    b = bounds.Bounds()
    self.assertTrue(b.is_empty)
    self.assertIsNone(b.min)
    self.assertIsNone(b.max)
    self.assertEqual(0, b.duration)

  def testAddValue(self):
    b = bounds.Bounds()
    b.AddValue(5)
    b.AddValue(-2.5)
    b.AddValue(3)
    self.assertFalse(b.is_empty)
    self.assertEqual(-2.5, b.min)
    self.assertEqual(5, b.max)
    self.assertEqual(7.5, b.duration)

