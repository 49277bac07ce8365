# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import unittest

from rum_speedindex.web_perf.metrics import speed_index
from rum_speedindex.web_perf.metrics import visual_progress


P = visual_progress.ProgressPoint


class CalculateSpeedIndexTest(unittest.TestCase):

  def testTwoBuckets(self):
    # 100 ms at 0% then 200 ms at 50%.
    progress = [P(100, 50, 0.5), P(300, 50, 1.0)]
    self.assertEqual(200, speed_index.CalculateSpeedIndex(progress, 100))

  def testInstantPaint(self):
    self.assertEqual(0, speed_index.CalculateSpeedIndex([P(0, 100, 1.0)], 0))

  def testSinglePoint(self):
    self.assertEqual(50, speed_index.CalculateSpeedIndex([P(50, 100, 1.0)], 50))

  def testEmptyProgressIsFirstPaint(self):
    self.assertEqual(340.5, speed_index.CalculateSpeedIndex([], 340.5))

  def testNothingAddedOnceComplete(self):
    progress = [P(100, 10, 1.0), P(400, 0, 1.0)]
    self.assertEqual(100, speed_index.CalculateSpeedIndex(progress, 100))

  def testMatchesHandComputedCurve(self):
    # 0% complete for 100 ms then 90% complete for 900 ms.
    progress = [P(100, 90, 0.9), P(1000, 10, 1.0)]
    self.assertAlmostEqual(
        190, speed_index.CalculateSpeedIndex(progress, 100))

  def testNotRounded(self):
    progress = [P(10.5, 1, 0.25), P(20.25, 3, 1.0)]
    self.assertAlmostEqual(
        10.5 + 9.75 * 0.75, speed_index.CalculateSpeedIndex(progress, 10.5))


if __name__ == '__main__':
  unittest.main()
