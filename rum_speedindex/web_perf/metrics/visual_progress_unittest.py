# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import unittest

from rum_speedindex.page import page_snapshot
from rum_speedindex.web_perf.metrics import timing_resolver
from rum_speedindex.web_perf.metrics import visual_progress


def _Region(area, paint_time, url='http://a.com/x.png'):
  return timing_resolver.ResolvedRegion(
      url=url, area=area, rect=page_snapshot.Rect(0, 0, 1, area),
      paint_time=paint_time)


def _Geometry(width, height):
  return page_snapshot.PageSnapshot(
      window_size=(width, height), document_size=(width, height))


class BuildVisualProgressTest(unittest.TestCase):

  def testTwoBuckets(self):
    # 10x10 viewport, fully covered by the two regions.
    progress = visual_progress.BuildVisualProgress(
        [_Region(50, 100), _Region(50, 300)], 100, _Geometry(10, 10))

    self.assertEqual(
        [(100, 50, 0.5), (300, 50, 1.0)],
        [tuple(p) for p in progress])

  def testRegionsCannotPaintBeforeFirstPaint(self):
    progress = visual_progress.BuildVisualProgress(
        [_Region(30, 0), _Region(30, 40), _Region(40, 250)], 100,
        _Geometry(10, 10))

    self.assertEqual([100, 250], [p.time for p in progress])
    self.assertEqual([60, 40], [p.area_at_time for p in progress])

  def testBackgroundOnly(self):
    progress = visual_progress.BuildVisualProgress([], 50, _Geometry(100, 10))

    self.assertEqual(1, len(progress))
    self.assertEqual(50, progress[0].time)
    self.assertAlmostEqual(100, progress[0].area_at_time)
    self.assertEqual(1.0, progress[0].cumulative_progress)

  def testBackgroundBucketCreatedAtFirstPaint(self):
    # 1000 pixels, 200 covered by a late region: 80 pixels of background.
    progress = visual_progress.BuildVisualProgress(
        [_Region(200, 500)], 50, _Geometry(100, 10))

    self.assertEqual([50, 500], [p.time for p in progress])
    self.assertAlmostEqual(80, progress[0].area_at_time)
    self.assertAlmostEqual(80.0 / 280, progress[0].cumulative_progress)
    self.assertEqual(1.0, progress[1].cumulative_progress)

  def testUsesLargerOfWindowAndDocumentSize(self):
    geometry = page_snapshot.PageSnapshot(
        window_size=(100, 5), document_size=(50, 10))
    self.assertEqual(1000, visual_progress.GetViewportPixels(geometry))

  def testCustomBackgroundWeight(self):
    progress = visual_progress.BuildVisualProgress(
        [_Region(500, 300)], 100, _Geometry(100, 10), background_weight=0.5)

    self.assertAlmostEqual(250, progress[0].area_at_time)
    self.assertAlmostEqual(250.0 / 750, progress[0].cumulative_progress)

  def testInstantPaint(self):
    progress = visual_progress.BuildVisualProgress(
        [_Region(60, 0), _Region(40, 0)], 0, _Geometry(10, 10))

    self.assertEqual([(0, 100, 1.0)], [tuple(p) for p in progress])

  def testNothingPainted(self):
    self.assertEqual([], visual_progress.BuildVisualProgress(
        [], 100, _Geometry(0, 0)))

  def testNoViewportStillCountsRegions(self):
    progress = visual_progress.BuildVisualProgress(
        [_Region(10, 200)], 100, _Geometry(0, 0))

    self.assertEqual([(200, 10, 1.0)], [tuple(p) for p in progress])

  def testMonotonicAndEndsAtOne(self):
    regions = [_Region(0.1, t) for t in range(0, 1000, 7)]
    progress = visual_progress.BuildVisualProgress(
        regions, 35, _Geometry(123, 45))

    self.assertTrue(visual_progress.IsMonotonic(progress))
    self.assertEqual(1.0, progress[-1].cumulative_progress)
    for point in progress:
      self.assertGreater(point.cumulative_progress, 0)
      self.assertLessEqual(point.cumulative_progress, 1.0)


class IsMonotonicTest(unittest.TestCase):

  def testMonotonic(self):
    P = visual_progress.ProgressPoint
    self.assertTrue(visual_progress.IsMonotonic([]))
    self.assertTrue(visual_progress.IsMonotonic(
        [P(0, 1, 0.5), P(10, 0, 0.5), P(20, 1, 1.0)]))

  def testNotMonotonic(self):
    P = visual_progress.ProgressPoint
    self.assertFalse(visual_progress.IsMonotonic(
        [P(0, 1, 0.7), P(10, 1, 0.5)]))
    self.assertFalse(visual_progress.IsMonotonic(
        [P(10, 1, 0.5), P(10, 1, 1.0)]))


if __name__ == '__main__':
  unittest.main()
