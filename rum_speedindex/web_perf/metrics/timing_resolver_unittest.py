# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import unittest

from rum_speedindex.page import page_snapshot
from rum_speedindex.testing import fake_page
from rum_speedindex.web_perf.metrics import region_collector
from rum_speedindex.web_perf.metrics import timing_resolver


def _Region(url, area=10):
  return region_collector.Region(
      url=url, area=area, rect=page_snapshot.Rect(0, 0, 1, area))


class ResolveRegionTimingsTest(unittest.TestCase):

  def testExactMatch(self):
    resolved = timing_resolver.ResolveRegionTimings(
        [_Region('http://a.com/1.png'), _Region('http://a.com/2.png')],
        [fake_page.Resource('http://a.com/2.png', 250.5),
         fake_page.Resource('http://a.com/1.png', 120)])

    self.assertEqual([120, 250.5], [r.paint_time for r in resolved])
    self.assertEqual('http://a.com/1.png', resolved[0].url)
    self.assertEqual(10, resolved[0].area)

  def testUnmatchedUrlPaintsAtZero(self):
    resolved = timing_resolver.ResolveRegionTimings(
        [_Region('http://a.com/1.png')],
        [fake_page.Resource('http://a.com/1.png?v=2', 120),
         fake_page.Resource('http://a.com/1', 130)])

    self.assertEqual([0], [r.paint_time for r in resolved])

  def testLastDuplicateWins(self):
    resolved = timing_resolver.ResolveRegionTimings(
        [_Region('http://a.com/1.png')],
        [fake_page.Resource('http://a.com/1.png', 120),
         fake_page.Resource('http://a.com/1.png', 480)])

    self.assertEqual([480], [r.paint_time for r in resolved])

  def testNaNResponseEndPaintsAtZero(self):
    resolved = timing_resolver.ResolveRegionTimings(
        [_Region('http://a.com/1.png')],
        [fake_page.Resource('http://a.com/1.png', float('nan'))])

    self.assertEqual([0], [r.paint_time for r in resolved])

  def testNoRegions(self):
    self.assertEqual([], timing_resolver.ResolveRegionTimings(
        [], [fake_page.Resource('http://a.com/1.png', 120)]))


if __name__ == '__main__':
  unittest.main()
