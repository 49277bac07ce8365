# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import unittest
from unittest import mock

from rum_speedindex.core import exceptions
from rum_speedindex.page import page_snapshot
from rum_speedindex.testing import fake_page
from rum_speedindex.web_perf.metrics import first_paint


def _LoadTimes(first_paint_time, start_load_time=None, request_time=None):
  return page_snapshot.VendorLoadTimes(
      first_paint_time=first_paint_time,
      start_load_time=start_load_time,
      request_time=request_time)


class NativeFirstPaintTest(unittest.TestCase):

  def testReturnsBrowserValue(self):
    page = fake_page.FakePage()
    page.native_first_paint = 230.5
    snapshot = page.Snapshot()
    self.assertEqual(
        230.5, first_paint.NativeFirstPaint().Estimate(snapshot, snapshot))

  def testNoSignal(self):
    snapshot = fake_page.FakePage().Snapshot()
    self.assertIsNone(first_paint.NativeFirstPaint().Estimate(
        snapshot, snapshot))


class VendorFirstPaintTest(unittest.TestCase):

  def Estimate(self, load_times):
    page = fake_page.FakePage()
    page.vendor_load_times = load_times
    snapshot = page.Snapshot()
    return first_paint.VendorFirstPaint().Estimate(snapshot, snapshot)

  def testRelativeToStartLoad(self):
    self.assertAlmostEqual(
        500, self.Estimate(_LoadTimes(10.5, start_load_time=10.0)))

  def testFallsBackToRequestTime(self):
    self.assertAlmostEqual(
        300, self.Estimate(_LoadTimes(10.5, request_time=10.2)))

  def testStartLoadPreferredOverRequestTime(self):
    self.assertAlmostEqual(
        250, self.Estimate(_LoadTimes(10.5, start_load_time=10.25,
                                      request_time=10.4)))

  def testPaintBeforeReferenceIsRejected(self):
    self.assertIsNone(self.Estimate(_LoadTimes(9.0, start_load_time=10.0)))

  def testNonPositivePaintIsRejected(self):
    self.assertIsNone(self.Estimate(_LoadTimes(0, start_load_time=0)))
    self.assertIsNone(self.Estimate(_LoadTimes(None, start_load_time=10.0)))

  def testZeroReferenceIsAdmitted(self):
    self.assertAlmostEqual(
        10500, self.Estimate(_LoadTimes(10.5, start_load_time=0)))

  def testNoReference(self):
    self.assertIsNone(self.Estimate(_LoadTimes(10.5)))

  def testNoLoadTimes(self):
    self.assertIsNone(self.Estimate(None))


class CriticalResourcesFirstPaintTest(unittest.TestCase):

  def setUp(self):
    self.page = fake_page.FakePage()
    self.page.head_elements = [
        fake_page.Script('http://a.com/a.js'),
        fake_page.Stylesheet('http://a.com/b.css'),
        fake_page.Script('http://a.com/c.js', is_async=True),
    ]

  def Estimate(self):
    snapshot = self.page.Snapshot()
    return first_paint.CriticalResourcesFirstPaint().Estimate(
        snapshot, snapshot)

  def testCriticalChainStopsAtFirstNonCriticalResource(self):
    self.page.resource_timings = [
        fake_page.Resource('http://a.com/a.js', 120, 'script'),
        fake_page.Resource('http://a.com/b.css', 150, 'link'),
        fake_page.Resource('http://a.com/c.js', 90, 'script'),
    ]
    self.assertEqual(150, self.Estimate())

  def testCriticalResourcesAfterNonCriticalAreIgnored(self):
    self.page.resource_timings = [
        fake_page.Resource('http://a.com/a.js', 120, 'script'),
        fake_page.Resource('http://a.com/logo.png', 130, 'img'),
        fake_page.Resource('http://a.com/b.css', 150, 'link'),
    ]
    self.assertEqual(120, self.Estimate())

  def testWrongInitiatorTypeEndsTheWalk(self):
    self.page.resource_timings = [
        fake_page.Resource('http://a.com/a.js', 120, 'other'),
        fake_page.Resource('http://a.com/b.css', 150, 'link'),
    ]
    self.assertEqual(20, self.Estimate())

  def testNeverEarlierThanResponseStart(self):
    self.page.resource_timings = [
        fake_page.Resource('http://a.com/a.js', 5, 'script'),
    ]
    self.assertEqual(20, self.Estimate())

  def testResponseStartWithHeadButNoResources(self):
    self.assertEqual(20, self.Estimate())

  def testNoNavigationTiming(self):
    self.page.response_start = None
    self.page.resource_timings = [
        fake_page.Resource('http://a.com/a.js', 120, 'script'),
    ]
    self.assertIsNone(self.Estimate())

  def testNothingToWalk(self):
    self.page.head_elements = []
    self.assertIsNone(self.Estimate())

  def testGetCriticalUrls(self):
    head = [
        fake_page.Script('http://a.com/a.js'),
        fake_page.Script('http://a.com/c.js', is_async=True),
        fake_page.Script(None),
        fake_page.Stylesheet('http://a.com/b.css'),
        page_snapshot.HeadElement(tag_name='LINK', src=None,
                                  href='http://a.com/icon.png',
                                  is_async=False, rel='icon'),
        page_snapshot.HeadElement(tag_name='META', src=None, href=None,
                                  is_async=False, rel=None),
    ]
    self.assertEqual({'http://a.com/a.js', 'http://a.com/b.css'},
                     first_paint.GetCriticalUrls(head))


class EstimateFirstPaintTest(unittest.TestCase):

  def testNativeWinsOverEverythingElse(self):
    page = fake_page.FakePage()
    page.native_first_paint = 80
    page.vendor_load_times = _LoadTimes(10.5, start_load_time=10.0)
    page.head_elements = [fake_page.Script('http://a.com/a.js')]
    snapshot = page.Snapshot()

    self.assertEqual(80, first_paint.EstimateFirstPaint(snapshot, snapshot))

  def testVendorWinsOverCriticalResources(self):
    page = fake_page.FakePage()
    page.vendor_load_times = _LoadTimes(10.5, start_load_time=10.0)
    page.head_elements = [fake_page.Script('http://a.com/a.js')]
    snapshot = page.Snapshot()

    self.assertAlmostEqual(
        500, first_paint.EstimateFirstPaint(snapshot, snapshot))

  def testRejectedVendorSignalFallsThrough(self):
    page = fake_page.FakePage()
    page.vendor_load_times = _LoadTimes(9.0, start_load_time=10.0)
    page.head_elements = [fake_page.Script('http://a.com/a.js')]
    page.resource_timings = [
        fake_page.Resource('http://a.com/a.js', 120, 'script')]
    snapshot = page.Snapshot()

    self.assertEqual(120, first_paint.EstimateFirstPaint(snapshot, snapshot))

  def testStopsAtFirstResolvedStrategy(self):
    first = mock.Mock(spec=first_paint.FirstPaintStrategy)
    first.name = 'first'
    first.Estimate.return_value = None
    second = mock.Mock(spec=first_paint.FirstPaintStrategy)
    second.name = 'second'
    second.Estimate.return_value = 42
    third = mock.Mock(spec=first_paint.FirstPaintStrategy)
    third.name = 'third'

    self.assertEqual(42, first_paint.EstimateFirstPaint(
        mock.sentinel.elements, mock.sentinel.timing, (first, second, third)))
    first.Estimate.assert_called_once_with(
        mock.sentinel.elements, mock.sentinel.timing)
    self.assertFalse(third.Estimate.called)

  def testZeroIsAResolvedSignal(self):
    page = fake_page.FakePage()
    page.native_first_paint = 0
    snapshot = page.Snapshot()

    self.assertEqual(0, first_paint.EstimateFirstPaint(snapshot, snapshot))

  def testNaNNativeFirstPaintFallsThrough(self):
    page = fake_page.FakePage()
    page.native_first_paint = float('nan')
    page.vendor_load_times = _LoadTimes(10.5, start_load_time=10.0)
    snapshot = page.Snapshot()

    self.assertAlmostEqual(
        500, first_paint.EstimateFirstPaint(snapshot, snapshot))

  def testNonFiniteFirstPaintIsNoSignal(self):
    for bad_value in (float('nan'), float('inf'), float('-inf')):
      page = fake_page.FakePage()
      page.native_first_paint = bad_value
      snapshot = page.Snapshot()

      with self.assertRaises(exceptions.FirstPaintUnavailableError):
        first_paint.EstimateFirstPaint(
            snapshot, snapshot, (first_paint.NativeFirstPaint(),))

  def testNaNFromVendorClockIsNoSignal(self):
    page = fake_page.FakePage()
    page.vendor_load_times = _LoadTimes(float('nan'), start_load_time=10.0)
    snapshot = page.Snapshot()

    with self.assertRaises(exceptions.FirstPaintUnavailableError):
      first_paint.EstimateFirstPaint(
          snapshot, snapshot, (first_paint.VendorFirstPaint(),))

  def testExhaustedChainRaises(self):
    snapshot = fake_page.FakePage().Snapshot()

    with self.assertRaises(exceptions.FirstPaintUnavailableError) as cm:
      first_paint.EstimateFirstPaint(snapshot, snapshot)
    self.assertIn('native, vendor, critical_resources', str(cm.exception))


if __name__ == '__main__':
  unittest.main()
