# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import unittest

from rum_speedindex.page import page_snapshot
from rum_speedindex.testing import fake_page
from rum_speedindex.web_perf.metrics import region_collector


class GetElementViewportRectTest(unittest.TestCase):

  def testRectInsideViewportIsUnchanged(self):
    rect = page_snapshot.Rect(top=1, left=2, bottom=5, right=8)
    self.assertEqual(
        rect, region_collector.GetElementViewportRect(rect, 100, 10))

  def testRectIsClippedToViewport(self):
    rect = page_snapshot.Rect(top=-5, left=-5, bottom=20, right=50)
    clipped = region_collector.GetElementViewportRect(rect, 100, 10)
    self.assertEqual(page_snapshot.Rect(0, 0, 10, 50), clipped)
    self.assertEqual(500, clipped.area)

  def testOffscreenRect(self):
    below = page_snapshot.Rect(top=20, left=0, bottom=30, right=10)
    right = page_snapshot.Rect(top=0, left=100, bottom=10, right=120)
    self.assertIsNone(region_collector.GetElementViewportRect(below, 100, 10))
    self.assertIsNone(region_collector.GetElementViewportRect(right, 100, 10))

  def testCollapsedRect(self):
    rect = page_snapshot.Rect(top=5, left=0, bottom=5, right=10)
    self.assertIsNone(region_collector.GetElementViewportRect(rect, 100, 10))

  def testNoLayoutBox(self):
    self.assertIsNone(region_collector.GetElementViewportRect(None, 100, 10))

  def testNaNCoordinatesAreRejected(self):
    nan = float('nan')
    for rect in (page_snapshot.Rect(nan, 0, 10, 10),
                 page_snapshot.Rect(0, 0, 10, nan)):
      self.assertIsNone(
          region_collector.GetElementViewportRect(rect, 100, 10))


class ParseBackgroundImageUrlTest(unittest.TestCase):

  def testQuotedUrl(self):
    self.assertEqual(
        'http://a.com/b.png',
        region_collector.ParseBackgroundImageUrl('url("http://a.com/b.png")'))
    self.assertEqual(
        'https://a.com/b.png',
        region_collector.ParseBackgroundImageUrl("url('https://a.com/b.png')"))

  def testUnquotedUrl(self):
    self.assertEqual(
        'http://a.com/b.png',
        region_collector.ParseBackgroundImageUrl('URL(http://a.com/b.png)'))

  def testFirstOfSeveralLayers(self):
    self.assertEqual(
        'http://a.com/1.png',
        region_collector.ParseBackgroundImageUrl(
            'url("http://a.com/1.png"), url("http://a.com/2.png")'))

  def testNoAbsoluteUrl(self):
    for value in ('none', '', None, 'url("/relative.png")',
                  'url(data:image/png;base64,AAAA)',
                  'linear-gradient(red, blue)'):
      self.assertIsNone(region_collector.ParseBackgroundImageUrl(value), value)


class CollectRegionsTest(unittest.TestCase):

  def testImagesAndBackgrounds(self):
    page = fake_page.FakePage(width=100, height=10)
    page.AddImage('http://a.com/img.png', (0, 0, 10, 10))
    page.AddBackground('http://a.com/bg.png', (0, 10, 5, 30))
    snapshot = page.Snapshot()

    regions = region_collector.CollectRegions(snapshot, snapshot)

    self.assertEqual(
        [('http://a.com/img.png', 100), ('http://a.com/bg.png', 100)],
        [(r.url, r.area) for r in regions])

  def testImageWithBackgroundYieldsTwoRegions(self):
    element = page_snapshot.Element(
        tag_name='IMG', src='http://a.com/img.png',
        rect=page_snapshot.Rect(0, 0, 10, 10),
        background_image='url(http://a.com/bg.png)')
    snapshot = page_snapshot.PageSnapshot(
        elements=[element], window_size=(100, 10))

    regions = region_collector.CollectRegions(snapshot, snapshot)

    self.assertEqual(['http://a.com/img.png', 'http://a.com/bg.png'],
                     [r.url for r in regions])

  def testOverlappingRegionsAreAllCounted(self):
    page = fake_page.FakePage(width=100, height=10)
    page.AddImage('http://a.com/1.png', (0, 0, 10, 10))
    page.AddImage('http://a.com/2.png', (0, 0, 10, 10))
    snapshot = page.Snapshot()

    regions = region_collector.CollectRegions(snapshot, snapshot)

    self.assertEqual(200, sum(r.area for r in regions))

  def testSkipsImagesWithoutSourceAndOffscreenElements(self):
    page = fake_page.FakePage(width=100, height=10)
    page.AddImage('', (0, 0, 10, 10))
    page.AddImage('http://a.com/below.png', (50, 0, 60, 10))
    page.elements.append(page_snapshot.Element(
        tag_name='DIV', src=None, rect=page_snapshot.Rect(0, 0, 10, 10),
        background_image='none'))
    snapshot = page.Snapshot()

    self.assertEqual([], region_collector.CollectRegions(snapshot, snapshot))

  def testSrcOnNonImageElementIsIgnored(self):
    element = page_snapshot.Element(
        tag_name='IFRAME', src='http://a.com/frame.html',
        rect=page_snapshot.Rect(0, 0, 10, 10), background_image=None)
    snapshot = page_snapshot.PageSnapshot(
        elements=[element], window_size=(100, 10))

    self.assertEqual([], region_collector.CollectRegions(snapshot, snapshot))

  def testMalformedRectIsSkipped(self):
    page = fake_page.FakePage(width=100, height=10)
    page.elements.append(page_snapshot.Element(
        tag_name='IMG', src='http://a.com/bad.png',
        rect=page_snapshot.Rect(None, 0, 10, 10), background_image=None))
    page.AddImage('http://a.com/good.png', (0, 0, 10, 10))
    snapshot = page.Snapshot()

    regions = region_collector.CollectRegions(snapshot, snapshot)

    self.assertEqual(['http://a.com/good.png'], [r.url for r in regions])

  def testViewportFallsBackToDocumentSize(self):
    snapshot = page_snapshot.PageSnapshot(
        elements=[fake_page.Image('http://a.com/img.png', 0, 0, 100, 100)],
        window_size=(0, 0), document_size=(20, 10))

    regions = region_collector.CollectRegions(snapshot, snapshot)

    self.assertEqual(1, len(regions))
    self.assertEqual(page_snapshot.Rect(0, 0, 10, 20), regions[0].rect)
    self.assertEqual(200, regions[0].area)


if __name__ == '__main__':
  unittest.main()
