# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import json
import math
import unittest

from pyfakefs import fake_filesystem_unittest

from rum_speedindex.core import exceptions
from rum_speedindex.page import page_snapshot


SNAPSHOT = {
    'window': {'innerWidth': 1280, 'innerHeight': 800},
    'document': {'clientWidth': 1265, 'clientHeight': 2400},
    'timing': {'navigationStart': 1000, 'responseStart': 1085},
    'firstPaint': None,
    'loadTimes': {'firstPaintTime': 10.5, 'startLoadTime': 10.0,
                  'requestTime': None},
    'elements': [
        {'tagName': 'img', 'src': 'http://a.com/logo.png',
         'rect': {'top': 10, 'left': 20, 'bottom': 60, 'right': 220},
         'backgroundImage': 'none'},
        {'tagName': 'DIV', 'src': '',
         'rect': None,
         'backgroundImage': 'url("http://a.com/bg.png")'},
    ],
    'head': [
        {'tagName': 'script', 'src': 'http://a.com/a.js', 'async': False},
        {'tagName': 'link', 'href': 'http://a.com/b.css', 'rel': 'stylesheet'},
    ],
    'resources': [
        {'name': 'http://a.com/a.js', 'responseEnd': 120,
         'initiatorType': 'script'},
    ],
}


class RectTest(unittest.TestCase):

  def testDimensions(self):
    rect = page_snapshot.Rect(top=10, left=20, bottom=60, right=220)
    self.assertEqual(200, rect.width)
    self.assertEqual(50, rect.height)
    self.assertEqual(10000, rect.area)


class PageSnapshotTest(unittest.TestCase):

  def testFromDict(self):
    snapshot = page_snapshot.PageSnapshot.FromDict(SNAPSHOT)

    elements = list(snapshot.IterElements())
    self.assertEqual(2, len(elements))
    self.assertEqual('IMG', elements[0].tag_name)
    self.assertEqual(page_snapshot.Rect(10, 20, 60, 220), elements[0].rect)
    self.assertIsNone(elements[1].src)
    self.assertIsNone(elements[1].rect)

    head = snapshot.GetHeadElements()
    self.assertEqual(['SCRIPT', 'LINK'], [el.tag_name for el in head])
    self.assertFalse(head[0].is_async)
    self.assertEqual('stylesheet', head[1].rel)

    self.assertEqual((1280, 800), snapshot.GetWindowSize())
    self.assertEqual((1265, 2400), snapshot.GetDocumentSize())
    self.assertEqual(85, snapshot.GetResponseStart())
    self.assertIsNone(snapshot.GetNativeFirstPaint())
    self.assertEqual(
        page_snapshot.VendorLoadTimes(10.5, 10.0, None),
        snapshot.GetVendorLoadTimes())
    self.assertEqual(
        [page_snapshot.ResourceTiming('http://a.com/a.js', 120, 'script')],
        snapshot.GetResourceTimings())

  def testMinimalSnapshot(self):
    snapshot = page_snapshot.PageSnapshot.FromDict({'timing': {}})

    self.assertEqual([], list(snapshot.IterElements()))
    self.assertEqual([], snapshot.GetHeadElements())
    self.assertEqual((0, 0), snapshot.GetWindowSize())
    self.assertIsNone(snapshot.GetResponseStart())
    self.assertIsNone(snapshot.GetVendorLoadTimes())
    self.assertEqual([], snapshot.GetResourceTimings())

  def testMissingTiming(self):
    with self.assertRaises(exceptions.SnapshotError) as cm:
      page_snapshot.PageSnapshot.FromDict({'elements': []})
    self.assertIn("snapshot keys ['elements']", str(cm.exception))

  def testTimingNotADict(self):
    with self.assertRaises(exceptions.SnapshotError):
      page_snapshot.PageSnapshot.FromDict({'timing': 'navigationStart=1000'})

  def testResourceWithoutResponseEnd(self):
    data = dict(SNAPSHOT, resources=[
        {'name': 'http://a.com/a.js', 'initiatorType': 'script'},
        {'name': 'http://a.com/b.css', 'responseEnd': 'soon',
         'initiatorType': 'link'},
        {'name': 'http://a.com/c.png', 'responseEnd': 300,
         'initiatorType': 'img'},
    ])

    snapshot = page_snapshot.PageSnapshot.FromDict(data)

    self.assertEqual(
        [page_snapshot.ResourceTiming('http://a.com/a.js', 0, 'script'),
         page_snapshot.ResourceTiming('http://a.com/b.css', 0, 'link'),
         page_snapshot.ResourceTiming('http://a.com/c.png', 300, 'img')],
        snapshot.GetResourceTimings())

  def testMalformedRect(self):
    data = dict(SNAPSHOT, elements=[
        {'tagName': 'IMG', 'src': 'http://a.com/a.png',
         'rect': {'top': None, 'left': 0, 'bottom': 10, 'right': 10}},
        {'tagName': 'IMG', 'src': 'http://a.com/b.png',
         'rect': {'left': 0, 'bottom': 10, 'right': 10}},
        {'tagName': 'IMG', 'src': 'http://a.com/c.png',
         'rect': {'top': 0, 'left': 0, 'bottom': 10, 'right': 10}},
    ])

    elements = list(page_snapshot.PageSnapshot.FromDict(data).IterElements())

    self.assertEqual(['http://a.com/a.png', 'http://a.com/b.png',
                      'http://a.com/c.png'], [el.src for el in elements])
    self.assertIsNone(elements[0].rect)
    self.assertIsNone(elements[1].rect)
    self.assertEqual(page_snapshot.Rect(0, 0, 10, 10), elements[2].rect)

  def testEntriesThatAreNotObjectsAreSkipped(self):
    data = dict(SNAPSHOT,
                elements=[None, 'IMG', SNAPSHOT['elements'][0]],
                head=[42, SNAPSHOT['head'][0]],
                resources=[[], SNAPSHOT['resources'][0]])

    snapshot = page_snapshot.PageSnapshot.FromDict(data)

    self.assertEqual(['IMG'], [el.tag_name for el in snapshot.IterElements()])
    self.assertEqual(['SCRIPT'],
                     [el.tag_name for el in snapshot.GetHeadElements()])
    self.assertEqual(1, len(snapshot.GetResourceTimings()))

  def testNaNFirstPaintIsKept(self):
    data = dict(SNAPSHOT, firstPaint=float('nan'))
    snapshot = page_snapshot.PageSnapshot.FromDict(data)
    self.assertTrue(math.isnan(snapshot.GetNativeFirstPaint()))

  def testNotADict(self):
    with self.assertRaises(exceptions.SnapshotError):
      page_snapshot.PageSnapshot.FromDict(None)

  def testProvidersReturnCopies(self):
    snapshot = page_snapshot.PageSnapshot.FromDict(SNAPSHOT)
    snapshot.GetResourceTimings().clear()
    self.assertEqual(1, len(snapshot.GetResourceTimings()))


class PageSnapshotFileTest(fake_filesystem_unittest.TestCase):

  def setUp(self):
    self.setUpPyfakefs()

  def testFromFile(self):
    self.fs.create_file('/snapshots/page.json', contents=json.dumps(SNAPSHOT))

    snapshot = page_snapshot.PageSnapshot.FromFile('/snapshots/page.json')

    self.assertEqual(85, snapshot.GetResponseStart())
    self.assertEqual(2, len(list(snapshot.IterElements())))

  def testInvalidJson(self):
    self.fs.create_file('/snapshots/page.json', contents='{"timing": ')

    with self.assertRaises(exceptions.SnapshotError) as cm:
      page_snapshot.PageSnapshot.FromFile('/snapshots/page.json')
    self.assertIn('not valid JSON', str(cm.exception))

  def testMissingFile(self):
    with self.assertRaises(IOError):
      page_snapshot.PageSnapshot.FromFile('/snapshots/missing.json')


if __name__ == '__main__':
  unittest.main()
