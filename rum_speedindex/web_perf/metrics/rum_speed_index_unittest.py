# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import logging
import unittest
from unittest import mock

from rum_speedindex.page import page_snapshot
from rum_speedindex.testing import fake_page
from rum_speedindex.web_perf.metrics import first_paint
from rum_speedindex.web_perf.metrics import rum_speed_index


class RUMSpeedIndexMetricTest(unittest.TestCase):

  def setUp(self):
    self.metric = rum_speed_index.RUMSpeedIndexMetric()

  def _TwoImagePage(self):
    # Two halves of a 10x10 viewport, painted at 100 and 300 ms.
    page = fake_page.FakePage(width=10, height=10)
    page.AddImage('http://a.com/left.png', (0, 0, 10, 5), response_end=100)
    page.AddImage('http://a.com/right.png', (0, 5, 10, 10), response_end=300)
    page.native_first_paint = 100
    return page

  def testTwoImages(self):
    value = self.metric.ComputeFromSnapshot(
        self._TwoImagePage().Snapshot(), page_url='http://a.com/')

    self.assertEqual(200, value.value)
    self.assertTrue(value.is_available)
    self.assertEqual('rum_speed_index', value.name)
    self.assertEqual('ms', value.units)
    self.assertEqual('http://a.com/', value.page_url)
    self.assertIsNone(value.none_value_reason)

  def testBackgroundOnly(self):
    page = fake_page.FakePage(width=100, height=10)
    page.native_first_paint = 50

    value = self.metric.ComputeFromSnapshot(page.Snapshot())

    self.assertEqual(50, value.value)

  def testNoRegionsAndNoViewportIsFirstPaint(self):
    page = fake_page.FakePage(width=0, height=0)
    page.native_first_paint = 75.5

    value = self.metric.ComputeFromSnapshot(page.Snapshot())

    self.assertEqual(75.5, value.value)

  def testInstantPaint(self):
    page = fake_page.FakePage(width=10, height=10)
    page.AddImage('http://a.com/all.png', (0, 0, 10, 10), response_end=0)
    page.native_first_paint = 0

    value = self.metric.ComputeFromSnapshot(page.Snapshot())

    self.assertEqual(0, value.value)
    self.assertTrue(value.is_available)

  def testCriticalResourceFallback(self):
    page = fake_page.FakePage(width=10, height=10)
    page.head_elements = [
        fake_page.Script('http://a.com/a.js'),
        fake_page.Stylesheet('http://a.com/b.css'),
    ]
    page.resource_timings = [
        fake_page.Resource('http://a.com/a.js', 120, 'script'),
        fake_page.Resource('http://a.com/b.css', 150, 'link'),
    ]

    value = self.metric.ComputeFromSnapshot(page.Snapshot())

    self.assertEqual(150, value.value)

  def testUnavailableWithoutFirstPaint(self):
    value = self.metric.ComputeFromSnapshot(
        fake_page.FakePage().Snapshot(), page_url='http://a.com/')

    self.assertIsNone(value.value)
    self.assertFalse(value.is_available)
    self.assertIn('No first paint signal', value.none_value_reason)
    self.assertEqual(
        {'name': 'rum_speed_index',
         'type': 'scalar',
         'units': 'ms',
         'important': True,
         'description': rum_speed_index.DESCRIPTION,
         'page_url': 'http://a.com/',
         'value': None,
         'none_value_reason': value.none_value_reason,
         'improvement_direction': 'down'},
        value.AsDict())

  def testProviderFailureIsUnavailable(self):
    snapshot = self._TwoImagePage().Snapshot()
    elements = mock.Mock(spec=page_snapshot.ElementStyleProvider)
    elements.IterElements.side_effect = RuntimeError('element tree is gone')

    with self.assertLogs(level='WARNING') as logs:
      value = self.metric.Compute(elements, snapshot, snapshot)

    self.assertIsNone(value.value)
    self.assertIn('element tree is gone', value.none_value_reason)
    self.assertIn('Speed Index computation failed', logs.output[0])

  def testNegativeSpeedIndexIsUnavailable(self):
    page = fake_page.FakePage(width=0, height=0)
    page.native_first_paint = -5

    with self.assertLogs(level='WARNING'):
      value = self.metric.ComputeFromSnapshot(page.Snapshot())

    self.assertIsNone(value.value)

  def testNaNFirstPaintIsUnavailable(self):
    page = fake_page.FakePage(width=10, height=10)
    page.AddImage('http://a.com/all.png', (0, 0, 10, 10), response_end=300)
    page.native_first_paint = float('nan')
    metric = rum_speed_index.RUMSpeedIndexMetric(
        strategies=(first_paint.NativeFirstPaint(),))

    value = metric.ComputeFromSnapshot(page.Snapshot())

    self.assertIsNone(value.value)
    self.assertIn('No first paint signal', value.none_value_reason)

  def testNaNFirstPaintFromSnapshotNeverReadsAsInstant(self):
    snapshot = page_snapshot.PageSnapshot.FromDict({
        'window': {'innerWidth': 10, 'innerHeight': 10},
        'timing': {'navigationStart': 1000, 'responseStart': 1020},
        'firstPaint': float('nan'),
        'elements': [
            {'tagName': 'IMG', 'src': 'http://a.com/all.png',
             'rect': {'top': 0, 'left': 0, 'bottom': 10, 'right': 10}},
        ],
    })

    value = self.metric.ComputeFromSnapshot(snapshot)

    self.assertIsNone(value.value)
    self.assertFalse(value.is_available)

  def testMalformedElementDoesNotSpoilThePage(self):
    good = {'tagName': 'IMG', 'src': 'http://a.com/good.png',
            'rect': {'top': 0, 'left': 0, 'bottom': 10, 'right': 10}}
    bad = {'tagName': 'IMG', 'src': 'http://a.com/bad.png',
           'rect': {'top': None, 'left': 0, 'bottom': 10, 'right': 10}}
    data = {
        'window': {'innerWidth': 10, 'innerHeight': 10},
        'timing': {'navigationStart': 1000, 'responseStart': 1020},
        'firstPaint': 100,
        'resources': [
            {'name': 'http://a.com/good.png', 'responseEnd': 300,
             'initiatorType': 'img'},
            {'name': 'http://a.com/bad.png', 'initiatorType': 'img'},
        ],
    }

    expected = self.metric.ComputeFromSnapshot(
        page_snapshot.PageSnapshot.FromDict(dict(data, elements=[good])))
    value = self.metric.ComputeFromSnapshot(
        page_snapshot.PageSnapshot.FromDict(dict(data, elements=[good, bad])))

    self.assertTrue(value.is_available)
    self.assertGreater(value.value, 100)
    self.assertEqual(expected.value, value.value)

  def testInvalidPageUrlRaisesBeforeReadingThePage(self):
    elements = mock.Mock(spec=page_snapshot.ElementStyleProvider)
    snapshot = self._TwoImagePage().Snapshot()

    with self.assertRaises(ValueError):
      self.metric.Compute(elements, snapshot, snapshot, page_url=42)
    self.assertFalse(elements.IterElements.called)

  def testIdempotent(self):
    snapshot = self._TwoImagePage().Snapshot()

    first = self.metric.ComputeFromSnapshot(snapshot)
    second = self.metric.ComputeFromSnapshot(snapshot)

    self.assertEqual(first, second)
    self.assertEqual(first.value, second.value)

  def testCustomStrategies(self):
    page = self._TwoImagePage()
    metric = rum_speed_index.RUMSpeedIndexMetric(
        strategies=(first_paint.VendorFirstPaint(),))

    value = metric.ComputeFromSnapshot(page.Snapshot())

    self.assertIsNone(value.value)
    self.assertIn('from vendor', value.none_value_reason)

  def testCustomBackgroundWeight(self):
    page = fake_page.FakePage(width=100, height=10)
    page.AddImage('http://a.com/a.png', (0, 0, 10, 50), response_end=300)
    page.native_first_paint = 100
    metric = rum_speed_index.RUMSpeedIndexMetric(background_weight=0)

    value = metric.ComputeFromSnapshot(page.Snapshot())

    self.assertEqual(300, value.value)

  def testLogsDebugSummary(self):
    with self.assertLogs(level=logging.DEBUG) as logs:
      self.metric.ComputeFromSnapshot(self._TwoImagePage().Snapshot())

    summary = [line for line in logs.output if 'Paint Rects' in line]
    self.assertEqual(1, len(summary))
    self.assertIn('(50) 300 - http://a.com/right.png', summary[0])
    self.assertIn('First Paint: 100', summary[0])
    self.assertIn('Speed Index: 200', summary[0])


if __name__ == '__main__':
  unittest.main()
