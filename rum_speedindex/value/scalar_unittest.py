# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import unittest

from rum_speedindex.value import improvement_direction
from rum_speedindex.value import none_values
from rum_speedindex.value import scalar


class ScalarValueTest(unittest.TestCase):

  def testAsDict(self):
    v = scalar.ScalarValue('http://a.com/', 'x', 'ms', 42.5,
                           description='answer',
                           improvement_direction=improvement_direction.DOWN)
    self.assertEqual(
        {'name': 'x', 'type': 'scalar', 'units': 'ms', 'important': True,
         'description': 'answer', 'page_url': 'http://a.com/',
         'value': 42.5, 'improvement_direction': 'down'},
        v.AsDict())
    self.assertTrue(v.is_available)

  def testAsDictWithoutPageOrDirection(self):
    v = scalar.ScalarValue(None, 'x', 'ms', 0, important=False)
    self.assertEqual(
        {'name': 'x', 'type': 'scalar', 'units': 'ms', 'important': False,
         'value': 0},
        v.AsDict())
    self.assertTrue(v.is_available)

  def testNoneValueAsDict(self):
    v = scalar.ScalarValue(None, 'x', 'ms', None, none_value_reason='because')
    d = v.AsDict()
    self.assertIsNone(d['value'])
    self.assertEqual('because', d['none_value_reason'])
    self.assertFalse(v.is_available)

  def testNoneValueNeedsReason(self):
    with self.assertRaises(none_values.NoneValueMissingReason):
      scalar.ScalarValue(None, 'x', 'ms', None)

  def testValueMustNotHaveReason(self):
    with self.assertRaises(none_values.ValueMustHaveNoneValue):
      scalar.ScalarValue(None, 'x', 'ms', 1, none_value_reason='because')

  def testEquality(self):
    self.assertEqual(scalar.ScalarValue(None, 'x', 'ms', 1.5),
                     scalar.ScalarValue(None, 'x', 'ms', 1.5))
    self.assertNotEqual(scalar.ScalarValue(None, 'x', 'ms', 1.5),
                        scalar.ScalarValue(None, 'x', 'ms', 2))


class ValueTest(unittest.TestCase):

  def testRejectsBadFields(self):
    with self.assertRaises(ValueError):
      scalar.ScalarValue(None, 3, 'ms', 1)
    with self.assertRaises(ValueError):
      scalar.ScalarValue(None, 'x', None, 1)
    with self.assertRaises(ValueError):
      scalar.ScalarValue(None, 'x', 'ms', 1, important='yes')
    with self.assertRaises(ValueError):
      scalar.ScalarValue(None, 'x', 'ms', 1, description=7)
    with self.assertRaises(ValueError):
      scalar.ScalarValue(object(), 'x', 'ms', 1)


if __name__ == '__main__':
  unittest.main()
