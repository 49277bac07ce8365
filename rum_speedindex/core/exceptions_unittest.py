# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
import unittest

from rum_speedindex.core import exceptions


class ErrorTest(unittest.TestCase):

  def testDebuggingMessages(self):
    error = exceptions.SnapshotError('bad snapshot')
    error.AddDebuggingMessage('looking at elements')
    error.AddDebuggingMessage("snapshot keys ['timing']")
    self.assertEqual(
        "bad snapshot (looking at elements; snapshot keys ['timing'])",
        str(error))

  def testWithoutDebuggingMessages(self):
    self.assertEqual('no paint',
                     str(exceptions.FirstPaintUnavailableError('no paint')))

  def testHierarchy(self):
    self.assertTrue(issubclass(exceptions.SnapshotError, exceptions.Error))
    self.assertTrue(
        issubclass(exceptions.FirstPaintUnavailableError, exceptions.Error))


if __name__ == '__main__':
  unittest.main()
