# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.


class Error(Exception):
  """Base class for RUM Speed Index exceptions."""

  def __init__(self, msg=''):
    super().__init__(msg)
    self._debugging_messages = []

  def AddDebuggingMessage(self, msg):
    """Records what was being read from the page when this happened.

    Messages are appended to str(error) in the order they were added.
    """
    self._debugging_messages.append(msg)

  def __str__(self):
    output = super().__str__()
    if self._debugging_messages:
      output += ' (%s)' % '; '.join(self._debugging_messages)
    return output


class SnapshotError(Error):
  """The page snapshot is missing data or has data of the wrong shape."""


class FirstPaintUnavailableError(Error):
  """No first paint signal could be resolved for the page.

  Without a first paint estimate the visual progress curve has no anchor, so
  the Speed Index cannot be computed at all.
  """
