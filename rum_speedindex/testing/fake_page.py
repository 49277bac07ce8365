# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Builders for synthetic page snapshots used in unittests."""

from rum_speedindex.page import page_snapshot


def Image(src, top, left, bottom, right):
  return page_snapshot.Element(
      tag_name='IMG', src=src,
      rect=page_snapshot.Rect(top, left, bottom, right),
      background_image='none')


def Background(url, top, left, bottom, right, tag_name='DIV'):
  return page_snapshot.Element(
      tag_name=tag_name, src=None,
      rect=page_snapshot.Rect(top, left, bottom, right),
      background_image='url("%s")' % url)


def Script(src, is_async=False):
  return page_snapshot.HeadElement(
      tag_name='SCRIPT', src=src, href=None, is_async=is_async, rel=None)


def Stylesheet(href):
  return page_snapshot.HeadElement(
      tag_name='LINK', src=None, href=href, is_async=False, rel='stylesheet')


def Resource(name, response_end, initiator_type='img'):
  return page_snapshot.ResourceTiming(
      name=name, response_end=response_end, initiator_type=initiator_type)


class FakePage(object):
  """Accumulates page state and turns it into a PageSnapshot.

  Defaults to a 100x10 viewport, navigation starting at 1000 and the first
  byte arriving 20 ms later.
  """

  def __init__(self, width=100, height=10):
    self.elements = []
    self.head_elements = []
    self.resource_timings = []
    self.window_size = (width, height)
    self.document_size = (width, height)
    self.navigation_start = 1000.0
    self.response_start = 1020.0
    self.native_first_paint = None
    self.vendor_load_times = None

  def AddImage(self, src, rect, response_end=None):
    self.elements.append(Image(src, *rect))
    if response_end is not None:
      self.resource_timings.append(Resource(src, response_end))

  def AddBackground(self, url, rect, response_end=None):
    self.elements.append(Background(url, *rect))
    if response_end is not None:
      self.resource_timings.append(Resource(url, response_end, 'css'))

  def Snapshot(self):
    return page_snapshot.PageSnapshot(
        elements=self.elements,
        head_elements=self.head_elements,
        window_size=self.window_size,
        document_size=self.document_size,
        navigation_start=self.navigation_start,
        response_start=self.response_start,
        resource_timings=self.resource_timings,
        native_first_paint=self.native_first_paint,
        vendor_load_times=self.vendor_load_times)
