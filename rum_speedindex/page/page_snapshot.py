# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Read-only views of a loaded page, as seen by the Speed Index pipeline.

The pipeline never talks to a browser. It reads the page through three narrow
provider interfaces:

  ElementStyleProvider: the element tree with computed background images, and
      the ordered children of the document <head>.
  GeometryProvider: window and document dimensions.
  TimingProvider: Navigation Timing, Resource Timing and first paint signals.

PageSnapshot implements all three on top of the JSON blob that host
instrumentation collects from the page after load.
"""

import collections
import json
import logging

from rum_speedindex.core import exceptions


class Rect(collections.namedtuple('Rect', ['top', 'left', 'bottom', 'right'])):
  __slots__ = ()

  @property
  def width(self):
    return self.right - self.left

  @property
  def height(self):
    return self.bottom - self.top

  @property
  def area(self):
    return self.width * self.height

  @classmethod
  def FromDict(cls, d):
    return cls(float(d['top']), float(d['left']),
               float(d['bottom']), float(d['right']))


# One rendered element. |rect| is the layout rect relative to the viewport
# (getBoundingClientRect), or None when the element has no layout box.
# |background_image| is the computed background-image declaration.
Element = collections.namedtuple(
    'Element', ['tag_name', 'src', 'rect', 'background_image'])

HeadElement = collections.namedtuple(
    'HeadElement', ['tag_name', 'src', 'href', 'is_async', 'rel'])

# A Resource Timing entry. |response_end| is in ms since navigation start.
ResourceTiming = collections.namedtuple(
    'ResourceTiming', ['name', 'response_end', 'initiator_type'])

# Vendor load times, raw clock values in seconds.
VendorLoadTimes = collections.namedtuple(
    'VendorLoadTimes', ['first_paint_time', 'start_load_time', 'request_time'])


class ElementStyleProvider(object):
  def IterElements(self):
    """Yields every rendered Element in document order."""
    raise NotImplementedError()

  def GetHeadElements(self):
    """Returns the children of the document <head> as HeadElements."""
    raise NotImplementedError()


class GeometryProvider(object):
  def GetWindowSize(self):
    """Returns (innerWidth, innerHeight), 0 for anything unknown."""
    raise NotImplementedError()

  def GetDocumentSize(self):
    """Returns (clientWidth, clientHeight) of the document element."""
    raise NotImplementedError()


class TimingProvider(object):
  def GetResponseStart(self):
    """Returns the document responseStart in ms since navigation start.

    Returns None if Navigation Timing is unavailable.
    """
    raise NotImplementedError()

  def GetResourceTimings(self):
    """Returns the ResourceTimings in the order the browser reported them."""
    raise NotImplementedError()

  def GetNativeFirstPaint(self):
    """Returns the browser first paint in ms since navigation start, or None."""
    raise NotImplementedError()

  def GetVendorLoadTimes(self):
    """Returns the VendorLoadTimes for the page, or None."""
    raise NotImplementedError()


def _OptionalFloat(value):
  if value is None:
    return None
  return float(value)


def _ParseElement(el):
  """Returns the Element for one snapshot entry, or None if it is unusable.

  A rect that cannot be read leaves the element without a layout box, so it
  never becomes a region.
  """
  if not isinstance(el, dict):
    logging.debug('Skipping element %r', el)
    return None
  rect = el.get('rect')
  if rect:
    try:
      rect = Rect.FromDict(rect)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
      logging.debug('Dropping malformed rect %r: %s', rect, e)
      rect = None
  else:
    rect = None
  return Element(
      tag_name=str(el.get('tagName') or '').upper(),
      src=el.get('src') or None,
      rect=rect,
      background_image=el.get('backgroundImage'))


def _ParseResource(r):
  """Returns the ResourceTiming for one snapshot entry, or None.

  An unreadable responseEnd becomes 0, the same as a resource that never
  reported one. The entry is kept so the order of the list is preserved.
  """
  if not isinstance(r, dict):
    logging.debug('Skipping resource %r', r)
    return None
  try:
    response_end = float(r['responseEnd'])
  except (KeyError, TypeError, ValueError) as e:
    logging.debug('No usable responseEnd for %s: %r', r.get('name'), e)
    response_end = 0
  return ResourceTiming(
      name=r.get('name'),
      response_end=response_end,
      initiator_type=r.get('initiatorType'))


class PageSnapshot(ElementStyleProvider, GeometryProvider, TimingProvider):
  """A quiescent copy of everything the pipeline reads from a page.

  The dict uses the names the browser APIs use, so the host can fill it
  straight from JavaScript:

    {
      "window": {"innerWidth": 1280, "innerHeight": 800},
      "document": {"clientWidth": 1265, "clientHeight": 800},
      "timing": {"navigationStart": 1400000000000, "responseStart": ...},
      "firstPaint": 230.5,
      "loadTimes": {"firstPaintTime": ..., "startLoadTime": ...,
                    "requestTime": ...},
      "elements": [{"tagName": "IMG", "src": "http://...",
                    "rect": {"top": 0, "left": 0, "bottom": 10, "right": 10},
                    "backgroundImage": "none"}],
      "head": [{"tagName": "SCRIPT", "src": "http://...", "async": false}],
      "resources": [{"name": "http://...", "responseEnd": 120.0,
                     "initiatorType": "img"}]
    }

  Everything except "timing" is optional.
  """

  def __init__(self, elements=(), head_elements=(), window_size=(0, 0),
               document_size=(0, 0), navigation_start=None,
               response_start=None, resource_timings=(),
               native_first_paint=None, vendor_load_times=None):
    self._elements = tuple(elements)
    self._head_elements = tuple(head_elements)
    self._window_size = tuple(window_size)
    self._document_size = tuple(document_size)
    self._navigation_start = navigation_start
    self._response_start = response_start
    self._resource_timings = tuple(resource_timings)
    self._native_first_paint = native_first_paint
    self._vendor_load_times = vendor_load_times

  @classmethod
  def FromDict(cls, data):
    try:
      return cls._FromDictInternal(data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
      error = exceptions.SnapshotError('Malformed page snapshot: %r' % e)
      if isinstance(data, dict):
        error.AddDebuggingMessage('snapshot keys %s' % sorted(data))
      raise error from e

  @classmethod
  def _FromDictInternal(cls, data):
    timing = data['timing']
    window = data.get('window') or {}
    document = data.get('document') or {}

    elements = []
    for el in data.get('elements') or ():
      element = _ParseElement(el)
      if element:
        elements.append(element)

    head_elements = []
    for el in data.get('head') or ():
      if not isinstance(el, dict):
        logging.debug('Skipping head element %r', el)
        continue
      head_elements.append(HeadElement(
          tag_name=(el.get('tagName') or '').upper(),
          src=el.get('src') or None,
          href=el.get('href') or None,
          is_async=bool(el.get('async')),
          rel=el.get('rel')))

    resource_timings = []
    for r in data.get('resources') or ():
      resource = _ParseResource(r)
      if resource:
        resource_timings.append(resource)

    load_times = data.get('loadTimes')
    vendor_load_times = None
    if load_times:
      vendor_load_times = VendorLoadTimes(
          first_paint_time=_OptionalFloat(load_times.get('firstPaintTime')),
          start_load_time=_OptionalFloat(load_times.get('startLoadTime')),
          request_time=_OptionalFloat(load_times.get('requestTime')))

    return cls(
        elements=elements,
        head_elements=head_elements,
        window_size=(float(window.get('innerWidth') or 0),
                     float(window.get('innerHeight') or 0)),
        document_size=(float(document.get('clientWidth') or 0),
                       float(document.get('clientHeight') or 0)),
        navigation_start=_OptionalFloat(timing.get('navigationStart')),
        response_start=_OptionalFloat(timing.get('responseStart')),
        resource_timings=resource_timings,
        native_first_paint=_OptionalFloat(data.get('firstPaint')),
        vendor_load_times=vendor_load_times)

  @classmethod
  def FromFile(cls, path):
    logging.debug('Loading page snapshot from %s', path)
    with open(path) as f:
      try:
        data = json.load(f)
      except ValueError as e:
        raise exceptions.SnapshotError(
            'Page snapshot %s is not valid JSON: %s' % (path, e)) from e
    return cls.FromDict(data)

  def IterElements(self):
    return iter(self._elements)

  def GetHeadElements(self):
    return list(self._head_elements)

  def GetWindowSize(self):
    return self._window_size

  def GetDocumentSize(self):
    return self._document_size

  def GetResponseStart(self):
    if self._navigation_start is None or self._response_start is None:
      return None
    return self._response_start - self._navigation_start

  def GetResourceTimings(self):
    return list(self._resource_timings)

  def GetNativeFirstPaint(self):
    return self._native_first_paint

  def GetVendorLoadTimes(self):
    return self._vendor_load_times
