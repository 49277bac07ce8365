# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""Estimates when the page first painted non-blank content.

Browsers expose first paint in different ways, and some not at all. Each way
is a FirstPaintStrategy; EstimateFirstPaint runs them in priority order and
the first one that resolves wins. A strategy that cannot say anything returns
None rather than a guess, so a later, weaker strategy gets a chance. A value
that is not a finite number counts as None.
"""

import logging
import math

from rum_speedindex.core import exceptions


CRITICAL_INITIATOR_TYPES = ('script', 'link')


class FirstPaintStrategy(object):
  name = None

  def Estimate(self, element_provider, timing_provider):
    """Returns first paint in ms since navigation start, or None."""
    raise NotImplementedError()

  def __repr__(self):
    return '%s()' % self.__class__.__name__


class NativeFirstPaint(FirstPaintStrategy):
  """The first paint the browser reports itself. Trusted as-is."""
  name = 'native'

  def Estimate(self, element_provider, timing_provider):
    return timing_provider.GetNativeFirstPaint()


class VendorFirstPaint(FirstPaintStrategy):
  """First paint from vendor load times.

  The vendor clock is in seconds and is not relative to navigation start, so
  the paint time is rebased onto the start of the load. Paints reported before
  that reference point are rejected. A reference of 0 lets every paint through.
  """
  name = 'vendor'

  def Estimate(self, element_provider, timing_provider):
    load_times = timing_provider.GetVendorLoadTimes()
    if load_times is None:
      return None
    first_paint_time = load_times.first_paint_time
    if first_paint_time is None or first_paint_time <= 0:
      return None
    reference = load_times.start_load_time
    if reference is None:
      reference = load_times.request_time
    if reference is None:
      return None
    if first_paint_time < reference:
      logging.debug('Vendor first paint %s is before load start %s',
                    first_paint_time, reference)
      return None
    return (first_paint_time - reference) * 1000.0


def GetCriticalUrls(head_elements):
  """Returns the urls of the render blocking resources referenced in <head>.

  Those are scripts without the async attribute and stylesheets.
  """
  urls = set()
  for el in head_elements:
    if el.tag_name == 'SCRIPT' and el.src and not el.is_async:
      urls.add(el.src)
    if el.tag_name == 'LINK' and el.rel == 'stylesheet' and el.href:
      urls.add(el.href)
  return urls


class CriticalResourcesFirstPaint(FirstPaintStrategy):
  """Assumes paint waits for the head's blocking scripts and stylesheets.

  Starts at the document responseStart and walks the resource timings in the
  order the browser reported them, moving the estimate to the end of each
  critical resource. The walk stops at the first resource that is not
  critical; anything critical reported after it is ignored.
  """
  name = 'critical_resources'

  def Estimate(self, element_provider, timing_provider):
    first_paint = timing_provider.GetResponseStart()
    if first_paint is None:
      return None
    head_elements = element_provider.GetHeadElements()
    resource_timings = timing_provider.GetResourceTimings()
    if not head_elements and not resource_timings:
      return None

    critical_urls = GetCriticalUrls(head_elements)
    for resource in resource_timings:
      if (resource.name not in critical_urls or
          resource.initiator_type not in CRITICAL_INITIATOR_TYPES):
        break
      first_paint = max(first_paint, resource.response_end)
    return first_paint


DEFAULT_STRATEGIES = (
    NativeFirstPaint(),
    VendorFirstPaint(),
    CriticalResourcesFirstPaint(),
)


def EstimateFirstPaint(element_provider, timing_provider,
                       strategies=DEFAULT_STRATEGIES):
  """Returns the first paint from the first strategy that resolves.

  NaN and infinite values do not resolve; the next strategy is tried.

  Raises:
    FirstPaintUnavailableError: if no strategy resolved.
  """
  for strategy in strategies:
    first_paint = strategy.Estimate(element_provider, timing_provider)
    if first_paint is None:
      continue
    if not math.isfinite(first_paint):
      logging.debug('Ignoring first paint %s from %s strategy',
                    first_paint, strategy.name)
      continue
    logging.debug('First paint %s ms from %s strategy',
                  first_paint, strategy.name)
    return first_paint
  raise exceptions.FirstPaintUnavailableError(
      'No first paint signal from %s' %
      ', '.join(s.name for s in strategies))
