# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import logging
import math

from rum_speedindex.core import exceptions
from rum_speedindex.value import improvement_direction
from rum_speedindex.value import scalar
from rum_speedindex.web_perf.metrics import first_paint as first_paint_module
from rum_speedindex.web_perf.metrics import region_collector
from rum_speedindex.web_perf.metrics import speed_index as speed_index_module
from rum_speedindex.web_perf.metrics import timing_resolver
from rum_speedindex.web_perf.metrics import visual_progress


SPEED_INDEX_VALUE_NAME = 'rum_speed_index'

DESCRIPTION = (
    'Speed Index estimated from real user telemetry. Paints are approximated '
    'by the time the resources behind visible images and background images '
    'finished loading, anchored at the first paint of the page. Lower is '
    'better.')


def LogDebugSummary(regions, progress, first_paint, speed_index):
  if not logging.getLogger().isEnabledFor(logging.DEBUG):
    return
  lines = ['Paint Rects']
  for region in regions:
    lines.append('(%s) %s - %s' % (region.area, region.paint_time, region.url))
  lines.append('Visual Progress')
  for point in progress:
    lines.append('(%s) %s - %s' % (point.area_at_time, point.time,
                                   point.cumulative_progress))
  lines.append('First Paint: %s' % first_paint)
  lines.append('Speed Index: %s' % speed_index)
  logging.debug('\n'.join(lines))


class RUMSpeedIndexMetric(object):
  """Computes the Speed Index of a loaded page without video capture.

  The page is read once through the providers. Nothing the page reports makes
  Compute raise: when the Speed Index cannot be computed it returns a value of
  None with a none_value_reason, so a failed measurement never reads as an
  instant paint.
  """

  def __init__(self, background_weight=visual_progress.PAGE_BACKGROUND_WEIGHT,
               strategies=first_paint_module.DEFAULT_STRATEGIES):
    self._background_weight = background_weight
    self._strategies = tuple(strategies)

  def Compute(self, element_provider, geometry_provider, timing_provider,
              page_url=None):
    """Returns a ScalarValue with the Speed Index in ms.

    Raises:
      ValueError: if page_url is neither None nor a string. This is checked
          before the page is read.
    """
    if not (page_url is None or isinstance(page_url, str)):
      raise ValueError(
          'page_url must be None or a string, got %r' % (page_url,))
    none_value_reason = None
    try:
      index = self._ComputeInternal(
          element_provider, geometry_provider, timing_provider)
    except exceptions.FirstPaintUnavailableError as e:
      logging.info('Speed Index unavailable: %s', e)
      index = None
      none_value_reason = str(e)
    except Exception as e:  # pylint: disable=broad-except
      logging.warning('Speed Index computation failed: %s', e, exc_info=True)
      index = None
      none_value_reason = 'Speed Index computation failed: %s' % e
    return scalar.ScalarValue(
        page_url, SPEED_INDEX_VALUE_NAME, 'ms', index,
        description=DESCRIPTION,
        none_value_reason=none_value_reason,
        improvement_direction=improvement_direction.DOWN)

  def ComputeFromSnapshot(self, snapshot, page_url=None):
    return self.Compute(snapshot, snapshot, snapshot, page_url=page_url)

  def _ComputeInternal(self, element_provider, geometry_provider,
                       timing_provider):
    regions = region_collector.CollectRegions(
        element_provider, geometry_provider)
    resolved_regions = timing_resolver.ResolveRegionTimings(
        regions, timing_provider.GetResourceTimings())
    first_paint = first_paint_module.EstimateFirstPaint(
        element_provider, timing_provider, self._strategies)
    progress = visual_progress.BuildVisualProgress(
        resolved_regions, first_paint, geometry_provider,
        self._background_weight)
    assert visual_progress.IsMonotonic(progress)
    index = speed_index_module.CalculateSpeedIndex(progress, first_paint)
    LogDebugSummary(resolved_regions, progress, first_paint, index)
    if math.isnan(index) or index < 0:
      raise ValueError('Speed Index %r is not a non-negative number' % index)
    return float(index)
