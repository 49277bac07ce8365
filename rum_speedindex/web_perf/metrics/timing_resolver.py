# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import collections
import logging
import math

from rum_speedindex.web_perf.metrics import region_collector


# A Region plus the time, in ms since navigation start, its resource finished
# loading. 0 when no Resource Timing entry matched the url.
ResolvedRegion = collections.namedtuple(
    'ResolvedRegion', region_collector.Region._fields + ('paint_time',))


def ResolveRegionTimings(regions, resource_timings):
  """Pairs every region with the responseEnd of its resource.

  Urls are matched exactly. When a url was fetched more than once the last
  entry wins.
  """
  timings = {}
  for resource in resource_timings:
    timings[resource.name] = resource.response_end

  resolved = []
  for region in regions:
    paint_time = timings.get(region.url)
    if paint_time is None or not math.isfinite(paint_time):
      logging.debug('No resource timing for %s', region.url)
      paint_time = 0
    resolved.append(ResolvedRegion(*region, paint_time=paint_time))
  return resolved
