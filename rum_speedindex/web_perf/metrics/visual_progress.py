# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import collections


# Share of the viewport pixels not covered by any region that is credited to
# the page background at first paint.
PAGE_BACKGROUND_WEIGHT = 0.1

ProgressPoint = collections.namedtuple(
    'ProgressPoint', ['time', 'area_at_time', 'cumulative_progress'])


def GetViewportPixels(geometry_provider):
  window_width, window_height = geometry_provider.GetWindowSize()
  document_width, document_height = geometry_provider.GetDocumentSize()
  return (max(document_width, window_width or 0) *
          max(document_height, window_height or 0))


def BuildVisualProgress(resolved_regions, first_paint, geometry_provider,
                        background_weight=PAGE_BACKGROUND_WEIGHT):
  """Turns the paint times of the regions into a visual progress curve.

  A region cannot show up before the page first painted, so every region is
  painted at max(first_paint, paint_time). Regions painted at the same time
  share a ProgressPoint.

  Returns:
    A list of ProgressPoints sorted by time, with non-decreasing
    cumulative_progress ending at 1.0. Empty if nothing was painted at all.
  """
  paints = collections.defaultdict(float)
  total = 0
  for region in resolved_regions:
    paints[max(first_paint, region.paint_time)] += region.area
    total += region.area

  pixels = GetViewportPixels(geometry_provider)
  if pixels > 0:
    background = max(pixels - total, 0) * background_weight
    paints[first_paint] += background
    total += background

  if not total:
    return []

  progress = []
  accumulated = 0
  for time in sorted(paints):
    accumulated += paints[time]
    progress.append(ProgressPoint(time=time, area_at_time=paints[time],
                                  cumulative_progress=accumulated / total))
  # Rounding in the running sum can leave the last point a hair off 1.0.
  progress[-1] = progress[-1]._replace(cumulative_progress=1.0)
  return progress


def IsMonotonic(progress):
  return all(a.time < b.time and
             a.cumulative_progress <= b.cumulative_progress
             for a, b in zip(progress, progress[1:]))
