# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.


def CalculateSpeedIndex(progress, first_paint):
  """Calculate the speed index.

  The speed index number conceptually represents the number of milliseconds
  that the page was "visually incomplete". If the page were 0% complete for
  1000 ms, then the score would be 1000; if it were 0% complete for 100 ms
  then 90% complete (ie 10% incomplete) for 900 ms, then the score would be
  1.0*100 + 0.1*900 = 190.

  Args:
    progress: a list of visual_progress.ProgressPoint sorted by time, may be
        empty.
    first_paint: first paint in ms since navigation start. This is the speed
        index of a page with an empty progress curve.

  Returns:
    A single number, milliseconds of visual incompleteness.
  """
  if not progress:
    return first_paint

  speed_index = 0
  last_time = 0
  last_progress = 0
  for point in progress:
    elapsed = point.time - last_time
    if elapsed > 0 and last_progress < 1:
      speed_index += elapsed * (1 - last_progress)
    last_time = point.time
    last_progress = point.cumulative_progress
  return speed_index
