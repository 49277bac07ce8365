# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import collections
import logging
import re

from rum_speedindex.page import page_snapshot


# A visible, resource backed area of the viewport. |rect| is clipped to the
# viewport and |area| is its size in px^2, always positive.
Region = collections.namedtuple('Region', ['url', 'area', 'rect'])

RE_BACKGROUND_URL = re.compile(
    r'url\(\s*([\'"]?)(https?://.*?)\1\s*\)', re.IGNORECASE)


def GetViewportSize(geometry_provider):
  """Returns the (width, height) the browser paints into.

  Falls back to the document element's client size when the window does not
  report one.
  """
  window_width, window_height = geometry_provider.GetWindowSize()
  document_width, document_height = geometry_provider.GetDocumentSize()
  return (window_width or document_width, window_height or document_height)


def GetElementViewportRect(rect, viewport_width, viewport_height):
  """Returns the part of |rect| inside the viewport, or None if nothing is."""
  if rect is None:
    return None
  clipped = page_snapshot.Rect(top=max(rect.top, 0),
                               left=max(rect.left, 0),
                               bottom=min(rect.bottom, viewport_height),
                               right=min(rect.right, viewport_width))
  # Also rejects NaN coordinates.
  if not (clipped.width > 0 and clipped.height > 0):
    return None
  return clipped


def ParseBackgroundImageUrl(background_image):
  """Extracts the absolute url from a computed background-image value.

  Returns None for 'none', relative or data urls, gradients and anything else
  that does not name an http(s) resource.
  """
  if not isinstance(background_image, str):
    return None
  match = RE_BACKGROUND_URL.search(background_image)
  if not match:
    return None
  return match.group(2)


def _CheckElement(url, element, viewport_width, viewport_height):
  if not url:
    return None
  rect = GetElementViewportRect(element.rect, viewport_width, viewport_height)
  if rect is None:
    return None
  return Region(url=url, area=rect.area, rect=rect)


def CollectRegions(element_provider, geometry_provider):
  """Returns the Regions for every visible image and background image.

  Overlapping regions are all kept; their areas are counted once per element.
  """
  viewport_width, viewport_height = GetViewportSize(geometry_provider)
  regions = []
  for element in element_provider.IterElements():
    urls = []
    if element.tag_name == 'IMG':
      urls.append(element.src)
    urls.append(ParseBackgroundImageUrl(element.background_image))
    for url in urls:
      try:
        region = _CheckElement(url, element, viewport_width, viewport_height)
      except (TypeError, ValueError) as e:
        logging.debug('Skipping element %s for %s: %s',
                      element.tag_name, url, e)
        continue
      if region:
        regions.append(region)
  logging.debug('Collected %d visible regions', len(regions))
  return regions
