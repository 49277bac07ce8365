# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.
"""
The Value hierarchy provides a way of representing the numbers a metric
produces such that the host instrumentation can forward them to a metrics
pipeline without knowing how they were computed.

The core Value concept provides the basic functionality:
- association with a page url, may be none
- naming and units
- importance tracking [whether a value will show up on a dashboard by
  default]
- other metadata, such as a description of what was measured
- default conversion to a dict for JSON output
"""


class Value(object):
  """An abstract value produced by a metric."""

  def __init__(self, page_url, name, units, important, description):
    """A generic Value object.

    Args:
      page_url: The url of the measured page, may be given as None when the
          host does not know it.
      name: A value name string.
      units: A units string.
      important: Whether the value is "important". Causes the value to appear
          by default in downstream UIs.
      description: A string explaining in human-understandable terms what this
          value represents.
    """
    if not ((page_url is None) or isinstance(page_url, str)):
      raise ValueError('page_url field of Value must absent or string.')
    if not isinstance(name, str):
      raise ValueError('name field of Value must be string.')
    if not isinstance(units, str):
      raise ValueError('units field of Value must be string.')
    if not isinstance(important, bool):
      raise ValueError('important field of Value must be bool.')
    if not ((description is None) or isinstance(description, str)):
      raise ValueError('description field of Value must absent or string.')

    self.page_url = page_url
    self.name = name
    self.units = units
    self.important = important
    self.description = description

  def __eq__(self, other):
    return hash(self) == hash(other)

  def __hash__(self):
    return hash(str(self))

  @staticmethod
  def GetJSONTypeName():
    """Gets the typename for serialization to JSON using AsDict."""
    raise NotImplementedError()

  def AsDict(self):
    """Pre-serializes a value to a dict for output as JSON."""
    return self._AsDictImpl()

  def _AsDictImpl(self):
    d = {
        'name': self.name,
        'type': self.GetJSONTypeName(),
        'units': self.units,
        'important': self.important
    }

    if self.description:
      d['description'] = self.description

    if self.page_url:
      d['page_url'] = self.page_url

    return d
