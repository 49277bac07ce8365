# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import numbers

from rum_speedindex import value as value_module
from rum_speedindex.value import improvement_direction as improvement_module
from rum_speedindex.value import none_values


class ScalarValue(value_module.Value):
  def __init__(self, page_url, name, units, value, important=True,
               description=None,
               none_value_reason=None, improvement_direction=None):
    """A single value (float or integer) result from a metric.

    A metric that could not be computed still produces a ScalarValue, with a
    value of None and a none_value_reason saying why:
       ScalarValue(url, 'rum_speed_index', 'ms', None,
                   none_value_reason='No first paint signal')
    """
    super().__init__(page_url, name, units, important, description)
    assert value is None or isinstance(value, numbers.Number)
    none_values.ValidateNoneValueReason(value, none_value_reason)
    self.value = value
    self.none_value_reason = none_value_reason
    self.improvement_direction = improvement_direction

  def __repr__(self):
    return ('ScalarValue(%s, %s, %s, %s, important=%s, description=%s, '
            'none_value_reason=%s, improvement_direction=%s)') % (
                self.page_url,
                self.name,
                self.units,
                self.value,
                self.important,
                self.description,
                self.none_value_reason,
                self.improvement_direction)

  @property
  def is_available(self):
    return self.value is not None

  @staticmethod
  def GetJSONTypeName():
    return 'scalar'

  def AsDict(self):
    d = super().AsDict()
    d['value'] = self.value

    if self.none_value_reason is not None:
      d['none_value_reason'] = self.none_value_reason

    if improvement_module.IsValid(self.improvement_direction):
      d['improvement_direction'] = self.improvement_direction

    return d
