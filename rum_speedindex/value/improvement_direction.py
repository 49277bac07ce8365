# Copyright 2026 The Chromium Authors. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

# This is used to exclude improvement direction when the value has none.
UP = 'up'
DOWN = 'down'


def IsValid(improvement_direction):
  return improvement_direction in (UP, DOWN)
