"""
Chart value objects.

Modules:
  points    : data points, Point and Rect.
  sets      : data sets (line, ranged line, pie) with pandas constructors.
  styles    : enums and style dataclasses.
  metadata  : titles, legends and touch state.
"""
