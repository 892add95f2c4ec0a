"""
Concrete chart data classes.

Module names are the snake_case form of the class they export, which is
how ``ChartEngine`` finds them.
"""
