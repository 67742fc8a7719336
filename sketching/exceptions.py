"""
exceptions.py
----------------

Errors raised while configuring a pen or tracing a guide shape.
"""


class InvalidConfiguration(ValueError):
    """
    A pen configuration value is out of range.
    """


class DegenerateGuideShape(ValueError):
    """
    A guide shape has too few distinct points to be traced.
    """


class TraceGuardExceeded(RuntimeError):
    """
    A trace ran out of steps before the pen returned to
    where it started.

    Attributes
    ------------
    sketch : (n, 2) float
      Partial sketch, closed back to its first point
    guard : int
      Number of steps that were allowed
    """

    def __init__(self, sketch, guard):
        self.sketch = sketch
        self.guard = guard
        super(TraceGuardExceeded, self).__init__(
            'pen did not return to start within {} steps'.format(guard))
