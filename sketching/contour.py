"""
contour.py
---------------

Trace a closed, hand drawn looking contour around a
guide shape by stepping a steered pen until it comes
back to where it started.
"""
import collections

import numpy as np

from . import util
from . import geometry
from . import constants
from . import steering

from .constants import log
from .exceptions import TraceGuardExceeded
from .pen import move_forward


def start_drawing(polyline, pen):
    """
    Put the pen down directly above the top left of the
    guide shape at the configured distance.

    The heading is left as it was.

    Parameters
    ------------
    polyline : shapely.geometry.LineString
      Guide shape
    pen : sketching.pen.Pen
      Pen to place, modified in place
    """
    top = geometry.highest_leftmost_point(geometry.vertices(polyline))
    pen.state.location = top + np.array([0.0, pen.config.pen_distance])
    pen.state.pen_down = True


def path_ready_to_close(sketch, pen, first_point):
    """
    Has the pen come back to within a step of where
    it started.

    Parameters
    ------------
    sketch : sequence of (2,) float
      Points drawn so far
    pen : sketching.pen.Pen
      Pen doing the drawing
    first_point : (2,) float
      Where the sketch started

    Returns
    ------------
    ready : bool
      More than two points and the last is near the first
    """
    return (len(sketch) > 2 and
            geometry.distance(sketch[-1], first_point) < pen.config.speed)


def draw_step(polyline, pen, random=None):
    """
    Steer then step the pen, returning its new location.
    """
    steering.adjust_next_pen(polyline, pen, random=random)
    move_forward(pen, pen.config.speed)
    return pen.state.location


def draw_around(polyline,
                pen,
                random=None,
                guard=None,
                strict=None,
                return_closed=False):
    """
    Trace a fuzzy offset contour around a guide shape.

    Parameters
    ------------
    polyline : shapely.geometry.LineString, Polygon, or (n, 2) float
      Guide shape to draw around
    pen : sketching.pen.Pen
      Pen to draw with, set a known `direction` beforehand
      if the result should be reproducible
    random : None, int, or numpy.random.Generator
      Source of randomness for steering
    guard : None or int
      Maximum number of steps, defaults to `constants.trace_guard`
    strict : None or bool
      Raise `TraceGuardExceeded` rather than return when the
      guard runs out, defaults to `constants.strict`
    return_closed : bool
      Also return whether the pen made it back to the start

    Returns
    ------------
    sketch : (n, 2) float
      Traced points, first and last equal
    closed : bool
      Only if `return_closed`, False if the guard ran out
    """
    polyline = geometry.polyline(polyline)
    random = util.generator(random)
    if guard is None:
        guard = constants.trace_guard
    if strict is None:
        strict = constants.strict

    start_drawing(polyline, pen)
    first_point = pen.state.location.copy()
    log.debug('starting trace at %s', first_point)

    sketch = collections.deque([first_point])
    remaining = guard
    while (not path_ready_to_close(sketch, pen, first_point)
           and remaining > 0):
        sketch.append(draw_step(polyline, pen, random=random))
        remaining -= 1

    closed = path_ready_to_close(sketch, pen, first_point)
    # close the loop explicitly
    sketch.append(first_point)
    sketch = np.array(sketch, dtype=np.float64)
    pen.state.pen_down = False

    if closed:
        log.debug('trace closed after %d steps', guard - remaining)
    else:
        if strict:
            raise TraceGuardExceeded(sketch=sketch, guard=guard)
        log.warning('trace did not close within %d steps', guard)

    if return_closed:
        return sketch, closed
    return sketch
