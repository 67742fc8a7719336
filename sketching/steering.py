"""
steering.py
--------------

Turn the pen before each step so the next location stays
within a randomly drawn tolerance of the target distance
from the guide shape.

The tolerance is drawn fresh for every check, so a pen that
strays further is more likely, but never certain, to be
corrected. That is what makes the traced line wobble.
"""
from . import util
from . import geometry

from .pen import next_point, turn_left, turn_right


def next_pen_distance(polyline, pen):
    """
    Distance from the guide shape to where the pen would
    be after one step.

    Parameters
    ------------
    polyline : shapely.geometry.LineString
      Guide shape
    pen : sketching.pen.Pen
      Pen to probe

    Returns
    ------------
    distance : float
      Look-ahead distance to the guide shape
    """
    return geometry.distance(
        next_point(pen, pen.config.speed), polyline)


def next_pen_too_close(polyline, pen, random=None):
    config = pen.config
    return (util.random_range(0.0, config.distance_fuzz, random=random) <
            next_pen_distance(polyline, pen) - config.pen_distance)


def next_pen_too_far(polyline, pen, random=None):
    config = pen.config
    return (util.random_range(0.0, config.distance_fuzz, random=random) <
            config.pen_distance - next_pen_distance(polyline, pen))


def ensure_next_pen_far_enough(polyline, pen, random=None):
    random = util.generator(random)
    while next_pen_too_close(polyline, pen, random=random):
        turn_left(pen, pen.config.turn_step)


def ensure_next_pen_close_enough(polyline, pen, random=None):
    random = util.generator(random)
    while next_pen_too_far(polyline, pen, random=random):
        turn_right(pen, pen.config.turn_step)


def adjust_next_pen(polyline, pen, random=None):
    """
    Steer the pen for its next step, always running the
    far enough correction before the close enough one.

    Parameters
    ------------
    polyline : shapely.geometry.LineString
      Guide shape
    pen : sketching.pen.Pen
      Pen to turn, modified in place
    random : None, int, or numpy.random.Generator
      Source of randomness for the tolerance draws
    """
    random = util.generator(random)
    ensure_next_pen_far_enough(polyline, pen, random=random)
    ensure_next_pen_close_enough(polyline, pen, random=random)
