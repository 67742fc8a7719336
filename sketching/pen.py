"""
pen.py
-----------

A pen that can turn and step forward, moving in a
heading where zero points along +Y.
"""
import numpy as np

from dataclasses import dataclass, field

from . import constants
from .exceptions import InvalidConfiguration


@dataclass
class PenState:
    """Where the pen is and which way it is facing."""

    location: np.ndarray = field(
        default_factory=lambda: np.zeros(2, dtype=np.float64))
    # radians, accumulates without wrapping
    direction: float = 0.0
    pen_down: bool = False


@dataclass(frozen=True)
class PenConfiguration:
    """
    Constants for the lifetime of a trace.

    Parameters
    ------------
    speed : float
      Distance moved per step
    pen_distance : float
      Distance to keep from the guide shape
    distance_fuzz : float
      Width of the random tolerance around `pen_distance`
    turn_step : float
      Radians turned per steering correction
    """

    speed: float = constants.default_speed
    pen_distance: float = constants.default_pen_distance
    distance_fuzz: float = constants.default_distance_fuzz
    turn_step: float = constants.default_turn_step

    def __post_init__(self):
        for name in ('speed', 'pen_distance', 'turn_step'):
            if not getattr(self, name) > 0.0:
                raise InvalidConfiguration(
                    '{} must be positive!'.format(name))
        if not self.distance_fuzz >= 0.0:
            raise InvalidConfiguration(
                'distance_fuzz must not be negative!')


@dataclass
class Pen:
    """State plus the configuration that drives it."""

    state: PenState = field(default_factory=PenState)
    config: PenConfiguration = field(default_factory=PenConfiguration)


def turn(pen, delta):
    """
    Rotate the pen heading by `delta` radians.
    """
    pen.state.direction += delta


def turn_left(pen, delta):
    turn(pen, -delta)


def turn_right(pen, delta):
    turn(pen, delta)


def next_point(pen, distance):
    """
    Find where the pen would be after moving forward,
    without moving it.

    Parameters
    ------------
    pen : Pen
      Pen to probe
    distance : float
      How far forward to look

    Returns
    ------------
    point : (2,) float
      New location, X from sine and Y from cosine
    """
    direction = pen.state.direction
    return pen.state.location + distance * np.array(
        [np.sin(direction), np.cos(direction)])


def move_forward(pen, distance):
    pen.state.location = next_point(pen, distance)


def move_backward(pen, distance):
    move_forward(pen, -distance)
