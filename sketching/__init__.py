"""
sketching
------------

Trace wobbly, hand drawn looking contours around
guide shapes with a self-steering pen.
"""
from .version import __version__

from . import util
from . import pen
from . import geometry
from . import steering
from . import contour
from . import constants
from . import visualize
from . import exceptions

from .pen import Pen, PenState, PenConfiguration
from .contour import draw_around

__all__ = ['__version__',
           'Pen',
           'PenState',
           'PenConfiguration',
           'draw_around']
