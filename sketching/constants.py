"""
constants.py
--------------

Logger and library-wide defaults.
"""
import logging

# library logger, handlers are up to the application
log = logging.getLogger('sketching')
log.addHandler(logging.NullHandler())

# maximum number of steps for a single trace before giving
# up on the pen finding its way back to the start
trace_guard = 10000

# default pen configuration
default_speed = 1.0
default_pen_distance = 5.0
default_distance_fuzz = 2.0
default_turn_step = 0.1

# raise instead of warn when a trace runs out of guard
strict = False
