"""
util.py
-----------

Random draws for the stochastic parts of tracing.
"""
import numpy as np


def generator(random=None):
    """
    Get a random generator from whatever was passed.

    Parameters
    ------------
    random : None, int, or numpy.random.Generator
      Existing generator, a seed, or None for fresh entropy

    Returns
    ------------
    generator : numpy.random.Generator
      Generator to draw from
    """
    if hasattr(random, 'uniform'):
        return random
    return np.random.default_rng(random)


def random_range(a, b, random=None):
    """
    Draw a uniformly distributed value in `[a, b)`.

    A zero width range returns `a` without touching
    the generator.

    Parameters
    ------------
    a : float
      Lower bound
    b : float
      Upper bound
    random : None, int, or numpy.random.Generator
      Source of randomness

    Returns
    ------------
    value : float
      Value in `[a, b)`
    """
    if a == b:
        return a
    return float(generator(random).uniform(a, b))
