"""
visualize.py
---------------

Utilities for previewing sketches with matplotlib.
"""
import numpy as np

from . import geometry


def plot_sketch(polyline, sketch, show=True):
    """
    Plot a sketch on top of the guide shape it was traced around.

    Parameters
    ------------
    polyline : shapely.geometry.LineString, Polygon, or (n, 2) float
      Guide shape
    sketch : (n, 2) float
      Traced points
    show : bool
      Open a window or just return the axes

    Returns
    ------------
    ax : matplotlib.axes.Axes
      Axes plotted on
    """
    import matplotlib.pyplot as plt

    guide = np.array(geometry.polyline(polyline).coords)
    sketch = np.asanyarray(sketch, dtype=np.float64)

    fig, ax = plt.subplots()
    ax.plot(*guide.T, color='0.7', linestyle='dashed')
    ax.plot(*sketch.T, color='k')
    ax.set_aspect('equal', 'datalim')

    if show:
        plt.show()
    return ax


def animate_sketch(polyline, sketch, interval=5):
    """
    Animate a sketch being drawn around its guide shape
    """
    import matplotlib.pyplot as plt
    from matplotlib import animation

    guide = np.array(geometry.polyline(polyline).coords)
    sketch = np.asanyarray(sketch, dtype=np.float64)

    # initialization function: plot the background of each frame
    def init():
        ax.plot(*guide.T, color='0.7', linestyle='dashed')
        line.set_data([], [])
        return [line]

    # animation function.  This is called sequentially
    def animate(i):
        line.set_data(*sketch[:i + 1].T)
        return [line]

    bounds = np.vstack((guide, sketch))
    pad = .05 * np.ptp(bounds, axis=0).max()
    bounds = np.array([bounds.min(axis=0) - pad,
                       bounds.max(axis=0) + pad])

    fig = plt.figure()
    ax = plt.axes(xlim=bounds[:, 0], ylim=bounds[:, 1])
    ax.set_aspect('equal', 'datalim')
    line, = ax.plot([], [], lw=2, color='k')

    anim = animation.FuncAnimation(
        fig,
        animate,
        init_func=init,
        frames=len(sketch),
        interval=interval,
        blit=False)
    plt.show()
    return anim
