import trimesh
import unittest
import sketching

import numpy as np

from sketching import geometry


def get_square(size=10.0):
    """
    Get the corners of an axis aligned square.

    Parameters
    ------------
    size : float
      Side length

    Returns
    ------------
    square : (4, 2) float
      Corners starting at the origin
    """
    return np.array([[0, 0],
                     [0, size],
                     [size, size],
                     [size, 0]], dtype=np.float64)


class ContourTest(unittest.TestCase):

    def test_square(self):
        pen = sketching.Pen()
        sketch = sketching.draw_around(
            get_square(), pen, random=np.random.default_rng(7))

        assert trimesh.util.is_shape(sketch, (-1, 2))
        assert len(sketch) >= 4
        # explicitly closed
        assert np.allclose(sketch[0], sketch[-1])
        # started directly above the top left corner
        assert np.allclose(sketch[0], [0.0, 15.0])
        # pen is lifted once the trace is done
        assert not pen.state.pen_down

    def test_distance_band(self):
        pen = sketching.Pen()
        config = pen.config
        guide = geometry.polyline(get_square())
        sketch = sketching.draw_around(
            guide, pen, random=np.random.default_rng(11))

        # skip the seed point and its closing copy
        distance = geometry.boundary_distance(guide, sketch[1:-1])
        inside = np.abs(distance - config.pen_distance) <= config.distance_fuzz
        assert inside.mean() > .95

    def test_reproducible(self):
        a = sketching.draw_around(
            get_square(), sketching.Pen(), random=42)
        b = sketching.draw_around(
            get_square(), sketching.Pen(), random=42)
        assert a.shape == b.shape
        assert np.allclose(a, b)

    def test_closed_flag(self):
        pen = sketching.Pen()
        sketch, closed = sketching.draw_around(
            get_square(), pen, random=3, return_closed=True)
        if closed:
            # stopped because it came back around
            assert geometry.distance(
                sketch[-2], sketch[0]) < pen.config.speed
        else:
            assert len(sketch) == sketching.constants.trace_guard + 2

    def test_guard(self):
        # far too big to get around in the allowed steps
        square = get_square(1e5)
        with self.assertLogs('sketching', level='WARNING'):
            sketch, closed = sketching.draw_around(
                square,
                sketching.Pen(),
                random=5,
                return_closed=True)
        assert not closed
        # seed, every allowed step, then the closing point
        assert len(sketch) == sketching.constants.trace_guard + 2
        assert np.allclose(sketch[0], sketch[-1])

    def test_guard_strict(self):
        try:
            sketching.draw_around(get_square(1e5),
                                  sketching.Pen(),
                                  random=5,
                                  guard=25,
                                  strict=True)
        except sketching.exceptions.TraceGuardExceeded as E:
            assert E.guard == 25
            assert len(E.sketch) == 27
            assert np.allclose(E.sketch[0], E.sketch[-1])
        else:
            raise AssertionError('guard should have been exceeded!')

    def test_degenerate(self):
        with self.assertRaises(sketching.exceptions.DegenerateGuideShape):
            sketching.draw_around([[1.0, 1.0]], sketching.Pen())
        with self.assertRaises(sketching.exceptions.DegenerateGuideShape):
            sketching.draw_around([[0, 0], [1, 1], [0, 0]], sketching.Pen())

    def test_random_shape(self):
        guide = geometry.random_guide_shape(
            count=12, bounds=[[0, 0], [50, 50]], random=1)
        sketch = sketching.draw_around(
            guide, sketching.Pen(), random=2)
        assert trimesh.util.is_shape(sketch, (-1, 2))
        assert np.allclose(sketch[0], sketch[-1])


if __name__ == '__main__':
    unittest.main()
