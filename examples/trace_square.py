import numpy as np
import sketching

if __name__ == '__main__':

    square = np.array([[0, 0], [0, 10], [10, 10], [10, 0]])

    # trace around the square
    sketch = sketching.draw_around(square, sketching.Pen())

    # visualize by plotting
    sketching.visualize.plot_sketch(square, sketch)
