import sketching

from sketching import geometry

if __name__ == '__main__':
    # a random convex figure to draw around
    guide = geometry.random_guide_shape(
        count=20, bounds=[[0, 0], [100, 100]])

    pen = sketching.Pen(config=sketching.PenConfiguration(
        speed=2.0, pen_distance=8.0, distance_fuzz=3.0))

    sketch, closed = sketching.draw_around(
        guide, pen, return_closed=True)
    print('{} points, closed: {}'.format(len(sketch), closed))

    sketching.visualize.animate_sketch(guide, sketch)
