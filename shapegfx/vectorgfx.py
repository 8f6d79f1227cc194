from collections import namedtuple


class Point(namedtuple('Point', ['x', 'y'])):
    """ A 2D point, either an offset from projection or a screen position. """
    __slots__ = ()

    def translate(self, x, y):
        return Point(self.x + x, self.y + y)

    def scale(self, x_factor, y_factor):
        return Point(self.x * x_factor, self.y * y_factor)


class Line:
    def __init__(self, p1, p2):
        self.p1 = p1
        self.p2 = p2

    def __eq__(self, other):
        return ((self.p1 == other.p1 and self.p2 == other.p2) or
                (self.p1 == other.p2 and self.p2 == other.p1))

    def __hash__(self):
        if (self.p1.x < self.p2.x or
                (self.p1.x == self.p2.x and self.p1.y < self.p2.y)):
            return hash((self.p1, self.p2))
        else:
            return hash((self.p2, self.p1))

    def __repr__(self):
        return "Line(({}, {}), ({}, {}))".format(self.p1.x, self.p1.y,
                                                 self.p2.x, self.p2.y)

    def is_degenerate(self):
        return (int(self.p1.x) == int(self.p2.x) and
                int(self.p1.y) == int(self.p2.y))


def polygon_edges(points):
    """ Closed outline of a polygon as a list of Lines. """
    return [Line(points[i], points[(i + 1) % len(points)])
            for i in range(len(points))]
