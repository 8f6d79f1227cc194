import math
from collections import namedtuple

from .vectorgfx import Point

# Field of view and viewer distance of the fixed perspective camera.
FOV = 1.5
VIEWER_DISTANCE = 4.0
# Keeps the perspective divide finite when z approaches -viewer_distance.
EPSILON = 0.001


class Point3D(namedtuple('Point3D', ['x', 'y', 'z'])):
    """ An immutable point (or vector) in object space.

    Every transform returns a new point; the receiver is never modified.
    """
    __slots__ = ()

    def __new__(cls, x=0.0, y=0.0, z=0.0):
        return super().__new__(cls, x, y, z)

    def __sub__(self, other):
        return Point3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def translate(self, x, y, z):
        return Point3D(self.x + x, self.y + y, self.z + z)

    def scale(self, x_factor, y_factor, z_factor):
        return Point3D(self.x * x_factor, self.y * y_factor, self.z * z_factor)

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Point3D(self.y * other.z - self.z * other.y,
                       self.z * other.x - self.x * other.z,
                       self.x * other.y - self.y * other.x)

    def length(self):
        return math.sqrt(self.dot(self))

    def rotateX(self, angle):
        """ Rotates this point around the X axis the given number of degrees.
        """
        cosa = math.cos(math.radians(angle))
        sina = math.sin(math.radians(angle))
        y = self.y * cosa - self.z * sina
        z = self.y * sina + self.z * cosa
        return Point3D(self.x, y, z)

    def rotateY(self, angle):
        """ Rotates this point around the Y axis the given number of degrees.
        """
        cosa = math.cos(math.radians(angle))
        sina = math.sin(math.radians(angle))
        z = self.z * cosa - self.x * sina
        x = self.z * sina + self.x * cosa
        return Point3D(x, self.y, z)

    def rotateZ(self, angle):
        """ Rotates this point around the Z axis the given number of degrees.
        """
        cosa = math.cos(math.radians(angle))
        sina = math.sin(math.radians(angle))
        x = self.x * cosa - self.y * sina
        y = self.x * sina + self.y * cosa
        return Point3D(x, y, self.z)

    def rotate(self, rx, ry, rz):
        """ Applies rotateX, rotateY and rotateZ in that order. """
        return self.rotateX(rx).rotateY(ry).rotateZ(rz)

    def project(self, fov=FOV, viewer_distance=VIEWER_DISTANCE):
        """ Perspective projection to a 2D offset in object-space units.

        Screen y grows downwards, so the y axis is flipped.
        """
        factor = fov / (viewer_distance + self.z + EPSILON)
        return Point(self.x * factor, -self.y * factor)


class Face(namedtuple('Face', ['vertices', 'color'])):
    """ A planar polygon of three or more Point3D with a base Color. """
    __slots__ = ()

    def __new__(cls, vertices, color):
        return super().__new__(cls, tuple(vertices), color)

    def rotate(self, rx, ry, rz):
        return Face([v.rotate(rx, ry, rz) for v in self.vertices], self.color)

    def average_z(self):
        return sum(v.z for v in self.vertices) / len(self.vertices)

    def centroid(self):
        n = len(self.vertices)
        return Point3D(sum(v.x for v in self.vertices) / n,
                       sum(v.y for v in self.vertices) / n,
                       sum(v.z for v in self.vertices) / n)

    def normal(self):
        """ Unnormalized normal from the first three vertices. """
        v0, v1, v2 = self.vertices[:3]
        return (v1 - v0).cross(v2 - v0)


class Mesh:
    def __init__(self, faces):
        self.faces = list(faces)

    def rotate(self, rx, ry, rz):
        return Mesh(face.rotate(rx, ry, rz) for face in self.faces)

    def depth_sorted(self):
        """ Faces ordered back to front by average z (painter's algorithm).

        The sort is stable: faces at equal depth keep generation order.
        """
        return Mesh(sorted(self.faces, key=Face.average_z, reverse=True))
