""" Depth sort and compositing of a shape into screen-space polygons.

A frame is a pure function of (kind, params, rotation, canvas size, palette):
faces are rotated x then y then z, sorted back to front by average depth,
flat shaded, projected and scaled onto the canvas.
"""
from collections import namedtuple

from .meshes import cached_faces, default_params, ShapeKind
from .palette import DARK, OUTLINE_WIDTH
from .rotation import RotationState
from .shading import LIGHT_DIRECTION, shade_face
from .vector3d import FOV, Mesh, Point3D, VIEWER_DISTANCE
from .vectorgfx import Line, Point

# Share of the shorter canvas side covered by one object-space unit.
SCALE_FACTOR = 0.6

GRID_SIZE = 5
GRID_STEP = 0.4
GRID_FLOOR_Y = -0.8
GRID_WIDTH = 1.5
LAYOUT_GRID_SPACING = 40
LAYOUT_GRID_WIDTH = 1

EYE = Point3D(0.0, 0.0, -VIEWER_DISTANCE)

Polygon = namedtuple('Polygon', ['points', 'fill', 'outline', 'outline_width',
                                 'intensity', 'facing'])
GridLine = namedtuple('GridLine', ['line', 'color', 'width'])
RenderFrame = namedtuple('RenderFrame', ['width', 'height', 'background',
                                         'grid', 'polygons'])


class Viewport(namedtuple('Viewport', ['width', 'height'])):
    """ Maps projected offsets onto a canvas of the given pixel size. """
    __slots__ = ()

    @property
    def scale(self):
        return min(self.width, self.height) * SCALE_FACTOR

    @property
    def center(self):
        return Point(self.width / 2, self.height / 2)

    def to_screen(self, offset):
        return offset.scale(self.scale, self.scale).translate(*self.center)

    def project(self, point):
        return self.to_screen(point.project(FOV, VIEWER_DISTANCE))


def depth_sort(faces, rotation):
    """ Rotates the faces and orders them farthest first. """
    rx, ry, rz = rotation
    return Mesh(faces).rotate(rx, ry, rz).depth_sorted().faces


def is_facing(face):
    return face.normal().dot(face.vertices[0] - EYE) < 0


def composite(faces, viewport, palette=DARK, light=LIGHT_DIRECTION):
    """ Shades and projects already rotated, sorted faces. """
    polygons = []
    for face in faces:
        intensity, fill = shade_face(face, light)
        points = [viewport.project(v) for v in face.vertices]
        polygons.append(Polygon(points, fill, palette.outline, OUTLINE_WIDTH,
                                intensity, is_facing(face)))
    return polygons


def grid_lines(rotation, canvas_size, palette=DARK):
    """ Floor grid under the shape; follows rx and ry but not rz. """
    rx, ry = rotation[0], rotation[1]
    viewport = Viewport(*canvas_size)
    extent = GRID_SIZE * GRID_STEP
    lines = []
    for i in range(-GRID_SIZE, GRID_SIZE + 1):
        offset = i * GRID_STEP
        for start, end in (
                (Point3D(offset, GRID_FLOOR_Y, -extent),
                 Point3D(offset, GRID_FLOOR_Y, extent)),
                (Point3D(-extent, GRID_FLOOR_Y, offset),
                 Point3D(extent, GRID_FLOOR_Y, offset))):
            p1 = viewport.project(start.rotateX(rx).rotateY(ry))
            p2 = viewport.project(end.rotateX(rx).rotateY(ry))
            lines.append(GridLine(Line(p1, p2), palette.grid, GRID_WIDTH))
    return lines


def layout_grid_lines(canvas_size, palette=DARK,
                      spacing=LAYOUT_GRID_SPACING):
    """ Static screen-space grid behind everything else. """
    width, height = canvas_size
    lines = [GridLine(Line(Point(x, 0), Point(x, height)),
                      palette.layout_grid, LAYOUT_GRID_WIDTH)
             for x in range(0, int(width) + 1, spacing)]
    lines.extend(GridLine(Line(Point(0, y), Point(width, y)),
                          palette.layout_grid, LAYOUT_GRID_WIDTH)
                 for y in range(0, int(height) + 1, spacing))
    return lines


def render_frame(kind, params=None, rotation=(0.0, 0.0, 0.0),
                 canvas_size=(512, 512), palette=DARK, light=LIGHT_DIRECTION,
                 grid=True):
    """ Renders one frame of a shape.

    kind is a ShapeKind (or its name), params the matching dimensions
    (defaults when None) and rotation an (rx, ry, rz) snapshot in degrees.
    The returned polygons are in draw order, back to front.
    """
    kind = ShapeKind.parse(kind)
    if params is None:
        params = default_params(kind)
    rotation = RotationState(*rotation).normalized()
    faces = depth_sort(cached_faces(kind, params, palette), rotation)
    polygons = composite(faces, Viewport(*canvas_size), palette, light)
    background = []
    if grid:
        background = (layout_grid_lines(canvas_size, palette) +
                      grid_lines(rotation, canvas_size, palette))
    return RenderFrame(canvas_size[0], canvas_size[1], palette.background,
                       background, polygons)
