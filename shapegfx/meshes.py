""" Procedural meshes for the nine primitive shapes.

Every builder is pure: the same parameters and palette always give the same
faces, centered on the origin with +y up. Faces are wound so that the cross
product of their first two edges points out of the solid.
"""
import enum
import functools
import math
from collections import namedtuple

from .palette import DARK
from .vector3d import Face, Point3D

SPHERE_SEGMENTS = 16
SPHERE_RINGS = 12
HEMISPHERE_RINGS = 8
CYLINDER_SEGMENTS = 20
CONE_SEGMENTS = 20
TORUS_MAJOR_SEGMENTS = 24
TORUS_MINOR_SEGMENTS = 12

# Alpha of the sphere and hemisphere shells.
SHELL_ALPHA = 0.8


class ShapeKind(enum.Enum):
    CUBE = 'Cube'
    SPHERE = 'Sphere'
    CYLINDER = 'Cylinder'
    CONE = 'Cone'
    PYRAMID = 'Pyramid'
    RECTANGULAR_PRISM = 'Rectangular Prism'
    TRIANGULAR_PRISM = 'Triangular Prism'
    TORUS = 'Torus'
    HEMISPHERE = 'Hemisphere'

    @property
    def display_name(self):
        return self.value

    @property
    def slug(self):
        return self.name.lower().replace('_', '-')

    @classmethod
    def parse(cls, name):
        """ Looks a kind up by enum name, slug or display name. """
        if isinstance(name, cls):
            return name
        key = str(name).strip().upper().replace('-', '_').replace(' ', '_')
        try:
            return cls[key]
        except KeyError:
            raise ValueError('Unknown shape kind: {!r}'.format(name))


def _params_type(typename, kind, **defaults):
    params = namedtuple(typename, list(defaults),
                        defaults=list(defaults.values()))
    params.kind = kind
    return params


CubeParams = _params_type('CubeParams', ShapeKind.CUBE, side=1.0)
SphereParams = _params_type('SphereParams', ShapeKind.SPHERE, radius=1.0)
CylinderParams = _params_type('CylinderParams', ShapeKind.CYLINDER,
                              radius=1.0, height=1.5)
ConeParams = _params_type('ConeParams', ShapeKind.CONE,
                          radius=1.0, height=1.5)
PyramidParams = _params_type('PyramidParams', ShapeKind.PYRAMID,
                             side=1.0, height=1.5)
RectangularPrismParams = _params_type('RectangularPrismParams',
                                      ShapeKind.RECTANGULAR_PRISM,
                                      length=1.5, width=1.0, depth=0.8)
TriangularPrismParams = _params_type('TriangularPrismParams',
                                     ShapeKind.TRIANGULAR_PRISM,
                                     side=1.0, height=1.5)
TorusParams = _params_type('TorusParams', ShapeKind.TORUS,
                           major_radius=1.0, minor_radius=0.3)
HemisphereParams = _params_type('HemisphereParams', ShapeKind.HEMISPHERE,
                                radius=1.0)

PARAMS_TYPES = {p.kind: p for p in (
    CubeParams, SphereParams, CylinderParams, ConeParams, PyramidParams,
    RectangularPrismParams, TriangularPrismParams, TorusParams,
    HemisphereParams)}


def _params_type_for(kind):
    return PARAMS_TYPES[ShapeKind.parse(kind)]


def default_params(kind):
    return _params_type_for(kind)()


def params_for(kind, **dims):
    """ Picks the dimensions relevant to kind out of dims.

    Dimensions the kind does not use, or that are None, are ignored and the
    kind's defaults fill the gaps.
    """
    params = _params_type_for(kind)
    return params(**{f: dims[f] for f in params._fields
                     if dims.get(f) is not None})


def _box(hx, hy, hz, palette):
    vertices = [
        Point3D(-hx, -hy, -hz), Point3D(hx, -hy, -hz),
        Point3D(hx, hy, -hz), Point3D(-hx, hy, -hz),
        Point3D(-hx, -hy, hz), Point3D(hx, -hy, hz),
        Point3D(hx, hy, hz), Point3D(-hx, hy, hz)
    ]
    # front, back, left, right, bottom, top
    quads = [(0, 3, 2, 1), (4, 5, 6, 7), (0, 4, 7, 3),
             (1, 2, 6, 5), (0, 1, 5, 4), (3, 7, 6, 2)]
    colors = palette.cycle
    return [Face([vertices[i] for i in quad], colors[n % 3])
            for n, quad in enumerate(quads)]


def cube_faces(params, palette=DARK):
    s = params.side * 0.5
    return _box(s, s, s, palette)


def rectangular_prism_faces(params, palette=DARK):
    return _box(params.length * 0.5, params.width * 0.5, params.depth * 0.5,
                palette)


def _spherical(radius, theta, phi):
    return Point3D(radius * math.sin(theta) * math.cos(phi),
                   radius * math.cos(theta),
                   radius * math.sin(theta) * math.sin(phi))


def _uv_shell(radius, rings, theta_max, palette, odd_color, alpha=1.0):
    faces = []
    for i in range(rings):
        theta1 = theta_max * i / rings
        theta2 = theta_max * (i + 1) / rings
        for j in range(SPHERE_SEGMENTS):
            phi1 = 2 * math.pi * j / SPHERE_SEGMENTS
            phi2 = 2 * math.pi * (j + 1) / SPHERE_SEGMENTS
            color = palette.primary if j % 2 == 0 else odd_color
            faces.append(Face([_spherical(radius, theta1, phi1),
                               _spherical(radius, theta1, phi2),
                               _spherical(radius, theta2, phi2),
                               _spherical(radius, theta2, phi1)],
                              color.with_alpha(alpha)))
    return faces


def sphere_faces(params, palette=DARK):
    return _uv_shell(params.radius, SPHERE_RINGS, math.pi, palette,
                     palette.secondary, SHELL_ALPHA)


def hemisphere_faces(params, palette=DARK):
    r = params.radius
    faces = _uv_shell(r, HEMISPHERE_RINGS, math.pi / 2, palette,
                      palette.tertiary)
    center = Point3D(0.0, 0.0, 0.0)
    for j in range(SPHERE_SEGMENTS):
        phi1 = 2 * math.pi * j / SPHERE_SEGMENTS
        phi2 = 2 * math.pi * (j + 1) / SPHERE_SEGMENTS
        p1 = Point3D(r * math.cos(phi1), 0.0, r * math.sin(phi1))
        p2 = Point3D(r * math.cos(phi2), 0.0, r * math.sin(phi2))
        faces.append(Face([center, p1, p2], palette.secondary))
    return faces


def _ring_point(radius, angle, y):
    return Point3D(radius * math.cos(angle), y, radius * math.sin(angle))


def cylinder_faces(params, palette=DARK):
    r = params.radius
    h = params.height * 0.5
    top_center = Point3D(0.0, h, 0.0)
    bottom_center = Point3D(0.0, -h, 0.0)
    faces = []
    for i in range(CYLINDER_SEGMENTS):
        angle1 = 2 * math.pi * i / CYLINDER_SEGMENTS
        angle2 = 2 * math.pi * (i + 1) / CYLINDER_SEGMENTS
        top1 = _ring_point(r, angle1, h)
        top2 = _ring_point(r, angle2, h)
        bottom1 = _ring_point(r, angle1, -h)
        bottom2 = _ring_point(r, angle2, -h)
        side = palette.primary if i % 2 == 0 else palette.secondary
        faces.append(Face([top1, top2, bottom2, bottom1], side))
        faces.append(Face([top_center, top2, top1], palette.tertiary))
        faces.append(Face([bottom_center, bottom1, bottom2],
                          palette.tertiary))
    return faces


def cone_faces(params, palette=DARK):
    r = params.radius
    h = params.height * 0.5
    apex = Point3D(0.0, h, 0.0)
    base_center = Point3D(0.0, -h, 0.0)
    faces = []
    for i in range(CONE_SEGMENTS):
        angle1 = 2 * math.pi * i / CONE_SEGMENTS
        angle2 = 2 * math.pi * (i + 1) / CONE_SEGMENTS
        base1 = _ring_point(r, angle1, -h)
        base2 = _ring_point(r, angle2, -h)
        side = palette.primary if i % 2 == 0 else palette.secondary
        faces.append(Face([apex, base2, base1], side))
        faces.append(Face([base_center, base1, base2], palette.tertiary))
    return faces


def pyramid_faces(params, palette=DARK):
    s = params.side * 0.5
    h = params.height * 0.5
    apex = Point3D(0.0, h, 0.0)
    base = [Point3D(-s, -h, -s), Point3D(s, -h, -s),
            Point3D(s, -h, s), Point3D(-s, -h, s)]
    colors = palette.cycle
    faces = [Face([apex, base[(k + 1) % 4], base[k]], colors[k % 3])
             for k in range(4)]
    faces.append(Face(base, palette.secondary))
    return faces


def triangular_prism_faces(params, palette=DARK):
    """ Equilateral triangle of the given side, extruded along z by height.
    """
    s = params.side * 0.5
    h = params.height * 0.5
    t = params.side * math.sqrt(3) / 2
    apex = Point3D(0.0, t * 0.5, -h)
    left = Point3D(-s, -t * 0.5, -h)
    right = Point3D(s, -t * 0.5, -h)
    apex_b, left_b, right_b = (p.translate(0.0, 0.0, 2 * h)
                               for p in (apex, left, right))
    return [
        Face([apex, right, left], palette.primary),
        Face([apex_b, left_b, right_b], palette.secondary),
        Face([left, right, right_b, left_b], palette.tertiary),
        Face([right, apex, apex_b, right_b], palette.primary),
        Face([apex, left, left_b, apex_b], palette.secondary),
    ]


def torus_faces(params, palette=DARK):
    R = params.major_radius
    r = params.minor_radius

    def torus_point(theta, phi):
        ring = R + r * math.cos(phi)
        return Point3D(ring * math.cos(theta), r * math.sin(phi),
                       ring * math.sin(theta))

    faces = []
    for i in range(TORUS_MAJOR_SEGMENTS):
        theta1 = 2 * math.pi * i / TORUS_MAJOR_SEGMENTS
        theta2 = 2 * math.pi * (i + 1) / TORUS_MAJOR_SEGMENTS
        for j in range(TORUS_MINOR_SEGMENTS):
            phi1 = 2 * math.pi * j / TORUS_MINOR_SEGMENTS
            phi2 = 2 * math.pi * (j + 1) / TORUS_MINOR_SEGMENTS
            color = palette.primary if (i + j) % 2 == 0 else palette.secondary
            faces.append(Face([torus_point(theta1, phi1),
                               torus_point(theta1, phi2),
                               torus_point(theta2, phi2),
                               torus_point(theta2, phi1)], color))
    return faces


_BUILDERS = {
    ShapeKind.CUBE: cube_faces,
    ShapeKind.SPHERE: sphere_faces,
    ShapeKind.CYLINDER: cylinder_faces,
    ShapeKind.CONE: cone_faces,
    ShapeKind.PYRAMID: pyramid_faces,
    ShapeKind.RECTANGULAR_PRISM: rectangular_prism_faces,
    ShapeKind.TRIANGULAR_PRISM: triangular_prism_faces,
    ShapeKind.TORUS: torus_faces,
    ShapeKind.HEMISPHERE: hemisphere_faces,
}


def build_faces(kind, params=None, palette=DARK):
    """ Object-space faces for a shape kind.

    params defaults to the kind's default dimensions. Raises ValueError for
    a kind outside ShapeKind.
    """
    kind = ShapeKind.parse(kind)
    if params is None:
        params = default_params(kind)
    return _BUILDERS[kind](params, palette)


@functools.lru_cache(maxsize=64)
def cached_faces(kind, params, palette=DARK):
    """ Memoized build_faces; faces do not depend on rotation. """
    return tuple(build_faces(kind, params, palette))
