""" Flat shading with a single fixed directional light. """
from .palette import clamp
from .vector3d import Point3D

# Points from the surface toward the light: up, right and toward the viewer.
LIGHT_DIRECTION = Point3D(0.3, 0.5, -1.0)

AMBIENT = 0.4
DIFFUSE = 0.6
MIN_INTENSITY = 0.2
MAX_INTENSITY = 1.0
NORMAL_EPS = 1e-12


def face_normal(face):
    return face.normal()


def light_intensity(normal, light=LIGHT_DIRECTION):
    """ Lambert term remapped to [0.2, 1.0].

    A zero-length normal or light falls back to the ambient level so
    degenerate faces are still drawn.
    """
    normal_length = normal.length()
    light_length = light.length()
    if normal_length < NORMAL_EPS or light_length < NORMAL_EPS:
        return AMBIENT
    cosa = normal.dot(light) / (normal_length * light_length)
    return clamp(cosa * DIFFUSE + AMBIENT, MIN_INTENSITY, MAX_INTENSITY)


def lit_color(color, intensity):
    return color.scaled(intensity)


def shade_face(face, light=LIGHT_DIRECTION):
    """ Returns (intensity, lit color) for an already rotated face. """
    intensity = light_intensity(face_normal(face), light)
    return intensity, lit_color(face.color, intensity)
