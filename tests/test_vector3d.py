import math

import pytest

from shapegfx.vector3d import Face, Mesh, Point3D
from shapegfx.palette import DARK

## unit tests for shapegfx vector3d.py

POINTS = [Point3D(1, 0, 0), Point3D(0.3, -2.5, 1.25), Point3D(-4, 7, -0.5)]
ANGLES = [0, 15, 90, -135, 270, 721.5]


def _close(p, q, tol=1e-5):
    return all(abs(a - b) <= tol for a, b in zip(p, q))


class TestRotation:

    @pytest.mark.parametrize('axis', ['rotateX', 'rotateY', 'rotateZ'])
    def test_inverse_rotation_restores_point(self, axis):
        for p in POINTS:
            for angle in ANGLES:
                there = getattr(p, axis)(angle)
                back = getattr(there, axis)(-angle)
                assert _close(back, p)

    @pytest.mark.parametrize('axis', ['rotateX', 'rotateY', 'rotateZ'])
    def test_rotation_preserves_length(self, axis):
        for p in POINTS:
            for angle in ANGLES:
                assert getattr(p, axis)(angle).length() == \
                    pytest.approx(p.length())

    def test_quarter_turns(self):
        assert _close(Point3D(0, 1, 0).rotateX(90), (0, 0, 1))
        assert _close(Point3D(1, 0, 0).rotateY(90), (0, 0, -1))
        assert _close(Point3D(1, 0, 0).rotateZ(90), (0, 1, 0))

    def test_combined_order_is_x_then_y_then_z(self):
        p = Point3D(0.2, 0.7, -1.1)
        expected = p.rotateX(30).rotateY(-50).rotateZ(110)
        assert _close(p.rotate(30, -50, 110), expected, 1e-12)

    def test_points_are_immutable(self):
        p = Point3D(1, 2, 3)
        p.rotateX(45).rotateY(10)
        assert p == (1, 2, 3)
        with pytest.raises(AttributeError):
            p.x = 5


class TestProjection:

    def test_perspective_divide(self):
        offset = Point3D(1, 1, 0).project(1.5, 4.0)
        factor = 1.5 / 4.001
        assert offset.x == pytest.approx(factor)
        assert offset.y == pytest.approx(-factor)

    def test_projection_shrinks_with_distance(self):
        p = Point3D(0.8, -0.4, 0.5)
        near = p.project(1.5, 2.0)
        far = p.project(1.5, 8.0)
        assert abs(near.x) > abs(far.x)
        assert abs(near.y) > abs(far.y)

    def test_epsilon_guards_divide(self):
        offset = Point3D(1, 0, -4.0).project(1.5, 4.0)
        assert math.isfinite(offset.x)
        assert offset.x == pytest.approx(1500.0)


class TestFace:

    def test_average_z_and_centroid(self):
        face = Face([Point3D(0, 0, 1), Point3D(1, 0, 2), Point3D(0, 1, 3)],
                    DARK.primary)
        assert face.average_z() == pytest.approx(2.0)
        assert _close(face.centroid(), (1 / 3, 1 / 3, 2.0))

    def test_normal_follows_winding(self):
        ccw = Face([Point3D(0, 0, 0), Point3D(1, 0, 0), Point3D(0, 1, 0)],
                   DARK.primary)
        assert ccw.normal() == (0, 0, 1)
        cw = Face(reversed(ccw.vertices), DARK.primary)
        assert cw.normal().z < 0

    def test_rotation_keeps_color_and_original(self):
        face = Face([Point3D(1, 0, 0), Point3D(0, 1, 0), Point3D(0, 0, 1)],
                    DARK.secondary)
        turned = face.rotate(10, 20, 30)
        assert turned.color == DARK.secondary
        assert face.vertices[0] == (1, 0, 0)
        assert len(turned.vertices) == 3


def test_mesh_depth_sort_is_back_to_front_and_stable():
    def flat(z, color):
        return Face([Point3D(0, 0, z), Point3D(1, 0, z), Point3D(0, 1, z)],
                    color)

    a, b, c, d = (flat(0, DARK.primary), flat(2, DARK.primary),
                  flat(0, DARK.secondary), flat(-1, DARK.tertiary))
    ordered = Mesh([a, b, c, d]).depth_sorted().faces
    assert ordered == [b, a, c, d]
