import io
import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')

import pygame  # noqa: E402

from shapegfx.display import (ShapeDisplay, caption_lines, encode_vectors,  # noqa: E402
                              toPoint, vector_lines)
from shapegfx.meshes import TorusParams  # noqa: E402
from shapegfx.palette import DARK  # noqa: E402
from shapegfx.render import Polygon, RenderFrame, render_frame  # noqa: E402
from shapegfx.vectorgfx import Line, Point  # noqa: E402

## unit tests for shapegfx display.py

FRAME_START = bytes([0, 0, 0, 0])
FRAME_END = bytes([1, 0, 0, 0])


def _polygon(points, facing=True, intensity=1.0):
    return Polygon(points, DARK.primary, DARK.outline, 2, intensity, facing)


def test_point_encoding():
    expected = ((2 << 30) | (24 << 24) | (0xabc << 12) | 0x123)
    assert toPoint(0xabc, 0x123, 24) == expected.to_bytes(4, 'big')


def test_shared_edges_are_sent_once():
    a, b, c, d = Point(0, 0), Point(10, 0), Point(0, 10), Point(10, -10)
    frame = RenderFrame(100, 100, DARK.background, [],
                        [_polygon([a, b, c]), _polygon([b, a, d]),
                         _polygon([c, d, b], facing=False)])
    lines = vector_lines(frame)
    assert len(lines) == 5
    assert all(bright == 24 for _, bright in lines)


def test_only_front_face_of_unrotated_cube_is_sent():
    frame = render_frame('cube', rotation=(0, 0, 0))
    assert len(vector_lines(frame)) == 4


def test_overlay_lines_are_appended():
    frame = RenderFrame(100, 100, DARK.background, [], [])
    overlay = [Line(Point(1, 1), Point(5, 5))]
    assert vector_lines(frame, overlay) == [(overlay[0], 16)]


def test_encode_frames_and_transit_moves():
    lines = [(Line(Point(0, 0), Point(64, 64)), 10),
             (Line(Point(64, 64), Point(128, 0)), 10)]
    data = encode_vectors(lines, 512, 512)
    assert data.startswith(FRAME_START)
    assert data.endswith(FRAME_END)
    # one transit move, then one point per connected line
    assert len(data) == 8 + 3 * 4
    assert data[4:8] == toPoint(0, 4095, 0)
    assert data[8:12] == toPoint(512, 4095 - 512, 10)


def test_encode_clamps_and_skips_zero_length_lines():
    lines = [(Line(Point(3, 3), Point(3.4, 3.2)), 10),
             (Line(Point(0, 0), Point(512, 512)), 10)]
    data = encode_vectors(lines, 512, 512)
    assert len(data) == 8 + 2 * 4
    assert data[8:12] == toPoint(4095, 0, 10)


def test_caption_lines_flip_glyph_y():
    class Font:
        def lines_for_text(self, text):
            return [((0, 0), (10, 5))]

    assert caption_lines(Font(), 'Cube', 16, 100) == \
        [Line(Point(16, 100), Point(26, 95))]


def test_draw_paints_surface_and_writes_port():
    surface = pygame.Surface((200, 200))
    port = io.BytesIO()
    display = ShapeDisplay(port, palette=DARK, surface=surface)
    frame = render_frame('cube', rotation=(25, 45, 0), canvas_size=(200, 200))

    nbytes = display.draw(frame, [Line(Point(10, 190), Point(40, 190))])

    data = port.getvalue()
    assert nbytes == len(data) > 8
    assert data.startswith(FRAME_START) and data.endswith(FRAME_END)
    assert surface.get_at((100, 100))[:3] != DARK.background.to_rgba8()[:3]


def test_draw_without_port():
    surface = pygame.Surface((120, 120))
    display = ShapeDisplay(surface=surface)
    assert display.size == (120, 120)
    assert display.draw(render_frame('sphere', canvas_size=(120, 120))) == 0


def test_draw_survives_vertices_near_viewer_plane():
    # The tube crosses z = -4, so some vertices project far off the surface.
    frame = render_frame('torus', TorusParams(4.0, 0.3), (0, 0, 0),
                         (512, 512))
    assert max(abs(c) for polygon in frame.polygons
               for p in polygon.points for c in p) > 512 * 100

    surface = pygame.Surface((512, 512))
    display = ShapeDisplay(surface=surface)
    assert display.draw(frame) == 0
    assert surface.get_size() == (512, 512)


def test_translucent_polygon_off_surface_is_skipped():
    surface = pygame.Surface((50, 50))
    frame = RenderFrame(50, 50, DARK.background, [], [
        _polygon([Point(-500, -500), Point(-400, -500), Point(-400, -400)])])
    ShapeDisplay(surface=surface).draw(frame)
    assert surface.get_at((49, 49))[:3] == DARK.background.to_rgba8()[:3]


def test_sync_resets_parser():
    port = io.BytesIO()
    display = ShapeDisplay(port, surface=pygame.Surface((50, 50)))
    display.sync()
    assert port.getvalue() == FRAME_START


def test_sync_without_port():
    display = ShapeDisplay(surface=pygame.Surface((50, 50)))
    display.sync()
    assert display.port is None
