import itertools
import time

import pygame

from .palette import DARK
from .vectorgfx import Line, Point, polygon_edges

# Vector display coordinates are 12 bits on each axis, y up.
VECTOR_RANGE = 4096
VECTOR_BRIGHTNESS = 24
CAPTION_BRIGHTNESS = 16


def toPoint(x, y, bright, flag=2):
    return (flag << 30 | bright << 24 |
            (int(x) & 0xfff) << 12 | (int(y) & 0xfff)).to_bytes(4, 'big')


def caption_lines(font, text, xpos, ypos):
    """ Screen-space strokes of text set in a HersheyFonts font.

    ypos is the baseline in pixels; glyph y grows upwards.
    """
    return [Line(Point(xpos + x1, ypos - y1), Point(xpos + x2, ypos - y2))
            for (x1, y1), (x2, y2) in font.lines_for_text(text)]


def vector_lines(frame, overlay=()):
    """ Outlines of the polygons facing the viewer plus overlay strokes.

    Edges shared by neighbouring faces are emitted once. Returns
    (line, brightness) pairs in draw order.
    """
    lines = {}
    for polygon in frame.polygons:
        if not polygon.facing:
            continue
        bright = max(1, int(VECTOR_BRIGHTNESS * polygon.intensity))
        for edge in polygon_edges(polygon.points):
            lines.setdefault(edge, bright)
    for line in overlay:
        lines.setdefault(line, CAPTION_BRIGHTNESS)
    return list(lines.items())


def encode_vectors(lines, width, height):
    """ Packs screen-space lines into a V.st/ESP32 vector frame. """
    sx = VECTOR_RANGE / width
    sy = VECTOR_RANGE / height

    def to_vector(p):
        x = min(max(p.x * sx, 0), VECTOR_RANGE - 1)
        y = min(max((VECTOR_RANGE - 1) - p.y * sy, 0), VECTOR_RANGE - 1)
        return x, y

    last = None
    points = []
    for line, bright in lines:
        if line.is_degenerate():
            # Skip any zero-length lines
            continue
        start = to_vector(line.p1)
        end = to_vector(line.p2)
        if start != last:
            # Insert a transit move if line's start point is not the end
            # point of the previous line
            points.append(toPoint(start[0], start[1], 0))
        points.append(toPoint(end[0], end[1], bright))
        last = end

    return (bytes([0, 0, 0, 0]) +
            bytes(itertools.chain.from_iterable(points)) +
            bytes([1, 0, 0, 0]))


def _blend_polygon(target, color, points, width=0):
    """ Draws a polygon with alpha blending onto target. """
    rgba = color.to_rgba8()
    if rgba[3] == 255:
        pygame.draw.polygon(target, rgba, points, width)
        return
    pad = width + 1
    left = int(min(p[0] for p in points)) - pad
    top = int(min(p[1] for p in points)) - pad
    right = int(max(p[0] for p in points)) + pad
    bottom = int(max(p[1] for p in points)) + pad
    # Vertices near the viewer plane project far off screen.
    area = pygame.Rect(left, top, right - left + 1, bottom - top + 1).clip(
        target.get_rect())
    if area.width == 0 or area.height == 0:
        return
    patch = pygame.Surface(area.size, pygame.SRCALPHA)
    pygame.draw.polygon(patch, rgba,
                        [(p[0] - area.x, p[1] - area.y) for p in points],
                        width)
    target.blit(patch, area.topleft)


class ShapeDisplay:
    """ Paints RenderFrames into a pygame window.

    With a serial port, the outlines of the faces turned toward the viewer
    are mirrored to a V.st/ESP32 vector display.
    """

    def __init__(self, port=None, win_size=512, palette=DARK, surface=None):
        self.port = port
        self.palette = palette
        self.owns_display = surface is None
        if surface is None:
            surface = pygame.display.set_mode((win_size, win_size))
        self.screen = surface
        self.screen.fill(palette.background.to_rgba8()[:3])
        pygame.font.init()
        self.font = pygame.font.Font(pygame.font.get_default_font(), 12)
        if self.owns_display:
            pygame.display.flip()

    @property
    def size(self):
        return self.screen.get_size()

    def sync(self):
        # Sending > 4 zero bytes in a row resets the protocol parser to its
        # initial state
        if self.port is not None:
            self.port.write(bytes([0, 0, 0, 0]))

    def _draw_grid(self, grid):
        if not grid:
            return
        layer = pygame.Surface(self.size, pygame.SRCALPHA)
        for grid_line in grid:
            line = grid_line.line
            pygame.draw.line(layer, grid_line.color.to_rgba8(),
                             line.p1, line.p2,
                             max(1, int(round(grid_line.width))))
        self.screen.blit(layer, (0, 0))

    def draw(self, frame, overlay=()):
        """ Paints one frame; overlay holds extra screen-space Lines. """
        draw_start = time.time()

        self.screen.fill(frame.background.to_rgba8()[:3])
        self._draw_grid(frame.grid)
        for polygon in frame.polygons:
            _blend_polygon(self.screen, polygon.fill, polygon.points)
            _blend_polygon(self.screen, polygon.outline, polygon.points,
                           polygon.outline_width)
        caption = self.palette.primary.to_rgba8()[:3]
        for line in overlay:
            pygame.draw.line(self.screen, caption, line.p1, line.p2)

        draw_end = time.time()
        tx_start = draw_end

        nbytes = 0
        if self.port is not None:
            data = encode_vectors(vector_lines(frame, overlay),
                                  frame.width, frame.height)
            self.port.write(data)
            nbytes = len(data)

        tx_end = time.time()

        draw_time = draw_end - draw_start
        tx_time = tx_end - tx_start
        total_time = tx_end - draw_start

        try:
            fps = 1/total_time
        except ZeroDivisionError:
            fps = -1

        text_surface = self.font.render(
            '{} polygons, {} bytes @ {:.2f} fps ({:.2f} ms draw, '
            '{:.2f} ms tx, {:.2f} ms total)'.format(len(frame.polygons),
                                                    nbytes, fps,
                                                    draw_time * 1000,
                                                    tx_time * 1000,
                                                    total_time * 1000),
            False, self.palette.primary.to_rgba8()[:3])
        self.screen.blit(text_surface, (0, 0))
        if self.owns_display:
            pygame.display.flip()
        return nbytes
