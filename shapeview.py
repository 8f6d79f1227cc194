import argparse
import math
import sys
import time

import pygame
import serial
from HersheyFonts import HersheyFonts

from shapegfx import (PALETTES, RotationState, ShapeKind, advance_rotation,
                      params_for, render_frame)
from shapegfx.display import ShapeDisplay, caption_lines
from shapegfx.rotation import AUTO_ROTATION_CYCLE_MS

DIMENSIONS = ('side', 'radius', 'height', 'length', 'width', 'depth',
              'major_radius', 'minor_radius')
Z_STEP = 5


class ShapeViewer:
    def __init__(self, kind, dims, palette, rotation, auto_rotating=True,
                 cycle_ms=AUTO_ROTATION_CYCLE_MS):
        self.dims = dims
        self.palette = palette
        self.rotation = rotation
        self.auto_rotating = auto_rotating
        self.cycle_ms = cycle_ms
        self.frames = 0

        self.font = HersheyFonts()
        self.font.load_default_font('futural')
        self.font.normalize_rendering(20)

        self.select(kind)

    def select(self, kind):
        self.kind = kind
        self.params = params_for(kind, **self.dims)

    def cycle_shape(self, step=1):
        kinds = list(ShapeKind)
        self.select(kinds[(kinds.index(self.kind) + step) % len(kinds)])

    def handle_events(self, dragging):
        """ Returns (running, dragging, drag_delta) for this frame. """
        dx, dy = 0, 0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False, dragging, (dx, dy)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                dragging = True
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                dragging = False
            elif event.type == pygame.MOUSEMOTION and dragging:
                dx += event.rel[0]
                dy += event.rel[1]
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False, dragging, (dx, dy)
                elif event.key == pygame.K_SPACE:
                    self.auto_rotating = not self.auto_rotating
                elif event.key == pygame.K_r:
                    self.rotation = self.rotation.reset()
                elif event.key == pygame.K_q:
                    self.rotation = self.rotation.rotated(drz=-Z_STEP)
                elif event.key == pygame.K_e:
                    self.rotation = self.rotation.rotated(drz=Z_STEP)
                elif event.key == pygame.K_TAB:
                    self.cycle_shape(-1 if event.mod & pygame.KMOD_SHIFT
                                     else 1)
                elif pygame.K_1 <= event.key <= pygame.K_9:
                    self.select(list(ShapeKind)[event.key - pygame.K_1])
        return True, dragging, (dx, dy)

    def run(self, display):
        """ Main Loop """
        display.sync()
        clock = pygame.time.Clock()
        start = pygame.time.get_ticks()
        dragging = False
        width, height = display.size

        while True:
            clock.tick(60)

            running, dragging, drag_delta = self.handle_events(dragging)
            if not running:
                return

            self.rotation, snapshot = advance_rotation(
                self.rotation, self.auto_rotating, drag_delta,
                pygame.time.get_ticks() - start, self.cycle_ms)

            frame = render_frame(self.kind, self.params, snapshot,
                                 (width, height), self.palette)
            caption = caption_lines(self.font, self.kind.display_name,
                                    16, height - 16)
            display.draw(frame, caption)
            self.frames += 1


def positive(value):
    number = float(value)
    if not (math.isfinite(number) and number > 0):
        raise argparse.ArgumentTypeError(
            '{} is not a finite positive dimension'.format(value))
    return number


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Rotating, flat shaded 3D primitives')
    parser.add_argument('shape', nargs='?', default='cube',
                        help='Shape to show (see --list-shapes)')
    parser.add_argument('--list-shapes', '-l', action='store_true',
                        help='List shape names and exit')
    parser.add_argument('--port', '-p',
                        help='Serial port for V.st/ESP32 device')
    parser.add_argument('--baud', '-b', type=int, default=115200,
                        help='Baud rate for V.st/ESP32 device')
    parser.add_argument('--size', '-s', type=int, default=512,
                        help='Window size in pixels')
    parser.add_argument('--theme', choices=sorted(PALETTES), default='dark',
                        help='Color theme')
    parser.add_argument('--paused', action='store_true',
                        help='Start with auto-rotation off')
    parser.add_argument('--cycle-ms', type=positive,
                        default=AUTO_ROTATION_CYCLE_MS,
                        help='Milliseconds per auto-rotation turn')
    parser.add_argument('--rotation', type=float, nargs=3,
                        metavar=('RX', 'RY', 'RZ'),
                        help='Initial rotation in degrees')
    for dim in DIMENSIONS:
        parser.add_argument('--' + dim.replace('_', '-'), type=positive,
                            help='Shape {} (default per shape)'.format(
                                dim.replace('_', ' ')))
    args = parser.parse_args(argv)

    if args.list_shapes:
        for kind in ShapeKind:
            print('{:20} {}'.format(kind.slug, kind.display_name))
        sys.exit(0)

    try:
        kind = ShapeKind.parse(args.shape)
    except ValueError as e:
        parser.error(str(e))
    if args.size <= 0:
        parser.error('Window size must be positive')

    pygame.init()
    rotation = (RotationState(*args.rotation) if args.rotation
                else RotationState())
    viewer = ShapeViewer(kind, {dim: getattr(args, dim) for dim in DIMENSIONS},
                         PALETTES[args.theme], rotation,
                         auto_rotating=not args.paused,
                         cycle_ms=args.cycle_ms)

    tstart = time.time()
    if args.port:
        with serial.Serial(args.port, args.baud) as port:
            viewer.run(ShapeDisplay(port, win_size=args.size,
                                    palette=viewer.palette))
    else:
        viewer.run(ShapeDisplay(win_size=args.size, palette=viewer.palette))
    tend = time.time()

    print("{} frames rendered in {:.3f} s".format(viewer.frames,
                                                    tend - tstart))
    pygame.quit()


if __name__ == "__main__":
    main()
