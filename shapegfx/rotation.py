""" Caller-owned rotation state and the pure functions that update it. """
from collections import namedtuple

DEFAULT_ROTATION = (25.0, 45.0, 0.0)
DEGREES_PER_PIXEL = 0.5
AUTO_ROTATION_CYCLE_MS = 10000


class RotationState(namedtuple('RotationState', ['rx', 'ry', 'rz'])):
    """ Rotation in degrees about x, y and z, applied in that order. """
    __slots__ = ()

    def __new__(cls, rx=DEFAULT_ROTATION[0], ry=DEFAULT_ROTATION[1],
                rz=DEFAULT_ROTATION[2]):
        return super().__new__(cls, rx, ry, rz)

    def normalized(self):
        return RotationState(self.rx % 360.0, self.ry % 360.0,
                             self.rz % 360.0)

    def rotated(self, drx=0.0, dry=0.0, drz=0.0):
        return RotationState(self.rx + drx, self.ry + dry, self.rz + drz)

    def reset(self):
        return RotationState(*DEFAULT_ROTATION)


def apply_drag(state, dx, dy, auto_rotating=False):
    """ Horizontal drag turns about y, vertical drag about x.

    Drags are ignored while auto-rotating.
    """
    if auto_rotating:
        return state
    return state.rotated(drx=dy * DEGREES_PER_PIXEL, dry=dx * DEGREES_PER_PIXEL)


def auto_rotation_angle(elapsed_ms, cycle_ms=AUTO_ROTATION_CYCLE_MS):
    """ y angle of a full turn every cycle_ms, wrapping at 360. """
    return (elapsed_ms % cycle_ms) / cycle_ms * 360.0


def effective_rotation(state, auto_rotating, elapsed_ms=0,
                       cycle_ms=AUTO_ROTATION_CYCLE_MS):
    if not auto_rotating:
        return state
    return RotationState(state.rx, auto_rotation_angle(elapsed_ms, cycle_ms),
                         state.rz)


def advance_rotation(state, auto_rotating, drag_delta=(0, 0), elapsed_ms=0,
                     cycle_ms=AUTO_ROTATION_CYCLE_MS):
    """ One frame of input handling.

    Returns (new_state, snapshot): new_state is what the caller keeps,
    snapshot is what gets rendered this frame.
    """
    dx, dy = drag_delta
    state = apply_drag(state, dx, dy, auto_rotating)
    return state, effective_rotation(state, auto_rotating, elapsed_ms,
                                     cycle_ms)
