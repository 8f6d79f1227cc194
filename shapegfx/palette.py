from collections import namedtuple


def clamp(value, low, high):
    return max(low, min(high, value))


class Color(namedtuple('Color', ['r', 'g', 'b', 'a'])):
    """ RGBA color with float channels in [0, 1]. """
    __slots__ = ()

    def __new__(cls, r, g, b, a=1.0):
        return super().__new__(cls, r, g, b, a)

    @classmethod
    def from_argb(cls, value):
        """ Builds a color from a packed 0xAARRGGBB integer. """
        return cls(((value >> 16) & 0xff) / 255,
                   ((value >> 8) & 0xff) / 255,
                   (value & 0xff) / 255,
                   ((value >> 24) & 0xff) / 255)

    def with_alpha(self, alpha):
        return Color(self.r, self.g, self.b, alpha)

    def scaled(self, factor):
        """ Multiplies the RGB channels by factor, clamped; alpha unchanged.
        """
        return Color(clamp(self.r * factor, 0.0, 1.0),
                     clamp(self.g * factor, 0.0, 1.0),
                     clamp(self.b * factor, 0.0, 1.0),
                     self.a)

    def to_rgba8(self):
        return tuple(int(round(clamp(c, 0.0, 1.0) * 255)) for c in self)


class Palette(namedtuple('Palette', ['name', 'primary', 'secondary',
                                     'tertiary', 'background'])):
    """ Theme colors handed to the mesh builders and the compositor. """
    __slots__ = ()

    @property
    def cycle(self):
        return (self.primary, self.secondary, self.tertiary)

    @property
    def outline(self):
        return self.primary.with_alpha(0.5)

    @property
    def grid(self):
        return self.primary.with_alpha(0.3)

    @property
    def layout_grid(self):
        return self.primary.with_alpha(0.05)


DARK = Palette('dark',
               primary=Color.from_argb(0xFF00F0FF),
               secondary=Color.from_argb(0xFFBC13FE),
               tertiary=Color.from_argb(0xFF00FF9D),
               background=Color.from_argb(0xFF050A14))

LIGHT = Palette('light',
                primary=Color.from_argb(0xFF00838F),
                secondary=Color.from_argb(0xFF7B1FA2),
                tertiary=Color.from_argb(0xFF2E7D32),
                background=Color.from_argb(0xFFF0F2F5))

PALETTES = {p.name: p for p in (DARK, LIGHT)}

OUTLINE_WIDTH = 2
