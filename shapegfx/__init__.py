from .vectorgfx import Point, Line
from .vector3d import Point3D, Face, Mesh, FOV, VIEWER_DISTANCE
from .palette import Color, Palette, DARK, LIGHT, PALETTES
from .meshes import (ShapeKind, build_faces, cached_faces, default_params,
                     params_for)
from .shading import LIGHT_DIRECTION, light_intensity, shade_face
from .rotation import (RotationState, apply_drag, auto_rotation_angle,
                       effective_rotation, advance_rotation)
from .render import (Polygon, RenderFrame, Viewport, depth_sort, grid_lines,
                     render_frame)
