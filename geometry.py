"""
Triangle mesh primitives for the pendulum visuals.

Every builder returns a Geometry whose vertices are in local space. Torus
and sphere follow the usual parametric layouts (torus in the XY plane,
cylinder along Y centered on the origin), so transforms applied later by
the scene behave the way they would in any 3D engine.
"""
import numpy as np


class Geometry:
    def __init__(self, vertices, faces, kind="mesh", **parameters):
        self.vertices = np.asarray(vertices, dtype=float)
        self.faces = np.asarray(faces, dtype=int)
        self.kind = kind
        self.parameters = parameters

    def __repr__(self):
        return (
            f"Geometry(kind={self.kind!r}, vertices={len(self.vertices)}, "
            f"faces={len(self.faces)})"
        )

    def translate(self, x, y, z):
        """Shift every vertex in place. Returns self."""
        self.vertices += np.array([x, y, z], dtype=float)
        return self

    def bounding_box(self):
        return self.vertices.min(axis=0), self.vertices.max(axis=0)

    def triangles(self, vertices=None):
        """(M, 3, 3) array of triangle corners."""
        if vertices is None:
            vertices = self.vertices
        return vertices[self.faces]

    def face_normals(self, vertices=None):
        tris = self.triangles(vertices)
        normals = np.cross(tris[:, 1] - tris[:, 0], tris[:, 2] - tris[:, 0])
        lengths = np.linalg.norm(normals, axis=1, keepdims=True)
        # pole triangles of a sphere collapse to zero area
        lengths[lengths == 0.0] = 1.0
        return normals / lengths


def _segments(count, detail):
    if count <= 0:
        raise ValueError(f"segment count must be positive, got {count}")
    if not 0.0 < detail <= 1.0:
        raise ValueError(f"detail must be in (0, 1], got {detail}")
    return max(3, int(round(count * detail)))


def _grid_faces(rows, cols, offset=0):
    """Two triangles per cell of a (rows + 1) x (cols + 1) vertex grid."""
    r, c = np.meshgrid(np.arange(rows), np.arange(cols), indexing="ij")
    a = (r * (cols + 1) + c).ravel() + offset
    b = a + 1
    d = a + cols + 1
    e = d + 1
    return np.concatenate([
        np.stack([a, d, b], axis=1),
        np.stack([b, d, e], axis=1),
    ])


def torus_geometry(radius, tube, radial_segments=32, tubular_segments=64, detail=1.0):
    if radius <= 0 or tube <= 0:
        raise ValueError(f"torus radii must be positive, got {radius}, {tube}")
    radial = _segments(radial_segments, detail)
    tubular = _segments(tubular_segments, detail)

    v, u = np.meshgrid(
        np.linspace(0.0, 2 * np.pi, radial + 1),
        np.linspace(0.0, 2 * np.pi, tubular + 1),
        indexing="ij",
    )
    ring = radius + tube * np.cos(v)
    vertices = np.stack([
        ring * np.cos(u),
        ring * np.sin(u),
        tube * np.sin(v),
    ], axis=-1).reshape(-1, 3)

    return Geometry(
        vertices, _grid_faces(radial, tubular), kind="torus",
        radius=radius, tube=tube,
        radial_segments=radial, tubular_segments=tubular,
    )


def cylinder_geometry(radius_top, radius_bottom, height, radial_segments=12, detail=1.0):
    if radius_top <= 0 or radius_bottom <= 0 or height <= 0:
        raise ValueError(
            f"cylinder dimensions must be positive, got "
            f"{radius_top}, {radius_bottom}, {height}"
        )
    radial = _segments(radial_segments, detail)
    half = height / 2.0

    theta = np.linspace(0.0, 2 * np.pi, radial + 1)
    top = np.stack([radius_top * np.sin(theta), np.full_like(theta, half),
                    radius_top * np.cos(theta)], axis=-1)
    bottom = np.stack([radius_bottom * np.sin(theta), np.full_like(theta, -half),
                       radius_bottom * np.cos(theta)], axis=-1)
    side = np.concatenate([top, bottom])
    faces = [_grid_faces(1, radial)]

    # caps: a center vertex fanned to its rim
    top_center = len(side)
    bottom_center = top_center + 1
    vertices = np.concatenate([side, [[0.0, half, 0.0], [0.0, -half, 0.0]]])
    rim = np.arange(radial)
    faces.append(np.stack([np.full(radial, top_center), rim + 1, rim], axis=1))
    faces.append(np.stack([np.full(radial, bottom_center),
                           rim + radial + 1, rim + radial + 2], axis=1))

    return Geometry(
        vertices, np.concatenate(faces), kind="cylinder",
        radius_top=radius_top, radius_bottom=radius_bottom,
        height=height, radial_segments=radial,
    )


def sphere_geometry(radius, width_segments=32, height_segments=32, detail=1.0):
    if radius <= 0:
        raise ValueError(f"sphere radius must be positive, got {radius}")
    width = _segments(width_segments, detail)
    height = _segments(height_segments, detail)

    theta, phi = np.meshgrid(
        np.linspace(0.0, np.pi, height + 1),
        np.linspace(0.0, 2 * np.pi, width + 1),
        indexing="ij",
    )
    vertices = np.stack([
        -radius * np.cos(phi) * np.sin(theta),
        radius * np.cos(theta),
        radius * np.sin(phi) * np.sin(theta),
    ], axis=-1).reshape(-1, 3)

    return Geometry(
        vertices, _grid_faces(height, width), kind="sphere",
        radius=radius, width_segments=width, height_segments=height,
    )
