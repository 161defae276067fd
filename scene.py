"""
Minimal scene graph: meshes with a world pose, and a flat scene holding them.

Poses follow the usual Y-up convention. Rotations are scipy Rotation
objects; local rotations are post-multiplied onto the current one.
"""
import logging

import numpy as np
from scipy.spatial.transform import Rotation

logger = logging.getLogger(__name__)

UP = np.array([0.0, 1.0, 0.0])


class Mesh:
    def __init__(self, geometry, material, name=None):
        self.geometry = geometry
        self.material = material
        self.name = name or geometry.kind
        self.position = np.zeros(3)
        self.rotation = Rotation.identity()
        self.cast_shadow = False
        self.receive_shadow = False

    def __repr__(self):
        x, y, z = self.position
        return f"Mesh({self.name!r}, position=({x:.3f}, {y:.3f}, {z:.3f}))"

    def set_position(self, x, y, z):
        # update in place so references to `position` stay live
        self.position[:] = (x, y, z)

    def look_at(self, target):
        """Turn the local +Z axis toward a world-space point."""
        z_axis = np.asarray(target, dtype=float) - self.position
        if not np.any(z_axis):
            z_axis = np.array([0.0, 0.0, 1.0])
        z_axis = z_axis / np.linalg.norm(z_axis)

        x_axis = np.cross(UP, z_axis)
        if not np.any(x_axis):
            # looking straight up or down: nudge off the up axis
            if abs(UP[2]) == 1.0:
                z_axis[0] += 0.0001
            else:
                z_axis[2] += 0.0001
            z_axis = z_axis / np.linalg.norm(z_axis)
            x_axis = np.cross(UP, z_axis)

        x_axis = x_axis / np.linalg.norm(x_axis)
        y_axis = np.cross(z_axis, x_axis)
        self.rotation = Rotation.from_matrix(np.column_stack([x_axis, y_axis, z_axis]))

    def rotate_on_axis(self, axis, angle):
        axis = np.asarray(axis, dtype=float)
        axis = axis / np.linalg.norm(axis)
        self.rotation = self.rotation * Rotation.from_rotvec(axis * angle)

    def rotate_x(self, angle):
        self.rotate_on_axis((1.0, 0.0, 0.0), angle)

    @property
    def matrix(self):
        m = np.eye(4)
        m[:3, :3] = self.rotation.as_matrix()
        m[:3, 3] = self.position
        return m

    def local_to_world(self, point):
        return self.rotation.apply(np.asarray(point, dtype=float)) + self.position

    def world_vertices(self):
        return self.rotation.apply(self.geometry.vertices) + self.position

    def world_triangles(self):
        return self.geometry.triangles(self.world_vertices())


class Scene:
    def __init__(self, name="scene"):
        self.name = name
        self.children = []

    def __repr__(self):
        return f"Scene({self.name!r}, children={len(self.children)})"

    def __contains__(self, obj):
        return any(child is obj for child in self.children)

    def __len__(self):
        return len(self.children)

    def __iter__(self):
        return iter(list(self.children))

    def add(self, *objects):
        for obj in objects:
            # re-adding moves the object to the end instead of duplicating it
            if obj in self:
                self._detach(obj)
            self.children.append(obj)
            logger.debug("Added %r to %s", obj, self.name)

    def remove(self, *objects):
        for obj in objects:
            if obj in self:
                self._detach(obj)
                logger.debug("Removed %r from %s", obj, self.name)

    def clear(self):
        self.children.clear()

    def _detach(self, obj):
        self.children = [child for child in self.children if child is not obj]
