import logging
import math

from geometry import cylinder_geometry, sphere_geometry, torus_geometry
from materials import Color, StandardMaterial, metal_material
from scene import Mesh

logger = logging.getLogger(__name__)


class PendulumObject:
    """
    One pendulum of the wave: hook, wire, ring and sphere meshes plus the
    angle state that swings them.

    The caller owns the scene and the frame loop. Each frame it must call
    update_angles() and then update_position().
    """

    def __init__(self, scene, z=0.0, phase_diff=0.0, position=(0.0, 0.0, 0.0),
                 start_angle=None, length=6.0, sphere_material_props=None, detail=1.0):
        self.scene = scene
        self.z = z
        self.phase_diff = phase_diff
        self.position = tuple(float(c) for c in position)
        # kept for callers; the swing always starts from angle = pi
        self.start_angle = start_angle
        self.length = length
        self.sphere_material_props = sphere_material_props or {
            'color': 0xffffff,
            'emissive': 0x000000,
            'emissive_intensity': 1.0,
            'metalness': 0.0,
            'roughness': 1.0,
        }
        self.detail = detail

        self.angle = math.pi
        self.angle_velocity = 0.0
        self.angle_acceleration = 0.0
        self.origin = (0.0, self.length)
        self.current = [0.0, 0.0]

        self.create()

    def create(self):
        metal = metal_material()

        # hook holding the wire
        self.hook = Mesh(torus_geometry(0.1, 0.03, detail=self.detail), metal, name="hook")

        # wire, shifted so its top end is the local origin (the pivot)
        wire_geometry = cylinder_geometry(0.03, 0.03, self.length, detail=self.detail)
        wire_geometry.translate(0.0, -self.length / 2.0, 0.0)
        self.wire = Mesh(wire_geometry, metal, name="wire")

        # ring around the sphere
        self.torus = Mesh(torus_geometry(0.6, 0.1, detail=self.detail), metal, name="ring")

        self.sphere_material = StandardMaterial.from_props(self.sphere_material_props)
        self.sphere = Mesh(sphere_geometry(0.5, detail=self.detail), self.sphere_material,
                           name="sphere")

        for mesh in self.meshes:
            mesh.cast_shadow = True
            mesh.receive_shadow = True

        logger.debug("Built pendulum meshes (z=%s, phase_diff=%s, length=%s)",
                     self.z, self.phase_diff, self.length)

    @property
    def meshes(self):
        return [self.hook, self.wire, self.torus, self.sphere]

    def add_to_scene(self):
        self.scene.add(self.hook)
        self.scene.add(self.wire)
        self.scene.add(self.torus)
        self.scene.add(self.sphere)

    def remove_from_scene(self, include_hook=False):
        # the hook stays behind unless asked for explicitly
        self.scene.remove(self.wire)
        self.scene.remove(self.torus)
        self.scene.remove(self.sphere)
        if include_hook:
            self.scene.remove(self.hook)

    def update_angles(self):
        self.angle_acceleration = 2 * (0.001 + self.phase_diff) * math.sin(self.angle)
        self.angle_velocity += self.angle_acceleration
        self.angle += self.angle_velocity

    def update_position(self):
        x, y, z = self.position
        self.current[0] = x + self.origin[0] + self.length * math.sin(self.angle)
        self.current[1] = y + self.origin[1] + self.length * math.cos(self.angle)

        depth = z + self.z
        self.sphere.set_position(self.current[0], self.current[1], depth)
        self.torus.set_position(self.current[0], self.current[1], depth)
        self.wire.set_position(x, y + self.length, depth)
        self.hook.set_position(x, y + self.length, depth)

        # cylinders run along local Y; turn that axis toward the sphere
        self.wire.look_at(self.sphere.position)
        self.wire.rotate_x(-math.pi / 2)

    def update_sphere_material(self, props):
        self.sphere_material.color = Color(props['color'])
        self.sphere_material.emissive = Color(props['emissive'])
        self.sphere_material.emissive_intensity = props['emissive_intensity']
        self.sphere_material.metalness = props['metalness']
        self.sphere_material.roughness = props['roughness']
