"""
PyBullet renderer for a pendulum scene.

Each scene mesh becomes a massless, collision-free multibody carrying a
GEOM_MESH visual shape. Nothing is simulated by Bullet itself; poses are
pushed in from the scene every frame. The scene is Y-up and Bullet is
Z-up, so every pose is rotated 90 degrees about X on the way in.
"""
import logging
import time

import pybullet as p
from scipy.spatial.transform import Rotation

from config import SPHERE_PALETTES

logger = logging.getLogger(__name__)

Y_UP_TO_Z_UP = Rotation.from_euler('x', 90, degrees=True)


class BulletSceneMirror:
    def __init__(self, scene, client):
        self.scene = scene
        self.client = client
        self.bodies = {}   # id(mesh) -> (mesh, body id, last rgba)

    def __len__(self):
        return len(self.bodies)

    def body_for(self, mesh):
        entry = self.bodies.get(id(mesh))
        return None if entry is None else entry[1]

    def _create_body(self, mesh):
        rgba = mesh.material.rgba()
        visual = p.createVisualShape(
            p.GEOM_MESH,
            vertices=mesh.geometry.vertices.tolist(),
            indices=mesh.geometry.faces.ravel().tolist(),
            rgbaColor=rgba,
            specularColor=[1.0 - mesh.material.roughness] * 3,
            physicsClientId=self.client,
        )
        position, orientation = self.pose(mesh)
        body = p.createMultiBody(
            baseMass=0,
            baseVisualShapeIndex=visual,
            basePosition=position,
            baseOrientation=orientation,
            physicsClientId=self.client,
        )
        self.bodies[id(mesh)] = (mesh, body, rgba)
        logger.debug("Created bullet body %d for %r", body, mesh)

    @staticmethod
    def pose(mesh):
        position = Y_UP_TO_Z_UP.apply(mesh.position).tolist()
        orientation = (Y_UP_TO_Z_UP * mesh.rotation).as_quat().tolist()
        return position, orientation

    def sync(self):
        members = {id(mesh): mesh for mesh in self.scene}

        for key in list(self.bodies):
            if key not in members:
                mesh, body, _ = self.bodies.pop(key)
                p.removeBody(body, physicsClientId=self.client)
                logger.debug("Removed bullet body %d for %r", body, mesh)

        for key, mesh in members.items():
            if key not in self.bodies:
                self._create_body(mesh)
                continue

            _, body, last_rgba = self.bodies[key]
            position, orientation = self.pose(mesh)
            p.resetBasePositionAndOrientation(
                body, position, orientation, physicsClientId=self.client
            )
            rgba = mesh.material.rgba()
            if rgba != last_rgba:
                p.changeVisualShape(body, -1, rgbaColor=rgba, physicsClientId=self.client)
                self.bodies[key] = (mesh, body, rgba)


def run_bullet(wave, frames=None, gui=True, fps=60.0):
    """Drive a PendulumWave inside a PyBullet window (or headless client)."""
    client = p.connect(p.GUI if gui else p.DIRECT)
    try:
        if gui:
            p.configureDebugVisualizer(p.COV_ENABLE_GUI, 1, physicsClientId=client)
            p.configureDebugVisualizer(p.COV_ENABLE_SHADOWS, 1, physicsClientId=client)
            depth = wave.config.spacing * (wave.config.count - 1)
            p.resetDebugVisualizerCamera(
                cameraDistance=2.5 * wave.config.length + depth / 2,
                cameraYaw=35,
                cameraPitch=-10,
                cameraTargetPosition=[0, depth / 2, wave.config.length],
                physicsClientId=client,
            )
            palette_names = list(SPHERE_PALETTES)
            palette_id = p.addUserDebugParameter(
                "Palette (" + ", ".join(palette_names) + ")",
                0, len(palette_names) - 1, palette_names.index(wave.palette),
                physicsClientId=client,
            )

        mirror = BulletSceneMirror(wave.scene, client)
        wave.add_to_scene()
        mirror.sync()
        logger.info("Running pendulum wave in pybullet (%d bodies)", len(mirror))

        while frames is None or wave.frame < frames:
            if not p.isConnected(physicsClientId=client):
                break
            if gui:
                selected = palette_names[int(round(
                    p.readUserDebugParameter(palette_id, physicsClientId=client)
                ))]
                if selected != wave.palette:
                    wave.set_palette(selected)
            wave.step()
            mirror.sync()
            if gui:
                time.sleep(1.0 / fps)
        return mirror
    finally:
        if p.isConnected(physicsClientId=client):
            p.disconnect(physicsClientId=client)
