import logging

import numpy as np

from config import WaveConfig, palette_props
from pendulum_object import PendulumObject
from scene import Scene

logger = logging.getLogger(__name__)


class PendulumWave:
    """Row of pendulums sharing one scene, stepped together frame by frame."""

    def __init__(self, config=None, scene=None):
        self.config = config or WaveConfig()
        self.scene = scene if scene is not None else Scene("pendulum-wave")
        self.palette = self.config.palette
        self.frame = 0

        self.pendulums = []
        for i in range(self.config.count):
            pendulum = PendulumObject(
                self.scene,
                z=self.config.depth_offset(i),
                phase_diff=self.config.phase_diff(i),
                position=self.config.base_position,
                start_angle=self.config.start_angle,
                length=self.config.length,
                sphere_material_props=self.config.sphere_props(i),
                detail=self.config.detail,
            )
            self.pendulums.append(pendulum)

        self.reset()
        logger.info("Built a wave of %d pendulums (phase step %g)",
                    len(self.pendulums), self.config.phase_step)

    def __len__(self):
        return len(self.pendulums)

    @property
    def angles(self):
        return np.array([p.angle for p in self.pendulums])

    def reset(self):
        """Release every pendulum from the configured start angle."""
        for pendulum in self.pendulums:
            pendulum.angle = self.config.start_angle
            pendulum.angle_velocity = 0.0
            pendulum.angle_acceleration = 0.0
            pendulum.update_position()
        self.frame = 0

    def add_to_scene(self):
        for pendulum in self.pendulums:
            pendulum.add_to_scene()

    def remove_from_scene(self, include_hook=False):
        for pendulum in self.pendulums:
            pendulum.remove_from_scene(include_hook=include_hook)

    def step(self):
        for pendulum in self.pendulums:
            pendulum.update_angles()
            pendulum.update_position()
        self.frame += 1

    def run(self, frames):
        """Step `frames` times and return the (frames, count) angle history."""
        history = np.empty((frames, len(self.pendulums)))
        for i in range(frames):
            self.step()
            history[i] = self.angles
        return history

    def set_palette(self, name):
        for i, pendulum in enumerate(self.pendulums):
            pendulum.update_sphere_material(palette_props(name, i))
        self.palette = name
        logger.info("Switched sphere palette to %s", name)
