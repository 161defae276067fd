"""
Wave configuration.

Defaults for a row of pendulums and the sphere color palettes the
animation can switch between at runtime.
"""
import math
from dataclasses import dataclass


SPHERE_PALETTES = {
    'neon': [
        {'color': 0xff2d95, 'emissive': 0xff2d95, 'emissive_intensity': 0.4,
         'metalness': 0.2, 'roughness': 0.3},
        {'color': 0x00e5ff, 'emissive': 0x00e5ff, 'emissive_intensity': 0.4,
         'metalness': 0.2, 'roughness': 0.3},
        {'color': 0xfff200, 'emissive': 0xfff200, 'emissive_intensity': 0.4,
         'metalness': 0.2, 'roughness': 0.3},
    ],
    'chrome': [
        {'color': 0xd8d8d8, 'emissive': 0x000000, 'emissive_intensity': 0.0,
         'metalness': 1.0, 'roughness': 0.05},
    ],
    'matte': [
        {'color': 0xe63946, 'emissive': 0x000000, 'emissive_intensity': 0.0,
         'metalness': 0.0, 'roughness': 1.0},
        {'color': 0x457b9d, 'emissive': 0x000000, 'emissive_intensity': 0.0,
         'metalness': 0.0, 'roughness': 1.0},
    ],
}


@dataclass
class WaveConfig:
    count: int = 15
    length: float = 6.0
    spacing: float = 1.5          # depth units between neighbours
    phase_step: float = 0.00005   # extra phase difference per pendulum
    start_angle: float = math.pi - 0.5
    base_position: tuple = (0.0, 0.0, 0.0)
    palette: str = 'neon'
    detail: float = 1.0           # mesh segment scale, (0, 1]
    interval_ms: int = 20
    steps_per_frame: int = 1

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f"count must be at least 1, got {self.count}")
        if self.palette not in SPHERE_PALETTES:
            raise ValueError(
                f"unknown palette {self.palette!r}, "
                f"expected one of {sorted(SPHERE_PALETTES)}"
            )

    def phase_diff(self, index):
        return index * self.phase_step

    def depth_offset(self, index):
        return -index * self.spacing

    def sphere_props(self, index, palette=None):
        return palette_props(palette or self.palette, index)


def palette_props(name, index):
    if name not in SPHERE_PALETTES:
        raise ValueError(f"unknown palette {name!r}")
    colors = SPHERE_PALETTES[name]
    return dict(colors[index % len(colors)])
