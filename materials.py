import numpy as np
from matplotlib import colors as mcolors


class Color:
    """RGB color with float channels in [0, 1]."""

    def __init__(self, value=0xffffff):
        if isinstance(value, Color):
            self.r, self.g, self.b = value.r, value.g, value.b
        elif isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            value = int(value)
            if not 0 <= value <= 0xffffff:
                raise ValueError(f"color out of range: {value:#x}")
            self.r = ((value >> 16) & 0xff) / 255.0
            self.g = ((value >> 8) & 0xff) / 255.0
            self.b = (value & 0xff) / 255.0
        else:
            # strings ("#ff8800", "tomato") and RGB tuples
            self.r, self.g, self.b = mcolors.to_rgb(value)

    def __repr__(self):
        return f"Color({self.hex:#08x})"

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgb == other.rgb

    @property
    def rgb(self):
        return (self.r, self.g, self.b)

    @property
    def hex(self):
        return (
            int(round(self.r * 255)) << 16
            | int(round(self.g * 255)) << 8
            | int(round(self.b * 255))
        )


class StandardMaterial:
    def __init__(self, color=0xffffff, emissive=0x000000, emissive_intensity=1.0,
                 metalness=0.0, roughness=1.0):
        self.color = Color(color)
        self.emissive = Color(emissive)
        self.emissive_intensity = emissive_intensity
        self.metalness = metalness
        self.roughness = roughness

    @classmethod
    def from_props(cls, props):
        return cls(
            color=props['color'],
            emissive=props['emissive'],
            emissive_intensity=props['emissive_intensity'],
            metalness=props['metalness'],
            roughness=props['roughness'],
        )

    def __repr__(self):
        return (
            f"StandardMaterial(color={self.color!r}, emissive={self.emissive!r}, "
            f"emissive_intensity={self.emissive_intensity}, "
            f"metalness={self.metalness}, roughness={self.roughness})"
        )

    def shade(self, intensity):
        """
        Map directional light intensity (0..1, per face) to RGB rows.

        Metal darkens the diffuse term, smooth surfaces get a sharp
        highlight, and emissive color is added on top regardless of light.
        """
        intensity = np.clip(np.atleast_1d(np.asarray(intensity, dtype=float)), 0.0, 1.0)
        base = np.array(self.color.rgb)
        glow = np.array(self.emissive.rgb) * self.emissive_intensity

        ambient = 0.3
        diffuse = (1.0 - 0.4 * self.metalness) * intensity
        specular = (1.0 - self.roughness) * intensity ** 16

        rgb = base * (ambient + diffuse)[:, None] + specular[:, None] + glow
        return np.clip(rgb, 0.0, 1.0)

    def rgba(self, alpha=1.0):
        """Flat color for renderers without per-face shading."""
        glow = np.array(self.emissive.rgb) * self.emissive_intensity
        r, g, b = np.clip(np.array(self.color.rgb) + glow, 0.0, 1.0)
        return [float(r), float(g), float(b), alpha]


def metal_material():
    """Shared look of the hook, wire and ring."""
    return StandardMaterial(color=0xffffff, metalness=1.0, roughness=0.0)
