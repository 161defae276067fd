import logging

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.widgets import Slider, Button, RadioButtons
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from config import SPHERE_PALETTES
from pendulum_wave import PendulumWave

logger = logging.getLogger(__name__)

LIGHT_DIRECTION = np.array([0.4, 1.0, 0.6]) / np.linalg.norm([0.4, 1.0, 0.6])


def shade_mesh(mesh):
    """Per-face RGB colors for a mesh in its current pose."""
    normals = mesh.rotation.apply(mesh.geometry.face_normals())
    # two-sided lighting; face winding is not relied on
    intensity = np.abs(normals @ LIGHT_DIRECTION)
    return mesh.material.shade(intensity)


def to_plot_axes(points):
    """Scene is Y-up, mplot3d is Z-up: (x, y, z) -> (x, z, y)."""
    return points[..., [0, 2, 1]]


class WaveAnimation:
    def __init__(self, wave=None, config=None):
        self.wave = wave if wave is not None else PendulumWave(config)
        self.config = self.wave.config
        self.steps_per_frame = self.config.steps_per_frame
        self.hidden = False

        self.wave.add_to_scene()

        self.fig = plt.figure(figsize=(12, 10))
        self.ax = self.fig.add_subplot(projection='3d')
        self.ax.set_title("Pendulum Wave", fontsize=12, pad=10)
        self.ax.set_axis_off()
        self.set_limits()

        self.collections = {}
        for pendulum in self.wave.pendulums:
            for mesh in pendulum.meshes:
                collection = Poly3DCollection(to_plot_axes(mesh.world_triangles()), linewidths=0)
                self.ax.add_collection3d(collection)
                self.collections[id(mesh)] = (mesh, collection)

        self.info_text = self.fig.text(
            0.02, 0.95, "", fontsize=10, bbox=dict(facecolor='white', alpha=0.7)
        )

        plt.subplots_adjust(left=0.02, bottom=0.2, right=0.98, top=0.95)

        self.add_widgets()
        self.draw_meshes()

        self.anim = FuncAnimation(
            self.fig, self.animate, init_func=self.draw_meshes,
            interval=self.config.interval_ms,
            cache_frame_data=False
        )

    def set_limits(self):
        x, y, z = self.config.base_position
        length = self.config.length
        depth = self.config.spacing * (self.config.count - 1)
        reach = length + 1.0
        self.ax.set_xlim(x - reach, x + reach)
        self.ax.set_ylim(z - depth - 1.0, z + 1.0)
        self.ax.set_zlim(y - 1.0, y + 2 * length + 1.0)
        self.ax.set_box_aspect((2 * reach, depth + 2.0, 2 * length + 2.0))
        self.ax.view_init(elev=12, azim=-35)

    def add_widgets(self):
        control_ax = plt.axes([0.05, 0.02, 0.9, 0.15], facecolor='lightgray')
        control_ax.set_title("Controls", fontsize=10)
        control_ax.set_xticks([])
        control_ax.set_yticks([])

        ax_speed = plt.axes([0.35, 0.11, 0.55, 0.02])
        self.slider_speed = Slider(
            ax_speed, 'Steps / frame', 1, 10,
            valinit=self.steps_per_frame, valstep=1
        )
        self.slider_speed.on_changed(self.update_speed)

        ax_radio = plt.axes([0.07, 0.04, 0.13, 0.11])
        names = list(SPHERE_PALETTES)
        self.radio_palette = RadioButtons(
            ax_radio, names, active=names.index(self.wave.palette)
        )
        self.radio_palette.on_clicked(self.update_palette)

        button_w = 0.12
        ax_reset = plt.axes([0.35, 0.04, button_w, 0.04])
        self.button_reset = Button(ax_reset, 'Reset')
        self.button_reset.on_clicked(self.reset_simulation)

        ax_hide = plt.axes([0.35 + button_w + 0.02, 0.04, button_w, 0.04])
        self.button_hide = Button(ax_hide, 'Hide')
        self.button_hide.on_clicked(self.toggle_visible)

    def update_speed(self, val=None):
        self.steps_per_frame = int(self.slider_speed.val)

    def update_palette(self, label):
        self.wave.set_palette(label)

    def reset_simulation(self, event=None):
        self.wave.reset()

    def toggle_visible(self, event=None):
        self.hidden = not self.hidden
        if self.hidden:
            self.wave.remove_from_scene()
        else:
            self.wave.add_to_scene()
        self.button_hide.label.set_text('Show' if self.hidden else 'Hide')

    def draw_meshes(self):
        scene = self.wave.scene
        artists = []
        for mesh, collection in self.collections.values():
            if mesh in scene:
                collection.set_verts(to_plot_axes(mesh.world_triangles()))
                collection.set_facecolor(shade_mesh(mesh))
                collection.set_visible(True)
            else:
                collection.set_visible(False)
            artists.append(collection)
        return artists

    def animate(self, frame):
        for _ in range(self.steps_per_frame):
            self.wave.step()

        artists = self.draw_meshes()
        spread = np.degrees(np.std(self.wave.angles - np.pi))
        self.info_text.set_text(
            f"Frame: {self.wave.frame}  |  Spread: {spread:.1f}°  |  "
            f"Palette: {self.wave.palette}"
        )
        return artists + [self.info_text]

    def main_loop(self):
        logger.info("Starting matplotlib animation")
        plt.show()
