"""
Tests for the pybullet scene mirror, using a headless DIRECT client.
"""

import pytest

p = pytest.importorskip("pybullet")

from bullet_scene import BulletSceneMirror, run_bullet  # noqa: E402
from config import WaveConfig  # noqa: E402
from pendulum_wave import PendulumWave  # noqa: E402


@pytest.fixture
def client():
    cid = p.connect(p.DIRECT)
    yield cid
    if p.isConnected(physicsClientId=cid):
        p.disconnect(physicsClientId=cid)


@pytest.fixture
def wave():
    return PendulumWave(WaveConfig(count=2, length=2.0, detail=0.25))


class TestBulletSceneMirror:
    def test_sync_creates_bodies(self, client, wave):
        mirror = BulletSceneMirror(wave.scene, client)
        wave.add_to_scene()

        mirror.sync()

        assert len(mirror) == 8
        assert p.getNumBodies(physicsClientId=client) == 8

    def test_sync_pushes_pose(self, client, wave):
        mirror = BulletSceneMirror(wave.scene, client)
        wave.add_to_scene()
        mirror.sync()

        wave.step()
        mirror.sync()

        sphere = wave.pendulums[0].sphere
        body = mirror.body_for(sphere)
        position, _ = p.getBasePositionAndOrientation(body, physicsClientId=client)
        x, y, z = sphere.position
        # Y-up scene -> Z-up bullet
        assert position == pytest.approx((x, -z, y), abs=1e-6)

    def test_sync_removes_bodies(self, client, wave):
        mirror = BulletSceneMirror(wave.scene, client)
        wave.add_to_scene()
        mirror.sync()

        wave.remove_from_scene()
        mirror.sync()

        assert len(mirror) == 2
        assert mirror.body_for(wave.pendulums[0].sphere) is None
        assert mirror.body_for(wave.pendulums[0].hook) is not None

    def test_sync_tracks_material(self, client, wave):
        mirror = BulletSceneMirror(wave.scene, client)
        wave.add_to_scene()
        mirror.sync()

        wave.set_palette('matte')
        mirror.sync()

        sphere = wave.pendulums[0].sphere
        _, _, rgba = mirror.bodies[id(sphere)]
        assert rgba == sphere.material.rgba()


def test_run_bullet_headless(wave):
    mirror = run_bullet(wave, frames=5, gui=False)

    assert wave.frame == 5
    assert len(mirror) == 8
