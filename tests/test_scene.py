"""
Unit tests for meshes and the scene container.
"""

import math

import numpy as np
import pytest

from geometry import cylinder_geometry, sphere_geometry
from materials import StandardMaterial
from scene import Mesh, Scene


@pytest.fixture
def mesh():
    return Mesh(sphere_geometry(0.5, detail=0.25), StandardMaterial())


class TestMesh:
    def test_defaults(self, mesh):
        np.testing.assert_array_equal(mesh.position, [0.0, 0.0, 0.0])
        np.testing.assert_allclose(mesh.matrix, np.eye(4))
        assert mesh.name == 'sphere'
        assert not mesh.cast_shadow

    def test_set_position_keeps_array(self, mesh):
        position = mesh.position

        mesh.set_position(1.0, 2.0, 3.0)

        assert mesh.position is position
        np.testing.assert_array_equal(position, [1.0, 2.0, 3.0])

    def test_look_at_points_local_z(self, mesh):
        mesh.set_position(1.0, 1.0, 1.0)

        mesh.look_at((4.0, 5.0, 1.0))

        forward = mesh.rotation.apply([0.0, 0.0, 1.0])
        np.testing.assert_allclose(forward, [0.6, 0.8, 0.0], atol=1e-12)

    def test_look_at_keeps_up_vertical(self, mesh):
        mesh.look_at((0.0, 0.0, -5.0))

        np.testing.assert_allclose(mesh.rotation.apply([0.0, 0.0, 1.0]), [0, 0, -1], atol=1e-12)
        np.testing.assert_allclose(mesh.rotation.apply([0.0, 1.0, 0.0]), [0, 1, 0], atol=1e-12)

    def test_look_at_straight_down(self, mesh):
        mesh.look_at((0.0, -3.0, 0.0))

        forward = mesh.rotation.apply([0.0, 0.0, 1.0])
        np.testing.assert_allclose(forward, [0.0, -1.0, 0.0], atol=1e-3)

    def test_look_at_own_position(self, mesh):
        mesh.look_at(mesh.position.copy())

        np.testing.assert_allclose(mesh.rotation.as_matrix(), np.eye(3), atol=1e-12)

    def test_rotate_x_is_local(self, mesh):
        mesh.rotate_on_axis((0.0, 1.0, 0.0), math.pi / 2)

        mesh.rotate_x(math.pi / 2)

        # local X is world -Z after the first turn; rotating about it
        # carries local Y onto world +X
        np.testing.assert_allclose(mesh.rotation.apply([0.0, 1.0, 0.0]), [1.0, 0.0, 0.0],
                                   atol=1e-12)

    def test_world_vertices(self):
        geometry = cylinder_geometry(0.1, 0.1, 2.0, detail=0.5)
        mesh = Mesh(geometry, StandardMaterial())
        mesh.set_position(0.0, 5.0, 0.0)
        mesh.rotate_x(math.pi)

        low = mesh.world_vertices().min(axis=0)
        high = mesh.world_vertices().max(axis=0)

        assert low[1] == pytest.approx(4.0)
        assert high[1] == pytest.approx(6.0)
        assert mesh.world_triangles().shape == (len(geometry.faces), 3, 3)


class TestScene:
    def test_add_and_contains(self, mesh):
        scene = Scene()

        scene.add(mesh)

        assert mesh in scene
        assert len(scene) == 1

    def test_add_twice_keeps_one_entry(self, mesh):
        other = Mesh(sphere_geometry(0.5, detail=0.25), StandardMaterial())
        scene = Scene()

        scene.add(mesh, other)
        scene.add(mesh)

        assert len(scene) == 2
        assert list(scene) == [other, mesh]

    def test_remove(self, mesh):
        scene = Scene()
        scene.add(mesh)

        scene.remove(mesh)

        assert mesh not in scene
        assert len(scene) == 0

    def test_remove_missing_is_noop(self, mesh):
        scene = Scene()

        scene.remove(mesh)

        assert len(scene) == 0

    def test_membership_is_by_identity(self):
        scene = Scene()
        geometry = sphere_geometry(0.5, detail=0.25)
        first = Mesh(geometry, StandardMaterial())
        second = Mesh(geometry, StandardMaterial())

        scene.add(first)

        assert second not in scene

    def test_clear(self, mesh):
        scene = Scene()
        scene.add(mesh)

        scene.clear()

        assert len(scene) == 0
