import numpy as np
import pytest

from meshgltf import FlatColor, Material, Mesh, View

RED = Material(FlatColor(1.0, 0.0, 0.0, 1.0))


def make_quad_mesh(offset=(0.0, 0.0, 0.0), vertex_colors=None, views=None):
    positions = np.array(
        [
            [-1.0, -1.0, 0.0],
            [1.0, -1.0, 0.0],
            [1.0, 1.0, 0.0],
            [-1.0, 1.0, 0.0],
        ],
        dtype="float32",
    ) + np.array(offset, dtype="float32")
    normals = np.tile(np.array([0.0, 0.0, 1.0], dtype="float32"), (4, 1))
    uvs = np.array([[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]], dtype="float32")
    indices = np.array([0, 1, 2, 0, 2, 3], dtype="uint16")
    if vertex_colors is None:
        vertex_colors = np.zeros(16, dtype="uint8")
    return Mesh(
        positions=positions.flatten(),
        normals=normals.flatten(),
        uvs=uvs.flatten(),
        indices=indices,
        views=views or [View(0, 6, RED)],
        vertex_colors=vertex_colors,
        batch_ids=np.zeros(4, dtype="uint16"),
    )


def make_two_quad_mesh(materials):
    """Two side by side quads, one view each."""
    first = make_quad_mesh()
    second = make_quad_mesh(offset=(3.0, 0.0, 0.0))
    return Mesh(
        positions=np.concatenate([first.positions, second.positions]),
        normals=np.concatenate([first.normals, second.normals]),
        uvs=np.concatenate([first.uvs, second.uvs]),
        indices=np.concatenate([first.indices, second.indices + 4]),
        views=[View(0, 6, materials[0]), View(6, 6, materials[1])],
        vertex_colors=np.zeros(32, dtype="uint8"),
        batch_ids=np.array([0, 0, 0, 0, 1, 1, 1, 1], dtype="uint16"),
    )


@pytest.fixture
def quad_mesh():
    return make_quad_mesh()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
