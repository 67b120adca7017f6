# Sample meshes for the command line and tests.
#
# Unit cube - Triangle list, indexed, one flat normal per face
#
import numpy as np

from .mesh import Mesh, View, material_from_base_color

DEFAULT_CUBE_COLOR = [1.0, 1.0, 1.0, 1.0]

# z-up, one face per row: outward normal then 4 corners counter-clockwise
_faces = [
    ([0.0, 0.0, 1.0], [[-0.5, -0.5, 0.5], [0.5, -0.5, 0.5], [0.5, 0.5, 0.5], [-0.5, 0.5, 0.5]]),
    ([0.0, 0.0, -1.0], [[-0.5, -0.5, -0.5], [-0.5, 0.5, -0.5], [0.5, 0.5, -0.5], [0.5, -0.5, -0.5]]),
    ([1.0, 0.0, 0.0], [[0.5, -0.5, -0.5], [0.5, 0.5, -0.5], [0.5, 0.5, 0.5], [0.5, -0.5, 0.5]]),
    ([-1.0, 0.0, 0.0], [[-0.5, -0.5, -0.5], [-0.5, -0.5, 0.5], [-0.5, 0.5, 0.5], [-0.5, 0.5, -0.5]]),
    ([0.0, -1.0, 0.0], [[-0.5, -0.5, -0.5], [0.5, -0.5, -0.5], [0.5, -0.5, 0.5], [-0.5, -0.5, 0.5]]),
    ([0.0, 1.0, 0.0], [[-0.5, 0.5, -0.5], [-0.5, 0.5, 0.5], [0.5, 0.5, 0.5], [0.5, 0.5, -0.5]]),
]

_face_uvs = [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0]]

_face_triangles = np.array(
    [
        [0, 1, 2],
        [0, 2, 3],
    ],
    dtype="uint16",
)


def create_cube_mesh(base_color=None, batch_id=0) -> Mesh:
    """A unit cube centered at the origin, drawn with a single material."""
    points = np.array([corner for _, corners in _faces for corner in corners], dtype="float32")
    normals = np.array([normal for normal, corners in _faces for _ in corners], dtype="float32")
    uvs = np.array(_face_uvs * len(_faces), dtype="float32")
    triangles = np.concatenate([_face_triangles + 4 * face for face in range(len(_faces))])

    vertexCount = len(points)
    indexCount = triangles.size
    return Mesh(
        positions=points.flatten(),
        normals=normals.flatten(),
        uvs=uvs.flatten(),
        indices=triangles.flatten(),
        views=[View(0, indexCount, material_from_base_color(base_color or DEFAULT_CUBE_COLOR))],
        vertex_colors=np.zeros(vertexCount * 4, dtype="uint8"),
        batch_ids=np.full(vertexCount, batch_id, dtype="uint16"),
    )
