"""Read meshes from YAML description files.

A description holds the flat attribute lists under ``positions``,
``normals``, ``uvs`` and ``indices``, the optional ``vertexColors`` and
``batchIds`` lists, and ``views``, each with ``indexOffset``,
``indexCount`` and ``baseColor`` (an RGBA list or a texture URI).
"""
import yaml

from .errors import MeshValidationError
from .mesh import Mesh, View, material_from_base_color

_REQUIRED_KEYS = ("positions", "normals", "uvs", "indices", "views")


def mesh_from_dict(data: dict) -> Mesh:
    if not isinstance(data, dict):
        raise MeshValidationError("Mesh description must be a mapping")
    missing = [key for key in _REQUIRED_KEYS if key not in data]
    if missing:
        raise MeshValidationError("Mesh description is missing %s" % (", ".join(missing)))

    views = []
    for i, view in enumerate(data["views"]):
        try:
            views.append(View(
                index_offset=int(view["indexOffset"]),
                index_count=int(view["indexCount"]),
                material=material_from_base_color(view["baseColor"]),
            ))
        except KeyError as e:
            raise MeshValidationError("View %d is missing %s" % (i, e.args[0])) from e

    return Mesh(
        positions=data["positions"],
        normals=data["normals"],
        uvs=data["uvs"],
        indices=data["indices"],
        views=views,
        vertex_colors=data.get("vertexColors"),
        batch_ids=data.get("batchIds"),
    )


def load_mesh(path) -> Mesh:
    with open(path, 'r') as f:
        meshYml = yaml.safe_load(f)
    return mesh_from_dict(meshYml)
