"""Build a glTF 2.0 asset from a mesh and pack it as GLB."""
from __future__ import annotations

import logging
from typing import Callable, Optional

import pygltflib

from .accessors import build_buffer_views, build_vertex_accessors
from .constants import GENERATOR, GLTF_VERSION
from .encoder import encode_mesh
from .layout import plan_buffer
from .materials import assemble_primitives, batch_id_semantic
from .mesh import Mesh
from .options import GltfOptions
from .scene import build_scene, rtc_extension

logger = logging.getLogger(__name__)


def create_gltf(mesh: Mesh, options: Optional[GltfOptions] = None) -> pygltflib.GLTF2:
    """Create a glTF from a mesh.

    The returned asset holds a single buffer whose bytes are attached as the
    binary blob. With ``relative_to_center`` the mesh center is subtracted
    from the positions and stored in the CESIUM_RTC extension; the given
    mesh is left untouched.

    Raises MeshValidationError for a malformed mesh before anything is
    encoded.
    """
    options = options or GltfOptions()
    options.log_ignored()
    mesh.validate(options.use_batch_ids)

    center = None
    if options.relative_to_center:
        center = mesh.get_center()
        mesh = mesh.relative_to_center(center)

    segments = encode_mesh(mesh, options.use_batch_ids)
    layout = plan_buffer(segments)

    bufferViews = build_buffer_views(segments, layout)
    vertexAccessors, attributes = build_vertex_accessors(
        segments, layout, mesh.vertex_count, batch_id_semantic(options.deprecated)
    )
    primitives, indexAccessors, materials = assemble_primitives(
        mesh, layout, attributes, len(vertexAccessors)
    )
    meshes, nodes, scenes = build_scene(primitives, options.up_axis)

    gltf = pygltflib.GLTF2(
        asset=pygltflib.Asset(generator=GENERATOR, version=GLTF_VERSION),
        scene=0,
        scenes=scenes,
        nodes=nodes,
        meshes=meshes,
        materials=materials.materials,
        accessors=vertexAccessors + indexAccessors,
        bufferViews=bufferViews,
        buffers=[pygltflib.Buffer(byteLength=layout.byte_length)],
    )
    if materials.images is not None:
        gltf.images = materials.images
        gltf.textures = materials.textures
        gltf.samplers = materials.samplers

    if center is not None:
        gltf.extensions, gltf.extensionsUsed = rtc_extension(center)

    gltf.set_binary_blob(layout.buffer)

    logger.info("Created glTF: %d vertices, %d primitives, %d accessors, %d byte buffer",
                mesh.vertex_count, len(primitives), len(gltf.accessors), layout.byte_length)
    return gltf


def pack_glb(gltf: pygltflib.GLTF2) -> bytes:
    return b"".join(gltf.save_to_bytes())


def create_glb(
    mesh: Mesh,
    options: Optional[GltfOptions] = None,
    packer: Callable[[pygltflib.GLTF2], bytes] = pack_glb,
) -> bytes:
    """Create a glTF from a mesh and pack it into a binary glTF.

    Packer failures propagate to the caller unchanged.
    """
    gltf = create_gltf(mesh, options)
    return packer(gltf)


def to_embedded_gltf(gltf: pygltflib.GLTF2) -> pygltflib.GLTF2:
    """Move the binary blob into the buffer as a base64 data URI, for .gltf output."""
    gltf.convert_buffers(pygltflib.BufferFormat.DATAURI)
    return gltf
