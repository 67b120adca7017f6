"""Materials and primitives, one of each per mesh view."""
from __future__ import annotations

import logging

import pygltflib

from .accessors import build_index_accessor
from .constants import AlphaMode, PrimitiveMode, SamplerFilter, SamplerWrap
from .encoder import INDICES
from .layout import BufferLayout
from .mesh import FlatColor, Material, Mesh, TexturedColor

logger = logging.getLogger(__name__)

BATCH_ID_SEMANTIC = "_BATCHID"
DEPRECATED_BATCH_ID_SEMANTIC = "BATCHID"

OPAQUE_WHITE = [1.0, 1.0, 1.0, 1.0]


def batch_id_semantic(deprecated: bool) -> str:
    return DEPRECATED_BATCH_ID_SEMANTIC if deprecated else BATCH_ID_SEMANTIC


class MaterialAssembler:
    """Collects materials together with the images, textures and sampler they use.

    The image, texture and sampler lists stay ``None`` until the first
    textured material is added. All textures share a single sampler.
    """

    def __init__(self):
        self.materials: list[pygltflib.Material] = []
        self.images = None
        self.textures = None
        self.samplers = None

    def _add_texture(self, uri: str) -> int:
        if self.images is None:
            self.images = []
            self.textures = []
            self.samplers = [
                pygltflib.Sampler(
                    magFilter=SamplerFilter.LINEAR.value,
                    minFilter=SamplerFilter.LINEAR.value,
                    wrapS=SamplerWrap.REPEAT.value,
                    wrapT=SamplerWrap.REPEAT.value,
                )
            ]
        self.images.append(pygltflib.Image(uri=uri))
        self.textures.append(pygltflib.Texture(sampler=0, source=len(self.images) - 1))
        return len(self.textures) - 1

    def build_material(self, material: Material) -> pygltflib.Material:
        baseColor = material.base_color
        if isinstance(baseColor, TexturedColor):
            textureIndex = self._add_texture(baseColor.uri)
            pbr = pygltflib.PbrMetallicRoughness(
                baseColorFactor=list(OPAQUE_WHITE),
                baseColorTexture=pygltflib.TextureInfo(index=textureIndex),
            )
            transparent = False
        elif isinstance(baseColor, FlatColor):
            pbr = pygltflib.PbrMetallicRoughness(baseColorFactor=baseColor.to_list())
            transparent = baseColor.is_transparent
        else:
            raise TypeError("Unsupported base color %r" % (baseColor,))

        return pygltflib.Material(
            pbrMetallicRoughness=pbr,
            alphaMode=(AlphaMode.BLEND if transparent else AlphaMode.OPAQUE).value,
            doubleSided=transparent,
        )

    def add(self, material: Material) -> int:
        self.materials.append(self.build_material(material))
        return len(self.materials) - 1


def assemble_primitives(
    mesh: Mesh,
    layout: BufferLayout,
    attributes: dict[str, int],
    first_index_accessor: int,
) -> tuple[list[pygltflib.Primitive], list[pygltflib.Accessor], MaterialAssembler]:
    """Build one index accessor, material and primitive per view, in view order.

    Primitive ``i`` draws index accessor ``first_index_accessor + i`` with
    material ``i``.
    """
    indexPlacement = layout[INDICES]
    materials = MaterialAssembler()
    primitives = []
    indexAccessors = []

    for view in mesh.views:
        indexAccessors.append(build_index_accessor(mesh.indices, indexPlacement, view))
        materialIndex = materials.add(view.material)
        primitives.append(
            pygltflib.Primitive(
                # plain mapping so non-standard semantics such as _BATCHID serialize
                attributes=dict(attributes),
                indices=first_index_accessor + len(indexAccessors) - 1,
                material=materialIndex,
                mode=PrimitiveMode.TRIANGLES.value,
            )
        )

    logger.debug("Assembled %d primitives, %d textured", len(primitives),
                 len(materials.textures) if materials.textures else 0)
    return primitives, indexAccessors, materials
