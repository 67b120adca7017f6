from __future__ import annotations

import logging

import pygltflib

from .constants import COMPONENT_SIZE, ComponentType, ElementType
from .encoder import BATCH_IDS, INDICES, NORMALS, POSITIONS, UVS, VERTEX_COLORS, Segment, get_min_max
from .layout import BufferLayout, Placement
from .mesh import View

logger = logging.getLogger(__name__)

# glTF attribute semantic for each vertex stream; batch ids are named by the caller
ATTRIBUTE_SEMANTICS = {
    POSITIONS: "POSITION",
    NORMALS: "NORMAL",
    UVS: "TEXCOORD_0",
    VERTEX_COLORS: "COLOR_0",
}


def build_buffer_views(segments: list[Segment], layout: BufferLayout) -> list[pygltflib.BufferView]:
    bufferViews = [None] * len(layout.placements)
    for segment in segments:
        placement = layout[segment.name]
        bufferViews[placement.buffer_view] = pygltflib.BufferView(
            buffer=0,
            byteOffset=placement.byte_offset,
            byteLength=placement.byte_length,
            target=segment.target.value,
        )
    return bufferViews


def build_vertex_accessors(
    segments: list[Segment],
    layout: BufferLayout,
    vertex_count: int,
    batch_id_semantic: str,
) -> tuple[list[pygltflib.Accessor], dict[str, int]]:
    """One accessor per vertex attribute segment, in buffer order.

    Returns the accessors and the primitive attribute map (semantic to
    accessor index).
    """
    accessors = []
    attributes = {}
    for segment in segments:
        if segment.name == INDICES:
            continue
        accessor = pygltflib.Accessor(
            bufferView=layout[segment.name].buffer_view,
            byteOffset=0,
            componentType=segment.component_type.value,
            count=vertex_count,
            type=segment.element_type.value,
            min=segment.min,
            max=segment.max,
            name=segment.name,
        )
        if segment.normalized:
            accessor.normalized = True
        semantic = batch_id_semantic if segment.name == BATCH_IDS else ATTRIBUTE_SEMANTICS[segment.name]
        attributes[semantic] = len(accessors)
        accessors.append(accessor)
    return accessors, attributes


def build_index_accessor(indices, placement: Placement, view: View) -> pygltflib.Accessor:
    # bounds cover this view's own range of the shared index stream
    minimum, maximum = get_min_max(indices, 1, view.index_offset, view.index_count)
    return pygltflib.Accessor(
        bufferView=placement.buffer_view,
        byteOffset=COMPONENT_SIZE[ComponentType.UNSIGNED_SHORT] * view.index_offset,
        componentType=ComponentType.UNSIGNED_SHORT.value,
        count=view.index_count,
        type=ElementType.SCALAR.value,
        min=[int(v) for v in minimum],
        max=[int(v) for v in maximum],
    )
