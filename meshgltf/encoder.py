"""Attribute encoding: extrema and byte packing of each mesh stream."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .constants import (
    COMPONENT_DTYPE,
    ELEMENT_ARITY,
    ELEMENT_TYPE_FOR_ARITY,
    BufferTarget,
    ComponentType,
    ElementType,
)
from .mesh import Mesh

logger = logging.getLogger(__name__)

POSITIONS = "positions"
NORMALS = "normals"
UVS = "uvs"
VERTEX_COLORS = "vertexColors"
BATCH_IDS = "batchIds"
INDICES = "indices"


@dataclass(frozen=True)
class Segment:
    """A byte packed stream destined for one buffer view."""

    name: str
    data: bytes
    component_type: ComponentType
    element_type: ElementType
    count: int
    target: BufferTarget
    min: Optional[list] = None
    max: Optional[list] = None
    normalized: bool = False

    @property
    def byte_length(self) -> int:
        return len(self.data)

    @property
    def arity(self) -> int:
        return ELEMENT_ARITY[self.element_type]


def get_min_max(values, components: int, start: int = 0, length: Optional[int] = None):
    """Per-component min and max of ``length / components`` tuples beginning at ``start``.

    An omitted ``length`` covers the rest of ``values`` after ``start``, so a
    non-zero start never reads past the end.
    """
    values = np.asarray(values)
    if length is None:
        length = len(values) - start
    count = length // components
    if count <= 0:
        raise ValueError("Cannot compute extrema of an empty range")
    tuples = values[start:start + count * components].reshape(count, components)
    return tuples.min(axis=0).tolist(), tuples.max(axis=0).tolist()


def encode_attribute(
    name: str,
    values,
    components: int,
    component_type: ComponentType,
    target: BufferTarget = BufferTarget.ARRAY_BUFFER,
    normalized: bool = False,
) -> Segment:
    packed = np.asarray(values).astype(COMPONENT_DTYPE[component_type])
    minimum, maximum = get_min_max(packed, components)
    return Segment(
        name=name,
        data=packed.tobytes(),
        component_type=component_type,
        element_type=ELEMENT_TYPE_FOR_ARITY[components],
        count=len(packed) // components,
        target=target,
        min=minimum,
        max=maximum,
        normalized=normalized,
    )


def encode_indices(indices) -> Segment:
    # bounds live on the per-view accessors, not on the shared stream
    packed = np.asarray(indices).astype(COMPONENT_DTYPE[ComponentType.UNSIGNED_SHORT])
    return Segment(
        name=INDICES,
        data=packed.tobytes(),
        component_type=ComponentType.UNSIGNED_SHORT,
        element_type=ElementType.SCALAR,
        count=len(packed),
        target=BufferTarget.ELEMENT_ARRAY_BUFFER,
    )


@dataclass(frozen=True)
class _StreamDescriptor:
    name: str
    components: int
    component_type: ComponentType
    normalized: bool = False


_REQUIRED_STREAMS = (
    _StreamDescriptor(POSITIONS, 3, ComponentType.FLOAT),
    _StreamDescriptor(NORMALS, 3, ComponentType.FLOAT),
    _StreamDescriptor(UVS, 2, ComponentType.FLOAT),
)

_VERTEX_COLOR_STREAM = _StreamDescriptor(VERTEX_COLORS, 4, ComponentType.UNSIGNED_BYTE, normalized=True)
_BATCH_ID_STREAM = _StreamDescriptor(BATCH_IDS, 1, ComponentType.UNSIGNED_SHORT)


def encode_mesh(mesh: Mesh, use_batch_ids: bool) -> list[Segment]:
    """Encode the streams of a validated mesh in buffer order.

    The order is positions, normals, uvs, vertex colors, batch ids and
    indices. Optional streams that are absent are left out entirely.
    """
    streams = [(descriptor, getattr(mesh, descriptor.name)) for descriptor in _REQUIRED_STREAMS]
    optional = (
        (_VERTEX_COLOR_STREAM, mesh.vertex_colors, mesh.has_vertex_colors),
        (_BATCH_ID_STREAM, mesh.batch_ids, use_batch_ids),
    )
    for descriptor, values, present in optional:
        if present:
            streams.append((descriptor, values))
        else:
            logger.debug("Skipping absent %s stream", descriptor.name)

    segments = [
        encode_attribute(
            descriptor.name,
            values,
            descriptor.components,
            descriptor.component_type,
            normalized=descriptor.normalized,
        )
        for descriptor, values in streams
    ]
    segments.append(encode_indices(mesh.indices))
    return segments
