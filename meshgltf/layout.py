from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .constants import COMPONENT_SIZE
from .encoder import Segment
from .errors import LayoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    buffer_view: int
    byte_offset: int
    byte_length: int


@dataclass(frozen=True)
class BufferLayout:
    buffer: bytes
    placements: dict[str, Placement]

    @property
    def byte_length(self) -> int:
        return len(self.buffer)

    def __getitem__(self, name: str) -> Placement:
        return self.placements[name]

    def __contains__(self, name: str) -> bool:
        return name in self.placements


def plan_buffer(segments: Iterable[Segment]) -> BufferLayout:
    """Concatenate segments into one buffer.

    Buffer view indices and byte offsets are assigned in a single pass over
    the segments actually present, so a missing optional stream never shifts
    or leaves a hole before the ones after it.
    """
    placements: dict[str, Placement] = {}
    chunks = []
    byteOffset = 0
    for segment in segments:
        elementSize = COMPONENT_SIZE[segment.component_type] * segment.arity
        if segment.byte_length % elementSize != 0:
            raise LayoutError(
                "Segment %s is %d bytes, not a multiple of its %d byte element"
                % (segment.name, segment.byte_length, elementSize)
            )
        if segment.name in placements:
            raise LayoutError("Segment %s appears more than once" % (segment.name))

        placements[segment.name] = Placement(len(placements), byteOffset, segment.byte_length)
        logger.debug("%s: bufferView %d, byteOffset %d, byteLength %d",
                     segment.name, len(placements) - 1, byteOffset, segment.byte_length)
        chunks.append(segment.data)
        byteOffset += segment.byte_length

    return BufferLayout(b"".join(chunks), placements)
