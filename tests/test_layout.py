"""Tests for the buffer layout planner."""

import numpy as np
import pytest

from meshgltf.constants import BufferTarget, ComponentType, ElementType
from meshgltf.encoder import Segment, encode_mesh
from meshgltf.errors import LayoutError
from meshgltf.layout import plan_buffer

from conftest import make_quad_mesh


def check_contiguous(segments, layout):
    byteOffset = 0
    for i, segment in enumerate(segments):
        placement = layout[segment.name]
        assert placement.buffer_view == i
        assert placement.byte_offset == byteOffset
        assert placement.byte_length == segment.byte_length
        assert layout.buffer[byteOffset:byteOffset + placement.byte_length] == segment.data
        byteOffset += placement.byte_length
    assert byteOffset == layout.byte_length


class TestPlanBuffer:

    @pytest.mark.parametrize("use_batch_ids", [True, False])
    @pytest.mark.parametrize("colored", [True, False])
    def test_segments_fill_buffer_without_gaps(self, use_batch_ids, colored):
        colors = np.full(16, 200, dtype="uint8") if colored else None
        segments = encode_mesh(make_quad_mesh(vertex_colors=colors), use_batch_ids)
        layout = plan_buffer(segments)
        check_contiguous(segments, layout)
        assert len(layout.placements) == 4 + int(use_batch_ids) + int(colored)

    def test_omitted_stream_does_not_shift_indices(self, quad_mesh):
        layout = plan_buffer(encode_mesh(quad_mesh, use_batch_ids=False))
        assert "batchIds" not in layout
        assert "vertexColors" not in layout
        assert layout["indices"].buffer_view == 3
        assert layout["indices"].byte_offset == 48 + 48 + 32

    def test_rejects_partial_element(self):
        segment = Segment(
            name="positions",
            data=b"\x00" * 10,
            component_type=ComponentType.FLOAT,
            element_type=ElementType.VEC3,
            count=1,
            target=BufferTarget.ARRAY_BUFFER,
        )
        with pytest.raises(LayoutError):
            plan_buffer([segment])

    def test_rejects_duplicate_segment(self, quad_mesh):
        segments = encode_mesh(quad_mesh, use_batch_ids=False)
        with pytest.raises(LayoutError):
            plan_buffer(segments + segments[:1])
