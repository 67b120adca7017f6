"""Tests for attribute encoding and extrema."""

import numpy as np
import pytest

from meshgltf.constants import BufferTarget, ComponentType, ElementType
from meshgltf.encoder import encode_attribute, encode_indices, encode_mesh, get_min_max

from conftest import make_quad_mesh


class TestGetMinMax:

    @pytest.mark.parametrize("components", [1, 2, 3, 4])
    def test_matches_numpy_per_component(self, rng, components):
        for _ in range(20):
            count = int(rng.integers(1, 50))
            values = rng.uniform(-1e4, 1e4, size=count * components).astype("float32")
            minimum, maximum = get_min_max(values, components)
            tuples = values.reshape(count, components)
            assert minimum == tuples.min(axis=0).tolist()
            assert maximum == tuples.max(axis=0).tolist()

    def test_integer_values(self, rng):
        values = rng.integers(0, 65536, size=300)
        minimum, maximum = get_min_max(values, 1)
        assert minimum == [int(values.min())]
        assert maximum == [int(values.max())]

    def test_sub_range(self):
        values = [9, 9, 9, 1, 5, 3, 9, 9]
        assert get_min_max(values, 1, start=3, length=3) == ([1], [5])

    def test_omitted_length_covers_rest(self):
        values = [9, 9, 9, 1, 5, 3]
        assert get_min_max(values, 1, start=3) == ([1], [5])

    def test_empty_range(self):
        with pytest.raises(ValueError):
            get_min_max([1, 2, 3], 3, start=3, length=0)


class TestEncodeAttribute:

    def test_float_vec3(self):
        segment = encode_attribute("positions", [1.0, 2.0, 3.0, -1.0, 5.0, 0.5], 3, ComponentType.FLOAT)
        assert segment.element_type == ElementType.VEC3
        assert segment.count == 2
        assert segment.byte_length == 24
        assert segment.min == [-1.0, 2.0, 0.5]
        assert segment.max == [1.0, 5.0, 3.0]
        assert np.frombuffer(segment.data, dtype="<f4").tolist() == [1.0, 2.0, 3.0, -1.0, 5.0, 0.5]

    def test_normalized_colors(self):
        segment = encode_attribute("vertexColors", [255, 0, 10, 255], 4, ComponentType.UNSIGNED_BYTE, normalized=True)
        assert segment.normalized
        assert segment.byte_length == 4
        assert segment.data == bytes([255, 0, 10, 255])

    def test_indices_are_little_endian_uint16(self):
        segment = encode_indices([1, 256, 65535])
        assert segment.target == BufferTarget.ELEMENT_ARRAY_BUFFER
        assert segment.data == b"\x01\x00\x00\x01\xff\xff"
        assert segment.min is None


class TestEncodeMesh:

    def test_order_without_optional_streams(self, quad_mesh):
        names = [segment.name for segment in encode_mesh(quad_mesh, use_batch_ids=False)]
        assert names == ["positions", "normals", "uvs", "indices"]

    def test_order_with_all_streams(self):
        mesh = make_quad_mesh(vertex_colors=np.full(16, 128, dtype="uint8"))
        names = [segment.name for segment in encode_mesh(mesh, use_batch_ids=True)]
        assert names == ["positions", "normals", "uvs", "vertexColors", "batchIds", "indices"]

    def test_all_zero_colors_are_absent(self, quad_mesh):
        assert not quad_mesh.has_vertex_colors
        names = [segment.name for segment in encode_mesh(quad_mesh, use_batch_ids=True)]
        assert "vertexColors" not in names

    def test_segment_lengths(self, quad_mesh):
        lengths = {segment.name: segment.byte_length for segment in encode_mesh(quad_mesh, use_batch_ids=True)}
        assert lengths == {"positions": 48, "normals": 48, "uvs": 32, "batchIds": 8, "indices": 12}
