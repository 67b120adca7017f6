"""In-memory triangle mesh consumed by the glTF builder.

A mesh carries flat attribute streams (3 floats per position and normal,
2 per uv, 4 bytes per vertex color, one integer per batch id), a shared
index stream and an ordered list of views. Each view is a contiguous
range of the index stream drawn with one material.

Positions are held as float64 and only narrowed to float32 when encoded.
Integer streams keep their input dtype until validate() has checked them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

import numpy as np

from .constants import UINT8_MAX, UINT16_MAX
from .errors import MeshValidationError


@dataclass(frozen=True)
class FlatColor:
    r: float
    g: float
    b: float
    a: float = 1.0

    @property
    def is_transparent(self) -> bool:
        return self.a < 1.0

    def to_list(self) -> list[float]:
        return [float(self.r), float(self.g), float(self.b), float(self.a)]


@dataclass(frozen=True)
class TexturedColor:
    uri: str


BaseColor = Union[FlatColor, TexturedColor]


@dataclass(frozen=True)
class Material:
    base_color: BaseColor


def material_from_base_color(value: Any) -> Material:
    """Build a material from a raw base color: a texture URI or an RGBA sequence."""
    if isinstance(value, (FlatColor, TexturedColor)):
        return Material(value)
    if isinstance(value, str):
        if not value:
            raise MeshValidationError("Texture URI must not be empty")
        return Material(TexturedColor(value))
    try:
        components = [float(c) for c in value]
    except (TypeError, ValueError) as e:
        raise MeshValidationError(f"Unsupported base color {value!r}") from e
    if len(components) != 4:
        raise MeshValidationError(f"Base color must have 4 components, got {len(components)}")
    if any(c < 0.0 or c > 1.0 for c in components):
        raise MeshValidationError(f"Base color components must be in [0, 1], got {components}")
    return Material(FlatColor(*components))


@dataclass(frozen=True)
class View:
    index_offset: int
    index_count: int
    material: Material


def _as_array(values: Optional[Sequence], dtype) -> Optional[np.ndarray]:
    if values is None:
        return None
    return np.ascontiguousarray(np.asarray(values, dtype=dtype).reshape(-1))


@dataclass(frozen=True)
class Mesh:
    positions: np.ndarray
    normals: np.ndarray
    uvs: np.ndarray
    indices: np.ndarray
    views: tuple[View, ...]
    vertex_colors: Optional[np.ndarray] = None
    batch_ids: Optional[np.ndarray] = None

    def __post_init__(self):
        # float64 until encoding so recentering keeps full precision
        object.__setattr__(self, "positions", _as_array(self.positions, np.float64))
        object.__setattr__(self, "normals", _as_array(self.normals, np.float32))
        object.__setattr__(self, "uvs", _as_array(self.uvs, np.float32))
        object.__setattr__(self, "indices", _as_array(self.indices, None))
        object.__setattr__(self, "vertex_colors", _as_array(self.vertex_colors, None))
        object.__setattr__(self, "batch_ids", _as_array(self.batch_ids, None))
        object.__setattr__(self, "views", tuple(self.views))

    @property
    def vertex_count(self) -> int:
        return len(self.positions) // 3

    @property
    def has_vertex_colors(self) -> bool:
        # An all-zero color stream means the mesh has no vertex colors.
        return self.vertex_colors is not None and bool(np.any(self.vertex_colors != 0))

    def get_center(self) -> np.ndarray:
        if self.vertex_count == 0:
            raise MeshValidationError("Cannot compute the center of a mesh without vertices")
        return self.positions.reshape(-1, 3).mean(axis=0)

    def relative_to_center(self, center: Sequence[float]) -> "Mesh":
        center = np.asarray(center, dtype=np.float64).reshape(3)
        positions = (self.positions.reshape(-1, 3) - center).reshape(-1)
        return Mesh(
            positions=positions,
            normals=self.normals,
            uvs=self.uvs,
            indices=self.indices,
            views=self.views,
            vertex_colors=self.vertex_colors,
            batch_ids=self.batch_ids,
        )

    def validate(self, use_batch_ids: bool = True) -> None:
        """Reject malformed meshes before anything is encoded.

        Checks stream lengths against the vertex count, integer ranges of
        colors, batch ids and indices, and that every view lies inside the
        index stream. Topology is not inspected.
        """
        if len(self.positions) == 0 or len(self.positions) % 3 != 0:
            raise MeshValidationError(
                f"Positions length must be a positive multiple of 3, got {len(self.positions)}"
            )
        vertexCount = self.vertex_count
        _check_length("normals", self.normals, vertexCount * 3)
        _check_length("uvs", self.uvs, vertexCount * 2)

        if self.vertex_colors is not None:
            _check_length("vertex colors", self.vertex_colors, vertexCount * 4)
            _check_integral("vertex colors", self.vertex_colors)
            _check_range("vertex colors", self.vertex_colors, UINT8_MAX)

        if use_batch_ids:
            if self.batch_ids is None:
                raise MeshValidationError("Batch ids were requested but the mesh has none")
            _check_length("batch ids", self.batch_ids, vertexCount)
            _check_integral("batch ids", self.batch_ids)
            _check_range("batch ids", self.batch_ids, UINT16_MAX)

        if len(self.indices) == 0:
            raise MeshValidationError("Mesh has no indices")
        _check_integral("indices", self.indices)
        _check_range("indices", self.indices, UINT16_MAX)
        largest = int(self.indices.max())
        if largest >= vertexCount:
            raise MeshValidationError(
                f"Index {largest} is out of range for a mesh with {vertexCount} vertices"
            )

        if not self.views:
            raise MeshValidationError("Mesh has no views")
        indexCount = len(self.indices)
        for i, view in enumerate(self.views):
            if view.index_offset < 0 or view.index_count <= 0:
                raise MeshValidationError(
                    f"View {i} has an invalid index range "
                    f"(offset {view.index_offset}, count {view.index_count})"
                )
            if view.index_offset + view.index_count > indexCount:
                raise MeshValidationError(
                    f"View {i} ends at index {view.index_offset + view.index_count} "
                    f"but the mesh only has {indexCount} indices"
                )
            if not isinstance(view.material, Material):
                raise MeshValidationError(f"View {i} has no material")


def _check_length(name: str, values: np.ndarray, expected: int) -> None:
    if len(values) != expected:
        raise MeshValidationError(f"Expected {expected} {name} values, got {len(values)}")


def _check_range(name: str, values: np.ndarray, maximum: int) -> None:
    if len(values) == 0:
        return
    low = int(values.min())
    high = int(values.max())
    if low < 0 or high > maximum:
        raise MeshValidationError(f"{name.capitalize()} must be in [0, {maximum}], got [{low}, {high}]")


def _check_integral(name: str, values: np.ndarray) -> None:
    if values.dtype.kind in "iu":
        return
    if values.dtype.kind != "f" or not np.all(np.mod(values, 1) == 0):
        raise MeshValidationError(f"{name.capitalize()} must be whole numbers, got {values.dtype} values")
