from __future__ import annotations

from enum import Enum
from typing import Sequence

import pygltflib

from .constants import ROOT_NODE_NAME, RTC_EXTENSION
from .errors import UnsupportedOptionError


class UpAxis(Enum):
    Y = "Y"
    Z = "Z"

    @classmethod
    def parse(cls, value) -> "UpAxis":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise UnsupportedOptionError(
                "Unsupported up axis %r, expected one of %s" % (value, ", ".join(a.value for a in cls))
            ) from None


# Column major. Meshes are z-up; glTF is y-up, so the default case rotates
# -90 degrees about X. Consumers such as Cesium rotate back to z-up.
Z_UP_TO_Y_UP = [1.0, 0.0, 0.0, 0.0, 0.0, 0.0, -1.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0]
IDENTITY = [1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 0.0, 1.0]


def root_matrix(up_axis) -> list[float]:
    upAxis = UpAxis.parse(up_axis)
    if upAxis == UpAxis.Y:
        return list(Z_UP_TO_Y_UP)
    return list(IDENTITY)


def build_scene(primitives: list[pygltflib.Primitive], up_axis):
    """Wrap the primitives in a single mesh under one root node and scene."""
    meshes = [pygltflib.Mesh(primitives=primitives)]
    nodes = [pygltflib.Node(matrix=root_matrix(up_axis), mesh=0, name=ROOT_NODE_NAME)]
    scenes = [pygltflib.Scene(nodes=[0])]
    return meshes, nodes, scenes


def rtc_extension(center: Sequence[float]):
    center = [float(c) for c in center]
    if len(center) != 3:
        raise ValueError("RTC center must have 3 components, got %d" % (len(center)))
    return {RTC_EXTENSION: {"center": center}}, [RTC_EXTENSION]
