from enum import Enum, IntEnum

import pygltflib


class ComponentType(IntEnum):
    UNSIGNED_BYTE = pygltflib.UNSIGNED_BYTE
    UNSIGNED_SHORT = pygltflib.UNSIGNED_SHORT
    FLOAT = pygltflib.FLOAT


class BufferTarget(IntEnum):
    ARRAY_BUFFER = pygltflib.ARRAY_BUFFER
    ELEMENT_ARRAY_BUFFER = pygltflib.ELEMENT_ARRAY_BUFFER


class PrimitiveMode(IntEnum):
    TRIANGLES = 4


class SamplerFilter(IntEnum):
    LINEAR = 9729


class SamplerWrap(IntEnum):
    REPEAT = 10497


class ElementType(str, Enum):
    SCALAR = pygltflib.SCALAR
    VEC2 = pygltflib.VEC2
    VEC3 = pygltflib.VEC3
    VEC4 = pygltflib.VEC4


class AlphaMode(str, Enum):
    OPAQUE = "OPAQUE"
    BLEND = "BLEND"


COMPONENT_SIZE = {
    ComponentType.UNSIGNED_BYTE: 1,
    ComponentType.UNSIGNED_SHORT: 2,
    ComponentType.FLOAT: 4,
}

# little-endian numpy dtype used to pack each component type
COMPONENT_DTYPE = {
    ComponentType.UNSIGNED_BYTE: "<u1",
    ComponentType.UNSIGNED_SHORT: "<u2",
    ComponentType.FLOAT: "<f4",
}

ELEMENT_ARITY = {
    ElementType.SCALAR: 1,
    ElementType.VEC2: 2,
    ElementType.VEC3: 3,
    ElementType.VEC4: 4,
}

ELEMENT_TYPE_FOR_ARITY = {arity: elementType for elementType, arity in ELEMENT_ARITY.items()}

UINT16_MAX = 0xFFFF
UINT8_MAX = 0xFF

GENERATOR = "meshgltf"
GLTF_VERSION = "2.0"

RTC_EXTENSION = "CESIUM_RTC"
ROOT_NODE_NAME = "rootNode"
