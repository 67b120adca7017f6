from .errors import GltfError, LayoutError, MeshValidationError, UnsupportedOptionError
from .gltf import create_glb, create_gltf, pack_glb, to_embedded_gltf
from .mesh import FlatColor, Material, Mesh, TexturedColor, View, material_from_base_color
from .options import GltfOptions, load_options
from .scene import UpAxis

__version__ = "0.1.0"

__all__ = [
    "FlatColor",
    "GltfError",
    "GltfOptions",
    "LayoutError",
    "Material",
    "Mesh",
    "MeshValidationError",
    "TexturedColor",
    "UnsupportedOptionError",
    "UpAxis",
    "View",
    "create_glb",
    "create_gltf",
    "load_options",
    "material_from_base_color",
    "pack_glb",
    "to_embedded_gltf",
]
