class GltfError(RuntimeError):
    pass


class MeshValidationError(GltfError, ValueError):
    pass


class UnsupportedOptionError(GltfError, ValueError):
    pass


class LayoutError(GltfError):
    pass
