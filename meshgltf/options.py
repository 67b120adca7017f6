from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Optional

import yaml

from .errors import UnsupportedOptionError
from .scene import UpAxis

logger = logging.getLogger(__name__)

_CAMEL_CASE_KEYS = {
    "useBatchIds": "use_batch_ids",
    "relativeToCenter": "relative_to_center",
    "deprecated": "deprecated",
    "upAxis": "up_axis",
    "quantization": "quantization",
    "textureCompressionOptions": "texture_compression_options",
}


@dataclass(frozen=True)
class GltfOptions:
    """Options for building a glTF from a mesh.

    use_batch_ids: include the per-vertex batch id attribute.
    relative_to_center: subtract the mesh center from the positions and
        record it in the CESIUM_RTC extension.
    deprecated: name the batch id attribute BATCHID instead of _BATCHID.
    up_axis: Y adds a z-up to y-up root transform, Z leaves the model as is.
    quantization, texture_compression_options: accepted for compatibility,
        they do not change the output.
    """

    use_batch_ids: bool = True
    relative_to_center: bool = False
    deprecated: bool = False
    up_axis: UpAxis = UpAxis.Y
    quantization: bool = False
    texture_compression_options: Optional[Any] = None

    def __post_init__(self):
        object.__setattr__(self, "up_axis", UpAxis.parse(self.up_axis))
        for name in ("use_batch_ids", "relative_to_center", "deprecated", "quantization"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise UnsupportedOptionError("Option %s must be a boolean, got %r" % (name, value))

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "GltfOptions":
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                raise UnsupportedOptionError("Unknown option %r" % (key))
            kwargs[name] = value
        return cls(**kwargs)

    def merged(self, **overrides) -> "GltfOptions":
        """Copy with every override that is not None applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def log_ignored(self) -> None:
        if self.quantization:
            logger.debug("Quantization is not implemented; attributes are written unquantized")
        if self.texture_compression_options is not None:
            logger.debug("Texture compression is not implemented; textures are referenced as given")


def load_options(path) -> GltfOptions:
    with open(path, 'r') as f:
        optionsYml = yaml.safe_load(f)
    if optionsYml is not None and not isinstance(optionsYml, dict):
        raise UnsupportedOptionError("Options file %s must contain a mapping" % (path))
    return GltfOptions.from_dict(optionsYml)
