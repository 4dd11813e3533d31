# どこで: `src/layerstyle/core/style/__init__.py`。
# 何を: レイヤースタイル・コアの公開エイリアスをまとめる。
# なぜ: コントロール側やホストから最小インポートで使えるようにするため。

from .coerce import CoercedValue, coerce, parse_number
from .codec import (
    decode_layer_style,
    dumps_layer_style,
    encode_layer_style,
    loads_layer_style,
    patch_from_plain,
)
from .inset import (
    INSET_AUTO,
    INSET_SIDES,
    Inset,
    InsetAuto,
    InsetLength,
    InsetRaw,
)
from .model import LayerStyle, StylePatch, apply_patch, apply_patches
from .patch import (
    build_patch,
    build_position_patch,
    build_z_index_patch,
    parse_z_index,
    validate_patch,
)
from .position import (
    POSITION_MODES,
    InvalidPositionError,
    Position,
    PositionPolicy,
    describe_position,
    validate_position,
)
from .stacking import stacking_order, topmost
from .store import LayerStyleStore, UnknownLayerError
from .style_ops import update_layer_style, update_layer_style_from_text

__all__ = [
    "CoercedValue",
    "coerce",
    "parse_number",
    "decode_layer_style",
    "dumps_layer_style",
    "encode_layer_style",
    "loads_layer_style",
    "patch_from_plain",
    "INSET_AUTO",
    "INSET_SIDES",
    "Inset",
    "InsetAuto",
    "InsetLength",
    "InsetRaw",
    "LayerStyle",
    "StylePatch",
    "apply_patch",
    "apply_patches",
    "build_patch",
    "build_position_patch",
    "build_z_index_patch",
    "parse_z_index",
    "validate_patch",
    "POSITION_MODES",
    "InvalidPositionError",
    "Position",
    "PositionPolicy",
    "describe_position",
    "validate_position",
    "stacking_order",
    "topmost",
    "LayerStyleStore",
    "UnknownLayerError",
    "update_layer_style",
    "update_layer_style_from_text",
]
