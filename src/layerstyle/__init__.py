# どこで: `src/layerstyle/__init__.py`。
# 何を: ルート `layerstyle` パッケージを定義する。
# なぜ: import 起点を `layerstyle` に統一するため。

from __future__ import annotations

from layerstyle.core.palette import Palette
from layerstyle.core.style import (
    InvalidPositionError,
    LayerStyle,
    LayerStyleStore,
    apply_patch,
    build_patch,
    coerce,
    describe_position,
    update_layer_style,
    validate_position,
)

__all__ = [
    "InvalidPositionError",
    "LayerStyle",
    "LayerStyleStore",
    "Palette",
    "apply_patch",
    "build_patch",
    "coerce",
    "describe_position",
    "update_layer_style",
    "validate_position",
]
