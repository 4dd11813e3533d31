# どこで: `src/layerstyle/core/style/codec.py`。
# 何を: LayerStyle / StylePatch とホストの plain dict（camelCase, JSON 互換）との相互変換を提供する。
# なぜ: 表現の変換規則を LayerStyle 本体から分離し、ホスト側スキーマの変更を局所化するため。

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any

from .inset import INSET_SIDES, inset_from_plain, inset_to_plain
from .model import (
    DEFAULT_Z_INDEX,
    FIELD_POSITION,
    FIELD_Z_INDEX,
    LayerStyle,
    apply_patch,
    canonical_field,
)
from .patch import parse_z_index, validate_patch
from .position import DEFAULT_POSITION, require_position

PLAIN_Z_INDEX = "zIndex"


def _z_index_from_plain(value: object) -> int:
    """plain の zIndex を int にする。数値として読めなければ 0。"""

    if value is None or isinstance(value, bool):
        return DEFAULT_Z_INDEX
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else DEFAULT_Z_INDEX
    return parse_z_index(str(value))


def encode_layer_style(style: LayerStyle) -> dict[str, Any]:
    """LayerStyle を JSON 化可能な plain dict に変換して返す。

    Auto の inset はキーごと省略する（ホスト側では未設定 = auto）。
    """

    out: dict[str, Any] = dict(style.extra)
    out[FIELD_POSITION] = style.position
    for side, inset in style.insets().items():
        plain = inset_to_plain(inset)
        if plain != "":
            out[side] = plain
    out[PLAIN_Z_INDEX] = int(style.z_index)
    return out


def patch_from_plain(obj: Mapping[str, Any]) -> dict[str, Any]:
    """ホストの plain patch（`{"top": 10}`, `{"zIndex": "3"}` など）を StylePatch にして返す。

    Raises
    ------
    InvalidPositionError
        position が 4 モード以外の場合。
    TypeError
        inset の値が number | str でない場合。
    """

    patch: dict[str, Any] = {}
    for raw_key, value in obj.items():
        key = canonical_field(raw_key)
        if key == FIELD_Z_INDEX:
            patch[FIELD_Z_INDEX] = _z_index_from_plain(value)
        elif key == FIELD_POSITION:
            patch[FIELD_POSITION] = require_position(value)
        elif key in INSET_SIDES:
            patch[key] = inset_from_plain(value)
        else:
            patch[key] = value
    validate_patch(patch)
    return patch


def decode_layer_style(obj: object) -> LayerStyle:
    """plain dict から LayerStyle を復元して返す。

    position が無い場合は既定値（relative）。
    """

    if not isinstance(obj, Mapping):
        raise TypeError("LayerStyle payload must be a mapping")

    payload = dict(obj)
    payload.setdefault(FIELD_POSITION, DEFAULT_POSITION)
    return apply_patch(LayerStyle(), patch_from_plain(payload))


def dumps_layer_style(style: LayerStyle) -> str:
    """LayerStyle を JSON 文字列へ変換して返す。"""

    return json.dumps(encode_layer_style(style), sort_keys=True)


def loads_layer_style(payload: str) -> LayerStyle:
    """JSON 文字列から LayerStyle を復元して返す。"""

    return decode_layer_style(json.loads(payload))


__all__ = [
    "PLAIN_Z_INDEX",
    "encode_layer_style",
    "patch_from_plain",
    "decode_layer_style",
    "dumps_layer_style",
    "loads_layer_style",
]
