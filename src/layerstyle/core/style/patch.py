# どこで: `src/layerstyle/core/style/patch.py`。
# 何を: (field, 生テキスト) から 1 キーだけの StylePatch を作り、外部由来の patch を境界で検証する。
# なぜ: LayerStyle.apply_patch は値を再検証しないので、正当性の判定をここへ集約するため。

from __future__ import annotations

import math
from typing import Any

from .coerce import coerce, parse_number
from .inset import InsetAuto, InsetLength, InsetRaw, inset_from_coerced, is_inset_side
from .model import DEFAULT_Z_INDEX, FIELD_POSITION, FIELD_Z_INDEX, StylePatch, canonical_field
from .position import Position, require_position


def parse_z_index(raw_text: str) -> int:
    """z-index 入力を整数へ変換する。数値でなければ 0（入力途中の値を許容する）。

    小数は 0 方向へ切り捨てる。
    """

    number = parse_number(raw_text)
    if number is None:
        return DEFAULT_Z_INDEX
    return int(number)


def build_z_index_patch(raw_text: str) -> dict[str, Any]:
    """z-index 専用の patch を返す。テキスト値にはならない。"""

    return {FIELD_Z_INDEX: parse_z_index(raw_text)}


def build_position_patch(value: object) -> dict[str, Any]:
    """position 専用の patch を返す。

    Raises
    ------
    InvalidPositionError
        4 モード以外が渡された場合（coerce は通さない）。
    """

    position: Position = require_position(value)
    return {FIELD_POSITION: position}


def build_patch(field: str, raw_text: str) -> dict[str, Any]:
    """field へ raw_text を入力したときの最小 patch を返す。

    - position: 閉集合のみ（build_position_patch）
    - z_index: 数値のみ、失敗時 0（build_z_index_patch）
    - inset: 空文字 → Auto、数値 → Length、それ以外 → Raw
    - その他: 数値 → float、それ以外 → 生テキスト
    """

    field = canonical_field(field)
    if field == FIELD_POSITION:
        return build_position_patch(raw_text)
    if field == FIELD_Z_INDEX:
        return build_z_index_patch(raw_text)

    coerced = coerce(raw_text)
    if is_inset_side(field):
        return {field: inset_from_coerced(coerced)}
    return {field: coerced.value}


def validate_patch(patch: StylePatch) -> None:
    """Patch Builder を経由しない patch を検証する（不正なら例外）。

    Raises
    ------
    InvalidPositionError
        position が 4 モード以外の場合。
    TypeError
        z_index / inset の型が不正な場合。
    ValueError
        inset の数値が有限でない場合。
    """

    for raw_key, value in patch.items():
        key = canonical_field(raw_key)
        if key == FIELD_POSITION:
            require_position(value)
        elif key == FIELD_Z_INDEX:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"z_index は int である必要があります: got={value!r}")
        elif is_inset_side(key):
            if isinstance(value, InsetLength):
                if not math.isfinite(float(value.value)):
                    raise ValueError(f"{key} の数値は有限である必要があります: got={value!r}")
            elif not isinstance(value, (InsetAuto, InsetRaw)):
                raise TypeError(f"{key} は Inset である必要があります: got={value!r}")


__all__ = [
    "parse_z_index",
    "build_z_index_patch",
    "build_position_patch",
    "build_patch",
    "validate_patch",
]
