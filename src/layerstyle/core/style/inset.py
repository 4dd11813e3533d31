# どこで: `src/layerstyle/core/style/inset.py`。
# 何を: inset（top/right/bottom/left）の値を Auto / Length / Raw のタグ付きバリアントで表現する。
# なぜ: `number | string` の型なし union を避け、merge/検証/表示で型判定を網羅的に書けるようにするため。

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, TypeAlias

from .coerce import CoercedValue

InsetSide = Literal["top", "right", "bottom", "left"]

# Coordinates グリッドの表示順。
INSET_SIDES: tuple[InsetSide, ...] = ("top", "right", "bottom", "left")


@dataclass(frozen=True, slots=True)
class InsetAuto:
    """明示値なし（ブラウザ既定の配置に任せる）。"""


@dataclass(frozen=True, slots=True)
class InsetLength:
    """数値オフセット（px 相当）。"""

    value: float


@dataclass(frozen=True, slots=True)
class InsetRaw:
    """生テキスト（"10px" / "50%" / "auto" など）。そのまま保持する。"""

    text: str


Inset: TypeAlias = InsetAuto | InsetLength | InsetRaw

INSET_AUTO = InsetAuto()


def is_inset_side(field: str) -> bool:
    return field in INSET_SIDES


def inset_from_coerced(coerced: CoercedValue) -> Inset:
    """CoercedValue を Inset へ写す。空文字は Auto（0 ではない）。"""

    if coerced.kind == "number":
        return InsetLength(float(coerced.value))
    text = str(coerced.value)
    if text == "":
        return INSET_AUTO
    return InsetRaw(text)


def inset_to_plain(inset: Inset) -> float | int | str:
    """ホスト向けの plain 値へ変換する（Auto は ""、整数値の Length は int）。"""

    if isinstance(inset, InsetAuto):
        return ""
    if isinstance(inset, InsetLength):
        value = float(inset.value)
        return int(value) if value.is_integer() else value
    if isinstance(inset, InsetRaw):
        return inset.text
    raise TypeError(f"inset は Inset バリアントである必要があります: got={inset!r}")


def inset_to_text(inset: Inset) -> str:
    """入力欄に表示するテキストを返す（Auto は空欄 = placeholder "auto"）。"""

    plain = inset_to_plain(inset)
    return plain if isinstance(plain, str) else str(plain)


def inset_from_plain(value: object) -> Inset:
    """ホスト由来の plain 値（number | str | None）を Inset へ変換する。"""

    if value is None:
        return INSET_AUTO
    if isinstance(value, bool):
        raise TypeError(f"inset に bool は使えません: got={value!r}")
    if isinstance(value, (int, float)):
        number = float(value)
        if not math.isfinite(number):
            raise ValueError(f"inset の数値は有限である必要があります: got={value!r}")
        return InsetLength(number)
    if isinstance(value, str):
        return INSET_AUTO if value == "" else InsetRaw(value)
    raise TypeError(f"inset は number | str である必要があります: got={value!r}")


__all__ = [
    "InsetSide",
    "INSET_SIDES",
    "InsetAuto",
    "InsetLength",
    "InsetRaw",
    "Inset",
    "INSET_AUTO",
    "is_inset_side",
    "inset_from_coerced",
    "inset_to_plain",
    "inset_to_text",
    "inset_from_plain",
]
