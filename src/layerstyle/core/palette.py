# どこで: `src/layerstyle/core/palette.py`。
# 何を: コントロール描画用のカラーパレット（デザイントークン）を型付き構造体として定義する。
# なぜ: ホストから渡される any 型のパレットをやめ、必要なトークンだけを明示するため。

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

_HEX_COLOR_RE = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")


@dataclass(frozen=True, slots=True)
class Palette:
    """PositionEditor 系コントロールが使う色トークン。

    スタイルモデルの coerce/merge には一切影響しない。
    """

    text_secondary: str = "#6b7280"
    border_default: str = "#e5e7eb"
    gray_50: str = "#f9fafb"
    primary_500: str = "#6366f1"
    selected_background: str = "#ffffff"


def coerce_hex_color(value: object, *, key: str) -> str:
    """`#rgb` / `#rrggbb` / `#rrggbbaa` の色文字列を小文字化して返す。

    Raises
    ------
    RuntimeError
        色文字列として解釈できない場合。
    """

    if not isinstance(value, str):
        raise RuntimeError(f"{key} は色文字列である必要があります: got={value!r}")
    text = value.strip()
    if not _HEX_COLOR_RE.fullmatch(text):
        raise RuntimeError(f"{key} は #rrggbb 形式である必要があります: got={value!r}")
    return text.lower()


def palette_from_mapping(values: Mapping[str, Any], *, key: str = "palette") -> Palette:
    """dict からパレットを作る。未指定のトークンは既定値、未知キーはエラー。"""

    allowed = {f.name for f in fields(Palette)}
    unknown = set(values) - allowed
    if unknown:
        names = ", ".join(sorted(str(k) for k in unknown))
        raise RuntimeError(f"{key} に未知キーがあります: {names}")

    tokens = {name: coerce_hex_color(v, key=f"{key}.{name}") for name, v in values.items()}
    return Palette(**tokens)


__all__ = ["Palette", "coerce_hex_color", "palette_from_mapping"]
