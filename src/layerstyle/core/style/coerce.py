# どこで: `src/layerstyle/core/style/coerce.py`。
# 何を: コントロールに入力された生テキストを「数値」か「テキスト」へ振り分ける純粋関数を提供する。
# なぜ: "10" / "10px" / "auto" / "" の曖昧さを 1 箇所で解決し、Patch 生成側を単純に保つため。

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Literal

CoercedKind = Literal["number", "text"]

# 符号付き 10 進（小数・指数を含む、ASCII 数字のみ）。`.5` と `5.` も数値として扱う。
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
# 基数付き整数リテラルは符号なしのみ。
_RADIX_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)


@dataclass(frozen=True, slots=True)
class CoercedValue:
    """coerce の結果。kind="number" なら value は float、kind="text" なら str。"""

    kind: CoercedKind
    value: float | str

    @property
    def is_number(self) -> bool:
        return self.kind == "number"

    @property
    def is_empty(self) -> bool:
        """空文字テキスト（= 値のクリア）なら True。"""

        return self.kind == "text" and self.value == ""


def parse_number(text: str) -> float | None:
    """text 全体が有限の数値リテラルなら float を、それ以外は None を返す。

    前後の空白は無視する。空文字・空白のみ・末尾に単位などが付く文字列は None。
    """

    stripped = text.strip()
    if not stripped:
        return None

    if _RADIX_RE.fullmatch(stripped):
        try:
            return float(int(stripped, 0))
        except OverflowError:
            return None

    if not _DECIMAL_RE.fullmatch(stripped):
        return None
    value = float(stripped)
    # "1e999" のようなオーバーフローは有限でないので数値扱いしない。
    if not math.isfinite(value):
        return None
    return value


def coerce(raw_text: str) -> CoercedValue:
    """生テキストを CoercedValue へ変換して返す（全域関数で例外を出さない）。"""

    number = parse_number(raw_text)
    if number is not None:
        return CoercedValue(kind="number", value=number)
    return CoercedValue(kind="text", value=raw_text)


__all__ = ["CoercedKind", "CoercedValue", "coerce", "parse_number"]
