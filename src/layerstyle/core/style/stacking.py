# どこで: `src/layerstyle/core/style/stacking.py`。
# 何を: 同じ containing block を共有する兄弟 Layer の描画順（z-index 昇順・同値は挿入順）を求める。
# なぜ: 「z が大きいほど上、同値は文書順」という規則をレンダラ任せにせず固定するため。

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

from .model import LayerStyle

K = TypeVar("K")


def stacking_order(items: Iterable[tuple[K, LayerStyle]]) -> list[K]:
    """(id, style) 列から、奥 → 手前の順に並べた id を返す。

    sorted は安定なので、z_index が同じ要素は入力順（挿入順）を保つ。
    """

    indexed = list(items)
    ordered = sorted(indexed, key=lambda item: int(item[1].z_index))
    return [layer_id for layer_id, _style in ordered]


def topmost(items: Iterable[tuple[K, LayerStyle]]) -> K | None:
    """最前面に描かれる id を返す。空なら None。"""

    order = stacking_order(items)
    return order[-1] if order else None


__all__ = ["stacking_order", "topmost"]
