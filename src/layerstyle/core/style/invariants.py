# どこで: `src/layerstyle/core/style/invariants.py`。
# 何を: LayerStyle / LayerStyleStore の不変条件をテストで検証する関数を提供する。
# なぜ: 整合性の知識を 1 箇所へ固定し、踏み抜きを早期検知するため。

from __future__ import annotations

import math
from collections.abc import Mapping

from .inset import InsetAuto, InsetLength, InsetRaw
from .model import LayerStyle
from .position import validate_position
from .store import LayerStyleStore


def assert_style_invariants(style: LayerStyle) -> None:
    """LayerStyle の不変条件を検査する。

    Notes
    -----
    テスト専用の検査関数。実行時に常時呼ぶことは想定しない。
    """

    assert isinstance(style, LayerStyle)
    assert validate_position(style.position), style.position

    for side, inset in style.insets().items():
        assert isinstance(inset, (InsetAuto, InsetLength, InsetRaw)), (side, inset)
        if isinstance(inset, InsetLength):
            assert math.isfinite(float(inset.value)), (side, inset)
        if isinstance(inset, InsetRaw):
            # 空文字は Auto で表す。
            assert inset.text != "", side

    assert isinstance(style.z_index, int) and not isinstance(style.z_index, bool)
    assert isinstance(style.extra, Mapping)


def assert_invariants(store: LayerStyleStore) -> None:
    """LayerStyleStore の不変条件を検査する。"""

    ids = store.layer_ids()
    assert len(set(ids)) == len(ids)
    for layer_id, style in store.items():
        assert isinstance(layer_id, str)
        assert_style_invariants(style)


__all__ = ["assert_style_invariants", "assert_invariants"]
