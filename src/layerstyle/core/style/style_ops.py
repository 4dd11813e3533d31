# どこで: `src/layerstyle/core/style/style_ops.py`。
# 何を: LayerStyleStore に patch を適用する更新手続きを提供する。
# なぜ: 書き込み経路を ops に固定し、「検証 → マージ → 通知」の順序を 1 箇所へ寄せるため。

from __future__ import annotations

import logging

from .model import LayerStyle, StylePatch, apply_patch
from .patch import build_patch, validate_patch
from .store import LayerStyleStore, UnknownLayerError

_logger = logging.getLogger(__name__)


def update_layer_style(store: LayerStyleStore, layer_id: str, patch: StylePatch) -> LayerStyle:
    """layer_id のスタイルへ patch をマージし、結果を返す。

    Raises
    ------
    UnknownLayerError
        layer_id が未登録の場合。
    InvalidPositionError
        patch の position が 4 モード以外の場合。

    Notes
    -----
    例外時はストアを変更しない（直前の状態を保持する）。
    """

    layer_id = str(layer_id)
    if not store.has_layer(layer_id):
        raise UnknownLayerError(layer_id)

    # 境界での検証。apply_patch 自体は値を再検証しない。
    validate_patch(patch)

    current = store.get_style(layer_id)
    updated = apply_patch(current, patch)
    if updated == current:
        return current

    store._commit(layer_id, updated)
    _logger.debug("layer style updated: layer_id=%s keys=%s", layer_id, sorted(patch))
    return updated


def update_layer_style_from_text(
    store: LayerStyleStore, layer_id: str, field: str, raw_text: str
) -> LayerStyle:
    """コントロールの生テキスト入力を patch にして適用する。"""

    return update_layer_style(store, layer_id, build_patch(field, raw_text))


__all__ = ["update_layer_style", "update_layer_style_from_text"]
