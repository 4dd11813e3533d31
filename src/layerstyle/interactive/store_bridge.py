# どこで: `src/layerstyle/interactive/store_bridge.py`。
# 何を: PositionEditor の patch を LayerStyleStore へ反映し、ストアの変更をエディタへ戻す。
# なぜ: 「表示」と「永続状態の更新」を分離し、依存方向を単純化するため。

from __future__ import annotations

import logging

from layerstyle.core.palette import Palette
from layerstyle.core.style.model import LayerStyle, StylePatch
from layerstyle.core.style.position import InvalidPositionError
from layerstyle.core.style.store import LayerStyleStore, UnknownLayerError
from layerstyle.core.style.style_ops import update_layer_style

from .position_editor import PositionEditor

_logger = logging.getLogger(__name__)


def commit_patch(
    store: LayerStyleStore, layer_id: str, patch: StylePatch
) -> tuple[bool, str | None]:
    """patch をストアへ反映し、(成功したか, エラー種別) を返す。

    失敗時はストアを変更せず、警告ログを出す。
    """

    try:
        update_layer_style(store, layer_id, patch)
    except InvalidPositionError as exc:
        _logger.warning("position の更新を拒否しました: layer_id=%s value=%r", layer_id, exc.value)
        return False, "invalid_position"
    except UnknownLayerError:
        _logger.warning("未登録 layer への更新を無視しました: layer_id=%s", layer_id)
        return False, "unknown_layer"
    except (TypeError, ValueError) as exc:
        _logger.warning("不正な patch を拒否しました: layer_id=%s err=%s", layer_id, exc)
        return False, "invalid_patch"
    return True, None


class EditorBinding:
    """PositionEditor と LayerStyleStore の 1 対 1 の結線。"""

    def __init__(
        self,
        store: LayerStyleStore,
        layer_id: str,
        *,
        palette: Palette | None = None,
    ) -> None:
        self._store = store
        self._layer_id = str(layer_id)
        self.last_error: str | None = None
        self.editor = PositionEditor(
            store.get_style(self._layer_id),
            self._on_change,
            palette=palette,
        )
        self._unsubscribe = store.subscribe(self._on_store_changed)

    @property
    def layer_id(self) -> str:
        return self._layer_id

    def close(self) -> None:
        """ストアの購読を解除する。"""

        self._unsubscribe()

    def _on_change(self, patch: StylePatch) -> None:
        _ok, self.last_error = commit_patch(self._store, self._layer_id, patch)

    def _on_store_changed(self, layer_id: str, style: LayerStyle) -> None:
        if layer_id == self._layer_id:
            self.editor.set_style(style)


def bind_position_editor(
    store: LayerStyleStore,
    layer_id: str,
    *,
    palette: Palette | None = None,
) -> EditorBinding:
    """layer_id 用の PositionEditor をストアへ結線して返す。"""

    return EditorBinding(store, layer_id, palette=palette)


__all__ = ["EditorBinding", "bind_position_editor", "commit_patch"]
