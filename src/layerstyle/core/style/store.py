# どこで: `src/layerstyle/core/style/store.py`。
# 何を: layer_id -> LayerStyle を保持するストア（LayerStyleStore）を定義する。
# なぜ: スタイルの所有者を Layer（= ストア内のエントリ）に固定し、エディタ部品に状態を持たせないため。

from __future__ import annotations

import logging
from collections.abc import Callable

from .model import LayerStyle

_logger = logging.getLogger(__name__)

StyleListener = Callable[[str, LayerStyle], None]


class UnknownLayerError(KeyError):
    """未登録の layer_id を参照した場合の例外。"""

    def __init__(self, layer_id: str) -> None:
        super().__init__(layer_id)
        self.layer_id = layer_id

    def __str__(self) -> str:
        return f"未登録の layer_id です: {self.layer_id!r}"


class LayerStyleStore:
    """layer_id -> LayerStyle を保持するストア。

    Notes
    -----
    - LayerStyle は不変なので、get_style はそのまま返してよい。
    - 更新は ops（`style_ops.update_layer_style`）経由で行う想定とする。
    - 挿入順を保持する（z-index 同値時の描画順に使う）。
    """

    def __init__(self) -> None:
        self._styles: dict[str, LayerStyle] = {}
        self._listeners: list[StyleListener] = []
        self._dirty = False

    def add_layer(self, layer_id: str, style: LayerStyle | None = None) -> LayerStyle:
        """Layer を登録し、初期スタイル（省略時は既定値）を返す。"""

        layer_id = str(layer_id)
        if layer_id in self._styles:
            raise ValueError(f"layer_id が重複しています: {layer_id!r}")
        initial = LayerStyle() if style is None else style
        self._styles[layer_id] = initial
        self._dirty = True
        return initial

    def remove_layer(self, layer_id: str) -> None:
        """Layer を削除する（スタイルも一緒に破棄される）。"""

        try:
            del self._styles[str(layer_id)]
        except KeyError:
            raise UnknownLayerError(str(layer_id)) from None
        self._dirty = True

    def get_style(self, layer_id: str) -> LayerStyle:
        """登録済みの LayerStyle を返す。"""

        style = self._styles.get(str(layer_id))
        if style is None:
            raise UnknownLayerError(str(layer_id))
        return style

    def has_layer(self, layer_id: str) -> bool:
        return str(layer_id) in self._styles

    def layer_ids(self) -> list[str]:
        """挿入順の layer_id を返す。"""

        return list(self._styles)

    def items(self) -> list[tuple[str, LayerStyle]]:
        """挿入順の (layer_id, LayerStyle) を返す。"""

        return list(self._styles.items())

    @property
    def is_dirty(self) -> bool:
        """前回 mark_clean 以降に変更があれば True。"""

        return self._dirty

    def mark_clean(self) -> None:
        self._dirty = False

    def subscribe(self, listener: StyleListener) -> Callable[[], None]:
        """スタイル変更の通知先を登録し、解除関数を返す。"""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # --- 内部 API（ops からのみ利用する想定）---
    def _commit(self, layer_id: str, style: LayerStyle) -> None:
        self._styles[layer_id] = style
        self._dirty = True
        # 確定済みの状態は巻き戻さない。1 つの通知先の失敗で残りへの通知を止めない。
        for listener in list(self._listeners):
            try:
                listener(layer_id, style)
            except Exception:
                _logger.warning(
                    "スタイル変更の通知に失敗しました: layer_id=%s listener=%r",
                    layer_id,
                    listener,
                    exc_info=True,
                )


__all__ = ["LayerStyleStore", "StyleListener", "UnknownLayerError"]
