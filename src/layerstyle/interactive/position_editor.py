# どこで: `src/layerstyle/interactive/position_editor.py`。
# 何を: Position エディタ（モード切替・inset 4 辺・z-index）のヘッドレスな行モデルと入力ハンドラを提供する。
# なぜ: ウィジェット描画と「入力 → patch」の変換を分離し、GUI 無しでテスト可能に保つため。

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from layerstyle.core.palette import Palette
from layerstyle.core.runtime_config import editor_palette
from layerstyle.core.style.inset import INSET_SIDES, inset_to_text, is_inset_side
from layerstyle.core.style.model import LayerStyle, StylePatch
from layerstyle.core.style.patch import build_patch, build_position_patch, build_z_index_patch
from layerstyle.core.style.position import POSITION_MODES, Position, describe_position

OnChange = Callable[[StylePatch], None]

INSET_PLACEHOLDER = "auto"


@dataclass(frozen=True, slots=True)
class PositionButton:
    """モード切替ボタン 1 個分の表示モデル。"""

    mode: Position
    label: str
    selected: bool
    background: str
    foreground: str


@dataclass(frozen=True, slots=True)
class InsetField:
    """inset 入力欄 1 個分の表示モデル。"""

    side: str
    label: str
    text: str
    placeholder: str = INSET_PLACEHOLDER


class PositionEditor:
    """LayerStyle を表示し、編集を on_change へ patch として渡すエディタ。

    Notes
    -----
    エディタ自身はスタイルを所有しない。ストアの更新後に `set_style` で
    最新値を受け取り、表示を作り直す。
    """

    def __init__(
        self,
        style: LayerStyle,
        on_change: OnChange,
        *,
        palette: Palette | None = None,
    ) -> None:
        self._style = style
        self._on_change = on_change
        self._palette = editor_palette() if palette is None else palette

    @property
    def style(self) -> LayerStyle:
        return self._style

    def set_style(self, style: LayerStyle) -> None:
        self._style = style

    # --- 入力ハンドラ ---
    def select_position(self, mode: str) -> None:
        """モードボタンのクリック。4 モード以外は InvalidPositionError。"""

        self._on_change(build_position_patch(mode))

    def edit_inset(self, side: str, raw_text: str) -> None:
        """inset 入力欄の変更（キー入力ごと）。"""

        if not is_inset_side(side):
            raise ValueError(f"inset の辺ではありません: {side!r}")
        self._on_change(build_patch(side, raw_text))

    def edit_z_index(self, raw_text: str) -> None:
        """z-index 入力欄の変更。数値でなければ 0 として送る。"""

        self._on_change(build_z_index_patch(raw_text))

    # --- 表示モデル ---
    def position_buttons(self) -> list[PositionButton]:
        palette = self._palette
        out: list[PositionButton] = []
        for mode in POSITION_MODES:
            selected = self._style.position == mode
            out.append(
                PositionButton(
                    mode=mode,
                    label=describe_position(mode).label,
                    selected=selected,
                    background=palette.selected_background if selected else palette.gray_50,
                    foreground=palette.primary_500 if selected else palette.text_secondary,
                )
            )
        return out

    def inset_fields(self) -> list[InsetField]:
        insets = self._style.insets()
        return [
            InsetField(side=side, label=side.capitalize(), text=inset_to_text(insets[side]))
            for side in INSET_SIDES
        ]

    def z_index_text(self) -> str:
        return str(int(self._style.z_index))


__all__ = ["INSET_PLACEHOLDER", "InsetField", "OnChange", "PositionButton", "PositionEditor"]
