# どこで: `src/layerstyle/core/style/position.py`。
# 何を: position モード（relative/absolute/fixed/sticky）の検証と、モードごとの表示ポリシーを定義する。
# なぜ: 「どのモードが正当か」「コントロールをどう見せるか」の知識を 1 箇所へ寄せるため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeGuard

Position = Literal["relative", "absolute", "fixed", "sticky"]
ContainingBlock = Literal["normal_flow", "positioned_ancestor", "viewport", "scrollport"]

DEFAULT_POSITION: Position = "relative"

# コントロール（セグメントボタン）の表示順。
POSITION_MODES: tuple[Position, ...] = ("relative", "absolute", "fixed", "sticky")


class InvalidPositionError(ValueError):
    """4 モード以外の position を設定しようとした場合の契約違反。"""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"position は {', '.join(POSITION_MODES)} のいずれかである必要があります: got={value!r}"
        )
        self.value = value


@dataclass(frozen=True, slots=True)
class PositionPolicy:
    """position モードごとの UI/意味論の情報。

    insets_editable/z_index_editable は常に True（モードでゲートしない）。
    """

    mode: Position
    label: str
    removed_from_flow: bool
    containing_block: ContainingBlock
    z_index_effective: bool
    insets_editable: bool = True
    z_index_editable: bool = True


def validate_position(value: object) -> TypeGuard[Position]:
    """value が 4 モードのいずれか（小文字完全一致）なら True を返す。"""

    if not isinstance(value, str):
        return False
    if value == "relative":
        return True
    if value == "absolute":
        return True
    if value == "fixed":
        return True
    if value == "sticky":
        return True
    return False


def require_position(value: object) -> Position:
    """value を検証して Position として返す。不正なら InvalidPositionError。"""

    if not validate_position(value):
        raise InvalidPositionError(value)
    return value


def describe_position(position: Position) -> PositionPolicy:
    """position モードの表示ポリシーを返す。

    Raises
    ------
    InvalidPositionError
        4 モード以外が渡された場合。
    """

    # relative は通常フロー上の自分の位置からのオフセット。
    # z-index は標準のボックスレイアウトでは効かないが、値は保持する。
    if position == "relative":
        return PositionPolicy(
            mode="relative",
            label="Relative",
            removed_from_flow=False,
            containing_block="normal_flow",
            z_index_effective=False,
        )
    if position == "absolute":
        return PositionPolicy(
            mode="absolute",
            label="Absolute",
            removed_from_flow=True,
            containing_block="positioned_ancestor",
            z_index_effective=True,
        )
    if position == "fixed":
        return PositionPolicy(
            mode="fixed",
            label="Fixed",
            removed_from_flow=True,
            containing_block="viewport",
            z_index_effective=True,
        )
    if position == "sticky":
        return PositionPolicy(
            mode="sticky",
            label="Sticky",
            removed_from_flow=False,
            containing_block="scrollport",
            z_index_effective=True,
        )
    raise InvalidPositionError(position)


__all__ = [
    "Position",
    "ContainingBlock",
    "DEFAULT_POSITION",
    "POSITION_MODES",
    "InvalidPositionError",
    "PositionPolicy",
    "validate_position",
    "require_position",
    "describe_position",
]
