"""
どこで: `src/layerstyle/core/style/model.py`。
何を: Layer ごとの正準スタイルレコード LayerStyle と、部分更新（patch）の純粋マージを定義する。
なぜ: 複数のコントロールから届く部分編集を、常に同じ規則（後勝ち・不変）で 1 つのレコードへ畳み込むため。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, TypeAlias

from .inset import INSET_AUTO, Inset
from .position import DEFAULT_POSITION, Position

_logger = logging.getLogger(__name__)

FIELD_POSITION = "position"
FIELD_TOP = "top"
FIELD_RIGHT = "right"
FIELD_BOTTOM = "bottom"
FIELD_LEFT = "left"
FIELD_Z_INDEX = "z_index"

# LayerStyle が属性として持つフィールド。これ以外のキーは extra に入る。
CORE_FIELDS: frozenset[str] = frozenset(
    {FIELD_POSITION, FIELD_TOP, FIELD_RIGHT, FIELD_BOTTOM, FIELD_LEFT, FIELD_Z_INDEX}
)

# ホスト側（camelCase）のフィールド名 -> LayerStyle のフィールド名。
FIELD_ALIASES: Mapping[str, str] = MappingProxyType({"zIndex": FIELD_Z_INDEX})

DEFAULT_Z_INDEX = 0

StylePatch: TypeAlias = Mapping[str, Any]


def canonical_field(name: str) -> str:
    """別名（`zIndex` など）を正規のフィールド名へ寄せて返す。"""

    return FIELD_ALIASES.get(str(name), str(name))


def _frozen_extra(values: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True, slots=True)
class LayerStyle:
    """1 つの Layer が所有するスタイルレコード。

    Notes
    -----
    - 変更は `apply_patch` でのみ行い、既存インスタンスは書き換えない。
    - extra は色・タイポグラフィなど本モジュールが意味を持たないフィールドで、
      同じマージ規則に従う。
    """

    position: Position = DEFAULT_POSITION
    top: Inset = INSET_AUTO
    right: Inset = INSET_AUTO
    bottom: Inset = INSET_AUTO
    left: Inset = INSET_AUTO
    z_index: int = DEFAULT_Z_INDEX
    extra: Mapping[str, Any] = field(default_factory=_frozen_extra)

    # extra は読み取り専用 mapping（値に dict も入り得る）なので hash 不可とする。
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.extra, MappingProxyType):
            object.__setattr__(self, "extra", _frozen_extra(self.extra))

    def get(self, key: str, default: Any = None) -> Any:
        """フィールド名（core/extra 共通）で値を返す。"""

        key = canonical_field(key)
        if key in CORE_FIELDS:
            return getattr(self, key)
        return self.extra.get(key, default)

    def insets(self) -> dict[str, Inset]:
        """side -> Inset の dict を返す。"""

        return {
            FIELD_TOP: self.top,
            FIELD_RIGHT: self.right,
            FIELD_BOTTOM: self.bottom,
            FIELD_LEFT: self.left,
        }


def apply_patch(current: LayerStyle, patch: StylePatch) -> LayerStyle:
    """current に patch を重ねた新しい LayerStyle を返す（current は変更しない）。

    Parameters
    ----------
    current : LayerStyle
        現在のスタイル。
    patch : Mapping[str, Any]
        部分更新。含まれるキーだけを置き換える。値の検証は Patch Builder 側の責務で、
        ここでは受け取った値をそのまま採用する。

    Returns
    -------
    LayerStyle
        マージ後のスタイル。同じキーへの連続適用は後勝ち。
    """

    if not patch:
        return current

    core_updates: dict[str, Any] = {}
    extra_updates: dict[str, Any] = {}
    for raw_key, value in patch.items():
        key = canonical_field(raw_key)
        if key in CORE_FIELDS:
            core_updates[key] = value
        else:
            extra_updates[key] = value

    if extra_updates:
        merged_extra = dict(current.extra)
        merged_extra.update(extra_updates)
        core_updates["extra"] = _frozen_extra(merged_extra)

    _logger.debug("apply_patch: keys=%s", sorted(str(k) for k in patch))
    return replace(current, **core_updates)


def apply_patches(current: LayerStyle, patches: list[StylePatch]) -> LayerStyle:
    """patches を順に適用した結果を返す（ホストのイベント順 = 適用順）。"""

    style = current
    for patch in patches:
        style = apply_patch(style, patch)
    return style


__all__ = [
    "FIELD_POSITION",
    "FIELD_TOP",
    "FIELD_RIGHT",
    "FIELD_BOTTOM",
    "FIELD_LEFT",
    "FIELD_Z_INDEX",
    "CORE_FIELDS",
    "FIELD_ALIASES",
    "DEFAULT_Z_INDEX",
    "StylePatch",
    "canonical_field",
    "LayerStyle",
    "apply_patch",
    "apply_patches",
]
