# どこで: `src/layerstyle/core/runtime_config.py`。
# 何を: 同梱 → 探索 → 明示指定の順に config.yaml を重ね、エディタ用パレットを組み立てる。
# なぜ: ホストごとに変えたいトークン（色）をコードに焼き込まずに差し替えられるようにするため。

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from .palette import Palette, palette_from_mapping

SUPPORTED_CONFIG_VERSION = 1
_PACKAGED_SOURCE = "layerstyle/resource/default_config.yaml"


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """layerstyle の実行時設定。

    config_path は最も優先度の高いユーザー config（無ければ None）。
    """

    config_path: Path | None
    palette: Palette


_explicit_path: Path | None = None
_cached: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """明示 config パスを差し替え、キャッシュを捨てる。None で探索のみに戻る。"""

    global _explicit_path, _cached
    _explicit_path = None if path is None else Path(str(path)).expanduser()
    _cached = None


def _search_paths() -> list[Path]:
    return [
        Path.cwd() / ".layerstyle" / "config.yaml",
        Path.home() / ".config" / "layerstyle" / "config.yaml",
    ]


def _parse_layer(text: str, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"YAML として解釈できません: {source}") from exc
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise RuntimeError(f"トップレベルは mapping である必要があります: {source}")
    return dict(data)


def _packaged_layer() -> dict[str, Any]:
    blob = resources.files("layerstyle").joinpath("resource", "default_config.yaml")
    return _parse_layer(blob.read_text(encoding="utf-8"), _PACKAGED_SOURCE)


def _user_layers() -> list[Path]:
    """後勝ちの順に並べたユーザー config のパスを返す。"""

    layers: list[Path] = []
    found = next((p for p in _search_paths() if p.is_file()), None)
    if found is not None:
        layers.append(found)
    if _explicit_path is not None:
        if not _explicit_path.is_file():
            raise FileNotFoundError(f"指定された config が存在しません: {_explicit_path}")
        layers.append(_explicit_path)
    return layers


def _require_version(merged: Mapping[str, Any]) -> None:
    raw = merged.get("version")
    try:
        version = int(raw)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"version が整数ではありません: got={raw!r}") from exc
    if version != SUPPORTED_CONFIG_VERSION:
        raise RuntimeError(
            f"version={version} は扱えません（対応: {SUPPORTED_CONFIG_VERSION}）"
        )


def _palette_section(merged: Mapping[str, Any]) -> Palette:
    section = merged.get("palette") or {}
    if not isinstance(section, Mapping):
        raise RuntimeError(f"palette は mapping である必要があります: got={section!r}")
    return palette_from_mapping(section)


def runtime_config() -> RuntimeConfig:
    """実行時設定を返す（初回のみロードし、以降はキャッシュ）。

    各層はトップレベルキー単位で後勝ちに上書きする:
    同梱 default_config.yaml → `./.layerstyle/config.yaml` または
    `~/.config/layerstyle/config.yaml` → `set_config_path(...)`。

    Raises
    ------
    FileNotFoundError
        明示パスが存在しない場合。
    RuntimeError
        YAML・version・palette のいずれかが不正な場合。
    """

    global _cached
    if _cached is None:
        paths = _user_layers()
        merged = _packaged_layer()
        for path in paths:
            merged.update(_parse_layer(path.read_text(encoding="utf-8"), str(path)))
        _require_version(merged)
        _cached = RuntimeConfig(
            config_path=paths[-1] if paths else None,
            palette=_palette_section(merged),
        )
    return _cached


def editor_palette() -> Palette:
    """コントロール描画用のパレットを返す。"""

    return runtime_config().palette


__all__ = [
    "SUPPORTED_CONFIG_VERSION",
    "RuntimeConfig",
    "editor_palette",
    "runtime_config",
    "set_config_path",
]
