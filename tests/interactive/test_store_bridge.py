from __future__ import annotations

import logging

import pytest

from layerstyle.core.palette import Palette
from layerstyle.core.style import INSET_AUTO, InsetLength, LayerStyleStore
from layerstyle.core.style.invariants import assert_invariants
from layerstyle.interactive.store_bridge import bind_position_editor, commit_patch


def _store() -> LayerStyleStore:
    store = LayerStyleStore()
    store.add_layer("layer-1")
    store.add_layer("layer-2")
    return store


def test_commit_patch_success():
    store = _store()
    ok, err = commit_patch(store, "layer-1", {"z_index": 3})
    assert ok is True and err is None
    assert store.get_style("layer-1").z_index == 3


@pytest.mark.parametrize(
    "layer_id,patch,expected_err",
    [
        ("layer-1", {"position": "static"}, "invalid_position"),
        ("missing", {"z_index": 1}, "unknown_layer"),
        ("layer-1", {"z_index": "3"}, "invalid_patch"),
    ],
)
def test_commit_patch_rejects_and_keeps_state(
    caplog: pytest.LogCaptureFixture, layer_id, patch, expected_err
):
    store = _store()
    before = store.items()

    with caplog.at_level(logging.WARNING, logger="layerstyle.interactive.store_bridge"):
        ok, err = commit_patch(store, layer_id, patch)

    assert ok is False
    assert err == expected_err
    assert store.items() == before
    assert any(r.levelno == logging.WARNING for r in caplog.records)
    assert_invariants(store)


def test_binding_roundtrip_through_store():
    store = _store()
    binding = bind_position_editor(store, "layer-1", palette=Palette())
    editor = binding.editor

    editor.select_position("absolute")
    editor.edit_inset("top", "10")
    editor.edit_inset("left", "20")

    style = store.get_style("layer-1")
    assert style.position == "absolute"
    assert style.top == InsetLength(10.0)
    assert style.left == InsetLength(20.0)
    assert style.right == INSET_AUTO
    assert style.bottom == INSET_AUTO
    assert style.z_index == 0
    # エディタはストアから最新値を受け取り直している。
    assert editor.style == style
    assert [f.text for f in editor.inset_fields()] == ["10", "", "", "20"]
    assert binding.last_error is None


def test_binding_ignores_other_layers_and_unsubscribes():
    store = _store()
    binding = bind_position_editor(store, "layer-1", palette=Palette())

    commit_patch(store, "layer-2", {"z_index": 8})
    assert binding.editor.style.z_index == 0

    binding.close()
    commit_patch(store, "layer-1", {"z_index": 4})
    assert binding.editor.style.z_index == 0
    assert store.get_style("layer-1").z_index == 4


def test_binding_records_rejected_commit():
    store = _store()
    binding = bind_position_editor(store, "layer-1", palette=Palette())
    store.remove_layer("layer-1")

    binding.editor.edit_z_index("5")
    assert binding.last_error == "unknown_layer"
