import logging

import pytest

from layerstyle.core.style import (
    INSET_AUTO,
    InsetLength,
    InvalidPositionError,
    LayerStyle,
    LayerStyleStore,
    UnknownLayerError,
    encode_layer_style,
    stacking_order,
    update_layer_style,
    update_layer_style_from_text,
)
from layerstyle.core.style.invariants import assert_invariants


def _store_with(*layer_ids: str) -> LayerStyleStore:
    store = LayerStyleStore()
    for layer_id in layer_ids:
        store.add_layer(layer_id)
    store.mark_clean()
    return store


def test_add_layer_creates_default_style():
    store = LayerStyleStore()
    style = store.add_layer("hero")
    assert style == LayerStyle()
    assert store.get_style("hero") == LayerStyle()
    assert store.is_dirty is True
    assert_invariants(store)


def test_add_layer_rejects_duplicate_id():
    store = _store_with("a")
    with pytest.raises(ValueError):
        store.add_layer("a")


def test_update_layer_style_merges_and_marks_dirty():
    store = _store_with("a", "b")
    updated = update_layer_style(store, "a", {"z_index": 4})
    assert updated.z_index == 4
    assert store.get_style("a").z_index == 4
    assert store.get_style("b").z_index == 0
    assert store.is_dirty is True
    assert_invariants(store)


def test_update_from_text_goes_through_patch_builder():
    store = _store_with("a")
    update_layer_style_from_text(store, "a", "top", "120")
    assert store.get_style("a").top == InsetLength(120.0)
    update_layer_style_from_text(store, "a", "top", "")
    assert store.get_style("a").top == INSET_AUTO
    update_layer_style_from_text(store, "a", "z_index", "abc")
    assert store.get_style("a").z_index == 0


def test_invalid_position_is_rejected_and_state_retained():
    store = _store_with("a")
    update_layer_style(store, "a", {"position": "fixed", "z_index": 2})
    before = store.get_style("a")
    store.mark_clean()

    with pytest.raises(InvalidPositionError):
        update_layer_style(store, "a", {"position": "static", "z_index": 9})

    assert store.get_style("a") == before
    assert store.is_dirty is False
    assert_invariants(store)


def test_unknown_layer_raises():
    store = _store_with("a")
    with pytest.raises(UnknownLayerError):
        update_layer_style(store, "missing", {"z_index": 1})
    with pytest.raises(KeyError):
        store.get_style("missing")


def test_listeners_receive_committed_style_in_order():
    store = _store_with("a")
    seen: list[tuple[str, int]] = []
    unsubscribe = store.subscribe(lambda layer_id, style: seen.append((layer_id, style.z_index)))

    update_layer_style(store, "a", {"z_index": 5})
    update_layer_style(store, "a", {"z_index": 9})
    unsubscribe()
    update_layer_style(store, "a", {"z_index": 1})

    assert seen == [("a", 5), ("a", 9)]


def test_no_op_patch_does_not_notify():
    store = _store_with("a")
    seen: list[str] = []
    store.subscribe(lambda layer_id, _style: seen.append(layer_id))
    update_layer_style(store, "a", {"z_index": 0})
    assert seen == []
    assert store.is_dirty is False


def test_remove_layer_discards_style():
    store = _store_with("a", "b")
    store.remove_layer("a")
    assert store.layer_ids() == ["b"]
    with pytest.raises(UnknownLayerError):
        store.remove_layer("a")


def test_store_items_feed_stacking_order():
    store = _store_with("bg", "title", "cta")
    update_layer_style(store, "bg", {"z_index": 0})
    update_layer_style(store, "cta", {"z_index": 0})
    update_layer_style(store, "title", {"z_index": 2})
    assert stacking_order(store.items()) == ["bg", "cta", "title"]


def test_update_layer_style_accepts_z_index_host_alias():
    store = _store_with("a")
    style = update_layer_style(store, "a", {"zIndex": 5})

    assert style.z_index == 5
    assert dict(style.extra) == {}
    assert encode_layer_style(store.get_style("a"))["zIndex"] == 5
    assert_invariants(store)


def test_failing_listener_does_not_block_later_listeners(caplog: pytest.LogCaptureFixture):
    store = _store_with("a")
    seen: list[int] = []

    def _broken(_layer_id, _style):
        raise RuntimeError("boom")

    store.subscribe(_broken)
    store.subscribe(lambda _layer_id, style: seen.append(style.z_index))

    with caplog.at_level(logging.WARNING, logger="layerstyle.core.style.store"):
        update_layer_style(store, "a", {"z_index": 3})

    assert seen == [3]
    assert store.get_style("a").z_index == 3
    assert store.is_dirty is True
    assert any(r.levelno == logging.WARNING for r in caplog.records)
