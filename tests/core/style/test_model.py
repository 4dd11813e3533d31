from __future__ import annotations

import pytest

from layerstyle.core.style import (
    INSET_AUTO,
    InsetLength,
    InsetRaw,
    LayerStyle,
    apply_patch,
    apply_patches,
    build_patch,
)
from layerstyle.core.style.invariants import assert_style_invariants


def _sample_style() -> LayerStyle:
    return LayerStyle(
        position="absolute",
        top=InsetLength(5.0),
        left=InsetRaw("10%"),
        z_index=3,
        extra={"backgroundColor": "#fff", "opacity": 1},
    )


def test_default_style():
    style = LayerStyle()
    assert style.position == "relative"
    assert style.top == INSET_AUTO
    assert style.right == INSET_AUTO
    assert style.bottom == INSET_AUTO
    assert style.left == INSET_AUTO
    assert style.z_index == 0
    assert dict(style.extra) == {}
    assert_style_invariants(style)


def test_apply_empty_patch_is_identity():
    style = _sample_style()
    assert apply_patch(style, {}) == style


def test_apply_patch_does_not_mutate_current():
    style = _sample_style()
    updated = apply_patch(style, {"z_index": 9, "color": "red"})
    assert style.z_index == 3
    assert "color" not in style.extra
    assert updated.z_index == 9
    assert updated.extra["color"] == "red"
    assert updated.extra["backgroundColor"] == "#fff"


def test_apply_patch_keeps_absent_keys():
    style = _sample_style()
    updated = apply_patch(style, {"bottom": InsetLength(1.0)})
    assert updated.position == "absolute"
    assert updated.top == InsetLength(5.0)
    assert updated.left == InsetRaw("10%")
    assert updated.bottom == InsetLength(1.0)
    assert updated.z_index == 3


@pytest.mark.parametrize(
    "p1,p2",
    [
        ({"z_index": 5}, {"top": InsetLength(1.0)}),
        ({"position": "fixed"}, {"left": InsetRaw("1em"), "color": "blue"}),
        ({"opacity": 0.5}, {"backgroundColor": "#000"}),
    ],
)
def test_disjoint_patches_commute(p1, p2):
    style = _sample_style()
    assert apply_patch(apply_patch(style, p1), p2) == apply_patch(apply_patch(style, p2), p1)


def test_same_key_last_write_wins():
    style = LayerStyle()
    assert apply_patch(apply_patch(style, {"z_index": 5}), {"z_index": 9}).z_index == 9
    assert apply_patches(style, [{"color": "a"}, {"color": "b"}]).extra["color"] == "b"


def test_both_opposite_insets_may_be_set():
    style = apply_patches(LayerStyle(), [build_patch("top", "1"), build_patch("bottom", "2")])
    assert style.top == InsetLength(1.0)
    assert style.bottom == InsetLength(2.0)
    assert_style_invariants(style)


def test_z_index_is_kept_on_relative_layer():
    style = apply_patch(LayerStyle(), {"z_index": 12})
    assert style.position == "relative"
    assert style.z_index == 12


def test_extra_mapping_is_read_only():
    style = _sample_style()
    with pytest.raises(TypeError):
        style.extra["opacity"] = 0  # type: ignore[index]


def test_get_reads_core_and_extra_fields():
    style = _sample_style()
    assert style.get("z_index") == 3
    assert style.get("backgroundColor") == "#fff"
    assert style.get("missing", "x") == "x"


def test_scenario_type_then_clear_top():
    style = LayerStyle(position="relative", z_index=0)
    style = apply_patch(style, build_patch("top", "120"))
    assert style.top == InsetLength(120.0)
    style = apply_patch(style, build_patch("top", ""))
    assert style.top == INSET_AUTO


def test_scenario_absolute_then_top_and_left():
    style = apply_patch(LayerStyle(), build_patch("position", "absolute"))
    style = apply_patch(style, {**build_patch("top", "10"), **build_patch("left", "20")})
    assert style.position == "absolute"
    assert style.top == InsetLength(10.0)
    assert style.left == InsetLength(20.0)
    assert style.right == INSET_AUTO
    assert style.bottom == INSET_AUTO
    assert style.z_index == 0


def test_scenario_abc_into_z_index():
    style = apply_patch(LayerStyle(z_index=4), build_patch("z_index", "abc"))
    assert style.z_index == 0


def test_apply_patch_maps_z_index_host_alias_to_core_field():
    style = apply_patch(LayerStyle(), {"zIndex": 5})
    assert style.z_index == 5
    assert dict(style.extra) == {}
    assert style.get("zIndex") == 5


def test_layer_style_is_unhashable():
    with pytest.raises(TypeError):
        hash(LayerStyle())
    assert LayerStyle() == LayerStyle()
