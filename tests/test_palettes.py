import pytest

from blobmenu.palettes import (
    DEFAULT_SCHEME,
    SCHEMES,
    complementary,
    create_custom_scheme,
    get_scheme,
    list_schemes,
    readable_label,
    scheme_config,
    to_hex,
)


def test_list_is_sorted_and_has_default():
    names = list_schemes()
    assert names == sorted(SCHEMES)
    assert DEFAULT_SCHEME in names


def test_unknown_scheme():
    with pytest.raises(KeyError, match="Available"):
        get_scheme("plaid")


def test_to_hex():
    assert to_hex((255, 0, 16)) == "#ff0010"


def test_default_scheme_matches_default_styles():
    cfg = scheme_config(get_scheme(DEFAULT_SCHEME))
    assert cfg.item_style.fill_color == "#000000"
    assert cfg.item_text_style.fill_color == "#ffffff"
    assert cfg.pointer_style.radius == 50


def test_scheme_config_layers():
    scheme = get_scheme("sunset")
    cfg = scheme_config(scheme, max_distance=200, handle_len_rate=1.5, pointer_radius=30)
    assert cfg.item_style.fill_color == to_hex(scheme.item)
    assert cfg.pointer_style.fill_color == to_hex(scheme.pointer)
    assert cfg.pointer_style.radius == 30
    assert cfg.max_distance == 200
    assert cfg.handle_len_rate == 1.5


def test_complementary_flips_hue():
    assert complementary((255, 0, 0)) == (0, 255, 255)


def test_custom_scheme():
    plain = create_custom_scheme("Custom", (250, 240, 200))
    assert plain.pointer == plain.item
    assert plain.label == (0, 0, 0)
    contrast = create_custom_scheme("Custom", (255, 0, 0), contrast_pointer=True)
    assert contrast.pointer == (0, 255, 255)
    assert contrast.label == readable_label((255, 0, 0)) == (255, 255, 255)
