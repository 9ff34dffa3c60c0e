import dataclasses

import pytest

from contra_player.geometry import Color, FloatRect, IntRect, Sprite, is_solid_tile


@pytest.mark.parametrize("tile", list("0123456789"))
def test_digits_are_solid(tile):
    assert is_solid_tile(tile) is True


@pytest.mark.parametrize("tile", [" ", "a", "Z", "", "10", "/", ":"])
def test_other_cells_are_not_solid(tile):
    assert is_solid_tile(tile) is False


def test_bottom_is_top_plus_height():
    rect = FloatRect(50.0, 45.0, 24.0, 35.0)
    assert rect.bottom() == 80.0


def test_bottom_follows_mutation():
    rect = FloatRect(10.0, 20.0, 24.0, 35.0)
    rect.top = 0.0
    assert rect.bottom() == rect.height


def test_float_rect_defaults_to_empty_at_origin():
    rect = FloatRect()
    assert (rect.left, rect.top, rect.width, rect.height) == (0.0, 0.0, 0.0, 0.0)
    assert rect.bottom() == 0.0


def test_int_rect_is_value_equal_and_frozen():
    a = IntRect(198, 4, 24, 36)
    assert a == IntRect(198, 4, 24, 36)
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.left = 0


def test_sprite_defaults():
    sprite = Sprite()
    assert sprite.color is Color.WHITE
    assert sprite.texture_rect == IntRect(0, 0, 0, 0)
    assert sprite.position == (0.0, 0.0)
    assert sprite.texture is None


def test_sprites_do_not_share_state():
    a = Sprite()
    b = Sprite()
    a.color = Color.RED
    a.texture_rect = IntRect(1, 2, 3, 4)
    assert b.color is Color.WHITE
    assert b.texture_rect == IntRect()


def test_sprite_colour_switches_between_red_and_white():
    sprite = Sprite()
    sprite.color = Color.RED
    assert sprite.color is Color.RED
    assert sprite.color != Sprite().color
    sprite.color = Color.WHITE
    assert sprite.color.value == (255, 255, 255)