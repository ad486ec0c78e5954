import pytest

from raytracer.color import Color
from raytracer.texture import CheckerboardTexture, Texture

WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)


def test_texture_is_abstract():
    with pytest.raises(TypeError):
        Texture()


def test_unit_scale_is_single_square():
    tex = CheckerboardTexture(WHITE, BLACK)
    assert tex.color_at(0.25, 0.25) == WHITE
    assert tex.color_at(0.75, 0.75) == WHITE


def test_scaled_checker_alternates():
    tex = CheckerboardTexture(WHITE, BLACK, 2.0)
    assert tex.color_at(0.25, 0.25) == WHITE
    assert tex.color_at(0.75, 0.25) == BLACK
    assert tex.color_at(0.25, 0.75) == BLACK
    assert tex.color_at(0.75, 0.75) == WHITE


@pytest.mark.parametrize("u,v", [(0.1, 0.3), (0.6, 0.2), (0.9, 0.9)])
def test_coordinates_wrap(u, v):
    tex = CheckerboardTexture(WHITE, BLACK, 4.0)
    assert tex.color_at(u + 1.0, v) == tex.color_at(u, v)
    assert tex.color_at(u, v - 2.0) == tex.color_at(u, v)