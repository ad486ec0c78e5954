import pytest

from raytracer.color import Color

A = Color(0.5, 0.25, 2.0)
B = Color(0.25, 4.0, 0.5)


def test_default_is_black():
    assert Color() == Color(0.0, 0.0, 0.0)


def test_addition_is_componentwise():
    total = A + B
    assert tuple(total) == pytest.approx((A.r + B.r, A.g + B.g, A.b + B.b))


def test_scalar_multiplication_matches_addition():
    assert A * 2 == A + A
    assert 2 * A == A + A


def test_colour_multiplication_is_componentwise():
    product = A * B
    assert tuple(product) == pytest.approx((A.r * B.r, A.g * B.g, A.b * B.b))


def test_division_inverts_multiplication():
    assert tuple((A * B) / B) == pytest.approx(tuple(A))
    assert tuple((A * 4.0) / 4.0) == pytest.approx(tuple(A))


def test_augmented_addition_returns_new_value():
    c = A
    c += B
    assert c == A + B


def test_clamp_bounds_channels():
    clamped = Color(-1.0, 0.5, 3.0).clamp(0.0, 1.0)
    assert all(0.0 <= ch <= 1.0 for ch in clamped)
    assert clamped.g == 0.5


def test_gamma_of_one_is_identity_for_non_negative():
    assert tuple(A.gamma_correct(1.0)) == pytest.approx(tuple(A))


def test_gamma_zeroes_negative_channels():
    corrected = Color(-1.0, 0.25, 0.5).gamma_correct(2.2)
    assert corrected.r == 0.0
    assert corrected.g ** 2.2 == pytest.approx(0.25)