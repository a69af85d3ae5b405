import pytest

from imgconv.image import Color, Image


def test_black_is_opaque_black():
    assert Color.black() == Color(0, 0, 0, 255)


def test_color_alpha_defaults_to_opaque():
    assert Color(1, 2, 3).a == 255


@pytest.mark.parametrize("channels", [(-1, 0, 0), (0, 256, 0), (0, 0, 0, 300)])
def test_color_rejects_out_of_range(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_image_dimensions_and_step():
    img = Image(5, 3, Color.black())
    assert img.width == 5
    assert img.height == 3
    assert img.step == img.width


def test_image_is_filled():
    fill = Color(10, 20, 30)
    img = Image(4, 2, fill)
    assert all(px == fill for row in img.rows() for px in row)


def test_default_fill_is_black():
    img = Image(2, 2)
    assert img.get_pixel(1, 1) == Color.black()


def test_set_and_get_pixel():
    img = Image(3, 3, Color.black())
    red = Color(255, 0, 0)
    img.set_pixel(2, 1, red)
    assert img.get_pixel(2, 1) == red
    assert img.get_pixel(1, 2) == Color.black()


def test_line_is_live():
    img = Image(3, 2, Color.black())
    green = Color(0, 255, 0)
    img.line(1)[0] = green
    assert img.get_pixel(0, 1) == green
    assert len(img.line(0)) == 3


def test_rows_count_matches_height():
    img = Image(2, 4, Color.black())
    rows = list(img.rows())
    assert len(rows) == 4
    assert all(len(row) == 2 for row in rows)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_pixel_out_of_bounds(x, y):
    img = Image(3, 2, Color.black())
    with pytest.raises(IndexError):
        img.get_pixel(x, y)
    with pytest.raises(IndexError):
        img.set_pixel(x, y, Color.black())


def test_line_out_of_bounds():
    img = Image(3, 2, Color.black())
    with pytest.raises(IndexError):
        img.line(2)
    with pytest.raises(IndexError):
        img.line(-1)


@pytest.mark.parametrize("w, h", [(0, 0), (3, 0), (0, 3)])
def test_image_with_zero_dimension_is_false(w, h):
    img = Image(w, h, Color.black())
    assert img.width == w
    assert img.height == h
    assert bool(img) is False


def test_non_empty_image_is_true():
    img = Image(1, 1, Color.black())
    assert bool(img) is True
    assert img.get_pixel(0, 0) == Color.black()


def test_empty_default_image_is_false():
    assert not Image()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Image(-1, 2, Color.black())


def test_equality():
    a = Image(2, 2, Color(1, 1, 1))
    b = Image(2, 2, Color(1, 1, 1))
    assert a == b
    b.set_pixel(0, 0, Color.black())
    assert not (a == b)