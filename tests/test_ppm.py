import pytest
from PIL import Image as PILImage

from imgconv.image import Color, Image, ImageError
from imgconv.ppm import load_ppm, save_ppm


def _sample():
    img = Image(3, 2, Color.black())
    img.set_pixel(0, 0, Color(255, 0, 0))
    img.set_pixel(1, 0, Color(0, 255, 0))
    img.set_pixel(2, 0, Color(0, 0, 255))
    img.set_pixel(0, 1, Color(12, 34, 56))
    img.set_pixel(2, 1, Color(255, 255, 255))
    return img


def test_header_bytes(tmp_path):
    path = tmp_path / "a.ppm"
    save_ppm(path, Image(2, 1, Color.black()))
    data = path.read_bytes()
    assert data.startswith(b"P6\n2 1\n255\n")
    assert len(data) == len(b"P6\n2 1\n255\n") + 2 * 3


def test_round_trip(tmp_path):
    path = tmp_path / "a.ppm"
    img = _sample()
    save_ppm(path, img)
    assert load_ppm(path) == img


def test_pillow_reads_saved_file(tmp_path):
    path = tmp_path / "a.ppm"
    img = _sample()
    save_ppm(path, img)
    with PILImage.open(path) as pil:
        assert pil.size == (img.width, img.height)
        for y in range(img.height):
            for x in range(img.width):
                px = img.get_pixel(x, y)
                assert pil.getpixel((x, y)) == (px.r, px.g, px.b)


def test_loads_pillow_file(tmp_path):
    path = tmp_path / "p.ppm"
    pil = PILImage.new("RGB", (2, 2))
    pil.putpixel((0, 0), (9, 8, 7))
    pil.putpixel((1, 1), (100, 150, 200))
    pil.save(path)
    img = load_ppm(path)
    assert (img.width, img.height) == (2, 2)
    assert img.get_pixel(0, 0) == Color(9, 8, 7)
    assert img.get_pixel(1, 1) == Color(100, 150, 200)


def test_missing_file(tmp_path):
    with pytest.raises(ImageError):
        load_ppm(tmp_path / "missing.ppm")


def test_wrong_signature(tmp_path):
    path = tmp_path / "a.ppm"
    path.write_bytes(b"P3\n1 1\n255\n\x00\x00\x00")
    with pytest.raises(ImageError):
        load_ppm(path)


def test_wrong_max_value(tmp_path):
    path = tmp_path / "a.ppm"
    path.write_bytes(b"P6\n1 1\n65535\n\x00\x00\x00\x00\x00\x00")
    with pytest.raises(ImageError):
        load_ppm(path)


def test_header_must_end_with_newline(tmp_path):
    path = tmp_path / "a.ppm"
    path.write_bytes(b"P6\n1 1\n255 \x00\x00\x00")
    with pytest.raises(ImageError):
        load_ppm(path)


def test_truncated_pixels(tmp_path):
    path = tmp_path / "a.ppm"
    path.write_bytes(b"P6\n2 2\n255\n\x00\x00\x00")
    with pytest.raises(ImageError):
        load_ppm(path)


def test_save_to_unwritable_path(tmp_path):
    with pytest.raises(ImageError):
        save_ppm(tmp_path / "no_dir" / "a.ppm", _sample())