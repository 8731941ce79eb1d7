import pytest

from dslabs.image import PNG, RGBAPixel


def test_new_image_is_white_and_opaque():
    image = PNG(3, 2)
    assert (image.width, image.height) == (3, 2)
    assert all(pixel == RGBAPixel(255, 255, 255, 1.0) for _, _, pixel in image.pixels())


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        PNG(-1, 2)


def test_get_pixel_is_live():
    image = PNG(2, 2)
    image.get_pixel(1, 0).r = 7
    assert image.get_pixel(1, 0).r == 7
    assert image.get_pixel(0, 1).r == 255


def test_get_pixel_on_empty_raises():
    with pytest.raises(IndexError):
        PNG().get_pixel(0, 0)


def test_get_pixel_clamps_with_warning():
    image = PNG(3, 3)
    image.get_pixel(2, 2).g = 9
    with pytest.warns(RuntimeWarning):
        pixel = image.get_pixel(10, 20)
    assert pixel is image.get_pixel(2, 2)


def test_pixels_cover_every_coordinate():
    image = PNG(4, 3)
    coords = {(x, y) for x, y, _ in image.pixels()}
    assert coords == {(x, y) for x in range(4) for y in range(3)}


def test_resize_preserves_and_pads():
    image = PNG(2, 2)
    image.get_pixel(1, 1).b = 3
    image.resize(4, 3)
    assert (image.width, image.height) == (4, 3)
    assert image.get_pixel(1, 1).b == 3
    assert image.get_pixel(3, 2) == RGBAPixel()


def test_resize_crops():
    image = PNG(4, 4)
    image.get_pixel(0, 0).r = 1
    image.resize(1, 1)
    assert (image.width, image.height) == (1, 1)
    assert image.get_pixel(0, 0).r == 1


def test_copy_is_independent():
    image = PNG(2, 2)
    duplicate = image.copy()
    duplicate.get_pixel(0, 0).r = 0
    assert image.get_pixel(0, 0).r == 255
    assert (duplicate.width, duplicate.height) == (image.width, image.height)


def test_write_read_round_trip(tmp_path):
    image = PNG(3, 2)
    image.get_pixel(0, 0).r = 10
    image.get_pixel(2, 1).g = 20
    image.get_pixel(1, 1).a = 0.0
    path = tmp_path / "out.png"
    image.write_to_file(path)

    loaded = PNG()
    loaded.read_from_file(path)
    assert (loaded.width, loaded.height) == (3, 2)
    assert loaded.get_pixel(0, 0).r == 10
    assert loaded.get_pixel(2, 1).g == 20
    assert loaded.get_pixel(1, 1).a == 0.0
    assert loaded.get_pixel(0, 1).a == 1.0


def test_alpha_is_truncated_on_write(tmp_path):
    image = PNG(1, 1)
    image.get_pixel(0, 0).a = 0.5
    path = tmp_path / "alpha.png"
    image.write_to_file(path)
    loaded = PNG()
    loaded.read_from_file(path)
    assert round(loaded.get_pixel(0, 0).a * 255) == int(0.5 * 255)


def test_write_empty_raises(tmp_path):
    with pytest.raises(ValueError):
        PNG().write_to_file(tmp_path / "empty.png")


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        PNG().read_from_file(tmp_path / "missing.png")


def test_read_invalid_file_raises(tmp_path):
    path = tmp_path / "bad.png"
    path.write_bytes(b"not an image")
    with pytest.raises(OSError):
        PNG().read_from_file(path)