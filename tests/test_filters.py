import pytest

from dslabs.filters import (
    UBC_BLUE,
    UBC_YELLOW,
    colordist,
    create_spotlight,
    grayscale,
    main,
    ubcify,
    watermark,
)
from dslabs.image import PNG, RGBAPixel


def _filled(width, height, r, g, b, a=1.0):
    image = PNG(width, height)
    for _, _, pixel in image.pixels():
        pixel.r, pixel.g, pixel.b, pixel.a = r, g, b, a
    return image


def test_grayscale_channels_equal_and_input_untouched():
    image = PNG(3, 1)
    image.get_pixel(0, 0).r, image.get_pixel(0, 0).g, image.get_pixel(0, 0).b = 200, 30, 90
    image.get_pixel(1, 0).a = 0.25
    result = grayscale(image)
    for _, _, pixel in result.pixels():
        assert pixel.r == pixel.g == pixel.b
        assert 0 <= pixel.r <= 255
    assert image.get_pixel(0, 0).r == 200
    assert result.get_pixel(1, 0).a == 0.25


def test_grayscale_black_stays_black():
    result = grayscale(_filled(2, 2, 0, 0, 0))
    assert all((p.r, p.g, p.b) == (0, 0, 0) for _, _, p in result.pixels())


def test_spotlight_center_unchanged_and_far_black():
    image = _filled(260, 1, 200, 100, 50)
    result = create_spotlight(image, 0, 0)
    center = result.get_pixel(0, 0)
    assert (center.r, center.g, center.b) == (200, 100, 50)
    for x in (200, 201, 259):
        far = result.get_pixel(x, 0)
        assert (far.r, far.g, far.b) == (0, 0, 0)


def test_spotlight_darkens_with_distance():
    result = create_spotlight(_filled(120, 1, 255, 255, 255), 0, 0)
    reds = [result.get_pixel(x, 0).r for x in range(120)]
    assert reds == sorted(reds, reverse=True)
    assert reds[-1] < reds[0]


def test_spotlight_symmetric():
    result = create_spotlight(_filled(11, 11, 180, 180, 180), 5, 5)
    assert result.get_pixel(2, 5) == result.get_pixel(8, 5)
    assert result.get_pixel(5, 1) == result.get_pixel(5, 9)


def test_ubcify_maps_to_two_colours():
    image = PNG(2, 1)
    near_yellow = image.get_pixel(0, 0)
    near_yellow.r, near_yellow.g, near_yellow.b = 250, 190, 10
    near_blue = image.get_pixel(1, 0)
    near_blue.r, near_blue.g, near_blue.b = 10, 30, 70
    result = ubcify(image)
    y, b = result.get_pixel(0, 0), result.get_pixel(1, 0)
    assert (y.r, y.g, y.b) == (247, 184, 0)
    assert (b.r, b.g, b.b) == (12, 35, 68)


def test_ubcify_keeps_alpha():
    result = ubcify(_filled(1, 1, 30, 30, 30, 0.5))
    assert result.get_pixel(0, 0).a == 0.5


def test_colordist_properties():
    a = RGBAPixel(10, 20, 30, 1.0)
    b = RGBAPixel(200, 20, 30, 0.7)
    assert colordist(a, a) == 0
    assert colordist(a, b) == pytest.approx(colordist(b, a))
    assert colordist(a, b) > 0
    assert colordist(UBC_YELLOW, UBC_YELLOW) < colordist(UBC_YELLOW, UBC_BLUE)


def test_watermark_brightens_under_white():
    first = _filled(2, 1, 10, 250, 100)
    second = _filled(2, 1, 0, 0, 0)
    mark = second.get_pixel(0, 0)
    mark.r = mark.g = mark.b = 255
    result = watermark(first, second)
    assert (result.width, result.height) == (1024, 768)
    marked = result.get_pixel(0, 0)
    assert (marked.r, marked.g, marked.b) == (10 + 40, 255, 100 + 40)
    plain = result.get_pixel(1, 0)
    assert (plain.r, plain.g, plain.b) == (10, 250, 100)
    assert (first.width, first.height) == (2, 1)


def test_main_writes_outputs(tmp_path):
    source = _filled(4, 3, 120, 60, 30)
    overlay = _filled(2, 2, 255, 255, 255)
    image_path = tmp_path / "in.png"
    overlay_path = tmp_path / "overlay.png"
    source.write_to_file(image_path)
    overlay.write_to_file(overlay_path)

    status = main(
        ["--image", str(image_path), "--overlay", str(overlay_path), "--output-dir", str(tmp_path)]
    )
    assert status == 0
    for name in ("out-grayscale.png", "out-spotlight.png", "out-ubcify.png"):
        written = PNG()
        written.read_from_file(tmp_path / name)
        assert (written.width, written.height) == (4, 3)
    marked = PNG()
    marked.read_from_file(tmp_path / "out-watermark.png")
    assert (marked.width, marked.height) == (1024, 768)
    assert marked.get_pixel(0, 0).r == 120 + 40


def test_main_missing_input_raises(tmp_path):
    with pytest.raises(OSError):
        main(["--image", str(tmp_path / "nope.png"), "--output-dir", str(tmp_path)])