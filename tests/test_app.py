import math

import numpy as np
import pytest
from PIL import Image

from stringart.app import (
    FrameError,
    center_crop,
    compute_frame,
    default_angles,
    format_transform,
    main,
)
from stringart.images import NormImage, RawImage


@pytest.mark.parametrize(
    "width,height,nails",
    [(100, 100, 2000), (200, 100, 2000), (640, 480, 2000), (300, 500, 999), (50, 70, 40)],
)
def test_frame_invariants(width, height, nails):
    frame = compute_frame(width, height, nails)
    even = nails + nails % 2
    assert 2 * (frame.base_nails - 1) + 2 * (frame.height_nails - 1) == even
    assert frame.width <= width and frame.height <= height
    assert frame.width == width or frame.height == height
    assert frame.separation == pytest.approx(frame.width / (frame.base_nails - 1))


def test_square_frame_keeps_size():
    frame = compute_frame(100, 100, 2000)
    assert (frame.width, frame.height) == (100, 100)
    assert frame.base_nails == frame.height_nails
    assert frame.ratio == 1.0


def test_odd_nail_count_rounds_up():
    assert compute_frame(640, 480, 999) == compute_frame(640, 480, 1000)


def test_too_few_nails():
    with pytest.raises(FrameError):
        compute_frame(100, 100, 0)


def test_center_crop_takes_middle():
    data = np.arange(6 * 8, dtype=np.uint8).reshape(6, 8, 1)
    cropped = center_crop(RawImage(data), 4, 2)
    assert cropped.data.shape == (2, 4, 1)
    assert np.array_equal(cropped.data, data[2:4, 2:6])


def test_center_crop_too_large():
    with pytest.raises(ValueError):
        center_crop(RawImage.zeros(4, 4, 3), 5, 4)


def test_default_angles():
    angles = default_angles(180)
    assert len(angles) == 180
    assert angles[0] == 0.0
    assert angles[90] == pytest.approx(3.14 / 2)
    assert all(b > a for a, b in zip(angles, angles[1:]))


def test_format_transform_zeros():
    text = format_transform(NormImage.zeros(3, 2, 1))
    assert text == "0.000000 0.000000 0.000000 \n" * 2


def test_format_transform_values():
    text = format_transform(NormImage(np.array([[[1.5], [0.25]]])))
    assert text == "1.500000 0.250000 \n"


def test_main_prints_transform(tmp_path, capsys):
    path = tmp_path / "picture.jpg"
    Image.new("RGB", (30, 20), (90, 160, 220)).save(path, "JPEG")
    assert main([str(path), "--nails", "40", "--angles", "6", "--bins", "25"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    rows = [[float(v) for v in line.split()] for line in lines]
    assert all(len(row) == 25 for row in rows)
    assert all(math.isclose(sum(rows[0]), sum(row), rel_tol=1e-3) for row in rows)


def test_main_missing_image(tmp_path):
    assert main([str(tmp_path / "missing.jpg")]) == 1


def test_main_rejects_grayscale(tmp_path):
    path = tmp_path / "gray.jpg"
    Image.new("L", (30, 20), 100).save(path, "JPEG")
    assert main([str(path), "--nails", "40"]) == 1