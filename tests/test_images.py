import numpy as np
import pytest
from PIL import Image

from stringart.images import ImageLoadError, NormImage, RawImage, load_jpeg


def test_raw_zeros_shape_and_dtype():
    image = RawImage.zeros(4, 3, 2)
    assert (image.width, image.height, image.channels) == (4, 3, 2)
    assert image.data.dtype == np.uint8
    assert not image.data.any()


def test_norm_zeros_shape_and_dtype():
    image = NormImage.zeros(5, 2, 1)
    assert image.data.shape == (2, 5, 1)
    assert image.data.dtype == np.float64
    assert image.data.sum() == 0.0


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        RawImage.zeros(-1, 2, 3)


def test_wrong_rank_rejected():
    with pytest.raises(ValueError):
        NormImage(np.zeros((2, 2)))


def test_load_rgb_jpeg(tmp_path):
    path = tmp_path / "flat.jpg"
    Image.new("RGB", (12, 8), (200, 100, 50)).save(path, "JPEG", quality=100)
    image = load_jpeg(path)
    assert (image.width, image.height, image.channels) == (12, 8, 3)
    assert np.abs(image.data[4, 6].astype(int) - [200, 100, 50]).max() <= 3


def test_load_grayscale_jpeg(tmp_path):
    path = tmp_path / "gray.jpg"
    Image.new("L", (6, 9), 128).save(path, "JPEG", quality=100)
    image = load_jpeg(path)
    assert image.channels == 1
    assert image.data.shape == (9, 6, 1)


def test_missing_file_raises(tmp_path):
    with pytest.raises(ImageLoadError):
        load_jpeg(tmp_path / "nothing.jpg")


def test_non_jpeg_raises(tmp_path):
    path = tmp_path / "image.png"
    Image.new("RGB", (4, 4)).save(path, "PNG")
    with pytest.raises(ImageLoadError):
        load_jpeg(path)