"""Image containers and JPEG loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from os import PathLike
from typing import ClassVar, Union

import numpy as np
from PIL import Image

__all__ = ["RawImage", "NormImage", "ImageLoadError", "load_jpeg"]

logger = logging.getLogger(__name__)

_CHANNELS_BY_MODE = {"L": 1, "RGB": 3, "CMYK": 4}


class ImageLoadError(Exception):
    """Raised when an image file cannot be read or decoded."""


def _zero_data(width: int, height: int, channels: int, dtype: type) -> np.ndarray:
    if width < 0 or height < 0 or channels < 0:
        raise ValueError("image dimensions must not be negative")
    return np.zeros((height, width, channels), dtype=dtype)


@dataclass(eq=False)
class _Image:
    """Pixel data laid out as (height, width, channels)."""

    data: np.ndarray
    dtype: ClassVar[type] = np.float64

    def __post_init__(self) -> None:
        data = np.asarray(self.data, dtype=self.dtype)
        if data.ndim != 3:
            raise ValueError(
                f"image data must have shape (height, width, channels), got {data.shape}"
            )
        self.data = data

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    @property
    def channels(self) -> int:
        return self.data.shape[2]


@dataclass(eq=False)
class RawImage(_Image):
    """An image with 8-bit unsigned samples."""

    dtype: ClassVar[type] = np.uint8

    @classmethod
    def zeros(cls, width: int, height: int, channels: int) -> RawImage:
        """Create an image of the given size with every sample set to zero."""
        return cls(_zero_data(width, height, channels, cls.dtype))


@dataclass(eq=False)
class NormImage(_Image):
    """An image with double-precision samples."""

    dtype: ClassVar[type] = np.float64

    @classmethod
    def zeros(cls, width: int, height: int, channels: int) -> NormImage:
        """Create an image of the given size with every sample set to zero."""
        return cls(_zero_data(width, height, channels, cls.dtype))


def load_jpeg(path: Union[str, PathLike]) -> RawImage:
    """Decode a JPEG file into a RawImage, keeping its colour components."""
    try:
        with Image.open(path) as img:
            if img.format != "JPEG":
                raise ImageLoadError(f"{path} is not a JPEG file")
            if img.mode not in _CHANNELS_BY_MODE:
                img = img.convert("RGB")
            pixels = np.asarray(img, dtype=np.uint8)
    except OSError as exc:
        raise ImageLoadError(f"failed to read image from file {path}: {exc}") from exc

    if pixels.ndim == 2:
        pixels = pixels[:, :, np.newaxis]
    image = RawImage(pixels.copy())
    logger.info(
        "<%s> Reading JPEG with size (%d x %d) and %d color channels",
        path,
        image.width,
        image.height,
        image.channels,
    )
    return image