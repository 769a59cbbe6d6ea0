"""Colour conversions and the Radon transform."""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from .images import NormImage, RawImage

__all__ = ["normalize_raw_image", "rgb_to_printable", "radon_transform"]

logger = logging.getLogger(__name__)


def normalize_raw_image(image: RawImage) -> NormImage:
    """Scale 8-bit samples into the range [0, 1]."""
    logger.info("Normalizing image")
    return NormImage(image.data.astype(np.float64) / 255.0)


def rgb_to_printable(image: RawImage) -> NormImage:
    """Convert an RGB image into five channels: C, M, Y, K and W."""
    if image.channels != 3:
        raise ValueError("tried to convert non-rgb image into printable colors")
    logger.info("Converting image to printable colors")

    rgb = image.data
    cmy = ((np.float32(255) - rgb.astype(np.float32)) / np.float32(255)).astype(np.float64)
    black = np.minimum(cmy.min(axis=2), 0.999)
    cmy = (cmy - black[:, :, np.newaxis]) / (1 - black[:, :, np.newaxis])
    white = rgb.astype(np.int64).sum(axis=2) / (255 * 3)

    out = np.empty((image.height, image.width, 5), dtype=np.float64)
    out[:, :, :3] = cmy
    out[:, :, 3] = black
    out[:, :, 4] = white
    return NormImage(out)


def radon_transform(
    image: NormImage,
    angles: Sequence[float],
    nbins: int,
    color: int,
    resolution: int = 2,
) -> NormImage:
    """Project one channel of an image onto ``nbins`` bins for each angle.

    Each pixel is split into ``resolution`` x ``resolution`` sub-pixels whose
    centres are projected perpendicular to the angle and shared between the
    two nearest bins. The result has one row per angle and one column per bin.
    """
    if not 0 <= color < image.channels:
        raise ValueError("tried to access invalid color channel in image")
    if nbins <= 0:
        raise ValueError("nbins must be positive")
    if resolution <= 0:
        raise ValueError("resolution must be positive")
    logger.info("Performing Radon transform")

    angles = list(angles)
    size = len(angles) * nbins
    flat = np.zeros(size, dtype=np.float64)

    width, height = image.width, image.height
    xc = math.ceil(width / 2)
    yc = math.ceil(height / 2)
    hyp = math.sqrt(width * width + height * height)
    separation = hyp / nbins
    scale = 1.0 / (resolution * resolution)

    values = image.data[:, :, color]
    ys, xs = np.nonzero(values)
    pixel_values = values[ys, xs]

    sub = np.arange(resolution * resolution)
    x_offsets = (sub % resolution + 0.5) / resolution
    y_offsets = (sub // resolution + 0.5) / resolution
    dx = (xs - xc)[:, np.newaxis] + x_offsets[np.newaxis, :]
    dy = (ys - yc)[:, np.newaxis] + y_offsets[np.newaxis, :]
    weights = np.broadcast_to((pixel_values * scale)[:, np.newaxis], dx.shape)

    for row, angle in enumerate(angles):
        projection = dx * -math.sin(angle) + dy * math.cos(angle)
        frac, whole = np.modf((projection + hyp / 2) / separation)
        base = row * nbins + whole.astype(np.int64)
        for index, weight in ((base + 1, weights * frac), (base, weights * (1 - frac))):
            inside = (index >= 0) & (index < size)
            flat += np.bincount(index[inside], weights=weight[inside], minlength=size)

    return NormImage(flat.reshape(len(angles), nbins, 1))