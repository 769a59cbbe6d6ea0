"""Command-line entry point: frame an image, convert it and Radon-transform it."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .filters import radon_transform, rgb_to_printable
from .images import ImageLoadError, NormImage, RawImage, load_jpeg

__all__ = [
    "Frame",
    "FrameError",
    "compute_frame",
    "center_crop",
    "default_angles",
    "format_transform",
    "main",
]

logger = logging.getLogger(__name__)

DEFAULT_IMAGE = "../images/circle.jpg"
DEFAULT_NAILS = 2000
DEFAULT_ANGLES = 180
DEFAULT_BINS = 500
DEFAULT_COLOR = 4
DEFAULT_RESOLUTION = 1


class FrameError(ValueError):
    """Raised when no nail frame fits the image."""


@dataclass(frozen=True)
class Frame:
    """A rectangular frame with equally spaced nails around it."""

    width: int
    height: int
    base_nails: int
    height_nails: int
    ratio: float
    separation: float


def _ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else math.inf


def _lround(value: float) -> int:
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


def compute_frame(width: int, height: int, total_nails: int) -> Frame:
    """Find the largest frame within the image that spaces ``total_nails`` evenly."""
    if width <= 0 or height <= 0:
        raise FrameError("image has no pixels")
    total_nails += total_nails % 2
    if total_nails <= 0:
        raise FrameError("the frame needs at least one nail")

    orig_ratio = float(np.float32(width) / np.float32(height))
    n = math.floor((orig_ratio / (orig_ratio + 1.0)) * (total_nails / 2.0))
    if n <= 0:
        raise FrameError("too few nails to span the image width")

    lower = _ratio(2.0 * n, total_nails - 2.0 * n)
    upper = _ratio(2.0 * n + 2.0, total_nails - 2.0 * n - 2.0)
    new_ratio = lower if abs(lower - orig_ratio) < abs(upper - orig_ratio) else upper

    if new_ratio > orig_ratio:
        new_width, new_height = width, _lround(width / new_ratio)
    else:
        new_width, new_height = _lround(height * new_ratio), height

    frame = Frame(
        width=new_width,
        height=new_height,
        base_nails=n + 1,
        height_nails=total_nails // 2 - n + 1,
        ratio=new_ratio,
        separation=new_width / n,
    )
    logger.info(
        "OrigRatio=%f, NewRatio=%f, NewDims=(%d x %d), baseNails=%d heightNails=%d, separation=%f",
        orig_ratio,
        frame.ratio,
        frame.width,
        frame.height,
        frame.base_nails,
        frame.height_nails,
        frame.separation,
    )
    if new_width > width or new_height > height:
        raise FrameError("invalid image ratio")
    return frame


def center_crop(image: RawImage, width: int, height: int) -> RawImage:
    """Cut a ``width`` x ``height`` region out of the middle of the image."""
    if not (0 <= width <= image.width and 0 <= height <= image.height):
        raise ValueError("crop size exceeds image size")
    row_start = (image.height - height) // 2
    col_start = (image.width - width) // 2
    return RawImage(
        image.data[row_start : row_start + height, col_start : col_start + width].copy()
    )


def default_angles(count: int = DEFAULT_ANGLES) -> list[float]:
    """Angles in radians, one degree apart, starting at zero."""
    return [i * 3.14 / 180 for i in range(count)]


def format_transform(transform: NormImage) -> str:
    """Render a transform as text: one line per angle, every value followed by a space."""
    return "".join(
        "".join(f"{value:f} " for value in row) + "\n" for row in transform.data[:, :, 0]
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="stringart",
        description="Frame an image for string art and print the Radon transform of one channel.",
    )
    parser.add_argument("image", nargs="?", default=DEFAULT_IMAGE, help="JPEG image to read")
    parser.add_argument("--nails", type=int, default=DEFAULT_NAILS, help="total number of nails")
    parser.add_argument("--angles", type=int, default=DEFAULT_ANGLES, help="number of angles")
    parser.add_argument("--bins", type=int, default=DEFAULT_BINS, help="bins per angle")
    parser.add_argument(
        "--color",
        type=int,
        default=DEFAULT_COLOR,
        help="printable channel to transform: 0=C 1=M 2=Y 3=K 4=W",
    )
    parser.add_argument(
        "--resolution", type=int, default=DEFAULT_RESOLUTION, help="sub-pixels per pixel side"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the pipeline and print the transform to standard output."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    logger.info("Started program")

    try:
        raw = load_jpeg(args.image)
        frame = compute_frame(raw.width, raw.height, args.nails)
        cropped = center_crop(raw, frame.width, frame.height)
        printable = rgb_to_printable(cropped)
        logger.info("Taking radon transform")
        transform = radon_transform(
            printable, default_angles(args.angles), args.bins, args.color, args.resolution
        )
    except (ImageLoadError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Writing to stdout")
    sys.stdout.write(format_transform(transform))
    logger.info("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())