# stringart

Tools for turning a photograph into the raw material of a string-art
piece: a rectangular frame of evenly spaced nails, the image cropped to
that frame, a separation into printable colours, and a Radon transform of
one of those colours.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
stringart image.jpg
```

The command loads a JPEG image and fits a frame to it for the requested
number of nails (an odd count is rounded up to the next even number). It
crops the centre of the image to that frame, converts it to cyan,
magenta, yellow, black and white streams, and takes the Radon transform
of one stream. The transform is written to standard output, one line per
angle, each bin value printed with six decimals and followed by a space.
Progress messages are logged to standard error.

Options:

| Option | Default | Meaning |
| --- | --- | --- |
| `image` (positional) | `../images/circle.jpg` | JPEG image to read |
| `--nails` | 2000 | total number of nails |
| `--angles` | 180 | number of angles, one degree apart from zero |
| `--bins` | 500 | bins per angle |
| `--color` | 4 | channel to transform: 0=C 1=M 2=Y 3=K 4=W |
| `--resolution` | 1 | sub-pixels per pixel side |

The command exits with status 1 when the image cannot be read, is not
RGB, no frame fits it, or an option is out of range; otherwise it exits
with 0. Run `stringart --help` for the option list.

## Library use

```python
from stringart.images import load_jpeg
from stringart.filters import rgb_to_printable, radon_transform
from stringart.app import compute_frame, center_crop, default_angles, format_transform

raw = load_jpeg("image.jpg")
frame = compute_frame(raw.width, raw.height, 2000)
cropped = center_crop(raw, frame.width, frame.height)

printable = rgb_to_printable(cropped)          # channels: C, M, Y, K, W
transform = radon_transform(printable, default_angles(180), 500, 4, 1)
print(format_transform(transform))
```

### Images (`stringart.images`)

- `RawImage` holds 8-bit pixel data; `NormImage` holds double-precision
  data. Both keep a NumPy array shaped (height, width, channels) in
  `data` and expose `width`, `height` and `channels`. Both offer
  `zeros(width, height, channels)` to create a blank image; negative
  sizes raise `ValueError`.
- `load_jpeg(path)` reads a JPEG file into a `RawImage`, keeping its
  colour components (greyscale gives one channel, RGB three, CMYK four).
  It raises `ImageLoadError` if the file cannot be read or is not a JPEG.

### Filters (`stringart.filters`)

- `normalize_raw_image(image)` scales every sample from 0–255 to 0–1.
- `rgb_to_printable(image)` converts an RGB image into five channels:
  cyan, magenta and yellow with the shared black removed, black (capped
  at 0.999), and white (the mean of the three samples over 255). Images
  without exactly three channels raise `ValueError`.
- `radon_transform(image, angles, nbins, color, resolution=2)` projects
  one channel of a `NormImage` onto `nbins` bins for each angle in
  radians. Every pixel is split into `resolution × resolution`
  sub-pixels, and each sub-pixel's value is shared between its two
  nearest bins. The result is a `NormImage` with one row per angle, one
  column per bin and a single channel. An invalid channel, or a
  non-positive `nbins` or `resolution`, raises `ValueError`.

### Frames and output (`stringart.app`)

- `compute_frame(width, height, total_nails)` chooses how many nails go
  along the base and the height so that the frame's aspect ratio is as
  close as possible to the image's. It returns a `Frame` with `width`,
  `height`, `base_nails`, `height_nails`, `ratio` and `separation`, and
  raises `FrameError` when the image is empty, there are too few nails,
  or the frame cannot fit inside the image.
- `center_crop(image, width, height)` cuts the centred region of that
  size out of a `RawImage`; a size larger than the image raises
  `ValueError`.
- `default_angles(count=180)` gives `count` angles one degree apart,
  starting at zero (computed with π taken as 3.14).
- `format_transform(transform)` renders a transform as text, one line per
  angle.
- `main(argv=None)` runs the command line above and returns its exit
  status.

## What it does not do

The package stops at the Radon transform. It does not choose a sequence
of nails to thread, draw or render the finished string art, or read
image formats other than JPEG.