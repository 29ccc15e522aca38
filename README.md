# doxabin

Document image binarization in pure Python: three local-window thresholding
algorithms (Bernsen, Wan and Wolf), grayscale morphology, a sliding-window
mean and variance calculator, the DRD quality metric, and a reader and writer
for binary PNM images (PBM, PGM, PPM and PAM).

## Installation

From a checkout of the project:

```
pip install .
```

## Images

`doxabin.image.Image` is an 8-bit grayscale raster stored row by row in a
`bytearray`. Binary images use `0` for black and `255` for white.

```python
from doxabin.image import Image

image = Image.blank(3, 2)         # every pixel 0
image[1, 1] = 200                 # (x, y) indexing
image[0] = 10                     # flat index into the data
image.pixel(5, 5, 0)              # outside the image -> the default, 0
image.pixel(1, 1)                 # 200
image.fill(255)
copy = image.copy()               # deep copy
```

Indexing outside the image, or `pixel` outside the image without a default,
raises `IndexError`. Building an image whose data does not hold
`width * height` pixels raises `ValueError`.

An image also carries `max_val`, `depth` and `tuple_type` (a PAM tuple type
name; see `TupleType`), which the PNM writers put in their headers.

## Reading and writing PNM files

`doxabin.pnm.read(path, parameters)` reads P4, P5, P6 and P7 files;
`doxabin.pnm.read_pnm(stream, parameters)` does the same from a binary stream.
RGB and RGBA pixels are converted to grayscale, except pixels whose three
channels are already equal, which are kept as they are. The conversion is
chosen with the `grayscale` parameter, a `GrayscaleConversion` value
(`QT`, `MEAN`, `BT601`, `BT709`, `BT2100`, `VALUE`, `LUSTER`, `LIGHTNESS`,
`MIN_AVG`); the default is `MEAN`.

```python
from doxabin import pnm
from doxabin.pnm import GrayscaleConversion

gray = pnm.read("page.ppm", {"grayscale": GrayscaleConversion.BT709})
pnm.write(gray, "page.pgm")
```

`pnm.write` picks the format from the file extension, ignoring case:
`.pbm` (P4), `.pgm` (P5), `.ppm` (P6) or `.pam` (P7). With any other
extension it leaves an empty file. When writing P4, black pixels become set
bits and every other value becomes white. `write_p7` only writes images of
depth 1.

The individual readers and writers (`read_1bit`, `read_8bit`, `read_24bit`,
`read_32bit`, `write_p4`, `write_p5`, `write_p6`, `write_p7`) work on binary
streams.

Malformed or unsupported input raises `PNMError` (a `ValueError`): unknown
magic numbers, the ASCII formats P1, P2 and P3, a MAXVAL above 255, truncated
pixel data, PAM black-and-white images, and PAM depth-4 images whose tuple
type is not `RGB_ALPHA`.

## Binarization

Each algorithm is built from a grayscale image and returns a new binary
image from a dictionary of parameters. Missing parameters take their
defaults.

```python
from doxabin.algorithms import Bernsen, Wan, Wolf

binary = Wolf.to_binary_image(gray, {"window": 75, "k": 0.2})
binary = Wan(gray).to_binary({"window": 75, "k": 0.2})
binary = Bernsen.to_binary_image(
    gray, {"window": 75, "threshold": 100, "contrast-limit": 25}
)
```

| Algorithm | Parameters and defaults |
|-----------|-------------------------|
| `Bernsen` | `window` 75, `threshold` 100, `contrast-limit` 25 |
| `Wan`     | `window` 75, `k` 0.2 |
| `Wolf`    | `window` 75, `k` 0.2 |

A pixel becomes black when its value is at or below the local threshold.
`Algorithm.update_to_binary(image, parameters)` replaces an image's pixels
with their binarized form. `GlobalThreshold` is an abstract base for
algorithms that compute a single threshold for the whole image: a subclass
supplies `threshold(image, parameters)`.

## Building blocks

- `doxabin.localwindow`: `iterate` yields a clipped `Window` and the data
  position for every pixel, `window_positions` yields the positions inside a
  window, and `process` binarizes with a per-window threshold function.
- `doxabin.morphology`: `erode`, `dilate`, `open_image` and `close_image`
  over square windows. Windows smaller than 17 are scanned directly
  (`iteratively_erode`, `iteratively_dilate`); larger ones use the separable
  sliding ordered window of `morph`.
- `doxabin.chan`: `iterate_mean` and `iterate_mean_variance` yield the local
  mean (and variance) around every pixel using running column sums;
  `process_mean` and `process_mean_variance` binarize with them.
- `doxabin.grayscale`: colour-to-gray formulas (`qt`, `mean`, `bt601`,
  `bt709`, `bt2100`, `value`, `luster`, `min_avg`, `lightness`, `lightness8`,
  `srgb_to_lightness`) and gamma helpers (`gamma`, `linear_to_srgb`,
  `linear_to_709`, `srgb_to_linear`). Given integers the formulas return
  integers, as 8-bit pixel arithmetic would.

## Measuring quality

```python
from doxabin.drdm import calculate_drdm

score = calculate_drdm(ground_truth, binary)
```

`calculate_drdm` sums the distance-reciprocal distortion of every pixel that
differs from the ground truth, using a 5x5 weight matrix, and divides it by
the number of non-uniform 8x8 blocks of the ground truth (partial blocks at
the edges are not counted). Images of different sizes raise `ValueError`.
The parts are available as `drdk`, `sum_drdk`, `nubn` and
`non_uniform_block`.

## What the package does not do

- It is a library only; there is no command-line program.
- The only binarization algorithms are `Bernsen`, `Wan` and `Wolf`;
  `GlobalThreshold` has no ready-made subclass.
- The only quality metric is DRDM.
- The only image format is binary PNM; images are held in memory as 8-bit
  grayscale.

## Running the tests

```
pip install ".[test]"
pytest
```