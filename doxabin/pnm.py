"""Reading and writing binary Portable Any-Map images (P4, P5, P6 and P7).

Colour images (24-bit RGB and 32-bit RGBA) are converted to 8-bit grayscale
as they are read. The ASCII variants (P1, P2, P3) and 16-bit samples are not
supported.
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Any, BinaryIO, Callable, Mapping, Optional, Union

from . import grayscale
from .image import BLACK, WHITE, Image, TupleType

Parameters = Optional[Mapping[str, Any]]
Converter = Callable[[int, int, int], int]


class PNMError(ValueError):
    """Raised for malformed or unsupported PNM data."""


class GrayscaleConversion(IntEnum):
    """Values accepted by the ``grayscale`` parameter."""

    QT = 0
    MEAN = 1
    BT601 = 2
    BT709 = 3
    BT2100 = 4
    VALUE = 5
    LUSTER = 6
    LIGHTNESS = 7
    MIN_AVG = 8


_CONVERTERS = {
    GrayscaleConversion.QT: grayscale.qt,
    GrayscaleConversion.MEAN: grayscale.mean,
    GrayscaleConversion.BT601: grayscale.bt601,
    GrayscaleConversion.BT709: grayscale.bt709,
    GrayscaleConversion.BT2100: grayscale.bt2100,
    GrayscaleConversion.VALUE: grayscale.value,
    GrayscaleConversion.LUSTER: grayscale.luster,
    # A change of colour space: the input is assumed to be sRGB.
    GrayscaleConversion.LIGHTNESS: grayscale.srgb_to_lightness,
    GrayscaleConversion.MIN_AVG: grayscale.min_avg,
}


def grayscale_converter(parameters: Parameters = None) -> Converter:
    """Return the RGB to gray function chosen by the ``grayscale`` parameter.

    The default is the channel mean.
    """
    choice = GrayscaleConversion.MEAN
    if parameters and "grayscale" in parameters:
        choice = int(parameters["grayscale"])
    try:
        return _CONVERTERS[GrayscaleConversion(choice)]
    except ValueError:
        raise ValueError(f"unknown grayscale conversion: {choice}") from None


class _ByteReader:
    """A binary stream that can read whitespace-separated header tokens."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._pending = b""

    def read(self, count: int) -> bytes:
        if count <= 0:
            return b""
        head, self._pending = self._pending[:count], self._pending[count:]
        if len(head) < count:
            head += self._stream.read(count - len(head)) or b""
        return head

    def token(self) -> str:
        while True:
            byte = self.read(1)
            if not byte:
                raise PNMError("unexpected end of header")
            if not byte.isspace():
                break
        chars = [byte]
        while True:
            byte = self.read(1)
            if not byte:
                break
            if byte.isspace():
                # Leave the delimiter in the stream, as the format expects
                # exactly one whitespace byte to be skipped after the header.
                self._pending = byte + self._pending
                break
            chars.append(byte)
        return b"".join(chars).decode("ascii", errors="replace")

    def integer(self) -> int:
        text = self.token()
        try:
            return int(text)
        except ValueError:
            raise PNMError(f"expected an integer in the header, got {text!r}") from None


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count) if count else b""
    if len(data) < count:
        raise PNMError(f"truncated pixel data: expected {count} bytes, got {len(data)}")
    return data


def read_1bit(stream: BinaryIO, width: int, height: int) -> Image:
    """Read packed 1-bit rows (each padded to a whole byte); set bits are black."""
    row_bytes = (width + 7) // 8
    data = bytearray()
    for _ in range(height):
        row = _read_exact(stream, row_bytes)
        data.extend(
            BLACK if (row[x // 8] >> (7 - x % 8)) & 1 else WHITE for x in range(width)
        )
    return Image(width, height, data)


def read_8bit(stream: BinaryIO, width: int, height: int) -> Image:
    """Read one byte per pixel."""
    return Image(width, height, bytearray(_read_exact(stream, width * height)))


def _read_colour(
    stream: BinaryIO, width: int, height: int, stride: int, parameters: Parameters
) -> Image:
    convert = grayscale_converter(parameters)
    raw = _read_exact(stream, width * height * stride)
    reds, greens, blues = raw[0::stride], raw[1::stride], raw[2::stride]
    data = bytearray(
        b if r == g == b else int(convert(r, g, b))
        for r, g, b in zip(reds, greens, blues)
    )
    return Image(width, height, data)


def read_24bit(
    stream: BinaryIO, width: int, height: int, parameters: Parameters = None
) -> Image:
    """Read RGB pixels and convert them to grayscale; gray pixels are kept as is."""
    return _read_colour(stream, width, height, 3, parameters)


def read_32bit(
    stream: BinaryIO, width: int, height: int, parameters: Parameters = None
) -> Image:
    """Read RGBA pixels and convert them to grayscale; alpha is ignored."""
    return _read_colour(stream, width, height, 4, parameters)


def _check_max_val(max_val: int) -> None:
    if not 0 <= max_val <= 255:
        raise PNMError(f"unsupported MAXVAL {max_val}: only 8-bit samples are supported")


def _expect(reader: _ByteReader, label: str) -> None:
    found = reader.token()
    if found != label:
        raise PNMError(f"PAM: expected {label}, got {found!r}")


def read_pnm(stream: BinaryIO, parameters: Parameters = None) -> Image:
    """Read a P4, P5, P6 or P7 image from a binary stream."""
    reader = _ByteReader(stream)
    try:
        magic = reader.token()
    except PNMError:
        magic = ""

    if magic == "P4":
        width, height = reader.integer(), reader.integer()
        reader.read(1)
        return read_1bit(reader, width, height)

    if magic in ("P5", "P6"):
        width, height, max_val = reader.integer(), reader.integer(), reader.integer()
        reader.read(1)
        _check_max_val(max_val)
        if magic == "P5":
            image = read_8bit(reader, width, height)
        else:
            image = read_24bit(reader, width, height, parameters)
        image.max_val = max_val
        return image

    if magic == "P7":
        _expect(reader, "WIDTH")
        width = reader.integer()
        _expect(reader, "HEIGHT")
        height = reader.integer()
        _expect(reader, "DEPTH")
        depth = reader.integer()
        _expect(reader, "MAXVAL")
        max_val = reader.integer()
        _expect(reader, "TUPLTYPE")
        tuple_type = reader.token()
        _expect(reader, "ENDHDR")
        reader.read(1)

        if depth == 1:
            if tuple_type == TupleType.BLACK_WHITE.value and max_val == 1:
                raise PNMError("PAM: black and white is not supported, use PBM instead")
            image = read_8bit(reader, width, height)
        elif depth == 3:
            image = read_24bit(reader, width, height, parameters)
        elif depth == 4:
            if tuple_type != TupleType.RGBA.value:
                raise PNMError("PAM: only 32-bit RGBA is supported")
            image = read_32bit(reader, width, height, parameters)
        else:
            raise PNMError("Unsupported Format")
        image.depth = depth
        image.max_val = max_val
        image.tuple_type = tuple_type
        return image

    raise PNMError("Unsupported Format")


def read(path: Union[str, Path], parameters: Parameters = None) -> Image:
    """Read a PNM file; colour images are converted to grayscale."""
    with open(path, "rb") as stream:
        return read_pnm(stream, parameters)


def write_p4(stream: BinaryIO, image: Image) -> None:
    """Write a 1-bit PBM; black pixels become set bits, all others clear."""
    stream.write(f"P4\n{image.width} {image.height}\n".encode("ascii"))
    width = image.width
    body = bytearray()
    for row_start in range(0, image.size, width or 1):
        row = image.data[row_start:row_start + width]
        for chunk_start in range(0, width, 8):
            byte = 0
            for offset, pixel in enumerate(row[chunk_start:chunk_start + 8]):
                if pixel == BLACK:
                    byte |= 0x80 >> offset
            body.append(byte)
    stream.write(bytes(body))


def write_p5(stream: BinaryIO, image: Image) -> None:
    """Write an 8-bit PGM."""
    stream.write(f"P5\n{image.width} {image.height}\n{image.max_val}\n".encode("ascii"))
    stream.write(bytes(image.data))


def write_p6(stream: BinaryIO, image: Image) -> None:
    """Write a PPM whose three channels all hold the gray value."""
    stream.write(f"P6\n{image.width} {image.height}\n{image.max_val}\n".encode("ascii"))
    stream.write(bytes(p for pixel in image.data for p in (pixel, pixel, pixel)))


def write_p7(stream: BinaryIO, image: Image) -> None:
    """Write an 8-bit PAM; only images of depth 1 are supported."""
    if image.depth != 1:
        raise PNMError("PAM: only 8-bit images of depth 1 can be written")
    header = (
        "P7\n"
        f"WIDTH {image.width}\n"
        f"HEIGHT {image.height}\n"
        f"DEPTH {image.depth}\n"
        f"MAXVAL {image.max_val}\n"
        f"TUPLTYPE {image.tuple_type}\n"
        "ENDHDR\n"
    )
    stream.write(header.encode("ascii"))
    stream.write(bytes(image.data))


_WRITERS = {
    ".pbm": write_p4,
    ".pgm": write_p5,
    ".ppm": write_p6,
    ".pam": write_p7,
}


def write(image: Image, path: Union[str, Path]) -> None:
    """Write ``image`` in the format named by the file extension.

    The extension is matched case-insensitively; an unknown extension leaves
    an empty file.
    """
    writer = _WRITERS.get(Path(path).suffix.lower())
    with open(path, "wb") as stream:
        if writer is not None:
            writer(stream, image)