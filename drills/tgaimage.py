"""Reading, writing and editing of Truevision TGA images."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from os import PathLike
from typing import BinaryIO, Optional, Union

_HEADER = struct.Struct("<BBBHHBHHHHBB")
_FOOTER = b"TRUEVISION-XFILE.\0"
_MAX_CHUNK_LENGTH = 128

PathType = Union[str, "PathLike[str]"]


class Format(IntEnum):
    """Bytes per pixel of the supported pixel layouts."""

    GRAYSCALE = 1
    RGB = 3
    RGBA = 4


class TGAFormatError(ValueError):
    """Raised when a TGA file is malformed or unsupported."""


@dataclass(frozen=True)
class TGAColor:
    """A pixel value stored in TGA byte order (blue, green, red, alpha)."""

    raw: bytes = b"\0\0\0\0"
    bytespp: int = 4

    def __post_init__(self) -> None:
        if len(self.raw) != 4:
            raise ValueError("a colour holds exactly four bytes")
        if not 0 <= self.bytespp <= 4:
            raise ValueError("bytes per pixel must be between 0 and 4")

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> "TGAColor":
        """Build a four-byte colour from its channels."""
        return cls(bytes((b, g, r, a)), 4)

    @classmethod
    def from_value(cls, val: int, bytespp: int) -> "TGAColor":
        """Build a colour from a packed 0xAARRGGBB integer."""
        r = (val >> 16) & 0xFF
        g = (val >> 8) & 0xFF
        b = val & 0xFF
        a = (val >> 24) & 0xFF
        return cls(bytes((b, g, r, a)), int(bytespp))

    @classmethod
    def from_bytes(cls, data: bytes, bytespp: int) -> "TGAColor":
        """Build a colour from the first ``bytespp`` bytes of a pixel."""
        bytespp = int(bytespp)
        if not 0 <= bytespp <= 4:
            raise ValueError("bytes per pixel must be between 0 and 4")
        if len(data) < bytespp:
            raise ValueError("not enough bytes for one pixel")
        return cls(bytes(data[:bytespp]).ljust(4, b"\0"), bytespp)

    def to_bytes(self, bytespp: int) -> bytes:
        """Return the first ``bytespp`` bytes of the colour."""
        return self.raw[: int(bytespp)]

    @property
    def b(self) -> int:
        return self.raw[0]

    @property
    def g(self) -> int:
        return self.raw[1]

    @property
    def r(self) -> int:
        return self.raw[2]

    @property
    def a(self) -> int:
        return self.raw[3]


class TGAImage:
    """An in-memory image that can be loaded from and saved to TGA files."""

    def __init__(self, width: int = 0, height: int = 0, bytespp: int = 0) -> None:
        width, height, bytespp = int(width), int(height), int(bytespp)
        if width < 0 or height < 0 or bytespp < 0:
            raise ValueError("image dimensions must not be negative")
        self._width = width
        self._height = height
        self._bytespp = bytespp
        self._data = bytearray(width * height * bytespp)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def bytespp(self) -> int:
        return self._bytespp

    @property
    def buffer(self) -> bytes:
        """The raw pixel bytes, row by row."""
        return bytes(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TGAImage):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._bytespp == other._bytespp
            and self._data == other._data
        )

    def __repr__(self) -> str:
        return (
            f"TGAImage(width={self._width}, height={self._height}, "
            f"bytespp={self._bytespp})"
        )

    @classmethod
    def read(cls, filename: PathType) -> "TGAImage":
        """Load an image from a TGA file."""
        with open(filename, "rb") as stream:
            header = stream.read(_HEADER.size)
            if len(header) < _HEADER.size:
                raise TGAFormatError("truncated TGA header")
            (
                _idlength,
                _colormaptype,
                datatypecode,
                _colormaporigin,
                _colormaplength,
                _colormapdepth,
                _x_origin,
                _y_origin,
                width,
                height,
                bitsperpixel,
                imagedescriptor,
            ) = _HEADER.unpack(header)

            bytespp = bitsperpixel >> 3
            if width <= 0 or height <= 0 or bytespp not in (1, 3, 4):
                raise TGAFormatError("Invalid TGA file dimensions or format")

            image = cls(width, height, bytespp)
            if datatypecode in (2, 3):
                data = stream.read(len(image._data))
                if len(data) < len(image._data):
                    raise TGAFormatError("Unexpected end of file")
                image._data[:] = data
            elif datatypecode in (10, 11):
                image._load_rle_data(stream)
            else:
                raise TGAFormatError("Unknown file format")

        if not imagedescriptor & 0x20:
            image.flip_vertically()
        if imagedescriptor & 0x10:
            image.flip_horizontally()
        return image

    def _load_rle_data(self, stream: BinaryIO) -> None:
        bpp = self._bytespp
        pixelcount = self._width * self._height
        currentpixel = 0
        currentbyte = 0

        def read_pixel() -> bytes:
            pixel = stream.read(bpp)
            if len(pixel) < bpp:
                raise TGAFormatError("Unexpected end of file")
            return pixel

        while currentpixel < pixelcount:
            chunk = stream.read(1)
            if not chunk:
                raise TGAFormatError("Unexpected end of file")
            chunkheader = chunk[0]
            if chunkheader < 128:
                pixels = [read_pixel() for _ in range(chunkheader + 1)]
            else:
                pixels = [read_pixel()] * (chunkheader - 127)
            if currentpixel + len(pixels) > pixelcount:
                raise TGAFormatError("RLE data runs past the end of the image")
            for pixel in pixels:
                self._data[currentbyte : currentbyte + bpp] = pixel
                currentbyte += bpp
            currentpixel += len(pixels)

    def write(self, filename: PathType, rle: bool = True) -> None:
        """Save the image as a TGA file, run-length encoded if ``rle``."""
        if rle:
            datatypecode = 11 if self._bytespp == 1 else 10
        else:
            datatypecode = 3 if self._bytespp == 1 else 2
        header = _HEADER.pack(
            0,
            0,
            datatypecode,
            0,
            0,
            0,
            0,
            0,
            self._width & 0xFFFF,
            self._height & 0xFFFF,
            (self._bytespp * 8) & 0xFF,
            0x20,
        )
        body = self._encode_rle() if rle else bytes(self._data)
        with open(filename, "wb") as stream:
            stream.write(header)
            stream.write(body)
            stream.write(bytes(4))  # developer area reference
            stream.write(bytes(4))  # extension area reference
            stream.write(_FOOTER)

    def _encode_rle(self) -> bytes:
        bpp = self._bytespp
        data = self._data
        npixels = self._width * self._height
        out = bytearray()
        curpix = 0

        while curpix < npixels:
            chunkstart = curpix * bpp
            curbyte = chunkstart
            run_length = 1
            raw = True

            while curpix + run_length < npixels and run_length < _MAX_CHUNK_LENGTH:
                succ_eq = (
                    data[curbyte : curbyte + bpp]
                    == data[curbyte + bpp : curbyte + 2 * bpp]
                )
                curbyte += bpp
                if run_length == 1:
                    raw = not succ_eq
                if raw and succ_eq:
                    run_length -= 1
                    break
                if not raw and not succ_eq:
                    break
                run_length += 1

            curpix += run_length
            out.append(run_length - 1 if raw else run_length + 127)
            length = run_length * bpp if raw else bpp
            out += data[chunkstart : chunkstart + length]

        return bytes(out)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> Optional[TGAColor]:
        """Return the colour at (x, y), or None outside the image."""
        if not self._inside(x, y):
            return None
        index = (x + y * self._width) * self._bytespp
        return TGAColor.from_bytes(
            self._data[index : index + self._bytespp], self._bytespp
        )

    def set(self, x: int, y: int, color: TGAColor) -> bool:
        """Store a colour at (x, y); return False outside the image."""
        if not self._inside(x, y):
            return False
        index = (x + y * self._width) * self._bytespp
        self._data[index : index + self._bytespp] = color.to_bytes(self._bytespp)
        return True

    def flip_horizontally(self) -> bool:
        """Mirror the image left to right; False if it holds no data."""
        if not self._data:
            return False
        bpp = self._bytespp
        line = self._width * bpp
        for start in range(0, len(self._data), line):
            row = self._data[start : start + line]
            pixels = [row[i : i + bpp] for i in range(0, line, bpp)]
            self._data[start : start + line] = b"".join(reversed(pixels))
        return True

    def flip_vertically(self) -> bool:
        """Mirror the image top to bottom; False if it holds no data."""
        if not self._data:
            return False
        line = self._width * self._bytespp
        rows = [
            self._data[start : start + line]
            for start in range(0, len(self._data), line)
        ]
        self._data[:] = b"".join(reversed(rows))
        return True

    def scale(self, w: int, h: int) -> bool:
        """Resize to w by h with nearest-neighbour sampling."""
        if w <= 0 or h <= 0 or not self._data:
            return False
        bpp = self._bytespp
        tdata = bytearray(w * h * bpp)
        nscanline = 0
        oscanline = 0
        erry = 0
        nlinebytes = w * bpp
        olinebytes = self._width * bpp

        for _ in range(self._height):
            errx = self._width - w
            nx = -bpp
            ox = -bpp
            for _ in range(self._width):
                ox += bpp
                errx += w
                while errx >= self._width:
                    errx -= self._width
                    nx += bpp
                    src = oscanline + ox
                    dst = nscanline + nx
                    tdata[dst : dst + bpp] = self._data[src : src + bpp]
            erry += h
            oscanline += olinebytes
            while erry >= self._height:
                if erry >= self._height * 2:
                    tdata[nscanline + nlinebytes : nscanline + 2 * nlinebytes] = tdata[
                        nscanline : nscanline + nlinebytes
                    ]
                erry -= self._height
                nscanline += nlinebytes

        self._data = tdata
        self._width = w
        self._height = h
        return True

    def clear(self) -> None:
        """Set every byte of the image to zero."""
        self._data[:] = bytes(len(self._data))

    def copy(self) -> "TGAImage":
        """Return an independent copy of the image."""
        other = TGAImage()
        other._width = self._width
        other._height = self._height
        other._bytespp = self._bytespp
        other._data = bytearray(self._data)
        return other