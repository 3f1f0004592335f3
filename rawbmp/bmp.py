"""Encode raw RGB pixels as a 24-bit BMP into a caller-supplied buffer."""

from __future__ import annotations

import logging
import operator
import struct
from typing import Union

import numpy as np

from .errors import (
    BadPixelDataLength,
    BufferTooSmall,
    FileLengthTooLong,
    HeightTooLarge,
    WidthTooLarge,
)
from .geometry import (
    BITS_PER_PIXEL,
    BMP_HEADER_SIZE,
    BYTES_PER_PIXEL,
    FILE_HEADER_SIZE,
    INFO_HEADER_SIZE,
    MAX_DIMENSION,
    MAX_FILE_LENGTH,
    PIXELS_PER_METRE,
    BitmapGeometry,
)

logger = logging.getLogger(__name__)

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIIIII")

ReadableBuffer = Union[bytes, bytearray, memoryview, np.ndarray]
WritableBuffer = Union[bytearray, memoryview, np.ndarray]


def write_bmp(
    buffer: WritableBuffer, width: int, height: int, pixels: ReadableBuffer
) -> int:
    """Write a BMP file for ``pixels`` into ``buffer`` and return its length.

    ``pixels`` holds ``height`` rows of ``width`` RGB triplets ordered top to
    bottom with no row padding. The bytes are copied verbatim, so most readers
    will see them as BGR. ``buffer`` may be longer than required; bytes past
    the returned length are not touched, and neither are the padding bytes at
    the end of each row.

    Every check runs before the first byte is written, so ``buffer`` is left
    unmodified whenever an exception is raised.
    """

    width = _dimension(width, "Width")
    height = _dimension(height, "Height")
    if width > MAX_DIMENSION:
        raise WidthTooLarge(max=MAX_DIMENSION, was=width)
    if height > MAX_DIMENSION:
        raise HeightTooLarge(max=MAX_DIMENSION, was=height)

    out = _writable_bytes(buffer)
    src = _readable_bytes(pixels)

    geometry = BitmapGeometry(width, height)
    file_length = geometry.file_length
    if file_length > MAX_FILE_LENGTH:
        raise FileLengthTooLong(max=MAX_FILE_LENGTH, would_be=file_length)

    expected = geometry.pixel_count * BYTES_PER_PIXEL
    if src.nbytes != expected:
        raise BadPixelDataLength(expected=expected, was=src.nbytes)

    if out.nbytes < file_length:
        raise BufferTooSmall(required=file_length, was=out.nbytes)

    _FILE_HEADER.pack_into(
        out,
        0,
        b"BM",
        file_length,
        0,
        0,
        BMP_HEADER_SIZE,
    )
    _INFO_HEADER.pack_into(
        out,
        FILE_HEADER_SIZE,
        INFO_HEADER_SIZE,
        width,
        height,
        1,
        BITS_PER_PIXEL,
        0,
        geometry.pixel_data_size,
        PIXELS_PER_METRE,
        PIXELS_PER_METRE,
        0,
        0,
    )
    _copy_rows(out, src, geometry)

    logger.debug("Wrote %dx%d bitmap (%d bytes)", width, height, file_length)
    return file_length


def write_bmp_array(buffer: WritableBuffer, image: np.ndarray) -> int:
    """Write a ``(height, width, 3)`` uint8 array as a BMP into ``buffer``."""

    if not isinstance(image, np.ndarray):
        raise ValueError("Image must be a numpy array")
    if image.ndim != 3 or image.shape[2] != BYTES_PER_PIXEL:
        raise ValueError(f"Image must have shape (height, width, 3), got {image.shape}")
    if image.dtype != np.uint8:
        raise ValueError(f"Image must have dtype uint8, got {image.dtype}")

    height, width = image.shape[:2]
    return write_bmp(buffer, width, height, image)


def _copy_rows(out: memoryview, src: memoryview, geometry: BitmapGeometry) -> None:
    if geometry.pixel_data_size == 0:
        return

    rows = np.frombuffer(src, dtype=np.uint8).reshape(geometry.height, geometry.row_bytes)
    target = np.frombuffer(
        out,
        dtype=np.uint8,
        count=geometry.pixel_data_size,
        offset=BMP_HEADER_SIZE,
    ).reshape(geometry.height, geometry.row_stride)
    # BMP rows run bottom to top.
    target[:, : geometry.row_bytes] = rows[::-1]


def _dimension(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _writable_bytes(buffer: WritableBuffer) -> memoryview:
    view = memoryview(buffer)
    if view.readonly:
        raise TypeError("Output buffer must be writable")
    if not view.c_contiguous:
        raise ValueError("Output buffer must be C-contiguous")
    if view.nbytes == 0:
        # Views with a zero in their shape cannot be cast.
        return memoryview(bytearray())
    return view.cast("B")


def _readable_bytes(pixels: ReadableBuffer) -> memoryview:
    view = memoryview(pixels)
    if not view.c_contiguous:
        raise ValueError("Pixel data must be C-contiguous")
    if view.nbytes == 0:
        return memoryview(b"")
    return view.cast("B")
