"""Allocation-free 24-bit BMP encoding into caller-owned buffers."""

from .bmp import write_bmp, write_bmp_array
from .errors import (
    BadPixelDataLength,
    BmpError,
    BufferTooSmall,
    FileLengthTooLong,
    HeightTooLarge,
    WidthTooLarge,
)
from .geometry import (
    BMP_HEADER_SIZE,
    MAX_DIMENSION,
    MAX_FILE_LENGTH,
    BitmapGeometry,
    buffer_length,
)

__all__ = [
    "write_bmp",
    "write_bmp_array",
    "buffer_length",
    "BitmapGeometry",
    "BMP_HEADER_SIZE",
    "MAX_DIMENSION",
    "MAX_FILE_LENGTH",
    "BmpError",
    "WidthTooLarge",
    "HeightTooLarge",
    "FileLengthTooLong",
    "BadPixelDataLength",
    "BufferTooSmall",
]
