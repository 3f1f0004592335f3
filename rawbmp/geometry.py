"""Size and layout calculations for 24-bit BMP files."""

from __future__ import annotations

from dataclasses import dataclass

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
BMP_HEADER_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE

BITS_PER_PIXEL = 24
BYTES_PER_PIXEL = BITS_PER_PIXEL // 8
ROW_ALIGNMENT = 4  # bytes

MAX_DIMENSION = 2**31 - 1  # width and height are stored as int32
MAX_FILE_LENGTH = 2**32 - 1  # file size is stored as uint32

PIXELS_PER_METRE = 1000


@dataclass(frozen=True)
class BitmapGeometry:
    """Dimensions of a bitmap and the byte layout derived from them.

    No range checks are made here; the values are plain integer arithmetic
    and can describe files far larger than the BMP header can express.
    """

    width: int
    height: int

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @property
    def row_bytes(self) -> int:
        """Number of pixel bytes in one row, without padding."""

        return self.width * BYTES_PER_PIXEL

    @property
    def row_stride(self) -> int:
        """Row length padded up to the next multiple of four bytes."""

        return -(-self.row_bytes // ROW_ALIGNMENT) * ROW_ALIGNMENT

    @property
    def pixel_data_size(self) -> int:
        return self.height * self.row_stride

    @property
    def file_length(self) -> int:
        """Total size of the encoded file in bytes."""

        return BMP_HEADER_SIZE + self.pixel_data_size


def buffer_length(width: int, height: int) -> int:
    """Return the number of bytes a ``width`` x ``height`` 24-bit BMP occupies."""

    return BitmapGeometry(width, height).file_length
