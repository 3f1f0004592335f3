from __future__ import annotations

import pytest

from rawbmp import BMP_HEADER_SIZE, BitmapGeometry, buffer_length


@pytest.mark.parametrize(
    "width, height, expected",
    [
        (0, 0, 54),
        (1, 1, 58),
        (2, 2, 70),
        (3, 1, 66),
        (4, 1, 66),
        (5, 3, 102),
        (100, 100, 30054),
    ],
)
def test_buffer_length_known_sizes(width, height, expected):
    assert buffer_length(width, height) == expected


def test_buffer_length_matches_padded_row_formula():
    for width in range(0, 33):
        stride = ((width * 3 + 3) // 4) * 4
        for height in range(0, 6):
            assert buffer_length(width, height) == 54 + height * stride


def test_buffer_length_does_not_clamp_large_dimensions():
    assert buffer_length(65535, 65535) == 54 + 65535 * 196608
    assert buffer_length(65535, 65535) > 2**32 - 1


def test_geometry_properties():
    geometry = BitmapGeometry(width=5, height=3)
    assert geometry.pixel_count == 15
    assert geometry.row_bytes == 15
    assert geometry.row_stride == 16
    assert geometry.pixel_data_size == 48
    assert geometry.file_length == BMP_HEADER_SIZE + 48


def test_geometry_rows_already_aligned_get_no_padding():
    geometry = BitmapGeometry(width=4, height=2)
    assert geometry.row_bytes == 12
    assert geometry.row_stride == 12


def test_geometry_is_immutable():
    geometry = BitmapGeometry(width=1, height=1)
    with pytest.raises(AttributeError):
        geometry.width = 2
