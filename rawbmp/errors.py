"""Exceptions raised when a bitmap cannot be encoded."""

from __future__ import annotations

from typing import Tuple


class BmpError(ValueError):
    """Base class for invalid encoder input.

    Subclasses list the names of the values they carry in ``fields``; two
    errors are equal when they have the same type and the same values.
    """

    fields: Tuple[str, ...] = ()

    def _values(self) -> Tuple[int, ...]:
        return tuple(getattr(self, name) for name in self.fields)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self) -> int:
        return hash((type(self), self._values()))

    def __reduce__(self):
        return (type(self), self._values())

    def __repr__(self) -> str:
        args = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.fields)
        return f"{type(self).__name__}({args})"


class WidthTooLarge(BmpError):
    """The width does not fit the signed 32-bit header field."""

    fields = ("max", "was")

    def __init__(self, max: int, was: int) -> None:
        self.max = max
        self.was = was
        super().__init__(f"Width {was} exceeds the maximum of {max}")


class HeightTooLarge(BmpError):
    """The height does not fit the signed 32-bit header field."""

    fields = ("max", "was")

    def __init__(self, max: int, was: int) -> None:
        self.max = max
        self.was = was
        super().__init__(f"Height {was} exceeds the maximum of {max}")


class FileLengthTooLong(BmpError):
    """The encoded file would be too large to store its length in the header."""

    fields = ("max", "would_be")

    def __init__(self, max: int, would_be: int) -> None:
        self.max = max
        self.would_be = would_be
        super().__init__(
            f"File length would be {would_be} bytes, the BMP header allows at most {max}"
        )


class BadPixelDataLength(BmpError):
    """The pixel data is not exactly ``width * height * 3`` bytes long."""

    fields = ("expected", "was")

    def __init__(self, expected: int, was: int) -> None:
        self.expected = expected
        self.was = was
        super().__init__(f"Expected {expected} bytes of pixel data, got {was}")


class BufferTooSmall(BmpError):
    """The output buffer cannot hold the encoded file."""

    fields = ("required", "was")

    def __init__(self, required: int, was: int) -> None:
        self.required = required
        self.was = was
        super().__init__(f"Output buffer holds {was} bytes, {required} are required")
