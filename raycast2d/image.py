"""In-memory pixel images and conversion of 0xRRGGBB colours to pixel values."""

from __future__ import annotations

from dataclasses import dataclass, field

_SUPPORTED_DEPTHS = (8, 16, 24, 32)


def channel_shifts(mask: int) -> tuple[int, int]:
    """Return ``(shift, bits)`` for a contiguous channel mask.

    ``shift`` is the position of the lowest set bit and ``bits`` the number of
    consecutive set bits starting there.
    """
    if mask <= 0:
        raise ValueError(f"channel mask must be positive, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    rest = mask >> shift
    bits = ((rest + 1) & ~rest).bit_length() - 1
    return shift, bits


@dataclass(frozen=True)
class PixelFormat:
    """Channel layout of a true-colour visual."""

    red_mask: int = 0xFF0000
    green_mask: int = 0x00FF00
    blue_mask: int = 0x0000FF
    depth: int = 24

    def shifts(self) -> tuple[int, int, int, int, int, int]:
        """Return red, green and blue ``(shift, bits)`` pairs, flattened."""
        red = channel_shifts(self.red_mask)
        green = channel_shifts(self.green_mask)
        blue = channel_shifts(self.blue_mask)
        return (*red, *green, *blue)

    def to_pixel(self, color: int) -> int:
        """Convert a 0xRRGGBB colour to a pixel value of this format."""
        if self.depth >= 24:
            return color
        red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = self.shifts()
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        return (
            ((red >> (16 - red_bits)) << red_shift)
            + ((green >> (16 - green_bits)) << green_shift)
            + ((blue >> (16 - blue_bits)) << blue_shift)
        )


@dataclass
class Image:
    """A ZPixmap-style image: rows of packed pixels padded to 32 bits.

    ``byte_order`` is 0 for least significant byte first, 1 for most
    significant byte first.
    """

    width: int
    height: int
    bits_per_pixel: int = 32
    byte_order: int = 0
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bits_per_pixel not in _SUPPORTED_DEPTHS:
            raise ValueError(f"unsupported bits per pixel: {self.bits_per_pixel}")
        if self.byte_order not in (0, 1):
            raise ValueError(f"byte order must be 0 or 1, got {self.byte_order}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def size_line(self) -> int:
        """Bytes per row, padded to a multiple of 32 bits."""
        return (self.width * self.bits_per_pixel + 31) // 32 * 4

    @property
    def _endian(self) -> str:
        return "big" if self.byte_order else "little"

    def _encode(self, color: int) -> bytes:
        mask = (1 << self.bits_per_pixel) - 1
        return (color & mask).to_bytes(self.bytes_per_pixel, self._endian)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at ``(x, y)``, keeping only the low bytes that fit."""
        offset = self._offset(x, y)
        self.data[offset : offset + self.bytes_per_pixel] = self._encode(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at ``(x, y)``."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset : offset + self.bytes_per_pixel], self._endian)

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``; row padding stays zero."""
        pixels = self._encode(color) * self.width
        row = pixels + bytes(self.size_line - len(pixels))
        self.data[:] = row * self.height

    def row(self, y: int) -> memoryview:
        """Return a writable view of the bytes of row ``y``."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside image of height {self.height}")
        start = y * self.size_line
        return memoryview(self.data)[start : start + self.size_line]