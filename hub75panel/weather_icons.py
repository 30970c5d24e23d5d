"""32x32 monochrome weather icons stored in XBM bit order."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Iterator


@dataclass(frozen=True)
class XbmIcon:
    """A monochrome bitmap, rows padded to whole bytes, least significant bit leftmost."""

    name: str
    width: int
    height: int
    bits: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("icon dimensions must be positive")
        expected = self._stride * self.height
        if len(self.bits) != expected:
            raise ValueError(
                f"icon {self.name!r} needs {expected} bytes, got {len(self.bits)}"
            )

    @property
    def _stride(self) -> int:
        return (self.width + 7) // 8

    def pixel(self, x: int, y: int) -> bool:
        """Whether the pixel at (x, y) is set."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        byte = self.bits[y * self._stride + x // 8]
        return bool(byte >> (x % 8) & 1)

    def _row(self, y: int) -> tuple[bool, ...]:
        return tuple(self.pixel(x, y) for x in range(self.width))

    def rows(self) -> tuple[tuple[bool, ...], ...]:
        """All pixels, one tuple of booleans per row, top to bottom."""
        return tuple(self._row(y) for y in range(self.height))

    def render(self, on: str = "#", off: str = ".") -> str:
        """Draw the icon as text, one line per row."""
        return "\n".join(
            "".join(on if lit else off for lit in row) for row in self.rows()
        )

    def __iter__(self) -> Iterator[tuple[bool, ...]]:
        return iter(self.rows())


# Each icon row is four bytes, written as one 8-digit hex token.
Rows = tuple[str, ...]


def _rows(text: str) -> Rows:
    return tuple(text.split())


def _blank(count: int) -> Rows:
    return ("00000000",) * count


# Upper parts, rows 0-19: sky, upper cloud outline and cloud flanks.
_MOON_SKY = _rows(
    "0000F000 0000FC00 00007C00 00006E00 00006600 00006700 0000E300 0000C301"
)
_MOON_CLOUD = _rows("00F087C3 00FC1FFF 001E3CFE 00063060 0007F079 0003E03F E003000F")
_SUN_SKY = _rows(
    "0000C000 0000C000 0080C160 00800370 0000F333 0000F807 00001C0E 00000E1C"
)
_SUN_CLOUD = _rows("00F00718 00FC1FD8 001E3CD8 00063018 0007F01D 0003E00F E0030007")
_PLAIN_CLOUD = _rows("00F00700 00FC1F00 001E3C00 00063000 0007F001 0003E003 E0030007")
_FLANK = _rows("F001000E 3800000C 1C00000C 0C00000C 0C00000C")

_MOON_TOP = _MOON_SKY + _MOON_CLOUD + _FLANK
_SUN_TOP = _SUN_SKY + _SUN_CLOUD + _FLANK
_PLAIN_TOP = _blank(8) + _PLAIN_CLOUD + _FLANK

# Lower parts, rows 20-31.
_CLOUD_BASE = _rows("0C00000C 0C00000E 1C000007 38008003 F0FFFF01 E0FFFF00") + _blank(6)
_WIND_BASE = (
    _rows("0000000C FCFF3F0E FCFF3F07 00008003 FFFFEF01 FFFFEF00 00000000")
    + _rows("FCFF3F00 FCFF3F00")
    + _blank(3)
)
_LIGHTNING_BASE = _rows(
    "0CC0010C 0CC0010E 1CC00007 38E08003 F06FFC01 E0EFFD00"
    " 00800100 00C00000 00C00000 00400000 00400000"
) + _blank(1)
_RAIN_HEAD = _rows("0C60060C 0C60060E 1C700707 38308303")
_RAIN_TAIL = _rows("00CC0000 00EC0000 00600000 00600000") + _blank(1)
_RAIN0_BASE = _RAIN_HEAD + _rows("F033FB01 E001F800 00CC0000") + _RAIN_TAIL
_RAIN1_BASE = _RAIN_HEAD + _rows("F0BBFB01 E099F900 00DC0100") + _RAIN_TAIL
_RAIN2_BASE = _rows(
    "0C66660C 0C66660E 1C777707 38333303 B0BBBB01 80999900"
    " C0DD1D00 C0CC0C00 C0EE0C00 00660000 00660000"
) + _blank(1)
_RAIN_LIGHTNING_BASE = _rows(
    "0CCC1C0C 0CCC1C0E 1CEE0C07 38668E03 7077C601 2033DE00"
    " 803B1800 80190C00 801D0C00 000C0400 000C0400"
) + _blank(1)
_RAIN_SNOW_BASE = _rows(
    "0CCC080C 0CCC1C0E 1CEE3607 38669C03 7077C801 2033E200"
    " 803B0700 80990D00 801D0700 000C0200 000C0000"
) + _blank(1)
_SNOW_BASE = _rows(
    "0C00000C 0C00000E 1C400007 38E08003 F0B1F101 E0E0E000"
    " 00440400 000E0E00 001B1B00 000E0E00 00040400"
) + _blank(1)

# Icons that share no parts with the cloud family.
_CLOUDS_UPPER = _blank(4) + _rows(
    "00007F00 00C0FF01 00E0C103 00000003 00F0071F 00FC1F3E 001E3C70 000630E0"
    " 0007F0C1 0003E0C3 E00300C7 F00100CE 380000CC 1C0000EC 0C00006C 0C00002C"
)
_MOON = _blank(2) + _rows(
    "00600000 00780000 003E0000 003F0000 801B0000 C0190000 E01C0000 600C0000"
    " 700C0000 300C0000 300C0000 381C0000 18180000 18380000 18300000 18700000"
    " 38E00118 30C0871F 7000FF1F 6000FC0C E000000E C0010007 80038003 000FE001"
    " 003EFC00 00F83F00 00E00700"
) + _blank(3)
_SUN = _blank(4) + _rows(
    "00800100 00800100 00800100 00800100 0083C100 0007E000 00E66700 00F00F00"
    " 00381C00 001C3800 000C3000 F00DB00F F00DB00F 000C3000 001C3800 00381C00"
    " 00F00F00 00E66700 0007E000 0083C100 00800100 00800100 00800100 00800100"
) + _blank(4)
_WIND = _blank(9) + _rows(
    "0000C000 0000E001 00008001 F0FFFF19 F0FFFF3C 00000030 FCFFFF3F FCFFFF1F"
    " 00000000 F0FFFF01 F0FFFF03 00000003 0000C003 00008001"
) + _blank(9)

_LAYOUTS: dict[str, tuple[Rows, ...]] = {
    "cloud_moon": (_MOON_TOP, _CLOUD_BASE),
    "cloud_sun": (_SUN_TOP, _CLOUD_BASE),
    "clouds": (_CLOUDS_UPPER, _CLOUD_BASE),
    "cloud_wind_moon": (_MOON_TOP, _WIND_BASE),
    "cloud_wind_sun": (_SUN_TOP, _WIND_BASE),
    "cloud_wind": (_PLAIN_TOP, _WIND_BASE),
    "cloud": (_PLAIN_TOP, _CLOUD_BASE),
    "lightning": (_PLAIN_TOP, _LIGHTNING_BASE),
    "moon": (_MOON,),
    "rain0_sun": (_SUN_TOP, _RAIN0_BASE),
    "rain0": (_PLAIN_TOP, _RAIN0_BASE),
    "rain1_moon": (_MOON_TOP, _RAIN1_BASE),
    "rain1_sun": (_SUN_TOP, _RAIN1_BASE),
    "rain1": (_PLAIN_TOP, _RAIN1_BASE),
    "rain2": (_PLAIN_TOP, _RAIN2_BASE),
    "rain_lightning": (_PLAIN_TOP, _RAIN_LIGHTNING_BASE),
    "rain_snow": (_PLAIN_TOP, _RAIN_SNOW_BASE),
    "snow_moon": (_MOON_TOP, _SNOW_BASE),
    "snow_sun": (_SUN_TOP, _SNOW_BASE),
    "snow": (_PLAIN_TOP, _SNOW_BASE),
    "sun": (_SUN,),
    "wind": (_WIND,),
}

_ICONS: dict[str, XbmIcon] = {
    name: XbmIcon(name, 32, 32, bytes.fromhex("".join(chain.from_iterable(parts))))
    for name, parts in _LAYOUTS.items()
}


def icon_names() -> list[str]:
    """Names of all bundled icons, in catalogue order."""
    return list(_ICONS)


def get_icon(name: str) -> XbmIcon:
    """Look up a bundled icon by name; raises KeyError for unknown names."""
    try:
        return _ICONS[name]
    except KeyError:
        raise KeyError(f"no weather icon named {name!r}") from None