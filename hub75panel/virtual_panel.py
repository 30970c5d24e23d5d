"""Virtual display that maps a grid of chained HUB75 panels onto one DMA chain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class Display(Protocol):
    """The physical single-chain display a virtual panel draws onto."""

    def draw_pixel(self, x: int, y: int, color: Any) -> None: ...

    def draw_pixel_rgb888(self, x: int, y: int, r: int, g: int, b: int) -> None: ...

    def fill_screen(self, color: Any) -> None: ...

    def fill_screen_rgb888(self, r: int, g: int, b: int) -> None: ...

    def clear_screen(self) -> None: ...

    def flip_dma_buffer(self) -> None: ...

    def color444(self, r: int, g: int, b: int) -> int: ...

    def color565(self, r: int, g: int, b: int) -> int: ...

    def color333(self, r: int, g: int, b: int) -> int: ...


@dataclass(frozen=True)
class VirtualCoords:
    """A physical chain co-ordinate; (-1, -1) marks a point off the display."""

    x: int = -1
    y: int = -1

    @property
    def valid(self) -> bool:
        return self.x >= 0 and self.y >= 0


INVALID = VirtualCoords(-1, -1)


class ScanRate(Enum):
    """How many rows a physical panel updates in parallel."""

    NORMAL_TWO_SCAN = 0
    NORMAL_ONE_SIXTEEN = 1
    FOUR_SCAN_32PX_HIGH = 2
    FOUR_SCAN_16PX_HIGH = 3
    FOUR_SCAN_64PX_HIGH = 4


class ChainType(Enum):
    """Cabling order of the panel grid, seen from the LED side."""

    NONE = 0
    TOP_LEFT_DOWN = 1
    TOP_RIGHT_DOWN = 2
    BOTTOM_LEFT_UP = 3
    BOTTOM_RIGHT_UP = 4
    TOP_LEFT_DOWN_ZZ = 5
    TOP_RIGHT_DOWN_ZZ = 6
    BOTTOM_RIGHT_UP_ZZ = 7
    BOTTOM_LEFT_UP_ZZ = 8


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _mod(a: int, b: int) -> int:
    """Remainder with the sign of the dividend."""
    return a - _div(a, b) * b


class VirtualMatrixPanel:
    """A rows x cols grid of panels drawn through one underlying display chain."""

    def __init__(
        self,
        display: Display,
        rows: int,
        cols: int,
        panel_res_x: int,
        panel_res_y: int,
        chain_type: ChainType = ChainType.NONE,
    ) -> None:
        self.display = display
        self.chain_type = chain_type
        self.scan_rate = ScanRate.NORMAL_TWO_SCAN
        self.panel_res_x = panel_res_x
        self.panel_res_y = panel_res_y
        self.rows = rows
        self.cols = cols
        self._virtual_res_x = cols * panel_res_x
        self._virtual_res_y = rows * panel_res_y
        self._width = self._virtual_res_x
        self._height = self._virtual_res_y
        self._dma_res_x = panel_res_x * rows * cols - 1
        self._rotate = 0
        self._scale_factor = 0

    def width(self) -> int:
        """Width of the virtual display under the current rotation."""
        return self._width

    def height(self) -> int:
        """Height of the virtual display under the current rotation."""
        return self._height

    def _chain_position(self, vx: int, vy: int) -> tuple[int, int]:
        prx, pry = self.panel_res_x, self.panel_res_y
        vrx, rows, dma = self._virtual_res_x, self.rows, self._dma_res_x
        row = _div(vy, pry)
        upright_y = _mod(vy, pry)
        flipped_y = pry - 1 - upright_y

        def upright(r: int) -> tuple[int, int]:
            return (rows - (r + 1)) * vrx + vx, upright_y

        chain = self.chain_type
        if chain is ChainType.TOP_RIGHT_DOWN:
            if _mod(row, 2) == 1:
                return dma - vx - row * vrx, flipped_y
            return upright(row)
        if chain is ChainType.TOP_LEFT_DOWN:
            if _mod(row, 2) == 0:
                return dma - vx - row * vrx, flipped_y
            return upright(row)
        if chain in (ChainType.TOP_RIGHT_DOWN_ZZ, ChainType.TOP_LEFT_DOWN_ZZ):
            return upright(row)
        if chain is ChainType.BOTTOM_LEFT_UP:
            row = rows - row - 1
            if _mod(row, 2) == 1:
                return upright(row)
            return dma - row * vrx - vx, flipped_y
        if chain is ChainType.BOTTOM_RIGHT_UP:
            row = rows - row - 1
            if _mod(row, 2) == 0:
                return upright(row)
            return dma - row * vrx - vx, flipped_y
        if chain in (ChainType.BOTTOM_LEFT_UP_ZZ, ChainType.BOTTOM_RIGHT_UP_ZZ):
            return upright(rows - row - 1)
        return vx, vy

    def get_coords(self, x: int, y: int) -> VirtualCoords:
        """Map a virtual (x, y) to the physical chain co-ordinate."""
        if x < 0 or x >= self._width or y < 0 or y >= self._height:
            return INVALID

        vrx, vry = self._virtual_res_x, self._virtual_res_y
        if self._rotate == 1:
            x, y = y, vry - 1 - x
        elif self._rotate == 2:
            x, y = vrx - 1 - x, vry - 1 - y
        elif self._rotate == 3:
            x, y = vrx - 1 - y, x

        cx, cy = self._chain_position(x, y)
        prx = self.panel_res_x
        rate = self.scan_rate

        if rate in (ScanRate.FOUR_SCAN_32PX_HIGH, ScanRate.FOUR_SCAN_64PX_HIGH):
            if rate is ScanRate.FOUR_SCAN_64PX_HIGH and (y & 8) != ((y & 16) >> 1):
                y = (y & 0b11000) ^ (0b11000 + (y & 0b11100111))
            if (cy & 8) == 0:
                cx += (_div(cx, prx) + 1) * prx
            else:
                cx += _div(cx, prx) * prx
            cy = (y >> 4) * 8 + (y & 0b111)
        elif rate is ScanRate.FOUR_SCAN_16PX_HIGH:
            if (cy & 4) == 0:
                cx += (_div(cx, prx) + 1) * prx
            else:
                cx += _div(cx, prx) * prx
            cy = (cy >> 3) * 4 + (cy & 0b11)

        return VirtualCoords(cx, cy)

    def draw_pixel(self, x: int, y: int, color: Any) -> None:
        """Draw one virtual pixel, enlarged by the zoom factor when above 1."""
        scale = self._scale_factor
        if scale > 1:
            start_x, start_y = x * scale, y * scale
            for dx in range(scale):
                for dy in range(scale):
                    c = self.get_coords(start_x + dx, start_y + dy)
                    self.display.draw_pixel(c.x, c.y, color)
        else:
            c = self.get_coords(x, y)
            self.display.draw_pixel(c.x, c.y, color)

    def draw_pixel_rgb888(self, x: int, y: int, r: int, g: int, b: int) -> None:
        c = self.get_coords(x, y)
        self.display.draw_pixel_rgb888(c.x, c.y, r, g, b)

    def fill_screen(self, color: Any) -> None:
        self.display.fill_screen(color)

    def fill_screen_rgb888(self, r: int, g: int, b: int) -> None:
        self.display.fill_screen_rgb888(r, g, b)

    def clear_screen(self) -> None:
        self.display.clear_screen()

    def flip_dma_buffer(self) -> None:
        self.display.flip_dma_buffer()

    def color444(self, r: int, g: int, b: int) -> int:
        return self.display.color444(r, g, b)

    def color565(self, r: int, g: int, b: int) -> int:
        return self.display.color565(r, g, b)

    def color333(self, r: int, g: int, b: int) -> int:
        return self.display.color333(r, g, b)

    def set_rotation(self, rotate: int) -> None:
        """Set rotation in quarter turns; values outside 0..3 leave the mapping alone."""
        if 0 <= rotate < 4:
            self._rotate = rotate
        if (rotate & 3) in (0, 2):
            self._width, self._height = self._virtual_res_x, self._virtual_res_y
        else:
            self._width, self._height = self._virtual_res_y, self._virtual_res_x

    def set_physical_panel_scan_rate(self, rate: ScanRate) -> None:
        self.scan_rate = rate

    def set_zoom_factor(self, scale: int) -> None:
        """Set pixel zoom; only 1 to 4 are accepted."""
        if 0 < scale < 5:
            self._scale_factor = scale