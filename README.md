# hub75panel

Helpers for chains of HUB75 RGB LED matrix panels:

- `hub75panel.virtual_panel` maps pixels on a large *virtual* display, made of
  a grid of physical panels wired into one chain, to coordinates on that
  single chain. It handles several cabling layouts (`ChainType`), rotation,
  zoom and four-scan panel layouts (`ScanRate`).
- `hub75panel.leddrivers` produces the GPIO bit-banging sequences that some
  LED driver chips (FM6124, FM6126A, ICN2038S, DP3246/SM5368) need before they
  show anything, and tells you which chips (DP3246/SM5368, MBI5124) must be
  clocked on the rising edge.
- `hub75panel.weather_icons` holds 22 monochrome 32×32 weather icons in XBM
  bit order.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Mapping a chain of panels

`VirtualMatrixPanel` wraps a display object that you supply. That object must
provide `draw_pixel`, `draw_pixel_rgb888`, `fill_screen`, `fill_screen_rgb888`,
`clear_screen`, `flip_dma_buffer`, `color444`, `color565` and `color333`. The
virtual panel maps coordinates and passes every call on to it.

```python
from hub75panel.virtual_panel import ChainType, ScanRate, VirtualMatrixPanel

panel = VirtualMatrixPanel(display, 3, 3, 64, 64, ChainType.TOP_RIGHT_DOWN)
print(panel.width(), panel.height())   # 192 192
coords = panel.get_coords(70, 70)      # VirtualCoords(x=..., y=...) on the chain
panel.draw_pixel(70, 70, panel.color565(255, 0, 0))

panel.set_rotation(1)                  # quarter turns, 0 to 3
panel.set_zoom_factor(2)               # each pixel drawn as a 2x2 block (1 to 4)
panel.set_physical_panel_scan_rate(ScanRate.FOUR_SCAN_32PX_HIGH)
```

Chain layouts: `NONE` (coordinates pass through unchanged), `TOP_LEFT_DOWN`,
`TOP_RIGHT_DOWN`, `BOTTOM_LEFT_UP`, `BOTTOM_RIGHT_UP`, and the zig-zag
variants `TOP_LEFT_DOWN_ZZ`, `TOP_RIGHT_DOWN_ZZ`, `BOTTOM_LEFT_UP_ZZ`,
`BOTTOM_RIGHT_UP_ZZ`.

Coordinates outside the virtual display map to `VirtualCoords(-1, -1)`;
`VirtualCoords.valid` is `False` for them. Rotation values outside 0–3 and
zoom factors outside 1–4 leave the current setting unchanged.

## Initialising LED driver chips

The driver routines write to any object with `reset_pin`, `set_output` and
`set_level` methods. `RecordingGpio` records every operation as a `GpioOp`, so
the sequence can be inspected or replayed on real pins:

```python
from hub75panel.leddrivers import DriverChip, PinConfig, RecordingGpio, shift_driver

gpio = RecordingGpio()
pins = PinConfig(r1=25, g1=26, b1=27, r2=14, g2=12, b2=13, clk=16, lat=4, oe=15)
rising_edge = shift_driver(gpio, pins, DriverChip.FM6126A, 64)
print(rising_edge, len(gpio.ops), gpio.levels())
```

`shift_driver` runs `fm6124_init` for FM6124, FM6126A and ICN2038S, and
`dp3246_init` for DP3246/SM5368. It returns `True` when the chip must be
clocked on the rising edge. Plain shift registers (`SHIFTREG`) and MBI5124
need no register programming.

## Weather icons

```python
from hub75panel.weather_icons import get_icon, icon_names

print(icon_names())
sun = get_icon("sun")
print(sun.render("#", "."))
print(sun.pixel(16, 4))
```

`XbmIcon.rows()` returns the pixels as tuples of booleans, one per row.
Iterating an icon gives the same rows. `get_icon` raises `KeyError` for an
unknown name, and `pixel` raises `IndexError` outside the bitmap.

## What this package does not do

It does not drive panels itself. There is no DMA or I2S output and no frame
buffer, and `VirtualMatrixPanel` needs a display object from you. The LED
driver routines only call the GPIO object you pass them; `RecordingGpio`
records operations and touches no hardware. There is no font or text drawing
and no command-line tool.