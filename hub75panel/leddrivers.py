"""Start-up sequences for HUB75 LED driver chips that need register programming."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Protocol

log = logging.getLogger(__name__)

LOW = 0
HIGH = 1


class DriverChip(Enum):
    """Column driver chip fitted to the panel."""

    SHIFTREG = 0
    FM6124 = 1
    FM6126A = 2
    ICN2038S = 3
    MBI5124 = 4
    DP3246_SM5368 = 5


@dataclass(frozen=True)
class PinConfig:
    """GPIO numbers of the HUB75 data and control lines."""

    r1: int
    g1: int
    b1: int
    r2: int
    g2: int
    b2: int
    clk: int
    lat: int
    oe: int

    @property
    def data_pins(self) -> tuple[int, ...]:
        return (self.r1, self.r2, self.g1, self.g2, self.b1, self.b2)

    @property
    def control_pins(self) -> tuple[int, ...]:
        return (*self.data_pins, self.clk, self.lat, self.oe)


class Gpio(Protocol):
    """Direct pin control used before the DMA engine takes the pins over."""

    def reset_pin(self, pin: int) -> None: ...

    def set_output(self, pin: int) -> None: ...

    def set_level(self, pin: int, level: int) -> None: ...


@dataclass(frozen=True)
class GpioOp:
    """One recorded pin operation; level is set only for 'level' operations."""

    kind: Literal["reset", "output", "level"]
    pin: int
    level: int | None = None


@dataclass
class RecordingGpio:
    """A Gpio that records every operation instead of driving hardware."""

    ops: list[GpioOp] = field(default_factory=list)

    def reset_pin(self, pin: int) -> None:
        self.ops.append(GpioOp("reset", pin))

    def set_output(self, pin: int) -> None:
        self.ops.append(GpioOp("output", pin))

    def set_level(self, pin: int, level: int) -> None:
        self.ops.append(GpioOp("level", pin, HIGH if level else LOW))

    def levels(self) -> dict[int, int]:
        """Last level written to each pin."""
        state: dict[int, int] = {}
        for op in self.ops:
            if op.kind == "level" and op.level is not None:
                state[op.pin] = op.level
        return state


# FM6124: REG1 sets global brightness, REG2 has a single bit enabling output.
_FM6124_REG1 = (0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0)
_FM6124_REG2 = (0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0)

# DP3246, MSB first. REG1: reserved, OE widening, reserved, current gain 0xFF.
_DP3246_REG1 = (0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 1)
# REG2: blanking potential, inflection point, feature flags all off, single edge.
_DP3246_REG2 = (1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0)


def _pulse_clock(gpio: Gpio, pins: PinConfig) -> None:
    gpio.set_level(pins.clk, HIGH)
    gpio.set_level(pins.clk, LOW)


def _prepare_pins(gpio: Gpio, pins: PinConfig) -> None:
    for pin in pins.control_pins:
        gpio.reset_pin(pin)
        gpio.set_output(pin)
        gpio.set_level(pin, LOW)
    gpio.set_level(pins.oe, HIGH)  # display off while programming


def _set_data(gpio: Gpio, pins: PinConfig, level: int) -> None:
    for pin in pins.data_pins:
        gpio.set_level(pin, level)


def _shift_register(
    gpio: Gpio,
    pins: PinConfig,
    pixels_per_row: int,
    bits: tuple[int, ...],
    latch_from: int,
    *,
    latch_once: bool,
) -> None:
    """Clock a 16-bit pattern across the whole row, raising the latch near the end."""
    for column in range(pixels_per_row):
        _set_data(gpio, pins, bits[column % 16])
        if (column == latch_from) if latch_once else (column >= latch_from):
            gpio.set_level(pins.lat, HIGH)
        _pulse_clock(gpio, pins)


def _clear_with_latch(gpio: Gpio, pins: PinConfig, pixels_per_row: int) -> None:
    for column in range(pixels_per_row):
        if column == pixels_per_row - 3:
            gpio.set_level(pins.lat, HIGH)
        _pulse_clock(gpio, pins)


def fm6124_init(gpio: Gpio, pins: PinConfig, pixels_per_row: int) -> None:
    """Program the FM6124/FM6126A control registers and enable output."""
    log.info("initializing FM6124 driver")
    _prepare_pins(gpio, pins)

    _shift_register(
        gpio, pins, pixels_per_row, _FM6124_REG1, pixels_per_row - 11, latch_once=False
    )
    gpio.set_level(pins.lat, LOW)

    _shift_register(
        gpio, pins, pixels_per_row, _FM6124_REG2, pixels_per_row - 12, latch_once=False
    )
    gpio.set_level(pins.lat, LOW)

    _set_data(gpio, pins, LOW)
    for _ in range(pixels_per_row):
        _pulse_clock(gpio, pins)

    gpio.set_level(pins.lat, HIGH)
    _pulse_clock(gpio, pins)
    gpio.set_level(pins.lat, LOW)
    gpio.set_level(pins.oe, LOW)  # display on
    _pulse_clock(gpio, pins)


def dp3246_init(gpio: Gpio, pins: PinConfig, pixels_per_row: int) -> None:
    """Program the DP3246/SM5368 control registers and enable output."""
    log.info("initializing DP3246 driver")
    _prepare_pins(gpio, pins)

    _clear_with_latch(gpio, pins, pixels_per_row)
    gpio.set_level(pins.lat, LOW)

    _shift_register(
        gpio, pins, pixels_per_row, _DP3246_REG1, pixels_per_row - 11, latch_once=True
    )
    gpio.set_level(pins.lat, LOW)

    _shift_register(
        gpio, pins, pixels_per_row, _DP3246_REG2, pixels_per_row - 12, latch_once=True
    )
    gpio.set_level(pins.lat, LOW)
    _pulse_clock(gpio, pins)

    _set_data(gpio, pins, LOW)
    _clear_with_latch(gpio, pins, pixels_per_row)

    gpio.set_level(pins.lat, LOW)
    gpio.set_level(pins.oe, LOW)  # display on
    _pulse_clock(gpio, pins)


def shift_driver(
    gpio: Gpio, pins: PinConfig, driver: DriverChip, pixels_per_row: int
) -> bool:
    """Run the chip's pre-DMA start-up sequence.

    Returns True when the chip must be clocked on the positive edge.
    """
    if driver in (DriverChip.ICN2038S, DriverChip.FM6124, DriverChip.FM6126A):
        fm6124_init(gpio, pins, pixels_per_row)
        return False
    if driver is DriverChip.DP3246_SM5368:
        dp3246_init(gpio, pins, pixels_per_row)
        return True
    if driver is DriverChip.MBI5124:
        # The latch resets on the rising clock edge while high.
        return True
    return False