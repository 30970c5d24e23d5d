import pytest

from hub75panel.virtual_panel import (
    ChainType,
    ScanRate,
    VirtualCoords,
    VirtualMatrixPanel,
)


class FakeDisplay:
    def __init__(self):
        self.calls = []

    def draw_pixel(self, x, y, color):
        self.calls.append(("draw_pixel", x, y, color))

    def draw_pixel_rgb888(self, x, y, r, g, b):
        self.calls.append(("draw_pixel_rgb888", x, y, r, g, b))

    def fill_screen(self, color):
        self.calls.append(("fill_screen", color))

    def fill_screen_rgb888(self, r, g, b):
        self.calls.append(("fill_screen_rgb888", r, g, b))

    def clear_screen(self):
        self.calls.append(("clear_screen",))

    def flip_dma_buffer(self):
        self.calls.append(("flip_dma_buffer",))

    def color444(self, r, g, b):
        return ("444", r, g, b)

    def color565(self, r, g, b):
        return ("565", r, g, b)

    def color333(self, r, g, b):
        return ("333", r, g, b)


def make(rows, cols, px, py, chain=ChainType.NONE):
    display = FakeDisplay()
    return VirtualMatrixPanel(display, rows, cols, px, py, chain), display


SERPENTINE = [
    ChainType.TOP_LEFT_DOWN,
    ChainType.TOP_RIGHT_DOWN,
    ChainType.BOTTOM_LEFT_UP,
    ChainType.BOTTOM_RIGHT_UP,
]


@pytest.mark.parametrize(
    "chain, point, expected",
    [
        (ChainType.TOP_RIGHT_DOWN, (0, 0), (384, 0)),
        (ChainType.TOP_RIGHT_DOWN, (0, 64), (383, 63)),
        (ChainType.TOP_RIGHT_DOWN, (191, 191), (191, 63)),
        (ChainType.TOP_LEFT_DOWN, (0, 0), (575, 63)),
        (ChainType.TOP_LEFT_DOWN, (0, 64), (192, 0)),
        (ChainType.BOTTOM_LEFT_UP, (0, 0), (191, 63)),
        (ChainType.BOTTOM_LEFT_UP, (0, 191), (575, 0)),
        (ChainType.BOTTOM_RIGHT_UP, (0, 0), (0, 0)),
        (ChainType.BOTTOM_RIGHT_UP, (0, 64), (383, 63)),
    ],
)
def test_serpentine_3x3_values(chain, point, expected):
    panel, _ = make(3, 3, 64, 64, chain)
    assert panel.get_coords(*point) == VirtualCoords(*expected)


@pytest.mark.parametrize("chain", SERPENTINE)
def test_serpentine_3x3_is_bijection_onto_chain(chain):
    panel, _ = make(3, 3, 64, 64, chain)
    seen = set()
    for x in range(192):
        for y in range(192):
            c = panel.get_coords(x, y)
            assert 0 <= c.x < 576 and 0 <= c.y < 64
            seen.add((c.x, c.y))
    assert len(seen) == 192 * 192


@pytest.mark.parametrize(
    "point, expected",
    [((0, 0), (128, 0)), ((10, 64 * 3 - 1), (10, 63)), ((16, 64 * 2 - 1), (80, 63))],
)
def test_top_right_down_zigzag(point, expected):
    panel, _ = make(3, 1, 64, 64, ChainType.TOP_RIGHT_DOWN_ZZ)
    assert panel.get_coords(*point) == VirtualCoords(*expected)


@pytest.mark.parametrize("point, expected", [((0, 0), (0, 0)), ((63, 64), (127, 0))])
def test_bottom_right_up_zigzag(point, expected):
    panel, _ = make(3, 1, 64, 64, ChainType.BOTTOM_RIGHT_UP_ZZ)
    assert panel.get_coords(*point) == VirtualCoords(*expected)


@pytest.mark.parametrize("point", [(-1, 0), (0, -1), (192, 0), (0, 192)])
def test_out_of_range_is_invalid(point):
    panel, _ = make(3, 3, 64, 64, ChainType.TOP_RIGHT_DOWN)
    result = panel.get_coords(*point)
    assert result == VirtualCoords(-1, -1)
    assert result.valid is False


def test_no_chain_is_identity():
    panel, _ = make(2, 2, 32, 16)
    assert panel.get_coords(40, 20) == VirtualCoords(40, 20)
    assert (panel.width(), panel.height()) == (64, 32)


def test_rotation_90():
    panel, _ = make(1, 2, 64, 32)
    panel.set_rotation(1)
    assert (panel.width(), panel.height()) == (32, 128)
    assert panel.get_coords(0, 0) == VirtualCoords(0, 31)
    assert panel.get_coords(31, 127) == VirtualCoords(127, 0)
    assert panel.get_coords(40, 0) == VirtualCoords(-1, -1)


def test_rotation_180_and_270():
    panel, _ = make(1, 2, 64, 32)
    panel.set_rotation(2)
    assert (panel.width(), panel.height()) == (128, 32)
    assert panel.get_coords(0, 0) == VirtualCoords(127, 31)
    panel.set_rotation(3)
    assert panel.get_coords(0, 0) == VirtualCoords(127, 0)


def test_rotation_out_of_range_only_changes_dimensions():
    panel, _ = make(1, 2, 64, 32)
    panel.set_rotation(5)
    assert (panel.width(), panel.height()) == (32, 128)
    assert panel.get_coords(10, 20) == VirtualCoords(10, 20)


@pytest.mark.parametrize(
    "point, expected", [((0, 0), (64, 0)), ((0, 8), (0, 0)), ((5, 17), (69, 9))]
)
def test_four_scan_32px(point, expected):
    panel, _ = make(1, 1, 64, 32)
    panel.set_physical_panel_scan_rate(ScanRate.FOUR_SCAN_32PX_HIGH)
    assert panel.get_coords(*point) == VirtualCoords(*expected)


@pytest.mark.parametrize(
    "point, expected", [((0, 0), (32, 0)), ((0, 4), (0, 0)), ((3, 9), (35, 5))]
)
def test_four_scan_16px(point, expected):
    panel, _ = make(1, 1, 32, 16)
    panel.set_physical_panel_scan_rate(ScanRate.FOUR_SCAN_16PX_HIGH)
    assert panel.get_coords(*point) == VirtualCoords(*expected)


@pytest.mark.parametrize(
    "point, expected", [((0, 0), (64, 0)), ((0, 8), (0, 8)), ((0, 16), (64, 0))]
)
def test_four_scan_64px(point, expected):
    panel, _ = make(1, 1, 64, 64)
    panel.set_physical_panel_scan_rate(ScanRate.FOUR_SCAN_64PX_HIGH)
    assert panel.get_coords(*point) == VirtualCoords(*expected)


def test_draw_pixel_maps_through_chain():
    panel, display = make(3, 3, 64, 64, ChainType.TOP_RIGHT_DOWN)
    panel.draw_pixel(0, 64, 7)
    assert display.calls == [("draw_pixel", 383, 63, 7)]


def test_draw_pixel_zoom():
    panel, display = make(1, 1, 64, 32)
    panel.set_zoom_factor(2)
    panel.draw_pixel(1, 1, 9)
    assert display.calls == [
        ("draw_pixel", 2, 2, 9),
        ("draw_pixel", 2, 3, 9),
        ("draw_pixel", 3, 2, 9),
        ("draw_pixel", 3, 3, 9),
    ]


def test_zoom_factor_out_of_range_ignored():
    panel, display = make(1, 1, 64, 32)
    panel.set_zoom_factor(5)
    panel.draw_pixel(1, 1, 3)
    assert display.calls == [("draw_pixel", 1, 1, 3)]


def test_draw_pixel_rgb888_maps():
    panel, display = make(3, 3, 64, 64, ChainType.TOP_LEFT_DOWN)
    panel.draw_pixel_rgb888(0, 0, 1, 2, 3)
    assert display.calls == [("draw_pixel_rgb888", 575, 63, 1, 2, 3)]


def test_pass_through_calls():
    panel, display = make(1, 1, 64, 32)
    panel.fill_screen(5)
    panel.fill_screen_rgb888(1, 2, 3)
    panel.clear_screen()
    panel.flip_dma_buffer()
    assert display.calls == [
        ("fill_screen", 5),
        ("fill_screen_rgb888", 1, 2, 3),
        ("clear_screen",),
        ("flip_dma_buffer",),
    ]
    assert panel.color565(1, 2, 3) == ("565", 1, 2, 3)
    assert panel.color444(4, 5, 6) == ("444", 4, 5, 6)
    assert panel.color333(7, 0, 1) == ("333", 7, 0, 1)