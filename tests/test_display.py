import pytest

from watchsim.display import (
    HOR_RES,
    TOTAL_NB_LINES,
    VER_RES,
    Area,
    DisplayDriver,
    DrawCall,
    FullRefreshDirection,
    TouchState,
)


class FakeLcd:
    def __init__(self):
        self.offsets = []

    def vertical_scroll_start_address(self, offset):
        self.offsets.append(offset)


@pytest.fixture
def driver():
    return DisplayDriver(lcd=FakeLcd(), frame_delay=0)


def test_full_refresh_flag_is_cleared_after_reading(driver):
    driver.set_full_refresh(FullRefreshDirection.DOWN)
    assert driver.get_full_refresh() is True
    assert driver.get_full_refresh() is False


@pytest.mark.parametrize(
    "direction, code",
    [
        (FullRefreshDirection.DOWN, 1),
        (FullRefreshDirection.RIGHT, 2),
        (FullRefreshDirection.LEFT, 3),
        (FullRefreshDirection.LEFT_ANIM, 4),
        (FullRefreshDirection.RIGHT_ANIM, 5),
    ],
)
def test_direction_codes(driver, direction, code):
    driver.set_full_refresh(direction)
    assert driver.disp_direction == code
    assert driver.scroll_direction is direction


def test_direction_kept_until_slide_ends(driver):
    driver.set_full_refresh(FullRefreshDirection.LEFT)
    driver.set_full_refresh(FullRefreshDirection.RIGHT)
    assert driver.scroll_direction is FullRefreshDirection.LEFT


def test_plain_flush_draws_area(driver):
    area = Area(10, 20, 49, 29)
    calls = driver.flush_display(area)
    assert calls == [DrawCall(10, 20, area.width, area.height, 0)]
    assert driver.draw_calls == calls


def test_draw_call_size_is_two_bytes_per_pixel():
    call = DrawCall(0, 0, 5, 7)
    assert call.size == 5 * 7 * 2


def test_invalid_area_rejected():
    with pytest.raises(ValueError):
        Area(10, 0, 5, 5)
    with pytest.raises(ValueError):
        Area(-1, 0, 5, 5)


def test_down_slide_moves_screen_and_draws_at_top(driver):
    driver.set_full_refresh(FullRefreshDirection.DOWN)
    area = Area(0, 0, HOR_RES - 1, 19)
    calls = driver.flush_display(area)
    assert calls[0] == DrawCall(0, area.height, HOR_RES, VER_RES, 0)
    assert calls[-1] == DrawCall(0, 0, area.width, area.height, 0)
    assert driver.scroll_direction is FullRefreshDirection.NONE
    assert driver.disp_direction == 0
    assert 0 <= driver.scroll_offset < TOTAL_NB_LINES
    assert driver.lcd.offsets == [driver.scroll_offset]


def test_down_slide_continues_when_not_at_top(driver):
    driver.set_full_refresh(FullRefreshDirection.DOWN)
    driver.flush_display(Area(0, 100, HOR_RES - 1, 119))
    assert driver.scroll_direction is FullRefreshDirection.DOWN


def test_up_slide_moves_screen_and_draws_at_bottom(driver):
    driver.set_full_refresh(FullRefreshDirection.UP)
    area = Area(0, 10, HOR_RES - 1, 19)
    calls = driver.flush_display(area)
    assert calls[0] == DrawCall(0, 0, HOR_RES, VER_RES, HOR_RES * area.height)
    assert calls[-1] == DrawCall(0, VER_RES - area.height, area.width, area.height, 0)
    assert driver.scroll_offset == area.height
    assert driver.scroll_direction is FullRefreshDirection.UP


def test_up_slide_ends_at_last_line(driver):
    driver.set_full_refresh(FullRefreshDirection.UP)
    driver.flush_display(Area(0, 220, HOR_RES - 1, VER_RES - 1))
    assert driver.scroll_direction is FullRefreshDirection.NONE
    assert 0 <= driver.scroll_offset < TOTAL_NB_LINES


def test_left_slide_ends_at_right_edge(driver):
    driver.set_full_refresh(FullRefreshDirection.LEFT)
    driver.flush_display(Area(0, 0, 100, 10))
    assert driver.scroll_direction is FullRefreshDirection.LEFT
    driver.flush_display(Area(200, 0, HOR_RES - 1, 10))
    assert driver.scroll_direction is FullRefreshDirection.NONE


def test_right_slide_ends_at_left_edge(driver):
    driver.set_full_refresh(FullRefreshDirection.RIGHT_ANIM)
    driver.flush_display(Area(50, 0, 100, 10))
    assert driver.scroll_direction is FullRefreshDirection.RIGHT_ANIM
    driver.flush_display(Area(0, 0, 10, 10))
    assert driver.scroll_direction is FullRefreshDirection.NONE
    assert driver.disp_direction == 0


def test_touch_round_trip(driver):
    assert driver.get_touchpad_info() == TouchState(0, 0, False)
    driver.set_new_touch_point(120, 45, True)
    assert driver.get_touchpad_info() == TouchState(120, 45, True)
    driver.set_new_touch_point(120, 45, False)
    assert driver.get_touchpad_info().pressed is False


def test_touch_out_of_range(driver):
    with pytest.raises(ValueError):
        driver.set_new_touch_point(-1, 0, True)