import pytest

from jigglydrum.window_info import WindowFlag, WindowInfo, atoi, parse_window_args


@pytest.mark.parametrize(
    "text, expected",
    [("123", 123), ("  -7x", -7), ("+5", 5), ("abc", 0), ("", 0), ("-", 0), ("12 34", 12)],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_defaults_without_args():
    info = parse_window_args([])
    assert (info.x, info.y) == (50, 50)
    assert (info.w, info.h) == (640, 360)
    assert info.flags == WindowFlag.RESIZABLE | WindowFlag.BORDERLESS


def test_all_four_args():
    info = parse_window_args(["680", "15", "680", "316"])
    assert (info.x, info.y, info.w, info.h) == (680, 15, 680, 316)
    assert WindowFlag.ALWAYS_ON_TOP in info.flags
    assert WindowFlag.INPUT_GRABBED in info.flags
    assert WindowFlag.RESIZABLE not in info.flags


def test_partial_args_keep_other_defaults():
    info = parse_window_args(["10"])
    default = WindowInfo()
    assert info.x == 10
    assert (info.y, info.w, info.h) == (default.y, default.w, default.h)
    assert WindowFlag.BORDERLESS in info.flags


def test_extra_args_ignored():
    info = parse_window_args(["1", "2", "3", "4", "5"])
    assert (info.x, info.y, info.w, info.h) == (1, 2, 3, 4)


def test_non_numeric_arg_is_zero():
    info = parse_window_args(["left"])
    assert info.x == 0