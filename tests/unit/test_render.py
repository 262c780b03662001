import io

import pytest

from barhist.binning import create_linear, create_log
from barhist.config import PrintOptions, get_bytes_options
from barhist.render import bar, format_lines, normalize_to_width, print_histogram

SIZES = [10] * 20 + [1000, 20, 300, 1000, 2000, 3000, 3000, 3000, 10000, 9500]


def render(hist, opt) -> str:
    buf = io.StringIO()
    print_histogram(buf, hist, opt)
    return buf.getvalue()


def test_linear_example_render():
    hist = create_linear([0.0, 0, 1, 2, 8], 4)
    out = render(hist, PrintOptions(width=20, prefix="  ", symbol=">", pad_symbol="-"))
    assert out == (
        "    8\n"
        "  > 6: ------>              (1)\n"
        "  > 4: >                    (0)\n"
        "  > 2: ------>              (1)\n"
        "  > 0: -------------------> (3)\n"
    )


def test_bytes_linear_with_sum_track():
    out = render(create_linear(SIZES, 4), get_bytes_options(30, True))
    assert out == (
        "       9.8 KiB\n"
        "  >    7.3 KiB: --|                          S ( 2;   19.0 KiB)\n"
        "  >    4.9 KiB: $                              ( 0;    0     B)\n"
        "  >    2.4 KiB: ---|         S                 ( 3;    8.8 KiB)\n"
        "  >   10     B: -------S---------------------| (25;    4.4 KiB)\n"
    )


def test_bytes_log_with_sum_track():
    out = render(create_log(SIZES, 4), get_bytes_options(30, True))
    assert out == (
        "       9.8 KiB\n"
        "  >    1.7 KiB: --------|                    S ( 6;   29.8 KiB)\n"
        "  >  316     B: --S|                           ( 2;    2.0 KiB)\n"
        "  >   56     B: S|                             ( 1;  300     B)\n"
        "  >   10     B: S----------------------------| (21;  220     B)\n"
    )


def test_bytes_log_with_zero_sample():
    out = render(create_log([0] + SIZES, 4), get_bytes_options(30, True))
    assert out.splitlines()[-1] == "  >    0     B: S----------------------------| (22;  220     B)"


def test_bytes_without_sum_track_omits_sum_text():
    lines = format_lines(create_linear(SIZES, 4), get_bytes_options(30, False))
    assert lines[-1] == "  >   10     B: -----------------------------| (25)"
    assert all("S" not in line and "$" not in line for line in lines)


def test_render_is_repeatable():
    hist = create_log(SIZES, 6)
    opt = get_bytes_options(40, True)
    assert render(hist, opt) == render(hist, opt)


def test_empty_histogram_writes_nothing():
    buf = io.StringIO()
    assert print_histogram(buf, create_linear([], 4), PrintOptions()) == 0
    assert buf.getvalue() == ""


def test_default_options():
    out = render(create_linear([1, 2], 2), None)
    assert out.splitlines()[0] == "  3"
    assert len(out.splitlines()) == 3


def test_normalize_to_width():
    assert normalize_to_width([3, 1, 0, 1], 20) == [19, 6, 0, 6]
    assert normalize_to_width([1, 2], 1) == [0, 0]
    assert normalize_to_width([], 10) == []


def test_normalize_degenerate_series_raise():
    with pytest.raises(ValueError):
        normalize_to_width([0, 0], 10)
    with pytest.raises(ValueError):
        normalize_to_width([-2, 1], 10)


def test_all_zero_samples():
    hist = create_linear([0, 0, 0], 3)
    # counts are positive so the count track renders
    assert render(hist, PrintOptions(width=5)).splitlines()[1] == "> 0: ----| (3)".replace("-", " ")
    with pytest.raises(ValueError):
        render(hist, PrintOptions(width=5, sum_symbol="S"))


def test_bar():
    assert bar(6, 2, 0, "-", "|") == "--|   "
    assert bar(6, 2, 4, "-", "|", "S") == "--| S "
    assert bar(6, 2, 2, "-", "|", "S", "$") == "--$   "
    assert bar(6, 2, 2, "-", "|", "S") == "--S   "
    assert bar(4, 3, 0, None, "#") == "   #"
