from __future__ import annotations
from powerline_prompt.colors import (
    CMD_PASSED_BG,
    CMD_PASSED_FG,
    CWD_FG,
    PATH_BG,
    PATH_FG,
    SEPARATOR_FG,
)
from powerline_prompt.segment import Segment
from powerline_prompt.shells import BashRenderer, ColorMode


def test_separator_color_defaults_to_background() -> None:
    seg = Segment(" x ", PATH_FG, PATH_BG, ">", renderer=BashRenderer())
    assert seg.separator_fg == PATH_BG


def test_draw_last_segment() -> None:
    seg = Segment(" work ", CWD_FG, PATH_BG, ">", renderer=BashRenderer())
    assert seg.draw(None) == (
        r"\[\e[38;5;254m\]"
        r"\[\e[48;5;237m\]"
        " work "
        r"\[\e[0m\]"
        r"\[\e[38;5;237m\]"
        ">"
    )


def test_draw_before_next_segment() -> None:
    r = BashRenderer(color_mode=ColorMode.DOS)
    seg = Segment(" ~ ", PATH_FG, PATH_BG, "|", renderer=r, separator_fg=SEPARATOR_FG)
    nxt = Segment(" \\$ ", CMD_PASSED_FG, CMD_PASSED_BG, ">", renderer=r)
    assert seg.draw(nxt) == (
        r"\[\e[30m\]"
        r"\[\e[44m\]"
        " ~ "
        r"\[\e[47m\]"
        r"\[\e[30m\]"
        "|"
    )


def test_segments_compare_without_renderer() -> None:
    a = Segment(" x ", PATH_FG, PATH_BG, ">", renderer=BashRenderer())
    b = Segment(" x ", PATH_FG, PATH_BG, ">", renderer=BashRenderer(ColorMode.DOS))
    assert a == b
