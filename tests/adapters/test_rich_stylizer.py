from __future__ import annotations

import pytest
from rich.color import ColorSystem

from lib_log_human.adapters import RichStylizer


def test_bold_red_renders_standard_sgr_sequence() -> None:
    assert RichStylizer().stylize("ERROR", "bold red") == "\x1b[1;31mERROR\x1b[0m"


@pytest.mark.parametrize("style", ["bold", "bold blue", "bold green", "bold yellow", "bold red", "dim"])
def test_every_render_style_wraps_text(style: str) -> None:
    styled = RichStylizer().stylize("text", style)
    assert styled.startswith("\x1b[")
    assert "text" in styled
    assert styled.endswith("\x1b[0m")


def test_empty_text_stays_empty() -> None:
    assert RichStylizer().stylize("", "bold") == ""


def test_colour_system_is_configurable() -> None:
    styled = RichStylizer(color_system=ColorSystem.TRUECOLOR).stylize("x", "bold #ff0000")
    assert "38;2;255;0;0" in styled
