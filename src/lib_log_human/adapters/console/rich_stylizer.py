"""Rich-powered stylizer implementing :class:`StylizerPort`.

Purpose
-------
Render the style names used by the render engine (``"bold blue"``, ``"dim"``)
into ANSI SGR sequences using Rich's style parser.

Contents
--------
* :class:`RichStylizer` - adapter constructed by the runtime router.

System Role
-----------
The only place escape sequences are produced. The render engine never calls
it for sinks with colour disabled, which keeps those lines plain text.
"""

from __future__ import annotations

from rich.color import ColorSystem
from rich.style import Style

from lib_log_human.application.ports.stylizer import StylizerPort


class RichStylizer(StylizerPort):
    """Apply Rich styles as raw ANSI escape sequences.

    Examples
    --------
    >>> RichStylizer().stylize("ERROR", "bold red")
    '\\x1b[1;31mERROR\\x1b[0m'
    >>> RichStylizer().stylize("", "bold red")
    ''
    """

    def __init__(self, *, color_system: ColorSystem = ColorSystem.STANDARD) -> None:
        """Configure the colour depth; the 16-colour palette is the default."""
        self._color_system = color_system

    def stylize(self, text: str, style: str) -> str:
        """Return ``text`` wrapped in the SGR codes for ``style``."""
        if not text:
            return text
        return Style.parse(style).render(text, color_system=self._color_system)


__all__ = ["RichStylizer"]
