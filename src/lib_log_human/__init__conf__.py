"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from collections.abc import Callable

name = "lib_log_human"
title = "Human-friendly log router with friendly, debug, and full verbosity modes"
version = "0.1.0"
author = "bitranox"
shell_command = "lib_log_human"


def print_info(writer: Callable[[str], None] = print) -> None:
    """Write the metadata banner, one line per ``writer`` call."""

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    writer(f"Info for {name}:")
    writer("")
    for label, value in fields:
        writer(f"    {label:<{pad}} = {value}")
