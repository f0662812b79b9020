"""Use cases composed by the runtime router."""

from __future__ import annotations

from .flush import create_flush
from .process_record import create_is_enabled, create_process_record
from .render import render_record

__all__ = ["create_flush", "create_is_enabled", "create_process_record", "render_record"]
