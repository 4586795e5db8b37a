"""Renderer contract and the default log-based renderer.

Layout, colours and decoration belong to real renderers (a browser page, a
framebuffer app). The runtime only guarantees that every view change is
handed to ``render``; :class:`LogRenderer` is the headless sink used when no
screen is attached.
"""
from __future__ import annotations

import logging
from typing import Protocol

from signage.rotation.models import DisplayView, MonthlyView, SpotlightView

LOGGER = logging.getLogger(__name__)


class Renderer(Protocol):
    def render(self, view: DisplayView) -> None:
        ...


class LogRenderer:
    """Write a human readable description of each view to the logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or LOGGER
        self.rendered: int = 0

    def render(self, view: DisplayView) -> None:
        self.rendered += 1
        self._logger.info(format_view(view), extra={"mode": view.mode.value})

    __call__ = render


def format_view(view: DisplayView) -> str:
    """Plain-text rendition of a view (also handy for debugging)."""

    if isinstance(view, SpotlightView):
        person = view.honoree
        text = f"Happy Birthday! {person.name} ({person.birthday_label})"
        if view.show_position_markers:
            markers = "".join("●" if i == view.index else "○" for i in range(view.total))
            text = f"{text} {markers}"
        return text
    assert isinstance(view, MonthlyView)
    theme = view.theme
    title = f"{theme.emoji} {view.month_name} Birthdays ({theme.name})"
    if view.is_empty:
        return f"{title}: no birthdays this month!"
    names = ", ".join(f"{entry.name} ({entry.birthday_label})" for entry in view.honorees)
    return f"{title} [{view.hint.name_size.value}]: {names}"


__all__ = ["LogRenderer", "Renderer", "format_view"]
