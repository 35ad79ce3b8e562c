"""Terminal rendering of dictionary entries."""

from wotd.rendering.layout import (
    RenderedBlock,
    RenderedLine,
    content_width_for,
    fit_spans,
    render,
)
from wotd.rendering.styles import Span, Style, stylize
from wotd.rendering.wrap import wrap_text

__all__ = [
    "RenderedBlock",
    "RenderedLine",
    "Span",
    "Style",
    "content_width_for",
    "fit_spans",
    "render",
    "stylize",
    "wrap_text",
]
