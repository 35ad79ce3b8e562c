"""Terminal styling for rendered lines.

Styles are attached to spans of text by role and turned into ANSI sequences
by rich only at output time, so visible widths never include escape codes.
"""

from dataclasses import dataclass
from enum import Enum

from rich.color import ColorSystem
from rich.style import Style as RichStyle


class Style(Enum):
    """Visual role of a span of text."""

    PLAIN = "plain"
    BORDER = "border"
    WORD = "word"
    PHONETIC = "phonetic"
    PART_OF_SPEECH = "part_of_speech"
    EXAMPLE = "example"
    LABEL = "label"


_RICH_STYLES: dict[Style, RichStyle] = {
    Style.PLAIN: RichStyle.null(),
    Style.BORDER: RichStyle.parse("bold bright_black"),
    Style.WORD: RichStyle.parse("bold cyan"),
    Style.PHONETIC: RichStyle.parse("italic bright_black"),
    Style.PART_OF_SPEECH: RichStyle.parse("magenta"),
    Style.EXAMPLE: RichStyle.parse("italic bright_black"),
    Style.LABEL: RichStyle.parse("bold yellow"),
}


@dataclass(frozen=True)
class Span:
    """A run of text sharing one style."""

    text: str
    style: Style = Style.PLAIN

    def __len__(self) -> int:
        return len(self.text)


def rich_style(style: Style) -> RichStyle:
    """The rich style used for ``style``."""
    return _RICH_STYLES[style]


def stylize(text: str, style: Style) -> str:
    """Wrap ``text`` in the 16-color ANSI sequence for ``style``."""
    if not text:
        return text
    return rich_style(style).render(text, color_system=ColorSystem.STANDARD)
