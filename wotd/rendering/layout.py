"""Bordered box layout for dictionary entries.

Every line of a rendered block has the same visible width,
``content_width + 2``: content lines are a border glyph, one space of
margin, text padded (or clipped) to ``content_width - 1`` columns, and a
closing border glyph.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from wotd.core import DictionaryEntry, Meaning
from wotd.rendering.styles import Span, Style, stylize
from wotd.rendering.wrap import wrap_text
from wotd.utils.constants import Constants

HORIZONTAL = "─"
VERTICAL = "│"
TOP_LEFT, TOP_RIGHT = "┌", "┐"
BOTTOM_LEFT, BOTTOM_RIGHT = "└", "┘"
TEE_LEFT, TEE_RIGHT = "├", "┤"


@dataclass(frozen=True)
class RenderedLine:
    """One output line as a sequence of styled spans."""

    spans: tuple[Span, ...]

    @property
    def text(self) -> str:
        """Visible text without styling."""
        return "".join(span.text for span in self.spans)

    def styled(self) -> str:
        """Text with ANSI styling applied."""
        return "".join(stylize(span.text, span.style) for span in self.spans)

    def __len__(self) -> int:
        return sum(len(span) for span in self.spans)


@dataclass
class RenderedBlock:
    """A complete bordered box, top border to bottom border."""

    content_width: int
    lines: list[RenderedLine] = field(default_factory=list)

    def __iter__(self) -> Iterator[RenderedLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def plain_lines(self) -> list[str]:
        """All lines as unstyled text."""
        return [line.text for line in self.lines]

    def to_text(self, color: bool = False) -> str:
        """Join lines for printing, styled when ``color`` is set."""
        if color:
            return "\n".join(line.styled() for line in self.lines)
        return "\n".join(self.plain_lines())


def content_width_for(available_width: int, max_width: int = Constants.MAX_CONTENT_WIDTH) -> int:
    """Interior box width for a terminal ``available_width`` columns wide.

    Clamped to ``Constants.MIN_CONTENT_WIDTH`` so tiny terminals still render.
    """
    width = min(max_width, available_width - Constants.BORDER_ALLOWANCE)
    return max(Constants.MIN_CONTENT_WIDTH, width)


def fit_spans(spans: Iterable[Span], width: int) -> list[Span]:
    """Pad spans with spaces to exactly ``width`` columns, clipping overlong text.

    Clipped text ends in an ellipsis carrying the style of the span it cut.
    """
    spans = [span for span in spans if span.text]
    total = sum(len(span) for span in spans)
    if total <= width:
        padding = width - total
        return spans + [Span(" " * padding)] if padding else spans

    fitted: list[Span] = []
    room = width - len(Constants.ELLIPSIS)
    for span in spans:
        if len(span) < room:
            fitted.append(span)
            room -= len(span)
            continue
        fitted.append(Span(span.text[:room] + Constants.ELLIPSIS, span.style))
        break
    return fitted


class _BoxBuilder:
    """Accumulates the lines of one block at a fixed content width."""

    def __init__(self, content_width: int) -> None:
        self.content_width = content_width
        self.wrap_width = content_width - 2
        self.block = RenderedBlock(content_width=content_width)

    def _rule(self, left: str, right: str) -> None:
        line = left + HORIZONTAL * self.content_width + right
        self.block.lines.append(RenderedLine((Span(line, Style.BORDER),)))

    def top(self) -> None:
        self._rule(TOP_LEFT, TOP_RIGHT)

    def separator(self) -> None:
        self._rule(TEE_LEFT, TEE_RIGHT)

    def bottom(self) -> None:
        self._rule(BOTTOM_LEFT, BOTTOM_RIGHT)

    def row(self, *spans: Span) -> None:
        """Add a content line built from ``spans``."""
        body = fit_spans(spans, self.content_width - 1)
        self.block.lines.append(
            RenderedLine(
                (Span(VERTICAL, Style.BORDER), Span(" "), *body, Span(VERTICAL, Style.BORDER))
            )
        )

    def wrapped(self, text: str, prefix: str, style: Style = Style.PLAIN) -> None:
        """Add ``text`` wrapped at the box's wrap width, one row per line."""
        for line in wrap_text(text, self.wrap_width, prefix):
            self.row(Span(line, style))


def _render_header(box: _BoxBuilder, entry: DictionaryEntry) -> None:
    phonetic = entry.display_phonetic
    if phonetic:
        box.row(Span(entry.word, Style.WORD), Span("  "), Span(phonetic, Style.PHONETIC))
    else:
        box.row(Span(entry.word, Style.WORD))


def _render_meaning(box: _BoxBuilder, meaning: Meaning) -> None:
    box.row(Span(meaning.part_of_speech, Style.PART_OF_SPEECH))
    for number, definition in enumerate(meaning.definitions, start=1):
        box.wrapped(f"{number}. {definition.definition}", Constants.DEFINITION_INDENT)
        if definition.example:
            box.wrapped(f'e.g. "{definition.example}"', Constants.EXAMPLE_INDENT, Style.EXAMPLE)


def render(
    entry: DictionaryEntry,
    available_width: int,
    max_width: int = Constants.MAX_CONTENT_WIDTH,
) -> RenderedBlock:
    """Lay out ``entry`` in a bordered box fitting ``available_width`` columns.

    Sections, in order: header (word and phonetic), meanings separated by
    blank spacer rows, then a thesaurus section when any synonyms exist.

    Args:
        entry: Dictionary entry to render
        available_width: Terminal width in columns
        max_width: Upper bound on the interior width

    Returns:
        RenderedBlock whose lines all have length ``content_width + 2``
    """
    box = _BoxBuilder(content_width_for(available_width, max_width))

    box.top()
    _render_header(box, entry)
    box.separator()

    for index, meaning in enumerate(entry.meanings):
        _render_meaning(box, meaning)
        if index < len(entry.meanings) - 1:
            box.row()

    synonyms = entry.all_synonyms()
    if synonyms:
        box.separator()
        box.row(Span("Thesaurus", Style.LABEL))
        box.wrapped(", ".join(synonyms), Constants.THESAURUS_INDENT)

    box.bottom()
    return box.block
