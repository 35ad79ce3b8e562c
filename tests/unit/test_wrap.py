"""Unit tests for greedy word wrapping."""

from wotd.rendering import wrap_text


class TestWrapText:
    """Test wrap_text behavior."""

    def test_short_text_is_one_line(self) -> None:
        """Text that fits yields exactly prefix + text."""
        assert wrap_text("a short line", 38, "  ") == ["  a short line"]

    def test_stable(self) -> None:
        """Wrapping the same input twice gives the same lines."""
        text = "the quick brown fox jumps over the lazy dog"
        assert wrap_text(text, 15, "  ") == wrap_text(text, 15, "  ")

    def test_breaks_at_spaces(self) -> None:
        """Words move to a new line when the next one would not fit."""
        assert wrap_text("the quick brown fox", 12, "  ") == ["  the quick", "  brown fox"]

    def test_prefix_repeated_on_continuation_lines(self) -> None:
        """Every produced line starts with the prefix."""
        lines = wrap_text("one two three four five six seven", 10, "    ")
        assert all(line.startswith("    ") for line in lines)

    def test_no_line_exceeds_width(self) -> None:
        """Lines made of ordinary words stay within the width."""
        lines = wrap_text("lorem ipsum dolor sit amet consectetur adipiscing elit", 16, "  ")
        assert max(len(line) for line in lines) <= 16

    def test_line_may_fill_width_exactly(self) -> None:
        """A line exactly as long as the width is not broken."""
        assert wrap_text("abcd efgh", 11, "  ") == ["  abcd efgh"]

    def test_long_word_is_not_split(self) -> None:
        """A word longer than the width sits alone on its own line."""
        assert wrap_text("a supercalifragilistic b", 10) == ["a", "supercalifragilistic", "b"]

    def test_long_first_word_does_not_emit_empty_line(self) -> None:
        """An over-long leading word does not leave a prefix-only line before it."""
        assert wrap_text("incomprehensibilities", 8, "  ") == ["  incomprehensibilities"]

    def test_newlines_count_as_breaks(self) -> None:
        """Multi-line text is rewrapped as a single paragraph."""
        assert wrap_text("first line\nsecond line", 40) == ["first line second line"]

    def test_empty_text_yields_prefix(self) -> None:
        """Empty text still produces one line."""
        assert wrap_text("", 10, "  ") == ["  "]
