"""Greedy word wrapping for fixed-width output."""


def wrap_text(text: str, width: int, prefix: str = "") -> list[str]:
    """Wrap ``text`` at spaces so that no line, prefix included, exceeds ``width``.

    Every produced line starts with ``prefix``. A single word too long for
    the available room is placed alone on its line and not split, so such a
    line may exceed ``width``. Runs of whitespace, newlines included, count
    as a single break.

    Args:
        text: Text to wrap
        width: Maximum line length including the prefix
        prefix: Indentation repeated on every line

    Returns:
        At least one line
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        if not current:
            current = word
        elif len(prefix) + len(current) + 1 + len(word) > width:
            lines.append(prefix + current)
            current = word
        else:
            current = f"{current} {word}"
    lines.append(prefix + current)
    return lines
