"""Multi-line label layout.

Widths come from an average character width rather than font metrics, so
the same label always wraps the same way. Wrapping runs in two passes: the
measure pass counts the lines, which fixes the vertical offset of the first
line; the emit pass then produces the lines with their offsets.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

AVG_CHAR_WIDTH = 6.2
LINE_HEIGHT_EM = 1.2
BASELINE_DY_EM = 0.3


@dataclass(frozen=True)
class WrappedLabel:
    """A label broken into lines, positioned around the node centre.

    Attributes:
        lines: Text of each line
        first_dy: Vertical offset of the first line, in em
        line_height: Offset between consecutive lines, in em
        anchor: Horizontal text anchor ("middle", "start" or "end")
        dx: Horizontal offset from the node centre, in px
    """

    lines: tuple[str, ...]
    first_dy: float
    line_height: float = LINE_HEIGHT_EM
    anchor: str = "middle"
    dx: float = 0.0

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def line_offsets(self) -> list[float]:
        """Absolute vertical offset of each line, in em."""
        return [self.first_dy + i * self.line_height for i in range(self.line_count)]


def estimate_width(text: str, char_width: float = AVG_CHAR_WIDTH) -> float:
    """Estimated rendered width of a single line."""
    return len(text) * char_width


def _break_lines(words: list[str], max_width: float) -> Iterator[str]:
    """Greedy word wrap. A word longer than max_width gets a line of its own."""
    line: list[str] = []
    for word in words:
        line.append(word)
        if estimate_width(" ".join(line)) > max_width and len(line) > 1:
            line.pop()
            yield " ".join(line)
            line = [word]
    if line:
        yield " ".join(line)


def measure_lines(label: str, max_width: float) -> int:
    """First pass: number of lines the label wraps into."""
    return sum(1 for _ in _break_lines(label.split(), max_width))


def emit_lines(label: str, max_width: float, line_count: int, base_dy: float = BASELINE_DY_EM) -> WrappedLabel:
    """Second pass: produce the lines, vertically centred for ``line_count`` lines."""
    total_height = line_count * LINE_HEIGHT_EM
    first_dy = base_dy - total_height / 2 + LINE_HEIGHT_EM / 2
    lines = tuple(_break_lines(label.split(), max_width))
    return WrappedLabel(lines=lines, first_dy=first_dy)


def wrap_label(label: str, max_width: float, base_dy: float = BASELINE_DY_EM) -> WrappedLabel:
    """Wrap a label into centred lines no wider than ``max_width`` where possible.

    Example:
        >>> wrap_label("Personal Finance and Wealth Building", 120).lines
        ('Personal Finance', 'and Wealth Building')
    """
    line_count = measure_lines(label, max_width)
    return emit_lines(label, max_width, line_count, base_dy)
