"""ASCII line graph rendering."""
from typing import List, Optional, Sequence

DEFAULT_HEIGHT = 10


def _row_for(value: float, lo: float, span: float, height: int) -> int:
    """Map a value to a row index, 0 being the bottom row."""
    if span == 0:
        return (height - 1) // 2
    return int(round((value - lo) / span * (height - 1)))


def render_graph(
    series: Sequence[float],
    height: int = DEFAULT_HEIGHT,
    lower: Optional[float] = None,
    upper: Optional[float] = None,
) -> str:
    """Render ``series`` as a line graph exactly ``height`` rows tall.

    Each point gets one column. The y axis is labelled on the left. ``lower``
    and ``upper`` widen the scale but never clip it.
    """
    if height < 1:
        raise ValueError(f"Graph height must be at least 1, got {height}")
    values = [float(v) for v in series]
    if not values:
        return ""

    lo = min(values) if lower is None else min(min(values), lower)
    hi = max(values) if upper is None else max(max(values), upper)
    span = hi - lo

    rows = [_row_for(v, lo, span, height) for v in values]
    grid: List[List[str]] = [[" "] * len(values) for _ in range(height)]

    for x, y in enumerate(rows):
        if x == 0 or rows[x - 1] == y:
            grid[y][x] = "─"
            continue
        prev = rows[x - 1]
        if y > prev:
            grid[prev][x] = "╯"
            grid[y][x] = "╭"
        else:
            grid[prev][x] = "╮"
            grid[y][x] = "╰"
        for between in range(min(prev, y) + 1, max(prev, y)):
            grid[between][x] = "│"

    if span == 0:
        labels = [f"{lo:.2f}" if r == rows[0] else "" for r in range(height)]
    elif height == 1:
        labels = [f"{hi:.2f}"]
    else:
        labels = [f"{lo + span * r / (height - 1):.2f}" for r in range(height)]
    label_width = max(len(label) for label in labels)

    lines = []
    for r in range(height - 1, -1, -1):
        lines.append(f"{labels[r]:>{label_width}} ┤{''.join(grid[r])}".rstrip())
    return "\n".join(lines)
