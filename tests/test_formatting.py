import re

import pytest

from sysinfo.ui.formatting import (
    format_byte_size,
    format_gigabytes,
    format_percent,
    make_progress_bar,
)
from sysinfo.ui.graph import render_graph


@pytest.mark.parametrize(
    "num_bytes, expected",
    [
        (0, "0 B"),
        (1, "1 B"),
        (1023, "1023 B"),
        (1024, "1.0 KB"),
        (1536, "1.5 KB"),
        (1048576, "1.0 MB"),
        (1048575, "1.0 MB"),
        (5 * 1024 ** 3, "5.0 GB"),
        (1024 ** 4, "1.0 TB"),
        (1024 ** 5, "1.0 PB"),
        (1024 ** 6, "1.0 EB"),
        (2 ** 64 - 1, "16.0 EB"),
    ],
)
def test_format_byte_size(num_bytes, expected):
    assert format_byte_size(num_bytes) == expected


def test_format_byte_size_output_shape():
    pattern = re.compile(r"^(\d+(?:\.\d)?) (B|KB|MB|GB|TB|PB|EB)$")
    samples = [0, 7, 999, 1023]
    for exp in range(1, 64):
        samples.extend([2 ** exp - 1, 2 ** exp, 2 ** exp + 12345])

    for b in samples:
        match = pattern.match(format_byte_size(b))
        assert match, format_byte_size(b)
        number, unit = match.groups()
        if unit == "B":
            assert number == str(b)
        else:
            assert "." in number
            assert 0 <= float(number) < 1024


def test_format_byte_size_rejects_negative():
    with pytest.raises(ValueError):
        format_byte_size(-1)


def test_format_percent_two_decimals():
    assert format_percent(12.3456) == "12.35%"
    assert format_percent(0) == "0.00%"
    assert format_percent(100.0) == "100.00%"


def test_format_gigabytes():
    assert format_gigabytes(1024 ** 3) == "1.00 GB"
    assert format_gigabytes(int(15.5 * 1024 ** 3)) == "15.50 GB"


def test_progress_bar_clamps_fill():
    assert make_progress_bar(0, width=4) == "[░░░░]   0.0%"
    assert make_progress_bar(100, width=4) == "[████] 100.0%"
    assert make_progress_bar(150, width=4).startswith("[████]")


def _plot_area(line):
    return line.split("┤", 1)[1] if "┤" in line else ""


class TestRenderGraph:
    def test_constant_series_is_flat(self):
        graph = render_graph([42.0] * 6, height=5)
        lines = graph.split("\n")
        assert len(lines) == 5
        plotted = [line for line in lines if _plot_area(line).strip()]
        assert len(plotted) == 1
        assert _plot_area(plotted[0]) == "─" * 6
        assert "42.00" in plotted[0]

    def test_single_value(self):
        lines = render_graph([5.0], height=4).split("\n")
        assert len(lines) == 4
        assert sum(_plot_area(line).count("─") for line in lines) == 1

    def test_height_one(self):
        graph = render_graph([1.0, 2.0, 3.0], height=1)
        assert len(graph.split("\n")) == 1

    def test_empty_series(self):
        assert render_graph([], height=3) == ""

    def test_invalid_height(self):
        with pytest.raises(ValueError):
            render_graph([1.0], height=0)

    def test_rising_line(self):
        lines = render_graph([0.0, 100.0], height=3).split("\n")
        # top row first
        assert _plot_area(lines[0]) == " ╭"
        assert _plot_area(lines[1]) == " │"
        assert _plot_area(lines[2]) == "─╯"

    def test_falling_line(self):
        lines = render_graph([100.0, 0.0], height=2).split("\n")
        assert _plot_area(lines[0]) == "─╮"
        assert _plot_area(lines[1]) == " ╰"

    def test_axis_labels_span_bounds(self):
        lines = render_graph([50.0], height=3, lower=0.0, upper=100.0).split("\n")
        assert lines[0].lstrip().startswith("100.00")
        assert lines[1].lstrip().startswith("50.00")
        assert lines[2].lstrip().startswith("0.00")
        assert _plot_area(lines[1]) == "─"
