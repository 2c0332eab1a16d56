"""Display management using Rich for terminal output."""
from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console
from rich.text import Text

from ..collectors.system_models import CpuSample, DiskSample, MemorySample
from ..config.config import Config
from .formatting import format_byte_size, format_gigabytes, format_percent, make_progress_bar
from .graph import render_graph

CPU_STYLE = "bold blue"
MEMORY_STYLE = "bold green"
DISK_STYLE = "bold red"
GRAPH_STYLE = "bright_green"


@dataclass
class GraphSection:
    """One titled graph with optional used/total labels."""
    title: str
    series: List[float]
    style: str = "bold"
    used_label: Optional[str] = None
    total_label: Optional[str] = None
    percent: Optional[float] = None


class DisplayManager:
    """Writes metric reports to the terminal."""

    def __init__(self, config: Config, console: Optional[Console] = None):
        """Initialize the display manager."""
        self.config = config
        if console is None:
            console = Console(no_color=not config.display.show_colors, highlight=False)
        self.console = console

    def _line(self, message: str, style: Optional[str] = None, soft_wrap: bool = False):
        # Text objects keep mount points like "/mnt/[x]" from being parsed as markup
        self.console.print(Text(message, style=style or ""), soft_wrap=soft_wrap)

    def show_graph(self, section: GraphSection):
        """Print a titled graph section."""
        self.console.print()
        self._line(section.title, section.style)
        if section.used_label is not None and section.total_label is not None:
            info = f"Used: {section.used_label}, Total: {section.total_label}"
            if section.percent is not None:
                info += f" ({format_percent(section.percent)})"
            self._line(info)
        graph = render_graph(
            section.series,
            height=self.config.display.graph_height,
            lower=0.0,
            upper=100.0,
        )
        # Rows must never be reflowed to the console width
        self._line(graph, GRAPH_STYLE, soft_wrap=True)

    def show_error(self, error: Exception):
        """Report a failed query on standard output."""
        self._line(str(error))

    def show_message(self, message: str, style: Optional[str] = None):
        self._line(message, style)

    # Graph snapshots

    def show_cpu_graph(self, sample: CpuSample):
        self.show_graph(GraphSection("CPU Usage", sample.percentages, CPU_STYLE))

    def show_memory_graph(self, sample: MemorySample):
        self.show_graph(GraphSection(
            "Memory Usage",
            [sample.percent],
            MEMORY_STYLE,
            used_label=format_byte_size(sample.used),
            total_label=format_byte_size(sample.total),
            percent=sample.percent,
        ))

    def show_disk_graph(self, sample: DiskSample):
        self.show_graph(GraphSection(
            f"Disk Usage ({sample.mountpoint})",
            [sample.percent],
            DISK_STYLE,
            used_label=format_byte_size(sample.used),
            total_label=format_byte_size(sample.total),
            percent=sample.percent,
        ))

    # Text summaries

    def show_cpu_line(self, sample: CpuSample):
        """One-line CPU report used by the watch loop."""
        self._line(f"CPU Usage: {format_percent(sample.overall)}", "cyan")

    def show_memory_summary(self, sample: MemorySample):
        self._line(f"Total Memory: {format_gigabytes(sample.total)}", "green")
        self._line(f"Free Memory: {format_gigabytes(sample.free)}", "yellow")
        self._line(f"Used Memory: {format_gigabytes(sample.used)}", "red")
        self._line(f"Usage: {make_progress_bar(sample.percent)}")

    def show_disk_summary(self, sample: DiskSample):
        self._line(f"Disk: {sample.mountpoint}")
        self._line(f"Total Space: {format_gigabytes(sample.total)}", "cyan")
        self._line(f"Free Space: {format_gigabytes(sample.free)}", "green")
        self._line(f"Used Space: {format_gigabytes(sample.used)}", "red")
        self._line(f"Usage: {make_progress_bar(sample.percent)}")
        self.console.print()
