"""Display configuration data structure."""
from dataclasses import dataclass


@dataclass
class DisplayConfig:
    """Display preferences configuration."""
    show_colors: bool = True
    graph_height: int = 10

    def __post_init__(self):
        """Reject wrongly typed values, then fix invalid ones."""
        if not isinstance(self.show_colors, bool):
            raise TypeError(f"show_colors must be true or false, got {self.show_colors!r}")
        if not isinstance(self.graph_height, int) or isinstance(self.graph_height, bool):
            raise TypeError(f"graph_height must be a whole number, got {self.graph_height!r}")
        if self.graph_height <= 0:
            self.graph_height = 10
