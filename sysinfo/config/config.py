"""Main configuration data structure."""
from dataclasses import dataclass, field

from .display_config import DisplayConfig


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass
class Config:
    """Main configuration class."""
    poll_interval: float = 1.0
    cpu_window: float = 1.0
    warmup_window: float = 0.1
    include_pseudo: bool = True
    log_level: str = "WARNING"
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def __post_init__(self):
        """Reject wrongly typed values, then fix invalid ones."""
        for name in ("poll_interval", "cpu_window", "warmup_window"):
            value = getattr(self, name)
            if not _is_number(value):
                raise TypeError(f"{name} must be a number, got {value!r}")
            setattr(self, name, float(value))
        if not isinstance(self.include_pseudo, bool):
            raise TypeError(f"include_pseudo must be true or false, got {self.include_pseudo!r}")
        if not isinstance(self.log_level, str):
            raise TypeError(f"log_level must be a string, got {self.log_level!r}")
        if not isinstance(self.display, DisplayConfig):
            raise TypeError(f"display must be a mapping, got {self.display!r}")

        if self.poll_interval <= 0:
            self.poll_interval = 1.0
        if self.cpu_window <= 0:
            self.cpu_window = 1.0
        if self.warmup_window < 0:
            self.warmup_window = 0.1
