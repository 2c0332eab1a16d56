"""Error types raised by sysinfo."""
from typing import Optional, Sequence


class SysinfoError(Exception):
    """Base class for sysinfo errors."""


class MetricsQueryError(SysinfoError):
    """A single metric query failed; the affected display is skipped."""

    def __init__(self, metric: str, cause: BaseException, target: Optional[str] = None):
        self.metric = metric
        self.target = target
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.target:
            return f"Error fetching {self.metric} for {self.target}: {self.cause}"
        return f"Error fetching {self.metric}: {self.cause}"


class InvalidModeError(SysinfoError):
    """Requested display mode is not in the command table."""

    def __init__(self, mode: str, choices: Sequence[str]):
        self.mode = mode
        self.choices = list(choices)
        super().__init__(str(self))

    def __str__(self) -> str:
        quoted = [f"'{choice}'" for choice in self.choices]
        if len(quoted) > 1:
            options = ", ".join(quoted[:-1]) + f", or {quoted[-1]}"
        else:
            options = "".join(quoted)
        return f"Invalid option. Please use {options}."


class ConfigError(SysinfoError):
    """Configuration file could not be read or parsed."""
