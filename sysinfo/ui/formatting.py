"""Human-readable formatting of raw metric values."""

BYTE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB")
UNIT = 1024


def format_byte_size(num_bytes: int) -> str:
    """Scale a byte count to the largest base-1024 unit below 1024.

    Plain bytes print as an integer, every other unit with one decimal.
    """
    num_bytes = int(num_bytes)
    if num_bytes < 0:
        raise ValueError(f"Byte count cannot be negative: {num_bytes}")
    if num_bytes < UNIT:
        return f"{num_bytes} B"

    exp = 1
    div = UNIT
    while num_bytes // div >= UNIT and exp < len(BYTE_UNITS) - 1:
        div *= UNIT
        exp += 1

    value = num_bytes / div
    # 1023.96 KB would print as "1024.0 KB"
    if round(value, 1) >= UNIT and exp < len(BYTE_UNITS) - 1:
        value /= UNIT
        exp += 1
    return f"{value:.1f} {BYTE_UNITS[exp]}"


def format_percent(value: float) -> str:
    """Format a percentage with two decimals."""
    return f"{value:.2f}%"


def format_gigabytes(num_bytes: int) -> str:
    """Format a byte count as gigabytes with two decimals."""
    return f"{num_bytes / UNIT ** 3:.2f} GB"


def make_progress_bar(value: float, width: int = 15) -> str:
    """Simple text progress bar for a 0-100 percentage."""
    clamped = max(0.0, min(100.0, value))
    filled = int(clamped * width / 100)
    bar = "█" * filled + "░" * (width - filled)
    return f"[{bar}] {value:5.1f}%"
