"""Command table and display routines for each mode."""
import contextlib
import logging
import signal
import threading
from dataclasses import dataclass
from typing import Callable, Dict

from .collectors.system_collector import SystemCollector
from .config.config import Config
from .core.errors import InvalidModeError, MetricsQueryError
from .core.poller import CpuPoller
from .ui.display_manager import DisplayManager

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


@dataclass
class CommandContext:
    """Everything a display routine needs for one invocation."""
    config: Config
    collector: SystemCollector
    display: DisplayManager


@dataclass(frozen=True)
class Command:
    """A named display routine."""
    name: str
    help: str
    run: Callable[[CommandContext], int]


CommandTable = Dict[str, Command]


# Graph snapshots (--info)

def show_cpu_snapshot(ctx: CommandContext) -> int:
    try:
        sample = ctx.collector.sample_cpu(ctx.config.cpu_window, per_core=True)
    except MetricsQueryError as e:
        ctx.display.show_error(e)
        return EXIT_OK
    ctx.display.show_cpu_graph(sample)
    return EXIT_OK


def show_memory_snapshot(ctx: CommandContext) -> int:
    try:
        sample = ctx.collector.sample_memory()
    except MetricsQueryError as e:
        ctx.display.show_error(e)
        return EXIT_OK
    ctx.display.show_memory_graph(sample)
    return EXIT_OK


def show_disk_snapshot(ctx: CommandContext) -> int:
    _report_disks(ctx, ctx.display.show_disk_graph)
    return EXIT_OK


# Subcommands

def watch_cpu(ctx: CommandContext) -> int:
    """Print CPU usage every poll interval until SIGINT or SIGTERM."""
    stop = threading.Event()
    poller = CpuPoller(ctx.config, ctx.collector, ctx.display)
    with stop_on_signals(stop):
        poller.run(stop)
    return EXIT_OK


def show_memory_summary(ctx: CommandContext) -> int:
    try:
        sample = ctx.collector.sample_memory()
    except MetricsQueryError as e:
        ctx.display.show_error(e)
        return EXIT_OK
    ctx.display.show_memory_summary(sample)
    return EXIT_OK


def show_diskspace_summary(ctx: CommandContext) -> int:
    _report_disks(ctx, ctx.display.show_disk_summary)
    return EXIT_OK


def _report_disks(ctx: CommandContext, show: Callable):
    """Show every readable partition; failures are reported and skipped."""
    try:
        for item in ctx.collector.sample_disks(ctx.config.include_pseudo):
            if isinstance(item, MetricsQueryError):
                ctx.display.show_error(item)
            else:
                show(item)
    except MetricsQueryError as e:
        ctx.display.show_error(e)


@contextlib.contextmanager
def stop_on_signals(stop: threading.Event):
    """Set ``stop`` on SIGINT/SIGTERM for the duration of the block."""
    def handler(signum, frame):
        stop.set()

    previous = {sig: signal.signal(sig, handler) for sig in STOP_SIGNALS}
    try:
        yield stop
    finally:
        for sig, old_handler in previous.items():
            signal.signal(sig, old_handler)


def build_info_modes() -> CommandTable:
    """Modes selectable with --info; each prints one graph snapshot."""
    commands = [
        Command("cpu", "Per-core CPU usage graph", show_cpu_snapshot),
        Command("memory", "Memory usage graph", show_memory_snapshot),
        Command("disk", "Disk usage graph per partition", show_disk_snapshot),
    ]
    return {command.name: command for command in commands}


def build_commands() -> CommandTable:
    """Subcommands."""
    commands = [
        Command("cpu", "Display and continuously update CPU usage in percentage", watch_cpu),
        Command("memory", "Display memory usage in GB", show_memory_summary),
        Command("diskspace", "Display disk space usage", show_diskspace_summary),
    ]
    return {command.name: command for command in commands}


def resolve(table: CommandTable, name: str) -> Command:
    try:
        return table[name]
    except KeyError:
        raise InvalidModeError(name, list(table)) from None


def dispatch(table: CommandTable, name: str, ctx: CommandContext) -> int:
    """Run the command called ``name``; unknown names print guidance and exit 2."""
    try:
        command = resolve(table, name)
    except InvalidModeError as e:
        logger.debug("Rejected mode %r", name)
        ctx.display.show_error(e)
        return EXIT_USAGE
    logger.debug("Dispatching to %s", command.name)
    return command.run(ctx)
