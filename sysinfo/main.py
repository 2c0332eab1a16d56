"""Main entry point for the sysinfo command-line tool."""
import argparse
import logging
from typing import List, Optional

from . import __version__
from .collectors.system_collector import SystemCollector
from .commands import (
    EXIT_FAILURE,
    CommandContext,
    build_commands,
    build_info_modes,
    dispatch,
)
from .config.config_manager import ConfigManager
from .core.errors import ConfigError
from .ui.display_manager import DisplayManager
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_INFO_MODE = "cpu"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with both the --info flag and subcommands."""
    parser = argparse.ArgumentParser(
        prog="sysinfo",
        description="A CLI tool to display system information",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-i", "--info", default=None,
        help="Specify the system information to display (cpu, memory, disk); "
             "defaults to cpu and cannot be combined with a subcommand",
    )
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--height", type=int, default=None, help="Graph height in rows")
    parser.add_argument("--no-pseudo", action="store_true", help="Skip pseudo filesystems")
    parser.add_argument("--log-level", default=None)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    for command in build_commands().values():
        sub = subparsers.add_parser(command.name, help=command.help)
        if command.name == "cpu":
            sub.add_argument("--interval", type=float, default=None, help="Seconds between updates")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command and args.info is not None:
        parser.error("--info cannot be combined with a subcommand")

    try:
        config = ConfigManager.load_config(args.config)
    except ConfigError as e:
        # Display is not configured yet; plain print keeps errors on stdout
        print(e)
        return EXIT_FAILURE
    config = ConfigManager.apply_overrides(config, args)
    setup_logging(config.log_level)
    logger.debug("Configuration: %s", config)

    display = DisplayManager(config)
    ctx = CommandContext(config=config, collector=SystemCollector(config), display=display)

    if args.command:
        return dispatch(build_commands(), args.command, ctx)
    mode = DEFAULT_INFO_MODE if args.info is None else args.info
    return dispatch(build_info_modes(), mode, ctx)


if __name__ == "__main__":
    raise SystemExit(main())
