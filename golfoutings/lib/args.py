import argparse
import logging
import os
from pathlib import Path

from golfoutings.config import ConfigType

LOG_LEVEL = logging.INFO
CONFIG_NAMES = [c.name.lower() for c in ConfigType]


def log_level_type(input):
    """Accept a logging level as a name (`debug`) or its int value (`10`)"""
    if str(input).lstrip("-").isdigit():
        return int(input)

    level = logging.getLevelName(str(input).upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"Unknown log level '{input}'")
    return level


def port_type(input):
    """Verify the port input"""
    try:
        port = int(input)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Port must be an integer, but got '{input}'")

    if port < 1 or port > 65535:
        raise argparse.ArgumentTypeError(f"Port must be between 1 and 65535, but got {port}")

    return port


class ArgsNamespace(argparse.Namespace):
    """Provides typehints to the input args"""

    port: int | None
    db_file: str | None
    log_level: int
    log_dir: Path | None
    admin_user: str | None
    admin_pass: str | None
    config: str


def parse_golfoutings_args(argv: list[str] | None = None) -> ArgsNamespace:
    """Parse CLI args. Unset values fall back to the environment-driven config."""
    parser = argparse.ArgumentParser(
        prog="golfoutings", description="Golf outing signups and admin notifications"
    )

    parser.add_argument(
        "-p",
        "--port",
        help="Desired http port (default: PORT env var, else 3000)",
        type=port_type,
        default=None,
        required=False,
    )
    parser.add_argument(
        "--db-file",
        help="Path of the JSON record store. Relative paths are placed in the data directory. (default: DB_FILE env var, else db.json)",
        default=None,
        required=False,
    )
    parser.add_argument(
        "-l",
        "--log-level",
        help=f"Logging level, as a name or int value (DEBUG: 10, INFO: 20, WARNING: 30, ERROR: 40, CRITICAL: 50). (default: {LOG_LEVEL})",
        type=log_level_type,
        default=LOG_LEVEL,
        required=False,
    )
    parser.add_argument(
        "--log-dir",
        help="Directory for log files (default: logs/ in the data directory)",
        type=Path,
        default=None,
        required=False,
    )
    parser.add_argument(
        "--admin-user",
        help="Administrator username (default: ADMIN_USER env var, else admin)",
        default=None,
        required=False,
    )
    parser.add_argument(
        "--admin-pass",
        help="Administrator password (default: ADMIN_PASS env var, else admin)",
        default=None,
        required=False,
    )
    parser.add_argument(
        "--config",
        help="Configuration profile to run with (default: production)",
        choices=CONFIG_NAMES,
        default=os.environ.get("GOLFOUTINGS_CONFIG", "production"),
        required=False,
    )

    return parser.parse_args(argv, namespace=ArgsNamespace())


def config_overrides(args: ArgsNamespace) -> dict:
    """Map explicitly passed CLI args onto Flask config keys."""
    overrides = {
        "PORT": args.port,
        "DB_FILE": args.db_file,
        "ADMIN_USER": args.admin_user,
        "ADMIN_PASS": args.admin_pass,
    }
    return {key: value for key, value in overrides.items() if value is not None}
