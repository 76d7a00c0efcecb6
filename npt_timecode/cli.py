"""
Command-line interface for NPT timecodes
"""
import argparse
import logging
import math
import sys

from .config import Config
from .core import number_text
from .errors import ConfigError, TimecodeError
from .timecode import Time, Timecode

logger = logging.getLogger(__name__)


def parse_timecode(text):
    """Parse CLI text into a ``Timecode`` (single value or ``start-stop``)."""
    return Timecode.from_input(text)


def require_valid(timecode, text):
    """Raise ``TimecodeError`` unless one end of ``timecode`` is usable."""
    if not (timecode.start.is_valid or timecode.stop.is_valid):
        raise TimecodeError(f"Invalid NPT timecode: {text!r}")
    return timecode


def format_value(value):
    """Text for a derived timecode value: ``now``, ``''`` for NaN, else a number."""
    if value == Time.NOW:
        return 'now'
    if math.isnan(value):
        return ''
    return number_text(value)


def cmd_show(args, config):
    timecode = require_valid(parse_timecode(args.input), args.input)
    text = timecode.to_string(config.resolve_format())
    if not text:
        raise TimecodeError(f"Nothing to show for {args.input!r}")
    print(text)


def cmd_value(args, config):
    timecode = require_valid(parse_timecode(args.input), args.input)
    text = format_value(timecode.value_of())
    if not text:
        raise TimecodeError(f"No value for {args.input!r}")
    print(text)


def cmd_breakdown(args, config):
    timecode = require_valid(parse_timecode(args.input), args.input)
    time = timecode.start if timecode.start.is_valid else timecode.stop
    computed = None if time.is_now else time.computed
    if computed is None:
        raise TimecodeError(f"No breakdown for {args.input!r}")
    for name, value in computed.as_dict().items():
        print(f"{name}: {number_text(value)}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog='npt-timecode',
        description='Parse and format Normal Play Time (RFC 2326) timecodes',
    )
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('--log-level', type=str, help='Logging level (DEBUG, INFO, WARNING, ...)')
    subparsers = parser.add_subparsers(dest='command')
    subparsers.required = True

    show = subparsers.add_parser('show', help='Print a timecode or range in the given format')
    show.add_argument('input', help="NPT value or range, e.g. '00:01:30.5', 'now-', '30-90'")
    show.add_argument('--format', type=str,
                      help="Format preset name from the config (e.g. 'short') or a format such as 'hh:mm:ss', 'S'")
    show.set_defaults(handler=cmd_show)

    value = subparsers.add_parser('value', help='Print the duration of a range or the instant in seconds')
    value.add_argument('input')
    value.set_defaults(handler=cmd_value)

    breakdown = subparsers.add_parser('breakdown', help='Print hours/minutes/seconds/milliseconds')
    breakdown.add_argument('input')
    breakdown.set_defaults(handler=cmd_breakdown)

    return parser


def main(argv=None):
    """CLI entry point; returns the process exit code"""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = Config(config_file=args.config or Config.find_default_file())
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    # CLI arguments take precedence over the configuration file
    config.update_from_args({
        'format': getattr(args, 'format', None),
        'log_level': args.log_level,
    })

    # Minimal logging setup; modules use logging for diagnostics.
    level = logging.getLevelName(str(config.get('log_level', 'WARNING')).upper())
    logging.basicConfig(level=level if isinstance(level, int) else logging.WARNING)

    try:
        args.handler(args, config)
    except TimecodeError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
