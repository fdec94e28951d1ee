# thermostat_ctl/cli.py
import argparse
import json
import logging
import sys

from .client import MAX_TEMP, MIN_TEMP, ThermostatClient
from .config import load_settings, resolve_thermostat_ip
from .exceptions import ConfigError, ThermostatError
from .formatter import MODE_LABELS, Mode, format_status

logger = logging.getLogger(__name__)


def parse_mode(value):
    """Accept a mode name (off/heat/cool/auto) or its numeric code."""
    name = value.strip().upper()
    if name in Mode.__members__:
        return Mode[name]
    try:
        code = int(name)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid mode: {value!r}")
    if code not in MODE_LABELS:
        raise argparse.ArgumentTypeError(f"mode must be between 0 and 3, got {code}")
    return Mode(code)


def build_parser():
    parser = argparse.ArgumentParser(description='Read and control a Wi-Fi thermostat over its local API')
    parser.add_argument('--ip', help='Thermostat IP address (overrides the config file)')
    parser.add_argument('-c', '--config', help='Path of the JSON config file')
    parser.add_argument('-t', '--temp', type=int, help=f'Target temperature to set ({MIN_TEMP}-{MAX_TEMP} F)')
    parser.add_argument('-m', '--mode', type=parse_mode, help='Operating mode: off, heat, cool or auto')
    parser.add_argument('--json', action='store_true', help='Print the status as JSON')
    parser.add_argument('--log-level', help='Logging level (defaults to LOG_LEVEL or WARNING)')
    return parser


def run(args, settings):
    address = resolve_thermostat_ip(settings, args.ip, args.config)
    client = ThermostatClient(address)

    # Mode first so a temperature in the same call targets the new mode
    if args.mode is not None:
        client.set_mode(args.mode)
        print(f"Set Mode to {MODE_LABELS[args.mode]}")

    if args.temp is not None:
        client.set_temperature(args.temp)
        print(f"Set Temp to {args.temp}")

    if args.mode is None and args.temp is None:
        status = format_status(client.get_status())
        if args.json:
            print(json.dumps(status.to_dict(), indent=2))
        else:
            print("\n".join(status.lines()))


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    settings.setup_logging(args.log_level or default_log_level(settings))

    try:
        run(args, settings)
    except ThermostatError as e:
        logger.debug(f"Command failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def default_log_level(settings):
    """Only warnings and errors on the console unless LOG_LEVEL is set."""
    return settings.LOG_LEVEL if "LOG_LEVEL" in settings.model_fields_set else "WARNING"


if __name__ == '__main__':
    sys.exit(main())
