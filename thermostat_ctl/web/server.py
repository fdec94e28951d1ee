# thermostat_ctl/web/server.py
import argparse
import logging
import signal
import sys

from ..client import ThermostatClient
from ..config import load_settings, resolve_thermostat_ip
from ..exceptions import ConfigError
from .app import create_app

logger = logging.getLogger(__name__)


def signal_handler(sig, frame):
    logger.info("Shutting down gracefully...")
    sys.exit(0)


def main(argv=None):
    try:
        settings = load_settings()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser = argparse.ArgumentParser(description='Thermostat web control server')
    parser.add_argument('--ip', help='Thermostat IP address (overrides the config file)')
    parser.add_argument('-c', '--config', help='Path of the JSON config file')
    parser.add_argument('--host', default=settings.WEB_HOST, help='Address to listen on')
    parser.add_argument('--port', type=int, default=settings.WEB_PORT, help='Port to run the web server on')
    args = parser.parse_args(argv)

    settings.setup_logging()
    try:
        address = resolve_thermostat_ip(settings, args.ip, args.config)
    except ConfigError as e:
        logger.critical(str(e))
        return 1

    app = create_app(ThermostatClient(address))

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)
    logger.info(f"Thermostat IP: {address}")
    logger.info(f"Starting thermostat web server on http://{args.host}:{args.port}")
    app.run(host=args.host, port=args.port, threaded=True)
    return 0


if __name__ == '__main__':
    sys.exit(main())
