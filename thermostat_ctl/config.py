# thermostat_ctl/config.py
"""
Configuration for the thermostat CLI and web server.

The thermostat address is resolved in this order:
    1. THERMOSTAT_IP environment variable
    2. --ip command line flag
    3. "ThermostatIP" in the JSON config file (~/.config/thermostat/config.json)
"""
import json
import logging
import os
from typing import Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = os.path.join(os.path.expanduser("~"), ".config", "thermostat", "config.json")
CONFIG_FILE_KEY = "ThermostatIP"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Device
    THERMOSTAT_IP: Optional[str] = None
    THERMOSTAT_CONFIG: str = DEFAULT_CONFIG_FILE

    # Web server
    WEB_HOST: str = "0.0.0.0"
    WEB_PORT: int = 8080

    LOG_LEVEL: str = "INFO"

    def setup_logging(self, level: Optional[str] = None):
        logging.basicConfig(
            level=getattr(logging, (level or self.LOG_LEVEL).upper(), logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )


def load_settings(**kwargs) -> Settings:
    """Build Settings, reporting a malformed variable as a ConfigError."""
    try:
        return Settings(**kwargs)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings: {e}") from e


def load_config_file(path: str) -> Optional[str]:
    """Return the address stored in a config file, or None if the file does not exist."""
    if not os.path.exists(path):
        logger.debug(f"Config file {path} not found")
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Error reading config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")
    address = data.get(CONFIG_FILE_KEY)
    if address is not None and not isinstance(address, str):
        raise ConfigError(f"'{CONFIG_FILE_KEY}' in {path} must be a string")
    return address or None


def resolve_thermostat_ip(settings: Settings, ip_flag: Optional[str] = None,
                          config_file: Optional[str] = None) -> str:
    if settings.THERMOSTAT_IP:
        return settings.THERMOSTAT_IP
    if ip_flag:
        return ip_flag

    address = load_config_file(config_file or settings.THERMOSTAT_CONFIG)
    if not address:
        raise ConfigError(
            "Thermostat IP not configured. Set THERMOSTAT_IP environment variable, "
            "use --ip flag, or configure ThermostatIP in the config file"
        )
    return address
