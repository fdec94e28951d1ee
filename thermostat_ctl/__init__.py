"""Local-API client, CLI and web control page for Wi-Fi thermostats."""

from .client import ThermostatClient
from .exceptions import ConfigError, DecodeError, DomainError, NetworkError, ThermostatError
from .formatter import format_status
from .models import FormattedStatus, ThermostatStatus

__version__ = "1.1.0"

__all__ = [
    "ThermostatClient",
    "ThermostatStatus",
    "FormattedStatus",
    "format_status",
    "ThermostatError",
    "NetworkError",
    "DecodeError",
    "DomainError",
    "ConfigError",
]
