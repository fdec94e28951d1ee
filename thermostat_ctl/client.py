# thermostat_ctl/client.py
import logging
from typing import Optional

import requests
from pydantic import ValidationError

from .exceptions import DecodeError, DomainError, NetworkError
from .formatter import MODE_LABELS, Mode, mode_label
from .models import ThermostatStatus

logger = logging.getLogger(__name__)

MIN_TEMP = 50
MAX_TEMP = 90

# Setpoint field to write for each mode that accepts a target temperature
SETPOINT_FIELDS = {
    Mode.HEAT: "t_heat",
    Mode.COOL: "t_cool",
}


class ThermostatClient:
    """Talks to the thermostat's local ``/tstat`` endpoint.

    Every call is a single blocking request/response; nothing is cached or
    retried. The instance holds no state besides the address and the
    transport, so one client can serve concurrent web requests.
    """

    def __init__(self, address: str, session: Optional[requests.Session] = None):
        self.address = address
        self.url = f"http://{address}/tstat"
        self.session = session or requests.Session()

    def get_status(self) -> ThermostatStatus:
        """Fetch and decode the current status."""
        logger.debug(f"Polling {self.url}")
        try:
            response = self.session.get(self.url)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to reach thermostat at {self.address}: {e}")
            raise NetworkError(f"Failed to reach thermostat at {self.address}: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(f"Thermostat returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError("Thermostat status must be a JSON object")
        try:
            return ThermostatStatus.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"Unexpected thermostat status: {e}") from e

    def set_temperature(self, temp: int) -> None:
        """Set the target temperature for the current mode.

        The thermostat must be in Heat or Cool; Off and Auto have no single
        setpoint to write.
        """
        if not MIN_TEMP <= temp <= MAX_TEMP:
            raise DomainError(f"Temperature must be between {MIN_TEMP} and {MAX_TEMP}")

        status = self.get_status()
        field = SETPOINT_FIELDS.get(status.mode)
        if field is None:
            raise DomainError(
                f"Thermostat must be in heat or cool mode to set temperature "
                f"(current mode: {mode_label(status.mode)})"
            )

        self._post({"tmode": status.mode, field: temp})
        logger.info(f"Set {mode_label(status.mode).lower()} setpoint to {temp}")

    def set_mode(self, mode: int) -> None:
        if mode not in MODE_LABELS:
            raise DomainError("Mode must be 0 (Off), 1 (Heat), 2 (Cool), or 3 (Auto)")

        self._post({"tmode": int(mode)})
        logger.info(f"Set mode to {mode_label(mode)}")

    def _post(self, payload: dict) -> None:
        """POST a command; the device's reply body is not used."""
        logger.debug(f"Sending {payload} to {self.url}")
        try:
            response = self.session.post(self.url, json=payload)
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to send command to thermostat at {self.address}: {e}")
            raise NetworkError(f"Failed to send command to thermostat at {self.address}: {e}") from e

        if not response.ok:
            logger.warning(f"Thermostat answered command with status {response.status_code}")
        response.close()
