# thermostat_ctl/formatter.py
"""Translate raw device codes into display labels."""
from enum import IntEnum
from typing import Dict, Optional

from .models import FormattedStatus, ThermostatStatus

UNKNOWN = "Unknown"


class Mode(IntEnum):
    OFF = 0
    HEAT = 1
    COOL = 2
    AUTO = 3


class OperatingState(IntEnum):
    OFF = 0
    HEATING = 1
    COOLING = 2


MODE_LABELS: Dict[int, str] = {
    Mode.OFF: "Off",
    Mode.HEAT: "Heat",
    Mode.COOL: "Cool",
    Mode.AUTO: "Auto",
}

OPERATING_STATE_LABELS: Dict[int, str] = {
    OperatingState.OFF: "Off",
    OperatingState.HEATING: "Heating",
    OperatingState.COOLING: "Cooling",
}

# Shared by the override and hold flags
FLAG_LABELS: Dict[int, str] = {
    0: "Off",
    1: "On",
}


def mode_label(code: int) -> str:
    return MODE_LABELS.get(code, UNKNOWN)


def operating_state_label(code: int) -> str:
    return OPERATING_STATE_LABELS.get(code, UNKNOWN)


def flag_label(code: int) -> str:
    return FLAG_LABELS.get(code, UNKNOWN)


def target_temperature(status: ThermostatStatus) -> Optional[float]:
    """Return the active setpoint.

    Only one of the heat and cool setpoints is non-zero for a given mode;
    heat is checked first. None when neither is set (e.g. mode Off).
    """
    if status.heat_setpoint != 0:
        return status.heat_setpoint
    if status.cool_setpoint != 0:
        return status.cool_setpoint
    return None


def format_status(status: ThermostatStatus) -> FormattedStatus:
    return FormattedStatus(
        current_temp=status.current_temp,
        target_temp=target_temperature(status),
        mode=mode_label(status.mode),
        mode_code=status.mode,
        operating_state=operating_state_label(status.operating_state),
        override=flag_label(status.override),
        hold=flag_label(status.hold),
    )
