# thermostat_ctl/models.py
"""Pydantic models for the device status document and the web request bodies."""
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class DeviceTime(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    day: int = 0
    hour: int = 0
    minute: int = 0


class ThermostatStatus(BaseModel):
    """Status document returned by ``GET /tstat``.

    The device leaves out whichever setpoint does not apply to the current
    mode, so every field defaults to zero. Unknown keys are ignored.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True)

    current_temp: float = Field(0.0, alias="temp")
    mode: int = Field(0, alias="tmode")
    fan_mode: int = Field(0, alias="fmode")
    override: int = 0
    hold: int = 0
    heat_setpoint: float = Field(0.0, alias="t_heat")
    cool_setpoint: float = Field(0.0, alias="t_cool")
    operating_state: int = Field(0, alias="tstate")
    fan_state: int = Field(0, alias="fstate")
    time: DeviceTime = Field(default_factory=DeviceTime)
    target_type_post: int = Field(0, alias="t_type_post")


# Request bodies for the web API
class SetTemperatureRequest(BaseModel):
    temp: StrictInt


class SetModeRequest(BaseModel):
    mode: StrictInt


def format_number(value: float) -> str:
    """Shortest decimal form without an exponent: 68.0 -> '68', 71.5 -> '71.5', 1e-05 -> '0.00001'."""
    if float(value).is_integer():
        return str(int(value))
    return format(Decimal(repr(float(value))), "f")


@dataclass(frozen=True)
class FormattedStatus:
    """Human-readable view of a ThermostatStatus."""
    current_temp: float
    target_temp: Optional[float]
    mode: str
    mode_code: int
    operating_state: str
    override: str
    hold: str

    @property
    def target_temp_text(self) -> str:
        if self.target_temp is None:
            return "Unknown"
        return format_number(self.target_temp)

    def to_dict(self) -> dict:
        """Web API representation."""
        return {
            'currentTemp': self.current_temp,
            'targetTemp': self.target_temp,
            'mode': self.mode,
            'modeCode': self.mode_code,
            'operatingState': self.operating_state,
            'override': self.override,
            'hold': self.hold,
        }

    def lines(self) -> List[str]:
        """CLI representation, one fact per line."""
        return [
            f"Thermostat Mode = {self.mode}",
            f"Current Temp = {format_number(self.current_temp)}",
            f"Target Temp = {self.target_temp_text}",
            f"Operating Status = {self.operating_state}",
            f"Override {self.override}",
            f"Manual Hold {self.hold}",
        ]
