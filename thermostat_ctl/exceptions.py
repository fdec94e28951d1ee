# thermostat_ctl/exceptions.py
"""Errors raised while talking to the thermostat."""


class ThermostatError(Exception):
    """Base exception for thermostat errors."""


class NetworkError(ThermostatError):
    """The request to the device could not complete."""


class DecodeError(ThermostatError):
    """The device answered with a body that is not a valid status document."""


class DomainError(ThermostatError):
    """A command was rejected before reaching the device."""


class ConfigError(ThermostatError):
    """The thermostat address could not be resolved."""
