# tests/conftest.py
import pytest

from thermostat_ctl.models import ThermostatStatus

COOLING_PAYLOAD = {
    "temp": 71.5,
    "tmode": 2,
    "fmode": 0,
    "override": 0,
    "hold": 1,
    "t_cool": 68,
    "tstate": 2,
    "fstate": 1,
    "time": {"day": 3, "hour": 14, "minute": 5},
    "t_type_post": 0,
}


@pytest.fixture
def cooling_payload():
    return dict(COOLING_PAYLOAD)


@pytest.fixture
def cooling_status():
    return ThermostatStatus.model_validate(COOLING_PAYLOAD)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's own thermostat settings out of the tests."""
    for name in ("THERMOSTAT_IP", "THERMOSTAT_CONFIG", "LOG_LEVEL", "WEB_HOST", "WEB_PORT"):
        monkeypatch.delenv(name, raising=False)
