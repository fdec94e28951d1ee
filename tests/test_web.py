# tests/test_web.py
import json
from unittest.mock import MagicMock

import pytest

from thermostat_ctl.exceptions import DecodeError, DomainError, NetworkError
from thermostat_ctl.models import ThermostatStatus
from thermostat_ctl.web import create_app


@pytest.fixture
def thermostat():
    return MagicMock()


@pytest.fixture
def client(thermostat):
    app = create_app(thermostat)
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def post_json(client, url, payload):
    return client.post(url, data=json.dumps(payload), content_type='application/json')


def test_home_page(client):
    response = client.get('/')
    assert response.status_code == 200
    assert 'Thermostat Control' in response.get_data(as_text=True)


def test_status(client, thermostat, cooling_status):
    thermostat.get_status.return_value = cooling_status

    response = client.get('/api/status')

    assert response.status_code == 200
    data = json.loads(response.get_data(as_text=True))
    assert data == {
        "currentTemp": 71.5,
        "targetTemp": 68,
        "mode": "Cool",
        "modeCode": 2,
        "operatingState": "Cooling",
        "override": "Off",
        "hold": "On",
    }


def test_status_without_target(client, thermostat):
    thermostat.get_status.return_value = ThermostatStatus(temp=70, tmode=0)

    data = json.loads(client.get('/api/status').get_data(as_text=True))

    assert data["targetTemp"] is None
    assert data["mode"] == "Off"


@pytest.mark.parametrize("error", [NetworkError("unreachable"), DecodeError("garbage")])
def test_status_device_failure(client, thermostat, error):
    thermostat.get_status.side_effect = error

    response = client.get('/api/status')

    assert response.status_code == 502
    assert response.mimetype == 'text/plain'
    assert response.get_data(as_text=True) == str(error)


def test_set_temp(client, thermostat):
    response = post_json(client, '/api/settemp', {"temp": 68})

    assert response.status_code == 200
    assert json.loads(response.get_data(as_text=True)) == {"status": "success"}
    thermostat.set_temperature.assert_called_once_with(68)


@pytest.mark.parametrize("payload", [{}, {"temp": "70"}, {"temp": 70.5}, {"mode": 1}, [70]])
def test_set_temp_invalid_body(client, thermostat, payload):
    response = post_json(client, '/api/settemp', payload)

    assert response.status_code == 400
    assert response.get_data(as_text=True) == "Invalid request"
    thermostat.set_temperature.assert_not_called()


def test_set_temp_not_json(client, thermostat):
    response = client.post('/api/settemp', data="temp=70", content_type='application/x-www-form-urlencoded')
    assert response.status_code == 400
    assert response.get_data(as_text=True) == "Invalid request"
    thermostat.set_temperature.assert_not_called()


def test_set_temp_json_body_without_content_type(client, thermostat):
    response = client.post('/api/settemp', data=json.dumps({"temp": 70}))

    assert response.status_code == 200
    thermostat.set_temperature.assert_called_once_with(70)


def test_set_mode_json_body_with_form_content_type(client, thermostat):
    response = client.post('/api/setmode', data=json.dumps({"mode": 2}),
                           content_type='application/x-www-form-urlencoded')

    assert response.status_code == 200
    thermostat.set_mode.assert_called_once_with(2)


@pytest.mark.parametrize("temp", [49, 91])
def test_set_temp_out_of_range(client, thermostat, temp):
    response = post_json(client, '/api/settemp', {"temp": temp})

    assert response.status_code == 400
    assert response.get_data(as_text=True) == "Temperature must be between 50 and 90"
    thermostat.set_temperature.assert_not_called()


def test_set_temp_wrong_mode(client, thermostat):
    thermostat.set_temperature.side_effect = DomainError(
        "Thermostat must be in heat or cool mode to set temperature"
    )

    response = post_json(client, '/api/settemp', {"temp": 70})

    assert response.status_code == 409
    assert "heat or cool" in response.get_data(as_text=True)


def test_set_temp_device_failure(client, thermostat):
    thermostat.set_temperature.side_effect = NetworkError("unreachable")

    response = post_json(client, '/api/settemp', {"temp": 70})

    assert response.status_code == 502


def test_set_temp_requires_post(client):
    assert client.get('/api/settemp').status_code == 405


def test_set_mode(client, thermostat):
    response = post_json(client, '/api/setmode', {"mode": 1})

    assert response.status_code == 200
    assert json.loads(response.get_data(as_text=True)) == {"status": "success"}
    thermostat.set_mode.assert_called_once_with(1)


@pytest.mark.parametrize("mode", [-1, 4])
def test_set_mode_out_of_range(client, thermostat, mode):
    response = post_json(client, '/api/setmode', {"mode": mode})

    assert response.status_code == 400
    assert response.get_data(as_text=True) == "Mode must be 0 (Off), 1 (Heat), 2 (Cool), or 3 (Auto)"
    thermostat.set_mode.assert_not_called()


def test_set_mode_invalid_body(client, thermostat):
    response = post_json(client, '/api/setmode', {"mode": "cool"})
    assert response.status_code == 400
    thermostat.set_mode.assert_not_called()


def test_set_mode_device_failure(client, thermostat):
    thermostat.set_mode.side_effect = NetworkError("unreachable")

    response = post_json(client, '/api/setmode', {"mode": 2})

    assert response.status_code == 502
    assert response.get_data(as_text=True) == "unreachable"


def test_apps_do_not_share_a_thermostat():
    first, second = MagicMock(), MagicMock()
    first.get_status.return_value = ThermostatStatus(temp=60)
    second.get_status.return_value = ThermostatStatus(temp=80)

    first_data = create_app(first).test_client().get('/api/status').get_json()
    second_data = create_app(second).test_client().get('/api/status').get_json()

    assert first_data["currentTemp"] == 60
    assert second_data["currentTemp"] == 80
