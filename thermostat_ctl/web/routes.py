# thermostat_ctl/web/routes.py
import logging

from flask import current_app, jsonify, render_template, request
from pydantic import ValidationError

from ..client import MAX_TEMP, MIN_TEMP
from ..exceptions import DomainError, ThermostatError
from ..formatter import MODE_LABELS, format_status
from ..models import SetModeRequest, SetTemperatureRequest

logger = logging.getLogger(__name__)


def text_error(message, status_code):
    return message, status_code, {"Content-Type": "text/plain; charset=utf-8"}


def parse_body(model):
    """Validate the JSON body against a request model; None when it does not fit."""
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        return None
    try:
        return model.model_validate(data)
    except ValidationError:
        return None


def setup_routes(app):
    @app.route('/')
    def home():
        return render_template('index.html')

    @app.route('/api/status', methods=['GET'])
    def status():
        """Current thermostat status for the control page."""
        try:
            stats = current_app.thermostat.get_status()
        except ThermostatError as e:
            logger.error(f"Error fetching status: {e}")
            return text_error(str(e), 502)
        return jsonify(format_status(stats).to_dict())

    @app.route('/api/settemp', methods=['POST'])
    def set_temp():
        body = parse_body(SetTemperatureRequest)
        if body is None:
            return text_error("Invalid request", 400)

        if not MIN_TEMP <= body.temp <= MAX_TEMP:
            logger.warning(f"Rejected temperature {body.temp}")
            return text_error(f"Temperature must be between {MIN_TEMP} and {MAX_TEMP}", 400)

        try:
            current_app.thermostat.set_temperature(body.temp)
        except DomainError as e:
            logger.warning(f"Rejected temperature change: {e}")
            return text_error(str(e), 409)
        except ThermostatError as e:
            logger.error(f"Error setting temperature: {e}")
            return text_error(str(e), 502)
        return jsonify({"status": "success"})

    @app.route('/api/setmode', methods=['POST'])
    def set_mode():
        body = parse_body(SetModeRequest)
        if body is None:
            return text_error("Invalid request", 400)

        if body.mode not in MODE_LABELS:
            logger.warning(f"Rejected mode {body.mode}")
            return text_error("Mode must be 0 (Off), 1 (Heat), 2 (Cool), or 3 (Auto)", 400)

        try:
            current_app.thermostat.set_mode(body.mode)
        except ThermostatError as e:
            logger.error(f"Error setting mode: {e}")
            return text_error(str(e), 502)
        return jsonify({"status": "success"})
