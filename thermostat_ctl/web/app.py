# thermostat_ctl/web/app.py
from flask import Flask

from .routes import setup_routes


def create_app(client):
    """Build the web app around a ThermostatClient.

    The client is attached to the app so routes reach it through
    ``current_app`` instead of a module-level address.
    """
    app = Flask(__name__, template_folder='templates')
    app.thermostat = client

    setup_routes(app)
    return app
