"""
UI adapters for the browser.

Currently provides a Dash-based web UI via create_dash_app().
The core never imports from here; this is the display surface only.
"""

from .dash_app import create_dash_app

__all__ = ["create_dash_app"]
