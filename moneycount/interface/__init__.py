"""Mini README: Interfaces for the Moneycount widgets.

Exports the FastAPI application factory. ``view`` holds the render
projections and event mapping shared by the HTML page and the JSON API.
"""

from .web_app import create_application

__all__ = ["create_application"]
