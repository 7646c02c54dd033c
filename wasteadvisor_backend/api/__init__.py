"""API package wiring for the waste advisor backend."""

from flask import Flask

from .pages import bp as pages_bp
from .report import bp as report_bp


def init_app(app: Flask) -> None:
    """Register all blueprints on the given application."""

    app.register_blueprint(pages_bp)
    app.register_blueprint(report_bp)
