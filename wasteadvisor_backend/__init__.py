import logging
import os
from typing import Any, Mapping

from flask import Flask, jsonify

from wasteadvisor_backend.api import init_app as init_api
from wasteadvisor_backend.config import DEFAULT_LLM_MODEL
from wasteadvisor_backend.services.llm import (
    ReportLLMSettings,
    init_report_llm_client,
)
from wasteadvisor_backend.services.reporting import ReportClient

DEFAULT_MAX_UPLOAD_MB = 10


def create_app(
    overrides: Mapping[str, Any] | None = None,
    *,
    llm_client: ReportClient | None = None,
) -> Flask:
    """Application factory for the waste advisor backend."""
    app = Flask(__name__)

    _configure_logging(app)

    app.config["LLM_API_KEY"] = os.environ.get(
        "WASTEADVISOR_LLM_API_KEY"
    ) or os.environ.get("OPENAI_API_KEY")
    app.config["LLM_MODEL"] = os.environ.get(
        "WASTEADVISOR_LLM_MODEL", DEFAULT_LLM_MODEL
    )
    app.config["MAX_CONTENT_LENGTH"] = (
        _read_max_upload_mb(app) * 1024 * 1024
    )
    if overrides:
        app.config.update(overrides)

    if llm_client is None:
        llm_client = _init_llm_client(app)
    app.extensions["report_llm_client"] = llm_client

    @app.get("/healthz")
    def healthcheck():
        return jsonify(status="ok")

    @app.get("/api/healthz")
    def api_healthcheck():
        return jsonify(status="ok")

    @app.errorhandler(413)
    def upload_too_large(_exc):
        return jsonify(error="uploaded file is too large"), 413

    init_api(app)

    return app


def _configure_logging(app: Flask) -> None:
    """Ensure application and root loggers emit INFO-level logs."""

    logging.basicConfig(level=logging.INFO)
    logging.getLogger().setLevel(logging.INFO)
    app.logger.setLevel(logging.INFO)


def _read_max_upload_mb(app: Flask) -> int:
    raw_value = os.environ.get("WASTEADVISOR_MAX_UPLOAD_MB")
    if not raw_value:
        return DEFAULT_MAX_UPLOAD_MB
    try:
        value = int(raw_value)
    except ValueError:
        app.logger.warning(
            "invalid WASTEADVISOR_MAX_UPLOAD_MB=%s; using %s",
            raw_value,
            DEFAULT_MAX_UPLOAD_MB,
        )
        return DEFAULT_MAX_UPLOAD_MB
    return value if value > 0 else DEFAULT_MAX_UPLOAD_MB


def _init_llm_client(app: Flask) -> ReportClient:
    """Build the report client; the API key is mandatory."""

    api_key = app.config.get("LLM_API_KEY")
    if not api_key:
        raise RuntimeError(
            "WASTEADVISOR_LLM_API_KEY/OPENAI_API_KEY is not set; "
            "the report model cannot be reached"
        )

    app.logger.info(
        "report LLM client configured", extra={"model": app.config["LLM_MODEL"]}
    )
    return init_report_llm_client(
        ReportLLMSettings(api_key=api_key, model=app.config["LLM_MODEL"])
    )
