"""Shared API dependencies and helpers."""

from flask import current_app

from wasteadvisor_backend.services.reporting import ReportClient


def get_llm_client() -> ReportClient:
    """Return the report LLM client configured on the application."""

    client: ReportClient | None = current_app.extensions.get("report_llm_client")
    if client is None:
        raise RuntimeError("report LLM client is not configured")
    return client
