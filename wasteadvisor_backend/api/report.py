"""JSON endpoint that turns a waste query into a segmented report."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, current_app, jsonify, request

from wasteadvisor_backend.api.deps import get_llm_client
from wasteadvisor_backend.config.messages import AMBIGUOUS_QUERY_MESSAGE
from wasteadvisor_backend.services.encoding import ImagePayload, payload_from_data_uri
from wasteadvisor_backend.services.query import QueryValidationError, WasteQuery
from wasteadvisor_backend.services.reporting import produce_report
from wasteadvisor_backend.services.status import ReportState, ReportStatus

bp = Blueprint("report", __name__, url_prefix="/api")


def _parse_json_image(raw_image: Any) -> ImagePayload | None:
    if raw_image is None or raw_image == "":
        return None
    if isinstance(raw_image, str):
        return payload_from_data_uri(raw_image)
    if isinstance(raw_image, dict):
        data = raw_image.get("data")
        if not isinstance(data, str):
            raise ValueError("image.data must be a string")
        mime_type = raw_image.get("mimeType") or raw_image.get("mime_type")
        return payload_from_data_uri(data, mime_type=mime_type)
    raise ValueError("image must be a data URI or an object with data and mimeType")


def _query_from_json(payload: dict[str, Any]) -> WasteQuery:
    text = payload.get("text")
    if text is not None and not isinstance(text, str):
        raise QueryValidationError("text must be a string")
    text = (text or "").strip()

    try:
        image = _parse_json_image(payload.get("image"))
    except ValueError as exc:
        raise QueryValidationError(str(exc)) from exc

    if text and image is not None:
        raise QueryValidationError(AMBIGUOUS_QUERY_MESSAGE)

    query = WasteQuery(text=text, image=image)
    query.validate()
    return query


def _serialize_status(status: ReportStatus, raw_text: str | None) -> dict[str, object]:
    report = status.report
    if report is None:
        return {"status": status.state.value, "error": status.error}

    title_html = report.title_html
    return {
        "status": status.state.value,
        "title": report.title,
        "titleHtml": str(title_html) if title_html is not None else None,
        "sections": [section.to_dict() for section in report.sections],
        "notice": status.notice,
        "raw": raw_text,
    }


@bp.post("/report")
def create_report():
    """Generate a report for a text description or an inline image."""

    try:
        if request.is_json:
            payload = request.get_json(silent=True)
            if not isinstance(payload, dict):
                return jsonify(error="request body must be a JSON object"), 400
            query = _query_from_json(payload)
        else:
            query = WasteQuery.from_request(request.form, request.files)
    except QueryValidationError as exc:
        return jsonify(error=str(exc)), 400

    try:
        client = get_llm_client()
    except RuntimeError as exc:
        return jsonify(error=str(exc)), 503

    status, raw_text = produce_report(client, query)
    if status.state is ReportState.ERROR:
        current_app.logger.warning(
            "report request failed", extra={"mode": query.mode.value}
        )
        return jsonify(_serialize_status(status, raw_text)), 502

    return jsonify(_serialize_status(status, raw_text))
