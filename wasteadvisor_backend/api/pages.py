"""Server-rendered page with the input form and the report cards."""

from __future__ import annotations

from flask import Blueprint, current_app, render_template, request

from wasteadvisor_backend.api.deps import get_llm_client
from wasteadvisor_backend.config.messages import UPLOAD_TOO_LARGE_MESSAGE
from wasteadvisor_backend.services.query import QueryValidationError, WasteQuery
from wasteadvisor_backend.services.reporting import produce_report
from wasteadvisor_backend.services.status import ReportStatus

bp = Blueprint("pages", __name__)


def _handle_submission() -> tuple[ReportStatus, str | None, int]:
    """Run the submitted form; returns ``(status, validation_error, http_status)``."""

    try:
        query = WasteQuery.from_request(request.form, request.files)
    except QueryValidationError as exc:
        return ReportStatus(), str(exc), 400

    try:
        client = get_llm_client()
    except RuntimeError:
        current_app.logger.exception("report page submitted without an LLM client")
        raise

    status, _ = produce_report(client, query)
    return status, None, 200


@bp.get("/")
def index():
    return render_template("index.html", status=ReportStatus(), validation_error=None)


@bp.post("/")
def submit():
    """Form fallback for browsers without JavaScript: re-render the whole page."""

    status, validation_error, code = _handle_submission()
    return (
        render_template(
            "index.html", status=status, validation_error=validation_error
        ),
        code,
    )


@bp.post("/partials/report")
def report_fragment():
    """Return only the results area; the page script swaps it in place."""

    status, validation_error, code = _handle_submission()
    return (
        render_template(
            "_results.html", status=status, validation_error=validation_error
        ),
        code,
    )


@bp.errorhandler(413)
def upload_too_large(_exc):
    """Report an oversized photo inline, in the same shape the page expects."""

    current_app.logger.warning(
        "report upload rejected as too large",
        extra={"limit": current_app.config.get("MAX_CONTENT_LENGTH")},
    )
    template = (
        "_results.html"
        if request.endpoint == "pages.report_fragment"
        else "index.html"
    )
    return (
        render_template(
            template,
            status=ReportStatus(),
            validation_error=UPLOAD_TOO_LARGE_MESSAGE,
        ),
        413,
    )
