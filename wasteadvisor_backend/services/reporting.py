"""Builds the report instructions and performs the single model call."""

from __future__ import annotations

import logging
from typing import Protocol

from wasteadvisor_backend.config.llm import (
    IMAGE_SUBJECT_INSTRUCTION,
    REPORT_PROMPT_TEMPLATE,
    TEXT_SUBJECT_TEMPLATE,
)
from wasteadvisor_backend.config.messages import REPORT_REQUEST_FAILED_MESSAGE
from wasteadvisor_backend.services.encoding import ImagePayload
from wasteadvisor_backend.services.query import WasteQuery
from wasteadvisor_backend.services.segmenter import segment_report
from wasteadvisor_backend.services.status import ReportStatus

logger = logging.getLogger(__name__)


class ReportRequestError(RuntimeError):
    """Raised when the report model cannot be reached or returns nothing usable."""

    def __init__(self, message: str = REPORT_REQUEST_FAILED_MESSAGE) -> None:
        super().__init__(message)


class ReportClient(Protocol):
    def generate_report(
        self, *, prompt: str, image: ImagePayload | None = None
    ) -> str: ...


def build_report_prompt(text: str | None) -> str:
    """Return the fixed instructions followed by the subject of the analysis."""

    subject = (text or "").strip()
    if subject:
        tail = TEXT_SUBJECT_TEMPLATE.format(subject=subject)
    else:
        tail = IMAGE_SUBJECT_INSTRUCTION
    return f"{REPORT_PROMPT_TEMPLATE}\n\n{tail}"


def request_report(client: ReportClient, query: WasteQuery) -> str:
    """Ask the model for a report on ``query`` and return the raw Markdown."""

    query.validate()
    prompt = build_report_prompt(query.text)

    try:
        raw_text = client.generate_report(prompt=prompt, image=query.image)
    except Exception as exc:
        logger.exception(
            "report LLM request failed", extra={"mode": query.mode.value}
        )
        raise ReportRequestError() from exc

    if not isinstance(raw_text, str) or not raw_text.strip():
        logger.warning(
            "report LLM returned empty output", extra={"mode": query.mode.value}
        )
        raise ReportRequestError()

    return raw_text


def produce_report(
    client: ReportClient,
    query: WasteQuery,
    status: ReportStatus | None = None,
) -> tuple[ReportStatus, str | None]:
    """Run one query through the model and segmenter, tracking display state.

    Returns the final status and the raw report text (``None`` on failure).
    """

    query.validate()
    status = status or ReportStatus()
    status.begin()
    try:
        raw_text = request_report(client, query)
    except ReportRequestError as exc:
        status.fail(str(exc))
        return status, None

    report = segment_report(raw_text)
    logger.info(
        "report generated",
        extra={
            "mode": query.mode.value,
            "has_title": report.title is not None,
            "sections": len(report.sections),
        },
    )
    status.succeed(report)
    return status, raw_text
