"""Display state for one report request."""

from __future__ import annotations

from enum import Enum

from wasteadvisor_backend.config.messages import UNPROCESSABLE_REPORT_NOTICE
from wasteadvisor_backend.services.segmenter import SegmentedReport


class ReportState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"
    SUCCESS = "success"


class ReportStatusError(RuntimeError):
    """Raised on a transition the status surface does not allow."""


class ReportStatus:
    """Tracks which of the four mutually exclusive views should be shown."""

    def __init__(self) -> None:
        self.state = ReportState.IDLE
        self.error: str | None = None
        self.report: SegmentedReport | None = None

    @property
    def is_busy(self) -> bool:
        return self.state is ReportState.LOADING

    @property
    def notice(self) -> str | None:
        """The "could not process" notice for a successful but empty report."""
        if self.state is ReportState.SUCCESS and self.report is not None:
            if self.report.is_empty:
                return UNPROCESSABLE_REPORT_NOTICE
        return None

    def begin(self) -> None:
        if self.is_busy:
            raise ReportStatusError("a report request is already in flight")
        self.report = None
        self.error = None
        self.state = ReportState.LOADING

    def succeed(self, report: SegmentedReport) -> None:
        self._require_loading()
        self.report = report
        self.state = ReportState.SUCCESS

    def fail(self, message: str) -> None:
        self._require_loading()
        self.error = message
        self.state = ReportState.ERROR

    def _require_loading(self) -> None:
        if not self.is_busy:
            raise ReportStatusError(
                f"cannot finish a request from state {self.state.value!r}"
            )

    def __repr__(self) -> str:
        return f"ReportStatus(state={self.state.value!r})"
