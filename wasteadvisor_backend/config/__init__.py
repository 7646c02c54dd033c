"""Static configuration shipped with the codebase."""

# LLM defaults are in a dedicated module for clarity and reuse.
from .llm import DEFAULT_LLM_MODEL, REPORT_PROMPT_TEMPLATE
from .messages import (
    EMPTY_QUERY_MESSAGE,
    REPORT_REQUEST_FAILED_MESSAGE,
    UNPROCESSABLE_REPORT_NOTICE,
)

__all__ = [
    "DEFAULT_LLM_MODEL",
    "EMPTY_QUERY_MESSAGE",
    "REPORT_PROMPT_TEMPLATE",
    "REPORT_REQUEST_FAILED_MESSAGE",
    "UNPROCESSABLE_REPORT_NOTICE",
]
