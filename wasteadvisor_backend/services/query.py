"""The waste query a user submits: a text description or a photo, never both."""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from werkzeug.datastructures import FileStorage

from wasteadvisor_backend.config.messages import (
    AMBIGUOUS_QUERY_MESSAGE,
    EMPTY_QUERY_MESSAGE,
)
from wasteadvisor_backend.services.encoding import ImagePayload, encode_image_file


class QueryValidationError(ValueError):
    """Raised when a submission carries no usable subject."""


class QueryMode(str, Enum):
    EMPTY = "empty"
    TEXT = "text"
    IMAGE = "image"


class WasteQuery:
    """Mutually exclusive text/image input.

    Setting one side clears the other, mirroring the input form.
    """

    def __init__(self, text: str = "", image: ImagePayload | None = None) -> None:
        self._text = ""
        self._image: ImagePayload | None = None
        if text and image is not None:
            raise QueryValidationError(AMBIGUOUS_QUERY_MESSAGE)
        if image is not None:
            self.set_image(image)
        else:
            self.set_text(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def image(self) -> ImagePayload | None:
        return self._image

    @property
    def mode(self) -> QueryMode:
        if self._image is not None:
            return QueryMode.IMAGE
        if self._text.strip():
            return QueryMode.TEXT
        return QueryMode.EMPTY

    @property
    def is_submittable(self) -> bool:
        return self.mode is not QueryMode.EMPTY

    def set_text(self, text: str | None) -> None:
        self._text = text or ""
        if self._text and self._image is not None:
            self._image = None

    def set_image(self, image: ImagePayload | None) -> None:
        self._image = image
        if image is not None:
            self._text = ""

    def clear(self) -> None:
        self._text = ""
        self._image = None

    def validate(self) -> None:
        if not self.is_submittable:
            raise QueryValidationError(EMPTY_QUERY_MESSAGE)

    @classmethod
    def from_request(
        cls,
        form: Mapping[str, str],
        files: Mapping[str, FileStorage],
    ) -> "WasteQuery":
        """Build a query from a submitted form, rejecting empty or mixed input."""

        text = (form.get("text") or "").strip()
        image_file = files.get("image")
        has_file = image_file is not None and bool(image_file.filename)

        if text and has_file:
            raise QueryValidationError(AMBIGUOUS_QUERY_MESSAGE)

        image = None
        if has_file:
            try:
                image = encode_image_file(image_file)
            except ValueError as exc:
                raise QueryValidationError(str(exc)) from exc

        query = cls(text=text, image=image)
        query.validate()
        return query

    def __repr__(self) -> str:
        return f"WasteQuery(mode={self.mode.value!r})"
