"""Helpers for turning uploaded images into inline model payloads."""

from __future__ import annotations

import base64
import binascii
import mimetypes
from dataclasses import dataclass

from werkzeug.datastructures import FileStorage

DEFAULT_IMAGE_MIME_TYPE = "image/jpeg"


@dataclass(frozen=True, slots=True)
class ImagePayload:
    """Base64 image data (no data-URI prefix) paired with its MIME type."""

    data: str
    mime_type: str

    @property
    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


def _resolve_mime_type(declared: str | None, filename: str | None) -> str:
    mime = (declared or "").strip().lower()
    if not mime or mime == "application/octet-stream":
        guessed, _ = mimetypes.guess_type(filename or "")
        mime = guessed or DEFAULT_IMAGE_MIME_TYPE
    return mime


def encode_image_bytes(image_bytes: bytes, mime_type: str) -> ImagePayload:
    """Wrap raw image bytes into an ``ImagePayload``."""

    if not image_bytes:
        raise ValueError("uploaded file was empty")
    if not mime_type.startswith("image/"):
        raise ValueError(f"unsupported file type {mime_type!r}; expected an image")

    return ImagePayload(
        data=base64.b64encode(image_bytes).decode("ascii"),
        mime_type=mime_type,
    )


def encode_image_file(image_file: FileStorage) -> ImagePayload:
    """Read an uploaded image and return its base64 payload."""

    if image_file.filename == "":
        raise ValueError("empty filename")

    mime_type = _resolve_mime_type(image_file.mimetype, image_file.filename)
    return encode_image_bytes(image_file.read(), mime_type)


def payload_from_data_uri(value: str, *, mime_type: str | None = None) -> ImagePayload:
    """Build a payload from a ``data:`` URI, keeping only the text after the first comma.

    A bare base64 string is accepted when ``mime_type`` is given explicitly.
    """

    candidate = (value or "").strip()
    if not candidate:
        raise ValueError("image data is empty")

    prefix, sep, data = candidate.partition(",")
    if sep:
        declared = prefix.removeprefix("data:").split(";", 1)[0]
        mime = (mime_type or declared or DEFAULT_IMAGE_MIME_TYPE).strip().lower()
    elif mime_type:
        data = candidate
        mime = mime_type.strip().lower()
    else:
        raise ValueError("image must be a base64 data URI")

    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("image data is not valid base64") from exc

    if not raw:
        raise ValueError("image data is empty")
    if not mime.startswith("image/"):
        raise ValueError(f"unsupported file type {mime!r}; expected an image")

    return ImagePayload(data=data, mime_type=mime)
