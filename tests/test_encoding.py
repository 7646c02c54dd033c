import base64
import unittest
from io import BytesIO

from werkzeug.datastructures import FileStorage

from wasteadvisor_backend.services.encoding import (
    ImagePayload,
    encode_image_file,
    payload_from_data_uri,
)

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image"
PNG_BASE64 = base64.b64encode(PNG_BYTES).decode("ascii")


def _upload(data: bytes, filename: str, content_type: str | None = None) -> FileStorage:
    return FileStorage(
        stream=BytesIO(data), filename=filename, content_type=content_type
    )


class EncodeImageFileTests(unittest.TestCase):
    def test_encodes_bytes_and_keeps_mime_type(self):
        payload = encode_image_file(_upload(PNG_BYTES, "peel.png", "image/png"))

        self.assertEqual(payload, ImagePayload(data=PNG_BASE64, mime_type="image/png"))
        self.assertFalse(payload.data.startswith("data:"))

    def test_guesses_mime_type_from_filename(self):
        payload = encode_image_file(
            _upload(PNG_BYTES, "grounds.jpg", "application/octet-stream")
        )
        self.assertEqual(payload.mime_type, "image/jpeg")

        payload = encode_image_file(_upload(PNG_BYTES, "peel.png"))
        self.assertEqual(payload.mime_type, "image/png")

    def test_rejects_empty_or_non_image_uploads(self):
        with self.assertRaises(ValueError):
            encode_image_file(_upload(b"", "peel.png", "image/png"))
        with self.assertRaises(ValueError):
            encode_image_file(_upload(b"hello", "notes.txt", "text/plain"))
        with self.assertRaises(ValueError):
            encode_image_file(_upload(PNG_BYTES, "", "image/png"))


class PayloadFromDataUriTests(unittest.TestCase):
    def test_keeps_only_text_after_first_comma(self):
        payload = payload_from_data_uri(f"data:image/webp;base64,{PNG_BASE64}")

        self.assertEqual(payload.data, PNG_BASE64)
        self.assertEqual(payload.mime_type, "image/webp")
        self.assertEqual(payload.data_uri, f"data:image/webp;base64,{PNG_BASE64}")

    def test_bare_base64_requires_explicit_mime_type(self):
        with self.assertRaises(ValueError):
            payload_from_data_uri(PNG_BASE64)

        payload = payload_from_data_uri(PNG_BASE64, mime_type="image/png")
        self.assertEqual(payload.mime_type, "image/png")

    def test_rejects_invalid_payloads(self):
        cases = [
            "",
            "data:image/png;base64,@@not-base64@@",
            f"data:text/plain;base64,{PNG_BASE64}",
            "data:image/png;base64,",
        ]
        for value in cases:
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    payload_from_data_uri(value)


if __name__ == "__main__":
    unittest.main()
