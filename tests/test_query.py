import unittest
from io import BytesIO

from werkzeug.datastructures import FileStorage, ImmutableMultiDict

from wasteadvisor_backend.config.messages import (
    AMBIGUOUS_QUERY_MESSAGE,
    EMPTY_QUERY_MESSAGE,
)
from wasteadvisor_backend.services.encoding import ImagePayload
from wasteadvisor_backend.services.query import (
    QueryMode,
    QueryValidationError,
    WasteQuery,
)

IMAGE = ImagePayload(data="YWJj", mime_type="image/png")


class WasteQueryStateTests(unittest.TestCase):
    def test_typing_text_clears_selected_image(self):
        query = WasteQuery()
        query.set_image(IMAGE)
        self.assertIs(query.mode, QueryMode.IMAGE)

        query.set_text("cáscara de plátano")

        self.assertIsNone(query.image)
        self.assertIs(query.mode, QueryMode.TEXT)
        self.assertEqual(query.text, "cáscara de plátano")

    def test_selecting_image_clears_text(self):
        query = WasteQuery(text="borra de café")
        query.set_image(IMAGE)

        self.assertEqual(query.text, "")
        self.assertIs(query.mode, QueryMode.IMAGE)

    def test_clearing_image_leaves_empty_query(self):
        query = WasteQuery(image=IMAGE)
        query.set_image(None)

        self.assertIs(query.mode, QueryMode.EMPTY)
        self.assertFalse(query.is_submittable)
        with self.assertRaises(QueryValidationError):
            query.validate()

    def test_same_image_can_be_selected_again(self):
        query = WasteQuery(image=IMAGE)
        query.clear()
        query.set_image(IMAGE)
        self.assertEqual(query.image, IMAGE)

    def test_rejects_both_inputs_at_construction(self):
        with self.assertRaises(QueryValidationError):
            WasteQuery(text="cáscara", image=IMAGE)


class WasteQueryFromRequestTests(unittest.TestCase):
    def _files(self, **files):
        return ImmutableMultiDict(files)

    def test_text_submission(self):
        query = WasteQuery.from_request(
            ImmutableMultiDict({"text": "  cáscara de piña "}), self._files()
        )
        self.assertIs(query.mode, QueryMode.TEXT)
        self.assertEqual(query.text, "cáscara de piña")

    def test_image_submission(self):
        upload = FileStorage(
            stream=BytesIO(b"abc"), filename="peel.png", content_type="image/png"
        )
        query = WasteQuery.from_request(
            ImmutableMultiDict({"text": ""}), self._files(image=upload)
        )
        self.assertIs(query.mode, QueryMode.IMAGE)
        self.assertEqual(query.image, IMAGE)

    def test_empty_submission(self):
        empty_upload = FileStorage(stream=BytesIO(b""), filename="")
        with self.assertRaises(QueryValidationError) as ctx:
            WasteQuery.from_request(
                ImmutableMultiDict({"text": "   "}), self._files(image=empty_upload)
            )
        self.assertEqual(str(ctx.exception), EMPTY_QUERY_MESSAGE)

    def test_both_inputs_rejected(self):
        upload = FileStorage(
            stream=BytesIO(b"abc"), filename="peel.png", content_type="image/png"
        )
        with self.assertRaises(QueryValidationError) as ctx:
            WasteQuery.from_request(
                ImmutableMultiDict({"text": "cáscara"}), self._files(image=upload)
            )
        self.assertEqual(str(ctx.exception), AMBIGUOUS_QUERY_MESSAGE)

    def test_non_image_upload_rejected(self):
        upload = FileStorage(
            stream=BytesIO(b"abc"), filename="notes.txt", content_type="text/plain"
        )
        with self.assertRaises(QueryValidationError):
            WasteQuery.from_request(ImmutableMultiDict(), self._files(image=upload))


if __name__ == "__main__":
    unittest.main()
