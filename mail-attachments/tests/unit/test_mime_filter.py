"""
Unit tests for content-type filtering.
"""
from mail_attachments.application.mime_filter import filter_by_mime_type
from mail_attachments.domain import Attachment

PNG_A = Attachment(name="a.png", content_type="image/png", content_bytes=b"a")
TEXT = Attachment(name="b.txt", content_type="text/plain", content_bytes=b"b")
UNTYPED = Attachment(name="c", content_type=None, content_bytes=b"c")
PNG_D = Attachment(name="d.png", content_type="image/png", content_bytes=b"d")

ALL = [PNG_A, TEXT, UNTYPED, PNG_D]


class TestFilterByMimeType:
    """Tests for filter_by_mime_type."""

    def test_empty_allow_list_is_identity(self):
        assert filter_by_mime_type(ALL, []) == ALL

    def test_keeps_only_matching_types_in_order(self):
        assert filter_by_mime_type(ALL, ["image/png"]) == [PNG_A, PNG_D]

    def test_multiple_types(self):
        assert filter_by_mime_type(ALL, ["text/plain", "image/png"]) == [PNG_A, TEXT, PNG_D]

    def test_untyped_never_matches(self):
        assert UNTYPED not in filter_by_mime_type(ALL, ["image/png", "text/plain"])

    def test_matching_is_exact_and_case_sensitive(self):
        assert filter_by_mime_type(ALL, ["IMAGE/PNG"]) == []
        assert filter_by_mime_type(ALL, ["image"]) == []
        assert filter_by_mime_type(ALL, ["image/*"]) == []

    def test_no_match_returns_empty(self):
        assert filter_by_mime_type(ALL, ["application/pdf"]) == []

    def test_does_not_mutate_input(self):
        items = list(ALL)
        filter_by_mime_type(items, ["image/png"])

        assert items == ALL
