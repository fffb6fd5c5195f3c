"""Shared fixtures for the mail attachments test suite."""

import pytest

from mail_attachments.infrastructure.settings import get_settings

from messages import JPEG_BYTES, PDF_BYTES, PNG_BYTES, add_file, new_message


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def message_with_attachments() -> bytes:
    """Body text plus a PDF and a JPEG attachment."""
    msg = new_message()
    add_file(msg, PDF_BYTES, "application/pdf", "test_document.pdf")
    add_file(msg, JPEG_BYTES, "image/jpeg", "test_image.jpg")
    return msg.as_bytes()


@pytest.fixture
def message_without_attachments() -> bytes:
    return new_message(body="Nothing attached here.\n").as_bytes()


@pytest.fixture
def nested_message() -> bytes:
    """PDF at top level, then a forwarded message holding a PNG and a JPEG, then a text file."""
    inner = new_message(subject="Original")
    add_file(inner, PNG_BYTES, "image/png", "chart.png")
    add_file(inner, JPEG_BYTES, "image/jpeg", "photo.jpg")

    outer = new_message(subject="Fwd: Original")
    add_file(outer, PDF_BYTES, "application/pdf", "report.pdf")
    outer.add_attachment(inner)
    add_file(outer, b"last one", "text/plain", "notes.txt")
    return outer.as_bytes()
