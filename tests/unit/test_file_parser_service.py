"""Tests for the upload file parser."""

import io
from types import SimpleNamespace
from unittest.mock import patch

import docx
import pytest

from cv_optimizer.constants.file_constants import FileConstants
from cv_optimizer.error_handling.exceptions import (
    EmptyFileContentError,
    FileParsingError,
    FileTooLargeError,
    LegacyDocFormatError,
    UnsupportedFileTypeError,
)
from cv_optimizer.services.file_parser_service import FileParserService, detect_file_kind

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def _docx_bytes(*paragraphs):
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def _pdf_reader(pages, encrypted=False, decrypts=True):
    reader = SimpleNamespace(
        is_encrypted=encrypted,
        pages=[SimpleNamespace(extract_text=lambda text=text: text) for text in pages],
    )
    reader.decrypt = lambda password: 1 if decrypts else 0
    return reader


@pytest.fixture
def parser():
    return FileParserService()


class TestDetectFileKind:
    @pytest.mark.parametrize(
        "filename,content_type,expected",
        [
            ("cv.pdf", "application/pdf", "pdf"),
            ("cv.bin", "application/pdf", "pdf"),
            ("CV.PDF", "application/octet-stream", "pdf"),
            ("cv.docx", DOCX_MIME, "docx"),
            ("cv.txt", "text/plain; charset=utf-8", "txt"),
            ("cv.doc", "application/octet-stream", "doc"),
            ("cv.pdf", "application/msword", "doc"),
            ("cv.png", "image/png", None),
            (None, None, None),
        ],
    )
    def test_detection(self, filename, content_type, expected):
        assert detect_file_kind(filename, content_type) == expected


class TestFileParserService:
    """Test cases for FileParserService.parse."""

    def test_plain_text(self, parser):
        text = parser.parse("cv.txt", "text/plain", b"  Jane Doe\nEngineer  \n")

        assert text == "Jane Doe\nEngineer"

    def test_invalid_utf8_is_replaced(self, parser):
        text = parser.parse("cv.txt", "text/plain", b"Caf\xe9 owner")

        assert text == "Caf\ufffd owner"

    def test_docx(self, parser):
        """Paragraph texts are joined with newlines."""
        data = _docx_bytes("Jane Doe", "Senior Engineer")

        text = parser.parse("cv.docx", DOCX_MIME, data)

        assert text == "Jane Doe\nSenior Engineer"

    def test_pdf_pages_are_joined(self, parser):
        # Arrange
        reader = _pdf_reader(["Page one", None, "Page three"])

        # Act
        with patch(
            "cv_optimizer.services.file_parser_service.PdfReader", return_value=reader
        ) as reader_class:
            text = parser.parse("cv.pdf", "application/pdf", b"%PDF-1.4")

        # Assert
        assert text == "Page one\n\nPage three"
        assert reader_class.call_args.args[0].getvalue() == b"%PDF-1.4"

    def test_password_protected_pdf(self, parser):
        reader = _pdf_reader(["Secret"], encrypted=True, decrypts=False)

        with patch(
            "cv_optimizer.services.file_parser_service.PdfReader", return_value=reader
        ):
            with pytest.raises(FileParsingError) as exc_info:
                parser.parse("cv.pdf", "application/pdf", b"%PDF-1.4")

        assert exc_info.value.status_code == 500
        assert "password-protected" in exc_info.value.message

    def test_corrupt_pdf(self, parser):
        """Library failures become a 500 parsing error with a hint."""
        with patch(
            "cv_optimizer.services.file_parser_service.PdfReader",
            side_effect=Exception("EOF marker not found"),
        ):
            with pytest.raises(FileParsingError) as exc_info:
                parser.parse("cv.pdf", "application/pdf", b"garbage")

        assert exc_info.value.message == "Failed to parse file: EOF marker not found"
        assert exc_info.value.hint is not None
        assert type(exc_info.value) is FileParsingError

    def test_corrupt_docx(self, parser):
        with pytest.raises(FileParsingError) as exc_info:
            parser.parse("cv.docx", DOCX_MIME, b"not a zip archive")

        assert exc_info.value.status_code == 500

    def test_legacy_doc_is_rejected_without_reading(self, parser):
        with pytest.raises(LegacyDocFormatError) as exc_info:
            parser.parse("cv.doc", "application/msword", b"Jane Doe")

        assert exc_info.value.status_code == 400
        assert ".docx or PDF" in exc_info.value.message

    def test_unsupported_type(self, parser):
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            parser.parse("photo.png", "image/png", b"\x89PNG")

        assert exc_info.value.message == "Unsupported file type: image/png"

    def test_unsupported_type_without_mime(self, parser):
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            parser.parse("notes.rtf", None, b"{\\rtf1}")

        assert exc_info.value.message == "Unsupported file type: .rtf"

    def test_empty_text(self, parser):
        with pytest.raises(EmptyFileContentError) as exc_info:
            parser.parse("cv.txt", "text/plain", b"   \n\t")

        assert exc_info.value.status_code == 400

    def test_too_large(self):
        parser = FileParserService(max_file_size_bytes=10)

        with pytest.raises(FileTooLargeError):
            parser.parse("cv.txt", "text/plain", b"x" * 11)


class TestCheckUpload:
    """Test cases for the pre-read upload check."""

    def test_returns_detected_kind(self, parser):
        assert parser.check_upload("cv.pdf", "application/pdf", 1024) == "pdf"

    def test_unknown_size_is_accepted(self):
        parser = FileParserService(max_file_size_bytes=10)

        assert parser.check_upload("cv.txt", "text/plain", None) == "txt"

    def test_reported_size_over_limit(self):
        parser = FileParserService(max_file_size_bytes=10)

        with pytest.raises(FileTooLargeError) as exc_info:
            parser.check_upload("cv.txt", "text/plain", 11)

        assert exc_info.value.hint == FileConstants.HINT_TOO_LARGE

    def test_legacy_doc_is_rejected_before_size(self):
        parser = FileParserService(max_file_size_bytes=10)

        with pytest.raises(LegacyDocFormatError):
            parser.check_upload("cv.doc", None, 10_000)
