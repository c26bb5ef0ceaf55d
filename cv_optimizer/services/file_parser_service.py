"""Turn uploaded CV files into plain text."""

import io
import os
from typing import Optional

import docx
from PyPDF2 import PdfReader

from cv_optimizer.config.logging_config import get_structured_logger
from cv_optimizer.constants.file_constants import FileConstants
from cv_optimizer.error_handling.exceptions import (
    EmptyFileContentError,
    FileParsingError,
    FileTooLargeError,
    LegacyDocFormatError,
    UnsupportedFileTypeError,
)

logger = get_structured_logger(__name__)

PDF = "pdf"
DOCX = "docx"
TEXT = "txt"
LEGACY_DOC = "doc"


def detect_file_kind(filename: Optional[str], content_type: Optional[str]) -> Optional[str]:
    """Resolve a supported format from the MIME type, then the file extension."""
    content_type = (content_type or "").split(";")[0].strip().lower()
    extension = os.path.splitext(filename or "")[1].lower()

    if content_type == FileConstants.LEGACY_DOC_MIME_TYPE or extension == FileConstants.LEGACY_DOC_EXTENSION:
        return LEGACY_DOC
    if content_type == FileConstants.PDF_MIME_TYPE or extension == FileConstants.PDF_EXTENSION:
        return PDF
    if content_type == FileConstants.DOCX_MIME_TYPE or extension == FileConstants.DOCX_EXTENSION:
        return DOCX
    if content_type == FileConstants.TEXT_MIME_TYPE or extension == FileConstants.TEXT_EXTENSION:
        return TEXT
    return None


class FileParserService:
    """Extracts text from PDF, DOCX and plain-text uploads."""

    def __init__(self, max_file_size_bytes: int = FileConstants.MAX_FILE_SIZE_BYTES):
        self.max_file_size_bytes = max_file_size_bytes

    def check_upload(
        self, filename: Optional[str], content_type: Optional[str], size: Optional[int]
    ) -> str:
        """Validate the format and size of an upload before its content is read.

        ``size`` may be None when the client did not report it. Returns the
        detected file kind.
        """
        kind = detect_file_kind(filename, content_type)
        if kind == LEGACY_DOC:
            raise LegacyDocFormatError(FileConstants.MSG_LEGACY_DOC, filename=filename)
        if kind is None:
            raise UnsupportedFileTypeError(
                FileConstants.MSG_UNSUPPORTED.format(
                    file_type=content_type or os.path.splitext(filename or "")[1] or "unknown"
                ),
                filename=filename,
            )
        if size is not None and size > self.max_file_size_bytes:
            raise FileTooLargeError(
                FileConstants.MSG_TOO_LARGE.format(
                    max_mb=round(self.max_file_size_bytes / (1024 * 1024), 1)
                ),
                filename=filename,
            )
        return kind

    def parse(self, filename: Optional[str], content_type: Optional[str], data: bytes) -> str:
        """Extract the text content of an uploaded file.

        Args:
            filename: Original file name, used for extension detection
            content_type: MIME type reported by the client
            data: Raw file bytes

        Returns:
            The extracted text, stripped of surrounding whitespace

        Raises:
            LegacyDocFormatError: For .doc files, without inspecting content
            UnsupportedFileTypeError: For any other unknown format
            FileTooLargeError: If the upload exceeds the size limit
            EmptyFileContentError: If no text could be extracted
            FileParsingError: If the underlying library fails
        """
        kind = self.check_upload(filename, content_type, len(data))

        try:
            if kind == PDF:
                text = self._parse_pdf(data, filename)
            elif kind == DOCX:
                text = self._parse_docx(data)
            else:
                text = data.decode("utf-8", errors="replace")
        except FileParsingError:
            raise
        except Exception as e:
            logger.error(
                "File parsing failed",
                filename=filename,
                kind=kind,
                error=str(e),
            )
            raise FileParsingError(
                FileConstants.MSG_PARSE_FAILED.format(details=str(e)),
                filename=filename,
                hint=FileConstants.MSG_PARSE_HINT,
                original_exception=e,
            ) from e

        text = text.strip()
        if not text:
            raise EmptyFileContentError(FileConstants.MSG_EMPTY, filename=filename)

        logger.info("File parsed", filename=filename, kind=kind, length=len(text))
        return text

    @staticmethod
    def _parse_pdf(data: bytes, filename: Optional[str]) -> str:
        reader = PdfReader(io.BytesIO(data))
        if reader.is_encrypted and not reader.decrypt(""):
            raise FileParsingError(
                FileConstants.MSG_PARSE_FAILED.format(details="PDF is password-protected"),
                filename=filename,
                hint=FileConstants.MSG_PARSE_HINT,
            )
        return "\n".join(page.extract_text() or "" for page in reader.pages)

    @staticmethod
    def _parse_docx(data: bytes) -> str:
        document = docx.Document(io.BytesIO(data))
        return "\n".join(paragraph.text for paragraph in document.paragraphs)
