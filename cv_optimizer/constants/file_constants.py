"""Constants for CV file uploads."""

from typing import Final, Tuple


class FileConstants:
    """Supported upload formats and limits."""

    MAX_FILE_SIZE_BYTES: Final[int] = 5 * 1024 * 1024

    PDF_MIME_TYPE: Final[str] = "application/pdf"
    DOCX_MIME_TYPE: Final[str] = (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    )
    TEXT_MIME_TYPE: Final[str] = "text/plain"
    LEGACY_DOC_MIME_TYPE: Final[str] = "application/msword"

    PDF_EXTENSION: Final[str] = ".pdf"
    DOCX_EXTENSION: Final[str] = ".docx"
    TEXT_EXTENSION: Final[str] = ".txt"
    LEGACY_DOC_EXTENSION: Final[str] = ".doc"

    ALLOWED_MIME_TYPES: Final[Tuple[str, ...]] = (
        PDF_MIME_TYPE,
        DOCX_MIME_TYPE,
        TEXT_MIME_TYPE,
    )

    MSG_NO_FILE: Final[str] = "No file provided"
    MSG_LEGACY_DOC: Final[str] = (
        "Legacy .doc files are not supported. Please convert to .docx or PDF."
    )
    MSG_UNSUPPORTED: Final[str] = "Unsupported file type: {file_type}"
    MSG_EMPTY: Final[str] = "File appears to be empty or could not be parsed"
    MSG_TOO_LARGE: Final[str] = "File is too large. Maximum size is {max_mb} MB."
    MSG_PARSE_FAILED: Final[str] = "Failed to parse file: {details}"
    MSG_PARSE_HINT: Final[str] = (
        "Please ensure the file is not corrupted or password-protected."
    )
    HINT_UNSUPPORTED: Final[str] = "Please upload a PDF, DOCX or TXT file."
    HINT_LEGACY_DOC: Final[str] = (
        "Open the document in your word processor and save it as .docx or PDF."
    )
    HINT_EMPTY: Final[str] = (
        "Scanned PDFs have no text layer. Export the CV with selectable text "
        "or paste its content instead."
    )
    HINT_TOO_LARGE: Final[str] = (
        "Remove images from the document or paste the CV text instead."
    )
