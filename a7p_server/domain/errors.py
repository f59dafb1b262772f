from __future__ import annotations

from a7p_server.domain.enums import ErrorStage


class ProfileFileError(Exception):
    """Base for every failure of the load/store/delete flows.

    `code` is a stable identifier for the condition, `stage` is the pipeline
    step that detected it. Callers map these to user-facing responses.
    """

    code = "profile_file_error"
    stage: ErrorStage

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidFilename(ProfileFileError):
    code = "invalid_filename"
    stage = ErrorStage.filename

    def __init__(self, filename: str) -> None:
        super().__init__(f"invalid filename: {filename!r}")
        self.filename = filename


class ProfileNotFound(ProfileFileError):
    code = "file_not_found"
    stage = ErrorStage.read

    def __init__(self, filename: str) -> None:
        super().__init__(f"file not found: {filename}")
        self.filename = filename


class ChecksumError(ProfileFileError):
    stage = ErrorStage.checksum


class ChecksumTooShort(ChecksumError):
    code = "checksum_too_short"

    def __init__(self, size: int) -> None:
        super().__init__(f"data too short for a checksum: {size} bytes")
        self.size = size


class ChecksumMismatch(ChecksumError):
    code = "checksum_mismatch"

    def __init__(self, expected: str, found: str) -> None:
        super().__init__(f"checksum mismatch: expected {expected}, got {found}")
        self.expected = expected
        self.found = found


class MalformedBinary(ProfileFileError):
    code = "malformed_binary"
    stage = ErrorStage.binary


class TextParseError(ProfileFileError):
    stage = ErrorStage.text


class MalformedText(TextParseError):
    code = "malformed_text"


class SchemaViolation(TextParseError):
    code = "schema_violation"
