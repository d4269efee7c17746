"""Type-safe exception hierarchy and error codes.

Provides structured error handling with:
- Domain-specific exception taxonomy
- Structured error details for build reports

Core errors describe degraded input the assembler tolerates: they are
constructed to log and count, never raised out of ``assemble``. Source and
export errors belong to the I/O layer and abort the build.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Type-safe error codes."""

    # Input errors
    MISSING_CANDIDATE = "missing_candidate"
    MALFORMED_INPUT = "malformed_input"
    UNKNOWN_PART_OF_SPEECH = "unknown_part_of_speech"
    INVALID_LANGUAGE = "invalid_language"

    # Source errors
    SOURCE_NOT_FOUND = "source_not_found"
    SOURCE_FORMAT = "source_format"

    # Output errors
    EXPORT_FAILED = "export_failed"


class ErrorDetail(BaseModel):
    """Structured error information for logs and reports."""

    code: ErrorCode
    message: str
    field: Optional[str] = None
    context: dict = Field(default_factory=dict)


class NordumError(Exception):
    """Base exception for all lexicon build errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        field: Optional[str] = None,
        **context
    ):
        self.code = code
        self.message = message
        self.field = field
        self.context = context
        super().__init__(message)

    def to_detail(self) -> ErrorDetail:
        """Convert to error detail."""
        return ErrorDetail(
            code=self.code,
            message=self.message,
            field=self.field,
            context=self.context
        )


# ═════════════════════════════════════════════════════════════════════════════
# Input Errors (tolerated by the core)
# ═════════════════════════════════════════════════════════════════════════════

class MissingCandidateError(NordumError):
    """Concept has no usable source-language candidate."""

    def __init__(self, concept: str):
        super().__init__(
            code=ErrorCode.MISSING_CANDIDATE,
            message=f"No candidates for concept: {concept}",
            field="candidates",
            concept=concept
        )


class MalformedInputError(NordumError):
    """Candidate record is missing a required field."""

    def __init__(self, concept: str, language: str, field: str = "word"):
        super().__init__(
            code=ErrorCode.MALFORMED_INPUT,
            message=f"Candidate for '{concept}' in {language} has no {field}",
            field=field,
            concept=concept,
            language=language
        )


class UnknownPartOfSpeechError(NordumError):
    """Part of speech is outside the recognized set."""

    def __init__(self, pos: Optional[str], stem: str):
        super().__init__(
            code=ErrorCode.UNKNOWN_PART_OF_SPEECH,
            message=f"Unknown part of speech '{pos}' for {stem}",
            field="pos",
            pos=pos,
            stem=stem
        )


class InvalidLanguageError(NordumError):
    """Language is not one of the source languages."""

    def __init__(self, language: str):
        super().__init__(
            code=ErrorCode.INVALID_LANGUAGE,
            message=f"Invalid source language: {language}",
            field="language",
            language=language
        )


# ═════════════════════════════════════════════════════════════════════════════
# Source Errors (fatal)
# ═════════════════════════════════════════════════════════════════════════════

class ResourceNotFoundError(NordumError):
    """Requested source does not exist."""

    def __init__(self, resource_type: str, identifier: str):
        super().__init__(
            code=ErrorCode.SOURCE_NOT_FOUND,
            message=f"{resource_type} not found: {identifier}",
            resource_type=resource_type,
            identifier=identifier
        )


class SourceFormatError(NordumError):
    """Source file cannot be read or lacks required columns."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            code=ErrorCode.SOURCE_FORMAT,
            message=f"Cannot load {path}: {reason}",
            path=path,
            reason=reason
        )


# ═════════════════════════════════════════════════════════════════════════════
# Output Errors (fatal)
# ═════════════════════════════════════════════════════════════════════════════

class ExportError(NordumError):
    """Writing a build artifact failed."""

    def __init__(self, artifact: str, reason: str):
        super().__init__(
            code=ErrorCode.EXPORT_FAILED,
            message=f"Export of {artifact} failed: {reason}",
            artifact=artifact,
            reason=reason
        )
