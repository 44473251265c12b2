"""Failure taxonomy — each error knows its HTTP status and client-safe message."""
from src.constants import (
    MSG_ERR_INTERNAL,
    MSG_ERR_NO_API_KEY,
    MSG_ERR_NO_AUDIO,
    MSG_ERR_POLL,
    MSG_ERR_RATE_LIMITED,
    MSG_ERR_TRANSCRIBE_REQUEST,
    MSG_ERR_TRANSCRIPTION_FAILED,
    MSG_ERR_TRANSCRIPTION_TIMEOUT,
    MSG_ERR_UPLOAD,
)


class CallAnalysisError(Exception):
    status_code = 500
    default_message = MSG_ERR_INTERNAL

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CallAnalysisError):
    status_code = 400
    default_message = MSG_ERR_NO_AUDIO


class ConfigurationError(CallAnalysisError):
    default_message = MSG_ERR_NO_API_KEY


class RateLimitError(CallAnalysisError):
    status_code = 429
    default_message = MSG_ERR_RATE_LIMITED


class UpstreamError(CallAnalysisError):
    """Non-success answer from the provider; its status is passed through."""

    def __init__(self, status_code: int | None = None, message: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code or CallAnalysisError.status_code


class UploadError(UpstreamError):
    default_message = MSG_ERR_UPLOAD


class TranscribeRequestError(UpstreamError):
    default_message = MSG_ERR_TRANSCRIBE_REQUEST


class PollError(UpstreamError):
    default_message = MSG_ERR_POLL


class TranscriptionFailedError(CallAnalysisError):
    default_message = MSG_ERR_TRANSCRIPTION_FAILED


class TranscriptionTimeoutError(CallAnalysisError):
    status_code = 504
    default_message = MSG_ERR_TRANSCRIPTION_TIMEOUT


class UnexpectedError(CallAnalysisError):
    default_message = MSG_ERR_INTERNAL
