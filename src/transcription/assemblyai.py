"""AssemblyAITranscriptionClient — upload, create a job, poll until it settles."""
import asyncio
import logging
from typing import Any, Optional

import httpx

from src.constants import (
    ASSEMBLYAI_BASE_URL,
    ASSEMBLYAI_TIMEOUT,
    ASSEMBLYAI_TRANSCRIPT_PATH,
    ASSEMBLYAI_UPLOAD_PATH,
    MSG_ERR_PROVIDER_UNREACHABLE,
    MSG_ERR_TRANSCRIPT_EMPTY,
    MSG_JOB_CREATED,
    MSG_JOB_STATUS,
    MSG_PROVIDER_ERROR,
    MSG_TRANSPORT_ERROR,
    MSG_UPLOAD_OK,
    POLL_INTERVAL_SECONDS,
    POLL_MAX_ATTEMPTS,
    UPLOAD_CONTENT_TYPE,
)
from src.errors import (
    PollError,
    TranscribeRequestError,
    TranscriptionFailedError,
    TranscriptionTimeoutError,
    UploadError,
    UpstreamError,
)
from src.transcription.client import JobStatus, TranscriptionClient, TranscriptionJob

logger = logging.getLogger(__name__)


def _provider_message(response: httpx.Response) -> Optional[str]:
    try:
        data = response.json()
    except ValueError:
        return None
    match data:
        case {"error": str(message)} if message:
            return message
        case _:
            return None


def _to_job(data: dict[str, Any], job_id: str = "") -> TranscriptionJob:
    return TranscriptionJob(
        id=data.get("id") or job_id,
        status=data.get("status") or JobStatus.QUEUED.value,
        text=data.get("text"),
        error=data.get("error"),
    )


class AssemblyAITranscriptionClient(TranscriptionClient):
    """AssemblyAI v2 backend.

    The provider transcribes asynchronously: audio is uploaded, a transcript
    job is created from the upload URL, and the job is polled every
    ``poll_interval`` seconds. Polling gives up with
    ``TranscriptionTimeoutError`` after ``max_poll_attempts`` non-terminal
    answers. Non-success responses and transport failures are never retried.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = ASSEMBLYAI_BASE_URL,
        *,
        timeout: float = ASSEMBLYAI_TIMEOUT,
        poll_interval: float = POLL_INTERVAL_SECONDS,
        max_poll_attempts: int = POLL_MAX_ATTEMPTS,
        language_code: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._poll_interval = poll_interval
        self._max_poll_attempts = max_poll_attempts
        self._language_code = language_code
        self._transport = transport

    # ── TranscriptionClient interface ─────────────────────────────────────────

    async def transcribe(self, audio: bytes) -> str:
        audio_url = await self.upload(audio)
        job = await self.request_transcription(audio_url)
        return await self.poll_until_done(job.id)

    # ── provider operations ───────────────────────────────────────────────────

    async def upload(self, audio: bytes) -> str:
        async with self._client() as client:
            data = await self._send(
                client,
                "upload",
                UploadError,
                "POST",
                ASSEMBLYAI_UPLOAD_PATH,
                content=audio,
                headers={"Content-Type": UPLOAD_CONTENT_TYPE},
            )
        match data.get("upload_url"):
            case str(url) if url:
                logger.info(MSG_UPLOAD_OK, len(audio), url)
                return url
            case _:
                raise UploadError()

    async def request_transcription(self, audio_url: str) -> TranscriptionJob:
        body: dict[str, Any] = {"audio_url": audio_url}
        match self._language_code:
            case None:
                pass
            case code:
                body["language_code"] = code
        async with self._client() as client:
            data = await self._send(
                client,
                "transcribe",
                TranscribeRequestError,
                "POST",
                ASSEMBLYAI_TRANSCRIPT_PATH,
                json=body,
            )
        job = _to_job(data)
        match job.id:
            case "":
                raise TranscribeRequestError()
            case job_id:
                logger.info(MSG_JOB_CREATED, job_id, job.status)
                return job

    async def poll_until_done(self, job_id: str) -> str:
        async with self._client() as client:
            for attempt in range(1, self._max_poll_attempts + 1):
                await asyncio.sleep(self._poll_interval)
                data = await self._send(
                    client,
                    "poll",
                    PollError,
                    "GET",
                    f"{ASSEMBLYAI_TRANSCRIPT_PATH}/{job_id}",
                )
                job = _to_job(data, job_id)
                logger.debug(MSG_JOB_STATUS, job_id, job.status, attempt, self._max_poll_attempts)
                match job.status:
                    case JobStatus.COMPLETED:
                        return self._completed_text(job)
                    case JobStatus.ERROR:
                        logger.error(MSG_PROVIDER_ERROR, "transcription", job_id, job.error)
                        raise TranscriptionFailedError(job.error)
                    case _:
                        pass
        raise TranscriptionTimeoutError()

    # ── helpers ───────────────────────────────────────────────────────────────

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Authorization": self._api_key},
            timeout=self._timeout,
            transport=self._transport,
        )

    @staticmethod
    async def _send(
        client: httpx.AsyncClient,
        stage: str,
        error_cls: type[UpstreamError],
        method: str,
        path: str,
        **kwargs: Any,
    ) -> dict[str, Any]:
        try:
            response = await client.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            logger.error(MSG_TRANSPORT_ERROR, stage, exc)
            raise UpstreamError(message=MSG_ERR_PROVIDER_UNREACHABLE) from exc

        match response.is_success:
            case False:
                message = _provider_message(response)
                logger.error(MSG_PROVIDER_ERROR, stage, response.status_code, message or response.text)
                raise error_cls(response.status_code, message)
            case True:
                return response.json()

    @staticmethod
    def _completed_text(job: TranscriptionJob) -> str:
        match job.text:
            case str(text) if text.strip():
                return text
            case _:
                raise TranscriptionFailedError(MSG_ERR_TRANSCRIPT_EMPTY)
