"""CallAnalyzer — rate-limit, validate, transcribe, score. Transport-agnostic."""
import logging
from dataclasses import dataclass
from typing import Optional

from src.constants import MSG_RECEIVED_FILE, MSG_TRANSCRIBED, TRANSCRIPT_PREVIEW_CHARS
from src.errors import ConfigurationError, RateLimitError, ValidationError
from src.rate_limiter import RateLimiter
from src.scoring.scorer import AnalysisResult, Scorer
from src.transcription.client import TranscriptionClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AudioUpload:
    filename: str
    content_type: str
    data: bytes


class CallAnalyzer:
    """Runs one analysis request from rate-limit check to scored result.

    ``transcriber`` is None when no provider key is configured; that is
    reported per request as a ``ConfigurationError`` rather than at startup.
    """

    def __init__(
        self,
        rate_limiter: RateLimiter,
        transcriber: Optional[TranscriptionClient],
        scorer: Scorer,
    ) -> None:
        self._rate_limiter = rate_limiter
        self._transcriber = transcriber
        self._scorer = scorer

    async def analyze(self, client_id: str, upload: Optional[AudioUpload]) -> AnalysisResult:
        # The slot is spent even when the request is then rejected as invalid.
        match self._rate_limiter.check_and_record(client_id):
            case False:
                raise RateLimitError()
            case True:
                pass

        match upload:
            case None:
                raise ValidationError()
            case audio:
                pass

        match self._transcriber:
            case None:
                raise ConfigurationError()
            case transcriber:
                pass

        logger.info(MSG_RECEIVED_FILE, audio.filename, audio.content_type, len(audio.data))
        transcript = await transcriber.transcribe(audio.data)
        logger.info(MSG_TRANSCRIBED, len(transcript), transcript[:TRANSCRIPT_PREVIEW_CHARS])

        return await self._scorer.score(transcript)
