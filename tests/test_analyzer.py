"""CallAnalyzer state machine with stubbed transcriber and scorer."""
import pytest
from unittest.mock import AsyncMock

from src.analyzer import AudioUpload, CallAnalyzer
from src.errors import ConfigurationError, RateLimitError, UploadError, ValidationError
from src.rate_limiter import RateLimiter
from src.scoring.scorer import AnalysisResult

RESULT = AnalysisResult(scores={"greeting": 5}, overall_feedback="fb", observation="obs")


def make_upload(data: bytes = b"RIFF....WAVE") -> AudioUpload:
    return AudioUpload(filename="call.wav", content_type="audio/wav", data=data)


def make_analyzer(*, transcriber=..., scorer=None, limiter=None):
    if transcriber is ...:
        transcriber = AsyncMock()
        transcriber.transcribe = AsyncMock(return_value="hello there")
    if scorer is None:
        scorer = AsyncMock()
        scorer.score = AsyncMock(return_value=RESULT)
    return CallAnalyzer(
        rate_limiter=limiter or RateLimiter(interval_ms=10_000, clock=lambda: 0),
        transcriber=transcriber,
        scorer=scorer,
    ), transcriber, scorer


async def test_analyze_transcribes_then_scores():
    analyzer, transcriber, scorer = make_analyzer()

    result = await analyzer.analyze("1.2.3.4", make_upload(b"audio-bytes"))

    assert result is RESULT
    transcriber.transcribe.assert_awaited_once_with(b"audio-bytes")
    scorer.score.assert_awaited_once_with("hello there")


async def test_second_request_within_cooldown_is_rejected():
    analyzer, transcriber, _ = make_analyzer()
    await analyzer.analyze("1.2.3.4", make_upload())

    with pytest.raises(RateLimitError):
        await analyzer.analyze("1.2.3.4", make_upload())

    assert transcriber.transcribe.await_count == 1


async def test_other_clients_are_not_rate_limited():
    analyzer, _, _ = make_analyzer()
    await analyzer.analyze("1.1.1.1", make_upload())

    assert await analyzer.analyze("2.2.2.2", make_upload()) is RESULT


async def test_rate_limit_is_checked_before_validation():
    analyzer, _, _ = make_analyzer()

    with pytest.raises(ValidationError):
        await analyzer.analyze("1.2.3.4", None)
    with pytest.raises(RateLimitError):
        await analyzer.analyze("1.2.3.4", None)


async def test_missing_audio_is_a_validation_error():
    analyzer, transcriber, _ = make_analyzer()

    with pytest.raises(ValidationError) as exc_info:
        await analyzer.analyze("1.2.3.4", None)

    assert exc_info.value.status_code == 400
    assert exc_info.value.message == "No audio file provided."
    transcriber.transcribe.assert_not_awaited()


async def test_missing_transcriber_is_a_configuration_error():
    analyzer, _, scorer = make_analyzer(transcriber=None)

    with pytest.raises(ConfigurationError) as exc_info:
        await analyzer.analyze("1.2.3.4", make_upload())

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "AssemblyAI API key not configured."
    scorer.score.assert_not_awaited()


async def test_upstream_failure_short_circuits_scoring():
    transcriber = AsyncMock()
    transcriber.transcribe = AsyncMock(side_effect=UploadError(401, "Invalid API key"))
    analyzer, _, scorer = make_analyzer(transcriber=transcriber)

    with pytest.raises(UploadError):
        await analyzer.analyze("1.2.3.4", make_upload())

    scorer.score.assert_not_awaited()
