"""Entry point — wires Config → CallAnalyzer → FastAPI app → uvicorn."""
import logging

import uvicorn
from fastapi import FastAPI
from rich.logging import RichHandler

from src.analyzer import CallAnalyzer
from src.api.app import create_app
from src.config import Config
from src.constants import MSG_NO_API_KEY_WARNING, MSG_SERVER_STARTING
from src.rate_limiter import RateLimiter
from src.scoring.mock import MockScorer
from src.transcription.assemblyai import AssemblyAITranscriptionClient


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def build_app(config: Config) -> FastAPI:
    transcriber = (
        AssemblyAITranscriptionClient(
            config.assemblyai_api_key,
            config.assemblyai_base_url,
            timeout=config.assemblyai_timeout,
            poll_interval=config.poll_interval_seconds,
            max_poll_attempts=config.poll_max_attempts,
            language_code=config.assemblyai_language_code,
        )
        if config.assemblyai_api_key
        else None
    )
    analyzer = CallAnalyzer(
        rate_limiter=RateLimiter(interval_ms=config.rate_limit_interval_ms),
        transcriber=transcriber,
        scorer=MockScorer(),
    )
    return create_app(analyzer, cors_origins=config.cors_origins)


def main() -> None:
    config = Config.from_env()
    _setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    match config.assemblyai_api_key:
        case None:
            logger.warning(MSG_NO_API_KEY_WARNING)
        case _:
            pass
    logger.info(MSG_SERVER_STARTING, config.host, config.port)

    uvicorn.run(build_app(config), host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
