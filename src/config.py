from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from src.constants import (
    ASSEMBLYAI_BASE_URL,
    ASSEMBLYAI_TIMEOUT,
    DEFAULT_CORS_ORIGINS,
    DEFAULT_HOST,
    DEFAULT_PORT,
    POLL_INTERVAL_SECONDS,
    POLL_MAX_ATTEMPTS,
    RATE_LIMIT_INTERVAL_MS,
)


@dataclass(frozen=True)
class Config:
    assemblyai_api_key: Optional[str]
    assemblyai_base_url: str
    assemblyai_language_code: Optional[str]
    assemblyai_timeout: float
    poll_interval_seconds: float
    poll_max_attempts: int
    rate_limit_interval_ms: int
    log_level: str
    cors_origins: tuple[str, ...]
    host: str
    port: int

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv("ASSEMBLYAI_API_KEY") or None
        base_url = os.getenv("ASSEMBLYAI_BASE_URL", ASSEMBLYAI_BASE_URL)
        language_code = os.getenv("ASSEMBLYAI_LANGUAGE_CODE") or None
        timeout = os.getenv("ASSEMBLYAI_TIMEOUT", str(ASSEMBLYAI_TIMEOUT))
        poll_interval = os.getenv("POLL_INTERVAL_SECONDS", str(POLL_INTERVAL_SECONDS))
        poll_max_attempts = os.getenv("POLL_MAX_ATTEMPTS", str(POLL_MAX_ATTEMPTS))
        rate_limit = os.getenv("RATE_LIMIT_INTERVAL_MS", str(RATE_LIMIT_INTERVAL_MS))
        log_level = os.getenv("LOG_LEVEL", "INFO")
        raw_origins = os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        host = os.getenv("HOST", DEFAULT_HOST)
        port = os.getenv("PORT", str(DEFAULT_PORT))

        origins = tuple(o.strip() for o in raw_origins.split(",") if o.strip())

        return cls._validate(
            assemblyai_api_key=api_key,
            assemblyai_base_url=base_url.rstrip("/"),
            assemblyai_language_code=language_code,
            assemblyai_timeout=float(timeout),
            poll_interval_seconds=float(poll_interval),
            poll_max_attempts=int(poll_max_attempts),
            rate_limit_interval_ms=int(rate_limit),
            log_level=log_level,
            cors_origins=origins,
            host=host,
            port=int(port),
        )

    @staticmethod
    def _validate(
        assemblyai_api_key: Optional[str],
        assemblyai_base_url: str,
        assemblyai_language_code: Optional[str],
        assemblyai_timeout: float,
        poll_interval_seconds: float,
        poll_max_attempts: int,
        rate_limit_interval_ms: int,
        log_level: str,
        cors_origins: tuple[str, ...],
        host: str,
        port: int,
    ) -> "Config":
        match assemblyai_base_url:
            case "":
                raise ValueError("ASSEMBLYAI_BASE_URL must not be empty")
            case _:
                pass

        match poll_max_attempts:
            case n if n < 1:
                raise ValueError("POLL_MAX_ATTEMPTS must be at least 1")
            case _:
                pass

        match (poll_interval_seconds, assemblyai_timeout):
            case (interval, _) if interval < 0:
                raise ValueError("POLL_INTERVAL_SECONDS must not be negative")
            case (_, timeout) if timeout <= 0:
                raise ValueError("ASSEMBLYAI_TIMEOUT must be positive")
            case _:
                pass

        match rate_limit_interval_ms:
            case n if n < 0:
                raise ValueError("RATE_LIMIT_INTERVAL_MS must not be negative")
            case _:
                pass

        return Config(
            assemblyai_api_key=assemblyai_api_key,
            assemblyai_base_url=assemblyai_base_url,
            assemblyai_language_code=assemblyai_language_code,
            assemblyai_timeout=assemblyai_timeout,
            poll_interval_seconds=poll_interval_seconds,
            poll_max_attempts=poll_max_attempts,
            rate_limit_interval_ms=rate_limit_interval_ms,
            log_level=log_level,
            cors_origins=cors_origins,
            host=host,
            port=port,
        )
