"""TranscriptionClient — abstract base for speech-to-text backends."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class JobStatus(str, Enum):
    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


@dataclass(frozen=True)
class TranscriptionJob:
    id: str
    status: str
    text: Optional[str] = None
    error: Optional[str] = None


class TranscriptionClient(ABC):
    @abstractmethod
    async def transcribe(self, audio: bytes) -> str:
        """Convert raw audio bytes to text. Raises on failure."""
        ...
