"""Scorer — abstract base for call-quality scoring backends."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class AnalysisResult:
    scores: dict[str, int] = field(default_factory=dict)
    overall_feedback: str = ""
    observation: str = ""

    def to_dict(self) -> dict:
        return {
            "scores": dict(self.scores),
            "overallFeedback": self.overall_feedback,
            "observation": self.observation,
        }


class Scorer(ABC):
    @abstractmethod
    async def score(self, transcript: str) -> AnalysisResult:
        """Score a call transcript against the evaluation rubric."""
        ...
