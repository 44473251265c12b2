"""MockScorer — placeholder scoring with random marks and canned narrative."""
import asyncio
import logging
import random
from typing import Optional

from src.catalog import (
    EVALUATION_PARAMETERS,
    EvaluationParameter,
    InputType,
    resolve_input_type,
)
from src.constants import (
    MOCK_MAX_DELAY_SECONDS,
    MOCK_MIN_DELAY_SECONDS,
    MOCK_OBSERVATION,
    MOCK_OVERALL_FEEDBACK,
    MSG_DEFAULT_INPUT_TYPE,
    MSG_SCORED,
    TRANSCRIPT_PREVIEW_CHARS,
)
from src.scoring.scorer import AnalysisResult, Scorer

logger = logging.getLogger(__name__)


def draw_score(parameter: EvaluationParameter, rng: random.Random) -> int:
    """SCORE draws uniformly from [0, weight]; PASS_FAIL is 0 or weight."""
    match resolve_input_type(parameter):
        case InputType.SCORE:
            return rng.randint(0, parameter.weight)
        case InputType.PASS_FAIL:
            return parameter.weight if rng.random() < 0.5 else 0


class MockScorer(Scorer):
    """Scores ignore the transcript apart from quoting its first characters.

    A random 0.5–1.5 s pause stands in for model latency.
    """

    def __init__(
        self,
        parameters: tuple[EvaluationParameter, ...] = EVALUATION_PARAMETERS,
        rng: Optional[random.Random] = None,
        min_delay: float = MOCK_MIN_DELAY_SECONDS,
        max_delay: float = MOCK_MAX_DELAY_SECONDS,
    ) -> None:
        self._parameters = parameters
        self._rng = rng or random.Random()
        self._min_delay = min_delay
        self._max_delay = max_delay
        list(map(
            lambda p: logger.debug(MSG_DEFAULT_INPUT_TYPE, p.key, resolve_input_type(p).value),
            filter(lambda p: p.input_type is None, parameters),
        ))

    async def score(self, transcript: str) -> AnalysisResult:
        await asyncio.sleep(self._rng.uniform(self._min_delay, self._max_delay))

        scores = {p.key: draw_score(p, self._rng) for p in self._parameters}
        logger.info(MSG_SCORED, len(scores))

        preview = transcript[:TRANSCRIPT_PREVIEW_CHARS]
        return AnalysisResult(
            scores=scores,
            overall_feedback=MOCK_OVERALL_FEEDBACK % preview,
            observation=MOCK_OBSERVATION % preview,
        )
