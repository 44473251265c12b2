"""MockScorer and the evaluation catalog it scores against."""
import random

import pytest

from src.catalog import (
    DEFAULT_INPUT_TYPE,
    EVALUATION_PARAMETERS,
    EvaluationParameter,
    InputType,
    parameter_keys,
    resolve_input_type,
)
from src.scoring.mock import MockScorer, draw_score
from src.scoring.scorer import AnalysisResult, Scorer


def make_scorer(seed: int = 7) -> MockScorer:
    return MockScorer(rng=random.Random(seed), min_delay=0, max_delay=0)


# ── catalog ───────────────────────────────────────────────────────────────────


def test_catalog_has_ten_unique_keys():
    keys = parameter_keys()

    assert len(keys) == 10
    assert len(set(keys)) == 10


def test_catalog_entries_are_immutable():
    with pytest.raises(Exception):
        EVALUATION_PARAMETERS[0].weight = 99


def test_missing_input_type_resolves_to_default():
    untyped = [p for p in EVALUATION_PARAMETERS if p.input_type is None]

    assert [p.key for p in untyped] == ["rebatedCustomerOffer"]
    assert resolve_input_type(untyped[0]) is DEFAULT_INPUT_TYPE is InputType.PASS_FAIL


def test_explicit_input_type_is_kept():
    param = EvaluationParameter("k", "K", 10, "d", InputType.SCORE)

    assert resolve_input_type(param) is InputType.SCORE


# ── draw_score ────────────────────────────────────────────────────────────────


@pytest.mark.parametrize("weight", [0, 1, 5, 10, 15])
def test_score_type_stays_within_weight(weight):
    param = EvaluationParameter("k", "K", weight, "d", InputType.SCORE)
    rng = random.Random(1)

    draws = {draw_score(param, rng) for _ in range(500)}

    assert all(0 <= s <= weight for s in draws)


def test_score_type_reaches_both_ends():
    param = EvaluationParameter("k", "K", 5, "d", InputType.SCORE)
    rng = random.Random(3)

    draws = {draw_score(param, rng) for _ in range(500)}

    assert draws == {0, 1, 2, 3, 4, 5}


@pytest.mark.parametrize("input_type", [InputType.PASS_FAIL, None])
def test_pass_fail_is_all_or_nothing(input_type):
    param = EvaluationParameter("k", "K", 15, "d", input_type)
    rng = random.Random(5)

    draws = {draw_score(param, rng) for _ in range(200)}

    assert draws == {0, 15}


# ── MockScorer ────────────────────────────────────────────────────────────────


def test_mock_scorer_implements_abc():
    assert issubclass(MockScorer, Scorer)


async def test_score_covers_every_catalog_key():
    result = await make_scorer().score("Hello, thanks for calling.")

    assert set(result.scores) == set(parameter_keys())


async def test_score_respects_weights_and_pass_fail():
    scorer = make_scorer()
    weights = {p.key: p for p in EVALUATION_PARAMETERS}

    for _ in range(20):
        result = await scorer.score("transcript")
        for key, value in result.scores.items():
            param = weights[key]
            assert 0 <= value <= param.weight
            if resolve_input_type(param) is InputType.PASS_FAIL:
                assert value in (0, param.weight)


async def test_narratives_quote_first_hundred_chars():
    transcript = "a" * 100 + "TAIL"

    result = await make_scorer().score(transcript)

    assert '"' + "a" * 100 + '..."' in result.overall_feedback
    assert '"' + "a" * 100 + '..."' in result.observation
    assert "TAIL" not in result.overall_feedback
    assert "TAIL" not in result.observation


async def test_narratives_quote_short_transcript_verbatim():
    result = await make_scorer().score("Short call.")

    assert '"Short call...."' in result.overall_feedback
    assert '"Short call...."' in result.observation


async def test_score_sleeps_within_delay_bounds(monkeypatch):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setattr("src.scoring.mock.asyncio.sleep", fake_sleep)
    scorer = MockScorer(rng=random.Random(11))

    await scorer.score("x")

    assert len(delays) == 1
    assert 0.5 <= delays[0] <= 1.5


def test_analysis_result_serializes_camel_case():
    result = AnalysisResult(scores={"greeting": 5}, overall_feedback="ok", observation="seen")

    assert result.to_dict() == {
        "scores": {"greeting": 5},
        "overallFeedback": "ok",
        "observation": "seen",
    }
