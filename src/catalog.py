"""Evaluation catalog — the fixed, weighted rubric every call is scored against."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InputType(str, Enum):
    PASS_FAIL = "PASS_FAIL"
    SCORE = "SCORE"


@dataclass(frozen=True)
class EvaluationParameter:
    key: str
    name: str
    weight: int
    description: str
    input_type: Optional[InputType] = None


EVALUATION_PARAMETERS: tuple[EvaluationParameter, ...] = (
    EvaluationParameter(
        key="greeting",
        name="Greeting",
        weight=5,
        description="Call opening within 5 seconds",
        input_type=InputType.PASS_FAIL,
    ),
    EvaluationParameter(
        key="collectionUrgency",
        name="Collection Urgency",
        weight=15,
        description="Call urgency, cross-questioning",
        input_type=InputType.SCORE,
    ),
    # Source rubric gives no input type for this entry.
    EvaluationParameter(
        key="rebatedCustomerOffer",
        name="Rebated Customer Offer",
        weight=15,
        description="Customer offer provided for collections",
    ),
    EvaluationParameter(
        key="callEtiquette",
        name="Call Etiquette",
        weight=10,
        description="Customer response pending",
        input_type=InputType.SCORE,
    ),
    EvaluationParameter(
        key="callDisclaimer",
        name="Call Disclaimer",
        weight=5,
        description="Take permission before recording",
        input_type=InputType.PASS_FAIL,
    ),
    EvaluationParameter(
        key="correctDisposition",
        name="Correct Disposition",
        weight=10,
        description="Choose correct category with remarks",
        input_type=InputType.PASS_FAIL,
    ),
    EvaluationParameter(
        key="callClosing",
        name="Call Closing",
        weight=5,
        description="Thank you for your proper support",
        input_type=InputType.PASS_FAIL,
    ),
    EvaluationParameter(
        key="fatalDataDisclosure",
        name="Fatal Data Disclosure",
        weight=15,
        description="Disclosure of info type",
        input_type=InputType.PASS_FAIL,
    ),
    EvaluationParameter(
        key="fatalTapeDisclaimer",
        name="Tape Disclaimer",
        weight=15,
        description="Disclaimer about recording",
        input_type=InputType.PASS_FAIL,
    ),
    EvaluationParameter(
        key="fatalToneLanguage",
        name="Tone & Language",
        weight=10,
        description="Abusive or threatening speech",
        input_type=InputType.PASS_FAIL,
    ),
)

# Product decision for entries that carry no input type: binary scoring.
DEFAULT_INPUT_TYPE = InputType.PASS_FAIL


def resolve_input_type(parameter: EvaluationParameter) -> InputType:
    return parameter.input_type or DEFAULT_INPUT_TYPE


def parameter_keys() -> tuple[str, ...]:
    return tuple(p.key for p in EVALUATION_PARAMETERS)
