from typing import Any, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Survey questions are expected in this order; see SurveyAnswers.
SLOT_NAMES: Tuple[str, ...] = ("interests", "skills", "lifestyle", "goal", "tech", "constraints")

class IdeaRequest(BaseModel):
    form_id: str = Field(..., alias="formId", min_length=1)
    response_id: str = Field(..., alias="responseId", min_length=1)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

class IdeasResponse(BaseModel):
    ideas: str

class SurveyAnswers(BaseModel):
    """
    The six answers the prompt is built from, taken positionally from a
    Typeform response. Every slot is a string; a missing answer is "".
    """
    interests: str = ""
    skills: str = ""
    lifestyle: str = ""
    goal: str = ""
    tech: str = ""
    constraints: str = ""

    model_config = ConfigDict(frozen=True)

    @field_validator(*SLOT_NAMES, mode="before")
    @classmethod
    def coerce_to_display_string(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, float) and value.is_integer():
            # Typeform may send 5.0 for a whole-number answer; show it as "5"
            return str(int(value))
        return str(value)
