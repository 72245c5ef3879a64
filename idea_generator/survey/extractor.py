# idea_generator/survey/extractor.py
# Turns a Typeform response's answer list into the six prompt slots.

import logging
from typing import Any, Dict, List, Optional, Union

from ..schemas.ideas import SLOT_NAMES, SurveyAnswers

logger = logging.getLogger(__name__)

AnswerValue = Union[str, int, float]


def get_answer_value(answer: Dict[str, Any]) -> AnswerValue:
    """
    Extracts the display value of a single Typeform answer based on its type.

    Args:
        answer: One entry of a response's ``answers`` array.

    Returns:
        The text, the selected choice label, the number, "Yes"/"No" for a
        boolean, or "" for any answer type not handled here and for
        malformed answers.
    """
    if not isinstance(answer, dict):
        return ""
    answer_type = answer.get("type")
    if answer_type == "text":
        return answer.get("text") or ""
    elif answer_type == "choice":
        choice = answer.get("choice")
        return (choice.get("label") or "") if isinstance(choice, dict) else ""
    elif answer_type == "number":
        number = answer.get("number")
        return "" if number is None else number
    elif answer_type == "boolean":
        return "Yes" if answer.get("boolean") else "No"
    return ""


def extract_survey_answers(answers: Optional[List[Dict[str, Any]]]) -> SurveyAnswers:
    """
    Maps answers onto the six slots by position: answer 0 is interests,
    answer 1 is skills, and so on. Extra answers are ignored, missing ones
    become "".

    Question identity is not checked, so reordering the questions in the
    Typeform form shifts values into the wrong slots.
    """
    answers = answers or []
    if len(answers) < len(SLOT_NAMES):
        logger.warning(f"Survey response has {len(answers)} answers, expected {len(SLOT_NAMES)}. Missing slots left empty.")

    values = {}
    for index, slot in enumerate(SLOT_NAMES):
        values[slot] = get_answer_value(answers[index]) if index < len(answers) and answers[index] else ""
    return SurveyAnswers(**values)
