from .client import SurveyClient
from .extractor import get_answer_value, extract_survey_answers

__all__ = [
    "SurveyClient",
    "get_answer_value",
    "extract_survey_answers",
]
