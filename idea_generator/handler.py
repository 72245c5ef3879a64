# idea_generator/handler.py
# Validates an idea request, fetches the survey answers and generates ideas.

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Union

from .exceptions import IdeaGeneratorError, InputValidationError, SurveyResponseNotFoundError
from .generation.client import CompletionClient, generate_ideas
from .generation.prompt import build_prompt
from .schemas.ideas import IdeaRequest, IdeasResponse, SurveyAnswers
from .survey.client import SurveyClient
from .survey.extractor import extract_survey_answers

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandlerResponse:
    status_code: int
    body: Union[str, Dict[str, Any]]
    media_type: str = "text/plain"


def parse_idea_request(raw_body: Union[str, bytes, None]) -> IdeaRequest:
    """
    Parses the inbound body into an IdeaRequest.

    A body that is empty, not JSON, or not a JSON object counts as ``{}``.

    Raises:
        InputValidationError: If formId or responseId is missing or empty.
    """
    try:
        payload = json.loads(raw_body or "{}")
    except ValueError:
        logger.warning("Request body is not valid JSON, treating it as empty.")
        payload = {}
    if not isinstance(payload, dict):
        payload = {}

    form_id = payload.get("formId")
    response_id = payload.get("responseId")
    if not form_id or not response_id:
        raise InputValidationError("Missing formId or responseId")
    return IdeaRequest(formId=str(form_id), responseId=str(response_id))


class IdeaRequestHandler:
    """
    Runs one idea request end to end: validate, fetch survey, generate.

    Both clients carry their own immutable settings, so the handler holds
    no process-wide state and separate invocations share nothing mutable.
    """

    def __init__(self, survey_client: SurveyClient, completion_client: CompletionClient):
        self.survey_client = survey_client
        self.completion_client = completion_client

    async def fetch_survey_answers(self, request: IdeaRequest) -> SurveyAnswers:
        data = await self.survey_client.fetch_responses(request.form_id, request.response_id)
        items = data.get("items") if isinstance(data, dict) else None
        if not items:
            raise SurveyResponseNotFoundError("No Typeform response found for ID.")

        answers = items[0].get("answers")
        logger.info(f"Typeform response {request.response_id} has {len(answers or [])} answers")
        return extract_survey_answers(answers)

    async def generate(self, request: IdeaRequest) -> IdeasResponse:
        survey_answers = await self.fetch_survey_answers(request)
        prompt = build_prompt(survey_answers)
        ideas = await generate_ideas(prompt, self.completion_client)
        return IdeasResponse(ideas=ideas)

    async def handle(self, raw_body: Union[str, bytes, None]) -> HandlerResponse:
        """
        Handles a raw request body and returns the status and body to send.

        Validation and not-found errors become 400 and 404 with a short
        plain-text body. Any other exception becomes a 500 whose body starts
        with "Server Error: ".
        """
        try:
            request = parse_idea_request(raw_body)
            logger.info(f"Generating ideas for form {request.form_id}, response {request.response_id}")
            result = await self.generate(request)
            return HandlerResponse(status_code=200, body=result.model_dump(), media_type="application/json")
        except IdeaGeneratorError as e:
            logger.info(f"Idea request rejected with {e.status_code}: {e}")
            return HandlerResponse(status_code=e.status_code, body=str(e))
        except Exception as e:
            logger.error(f"Error in generate-ideas handler: {e}", exc_info=True)
            return HandlerResponse(status_code=500, body=f"Server Error: {e}")
