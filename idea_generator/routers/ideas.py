from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse, PlainTextResponse

from ..core.config import typeform_settings, openai_settings
from ..generation.client import CompletionClient
from ..handler import IdeaRequestHandler
from ..survey.client import SurveyClient

router = APIRouter()


def get_survey_client() -> SurveyClient:
    return SurveyClient(typeform_settings)

def get_completion_client() -> CompletionClient:
    return CompletionClient(openai_settings)

def get_idea_handler(
    survey_client: SurveyClient = Depends(get_survey_client),
    completion_client: CompletionClient = Depends(get_completion_client)
) -> IdeaRequestHandler:
    return IdeaRequestHandler(survey_client, completion_client)


async def _generate_ideas(request: Request, handler: IdeaRequestHandler) -> Response:
    # The raw body is read here so that a missing or malformed body reaches
    # the handler's own validation instead of FastAPI's 422.
    raw_body = await request.body()
    result = await handler.handle(raw_body)
    if result.media_type == "application/json":
        return JSONResponse(status_code=result.status_code, content=result.body)
    return PlainTextResponse(status_code=result.status_code, content=result.body)


@router.post("/generate-ideas")
async def generate_ideas_endpoint(
    request: Request,
    handler: IdeaRequestHandler = Depends(get_idea_handler)
):
    """
    Generates five business ideas from a completed Typeform response.

    Expects a JSON body ``{"formId": ..., "responseId": ...}`` and returns
    ``{"ideas": "..."}``.
    """
    return await _generate_ideas(request, handler)


# Path used by the existing Netlify front-end.
@router.post("/.netlify/functions/generate-ideas", include_in_schema=False)
async def netlify_generate_ideas_endpoint(
    request: Request,
    handler: IdeaRequestHandler = Depends(get_idea_handler)
):
    return await _generate_ideas(request, handler)
