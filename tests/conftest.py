import pytest
import httpx
from unittest.mock import AsyncMock, MagicMock
from pydantic import SecretStr

from idea_generator.core.config import TypeformSettings, OpenAISettings
from idea_generator.generation.client import CompletionClient
from idea_generator.survey.client import SurveyClient
from tests.fixtures.sample_payloads import SAMPLE_TYPEFORM_RESPONSE, SAMPLE_COMPLETION


@pytest.fixture
def typeform_settings():
    return TypeformSettings(api_token=SecretStr("FAKE_TYPEFORM_TOKEN"), api_url="https://api.typeform.test")

@pytest.fixture
def openai_settings():
    return OpenAISettings(api_key=SecretStr("FAKE_OPENAI_KEY"), api_url="https://api.openai.test/v1")

@pytest.fixture
def mock_survey_client():
    """A SurveyClient stand-in returning SAMPLE_TYPEFORM_RESPONSE."""
    client = MagicMock(spec=SurveyClient)
    client.fetch_responses = AsyncMock(return_value=SAMPLE_TYPEFORM_RESPONSE)
    return client

@pytest.fixture
def mock_completion_client():
    """A CompletionClient stand-in returning SAMPLE_COMPLETION."""
    client = MagicMock(spec=CompletionClient)
    client.create_completion = AsyncMock(return_value=SAMPLE_COMPLETION)
    return client

@pytest.fixture
def patch_httpx_client(mocker):
    """
    Returns a helper that patches httpx.AsyncClient so that ``method``
    ("get" or "post") resolves to a response with the given JSON body.
    """
    def _patch(method: str, response_json, status_code: int = 200):
        mock_response = MagicMock(spec=httpx.Response)
        mock_response.status_code = status_code
        mock_response.json.return_value = response_json

        mock_call = AsyncMock(return_value=mock_response)
        mock_client = MagicMock(spec=httpx.AsyncClient)
        setattr(mock_client, method, mock_call)
        mock_client.__aenter__.return_value = mock_client # For async context manager

        mocker.patch('httpx.AsyncClient', return_value=mock_client)
        return mock_call, mock_response

    return _patch
