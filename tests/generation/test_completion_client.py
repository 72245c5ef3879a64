# tests/generation/test_completion_client.py
import pytest
import httpx
from unittest.mock import AsyncMock, MagicMock

from idea_generator.generation.client import CompletionClient, FALLBACK_IDEAS_TEXT, generate_ideas
from tests.fixtures.sample_payloads import SAMPLE_COMPLETION, EMPTY_COMPLETION, ERROR_COMPLETION

PROMPT = "Give me five ideas."


@pytest.mark.asyncio
async def test_create_completion_request_shape(patch_httpx_client, openai_settings):
    mock_post, _ = patch_httpx_client("post", SAMPLE_COMPLETION)

    result = await CompletionClient(openai_settings).create_completion(PROMPT)

    assert result == SAMPLE_COMPLETION
    mock_post.assert_awaited_once_with(
        "https://api.openai.test/v1/completions",
        headers={
            'Content-Type': 'application/json',
            'Authorization': 'Bearer FAKE_OPENAI_KEY'
        },
        json={
            'model': 'text-davinci-003',
            'prompt': PROMPT,
            'max_tokens': 800,
            'temperature': 0.7,
            'n': 1
        },
        timeout=30.0
    )

def test_build_payload_uses_configured_model(openai_settings):
    settings = openai_settings.model_copy(update={"model": "gpt-3.5-turbo-instruct", "max_tokens": 500})

    payload = CompletionClient(settings).build_payload(PROMPT)

    assert payload["model"] == "gpt-3.5-turbo-instruct"
    assert payload["max_tokens"] == 500
    assert payload["n"] == 1

@pytest.mark.asyncio
async def test_create_completion_request_error_propagates(mocker, openai_settings):
    mock_client = MagicMock(spec=httpx.AsyncClient)
    mock_client.post = AsyncMock(side_effect=httpx.ConnectError("Connection refused"))
    mock_client.__aenter__.return_value = mock_client
    mocker.patch('httpx.AsyncClient', return_value=mock_client)

    with pytest.raises(httpx.RequestError):
        await CompletionClient(openai_settings).create_completion(PROMPT)

@pytest.mark.asyncio
async def test_generate_ideas_trims_first_choice(mock_completion_client):
    ideas = await generate_ideas(PROMPT, mock_completion_client)

    assert ideas == "Idea 1..."
    mock_completion_client.create_completion.assert_awaited_once_with(PROMPT)

@pytest.mark.asyncio
async def test_generate_ideas_uses_only_first_choice(mock_completion_client):
    mock_completion_client.create_completion.return_value = {
        "choices": [{"text": " first "}, {"text": " second "}]
    }

    assert await generate_ideas(PROMPT, mock_completion_client) == "first"

@pytest.mark.asyncio
@pytest.mark.parametrize("completion", [EMPTY_COMPLETION, ERROR_COMPLETION, {}])
async def test_generate_ideas_falls_back_without_choices(mock_completion_client, completion):
    mock_completion_client.create_completion.return_value = completion

    ideas = await generate_ideas(PROMPT, mock_completion_client)

    assert ideas == FALLBACK_IDEAS_TEXT == "Sorry, I couldn't generate ideas."
