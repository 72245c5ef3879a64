import logging
import httpx
from typing import Dict, Any

from ..core.config import OpenAISettings

logger = logging.getLogger(__name__)

FALLBACK_IDEAS_TEXT = "Sorry, I couldn't generate ideas."


class CompletionClient:
    """Sends prompts to the OpenAI completions endpoint."""

    def __init__(self, settings: OpenAISettings):
        self._settings = settings

    @property
    def completions_url(self) -> str:
        return f"{self._settings.api_url.rstrip('/')}/completions"

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            'model': self._settings.model,
            'prompt': prompt,
            'max_tokens': self._settings.max_tokens,
            'temperature': self._settings.temperature,
            'n': 1
        }

    async def create_completion(self, prompt: str) -> Dict[str, Any]:
        """
        Requests a single completion for the prompt.

        Returns:
            The decoded JSON body, successful or not. Callers look for
            ``choices``; error bodies simply have none.

        Raises:
            httpx.RequestError: On network failures.
            ValueError: If the body is not valid JSON.
        """
        headers = {
            'Content-Type': 'application/json',
            'Authorization': f"Bearer {self._settings.api_key.get_secret_value()}"
        }
        payload = self.build_payload(prompt)

        logger.info(f"Requesting completion from model {self._settings.model} (max_tokens={self._settings.max_tokens})")
        async with httpx.AsyncClient() as client:
            response = await client.post(
                self.completions_url,
                headers=headers,
                json=payload,
                timeout=self._settings.timeout
            )
        if response.status_code != 200:
            logger.warning(f"Completion request returned status {response.status_code}")
        return response.json()


async def generate_ideas(prompt: str, client: CompletionClient) -> str:
    """
    Submits the prompt and returns the first completion's text, trimmed.

    An upstream response without choices (including error bodies) yields
    FALLBACK_IDEAS_TEXT instead of an error.
    """
    completion = await client.create_completion(prompt)
    choices = completion.get("choices") if isinstance(completion, dict) else None
    if choices:
        return choices[0]["text"].strip()

    error = completion.get("error") if isinstance(completion, dict) else None
    logger.warning(f"Completion response had no choices, returning fallback text. Upstream error: {error}")
    return FALLBACK_IDEAS_TEXT
