import logging
import httpx
from typing import Dict, Any
from urllib.parse import quote

from ..core.config import TypeformSettings

logger = logging.getLogger(__name__)


class SurveyClient:
    """Reads form responses from the Typeform Responses API."""

    def __init__(self, settings: TypeformSettings):
        self._settings = settings

    def responses_url(self, form_id: str) -> str:
        # Escaped so a form id cannot add a query string or fragment.
        return f"{self._settings.api_url.rstrip('/')}/forms/{quote(form_id, safe='')}/responses"

    async def fetch_responses(self, form_id: str, response_id: str) -> Dict[str, Any]:
        """
        Fetches the responses of a form, filtered to a single response ID.

        Args:
            form_id: The Typeform form ID.
            response_id: The response (submission) ID to include.

        Returns:
            The decoded JSON body. Matching responses are under ``items``.

        Raises:
            httpx.RequestError: On network failures.
            ValueError: If the body is not valid JSON.
        """
        url = self.responses_url(form_id)
        headers = {
            'Authorization': f"Bearer {self._settings.api_token.get_secret_value()}",
            'Accept': 'application/json'
        }
        params = {'included_response_ids': response_id}

        logger.info(f"Fetching Typeform response {response_id} for form {form_id}")
        async with httpx.AsyncClient() as client:
            response = await client.get(
                url,
                headers=headers,
                params=params,
                timeout=self._settings.timeout
            )
        # Error bodies carry no items and are reported as not found by the caller.
        if response.status_code != 200:
            logger.warning(f"Typeform returned status {response.status_code} for form {form_id}")
        return response.json()
