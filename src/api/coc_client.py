# src/api/coc_client.py
import logging
from typing import Optional

import requests

from .config import Settings
from .outcomes import Failure, FailureKind, Success, UpstreamResult

logger = logging.getLogger(__name__)

FORBIDDEN_MESSAGE = (
    "API access forbidden. This usually means your IP address is not "
    "whitelisted in the API key settings."
)
NOT_FOUND_MESSAGE = "Player not found. Please check if the tag is correct."
RATE_LIMITED_MESSAGE = "Too many requests. Please try again later."
NETWORK_ERROR_MESSAGE = "Failed to fetch player data"
MALFORMED_MESSAGE = "API Error: malformed response from upstream"


class CocClient:
    """
    Thin client for the Clash of Clans API.

    One GET per call, no retries and no explicit timeout. Every outcome,
    including transport errors, comes back as a Success or Failure value.
    """

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session if session is not None else requests.Session()

    def _get_headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.settings.bearer_token}",
            "Accept": "application/json",
        }

    def get_player(self, encoded_tag: str) -> UpstreamResult:
        """
        GET /players/{encoded_tag}

        Args:
            encoded_tag: Tag already normalized and percent-encoded
                (see players.normalize_player_tag).
        """
        logger.info("Formatted tag: %s", encoded_tag)
        url = f"{self.settings.base_url}/players/{encoded_tag}"
        logger.info("API URL: %s", url)

        try:
            response = self.session.get(url, headers=self._get_headers())
        except requests.RequestException as exc:
            logger.error("Error fetching player data: %s", exc)
            return Failure(
                FailureKind.NETWORK_ERROR,
                NETWORK_ERROR_MESSAGE,
                details=str(exc) or exc.__class__.__name__,
            )

        return classify_response(response)


def classify_response(response: requests.Response) -> UpstreamResult:
    status = response.status_code
    try:
        data = response.json()
    except ValueError:
        logger.warning("Upstream returned non-JSON body (status %s)", status)
        return Failure(FailureKind.UPSTREAM_ERROR, MALFORMED_MESSAGE, status=status)

    if 200 <= status < 300:
        return Success(data)

    if status == 403:
        return Failure(FailureKind.FORBIDDEN, FORBIDDEN_MESSAGE, details=data, status=status)
    if status == 404:
        return Failure(FailureKind.NOT_FOUND, NOT_FOUND_MESSAGE, details=data, status=status)
    if status == 429:
        return Failure(FailureKind.RATE_LIMITED, RATE_LIMITED_MESSAGE, details=data, status=status)

    upstream_message = data.get("message") if isinstance(data, dict) else None
    return Failure(
        FailureKind.UPSTREAM_ERROR,
        f"API Error: {upstream_message or 'Unknown error'}",
        details=data,
        status=status,
    )
